from __future__ import annotations

import copy
import re
from typing import Any

import pytest
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from starlette.testclient import TestClient

from app.core.dependencies import get_database_handle
from app.db.cosmos import Database
from app.main import app

_CONDITION_RE = re.compile(r"c\.(\w+)\s*=\s*(@\w+)")


class FakeContainer:
    """In-memory stand-in for an ``azure.cosmos.aio`` container proxy.

    ``query_items`` understands ``SELECT * FROM c`` optionally followed by
    ``c.field = @param`` conditions joined with OR.
    """

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}

    async def create_item(self, body: dict[str, Any], **kwargs: Any) -> dict[str, Any]:
        self.items[body["id"]] = copy.deepcopy(body)
        return copy.deepcopy(body)

    async def read_item(self, item: str, partition_key: Any, **kwargs: Any) -> dict[str, Any]:
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Entity with the specified id does not exist")
        return copy.deepcopy(self.items[item])

    async def patch_item(
        self, item: str, partition_key: Any, patch_operations: list[dict[str, Any]], **kwargs: Any
    ) -> dict[str, Any]:
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Entity with the specified id does not exist")
        for op in patch_operations:
            assert op["op"] == "set"
            self.items[item][op["path"].lstrip("/")] = op["value"]
        return copy.deepcopy(self.items[item])

    async def delete_item(self, item: str, partition_key: Any, **kwargs: Any) -> None:
        if item not in self.items:
            raise CosmosResourceNotFoundError(status_code=404, message="Entity with the specified id does not exist")
        del self.items[item]

    def query_items(self, query: str, parameters: list[dict[str, Any]] | None = None, **kwargs: Any):
        values = {p["name"]: p["value"] for p in parameters or []}
        conditions = _CONDITION_RE.findall(query)

        async def _iterate():
            for doc in list(self.items.values()):
                if not conditions or any(doc.get(f) == values[p] for f, p in conditions):
                    yield copy.deepcopy(doc)

        return _iterate()


@pytest.fixture
def database():
    return Database(users=FakeContainer(), employees=FakeContainer())


@pytest.fixture
def client(database):
    app.dependency_overrides[get_database_handle] = lambda: database
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def employee_payload():
    return {
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.com",
        "position": "Eng",
        "salary": "50000",
        "date_of_joining": "2023-01-01",
        "department": "Tech",
    }
