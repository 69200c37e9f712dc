"""Employee CRUD over the Cosmos DB employees container."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from app.core.errors import Conflict, NotFound
from app.db.cosmos import Database, find_one, new_id
from app.models.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found"

_PUBLIC_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "position",
    "salary",
    "date_of_joining",
    "department",
)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _to_document(values: dict[str, Any]) -> dict[str, Any]:
    doc = dict(values)
    if isinstance(doc.get("date_of_joining"), datetime):
        doc["date_of_joining"] = doc["date_of_joining"].isoformat()
    return doc


class EmployeeService:
    def __init__(self, database: Database) -> None:
        self.container: Any = database.employees

    async def list_employees(self) -> list[EmployeeOut]:
        results: list[EmployeeOut] = []
        async for item in self.container.query_items(query="SELECT * FROM c"):
            results.append(self._transform_employee(item))
        return results

    async def create_employee(self, data: EmployeeCreate) -> str:
        existing = await find_one(
            self.container,
            "SELECT * FROM c WHERE c.email = @email",
            [{"name": "@email", "value": data.email}],
        )
        if existing:
            raise Conflict("Employee already exists with this email")

        now = _utcnow()
        employee_id = new_id()
        doc = _to_document(data.model_dump())
        doc.update({"id": employee_id, "created_at": now, "updated_at": now})
        await self.container.create_item(body=doc)
        logger.info("Employee created id=%s", employee_id)
        return employee_id

    async def get_employee(self, eid: str) -> EmployeeOut:
        return self._transform_employee(await self._read(eid))

    async def update_employee(self, eid: str, changes: EmployeeUpdate) -> None:
        await self._read(eid)

        values = _to_document(changes.model_dump(exclude_unset=True))
        values["updated_at"] = _utcnow()
        operations = [{"op": "set", "path": f"/{key}", "value": value} for key, value in values.items()]
        try:
            await self.container.patch_item(item=eid, partition_key=eid, patch_operations=operations)
        except CosmosResourceNotFoundError as err:
            raise NotFound(EMPLOYEE_NOT_FOUND) from err
        logger.info("Employee updated id=%s fields=%s", eid, sorted(values))

    async def delete_employee(self, eid: str) -> None:
        await self._read(eid)
        try:
            await self.container.delete_item(item=eid, partition_key=eid)
        except CosmosResourceNotFoundError as err:
            raise NotFound(EMPLOYEE_NOT_FOUND) from err
        logger.info("Employee deleted id=%s", eid)

    async def _read(self, eid: str) -> dict[str, Any]:
        try:
            return await self.container.read_item(item=eid, partition_key=eid)
        except CosmosResourceNotFoundError as err:
            raise NotFound(EMPLOYEE_NOT_FOUND) from err

    def _transform_employee(self, raw: dict[str, Any]) -> EmployeeOut:
        data = {key: raw.get(key) for key in _PUBLIC_FIELDS}
        return EmployeeOut(employee_id=str(raw["id"]), **data)
