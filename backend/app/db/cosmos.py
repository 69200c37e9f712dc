"""Cosmos DB handle shared by every request."""

from __future__ import annotations

import logging
import secrets
from typing import Any

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient

from app.core.config import Settings

logger = logging.getLogger(__name__)

_PARTITION_KEY = PartitionKey(path="/id")


def new_id() -> str:
    """24 hex characters, the same shape as a Mongo ObjectId."""
    return secrets.token_hex(12)


class Database:
    def __init__(self, users: Any = None, employees: Any = None) -> None:
        self.client: CosmosClient | None = None
        self.users: Any = users
        self.employees: Any = employees

    @property
    def initialized(self) -> bool:
        return self.users is not None and self.employees is not None

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY

        if not endpoint or not key:
            logger.warning("Cosmos DB credentials missing, database not initialized")
            return

        self.client = CosmosClient(endpoint, credential=key)
        db = await self.client.create_database_if_not_exists(id=settings.COSMOS_DB_DATABASE)
        self.users = await db.create_container_if_not_exists(
            id=settings.COSMOS_DB_USERS_CONTAINER,
            partition_key=_PARTITION_KEY,
        )
        self.employees = await db.create_container_if_not_exists(
            id=settings.COSMOS_DB_EMPLOYEES_CONTAINER,
            partition_key=_PARTITION_KEY,
        )
        logger.info("Connected to Cosmos DB database=%s", settings.COSMOS_DB_DATABASE)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
        self.users = None
        self.employees = None

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            async for _ in self.employees.query_items(query="SELECT VALUE COUNT(1) FROM c"):
                return True
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False


async def find_one(container: Any, query: str, parameters: list[dict[str, Any]]) -> dict[str, Any] | None:
    async for item in container.query_items(query=query, parameters=parameters):
        return item
    return None
