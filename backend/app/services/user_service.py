"""Account signup and login against the users container."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from app.core.errors import Conflict, Unauthorized
from app.core.security import hash_password_async, verify_password_async
from app.db.cosmos import Database, find_one, new_id
from app.models.user import LoginRequest, SignupRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Username and password"
PLACEHOLDER_TOKEN = "Optional implementation"


class UserService:
    def __init__(self, database: Database) -> None:
        self.container: Any = database.users

    async def signup(self, request: SignupRequest) -> str:
        existing = await find_one(
            self.container,
            "SELECT * FROM c WHERE c.email = @email OR c.username = @username",
            [
                {"name": "@email", "value": request.email},
                {"name": "@username", "value": request.username},
            ],
        )
        if existing:
            raise Conflict("User already exists with this email or username")

        now = datetime.now(timezone.utc).isoformat()
        user_id = new_id()
        await self.container.create_item(
            body={
                "id": user_id,
                "username": request.username,
                "email": request.email,
                "password": await hash_password_async(request.password),
                "created_at": now,
                "updated_at": now,
            }
        )
        logger.info("User created id=%s", user_id)
        return user_id

    async def login(self, request: LoginRequest) -> str:
        """Return the (placeholder) token for a valid email-or-username and password."""
        user = await find_one(
            self.container,
            "SELECT * FROM c WHERE c.email = @login OR c.username = @login",
            [{"name": "@login", "value": request.email}],
        )
        hashed = user.get("password") if user else None
        if not await verify_password_async(request.password, hashed):
            raise Unauthorized(INVALID_CREDENTIALS)
        return PLACEHOLDER_TOKEN
