"""Password hashing with bcrypt via passlib."""

from __future__ import annotations

import logging
from functools import lru_cache

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from app.core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # Unknown or malformed stored hash.
        logger.warning("Stored password hash could not be parsed")
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


async def warm_dummy_hash() -> None:
    await run_in_threadpool(_dummy_hash)


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, hashed: str | None) -> bool:
    """Verify off the event loop.

    A missing hash is still checked against a throwaway hash so unknown users
    take as long to reject as wrong passwords.
    """
    if hashed is None:
        await run_in_threadpool(lambda: verify_password(password, _dummy_hash()))
        return False
    return await run_in_threadpool(verify_password, password, hashed)
