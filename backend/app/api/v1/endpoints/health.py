from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_database_handle
from app.db.cosmos import Database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(database: Database = Depends(get_database_handle)):  # noqa: B008
    services: dict[str, str] = {}

    if database.initialized:
        ok = await database.check_connection()
        services["cosmos_db"] = "ok" if ok else "error"
    else:
        services["cosmos_db"] = "not_configured"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
