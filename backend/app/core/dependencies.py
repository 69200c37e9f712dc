from __future__ import annotations

import logging

from fastapi import Depends, Request

from app.core.errors import InternalError
from app.db.cosmos import Database
from app.services.employee_service import EmployeeService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def get_database_handle(request: Request) -> Database:
    return request.app.state.database


def get_database(database: Database = Depends(get_database_handle)) -> Database:  # noqa: B008
    if not database.initialized:
        logger.error("Request received but the database is not initialized")
        raise InternalError()
    return database


def get_user_service(database: Database = Depends(get_database)) -> UserService:  # noqa: B008
    return UserService(database)


def get_employee_service(database: Database = Depends(get_database)) -> EmployeeService:  # noqa: B008
    return EmployeeService(database)
