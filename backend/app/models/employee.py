"""Employee models for the Cosmos DB employee container."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

from app.core.validation import parse_iso_datetime
from app.models.common import MessageResponse


def _coerce_salary(value: Any) -> Any:
    if isinstance(value, str):
        number = float(value)
        return int(number) if number.is_integer() else number
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _coerce_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_iso_datetime(value)
    return value


class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    position: str
    salary: int | float
    date_of_joining: datetime
    department: str

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, value: Any) -> Any:
        return _coerce_salary(value)

    @field_validator("date_of_joining", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        return _coerce_date(value)


class EmployeeUpdate(BaseModel):
    """Partial update; only keys present in the request are applied."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    position: str | None = None
    salary: int | float | None = None
    date_of_joining: datetime | None = None
    department: str | None = None

    @field_validator("salary", mode="before")
    @classmethod
    def coerce_salary(cls, value: Any) -> Any:
        return _coerce_salary(value)

    @field_validator("date_of_joining", mode="before")
    @classmethod
    def coerce_date(cls, value: Any) -> Any:
        return _coerce_date(value)


class EmployeeOut(BaseModel):
    employee_id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    position: str | None = None
    salary: int | float | None = None
    date_of_joining: datetime | None = None
    department: str | None = None


class EmployeeCreated(MessageResponse):
    employee_id: str
