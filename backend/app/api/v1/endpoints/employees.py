from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from app.core.dependencies import get_employee_service
from app.core.pipeline import Pipeline, RequestContext, handle, validate
from app.core.validation import (
    is_email,
    is_iso8601,
    is_non_empty,
    is_numeric,
    is_object_id,
    optional,
    required,
)
from app.models.common import MessageResponse
from app.models.employee import EmployeeCreate, EmployeeCreated, EmployeeOut, EmployeeUpdate
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/emp/employees", tags=["employees"])

EMPLOYEE_ID_RULES = [
    required("eid", is_object_id, "Invalid employee ID"),
]

EMPLOYEE_CREATE_RULES = [
    required("first_name", is_non_empty, "First name is required"),
    required("last_name", is_non_empty, "Last name is required"),
    required("email", is_email, "Valid email is required"),
    required("position", is_non_empty, "Position is required"),
    required("salary", is_numeric, "Salary must be a number"),
    required("date_of_joining", is_iso8601, "Valid date is required"),
    required("department", is_non_empty, "Department is required"),
]

EMPLOYEE_UPDATE_RULES = [
    optional("first_name", is_non_empty, "First name cannot be empty"),
    optional("last_name", is_non_empty, "Last name cannot be empty"),
    optional("email", is_email, "Valid email is required"),
    optional("position", is_non_empty, "Position cannot be empty"),
    optional("salary", is_numeric, "Salary must be a number"),
    optional("date_of_joining", is_iso8601, "Valid date is required"),
    optional("department", is_non_empty, "Department cannot be empty"),
]


@router.get("", response_model=list[EmployeeOut])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    pipeline = Pipeline("list employees", handle(lambda ctx: service.list_employees()))
    return await pipeline.run(RequestContext())


@router.post("", response_model=EmployeeCreated, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: dict[str, Any] | None = Body(None),
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    pipeline = Pipeline(
        "create employee",
        validate(EMPLOYEE_CREATE_RULES),
        handle(lambda ctx: service.create_employee(EmployeeCreate.model_validate(ctx.body))),
    )
    employee_id = await pipeline.run(RequestContext(body=body or {}))
    return EmployeeCreated(message="Employee created successfully.", employee_id=employee_id)


@router.get("/{eid}", response_model=EmployeeOut)
async def get_employee(
    eid: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    pipeline = Pipeline(
        "get employee",
        validate(EMPLOYEE_ID_RULES, source="path"),
        handle(lambda ctx: service.get_employee(ctx.path["eid"])),
    )
    return await pipeline.run(RequestContext(path={"eid": eid}))


@router.put("/{eid}", response_model=MessageResponse)
async def update_employee(
    eid: str,
    body: dict[str, Any] | None = Body(None),
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    pipeline = Pipeline(
        "update employee",
        validate(EMPLOYEE_ID_RULES, source="path"),
        validate(EMPLOYEE_UPDATE_RULES),
        handle(lambda ctx: service.update_employee(ctx.path["eid"], EmployeeUpdate.model_validate(ctx.body))),
    )
    await pipeline.run(RequestContext(body=body or {}, path={"eid": eid}))
    return MessageResponse(message="Employee details updated successfully.")


@router.delete("", response_model=MessageResponse)
async def delete_employee(
    eid: str | None = Query(None),
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    query = {"eid": eid} if eid is not None else {}
    pipeline = Pipeline(
        "delete employee",
        validate(EMPLOYEE_ID_RULES, source="query"),
        handle(lambda ctx: service.delete_employee(ctx.query["eid"])),
    )
    await pipeline.run(RequestContext(query=query))
    return MessageResponse(message="Employee deleted successfully.")
