from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.core.dependencies import get_user_service
from app.core.pipeline import Pipeline, RequestContext, handle, validate
from app.core.validation import is_email, is_non_empty, min_length, required
from app.models.user import LoginRequest, LoginResponse, SignupRequest, SignupResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])

SIGNUP_RULES = [
    required("username", is_non_empty, "Username is required"),
    required("email", is_email, "Valid email is required"),
    required("password", min_length(6), "Password must be at least 6 characters"),
]

LOGIN_RULES = [
    required("email", is_email, "Valid email is required"),
    required("password", is_non_empty, "Password is required"),
]


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    body: dict[str, Any] | None = Body(None),
    service: UserService = Depends(get_user_service),  # noqa: B008
):
    pipeline = Pipeline(
        "signup",
        validate(SIGNUP_RULES),
        handle(lambda ctx: service.signup(SignupRequest.model_validate(ctx.body))),
    )
    user_id = await pipeline.run(RequestContext(body=body or {}))
    return SignupResponse(message="User created successfully.", user_id=user_id)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: dict[str, Any] | None = Body(None),
    service: UserService = Depends(get_user_service),  # noqa: B008
):
    pipeline = Pipeline(
        "login",
        validate(LOGIN_RULES),
        handle(lambda ctx: service.login(LoginRequest.model_validate(ctx.body))),
    )
    token = await pipeline.run(RequestContext(body=body or {}))
    return LoginResponse(message="Login successful.", jwt_token=token)
