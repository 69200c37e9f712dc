"""Request and response bodies for the user endpoints."""

from __future__ import annotations

from pydantic import BaseModel

from app.models.common import MessageResponse


class SignupRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    # Matched against both the stored email and the stored username.
    email: str
    password: str


class SignupResponse(MessageResponse):
    user_id: str


class LoginResponse(MessageResponse):
    jwt_token: str
