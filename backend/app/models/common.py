from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    status: bool = False
    message: str


class MessageResponse(BaseModel):
    message: str
