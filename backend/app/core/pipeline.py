"""Ordered request-processing stages with short-circuit on the first failure."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from app.core.errors import ApiError, InternalError, ValidationFailed
from app.core.validation import FieldRule, first_error

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    body: dict[str, Any] = field(default_factory=dict)
    path: dict[str, Any] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    result: Any = None


Stage = Callable[[RequestContext], Awaitable[None]]


def validate(rules: Sequence[FieldRule], source: str = "body") -> Stage:
    async def _validate(ctx: RequestContext) -> None:
        message = first_error(getattr(ctx, source), rules)
        if message is not None:
            raise ValidationFailed(message)

    return _validate


def handle(handler: Callable[[RequestContext], Awaitable[Any]]) -> Stage:
    async def _handle(ctx: RequestContext) -> None:
        ctx.result = await handler(ctx)

    return _handle


class Pipeline:
    """Runs stages in order.

    ``ApiError`` raised by any stage propagates unchanged; anything else is
    logged and surfaced as a generic :class:`InternalError`.
    """

    def __init__(self, name: str, *stages: Stage) -> None:
        self.name = name
        self.stages: tuple[Stage, ...] = stages

    async def run(self, ctx: RequestContext) -> Any:
        try:
            for stage in self.stages:
                await stage(ctx)
        except ApiError:
            raise
        except Exception as err:
            logger.exception("%s failed", self.name)
            raise InternalError() from err
        return ctx.result
