"""Declarative field rules checked before any database access.

Each endpoint declares an ordered list of :class:`FieldRule`. :func:`first_error`
walks the list and returns the message of the first rule that fails, or
``None`` when the input is acceptable.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from email_validator import EmailNotValidError, validate_email

_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*\.)?[0-9]+$")
_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

Check = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldRule:
    field: str
    check: Check
    message: str
    optional: bool = False


def required(field: str, check: Check, message: str) -> FieldRule:
    return FieldRule(field, check, message)


def optional(field: str, check: Check, message: str) -> FieldRule:
    """Rule applied only when ``field`` is present in the input."""
    return FieldRule(field, check, message, optional=True)


def first_error(data: Mapping[str, Any], rules: Sequence[FieldRule]) -> str | None:
    for rule in rules:
        if rule.optional and rule.field not in data:
            continue
        if not rule.check(data.get(rule.field)):
            return rule.message
    return None


def is_non_empty(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return True
    return isinstance(value, str) and bool(_NUMERIC_RE.match(value))


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_iso8601(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse_iso_datetime(value)
    except ValueError:
        return False
    return True


def min_length(length: int) -> Check:
    def _check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= length

    return _check


def is_object_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))
