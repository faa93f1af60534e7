"""Argument-to-variable translation helpers shared by business tools."""

import math
from datetime import datetime, timedelta, timezone
from typing import Any

from domain.errors import ValidationError

DEFAULT_WINDOW_DAYS = 7


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_unix(value: datetime) -> int:
    """Datetime -> integer Unix seconds (UTC, floored)."""
    return math.floor(ensure_utc(value).timestamp())


def from_unix(seconds: int | float) -> datetime:
    """Unix seconds -> aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def iso(value: datetime) -> str:
    """Render an instant as ISO-8601 UTC with a Z suffix."""
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


def resolve_window(
    start: datetime | None,
    end: datetime | None,
    now: datetime,
    days: int = DEFAULT_WINDOW_DAYS,
    start_field: str = "start",
    end_field: str = "end",
) -> tuple[datetime, datetime]:
    """
    Apply the temporal defaulting rule.

    Missing start -> now; missing end -> start + days. `now` must be taken at
    call time by the caller, never at registration time.

    Raises:
        ValidationError: If end precedes start
    """
    start = ensure_utc(start) if start is not None else ensure_utc(now)
    end = ensure_utc(end) if end is not None else start + timedelta(days=days)
    if end < start:
        raise ValidationError(
            f"{end_field} must not be earlier than {start_field}",
            field=end_field,
            constraint=f">= {start_field}",
        )
    return start, end


def as_id_list(value: str | list[str] | None) -> list[str] | None:
    """Normalize a singular identifier into the list shape list-typed fields expect."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return list(value) or None
    return [value]


def page_from_offset(offset: int, limit: int) -> int:
    """Convert an item offset into the remote API's 1-based page number."""
    return offset // limit + 1


def drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}
