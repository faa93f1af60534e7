"""Response shaping helpers.

Aggregates are computed over the returned page only and always placed in
labelled summary objects next to (never inside) the raw records.
"""

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from domain.responses import Page


def count_by(records: Iterable[dict[str, Any]], key: Callable[[dict[str, Any]], Any]) -> dict[str, int]:
    """Count records per derived key, in first-seen order."""
    counts = Counter(str(key(r)) for r in records)
    return dict(counts)


def field_or_unknown(name: str) -> Callable[[dict[str, Any]], Any]:
    def get(record: dict[str, Any]) -> Any:
        value = record.get(name)
        return "unknown" if value in (None, "") else value
    return get


def nested(record: dict[str, Any], *path: str) -> Any:
    """Follow a path of keys through nested objects, None if any hop is missing."""
    value: Any = record
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def numbers(records: Iterable[dict[str, Any]], key: Callable[[dict[str, Any]], Any]) -> list[float]:
    """Numeric values of a field, skipping missing and non-numeric ones."""
    values = []
    for record in records:
        value = key(record)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            values.append(value)
    return values


def numeric_range(values: list[float]) -> dict[str, float] | None:
    """min/max/average of a list of numbers, None when empty."""
    if not values:
        return None
    return {
        "min": min(values),
        "max": max(values),
        "average": round(sum(values) / len(values), 2),
    }


def percentage(part: int, whole: int) -> int:
    """Rounded percentage, 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round(part / whole * 100)


def page_summary(page: Page) -> dict[str, Any]:
    """
    Returned-vs-total block for a page.

    Example:
        {"returned": 50, "total": 137, "totalSource": "remote"}

    Implementation Notes:
        - total is the remote API's own count when it provided one
        - otherwise total falls back to returned and totalSource says so
    """
    if page.total is not None:
        return {"returned": page.returned, "total": page.total, "totalSource": "remote"}
    return {"returned": page.returned, "total": page.returned, "totalSource": "returned"}


def booking_status(booking: dict[str, Any]) -> str:
    """Derive a status label from the remote booking flags."""
    if booking.get("is_canceled"):
        return "canceled"
    if booking.get("is_rejected"):
        return "rejected"
    if booking.get("is_approved"):
        return "approved"
    if booking.get("is_new"):
        return "pending"
    return "unknown"


def is_active_booking(booking: dict[str, Any]) -> bool:
    """Approved and neither canceled nor rejected."""
    return bool(booking.get("is_approved")) and not booking.get("is_canceled") and not booking.get("is_rejected")
