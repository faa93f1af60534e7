"""Resource availability check."""

from datetime import datetime, timedelta
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import is_active_booking
from tools.templates.queries import CHECK_AVAILABILITY
from tools.translation import from_unix, iso, resolve_window, to_unix

# Bookings are filtered remotely by start time only; one starting up to this
# long before the window can still overlap it
BOOKING_LOOKBACK = timedelta(days=7)


class CheckAvailabilityArgs(CamelArgs):
    resource_id: str = Field(description="The resource/space ID to check")
    start: datetime | None = Field(
        default=None,
        description="Start time in ISO 8601 format (e.g. '2025-09-29T14:00:00Z'). Defaults to now.",
    )
    end: datetime | None = Field(
        default=None,
        description="End time in ISO 8601 format. Defaults to 7 days after the start.",
    )


def overlaps(booking: dict[str, Any], start: int, end: int) -> bool:
    """Half-open overlap of a booking with [start, end) in Unix seconds."""
    b_start = booking.get("start_timestamp")
    b_end = booking.get("end_timestamp")
    if b_start is None:
        return False
    if b_end is None:
        b_end = b_start
    return b_start < end and b_end > start


def _iso_or_none(seconds: int | None) -> str | None:
    return iso(from_unix(seconds)) if seconds is not None else None


class CheckAvailabilityTool(TemplateTool):
    """
    Availability of one resource over a time window.

    Implementation Notes:
        - A conflict is an approved booking, neither canceled nor rejected,
          that overlaps the window
        - Bookings are fetched from BOOKING_LOOKBACK before the window so
          ones already running at its start are checked too
        - available requires the resource to exist, be bookable and have no
          conflicts
    """
    name = "optix_check_availability"
    description = (
        "Check if a resource (meeting room, desk, etc.) is available for a specific time period. "
        "Shows any conflicting bookings. If start/end are not provided, checks the next 7 days."
    )
    args_model = CheckAvailabilityArgs
    template = CHECK_AVAILABILITY

    def translate(self, args: CheckAvailabilityArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(args.start, args.end, now)
        return self.template.bind(
            {
                "resource_id": [args.resource_id],
                "bookings_from": to_unix(start - BOOKING_LOOKBACK),
                "bookings_to": to_unix(end),
            },
            start=start,
            end=end,
        )

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        resources = unwrap_page(data, "resources")
        bookings = unwrap_page(data, "bookings")
        start, end = request.metadata["start"], request.metadata["end"]
        window = (to_unix(start), to_unix(end))

        resource = resources.data[0] if resources.data else None
        conflicts = [
            {
                "booking_id": b.get("booking_id"),
                "title": b.get("title"),
                "start": _iso_or_none(b.get("start_timestamp")),
                "end": _iso_or_none(b.get("end_timestamp")),
            }
            for b in bookings.data
            if is_active_booking(b) and overlaps(b, *window)
        ]
        bookable = bool(resource and resource.get("is_bookable"))
        available = bookable and not conflicts

        if resource is None:
            recommendation = "Resource not found"
        elif not bookable:
            recommendation = "Resource is not bookable"
        elif conflicts:
            recommendation = f"Resource is not available: {len(conflicts)} conflicting booking(s) found"
        else:
            recommendation = "Resource is available for the requested time"

        return {
            "resource": {
                "id": resource.get("resource_id"),
                "name": resource.get("name") or resource.get("title"),
                "isBookable": resource.get("is_bookable"),
            } if resource else None,
            "timeSlot": {
                "start": iso(start),
                "end": iso(end),
                "durationHours": round((end - start).total_seconds() / 3600, 2),
            },
            "available": available,
            "conflicts": conflicts,
            "totalConflicts": len(conflicts),
            "recommendation": recommendation,
        }
