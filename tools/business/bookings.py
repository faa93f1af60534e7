"""Booking read tools: list bookings and booking details."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_object, unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import booking_status, count_by, page_summary
from tools.templates.queries import GET_BOOKING, LIST_BOOKINGS
from tools.translation import as_id_list, iso, resolve_window, to_unix

BookingStatusFilter = Literal["pending", "approved", "completed"]

# Remote include_* flags selecting each status filter
STATUS_FLAGS: dict[str, dict[str, bool]] = {
    "pending": {"include_new": True, "include_approved": False},
    "approved": {"include_new": False, "include_approved": True},
    "completed": {"include_completed": True},
}


class ListBookingsArgs(CamelArgs):
    start: datetime | None = Field(
        default=None,
        alias="from",
        description="Start date/time in ISO 8601 format (e.g. '2025-09-29T00:00:00Z'). Defaults to now.",
    )
    end: datetime | None = Field(
        default=None,
        alias="to",
        description="End date/time in ISO 8601 format. Defaults to 7 days after the start.",
    )
    status: BookingStatusFilter | None = Field(default=None, description="Filter by booking status")
    limit: int = Field(default=50, ge=1, le=100, description="Maximum number of results to return")
    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    resource_id: str | None = Field(default=None, description="Filter bookings for a specific resource/space")
    location_id: str | None = Field(default=None, description="Filter bookings for a specific location")


class ListBookingsTool(TemplateTool):
    name = "optix_list_bookings"
    description = (
        "List bookings in your Optix workspace. Useful for checking daily schedules, finding "
        "specific bookings, or getting an overview of space usage. Filter by date range, status, "
        "location or resource."
    )
    args_model = ListBookingsArgs
    template = LIST_BOOKINGS

    def translate(self, args: ListBookingsArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(args.start, args.end, now, start_field="from", end_field="to")
        variables: dict[str, Any] = {
            "limit": args.limit,
            "page": args.page,
            "start_timestamp_from": to_unix(start),
            "start_timestamp_to": to_unix(end),
            "resource_id": as_id_list(args.resource_id),
            "location_id": as_id_list(args.location_id),
        }
        if args.status:
            variables.update(STATUS_FLAGS[args.status])
        return self.template.bind(variables, start=start, end=end)

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "bookings")
        return {
            "bookings": page.data,
            "dateRange": {"from": iso(request.metadata["start"]), "to": iso(request.metadata["end"])},
            "summary": {
                **page_summary(page),
                "byStatus": count_by(page.data, booking_status),
            },
        }


class BookingIdArgs(CamelArgs):
    id: str = Field(description="The booking ID")


class GetBookingDetailsTool(TemplateTool):
    name = "optix_get_booking_details"
    description = (
        "Get comprehensive details about a specific booking, including member information, "
        "resource details and payment."
    )
    args_model = BookingIdArgs
    template = GET_BOOKING

    def translate(self, args: BookingIdArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"booking_id": args.id})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        booking = unwrap_object(data, "booking")
        if booking is None:
            return {"booking": None, "found": False}
        return {"booking": booking, "found": True, "status": booking_status(booking)}
