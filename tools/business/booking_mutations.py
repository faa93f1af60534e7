"""Booking mutation tools (create, update, cancel).

All three commit through `bookingsCommit` and are refused by the dispatcher
while mutations are disabled.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from domain.errors import ResponseShapeError
from domain.query import GraphQLQuery
from domain.responses import unwrap_object
from tools.base import CamelArgs, TemplateTool
from tools.templates.mutations import CANCEL_BOOKING, CREATE_BOOKING, UPDATE_BOOKING
from tools.translation import drop_none, resolve_window, to_unix


def first_booking(data: dict[str, Any], action: str) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return (commit, first booking) of a bookingsCommit payload."""
    commit = unwrap_object(data, "bookingsCommit")
    bookings = (commit or {}).get("bookings") or []
    if not bookings:
        raise ResponseShapeError(f"{action} returned no booking")
    return commit, bookings[0]


class CreateBookingArgs(CamelArgs):
    account_id: str = Field(description="The account ID making the booking")
    resource_id: str = Field(description="The resource/space ID to book")
    start: datetime = Field(description="Booking start time in ISO 8601 format (e.g. '2025-10-06T14:00:00Z')")
    end: datetime = Field(description="Booking end time in ISO 8601 format (e.g. '2025-10-06T16:00:00Z')")
    title: str | None = Field(default=None, description="Optional booking title")
    notes: str | None = Field(default=None, description="Optional notes for the booking")


class CreateBookingTool(TemplateTool):
    name = "optix_create_booking"
    description = (
        "Create a new booking for a member. Reserves a resource for the specified time period. "
        "Requires mutations to be enabled."
    )
    args_model = CreateBookingArgs
    template = CREATE_BOOKING

    def translate(self, args: CreateBookingArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(args.start, args.end, now)
        booking_input = drop_none({
            "account": {"account_id": args.account_id},
            "title": args.title,
            "notes": args.notes,
            "bookings": [{
                "resource_id": [args.resource_id],
                "start_timestamp": to_unix(start),
                "end_timestamp": to_unix(end),
            }],
        })
        return self.template.bind({"input": booking_input})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        commit, booking = first_booking(data, "Booking creation")
        return {
            "booking": booking,
            "account": commit.get("account"),
            "bookingSessionId": commit.get("booking_session_id"),
            "status": "confirmed" if booking.get("is_confirmed") else "pending_approval",
        }


class UpdateBookingArgs(CamelArgs):
    booking_id: str = Field(description="The booking ID to update")
    start: datetime | None = Field(default=None, description="New start time in ISO 8601 format")
    end: datetime | None = Field(default=None, description="New end time in ISO 8601 format")
    resource_id: str | None = Field(default=None, description="New resource/space ID (moves the booking)")
    title: str | None = Field(default=None, description="Updated title")
    notes: str | None = Field(default=None, description="Updated notes")

    @model_validator(mode="after")
    def _has_changes(self):
        if all(v is None for v in (self.start, self.end, self.resource_id, self.title, self.notes)):
            raise ValueError("at least one of start, end, resourceId, title or notes is required")
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError("end must not be earlier than start")
        return self


class UpdateBookingTool(TemplateTool):
    name = "optix_update_booking"
    description = (
        "Update an existing booking's time, resource, title or notes. Can reschedule or move a "
        "booking. Requires mutations to be enabled."
    )
    args_model = UpdateBookingArgs
    template = UPDATE_BOOKING

    def translate(self, args: UpdateBookingArgs, now: datetime) -> GraphQLQuery:
        change = drop_none({
            "booking_id": args.booking_id,
            "start_timestamp": to_unix(args.start) if args.start else None,
            "end_timestamp": to_unix(args.end) if args.end else None,
            "resource_id": [args.resource_id] if args.resource_id else None,
        })
        booking_input = drop_none({"title": args.title, "notes": args.notes, "bookings": [change]})
        return self.template.bind({"input": booking_input})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        _, booking = first_booking(data, "Booking update")
        return {"success": True, "booking": booking}


class CancelBookingArgs(CamelArgs):
    booking_id: str = Field(description="The booking ID to cancel")


class CancelBookingTool(TemplateTool):
    name = "optix_cancel_booking"
    description = (
        "Cancel an existing booking, freeing the resource for other members. Requires mutations "
        "to be enabled."
    )
    args_model = CancelBookingArgs
    template = CANCEL_BOOKING

    def translate(self, args: CancelBookingArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"booking_id": args.booking_id})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        _, booking = first_booking(data, "Cancellation")
        canceled = bool(booking.get("is_canceled"))
        return {
            "success": canceled,
            "booking": booking,
            "message": "Booking cancelled" if canceled else "Booking returned but is not marked as canceled",
        }
