"""Schedule tools: organization-wide upcoming schedule and per-resource schedule."""

from datetime import datetime, timedelta
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import booking_status, count_by, field_or_unknown, is_active_booking, page_summary
from tools.templates.queries import GET_RESOURCE_SCHEDULE, GET_UPCOMING_SCHEDULE
from tools.translation import iso, resolve_window, to_unix

# Schedule event statuses still relevant for planning (CANCELED and ENDED are excluded)
UPCOMING_STATUSES = ["ACTIVE", "UPCOMING"]
UPCOMING_EVENT_LIMIT = 100


class UpcomingScheduleArgs(CamelArgs):
    days: int = Field(default=7, ge=1, le=365, description="Number of days to look ahead (1-365)")


class GetUpcomingScheduleTool(TemplateTool):
    name = "optix_get_upcoming_schedule"
    description = (
        "Get upcoming schedule events including bookings, assignments, availability blocks and "
        "tours. Returns active and upcoming events that have not ended yet."
    )
    args_model = UpcomingScheduleArgs
    template = GET_UPCOMING_SCHEDULE

    def translate(self, args: UpcomingScheduleArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(None, None, now, days=args.days)
        return self.template.bind(
            {
                "limit": UPCOMING_EVENT_LIMIT,
                # Ongoing events (including open-ended assignments) have not ended yet
                "end_timestamp_from": to_unix(start),
                "start_timestamp_to": to_unix(end),
                "status": UPCOMING_STATUSES,
            },
            start=start,
            end=end,
            days=args.days,
        )

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "schedule")
        now = to_unix(request.metadata["start"])
        next_day = to_unix(request.metadata["start"] + timedelta(days=1))
        starting_soon = [
            e for e in page.data
            if isinstance(e.get("start_timestamp"), (int, float)) and now <= e["start_timestamp"] <= next_day
        ]
        return {
            "events": page.data,
            "summary": {
                **page_summary(page),
                "next24Hours": len(starting_soon),
                "daysAhead": request.metadata["days"],
                "byType": count_by(page.data, field_or_unknown("type")),
            },
        }


class ResourceScheduleArgs(CamelArgs):
    resource_id: str = Field(description="The resource ID")
    start: datetime | None = Field(
        default=None,
        alias="from",
        description="Start date in ISO 8601 format. Defaults to now.",
    )
    end: datetime | None = Field(
        default=None,
        alias="to",
        description="End date in ISO 8601 format. Defaults to 7 days after the start.",
    )


class GetResourceScheduleTool(TemplateTool):
    name = "optix_get_resource_schedule"
    description = (
        "Get the schedule of a resource over a date range: its bookings and schedule events. "
        "Defaults to the next 7 days if no dates are provided."
    )
    args_model = ResourceScheduleArgs
    template = GET_RESOURCE_SCHEDULE

    def translate(self, args: ResourceScheduleArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(args.start, args.end, now, start_field="from", end_field="to")
        return self.template.bind(
            {
                "resource_id": args.resource_id,
                "start_timestamp_from": to_unix(start),
                "start_timestamp_to": to_unix(end),
            },
            start=start,
            end=end,
        )

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        bookings = unwrap_page(data, "bookings")
        events = unwrap_page(data, "schedule")
        return {
            "resourceId": request.variables["resource_id"],
            "dateRange": {"from": iso(request.metadata["start"]), "to": iso(request.metadata["end"])},
            "bookings": bookings.data,
            "schedule": events.data,
            "summary": {
                "bookings": page_summary(bookings),
                "approvedBookings": sum(1 for b in bookings.data if is_active_booking(b)),
                "byStatus": count_by(bookings.data, booking_status),
                "scheduleEvents": page_summary(events),
            },
        }
