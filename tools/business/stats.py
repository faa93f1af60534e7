"""Statistics tools.

Every figure is computed over the returned page; remote totals are reported
separately so a partial page is never presented as the full collection.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import (
    booking_status,
    count_by,
    field_or_unknown,
    is_active_booking,
    nested,
    numbers,
    page_summary,
    percentage,
)
from tools.templates.queries import GET_BOOKING_STATS, GET_MEMBER_STATS
from tools.translation import as_id_list, iso, resolve_window, to_unix

STATS_PAGE_SIZE = 1000


class BookingStatsArgs(CamelArgs):
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
    resource_ids: list[str] | None = Field(default=None, description="Only bookings of these resources")
    location_id: str | None = Field(default=None, description="Only bookings at this location")


class GetBookingStatsTool(TemplateTool):
    """
    Booking statistics for a date range.

    Fields:
        summary.totalRevenue: Sum of payment.total over the returned page
        insights.cancellationRate: Percentage of returned bookings that are canceled
        insights.averageRevenuePerBooking: Revenue of approved bookings / approved count
    """
    name = "optix_get_booking_stats"
    description = (
        "Get booking statistics for a date range: counts by status, cancellation rate and "
        "revenue. Useful for understanding space utilization."
    )
    args_model = BookingStatsArgs
    template = GET_BOOKING_STATS

    def translate(self, args: BookingStatsArgs, now: datetime) -> GraphQLQuery:
        start, end = resolve_window(args.start, args.end, now, start_field="from", end_field="to")
        return self.template.bind(
            {
                "start_timestamp_from": to_unix(start),
                "start_timestamp_to": to_unix(end),
                "resource_id": as_id_list(args.resource_ids),
                "location_id": as_id_list(args.location_id),
                "limit": STATS_PAGE_SIZE,
            },
            start=start,
            end=end,
        )

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "bookings")
        approved = [b for b in page.data if is_active_booking(b)]
        canceled = sum(1 for b in page.data if b.get("is_canceled"))
        revenue = sum(numbers(page.data, lambda b: nested(b, "payment", "total")))
        approved_revenue = sum(numbers(approved, lambda b: nested(b, "payment", "total")))

        return {
            "dateRange": {"from": iso(request.metadata["start"]), "to": iso(request.metadata["end"])},
            "summary": {
                **page_summary(page),
                "byStatus": count_by(page.data, booking_status),
                "approvedBookings": len(approved),
                "canceledBookings": canceled,
                "totalRevenue": round(revenue, 2),
            },
            "insights": {
                "cancellationRate": percentage(canceled, page.returned),
                "averageRevenuePerBooking": round(approved_revenue / len(approved), 2) if approved else 0,
            },
        }


class MemberStatsArgs(CamelArgs):
    limit: int = Field(
        default=STATS_PAGE_SIZE,
        ge=1,
        le=STATS_PAGE_SIZE,
        description="Maximum number of accounts to analyse",
    )


class GetMemberStatsTool(TemplateTool):
    name = "optix_get_member_stats"
    description = (
        "Get account statistics across all account types (Member, Team, ...) with status and "
        "type breakdowns."
    )
    args_model = MemberStatsArgs
    template = GET_MEMBER_STATS

    def translate(self, args: MemberStatsArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"limit": args.limit})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "accounts")
        active = sum(1 for a in page.data if a.get("status") == "ACTIVE")
        return {
            "summary": {
                **page_summary(page),
                "activeAccounts": active,
                "statusBreakdown": count_by(page.data, field_or_unknown("status")),
                "typeBreakdown": count_by(page.data, field_or_unknown("type")),
            },
            "insights": {"activePercentage": percentage(active, page.returned)},
        }
