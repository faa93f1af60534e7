"""Optix business tools, registered when the profile enables them."""

from tools.business.availability import CheckAvailabilityTool
from tools.business.booking_mutations import CancelBookingTool, CreateBookingTool, UpdateBookingTool
from tools.business.bookings import GetBookingDetailsTool, ListBookingsTool
from tools.business.member_mutations import CreateMemberTool, UpdateMemberTool
from tools.business.members import GetMemberProfileTool, ListMembersTool, SearchMembersTool
from tools.business.organization import GetOrganizationInfoTool
from tools.business.plans import GetPlanTemplateTool, ListPlanTemplatesTool
from tools.business.resources import GetResourceDetailsTool, ListResourcesTool
from tools.business.schedule import GetResourceScheduleTool, GetUpcomingScheduleTool
from tools.business.stats import GetBookingStatsTool, GetMemberStatsTool


def business_tools():
    """Instantiate every Optix business tool, queries first, then mutations."""
    return [
        ListBookingsTool(),
        GetBookingDetailsTool(),
        CheckAvailabilityTool(),
        GetUpcomingScheduleTool(),
        ListMembersTool(),
        GetMemberProfileTool(),
        SearchMembersTool(),
        ListResourcesTool(),
        GetResourceDetailsTool(),
        GetResourceScheduleTool(),
        ListPlanTemplatesTool(),
        GetPlanTemplateTool(),
        GetOrganizationInfoTool(),
        GetBookingStatsTool(),
        GetMemberStatsTool(),
        CreateBookingTool(),
        UpdateBookingTool(),
        CancelBookingTool(),
        CreateMemberTool(),
        UpdateMemberTool(),
    ]


__all__ = ["business_tools"]
