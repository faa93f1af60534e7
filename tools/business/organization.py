"""Organization info tool."""

import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from domain.errors import ResponseShapeError
from domain.query import GraphQLQuery
from domain.responses import unwrap_object
from tools.base import NoArgs, TemplateTool
from tools.templates.queries import GET_ORGANIZATION_INFO
from tools.translation import ensure_utc

logger = logging.getLogger(__name__)


def local_time(now: datetime, timezone_name: str | None) -> str:
    """Current time in the organization's timezone, UTC when unknown."""
    if timezone_name:
        try:
            return ensure_utc(now).astimezone(ZoneInfo(timezone_name)).isoformat()
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown organization timezone %r; reporting UTC", timezone_name)
    return ensure_utc(now).isoformat()


class GetOrganizationInfoTool(TemplateTool):
    name = "optix_get_organization_info"
    description = (
        "Get information about your Optix organization and the authenticated user, including "
        "timezone, currency and address, plus the current local time."
    )
    args_model = NoArgs
    template = GET_ORGANIZATION_INFO

    def translate(self, args: NoArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({}, now=now)

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        me = unwrap_object(data, "me")
        if me is None:
            raise ResponseShapeError("'me' is null; the credentials are not bound to an organization")
        organization = me.get("organization") or {}
        return {
            "authType": me.get("authType"),
            "user": me.get("user"),
            "organization": me.get("organization"),
            "currentTime": local_time(request.metadata["now"], organization.get("timezone")),
        }
