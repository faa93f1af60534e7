"""Resource read tools."""

from datetime import datetime
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_object, unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import count_by, nested, numbers, numeric_range, page_summary
from tools.templates.queries import GET_RESOURCE, LIST_RESOURCES
from tools.translation import as_id_list


class ListResourcesArgs(CamelArgs):
    location_id: str | None = Field(default=None, description="Only resources at this location")
    resource_type_id: str | None = Field(default=None, description="Only resources of this resource type")
    name: str | None = Field(default=None, description="Filter by resource name")
    is_bookable: bool | None = Field(default=None, description="Only bookable (true) or non-bookable (false) resources")
    limit: int = Field(default=50, ge=1, le=100, description="Maximum number of results")
    page: int = Field(default=1, ge=1, description="Page number (1-based)")


def resource_type(resource: dict[str, Any]) -> str:
    return nested(resource, "type", "name") or "unknown"


class ListResourcesTool(TemplateTool):
    name = "optix_list_resources"
    description = (
        "List resources (meeting rooms, desks, offices) in your workspace. Filter by location, "
        "resource type, name or bookability."
    )
    args_model = ListResourcesArgs
    template = LIST_RESOURCES

    def translate(self, args: ListResourcesArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({
            "limit": args.limit,
            "page": args.page,
            "location_id": as_id_list(args.location_id),
            "resource_type_id": as_id_list(args.resource_type_id),
            "name": args.name,
            "is_bookable": args.is_bookable,
        })

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "resources")
        return {
            "resources": page.data,
            "summary": {
                **page_summary(page),
                "byType": count_by(page.data, resource_type),
                "capacity": numeric_range(numbers(page.data, lambda r: r.get("capacity"))),
            },
        }


class ResourceIdArgs(CamelArgs):
    id: str = Field(description="The resource ID")


class GetResourceDetailsTool(TemplateTool):
    name = "optix_get_resource_details"
    description = "Get details about a specific resource: type, capacity, bookability and location."
    args_model = ResourceIdArgs
    template = GET_RESOURCE

    def translate(self, args: ResourceIdArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"resource_id": args.id})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        resource = unwrap_object(data, "resource")
        return {"resource": resource, "found": resource is not None}
