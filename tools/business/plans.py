"""Plan template tools."""

from datetime import datetime
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_object, unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import count_by, field_or_unknown, numbers, numeric_range, page_summary
from tools.templates.queries import GET_PLAN_TEMPLATE, LIST_PLAN_TEMPLATES
from tools.translation import as_id_list


class ListPlanTemplatesArgs(CamelArgs):
    name: str | None = Field(default=None, description="Filter by plan name")
    location_id: str | None = Field(default=None, description="Only plans available at this location")
    limit: int = Field(default=50, ge=1, le=100, description="Maximum number of results")
    page: int = Field(default=1, ge=1, description="Page number (1-based)")


class ListPlanTemplatesTool(TemplateTool):
    name = "optix_list_plan_templates"
    description = (
        "List membership plan templates (pricing plans) available in your workspace. These define "
        "the membership tiers and their pricing."
    )
    args_model = ListPlanTemplatesArgs
    template = LIST_PLAN_TEMPLATES

    def translate(self, args: ListPlanTemplatesArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({
            "limit": args.limit,
            "page": args.page,
            "name": args.name,
            "location_id": as_id_list(args.location_id),
        })

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "planTemplates")
        return {
            "planTemplates": page.data,
            "summary": {
                **page_summary(page),
                "priceRange": numeric_range(numbers(page.data, lambda p: p.get("price"))),
                "byFrequency": count_by(page.data, field_or_unknown("price_frequency")),
            },
        }


class PlanTemplateIdArgs(CamelArgs):
    id: str = Field(description="The plan template ID")


class GetPlanTemplateTool(TemplateTool):
    name = "optix_get_plan_template"
    description = "Get detailed information about a specific membership plan template, including pricing."
    args_model = PlanTemplateIdArgs
    template = GET_PLAN_TEMPLATE

    def translate(self, args: PlanTemplateIdArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"plan_template_id": args.id})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        plan = unwrap_object(data, "planTemplate")
        return {"planTemplate": plan, "found": plan is not None}
