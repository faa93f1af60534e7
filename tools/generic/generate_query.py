"""Offline query generation for a closed set of intents."""

from collections.abc import Callable
from typing import Any, Literal

from pydantic import Field

from domain.errors import ValidationError
from domain.query import GraphQLQuery, QueryTemplate
from tools.base import BaseTool, ToolArgs, ToolContext
from tools.templates import intents
from tools.templates.queries import GET_BOOKING, LIST_BOOKINGS, LIST_RESOURCES
from tools.translation import as_id_list

Intent = Literal[
    "list_bookings",
    "booking_details",
    "list_users",
    "user_by_email",
    "list_resources",
    "resource_availability",
    "list_invoices",
    "invoice_details",
    "list_conversations",
]


class GenerateQueryArgs(ToolArgs):
    intent: Intent = Field(description="What the query should fetch")
    organization_id: str | None = None
    user_id: str | None = None
    email: str | None = None
    location_id: str | None = None
    resource_id: str | None = None
    booking_id: str | None = None
    invoice_id: str | None = None
    client_id: str | None = None
    start_timestamp: int | None = Field(default=None, description="Unix seconds")
    end_timestamp: int | None = Field(default=None, description="Unix seconds")
    limit: int = Field(default=50, ge=1, le=200)
    page: int = Field(default=1, ge=1)


def require(args: GenerateQueryArgs, *fields: str) -> None:
    missing = [f for f in fields if getattr(args, f) is None]
    if missing:
        raise ValidationError(
            f"intent '{args.intent}' requires: {', '.join(missing)}",
            field=missing[0],
            constraint="required",
        )


def _list_bookings(args: GenerateQueryArgs) -> dict[str, Any]:
    return {
        "page": args.page,
        "limit": args.limit,
        "location_id": as_id_list(args.location_id),
        "resource_id": as_id_list(args.resource_id),
        "start_timestamp_from": args.start_timestamp,
        "start_timestamp_to": args.end_timestamp,
    }


def _booking_details(args: GenerateQueryArgs) -> dict[str, Any]:
    require(args, "booking_id")
    return {"booking_id": args.booking_id}


def _paged(args: GenerateQueryArgs) -> dict[str, Any]:
    return {"page": args.page, "limit": args.limit}


def _user_by_email(args: GenerateQueryArgs) -> dict[str, Any]:
    require(args, "email")
    return {"email": args.email}


def _list_resources(args: GenerateQueryArgs) -> dict[str, Any]:
    return {"page": args.page, "limit": args.limit, "location_id": as_id_list(args.location_id)}


def _resource_availability(args: GenerateQueryArgs) -> dict[str, Any]:
    require(args, "start_timestamp", "end_timestamp")
    if args.end_timestamp < args.start_timestamp:
        raise ValidationError(
            "end_timestamp must not be earlier than start_timestamp",
            field="end_timestamp",
            constraint=">= start_timestamp",
        )
    return {
        "start": args.start_timestamp,
        "end": args.end_timestamp,
        "locationId": as_id_list(args.location_id),
        "resourceId": as_id_list(args.resource_id),
    }


def _invoice_details(args: GenerateQueryArgs) -> dict[str, Any]:
    require(args, "invoice_id")
    return {"invoiceId": args.invoice_id}


def _list_conversations(args: GenerateQueryArgs) -> dict[str, Any]:
    return {"orgId": args.organization_id, "limit": args.limit}


INTENTS: dict[str, tuple[QueryTemplate, Callable[[GenerateQueryArgs], dict[str, Any]]]] = {
    "list_bookings": (LIST_BOOKINGS, _list_bookings),
    "booking_details": (GET_BOOKING, _booking_details),
    "list_users": (intents.LIST_USERS, _paged),
    "user_by_email": (intents.USER_BY_EMAIL, _user_by_email),
    "list_resources": (LIST_RESOURCES, _list_resources),
    "resource_availability": (intents.RESOURCE_AVAILABILITY, _resource_availability),
    "list_invoices": (intents.LIST_INVOICES, _paged),
    "invoice_details": (intents.INVOICE_DETAILS, _invoice_details),
    "list_conversations": (intents.LIST_CONVERSATIONS, _list_conversations),
}


def generate(args: GenerateQueryArgs) -> GraphQLQuery:
    template, build_variables = INTENTS[args.intent]
    return template.bind(build_variables(args))


class GenerateQueryTool(BaseTool):
    """
    Build a ready-to-run query for a known intent without touching the network.

    Implementation Notes:
        - Intents backed by a business query reuse its canonical template
        - user_id and client_id are accepted for compatibility but no
          template filters on them
    """

    args_model = GenerateQueryArgs

    @property
    def name(self) -> str:
        return "generate-query"

    @property
    def description(self) -> str:
        return (
            "Generate a safe GraphQL query template for a given intent and parameters. "
            "Returns query + variables."
        )

    async def execute(self, args: GenerateQueryArgs, context: ToolContext) -> dict[str, Any]:
        return generate(args).to_dict()
