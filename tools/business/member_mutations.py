"""Member mutation tools (create, update)."""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from domain.errors import ResponseShapeError
from domain.query import GraphQLQuery
from domain.responses import unwrap_object
from tools.base import CamelArgs, ToolArgs, TemplateTool
from tools.templates.mutations import CREATE_MEMBER, UPDATE_MEMBER
from tools.translation import drop_none

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CreateMemberArgs(ToolArgs):
    email: str = Field(pattern=EMAIL_PATTERN, description="Email address (required, must be unique)")
    name: str | None = Field(default=None, description="First name of the new member")
    surname: str | None = Field(default=None, description="Last name/surname of the new member")
    phone: str | None = Field(default=None, description="Phone number")
    notify_user_by_email: bool | None = Field(default=None, description="Send welcome email to user (default: false)")
    primary_location_id: str | None = Field(default=None, description="Primary location ID to assign the member to")
    is_lead: bool | None = Field(default=None, description="Mark as lead for sales follow-up (default: false)")


class CreateMemberTool(TemplateTool):
    name = "optix_create_member"
    description = (
        "Create a new member/user in your Optix workspace. The email must be unique. Optionally "
        "mark as lead for sales follow-up. Requires mutations to be enabled."
    )
    args_model = CreateMemberArgs
    template = CREATE_MEMBER

    def translate(self, args: CreateMemberArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind(args.model_dump())

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        user = unwrap_object(data, "userCreate")
        if not user or not user.get("user_id"):
            raise ResponseShapeError("Member creation returned no user")
        return {
            "success": True,
            "user": user,
            "message": "Lead created" if user.get("is_lead") else "Member created",
        }


class UpdateMemberArgs(CamelArgs):
    id: str = Field(description="The member (account) ID to update")
    name: str | None = Field(default=None, description="New account name")
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN, description="New email address")
    phone: str | None = Field(default=None, description="New phone number")

    @model_validator(mode="after")
    def _has_changes(self):
        if self.name is None and self.email is None and self.phone is None:
            raise ValueError("at least one of name, email or phone is required")
        return self


class UpdateMemberTool(TemplateTool):
    name = "optix_update_member"
    description = "Update a member's name, email or phone. Requires mutations to be enabled."
    args_model = UpdateMemberArgs
    template = UPDATE_MEMBER

    def translate(self, args: UpdateMemberArgs, now: datetime) -> GraphQLQuery:
        details = drop_none({"name": args.name, "email": args.email, "phone": args.phone})
        return self.template.bind({"account": [{"account_id": args.id}], "input": details})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        commit = unwrap_object(data, "accountsCommit")
        if commit is None:
            raise ResponseShapeError("Member update returned nothing")
        return {"success": True, "updated": commit.get("total"), "id": commit.get("id")}
