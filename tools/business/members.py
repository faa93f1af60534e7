"""Member read tools."""

from datetime import datetime
from typing import Any

from pydantic import Field

from domain.query import GraphQLQuery
from domain.responses import unwrap_object, unwrap_page
from tools.base import CamelArgs, TemplateTool
from tools.shaping import count_by, field_or_unknown, page_summary
from tools.templates.queries import GET_MEMBER, LIST_MEMBERS, SEARCH_MEMBERS
from tools.translation import page_from_offset


class ListMembersArgs(CamelArgs):
    search: str | None = Field(default=None, description="Search by member name or email address")
    limit: int = Field(default=50, ge=1, le=100, description="Maximum number of results")
    offset: int = Field(default=0, ge=0, description="Number of results to skip (for pagination)")


class ListMembersTool(TemplateTool):
    """
    Paginated member listing.

    Implementation Notes:
        - The remote API pages by number, so offset is rounded down to the
          page containing it (offset // limit + 1)
    """
    name = "optix_list_members"
    description = (
        "List members in your Optix workspace. Search by name/email or browse all members "
        "with pagination."
    )
    args_model = ListMembersArgs
    template = LIST_MEMBERS

    def translate(self, args: ListMembersArgs, now: datetime) -> GraphQLQuery:
        page = page_from_offset(args.offset, args.limit)
        return self.template.bind(
            {"limit": args.limit, "page": page, "search": args.search or None},
            offset=(page - 1) * args.limit,
        )

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "accounts")
        offset = request.metadata["offset"]
        if page.total is not None:
            has_more = offset + page.returned < page.total
        else:
            has_more = page.returned == request.variables["limit"]
        return {
            "members": page.data,
            "pagination": {**page_summary(page), "offset": offset, "hasMore": has_more},
            "summary": {"byStatus": count_by(page.data, field_or_unknown("status"))},
        }


class MemberIdArgs(CamelArgs):
    id: str = Field(description="The member (account) ID")


class GetMemberProfileTool(TemplateTool):
    name = "optix_get_member_profile"
    description = (
        "Get a member profile including contact details, professional info, location, social "
        "media, billing settings and account status."
    )
    args_model = MemberIdArgs
    template = GET_MEMBER

    def translate(self, args: MemberIdArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"account": {"account_id": args.id}})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        member = unwrap_object(data, "account")
        return {"member": member, "found": member is not None}


class SearchMembersArgs(CamelArgs):
    query: str = Field(min_length=1, description="Search term: partial name, email or phone number")
    limit: int = Field(default=20, ge=1, le=50, description="Maximum number of results")


class SearchMembersTool(TemplateTool):
    name = "optix_search_members"
    description = (
        "Search members by name, email or partial matches. Useful for finding a specific member "
        "when you don't have their ID."
    )
    args_model = SearchMembersArgs
    template = SEARCH_MEMBERS

    def translate(self, args: SearchMembersArgs, now: datetime) -> GraphQLQuery:
        return self.template.bind({"search": args.query, "limit": args.limit})

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> dict[str, Any]:
        page = unwrap_page(data, "accounts")
        return {
            "members": page.data,
            "searchTerm": request.variables["search"],
            "summary": page_summary(page),
        }
