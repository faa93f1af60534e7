"""Tests for the query template library."""

import pytest
from graphql import build_schema, parse, validate

from domain.query import QueryTemplate
from tools.templates import MUTATIONS, QUERIES, all_templates
from tools.templates import intents

INTENT_TEMPLATES = [
    intents.LIST_USERS,
    intents.USER_BY_EMAIL,
    intents.RESOURCE_AVAILABILITY,
    intents.LIST_INVOICES,
    intents.INVOICE_DETAILS,
    intents.LIST_CONVERSATIONS,
]


@pytest.mark.parametrize("template", all_templates() + INTENT_TEMPLATES, ids=lambda t: t.name)
def test_every_template_parses_to_one_operation(template: QueryTemplate) -> None:
    assert template.operation_node is not None
    assert template.operation_name


def test_catalog_kinds() -> None:
    assert all(not t.is_mutation for t in QUERIES.values())
    assert all(t.is_mutation for t in MUTATIONS.values())
    assert len(QUERIES) == 15
    assert set(MUTATIONS) == {"CREATE_BOOKING", "UPDATE_BOOKING", "CANCEL_BOOKING", "CREATE_MEMBER", "UPDATE_MEMBER"}


def test_variable_contract() -> None:
    template = QUERIES["CHECK_AVAILABILITY"]
    assert template.variables == {
        "resource_id": "[ID!]!",
        "bookings_from": "Int!",
        "bookings_to": "Int!",
    }
    assert template.required_variables() == {"resource_id", "bookings_from", "bookings_to"}
    assert QUERIES["LIST_BOOKINGS"].required_variables() == set()


def test_bind_drops_none_and_keeps_metadata() -> None:
    request = QUERIES["LIST_MEMBERS"].bind({"limit": 20, "search": None}, offset=0)
    assert request.variables == {"limit": 20}
    assert request.operation_name == "ListMembers"
    assert request.template == "LIST_MEMBERS"
    assert request.metadata == {"offset": 0}


def test_bind_rejects_undeclared_variables() -> None:
    with pytest.raises(ValueError, match="memberId"):
        QUERIES["LIST_BOOKINGS"].bind({"memberId": "M1"})


def test_document_with_two_operations_is_rejected() -> None:
    template = QueryTemplate(name="BROKEN", document="query A { a } query B { b }")
    with pytest.raises(ValueError):
        template.operation_node


def test_templates_validate_against_a_matching_schema() -> None:
    schema = build_schema("""
        type Query { resource(resource_id: ID!): Resource }
        type Resource { resource_id: ID! name: String title: String description: String
          capacity: Int is_bookable: Boolean is_assignable: Boolean
          type: ResourceType location: Location }
        type ResourceType { resource_type_id: ID! name: String booking_experience: String }
        type Location { location_id: ID! name: String address: String timezone: String }
    """)
    errors = validate(schema, parse(QUERIES["GET_RESOURCE"].document))
    assert errors == []
