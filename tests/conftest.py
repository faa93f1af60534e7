"""Test fixtures: a recording GraphQL service stub, a frozen clock and
settings/dispatcher factories.

No test touches the network. The stub replays queued responses (a `data`
dict, or an exception to raise) and records every request so tests can
assert how many outbound calls a tool made.
"""

from datetime import datetime, timezone
from typing import Any

import pytest

from config.settings import Profile, Settings
from domain.query import GraphQLQuery
from services.graphql_service import GraphQLService
from services.schema_resolver import SchemaResolver
from tools.base import ToolContext
from tools.catalog import build_registry
from tools.dispatcher import Dispatcher

OPTIX_ENDPOINT = "https://api.optixapp.com/graphql"
FROZEN_NOW = datetime(2025, 10, 6, 8, 0, tzinfo=timezone.utc)

SAMPLE_SDL = '''type Query {
  bookings(limit: Int, page: Int): BookingList
  resource(resource_id: ID!): Resource
}

type BookingList {
  data: [Booking]
  total: Int
}

type Booking {
  booking_id: ID!
  title: String
  status: BookingStatus
}

type Resource {
  resource_id: ID!
  name: String
  is_bookable: Boolean
}

"""Lifecycle of a booking"""
enum BookingStatus {
  """Awaiting approval"""
  PENDING
  APPROVED
  CANCELED @deprecated(reason: "Use is_canceled")
}

enum ScheduleEventStatus {
  ACTIVE
  UPCOMING
  ENDED
}
'''

ENV_VARS = (
    "ENDPOINT",
    "ALLOW_MUTATIONS",
    "HEADERS",
    "SCHEMA",
    "NAME",
    "REQUEST_TIMEOUT_S",
    "LOG_LEVEL",
    "ENABLE_BUSINESS_TOOLS",
    "LOCAL_SCHEMA_FILE",
)


class StubGraphQLService(GraphQLService):
    """GraphQLService double that replays queued responses."""

    def __init__(self, responses: list[Any] | None = None, sdl: Any = SAMPLE_SDL):
        super().__init__(OPTIX_ENDPOINT, headers={"Authorization": "Bearer test"})
        self.responses = list(responses or [])
        self.calls: list[GraphQLQuery] = []
        self.sdl = sdl
        self.introspected: list[str | None] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    async def execute(self, request: GraphQLQuery, url: str | None = None) -> dict[str, Any]:
        self.calls.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected GraphQL call: {request.operation_name}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def introspect(self, url: str | None = None) -> str:
        self.introspected.append(url)
        if isinstance(self.sdl, BaseException):
            raise self.sdl
        return self.sdl


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def stub_service():
    return StubGraphQLService()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.full.graphql"
    path.write_text(SAMPLE_SDL, encoding="utf-8")
    return path


@pytest.fixture
def make_context(stub_service, frozen_clock, schema_file):
    def factory(allow_mutations: bool = False, resolver: SchemaResolver | None = None) -> ToolContext:
        return ToolContext(
            graphql=stub_service,
            resolver=resolver or SchemaResolver(stub_service, str(schema_file)),
            allow_mutations=allow_mutations,
            clock=frozen_clock,
        )
    return factory


@pytest.fixture
def make_dispatcher(make_context):
    """Dispatcher over the full Optix profile."""
    def factory(allow_mutations: bool = False, extended: bool = True) -> Dispatcher:
        registry = build_registry(Profile(enables_extended_tools=extended))
        return Dispatcher(registry, make_context(allow_mutations=allow_mutations))
    return factory


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings(clean_env):
    def factory(**overrides) -> Settings:
        overrides.setdefault("endpoint", OPTIX_ENDPOINT)
        return Settings(_env_file=None, **overrides)
    return factory


def unix(*args: int) -> int:
    """Unix seconds of a UTC wall-clock time."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


def booking(booking_id: str, **flags: Any) -> dict[str, Any]:
    record = {
        "booking_id": booking_id,
        "title": f"Booking {booking_id}",
        "is_new": False,
        "is_approved": False,
        "is_canceled": False,
        "is_rejected": False,
    }
    record.update(flags)
    return record
