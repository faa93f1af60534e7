"""Tests for GraphQLService error mapping, with the gql client replaced by a fake."""

import asyncio

import aiohttp
import pytest
from gql.transport.exceptions import TransportProtocolError, TransportQueryError, TransportServerError
from graphql import build_schema, get_introspection_query, graphql_sync, print_schema

from domain.errors import RemoteGraphQLError, TransportError
from domain.query import GraphQLQuery
from services import graphql_service
from services.graphql_service import GraphQLService

from tests.conftest import OPTIX_ENDPOINT, SAMPLE_SDL

REQUEST = GraphQLQuery(query="query Me { me { name } }", variables={"x": 1}, operation_name="Me")


class FakeSession:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    async def execute(self, document, variable_values=None, operation_name=None):
        self.calls.append((document, variable_values, operation_name))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class FakeClient:
    """Stands in for gql.Client; records the transport it was built with."""

    instances: list["FakeClient"] = []

    def __init__(self, outcome, transport=None, **kwargs):
        self.transport = transport
        self.kwargs = kwargs
        self.session = FakeSession(outcome)
        FakeClient.instances.append(self)

    async def __aenter__(self):
        return self.session

    async def __aexit__(self, *exc_info):
        return False


@pytest.fixture
def fake_client(monkeypatch):
    FakeClient.instances = []

    def install(outcome):
        monkeypatch.setattr(
            graphql_service,
            "Client",
            lambda **kwargs: FakeClient(outcome, **kwargs),
        )
    return install


def test_headers_are_merged() -> None:
    service = GraphQLService(OPTIX_ENDPOINT, headers={"Authorization": "Bearer t"})
    assert service.headers == {"Content-Type": "application/json", "Authorization": "Bearer t"}


@pytest.mark.asyncio
async def test_execute_returns_data(fake_client) -> None:
    fake_client({"me": {"name": "Ada"}})
    service = GraphQLService(OPTIX_ENDPOINT, timeout_s=5)

    assert await service.execute(REQUEST) == {"me": {"name": "Ada"}}

    client = FakeClient.instances[0]
    assert client.kwargs["fetch_schema_from_transport"] is False
    assert client.kwargs["execute_timeout"] == 5
    assert client.transport.url == OPTIX_ENDPOINT
    _, variables, operation = client.session.calls[0]
    assert variables == {"x": 1}
    assert operation == "Me"


@pytest.mark.asyncio
async def test_url_override(fake_client) -> None:
    fake_client({})
    await GraphQLService(OPTIX_ENDPOINT).execute(REQUEST, url="https://other.example.com/graphql")
    assert FakeClient.instances[0].transport.url == "https://other.example.com/graphql"


@pytest.mark.asyncio
async def test_graphql_errors(fake_client) -> None:
    errors = [{"message": "Cannot query field 'cost' on type 'Booking'"}]
    fake_client(TransportQueryError(str(errors[0]), errors=errors, data={"me": None}))

    with pytest.raises(RemoteGraphQLError) as excinfo:
        await GraphQLService(OPTIX_ENDPOINT).execute(REQUEST)

    assert excinfo.value.errors == errors
    assert excinfo.value.data == {"me": None}
    assert "please fix the query" in excinfo.value.describe()


@pytest.mark.asyncio
@pytest.mark.parametrize("raised, status, fragment", [
    (TransportServerError("502, message='Bad Gateway'", code=502), 502, "Bad Gateway"),
    (TransportProtocolError("Server did not return a GraphQL result"), None, "GraphQL result"),
    (asyncio.TimeoutError(), None, "timed out after 30s"),
    (aiohttp.ClientConnectionError("connection refused"), None, "connection refused"),
])
async def test_transport_failures(fake_client, raised, status, fragment) -> None:
    fake_client(raised)

    with pytest.raises(TransportError) as excinfo:
        await GraphQLService(OPTIX_ENDPOINT).execute(REQUEST)

    assert excinfo.value.status == status
    assert fragment in excinfo.value.describe()


@pytest.mark.asyncio
async def test_malformed_document_is_not_sent(fake_client) -> None:
    fake_client({})
    with pytest.raises(TransportError):
        await GraphQLService(OPTIX_ENDPOINT).execute(GraphQLQuery(query="query {"))
    assert FakeClient.instances == []


@pytest.mark.asyncio
async def test_introspect_prints_sdl(fake_client) -> None:
    schema = build_schema(SAMPLE_SDL)
    fake_client(graphql_sync(schema, get_introspection_query(descriptions=True)).data)

    sdl = await GraphQLService(OPTIX_ENDPOINT).introspect()

    assert sdl == print_schema(schema)
    _, _, operation = FakeClient.instances[0].session.calls[0]
    assert operation == "IntrospectionQuery"


@pytest.mark.asyncio
async def test_introspect_requires_schema_field(fake_client) -> None:
    fake_client({"data": None})
    with pytest.raises(TransportError, match="__schema"):
        await GraphQLService(OPTIX_ENDPOINT).introspect()
