"""GraphQL transport service using gql."""

import asyncio
import logging
from typing import Any

import aiohttp
from gql import Client, gql
from gql.transport import exceptions as gql_exceptions
from gql.transport.aiohttp import AIOHTTPTransport
from graphql import GraphQLError, build_client_schema, get_introspection_query, print_schema

from domain.errors import RemoteGraphQLError, TransportError
from domain.query import GraphQLQuery
from domain.responses import ResponseEnvelope

logger = logging.getLogger(__name__)


class GraphQLService:
    """
    Sends GraphQL requests to one endpoint.

    Owns the endpoint URL, the merged headers and the timeout; every call
    opens its own client session so no connection state is shared between
    tool invocations.

    Example:
        service = GraphQLService("https://api.optixapp.com/graphql",
                                 headers={"Authorization": "Bearer ..."})
        data = await service.execute(request)

    Implementation Notes:
        - Raises TransportError for network failures, timeouts and non-2xx
        - Raises RemoteGraphQLError when the envelope carries errors
        - Never retries: mutations are at-most-once from this layer
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        timeout_s: float = 30.0,
    ):
        self.endpoint = endpoint
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout_s = timeout_s

    def _transport(self, url: str | None = None) -> AIOHTTPTransport:
        return AIOHTTPTransport(
            url=url or self.endpoint,
            headers=self.headers,
            timeout=max(1, int(self.timeout_s)),
        )

    async def execute(self, request: GraphQLQuery, url: str | None = None) -> dict[str, Any]:
        """
        Execute a GraphQL request.

        Args:
            request: Query text and variables
            url: Override endpoint (used for schema introspection from a URL)

        Returns:
            The `data` object of the response
        """
        try:
            document = gql(request.query)
        except GraphQLError as e:
            raise TransportError(f"Cannot send malformed document: {e.message}") from e

        client = Client(
            transport=self._transport(url),
            fetch_schema_from_transport=False,
            execute_timeout=self.timeout_s,
        )
        logger.debug(
            "POST %s (%s) %s",
            url or self.endpoint,
            request.operation_name or "anonymous",
            ", ".join(request.get_filter_summary()),
        )
        try:
            async with client as session:
                result = await session.execute(
                    document,
                    variable_values=request.variables,
                    operation_name=request.operation_name,
                )
        except gql_exceptions.TransportQueryError as e:
            envelope = ResponseEnvelope(data=e.data, errors=e.errors or [{"message": str(e)}])
            raise RemoteGraphQLError(
                errors=[entry.model_dump(exclude_none=True) for entry in envelope.errors],
                data=envelope.data,
            ) from e
        except gql_exceptions.TransportServerError as e:
            raise TransportError(str(e), status=e.code) from e
        except gql_exceptions.TransportError as e:
            raise TransportError(str(e)) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"timed out after {self.timeout_s:g}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e
        return result or {}

    async def introspect(self, url: str | None = None) -> str:
        """
        Fetch the remote schema via introspection and print it as SDL.

        Args:
            url: Endpoint to introspect (defaults to the configured endpoint)

        Returns:
            GraphQL SDL text
        """
        request = GraphQLQuery(
            query=get_introspection_query(descriptions=True),
            operation_name="IntrospectionQuery",
        )
        data = await self.execute(request, url=url)
        if not data or "__schema" not in data:
            raise TransportError("Introspection response missing '__schema'")
        return print_schema(build_client_schema(data))
