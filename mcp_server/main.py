"""Console entry point: run the GraphQL MCP server over stdio."""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from config.logging import configure_logging
from config.settings import Settings, load_settings
from domain.errors import ConfigurationError
from mcp_server.server import create_mcp_server
from services.graphql_service import GraphQLService
from services.schema_resolver import SchemaResolver
from tools.base import ToolContext
from tools.catalog import build_registry
from tools.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def build_server(settings: Settings):
    """Wire service, resolver, registry and dispatcher into an MCP server."""
    service = GraphQLService(
        settings.endpoint_url,
        headers=settings.headers,
        timeout_s=settings.request_timeout_s,
    )
    resolver = SchemaResolver.from_settings(service, settings)
    profile = settings.profile()
    registry = build_registry(profile)
    context = ToolContext(
        graphql=service,
        resolver=resolver,
        allow_mutations=settings.allow_mutations,
    )
    dispatcher = Dispatcher(registry, context)

    logger.info(
        "Serving %s as '%s': %d tools (business tools %s, mutations %s)",
        settings.endpoint_url,
        settings.name,
        len(registry),
        "on" if profile.enables_extended_tools else "off",
        "allowed" if settings.allow_mutations else "disabled",
    )
    return create_mcp_server(settings, registry, dispatcher, resolver)


async def serve(settings: Settings) -> None:
    server = build_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
