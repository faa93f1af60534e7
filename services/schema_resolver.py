"""Schema source resolution with local-file fallback."""

import logging
from pathlib import Path

from graphql import GraphQLError, build_schema

from config.settings import Settings
from domain.errors import RemoteGraphQLError, SchemaResolutionError, TransportError
from services.graphql_service import GraphQLService

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


class SchemaResolver:
    """
    Obtains the GraphQL SDL text.

    Source kinds:
        - None: live introspection against the configured endpoint
        - URL: live introspection against that URL
        - Local path: read and validate; when the file is unreadable or does
          not build as a schema, introspect the endpoint and rewrite the file

    Implementation Notes:
        - Nothing is cached; every call resolves again
        - The rewrite is best-effort: a failed write is logged, not raised
        - Introspection failures are raised as SchemaResolutionError
    """

    def __init__(self, service: GraphQLService, source: str | None = None):
        self.service = service
        self.source = source

    @classmethod
    def from_settings(cls, service: GraphQLService, settings: Settings) -> "SchemaResolver":
        """
        Pick the schema source from settings.

        An explicit SCHEMA wins; otherwise the local schema file is used when
        it exists, and live introspection when it does not.
        """
        if settings.schema_source:
            return cls(service, settings.schema_source)
        if Path(settings.local_schema_file).is_file():
            return cls(service, settings.local_schema_file)
        return cls(service)

    @property
    def local_path(self) -> Path | None:
        if self.source and not is_url(self.source):
            return Path(self.source)
        return None

    async def resolve(self) -> str:
        """Return SDL text, falling back to live introspection once."""
        if self.source and is_url(self.source):
            return await self._introspect(self.source)

        path = self.local_path
        if path is None:
            return await self._introspect(None)

        try:
            text = path.read_text(encoding="utf-8")
            build_schema(text)
            return text
        except (OSError, GraphQLError, TypeError) as e:
            logger.warning("Local schema %s unusable (%s); introspecting %s", path, e, self.service.endpoint)

        text = await self._introspect(None)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to update local schema at %s: %s", path, e)
        return text

    async def resolve_for_search(self) -> str:
        """
        SDL text for line-oriented search.

        A local file is returned as-is, even if it does not build, so search
        keeps working on partially broken schema files.
        """
        path = self.local_path
        if path is not None:
            try:
                return path.read_text(encoding="utf-8")
            except OSError:
                logger.warning("Local schema %s unreadable; resolving remotely", path)
        return await self.resolve()

    async def _introspect(self, url: str | None) -> str:
        try:
            return await self.service.introspect(url=url)
        except (TransportError, RemoteGraphQLError) as e:
            raise SchemaResolutionError(e.describe()) from e
