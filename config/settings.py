"""Settings management using pydantic-settings."""

import json
from urllib.parse import urlparse

from pydantic import AliasChoices, AnyHttpUrl, BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from domain.errors import ConfigurationError

# Hostname fragment identifying the Optix platform
OPTIX_HOST_MARKER = "optix"


class Profile(BaseModel, frozen=True):
    """
    Which tool families the server exposes.

    Decided once at startup by the configuration loader and passed to the
    registry builder, so the registry never inspects the endpoint itself.
    """
    enables_extended_tools: bool = False


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses .env file for local development.
    """

    # GraphQL Configuration
    endpoint: AnyHttpUrl
    headers: dict[str, str] = Field(default_factory=dict)
    schema_source: str | None = Field(
        default=None,
        validation_alias=AliasChoices("schema", "schema_source"),
    )
    local_schema_file: str = "schema.full.graphql"
    request_timeout_s: float = Field(default=30.0, gt=0)

    # Server Configuration
    name: str = "mcp-graphql"
    allow_mutations: bool = False
    enable_business_tools: bool | None = None  # None = detect from endpoint
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("allow_mutations", mode="before")
    @classmethod
    def _strict_boolean_flag(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered not in ("true", "false"):
                raise ValueError("ALLOW_MUTATIONS must be 'true' or 'false'")
            return lowered == "true"
        return value

    @field_validator("headers", mode="before")
    @classmethod
    def _parse_headers(cls, value):
        if isinstance(value, str):
            try:
                value = json.loads(value or "{}")
            except json.JSONDecodeError as e:
                raise ValueError("HEADERS must be a valid JSON string") from e
        if not isinstance(value, dict):
            raise ValueError("HEADERS must be a JSON object")
        return {str(k): str(v) for k, v in value.items()}

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def endpoint_url(self) -> str:
        """Endpoint as a plain string for HTTP clients."""
        return str(self.endpoint)

    def profile(self) -> Profile:
        """Resolve the tool profile, honoring an explicit override."""
        if self.enable_business_tools is not None:
            return Profile(enables_extended_tools=self.enable_business_tools)
        return Profile(enables_extended_tools=is_domain_enabled(self.endpoint_url))


def is_domain_enabled(endpoint: str) -> bool:
    """
    Check whether an endpoint belongs to the Optix platform.

    Args:
        endpoint: GraphQL endpoint URL

    Returns:
        True if the hostname contains the Optix marker
        Example: "https://api.optixapp.com/graphql" -> True
    """
    hostname = urlparse(endpoint).hostname or ""
    return OPTIX_HOST_MARKER in hostname.lower()


def load_settings(**overrides) -> Settings:
    """
    Load and validate settings at startup.

    Raises:
        ConfigurationError: If any value is missing or malformed
    """
    try:
        # Env var names (ENDPOINT, SCHEMA, HEADERS...) are matched case-insensitively
        return Settings(**overrides)
    except (ValidationError, SettingsError) as e:
        raise ConfigurationError(str(e)) from e
