"""Tests for configuration loading and profile detection."""

import pytest

from config.settings import Settings, is_domain_enabled, load_settings
from domain.errors import ConfigurationError


class TestSettings:
    def test_defaults(self, make_settings) -> None:
        settings = make_settings()
        assert settings.name == "mcp-graphql"
        assert settings.allow_mutations is False
        assert settings.headers == {}
        assert settings.schema_source is None
        assert settings.local_schema_file == "schema.full.graphql"
        assert settings.request_timeout_s == 30
        assert settings.log_level == "INFO"

    def test_reads_environment(self, clean_env) -> None:
        clean_env.setenv("ENDPOINT", "https://example.com/graphql")
        clean_env.setenv("ALLOW_MUTATIONS", "true")
        clean_env.setenv("HEADERS", '{"Authorization": "Bearer abc"}')
        clean_env.setenv("SCHEMA", "./schema.graphql")
        clean_env.setenv("NAME", "optix")

        settings = load_settings(_env_file=None)

        assert settings.endpoint_url == "https://example.com/graphql"
        assert settings.allow_mutations is True
        assert settings.headers == {"Authorization": "Bearer abc"}
        assert settings.schema_source == "./schema.graphql"
        assert settings.name == "optix"

    def test_headers_accept_json_text(self, make_settings) -> None:
        settings = make_settings(headers='{"X-Api-Key": 42}')
        assert settings.headers == {"X-Api-Key": "42"}

    @pytest.mark.parametrize("overrides", [
        {"endpoint": "not a url"},
        {"headers": "{not json"},
        {"headers": "[1, 2]"},
        {"allow_mutations": "yes"},
        {"request_timeout_s": 0},
        {"log_level": "LOUD"},
    ])
    def test_invalid_configuration_raises(self, clean_env, overrides) -> None:
        overrides.setdefault("endpoint", "https://api.optixapp.com/graphql")
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, **overrides)

    def test_missing_endpoint_raises(self, clean_env) -> None:
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None)

    def test_invalid_headers_env_raises(self, clean_env) -> None:
        clean_env.setenv("ENDPOINT", "https://api.optixapp.com/graphql")
        clean_env.setenv("HEADERS", "{not json")
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None)


class TestProfile:
    @pytest.mark.parametrize("endpoint, expected", [
        ("https://api.optixapp.com/graphql", True),
        ("https://OPTIX.example.org/graphql", True),
        ("https://example.com/optix/graphql", False),
        ("http://localhost:4000/graphql", False),
    ])
    def test_is_domain_enabled_matches_hostname(self, endpoint, expected) -> None:
        assert is_domain_enabled(endpoint) is expected

    def test_profile_follows_endpoint(self, make_settings) -> None:
        assert make_settings().profile().enables_extended_tools is True
        assert make_settings(endpoint="http://localhost:4000/graphql").profile().enables_extended_tools is False

    def test_explicit_override_wins(self, make_settings) -> None:
        settings = make_settings(enable_business_tools=False)
        assert settings.profile().enables_extended_tools is False

        settings = make_settings(endpoint="http://localhost:4000/graphql", enable_business_tools=True)
        assert settings.profile().enables_extended_tools is True

    def test_settings_type(self, make_settings) -> None:
        assert isinstance(make_settings(), Settings)
