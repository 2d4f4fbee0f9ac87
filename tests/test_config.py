import pytest

from app.core.config import Settings, parse_list_from_env


class TestParseListFromEnv:
    """Tests pour la fonction utilitaire parse_list_from_env."""

    def test_parse_direct(self):
        result = parse_list_from_env(["localhost", "127.0.0.1"], "TRUSTED_HOSTS")
        assert result == ["localhost", "127.0.0.1"]

    def test_parse_comma_separated_with_spaces(self):
        """Test avec format virgules et espaces."""
        result = parse_list_from_env("  http://localhost:8081 , https://app.berthcare.ca ", "f")
        assert result == ["http://localhost:8081", "https://app.berthcare.ca"]

    def test_parse_json_format(self):
        result = parse_list_from_env('["a,b", "c"]', "ALLOWED_ORIGINS")
        assert result == ["a,b", "c"]

    def test_parse_blank_values(self):
        """Chaîne vide ou segments vides ignorés."""
        assert parse_list_from_env("   ", "f") == []
        assert parse_list_from_env("a,,b, ,c", "f") == ["a", "b", "c"]

    def test_invalid_json_format(self):
        with pytest.raises(ValueError, match="Format JSON invalide pour ALLOWED_ORIGINS"):
            parse_list_from_env('["a", "b"', "ALLOWED_ORIGINS")

    def test_invalid_type(self):
        with pytest.raises(ValueError, match="Valeur invalide pour f"):
            parse_list_from_env(123, "f")  # type: ignore


class TestSettings:
    """Tests pour Settings (validateurs, niveau de log, préfixe API)."""

    def test_allowed_origins_from_comma_string(self):
        settings = Settings(ALLOWED_ORIGINS="http://localhost:8081,https://app.berthcare.ca")
        assert settings.ALLOWED_ORIGINS == ["http://localhost:8081", "https://app.berthcare.ca"]

    def test_allowed_origins_default_is_permissive(self):
        assert Settings().ALLOWED_ORIGINS == ["*"]

    def test_trusted_hosts_validator(self):
        result = Settings.assemble_trusted_hosts("localhost,*.berthcare.ca")
        assert result == ["localhost", "*.berthcare.ca"]

    @pytest.mark.parametrize(
        ("environment", "log_level", "expected"),
        [
            ("development", None, "DEBUG"),
            ("test", None, "DEBUG"),
            ("staging", None, "INFO"),
            ("production", None, "INFO"),
            ("production", "warning", "WARNING"),
        ],
    )
    def test_get_log_level(self, environment, log_level, expected):
        settings = Settings(ENVIRONMENT=environment, LOG_LEVEL=log_level)
        assert settings.get_log_level() == expected

    def test_get_api_prefix(self):
        settings = Settings()
        assert settings.get_api_prefix() == "/api/v1"
        assert settings.get_api_prefix("v2") == "/api/v2"

    def test_port_kept_raw(self):
        """PORT n'est pas coercé par Settings: resolve_port s'en charge."""
        assert Settings(PORT="abc").PORT == "abc"
        assert Settings(PORT=8080).PORT == 8080

    def test_otel_resource(self):
        settings = Settings(OTEL_SERVICE_NAME="berthcare-backend", ENVIRONMENT="staging")

        attributes = settings.OTEL_RESOURCE_ATTRIBUTES.attributes

        assert attributes["service.name"] == "berthcare-backend"
        assert attributes["deployment.environment"] == "staging"
        assert attributes["service.debug"] == "false"

    def test_otel_environment_for_auto_instrumentation(self):
        settings = Settings(
            OTEL_SERVICE_NAME="berthcare-backend",
            OTEL_EXPORTER_OTLP_ENDPOINT="http://collector:4317",
            OTEL_TRACES_EXPORTER="console",
            ENVIRONMENT="production",
        )

        env = settings.otel_environment()

        assert env["OTEL_SERVICE_NAME"] == "berthcare-backend"
        assert env["OTEL_EXPORTER_OTLP_ENDPOINT"] == "http://collector:4317"
        assert env["OTEL_EXPORTER_OTLP_INSECURE"] == "true"
        assert env["OTEL_TRACES_EXPORTER"] == "console"
        assert "deployment.environment=production" in env["OTEL_RESOURCE_ATTRIBUTES"].split(",")
