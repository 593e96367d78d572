"""
Tests for configuration loading
"""

import pytest
from pydantic import ValidationError

from paramount.config import Environment, LogLevel, ReporterMode, get_config, load_config, reload_config
from paramount.errors import ConfigurationError


class TestLoadConfig:
    """Test load_config() and friends."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("PARAMOUNT_ENVIRONMENT", "PARAMOUNT_LOG_LEVEL", "PARAMOUNT_ENABLED", "PARAMOUNT_REPORTER"):
            monkeypatch.delenv(name, raising=False)

        config = reload_config()

        assert config.environment == Environment.DEVELOPMENT
        assert config.log_level == LogLevel.INFO
        assert config.enabled is True
        assert config.reporter == ReporterMode.RAISE
        assert config.json_logs is False

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("PARAMOUNT_ENVIRONMENT", "Production")
        monkeypatch.setenv("PARAMOUNT_LOG_LEVEL", "warning")
        monkeypatch.setenv("PARAMOUNT_ENABLED", "false")
        monkeypatch.setenv("PARAMOUNT_REPORTER", "LOG")
        monkeypatch.setenv("PARAMOUNT_JSON_LOGS", "1")

        config = reload_config()

        assert config.environment == Environment.PRODUCTION
        assert config.log_level == LogLevel.WARNING
        assert config.enabled is False
        assert config.reporter == ReporterMode.LOG
        assert config.json_logs is True

    def test_env_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("PARAMOUNT_REPORTER", raising=False)
        env_file = tmp_path / "paramount.env"
        env_file.write_text("PARAMOUNT_REPORTER=log\n")

        # load_dotenv writes into os.environ; monkeypatch restores the unset state
        config = reload_config(env_file=str(env_file))

        assert config.reporter == ReporterMode.LOG

    def test_invalid_value_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("PARAMOUNT_REPORTER", "explode")

        with pytest.raises(ConfigurationError) as exc_info:
            reload_config()

        assert "validation_errors" in exc_info.value.details

    def test_config_is_cached(self):
        first = get_config()

        assert load_config() is first
        assert get_config() is first

    def test_config_is_frozen(self):
        config = get_config()

        with pytest.raises(ValidationError):
            config.enabled = False  # type: ignore[misc]
