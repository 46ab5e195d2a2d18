"""Tests for environment settings and AgentConfig validation."""

import pytest
from pydantic import ValidationError

from bearer_agent.config.constants import CONFIG_URL, LOGS_URL
from bearer_agent.config.models import AgentConfig
from bearer_agent.config.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all agent variables from the environment."""
    for var in (
        Settings.SECRET_KEY_VAR,
        Settings.LOG_LEVEL_VAR,
        Settings.LOGS_URL_VAR,
        Settings.CONFIG_URL_VAR,
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestSettings:
    """Test suite for Settings."""

    def test_get_default(self, clean_env):
        assert Settings.get("BEARER_SECRET_KEY", "fallback") == "fallback"

    def test_get_empty_falls_back(self, clean_env):
        """An empty variable counts as unset."""
        clean_env.setenv("BEARER_LOG_LEVEL", "")

        assert Settings.get("BEARER_LOG_LEVEL", "WARNING") == "WARNING"

    def test_get_unset_is_empty(self, clean_env):
        assert Settings.get("BEARER_SECRET_KEY") == ""

    def test_load_defaults(self, clean_env):
        """With nothing set, reporting is off and endpoints are the public ones."""
        config = Settings.load()

        assert config.secret_key == ""
        assert config.reporting_enabled is False
        assert config.log_level == "WARNING"
        assert config.logs_url == LOGS_URL
        assert config.config_url == CONFIG_URL

    def test_load_from_env(self, clean_env):
        """Every variable is picked up."""
        clean_env.setenv("BEARER_SECRET_KEY", "sk_env")
        clean_env.setenv("BEARER_LOG_LEVEL", "debug")
        clean_env.setenv("BEARER_LOGS_URL", "http://localhost:9000/logs")
        clean_env.setenv("BEARER_CONFIG_URL", "http://localhost:9000/config")

        config = Settings.load()

        assert config.secret_key == "sk_env"
        assert config.reporting_enabled is True
        assert config.log_level == "DEBUG"
        assert config.logs_url == "http://localhost:9000/logs"
        assert config.config_url == "http://localhost:9000/config"


class TestAgentConfig:
    """Test suite for AgentConfig validation."""

    def test_rejects_non_http_url(self):
        with pytest.raises(ValidationError):
            AgentConfig(logs_url="ftp://agent.bearer.sh/logs")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            AgentConfig(log_level="VERBOSE")
