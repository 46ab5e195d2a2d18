"""Environment settings for the agent."""

import os

from .constants import CONFIG_URL, LOGS_URL
from .models import AgentConfig


class Settings:
    """Agent settings read from environment variables."""

    SECRET_KEY_VAR = "BEARER_SECRET_KEY"
    LOG_LEVEL_VAR = "BEARER_LOG_LEVEL"
    LOGS_URL_VAR = "BEARER_LOGS_URL"
    CONFIG_URL_VAR = "BEARER_CONFIG_URL"

    @staticmethod
    def get(key: str, default: str = "") -> str:
        """Read ``key`` from the environment; unset or empty gives ``default``."""
        return os.getenv(key) or default

    @classmethod
    def load(cls) -> AgentConfig:
        """
        Build an AgentConfig from the environment.

        A missing secret key is not an error: it leaves reporting disabled.

        Returns:
            AgentConfig: Validated configuration

        Raises:
            pydantic.ValidationError: If a URL or log level is malformed
        """
        return AgentConfig(
            secret_key=cls.get(cls.SECRET_KEY_VAR),
            log_level=cls.get(cls.LOG_LEVEL_VAR, "WARNING"),
            logs_url=cls.get(cls.LOGS_URL_VAR, LOGS_URL),
            config_url=cls.get(cls.CONFIG_URL_VAR, CONFIG_URL),
        )
