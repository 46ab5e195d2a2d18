"""Pydantic configuration model for the agent."""

from pydantic import BaseModel, field_validator

from .constants import CONFIG_URL, LOGS_URL


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AgentConfig(BaseModel):
    """Settings the host process supplies to the interceptor."""
    secret_key: str = ""  # empty disables reporting
    log_level: str = "WARNING"
    logs_url: str = LOGS_URL
    config_url: str = CONFIG_URL

    @field_validator('logs_url', 'config_url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names, any case."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def reporting_enabled(self) -> bool:
        return bool(self.secret_key)
