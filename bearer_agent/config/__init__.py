"""Agent configuration."""

from .loader import ConfigLoader
from .models import AgentConfig
from .settings import Settings

__all__ = ["AgentConfig", "ConfigLoader", "Settings"]
