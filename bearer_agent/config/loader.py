"""Read agent settings from a YAML file."""

import os
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .models import AgentConfig


ENV_VAR_PATTERN = re.compile(r'\$\{(\w+)\}')


class ConfigLoader:
    """Turn a ``bearer.yaml`` style file into an AgentConfig."""

    @staticmethod
    def load_from_file(config_path: Union[str, Path]) -> AgentConfig:
        """
        Parse ``config_path`` and validate it as an AgentConfig.

        Keys are AgentConfig field names. String values may reference the
        environment as ``${VAR}``; an unset variable expands to the empty
        string, which for ``secret_key`` means reporting stays off. An empty
        file yields the defaults.

        Raises:
            FileNotFoundError: The path does not exist
            yaml.YAMLError: The file is not valid YAML
            ValueError: The document is not a mapping
            pydantic.ValidationError: A value is rejected by AgentConfig
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        raw = ConfigLoader._read_mapping(path)
        return AgentConfig(**ConfigLoader._substitute_env_vars(raw))

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with path.open('r') as f:
            document = yaml.safe_load(f)

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(
                f"{path}: expected a mapping at top level, got {type(document).__name__}"
            )
        return document

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """Expand ``${VAR}`` in every string found in nested dicts and lists."""
        if isinstance(obj, dict):
            return {k: ConfigLoader._substitute_env_vars(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [ConfigLoader._substitute_env_vars(item) for item in obj]
        if isinstance(obj, str):
            return ENV_VAR_PATTERN.sub(lambda m: os.getenv(m.group(1), ''), obj)
        return obj
