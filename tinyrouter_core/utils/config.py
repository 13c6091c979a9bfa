"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")

DEFAULT_ENV_PREFIX = "TINYROUTER_"


@dataclass
class RouterConfig:
    """Router configuration."""

    # Logging
    log_level: Union[str, int] = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    log_dispatch: bool = False

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        try:
            import yaml
        except ImportError:
            raise ImportError("PyYAML required for YAML config")
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_env(cls: Type[T], prefix: str = DEFAULT_ENV_PREFIX) -> T:
        """Load config from environment variables."""
        data = {}

        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()

                # Type conversion
                if value.lower() in ("true", "false"):
                    data[config_key] = value.lower() == "true"
                elif value.isdigit():
                    data[config_key] = int(value)
                else:
                    try:
                        data[config_key] = float(value)
                    except ValueError:
                        data[config_key] = value

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    def merge(self, other: Dict[str, Any]) -> "RouterConfig":
        """Merge with overrides (overrides take precedence)."""
        data = self.to_dict()
        data.update(other)
        return type(self).from_dict(data)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = RouterConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = RouterConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    env_config = RouterConfig.from_env(env_prefix)
    overrides = {
        key: value
        for key, value in env_config.to_dict().items()
        if f"{env_prefix}{key.upper()}" in os.environ
    }
    return config.merge(overrides)


def configure_logging(config: RouterConfig) -> None:
    """Apply the configured level and format to the root logger."""
    level = config.log_level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=config.log_format)


__all__ = [
    "RouterConfig",
    "load_config",
    "configure_logging",
]
