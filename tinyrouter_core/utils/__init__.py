"""Utils module - Configuration utilities."""

from tinyrouter_core.utils.config import (
    RouterConfig,
    configure_logging,
    load_config,
)

__all__ = [
    "RouterConfig",
    "configure_logging",
    "load_config",
]
