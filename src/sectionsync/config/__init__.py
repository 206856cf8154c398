"""Application configuration helpers."""

from __future__ import annotations

from .engine import EdgeWeights, EngineConfig, get_engine_config
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging, get_log_level

__all__ = [
    "ConfigurationError",
    "EdgeWeights",
    "EngineConfig",
    "InvalidConfigurationError",
    "configure_logging",
    "get_engine_config",
    "get_log_level",
]
