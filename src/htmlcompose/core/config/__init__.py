"""Configuration loading for htmlcompose."""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .domains import CompositionConfig, LoggingConfig
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "CompositionConfig",
    "LoggingConfig",
    "clear_all_caches",
    "get_cached_config",
]
