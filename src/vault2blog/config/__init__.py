"""Configuration: the process-wide directory store, runtime settings, logging."""

from vault2blog.config.models import Config, ConfigSource, ExplicitSource, IntegratedSource
from vault2blog.config.store import ConfigStore

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigStore",
    "ExplicitSource",
    "IntegratedSource",
]
