"""Common utilities for Inkwell."""

from .logger import configure_logging
from .config import (
    AccessConfig,
    LoggingConfig,
    RoleConfigError,
    load_access_config,
    load_config,
    load_typed_config,
)
from .settings import Settings, get_settings

__all__ = [
    "AccessConfig",
    "LoggingConfig",
    "RoleConfigError",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_access_config",
    "load_config",
    "load_typed_config",
]
