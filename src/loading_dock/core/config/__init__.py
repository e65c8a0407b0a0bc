"""
Configuration model, loading and persistence.

This module provides the Pydantic model for the staging config and the
functions that read and write it as JSON.
"""

from .env import load_layered_env
from .loader import (
    DEFAULT_CONFIG_FILENAME,
    ConfigError,
    ConfigPathError,
    get_default_config_path,
    load_config,
    resolve_config_path,
    save_config,
)
from .models import DockConfig

__all__ = [
    # Models
    "DockConfig",
    # Loader functions
    "DEFAULT_CONFIG_FILENAME",
    "ConfigError",
    "ConfigPathError",
    "get_default_config_path",
    "load_config",
    "resolve_config_path",
    "save_config",
    # Environment
    "load_layered_env",
]
