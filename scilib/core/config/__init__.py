"""
Configuration management for scilib.

This module provides centralized configuration management with validation,
environment variable support, and JSON/YAML file loading.
"""

from .settings import (
    ScilibConfig,
    get_config,
    set_config,
    reset_config,
    update_config,
    load_config_from_env,
)
from .loader import (
    ConfigLoader,
    JSONConfigLoader,
    YAMLConfigLoader,
    ConfigLoadError,
    ConfigSaveError,
    UnsupportedFormatError,
    get_config_loader,
    load_config_file,
    save_config_file,
)

__all__ = [
    # Configuration classes
    "ScilibConfig",
    # Global config functions
    "get_config",
    "set_config",
    "reset_config",
    "update_config",
    "load_config_from_env",
    # Loader classes
    "ConfigLoader",
    "JSONConfigLoader",
    "YAMLConfigLoader",
    "ConfigLoadError",
    "ConfigSaveError",
    "UnsupportedFormatError",
    "get_config_loader",
    "load_config_file",
    "save_config_file",
]
