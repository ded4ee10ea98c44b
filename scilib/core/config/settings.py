"""
Configuration settings and management for scilib.

This module provides centralized configuration management with validation,
type checking, and environment variable support. The configuration class
uses a dataclass for clean, type-safe configuration handling.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional
from pathlib import Path
import logging

from ..base.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

# Global configuration instance
_global_config: Optional["ScilibConfig"] = None

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ScilibConfig:
    """Library-wide configuration.
    
    Controls how strictly series inputs are checked and how the package
    logger is set up.
    """
    
    # Input validation
    validate_input: bool = True
    allow_non_finite: bool = False
    
    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    
    def __post_init__(self):
        """Post-initialization validation and setup."""
        if self.log_file is not None:
            self.log_file = Path(self.log_file)
        
        self.validate()
    
    def validate(self) -> None:
        """Validate configuration parameters.
        
        Raises
        ------
        ConfigurationError
            If any configuration parameter is invalid
        """
        errors = []
        
        for flag in ("validate_input", "allow_non_finite"):
            if not isinstance(getattr(self, flag), bool):
                errors.append(f"{flag} must be a boolean")
        
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of {VALID_LOG_LEVELS}")
        
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.
        
        Returns
        -------
        dict
            Dictionary representation of configuration
        """
        result = {}
        for key, value in self.__dict__.items():
            if isinstance(value, Path):
                result[key] = str(value)
            else:
                result[key] = value
        return result
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScilibConfig":
        """Create configuration from dictionary.
        
        Raises
        ------
        ConfigurationError
            If the dictionary contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration parameters: {unknown}")
        
        data = dict(data)
        if data.get('log_file') is not None:
            data['log_file'] = Path(data['log_file'])
        
        return cls(**data)
    
    def update(self, **kwargs) -> None:
        """Update configuration parameters.
        
        Raises
        ------
        ConfigurationError
            If unknown parameter or validation fails
        """
        known = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in known:
                raise ConfigurationError(f"Unknown configuration parameter: {key}", parameter=key)
        
        # Validate a candidate first so a failed update leaves self untouched
        candidate = replace(self, **kwargs)
        for f in fields(self):
            setattr(self, f.name, getattr(candidate, f.name))
    
    def get_log_level(self) -> int:
        """Numeric logging level for ``log_level``."""
        return getattr(logging, self.log_level.upper())


def get_config() -> ScilibConfig:
    """Get the global configuration instance.
    
    Returns
    -------
    ScilibConfig
        Global configuration instance
    """
    global _global_config
    if _global_config is None:
        _global_config = ScilibConfig()
    return _global_config


def set_config(config: ScilibConfig) -> None:
    """Set the global configuration instance.
    
    Raises
    ------
    TypeError
        If config is not a ScilibConfig instance
    """
    global _global_config
    if not isinstance(config, ScilibConfig):
        raise TypeError("config must be a ScilibConfig instance")
    config.validate()
    _global_config = config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _global_config
    _global_config = ScilibConfig()


def update_config(**kwargs) -> None:
    """Update global configuration parameters."""
    config = get_config()
    config.update(**kwargs)


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes', 'on')


def load_config_from_env() -> ScilibConfig:
    """Load configuration from environment variables.
    
    Returns
    -------
    ScilibConfig
        Configuration loaded from environment
    """
    config = ScilibConfig()
    
    # Map environment variables to config attributes
    env_mapping = {
        'SCILIB_VALIDATE_INPUT': 'validate_input',
        'SCILIB_ALLOW_NON_FINITE': 'allow_non_finite',
        'SCILIB_LOG_LEVEL': 'log_level',
        'SCILIB_LOG_FILE': 'log_file',
    }
    
    updates = {}
    for env_var, attr_name in env_mapping.items():
        if env_var in os.environ:
            value = os.environ[env_var]
            
            if attr_name == 'log_file':
                if value:  # Only convert if not empty
                    updates[attr_name] = Path(value)
            elif attr_name in ['validate_input', 'allow_non_finite']:
                updates[attr_name] = _parse_bool(value)
            else:
                updates[attr_name] = value
    
    if updates:
        config.update(**updates)
        logger.info(f"Updated configuration from environment variables: {list(updates.keys())}")
    
    return config
