"""
Core functionality for scilib with minimal dependencies.

This module provides the foundational components: exceptions, validation,
the spherical coordinate type, series statistics and configuration.
"""

from scilib.core.base import (
    ScilibError,
    ValidationError,
    ConfigurationError,
    StatisticsError,
    EmptyInputError,
    LengthMismatchError,
    DegenerateRangeError,
    GeometryError,
    DivideByZeroError,
    SphericalPoint,
)
from scilib.core.config import (
    get_config,
    set_config,
    reset_config,
    ScilibConfig,
)
from scilib.core.log_manager import LogManager, setup_logging

__all__ = [
    # Exceptions
    "ScilibError",
    "ValidationError",
    "ConfigurationError",
    "StatisticsError",
    "EmptyInputError",
    "LengthMismatchError",
    "DegenerateRangeError",
    "GeometryError",
    "DivideByZeroError",
    # Coordinates
    "SphericalPoint",
    # Configuration
    "get_config",
    "set_config",
    "reset_config",
    "ScilibConfig",
    # Logging
    "LogManager",
    "setup_logging",
]
