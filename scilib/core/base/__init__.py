"""
Base classes and utilities with minimal dependencies.

This module provides the foundational components that other modules build upon:
the exception hierarchy, input validation and the spherical coordinate type.
"""

from .exceptions import (
    ScilibError,
    ValidationError,
    ConfigurationError,
    StatisticsError,
    EmptyInputError,
    LengthMismatchError,
    DegenerateRangeError,
    GeometryError,
    DivideByZeroError,
)
from .validation import (
    as_series,
    validate_same_length,
    validate_real,
    is_real_scalar,
)
from .coordinates import SphericalPoint

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
    # Validation
    "as_series",
    "validate_same_length",
    "validate_real",
    "is_real_scalar",
    # Coordinates
    "SphericalPoint",
]
