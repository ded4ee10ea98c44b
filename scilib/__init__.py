"""
scilib: spherical coordinates and basic statistics over numeric series.
"""

import logging

__version__ = "0.1.0"
__author__ = "scilib developers"

from scilib.core.base.exceptions import (
    ScilibError,
    EmptyInputError,
    LengthMismatchError,
    DegenerateRangeError,
    DivideByZeroError,
)
from scilib.core.base.coordinates import SphericalPoint
from scilib.core.config import get_config, ScilibConfig
from scilib.core.log_manager import setup_logging
from scilib.core.math import (
    max_value,
    min_value,
    mean,
    std_dev,
    pearson_r,
    scale_min_max,
    linear,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [
    "__version__",
    "ScilibError",
    "EmptyInputError",
    "LengthMismatchError",
    "DegenerateRangeError",
    "DivideByZeroError",
    "SphericalPoint",
    "get_config",
    "ScilibConfig",
    "setup_logging",
    "max_value",
    "min_value",
    "mean",
    "std_dev",
    "pearson_r",
    "scale_min_max",
    "linear",
]


def get_version():
    """Get the version string."""
    return __version__


def get_info():
    """Get package information."""
    return {
        "version": __version__,
        "author": __author__,
    }
