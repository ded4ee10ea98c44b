"""
Mathematical utilities for scilib.

This module provides statistics over numeric series and range helpers,
using only numpy and scipy.
"""

from .series import (
    max_value,
    min_value,
    mean,
    std_dev,
    pearson_r,
    pearson_test,
    scale_min_max,
    describe,
    SeriesStatistics,
)
from .ranges import linear

__all__ = [
    # Series statistics
    "max_value",
    "min_value",
    "mean",
    "std_dev",
    "pearson_r",
    "pearson_test",
    "scale_min_max",
    "describe",
    "SeriesStatistics",
    # Ranges
    "linear",
]
