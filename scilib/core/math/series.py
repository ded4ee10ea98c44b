"""
Basic statistics over numeric series.

Every function accepts any one-dimensional sequence of real numbers
(lists, tuples, numpy arrays) and never modifies its input. Zero-length
input raises :class:`EmptyInputError` instead of producing NaN.
"""

import logging
from typing import Any, Dict

import numpy as np
from scipy import stats

from ..base.exceptions import DegenerateRangeError, StatisticsError
from ..base.validation import SeriesLike, as_series, validate_real, validate_same_length


logger = logging.getLogger(__name__)


def max_value(series: SeriesLike) -> float:
    """Largest element of the series.
    
    Ties resolve to the first occurrence.
    
    Examples
    --------
    >>> max_value([0.0, 1.2, -0.1, 5.2, 0.254, 2.8])
    5.2
    """
    values = as_series(series, operation="max")
    return float(values[np.argmax(values)])


def min_value(series: SeriesLike) -> float:
    """Smallest element of the series.
    
    Examples
    --------
    >>> min_value([0.0, 1.2, -0.1, 5.2, 0.254, 2.8])
    -0.1
    """
    values = as_series(series, operation="min")
    return float(values[np.argmin(values)])


def mean(series: SeriesLike) -> float:
    """Arithmetic mean, ``sum(x) / n``.
    
    Examples
    --------
    >>> mean([0, 1, 2, 3, 4, 5])
    2.5
    """
    values = as_series(series, operation="mean")
    # rounding in the sum must not push the mean outside [min, max]
    return float(np.clip(np.sum(values) / values.size, values.min(), values.max()))


def std_dev(series: SeriesLike) -> float:
    """Population standard deviation of the series.
    
    Uses the denominator ``n`` (not ``n - 1``)::
    
        sigma = sqrt(sum((x_i - m)^2) / n)
    
    where ``m`` is the :func:`mean` of the series.
    """
    values = as_series(series, operation="std_dev")
    if values.min() == values.max():
        return 0.0
    m = mean(values)
    return float(np.sqrt(np.sum((values - m) ** 2) / values.size))


def pearson_r(series_x: SeriesLike, series_y: SeriesLike) -> float:
    """Pearson correlation coefficient between two equal-length series.
    
    Parameters
    ----------
    series_x, series_y : sequence of float
        Paired samples
        
    Returns
    -------
    float
        Correlation coefficient in [-1, 1]
        
    Raises
    ------
    EmptyInputError
        If either series is empty
    LengthMismatchError
        If the series differ in length
    DegenerateRangeError
        If either series has zero variance
    """
    x = as_series(series_x, name="series_x", operation="pearson_r")
    y = as_series(series_y, name="series_y", operation="pearson_r")
    validate_same_length(x, y, operation="pearson_r")
    
    dx = x - mean(x)
    dy = y - mean(y)
    
    sum_xx = float(np.sum(dx * dx))
    sum_yy = float(np.sum(dy * dy))
    if sum_xx == 0.0 or sum_yy == 0.0:
        raise DegenerateRangeError("Correlation is undefined for a constant series",
                                   operation="pearson_r")
    
    r = float(np.sum(dx * dy)) / float(np.sqrt(sum_xx * sum_yy))
    return float(np.clip(r, -1.0, 1.0))


def pearson_test(series_x: SeriesLike, series_y: SeriesLike) -> Dict[str, Any]:
    """Pearson correlation with its two-sided p-value.
    
    Returns
    -------
    dict
        ``correlation``, ``p_value`` and ``n_samples``
    """
    correlation = pearson_r(series_x, series_y)
    x = as_series(series_x, name="series_x", operation="pearson_test")
    y = as_series(series_y, name="series_y", operation="pearson_test")
    
    if x.size < 3:
        raise StatisticsError("Need at least 3 data points for a significance test",
                              operation="pearson_test")
    
    _, p_value = stats.pearsonr(x, y)
    
    return {
        "correlation": correlation,
        "p_value": float(p_value),
        "n_samples": int(x.size),
    }


def scale_min_max(series: SeriesLike, a: float, b: float) -> np.ndarray:
    """Min-max scaling of a series onto ``[a, b]``.
    
    Maps the minimum of the series to ``a`` and its maximum to ``b``::
    
        x_s = a + (x - min(x)) * (b - a) / (max(x) - min(x))
    
    ``a`` may exceed ``b``, in which case the ordering is reversed.
    
    Parameters
    ----------
    series : sequence of float
        The series to scale
    a : float
        Value the minimum maps to
    b : float
        Value the maximum maps to
        
    Returns
    -------
    np.ndarray
        New scaled series
        
    Raises
    ------
    DegenerateRangeError
        If all elements are equal
    
    Examples
    --------
    >>> scale_min_max([1.0, 2.0, 3.0], 0.0, 1.0).tolist()
    [0.0, 0.5, 1.0]
    """
    values = as_series(series, operation="scale_min_max")
    a = validate_real(a, "a")
    b = validate_real(b, "b")
    max_val = max_value(values)
    min_val = min_value(values)
    div = max_val - min_val
    
    if div == 0.0:
        raise DegenerateRangeError(
            f"Cannot scale a series whose elements all equal {max_val}",
            operation="scale_min_max",
        )
    
    logger.debug(f"Scaling {values.size} values from [{min_val}, {max_val}] to [{a}, {b}]")
    return a + (values - min_val) * (b - a) / div


def describe(series: SeriesLike) -> Dict[str, Any]:
    """Summary of a series: count, extremes, mean and population std."""
    values = as_series(series, operation="describe")
    return {
        "n": int(values.size),
        "min": min_value(values),
        "max": max_value(values),
        "mean": mean(values),
        "std": std_dev(values),
    }


class SeriesStatistics:
    """Series statistics grouped for callers that prefer a namespace."""
    
    max = staticmethod(max_value)
    min = staticmethod(min_value)
    mean = staticmethod(mean)
    std_dev = staticmethod(std_dev)
    pearson_r = staticmethod(pearson_r)
    pearson_test = staticmethod(pearson_test)
    scale_min_max = staticmethod(scale_min_max)
    describe = staticmethod(describe)
