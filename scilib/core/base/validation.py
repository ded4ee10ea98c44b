"""
Validation utilities for series inputs and scalar arguments.

Series are normalised to one-dimensional float arrays here so the
statistics functions can rely on a consistent representation.
"""

import numbers
from typing import Any, Optional, Sequence, Union

import numpy as np

from .exceptions import ValidationError, EmptyInputError, LengthMismatchError
from ..config.settings import ScilibConfig, get_config


SeriesLike = Union[Sequence[float], np.ndarray]


def as_series(values: SeriesLike, name: str = "series",
              operation: Optional[str] = None,
              config: Optional[ScilibConfig] = None) -> np.ndarray:
    """Convert ``values`` to a non-empty 1-D float array.
    
    Parameters
    ----------
    values : sequence of float or np.ndarray
        Input series
    name : str
        Argument name used in error messages
    operation : str, optional
        Calling operation, recorded on raised errors
    config : ScilibConfig, optional
        Configuration to honour (default: global configuration)
        
    Returns
    -------
    np.ndarray
        Float array view of the series
        
    Raises
    ------
    ValidationError
        If the input is not a one-dimensional numeric sequence, or contains
        non-finite values while the configuration forbids them
    EmptyInputError
        If the series has no elements
    """
    config = config or get_config()
    
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a sequence of real numbers", field=name, cause=e) from e

    # strings, bools and objects are not silently cast
    if raw.dtype.kind not in "iuf":
        raise ValidationError(f"{name} must be a sequence of real numbers, got dtype {raw.dtype}",
                              field=name)

    series = raw.astype(float, copy=False)

    if series.ndim != 1:
        raise ValidationError(f"{name} must be one-dimensional, got {series.ndim} dimensions",
                              field=name)
    
    if series.size == 0:
        raise EmptyInputError(f"{name} must contain at least one element", operation=operation)
    
    if config.validate_input and not config.allow_non_finite:
        if not np.all(np.isfinite(series)):
            raise ValidationError(f"{name} contains NaN or infinite values", field=name)
    
    return series


def validate_same_length(x: np.ndarray, y: np.ndarray,
                         operation: Optional[str] = None) -> None:
    """Ensure two series can be paired element by element.
    
    Raises
    ------
    LengthMismatchError
        If the series lengths differ
    """
    if len(x) != len(y):
        raise LengthMismatchError(
            f"Series lengths differ: {len(x)} != {len(y)}",
            length_x=len(x), length_y=len(y), operation=operation,
        )


def is_real_scalar(value: Any) -> bool:
    """True for ints, floats and numpy real scalars (bools excluded)."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_real(value: Any, name: str) -> float:
    """Return ``value`` as a float or raise :class:`ValidationError`."""
    if not is_real_scalar(value):
        raise ValidationError(f"{name} must be a real number, got {type(value).__name__}",
                              field=name, value=value)
    return float(value)
