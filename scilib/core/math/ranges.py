"""
Range helpers for building sample series.
"""

import numpy as np

from ..base.exceptions import ValidationError
from ..base.validation import validate_real


def linear(start: float, end: float, n: int) -> np.ndarray:
    """``n`` evenly spaced values from ``start`` to ``end``, both included.
    
    Parameters
    ----------
    start : float
        First value
    end : float
        Last value
    n : int
        Number of points (at least 1)
        
    Returns
    -------
    np.ndarray
        The range as a float array
    
    Examples
    --------
    >>> linear(0, 5, 6).tolist()
    [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    """
    start = validate_real(start, "start")
    end = validate_real(end, "end")
    
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ValidationError("n must be a positive integer", field="n", value=n)
    
    return np.linspace(start, end, int(n))
