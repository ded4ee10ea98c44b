"""
Spherical coordinate value type.

:class:`SphericalPoint` holds a radial distance and two angles in radians.
Scalar arithmetic acts on the radius only, stretching the point along its
ray from the origin. Angles are never normalised.
"""

from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from .exceptions import DivideByZeroError
from .validation import is_real_scalar, validate_real


@dataclass(frozen=True)
class SphericalPoint:
    """Point in 3D space as (r, theta, phi).
    
    Parameters
    ----------
    r : float
        Radial distance (non-negative by convention, not enforced)
    theta : float
        Longitude angle in radians
    phi : float
        Latitude angle in radians
    
    Examples
    --------
    >>> p = SphericalPoint(1, 0.2, 2.1)
    >>> p * 2
    SphericalPoint(r=2.0, theta=0.2, phi=2.1)
    >>> str(-p)
    'r=-1 :: theta=0.2 :: phi=2.1'
    """
    
    r: float = 0.0
    theta: float = 0.0
    phi: float = 0.0

    # numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __post_init__(self):
        """Coerce every field to float."""
        for name in ("r", "theta", "phi"):
            object.__setattr__(self, name, validate_real(getattr(self, name), name))
    
    @classmethod
    def origin(cls) -> "SphericalPoint":
        """Point with every field equal to zero."""
        return cls()
    
    @classmethod
    def from_values(cls, r: Any, theta: Any, phi: Any) -> "SphericalPoint":
        """Create a point from any real numbers (int, float, numpy scalars).
        
        Raises
        ------
        ValidationError
            If a value is not a real number
        """
        return cls(r, theta, phi)
    
    def as_tuple(self) -> Tuple[float, float, float]:
        """Fields as ``(r, theta, phi)``."""
        return self.r, self.theta, self.phi
    
    def __mul__(self, scalar: Any) -> "SphericalPoint":
        """Scalar multiplication of the radius."""
        if not is_real_scalar(scalar):
            return NotImplemented
        return SphericalPoint(self.r * float(scalar), self.theta, self.phi)
    
    __rmul__ = __mul__
    
    def __truediv__(self, scalar: Any) -> "SphericalPoint":
        """Scalar division of the radius."""
        if not is_real_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            raise DivideByZeroError("Cannot divide a spherical point by zero",
                                    details={"point": str(self)})
        return SphericalPoint(self.r / float(scalar), self.theta, self.phi)
    
    def __neg__(self) -> "SphericalPoint":
        """Negation, the same as multiplying by -1.
        
        Flips the radius only; the angles are not rotated.
        """
        return self * -1
    
    def __str__(self) -> str:
        """Display as ``r=<r> :: theta=<theta> :: phi=<phi>``, without exponents."""
        r, theta, phi = (np.format_float_positional(v, trim="-") for v in self.as_tuple())
        return f"r={r} :: theta={theta} :: phi={phi}"
