import dataclasses

import pytest
import numpy as np

from scilib.core.base.coordinates import SphericalPoint
from scilib.core.base.exceptions import DivideByZeroError, GeometryError, ValidationError


@pytest.fixture
def point():
    return SphericalPoint(1, 0.2, 2.1)


# --- construction ---
def test_default_is_origin():
    assert SphericalPoint() == SphericalPoint(0.0, 0.0, 0.0)
    assert SphericalPoint.origin() == SphericalPoint()


def test_from_values_converts_to_float():
    p = SphericalPoint.from_values(1, np.float32(0.5), np.int64(2))
    assert p == SphericalPoint(1.0, 0.5, 2.0)
    assert all(type(v) is float for v in p.as_tuple())


def test_from_values_matches_literal():
    assert SphericalPoint.from_values(1, 0.12, 2.8) == SphericalPoint(r=1.0, theta=0.12, phi=2.8)


@pytest.mark.parametrize("bad", ["1.0", None, [1.0], True])
def test_constructor_rejects_non_real(bad):
    with pytest.raises(ValidationError, match="must be a real number"):
        SphericalPoint(bad, 0.0, 0.0)


def test_no_validation_or_normalisation():
    p = SphericalPoint(-2.0, 10.0, -7.0)
    assert p.as_tuple() == (-2.0, 10.0, -7.0)


def test_point_is_immutable(point):
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.r = 5.0


# --- arithmetic ---
def test_multiplication_scales_radius_only(point):
    assert point * 2 == SphericalPoint(2, 0.2, 2.1)


def test_right_multiplication(point):
    assert 2.0 * point == SphericalPoint(2, 0.2, 2.1)
    assert np.float64(3.0) * point == SphericalPoint(3, 0.2, 2.1)


def test_in_place_multiplication(point):
    original = point
    point *= 2
    assert point == SphericalPoint(2, 0.2, 2.1)
    assert original == SphericalPoint(1, 0.2, 2.1)


def test_division_scales_radius_only():
    assert SphericalPoint(2, 0.2, 2.1) / 2 == SphericalPoint(1, 0.2, 2.1)


def test_in_place_division():
    p = SphericalPoint(2, 0.2, 2.1)
    p /= 2
    assert p == SphericalPoint(1, 0.2, 2.1)


@pytest.mark.parametrize("zero", [0, 0.0, -0.0, np.float64(0.0)])
def test_division_by_zero(point, zero):
    with pytest.raises(DivideByZeroError, match="divide a spherical point by zero"):
        point / zero


def test_divide_by_zero_error_hierarchy(point):
    with pytest.raises(ZeroDivisionError):
        point / 0
    with pytest.raises(GeometryError):
        point / 0


def test_negation_flips_radius_only(point):
    assert -point == SphericalPoint(-1, 0.2, 2.1)
    assert -(-point) == point


@pytest.mark.parametrize("other", ["2", [2], None])
def test_non_scalar_operands_unsupported(point, other):
    with pytest.raises(TypeError):
        point * other
    with pytest.raises(TypeError):
        point / other


def test_points_do_not_add(point):
    with pytest.raises(TypeError):
        point + point


# --- rendering ---
def test_str(point):
    assert str(point) == "r=1 :: theta=0.2 :: phi=2.1"


def test_str_after_negation(point):
    assert str(-point) == "r=-1 :: theta=0.2 :: phi=2.1"


@pytest.mark.parametrize("p,expected", [
    (SphericalPoint(1e21, 0.1 + 0.2, 0), "r=1000000000000000000000 :: theta=0.30000000000000004 :: phi=0"),
    (SphericalPoint(1e-7, -2.5, 3), "r=0.0000001 :: theta=-2.5 :: phi=3"),
])
def test_str_never_uses_exponents(p, expected):
    assert str(p) == expected


def test_operators_are_documented():
    for name in ("__mul__", "__truediv__", "__neg__"):
        assert getattr(SphericalPoint, name).__doc__
