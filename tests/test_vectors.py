"""Tests for the vector math kernel."""

import math

import numpy as np
import pytest

from orrery.models import ZERO, Vec3
from orrery.vectors import (
    add,
    cross,
    dot,
    from_array,
    lerp,
    magnitude,
    normalize,
    scale,
    subtract,
    to_array,
)


class TestNormalize:

    def test_zero_vector_stays_zero(self):
        """Normalizing the zero vector never produces NaN."""
        result = normalize(ZERO)
        assert result == ZERO
        assert not any(math.isnan(c) for c in (result.x, result.y, result.z))

    def test_unit_length(self):
        result = normalize(Vec3(3.0, 4.0, 12.0))
        assert magnitude(result) == pytest.approx(1.0, abs=1e-15)
        assert result.x == pytest.approx(3.0 / 13.0)

    def test_tiny_vector(self):
        result = normalize(Vec3(1e-300, 0.0, 0.0))
        assert result.x == pytest.approx(1.0)


class TestArithmetic:

    def test_magnitude(self):
        assert magnitude(Vec3(2.0, 3.0, 6.0)) == 7.0

    def test_magnitude_of_tiny_vector_is_nonzero(self):
        """Squaring 1e-300 underflows; the magnitude must not."""
        assert magnitude(Vec3(1e-300, 0.0, 0.0)) == pytest.approx(1e-300, rel=1e-12, abs=0.0)
        assert magnitude(Vec3(3e-200, 4e-200, 0.0)) == pytest.approx(5e-200, rel=1e-12, abs=0.0)

    def test_add_subtract_inverse(self):
        a, b = Vec3(1.0, -2.0, 3.5), Vec3(0.25, 4.0, -1.0)
        assert subtract(add(a, b), b) == a

    def test_scale(self):
        assert scale(Vec3(1.0, -2.0, 3.0), -2.0) == Vec3(-2.0, 4.0, -6.0)

    def test_dot(self):
        assert dot(Vec3(1.0, 2.0, 3.0), Vec3(4.0, -5.0, 6.0)) == 12.0

    def test_cross_is_right_handed(self):
        x, y, z = Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)
        assert cross(x, y) == z
        assert cross(y, z) == x
        assert cross(z, x) == y

    def test_cross_is_perpendicular(self):
        a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
        c = cross(a, b)
        assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
        assert dot(c, b) == pytest.approx(0.0, abs=1e-12)


class TestLerp:

    def test_endpoints(self):
        a, b = Vec3(0.0, 0.0, 0.0), Vec3(2.0, 4.0, -6.0)
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b

    def test_extrapolates(self):
        """t outside [0, 1] is not clamped."""
        assert lerp(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), 2.0) == Vec3(2.0, 2.0, 2.0)
        assert lerp(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), -1.0) == Vec3(-1.0, -1.0, -1.0)


class TestNumpyBridge:

    def test_round_trip(self):
        v = Vec3(1.5, -2.5, 3.25)
        arr = to_array(v)
        assert isinstance(arr, np.ndarray)
        assert arr.shape == (3,)
        assert from_array(arr) == v

    def test_from_array_returns_python_floats(self):
        v = from_array(np.array([1, 2, 3], dtype=np.float32))
        assert type(v.x) is float
