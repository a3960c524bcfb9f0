"""Vector math kernel — pure functions over Vec3.

All inputs are assumed finite. Nothing here can fail.
"""

import math

import numpy as np

from orrery.models import ZERO, Vec3


def magnitude(v: Vec3) -> float:
    return math.hypot(v.x, v.y, v.z)


def normalize(v: Vec3) -> Vec3:
    """Return `v` scaled to unit length.

    A zero vector normalizes to the zero vector rather than the NaN vector
    IEEE-754 division would give. Callers that need a direction from a
    possibly-zero vector check the magnitude themselves.
    """
    m = magnitude(v)
    if m == 0:
        return ZERO
    return Vec3(v.x / m, v.y / m, v.z / m)


def scale(v: Vec3, s: float) -> Vec3:
    return Vec3(v.x * s, v.y * s, v.z * s)


def add(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vec3, b: Vec3) -> Vec3:
    """a - b."""
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Right-handed cross product: cross(x̂, ŷ) == ẑ."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Affine interpolation. `t` outside [0, 1] extrapolates."""
    return Vec3(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def to_array(v: Vec3) -> np.ndarray:
    return np.array([v.x, v.y, v.z], dtype=float)


def from_array(arr: np.ndarray) -> Vec3:
    return Vec3(float(arr[0]), float(arr[1]), float(arr[2]))
