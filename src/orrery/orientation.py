"""Orientation quaternion builder — body pole and spin angle to a scene-frame rotation.

The body frame follows the IAU convention: +y is the north pole, +x points at
the prime meridian. The prime meridian starts at the ascending node of the
body equator on the Earth equator (Q = EQJ north x pole) and advances by W
about the pole.

Quaternions are (x, y, z, w) tuples, the component order three.js and most
scene graphs expect.
"""

import math

import numpy as np

from orrery.frames import EQJ_NORTH_SCENE, EQJ_Y_SCENE
from orrery.models import Vec3
from orrery.vectors import add, cross, dot, magnitude, normalize, scale, subtract, to_array

Quaternion = tuple[float, float, float, float]

# Above this |pole . EQJ north| the node cross product loses precision
DEGENERATE_DOT_THRESHOLD = 0.9999


def _node_axis(pole: Vec3) -> Vec3:
    if abs(dot(pole, EQJ_NORTH_SCENE)) > DEGENERATE_DOT_THRESHOLD:
        # Pole (anti)parallel to Earth's: use RA = 90 deg projected onto the body equator
        return normalize(subtract(EQJ_Y_SCENE, scale(pole, dot(EQJ_Y_SCENE, pole))))
    return normalize(cross(EQJ_NORTH_SCENE, pole))


def _rotate_about(v: Vec3, axis: Vec3, angle_deg: float) -> Vec3:
    """Rodrigues rotation of `v` about unit `axis`, right-handed."""
    theta = math.radians(angle_deg)
    c, s = math.cos(theta), math.sin(theta)
    return add(
        add(scale(v, c), scale(cross(axis, v), s)),
        scale(axis, dot(axis, v) * (1.0 - c)),
    )


def prime_meridian_axis(north_pole: Vec3, spin_deg: float, texture_offset_deg: float = 0.0) -> Vec3:
    """Unit vector from the body center through the prime meridian on the equator."""
    pole = normalize(north_pole)
    if magnitude(pole) == 0:
        raise ValueError("north_pole must be non-zero")
    return normalize(_rotate_about(_node_axis(pole), pole, spin_deg + texture_offset_deg))


def _matrix_to_quaternion(m: np.ndarray) -> Quaternion:
    """Shepperd's method, branching on the largest diagonal term for stability."""
    m11, m12, m13 = m[0]
    m21, m22, m23 = m[1]
    m31, m32, m33 = m[2]
    trace = m11 + m22 + m33

    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (m32 - m23) * s
        y = (m13 - m31) * s
        z = (m21 - m12) * s
    elif m11 > m22 and m11 > m33:
        s = 2.0 * math.sqrt(1.0 + m11 - m22 - m33)
        w = (m32 - m23) / s
        x = 0.25 * s
        y = (m12 + m21) / s
        z = (m13 + m31) / s
    elif m22 > m33:
        s = 2.0 * math.sqrt(1.0 + m22 - m11 - m33)
        w = (m13 - m31) / s
        x = (m12 + m21) / s
        y = 0.25 * s
        z = (m23 + m32) / s
    else:
        s = 2.0 * math.sqrt(1.0 + m33 - m11 - m22)
        w = (m21 - m12) / s
        x = (m13 + m31) / s
        y = (m23 + m32) / s
        z = 0.25 * s

    norm = math.sqrt(x * x + y * y + z * z + w * w)
    return (float(x / norm), float(y / norm), float(z / norm), float(w / norm))


def compute_body_quaternion(
    north_pole: Vec3, spin_deg: float, texture_offset_deg: float = 0.0
) -> Quaternion:
    """Scene rotation taking the body frame onto the body's orientation.

    Args:
        north_pole: North pole in scene coordinates. Need not be unit length.
        spin_deg: Prime meridian angle W in degrees.
        texture_offset_deg: Added to W to line a texture's longitude 0 up with
            the prime meridian.

    Returns:
        Unit quaternion (x, y, z, w).

    Raises:
        ValueError: If `north_pole` is the zero vector.
    """
    pole = normalize(north_pole)
    meridian = prime_meridian_axis(pole, spin_deg, texture_offset_deg)
    third = cross(meridian, pole)

    basis = np.column_stack([to_array(meridian), to_array(pole), to_array(third)])
    return _matrix_to_quaternion(basis)


def rotate_vector(q: Quaternion, v: Vec3) -> Vec3:
    """Apply unit quaternion `q` to `v`."""
    x, y, z, w = q
    u = Vec3(x, y, z)
    t = scale(cross(u, v), 2.0)
    return add(add(v, scale(t, w)), cross(u, t))


def basis_from_quaternion(q: Quaternion) -> tuple[Vec3, Vec3, Vec3]:
    """Body axes in scene coordinates: (prime meridian, north pole, third axis)."""
    return (
        rotate_vector(q, Vec3(1.0, 0.0, 0.0)),
        rotate_vector(q, Vec3(0.0, 1.0, 0.0)),
        rotate_vector(q, Vec3(0.0, 0.0, 1.0)),
    )
