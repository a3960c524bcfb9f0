"""Frame transforms between equatorial J2000, ecliptic J2000, and scene coordinates.

The ephemeris oracle emits equatorial J2000 (EQJ) vectors. Solar system
visualization works in ecliptic J2000 (ECL); the renderer works in a y-up
scene frame. Both rotations and the scene mapping are fixed, so they are
built once at import.
"""

import math
from datetime import datetime

import numpy as np

from orrery.models import Frame, Vec3
from orrery.vectors import from_array, normalize, to_array

# IAU 1976 mean obliquity of the ecliptic at J2000.0
OBLIQUITY_J2000_DEG = 23.4392911

_EPS = math.radians(OBLIQUITY_J2000_DEG)

# Rotation about +x by the obliquity
EQJ_TO_ECL: np.ndarray = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, math.cos(_EPS), math.sin(_EPS)],
        [0.0, -math.sin(_EPS), math.cos(_EPS)],
    ]
)
EQJ_TO_ECL.setflags(write=False)

# Orthogonal, so the transpose is the exact inverse
ECL_TO_EQJ: np.ndarray = EQJ_TO_ECL.T.copy()
ECL_TO_EQJ.setflags(write=False)


class UnsupportedFrameTransform(Exception):
    """Requested frame pair has no defined rotation."""


def rotate_eqj_to_ecl(v: Vec3) -> Vec3:
    return from_array(EQJ_TO_ECL @ to_array(v))


def rotate_ecl_to_eqj(v: Vec3) -> Vec3:
    return from_array(ECL_TO_EQJ @ to_array(v))


def transform_frame(
    v: Vec3, from_frame: Frame, to_frame: Frame, epoch: datetime | None = None
) -> Vec3:
    """Transform a vector between frames.

    Both supported frames are fixed at J2000, so `epoch` does not change the
    result.

    Args:
        v: Vector in `from_frame`.
        from_frame: Source frame.
        to_frame: Destination frame.
        epoch: Epoch of the vector.

    Returns:
        The vector in `to_frame`. `v` itself when the frames are equal.

    Raises:
        UnsupportedFrameTransform: For any pair other than EQJ <-> ECLIPJ2000.
    """
    if from_frame == to_frame:
        return v
    if from_frame == Frame.EQUATORIAL_J2000 and to_frame == Frame.ECLIPTIC_J2000:
        return rotate_eqj_to_ecl(v)
    if from_frame == Frame.ECLIPTIC_J2000 and to_frame == Frame.EQUATORIAL_J2000:
        return rotate_ecl_to_eqj(v)
    raise UnsupportedFrameTransform(f"Unsupported frame transformation: {from_frame} -> {to_frame}")


def ecliptic_to_scene(v: Vec3) -> Vec3:
    """Map ecliptic J2000 to scene coordinates.

    ECL x -> scene x (vernal equinox), ECL z -> scene y (ecliptic north is up),
    ECL y -> scene -z. The sign flip keeps the mapping a proper rotation
    (determinant +1), so cross products, ring normals and orbital angular
    momentum keep their physical direction. Prograde orbits run
    counterclockwise seen from +y.
    """
    return Vec3(v.x, v.z, -v.y)


def scene_to_ecliptic(v: Vec3) -> Vec3:
    """Inverse of `ecliptic_to_scene`."""
    return Vec3(v.x, -v.z, v.y)


def equatorial_to_scene(v: Vec3) -> Vec3:
    return ecliptic_to_scene(rotate_eqj_to_ecl(v))


# Equatorial frame axes expressed in scene coordinates
EQJ_NORTH_SCENE: Vec3 = normalize(equatorial_to_scene(Vec3(0.0, 0.0, 1.0)))
EQJ_X_SCENE: Vec3 = normalize(equatorial_to_scene(Vec3(1.0, 0.0, 0.0)))
EQJ_Y_SCENE: Vec3 = normalize(equatorial_to_scene(Vec3(0.0, 1.0, 0.0)))
