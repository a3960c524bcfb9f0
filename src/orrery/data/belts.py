"""Asteroid and debris belt definitions and seeded point generators.

Sources:
- Main belt: LPI "Asteroids: New Challenges, New Targets"
- Kuiper belt: NASA Science
- Jupiter Trojans: JPL Small-Body Database

Generated points are in AU, in scene axis order: (x, y, z) with y the height
above the ecliptic plane.
"""

import math
from typing import Literal

import numpy as np

from orrery.data.physical import SEMI_MAJOR_AXIS_AU
from orrery.models import BeltDefinition, Body

# Inner edge near the Mars zone, outer edge near the 2:1 Jupiter resonance
MAIN_ASTEROID_BELT = BeltDefinition(
    name="Main Asteroid Belt",
    inner_radius_au=2.06,
    outer_radius_au=3.27,
    thickness_au=0.5,
    inclination_spread_deg=20,
    source="https://www.lpi.usra.edu/exploration/education/hsResearch/asteroid_101/",
)

KUIPER_BELT = BeltDefinition(
    name="Kuiper Belt",
    inner_radius_au=30,
    outer_radius_au=50,
    thickness_au=10,
    inclination_spread_deg=15,
    source="https://science.nasa.gov/solar-system/kuiper-belt/facts/",
)

SCATTERED_DISC = BeltDefinition(
    name="Scattered Disc",
    inner_radius_au=30,
    outer_radius_au=100,
    thickness_au=30,
    inclination_spread_deg=30,
    source="https://science.nasa.gov/solar-system/kuiper-belt/",
)

JUPITER_TROJANS_L4 = BeltDefinition(
    name="Jupiter Trojans (L4 - Greek Camp)",
    inner_radius_au=5.0,
    outer_radius_au=5.4,
    thickness_au=0.3,
    inclination_spread_deg=15,
    source="https://ssd.jpl.nasa.gov/",
)

JUPITER_TROJANS_L5 = BeltDefinition(
    name="Jupiter Trojans (L5 - Trojan Camp)",
    inner_radius_au=5.0,
    outer_radius_au=5.4,
    thickness_au=0.3,
    inclination_spread_deg=15,
    source="https://ssd.jpl.nasa.gov/",
)

ALL_BELTS: tuple[BeltDefinition, ...] = (
    MAIN_ASTEROID_BELT,
    KUIPER_BELT,
    SCATTERED_DISC,
    JUPITER_TROJANS_L4,
    JUPITER_TROJANS_L5,
)

# 1-sigma libration spread around L4/L5
_TROJAN_ANGLE_SIGMA_RAD = math.pi / 6
_TROJAN_RADIAL_SPREAD_AU = 0.8
_TROJAN_INCLINATION_SPREAD_RAD = 0.3


def generate_belt_points(belt: BeltDefinition, count: int, seed: int = 42) -> np.ndarray:
    """Generate a statistical distribution of points within a belt.

    Radii are area-weighted so surface density is uniform across the annulus;
    inclinations are normally distributed with the belt's 1-sigma spread.

    Args:
        belt: Belt definition.
        count: Number of points. Zero yields an empty (0, 3) array.
        seed: Generator seed. Same seed, same points.

    Returns:
        Array of shape (count, 3) with (x, y, z) positions in AU.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = np.random.default_rng(seed)

    r_inner_sq = belt.inner_radius_au**2
    r_outer_sq = belt.outer_radius_au**2
    r = np.sqrt(r_inner_sq + rng.random(count) * (r_outer_sq - r_inner_sq))
    theta = rng.random(count) * 2 * math.pi
    inclination = np.radians(rng.normal(0.0, belt.inclination_spread_deg, count))

    return np.column_stack((r * np.cos(theta), r * np.sin(inclination), r * np.sin(theta)))


def generate_trojan_points(
    jupiter_angle: float,
    lagrange_point: Literal["L4", "L5"],
    count: int,
    seed: int = 42,
) -> np.ndarray:
    """Generate Trojan asteroid positions librating around a Jupiter Lagrange point.

    Args:
        jupiter_angle: Jupiter's current orbital angle in radians.
        lagrange_point: "L4" (60° ahead of Jupiter) or "L5" (60° behind).
        count: Number of points.
        seed: Generator seed.

    Returns:
        Array of shape (count, 3) with (x, y, z) positions in AU.

    Raises:
        ValueError: On an unknown Lagrange point or a negative count.
    """
    if lagrange_point not in ("L4", "L5"):
        raise ValueError(f"lagrange_point must be 'L4' or 'L5', got {lagrange_point!r}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = np.random.default_rng(seed)

    offset = math.pi / 3 if lagrange_point == "L4" else -math.pi / 3
    angle = jupiter_angle + offset + rng.normal(0.0, _TROJAN_ANGLE_SIGMA_RAD, count)
    r = SEMI_MAJOR_AXIS_AU[Body.JUPITER] + (rng.random(count) - 0.5) * _TROJAN_RADIAL_SPREAD_AU
    inclination = (rng.random(count) - 0.5) * _TROJAN_INCLINATION_SPREAD_RAD

    return np.column_stack((r * np.cos(angle), r * np.sin(inclination), r * np.sin(angle)))
