"""Data model definitions — explicit boundaries between oracle, physical, and render layers."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal


class Frame(str, Enum):
    """Reference frame of a vector. A vector is meaningless without it."""

    EQUATORIAL_J2000 = "EQJ"  # Earth mean equator and equinox of J2000 (oracle output)
    ECLIPTIC_J2000 = "ECLIPJ2000"  # Mean ecliptic and equinox of J2000


class DistanceUnit(str, Enum):
    AU = "AU"
    KM = "km"
    M = "m"


class Body(str, Enum):
    """Identifiers of every body the core knows about."""

    SUN = "Sun"
    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MOON = "Moon"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"


# Orbital order, innermost first
PLANETS: tuple[Body, ...] = (
    Body.MERCURY,
    Body.VENUS,
    Body.EARTH,
    Body.MARS,
    Body.JUPITER,
    Body.SATURN,
    Body.URANUS,
    Body.NEPTUNE,
)

RINGED_BODIES: tuple[Body, ...] = (Body.JUPITER, Body.SATURN, Body.URANUS, Body.NEPTUNE)


@dataclass(frozen=True)
class Vec3:
    """Cartesian 3-vector. Frame and unit are carried by the container, not the vector."""

    x: float
    y: float
    z: float


ZERO = Vec3(0.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Oracle layer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OracleState:
    """Raw oracle output. Always equatorial J2000, AU and AU/day."""

    position: Vec3
    velocity: Vec3 | None = None


@dataclass(frozen=True)
class AxisOrientation:
    """Raw oracle rotation-axis model output."""

    north: Vec3  # Unit north pole, equatorial J2000
    spin_deg: float  # Prime meridian angle W, unnormalized


# ---------------------------------------------------------------------------
# Physical layer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StateVector:
    """Frame-tagged position (and optional velocity) at an epoch. Never mutated."""

    frame: Frame
    unit: DistanceUnit
    position: Vec3
    epoch: datetime  # UTC
    velocity: Vec3 | None = None  # `unit` per day


@dataclass(frozen=True)
class BodyPhysicalProperties:
    """Cited physical constants for a single body."""

    id: Body
    radius_mean_km: float
    mass_kg: float
    gm_km3_s2: float  # Standard gravitational parameter
    source: str  # Citation URL
    radius_equatorial_km: float | None = None
    radius_polar_km: float | None = None
    density_g_cm3: float | None = None
    sidereal_rotation_hours: float | None = None  # Negative = retrograde
    obliquity_deg: float | None = None  # > 90 = pole opposite orbital angular momentum


@dataclass(frozen=True)
class BodyVisualProperties:
    id: Body
    color: str  # Hex display color
    texture: str | None = None  # Texture asset reference
    has_rings: bool = False


@dataclass(frozen=True)
class BodyOrientation:
    """Orientation of a body at one epoch. Recomputed per query, never cached."""

    north_pole: Vec3  # Unit vector, scene frame
    rotation_angle_deg: float  # Prime meridian angle W in [0, 360)
    sidereal_period_hours: float  # Negative = retrograde


# ---------------------------------------------------------------------------
# Scale configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LinearDistance:
    au_to_scene: float  # Scene units per AU


@dataclass(frozen=True)
class Log10Distance:
    scale: float  # Applied to AU before the log
    multiplier: float  # Applied after the log


@dataclass(frozen=True)
class PiecewiseDistance:
    """Linear inside `inner_radius_au`, log-compressed beyond it."""

    inner_radius_au: float
    inner_scale: float
    outer_log_scale: float
    outer_multiplier: float


DistanceScale = LinearDistance | Log10Distance | PiecewiseDistance


@dataclass(frozen=True)
class PhysicalSize:
    """Sizes on the same linear scale as distances: km_to_scene == au_to_scene / AU_KM."""

    km_to_scene: float


@dataclass(frozen=True)
class RatioToSun:
    sun_radius_scene: float


@dataclass(frozen=True)
class RatioToMercury:
    mercury_radius_scene: float


@dataclass(frozen=True)
class RatioToJupiter:
    jupiter_radius_scene: float


@dataclass(frozen=True)
class ClampedMinimum:
    min_radius_scene: float
    base: "SizeScale"


SizeMetric = Literal["radius", "diameter", "volume", "mass"]


@dataclass(frozen=True)
class LogCompress:
    scale: float
    multiplier: float


@dataclass(frozen=True)
class CustomMetric:
    metric: SizeMetric
    reference_body: Body
    reference_radius_scene: float
    log_compress: LogCompress | None = None


SizeScale = (
    PhysicalSize | RatioToSun | RatioToMercury | RatioToJupiter | ClampedMinimum | CustomMetric
)


@dataclass(frozen=True)
class RenderMapping:
    """Distance and size policy. Validate with `orrery.scale.validate_mapping` before use."""

    distance_scale: DistanceScale
    size_scale: SizeScale


# ---------------------------------------------------------------------------
# Render layer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BodyStateRender:
    """The sole input to renderers. Fully computed state in scene units."""

    id: Body
    position: Vec3  # Scene frame, scene units
    distance_scene: float  # Distance from the parent body, scene units
    distance_au: float  # Physical distance from the parent body
    radius_scene: float
    color: str
    texture: str | None = None


# ---------------------------------------------------------------------------
# Rings and belts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RingComponent:
    name: str  # "A Ring", "Cassini Division", ...
    inner_radius_km: float  # From planet center
    outer_radius_km: float
    source: str
    optical_depth: float | None = None  # 0 = transparent, > 1 = opaque


@dataclass(frozen=True)
class RingSystem:
    body_id: Body
    components: tuple[RingComponent, ...]  # Innermost first
    inclination_deg: float | None = None  # Ring plane tilt, follows body obliquity


@dataclass(frozen=True)
class BeltDefinition:
    name: str
    inner_radius_au: float
    outer_radius_au: float
    thickness_au: float  # Vertical extent above/below the ecliptic
    inclination_spread_deg: float  # 1-sigma inclination distribution
    source: str
