"""Scale mapping — physical distances (AU) and sizes (km) to scene units.

Only one combination is geometrically honest: linear distances with sizes on
the same linear scale (`PhysicalSize.km_to_scene == au_to_scene / AU_KM`).
Every other preset keeps some ratios and deliberately distorts others; the
docstrings of the presets say which.
"""

import math
from types import MappingProxyType
from typing import Literal, Mapping

from orrery.data.physical import BODY_PHYSICAL
from orrery.models import (
    Body,
    ClampedMinimum,
    CustomMetric,
    DistanceScale,
    LinearDistance,
    Log10Distance,
    LogCompress,
    PhysicalSize,
    PiecewiseDistance,
    RatioToJupiter,
    RatioToMercury,
    RatioToSun,
    RenderMapping,
    SizeScale,
)

# IAU 2012 Resolution B2, exact
AU_KM = 149_597_870.7

# Relative tolerance on km_to_scene vs au_to_scene / AU_KM
PHYSICAL_SCALE_RTOL = 1e-9

# School-model convention: the Sun at ~3 Jupiter radii instead of ~10
_SUN_REDUCTION_JUPITER_MODE = 0.3


class MappingValidationError(Exception):
    """A RenderMapping whose sizes and distances are inconsistent."""


# ---------------------------------------------------------------------------
# Distance scale presets
# ---------------------------------------------------------------------------

AU_TO_SCENE = 3.0

# Mercury's orbit (0.387 AU) must clear the Sun's exaggerated radius
# (~5.7 scene units at the Mercury baseline): 0.387 * k > 5.7 -> k > 14.7
AU_TO_SCENE_PLANET_RATIO = 20.0

DISTANCE_LINEAR = LinearDistance(au_to_scene=AU_TO_SCENE)
DISTANCE_LINEAR_RATIO = LinearDistance(au_to_scene=AU_TO_SCENE_PLANET_RATIO)
DISTANCE_LOG = Log10Distance(scale=2.0, multiplier=3.0)
DISTANCE_PIECEWISE = PiecewiseDistance(
    inner_radius_au=2.0,  # just beyond Mars
    inner_scale=2.0,
    outer_log_scale=1.5,
    outer_multiplier=2.5,
)

# ---------------------------------------------------------------------------
# Size scale presets
# ---------------------------------------------------------------------------

SUN_RADIUS_SCENE = 0.25
JUPITER_RADIUS_SCENE_NORMALIZED = 0.06
MERCURY_RADIUS_SCENE_EXAGGERATED = 0.02
MERCURY_RADIUS_SCENE_SCHOLAR = 0.025

SIZE_PHYSICAL = PhysicalSize(km_to_scene=AU_TO_SCENE / AU_KM)
SIZE_RATIO_SUN = RatioToSun(sun_radius_scene=SUN_RADIUS_SCENE)
SIZE_RATIO_MERCURY = RatioToMercury(mercury_radius_scene=MERCURY_RADIUS_SCENE_EXAGGERATED)
SIZE_RATIO_SCHOLAR = RatioToMercury(mercury_radius_scene=MERCURY_RADIUS_SCENE_SCHOLAR)
SIZE_NORMALIZED = RatioToJupiter(jupiter_radius_scene=JUPITER_RADIUS_SCENE_NORMALIZED)
SIZE_VISIBLE = ClampedMinimum(min_radius_scene=0.008, base=SIZE_NORMALIZED)
SIZE_MASS_COMPARISON = CustomMetric(
    metric="mass",
    reference_body=Body.EARTH,
    reference_radius_scene=0.05,
    log_compress=LogCompress(scale=0.5, multiplier=1.2),
)

# ---------------------------------------------------------------------------
# Combined presets
# ---------------------------------------------------------------------------

# Everything to scale. Moon orbit ~60 Earth radii; planets are tiny.
PRESET_TRUE_PHYSICAL = RenderMapping(DISTANCE_LINEAR, SIZE_PHYSICAL)

# Exact distance ratios and planet-to-planet size ratios, but sizes are
# ~400x too large for their distances: the Moon would sit inside Earth.
PRESET_PLANET_RATIO = RenderMapping(DISTANCE_LINEAR_RATIO, SIZE_RATIO_MERCURY)

# Log distances, normalized sizes. Educational overview.
PRESET_SCHOOL_MODEL = RenderMapping(DISTANCE_LOG, SIZE_NORMALIZED)

# Real planet-to-planet size ratios with log distances. Triggers the
# anti-overlap spacing in `orrery.render`.
PRESET_TRUE_SIZES = RenderMapping(DISTANCE_LOG, SIZE_RATIO_SCHOLAR)

# Linear inner system, log outer system, sizes clamped to stay visible.
PRESET_EXPLORER = RenderMapping(DISTANCE_PIECEWISE, SIZE_VISIBLE)

# Sphere volume proportional to mass, log-compressed.
PRESET_MASS_COMPARISON = RenderMapping(DISTANCE_LOG, SIZE_MASS_COMPARISON)

PresetName = Literal[
    "truePhysical", "planetRatio", "schoolModel", "trueSizes", "explorer", "massComparison"
]

RENDER_PRESETS: Mapping[str, RenderMapping] = MappingProxyType(
    {
        "truePhysical": PRESET_TRUE_PHYSICAL,
        "planetRatio": PRESET_PLANET_RATIO,
        "schoolModel": PRESET_SCHOOL_MODEL,
        "trueSizes": PRESET_TRUE_SIZES,
        "explorer": PRESET_EXPLORER,
        "massComparison": PRESET_MASS_COMPARISON,
    }
)


def get_preset(name: PresetName | str) -> RenderMapping:
    """Look up a preset by name.

    Raises:
        KeyError: For unknown preset names.
    """
    try:
        return RENDER_PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; expected one of {sorted(RENDER_PRESETS)}") from None


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------


def scale_distance(distance_au: float, config: DistanceScale) -> float:
    """Map a physical distance in AU to scene units.

    Log10 is sign-preserving (an odd function) so it also applies to signed
    coordinates. Piecewise is continuous at the inner radius: the log term is
    added on top of the linear value reached at the boundary.
    """
    if isinstance(config, LinearDistance):
        return distance_au * config.au_to_scene
    if isinstance(config, Log10Distance):
        sign = 1.0 if distance_au >= 0 else -1.0
        return sign * math.log10(1 + abs(distance_au) * config.scale) * config.multiplier
    if isinstance(config, PiecewiseDistance):
        if distance_au <= config.inner_radius_au:
            return distance_au * config.inner_scale
        inner = config.inner_radius_au * config.inner_scale
        outer = distance_au - config.inner_radius_au
        return inner + math.log10(1 + outer * config.outer_log_scale) * config.outer_multiplier
    raise TypeError(f"Unknown distance scale: {config!r}")


def _metric_value(body: Body, metric: str) -> float:
    props = BODY_PHYSICAL[body]
    if metric == "radius":
        return props.radius_mean_km
    if metric == "diameter":
        return props.radius_mean_km * 2
    if metric == "volume":
        return (4.0 / 3.0) * math.pi * props.radius_mean_km**3
    if metric == "mass":
        return props.mass_kg
    raise ValueError(f"Unknown size metric: {metric!r}")


def scale_size(body: Body, config: SizeScale) -> float:
    """Radius of `body` in scene units under a size policy."""
    radius_km = BODY_PHYSICAL[body].radius_mean_km

    if isinstance(config, PhysicalSize):
        return radius_km * config.km_to_scene
    if isinstance(config, RatioToSun):
        return config.sun_radius_scene * radius_km / BODY_PHYSICAL[Body.SUN].radius_mean_km
    if isinstance(config, RatioToMercury):
        return config.mercury_radius_scene * radius_km / BODY_PHYSICAL[Body.MERCURY].radius_mean_km
    if isinstance(config, RatioToJupiter):
        size = config.jupiter_radius_scene * radius_km / BODY_PHYSICAL[Body.JUPITER].radius_mean_km
        if body == Body.SUN:
            size *= _SUN_REDUCTION_JUPITER_MODE
        return size
    if isinstance(config, ClampedMinimum):
        # Floor only; never shrinks the base size
        return max(scale_size(body, config.base), config.min_radius_scene)
    if isinstance(config, CustomMetric):
        ratio = _metric_value(body, config.metric) / _metric_value(config.reference_body, config.metric)
        # Volume and mass go as length cubed
        if config.metric in ("volume", "mass"):
            ratio = ratio ** (1.0 / 3.0)
        if config.log_compress is not None:
            ratio = math.log10(1 + ratio * config.log_compress.scale) * config.log_compress.multiplier
        return config.reference_radius_scene * ratio
    raise TypeError(f"Unknown size scale: {config!r}")


# ---------------------------------------------------------------------------
# Validation and construction
# ---------------------------------------------------------------------------


def _check_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise MappingValidationError(f"{name} must be finite and positive, got {value!r}")


def _validate_distance(config: DistanceScale) -> None:
    if isinstance(config, LinearDistance):
        _check_positive("au_to_scene", config.au_to_scene)
    elif isinstance(config, Log10Distance):
        _check_positive("scale", config.scale)
        _check_positive("multiplier", config.multiplier)
    elif isinstance(config, PiecewiseDistance):
        _check_positive("inner_radius_au", config.inner_radius_au)
        _check_positive("inner_scale", config.inner_scale)
        _check_positive("outer_log_scale", config.outer_log_scale)
        _check_positive("outer_multiplier", config.outer_multiplier)
    else:
        raise MappingValidationError(f"Unknown distance scale: {config!r}")


def validate_mapping(mapping: RenderMapping) -> None:
    """Check a render mapping for internal consistency.

    Physical sizes must share the linear scale of the distances:
    `km_to_scene == au_to_scene / AU_KM` within 1e-9 relative error. A
    mismatch is never corrected silently; a "true scale" view that is not to
    scale is the worst failure this module can produce.

    Raises:
        MappingValidationError: On a physical size scale paired with a
            non-linear distance scale, a km_to_scene mismatch, or a
            non-positive scale parameter.
    """
    distance, size = mapping.distance_scale, mapping.size_scale
    _validate_distance(distance)

    if not isinstance(size, PhysicalSize):
        return

    if not isinstance(distance, LinearDistance):
        raise MappingValidationError(
            f"Physical size scale requires linear distance scale, got {type(distance).__name__}. "
            "Physical mode derives km_to_scene from au_to_scene, which only makes sense for "
            "linear distances."
        )

    expected = distance.au_to_scene / AU_KM
    actual = size.km_to_scene
    relative_error = abs((actual - expected) / expected)
    if not relative_error <= PHYSICAL_SCALE_RTOL:
        raise MappingValidationError(
            "Invalid physical mapping: km_to_scene mismatch. "
            f"Expected {expected:.6e} (au_to_scene / AU_KM), got {actual:.6e}. "
            f"Relative error: {relative_error:.3e}."
        )


def create_mapping(distance_scale: DistanceScale, size_scale: SizeScale) -> RenderMapping:
    return RenderMapping(distance_scale=distance_scale, size_scale=size_scale)


def create_validated_mapping(distance_scale: DistanceScale, size_scale: SizeScale) -> RenderMapping:
    """Build a mapping and validate it immediately.

    Raises:
        MappingValidationError: If the mapping is inconsistent.
    """
    mapping = create_mapping(distance_scale, size_scale)
    validate_mapping(mapping)
    return mapping


def create_physical_mapping(au_to_scene: float) -> RenderMapping:
    """True-scale mapping with sizes derived from the distance scale."""
    return create_validated_mapping(
        LinearDistance(au_to_scene=au_to_scene), PhysicalSize(km_to_scene=au_to_scene / AU_KM)
    )


def create_mapping_from_simple(
    distance_scale: Literal["log", "real"],
    size_scale: Literal["normalized", "real", "physical"],
) -> RenderMapping:
    """Build a mapping from the two coarse UI toggles.

    "real" sizes keep planet-to-planet ratios only and get the wider linear
    spacing so Earth does not render inside the Sun. "physical" sizes with
    "log" distances are rejected by validation.

    Raises:
        MappingValidationError: For "log" distances with "physical" sizes.
    """
    if distance_scale == "log":
        distance: DistanceScale = DISTANCE_LOG
    elif size_scale == "real":
        distance = DISTANCE_LINEAR_RATIO
    else:
        distance = DISTANCE_LINEAR

    if size_scale == "physical":
        size: SizeScale = SIZE_PHYSICAL
    elif size_scale == "real":
        size = SIZE_RATIO_MERCURY
    else:
        size = SIZE_NORMALIZED

    return create_validated_mapping(distance, size)


for _preset in RENDER_PRESETS.values():
    validate_mapping(_preset)
