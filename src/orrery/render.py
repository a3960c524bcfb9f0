"""Render layer: ephemeris states through a scale mapping into BodyStateRender values.

Both entry points take the `EphemerisProvider` as their first argument, ahead
of the epoch and mapping, so a renderer chooses its ephemeris source once and
passes it in. Every mapping is validated before any body is queried.
"""

import logging
from dataclasses import replace
from datetime import datetime

from orrery.data.physical import BODY_VISUAL
from orrery.ephemeris import EphemerisProvider
from orrery.frames import ecliptic_to_scene
from orrery.models import (
    PLANETS,
    ZERO,
    Body,
    BodyStateRender,
    Frame,
    LinearDistance,
    Log10Distance,
    PhysicalSize,
    PiecewiseDistance,
    RatioToMercury,
    RatioToSun,
    RenderMapping,
    Vec3,
)
from orrery.scale import scale_distance, scale_size, validate_mapping
from orrery.vectors import add, magnitude, normalize, scale

logger = logging.getLogger(__name__)

# Moon kept at least this many (Earth + Moon) radii from Earth outside true scale
MIN_MOON_EARTH_RADIUS_RATIO = 3.0


def needs_size_based_offset(mapping: RenderMapping) -> bool:
    """True when exaggerated sizes meet compressed distances and neighbours would overlap."""
    return isinstance(mapping.size_scale, (RatioToMercury, RatioToSun)) and isinstance(
        mapping.distance_scale, (Log10Distance, PiecewiseDistance)
    )


def _is_true_scale(mapping: RenderMapping) -> bool:
    return isinstance(mapping.distance_scale, LinearDistance) and isinstance(
        mapping.size_scale, PhysicalSize
    )


def _render(
    body: Body, direction: Vec3, distance_scene: float, distance_au: float, radius: float
) -> BodyStateRender:
    visual = BODY_VISUAL[body]
    return BodyStateRender(
        id=body,
        position=ecliptic_to_scene(scale(direction, distance_scene)),
        distance_scene=distance_scene,
        distance_au=distance_au,
        radius_scene=radius,
        color=visual.color,
        texture=visual.texture,
    )


def get_solar_system_render(
    provider: EphemerisProvider, epoch: datetime, mapping: RenderMapping
) -> list[BodyStateRender]:
    """Sun and the eight planets, ready for a renderer.

    Planets keep their true heliocentric direction; only the distance along
    it is rescaled. With ratio sizes on log or piecewise distances each orbit
    is pushed out past its inner neighbour's surface:
    orbit_i = orbit_{i-1} + radius_{i-1} + radius_i + (log_i - log_{i-1}),
    with the Sun as element 0.

    Args:
        provider: Ephemeris provider.
        epoch: Epoch; naive values are UTC.
        mapping: Distance and size policy.

    Returns:
        [Sun, Mercury, ..., Neptune].

    Raises:
        MappingValidationError: If `mapping` is inconsistent.
    """
    validate_mapping(mapping)

    sun_radius = scale_size(Body.SUN, mapping.size_scale)
    results = [_render(Body.SUN, ZERO, 0.0, 0.0, sun_radius)]

    use_size_offset = needs_size_based_offset(mapping)
    prev_orbit, prev_radius, prev_log = 0.0, sun_radius, 0.0

    for planet in PLANETS:
        state = provider.get_heliocentric_state(planet, epoch, Frame.ECLIPTIC_J2000)
        distance_au = magnitude(state.position)
        log_dist = scale_distance(distance_au, mapping.distance_scale)
        radius = scale_size(planet, mapping.size_scale)

        if use_size_offset:
            distance_scene = prev_orbit + prev_radius + radius + (log_dist - prev_log)
            prev_orbit, prev_radius, prev_log = distance_scene, radius, log_dist
        else:
            distance_scene = log_dist

        results.append(_render(planet, normalize(state.position), distance_scene, distance_au, radius))

    logger.debug(
        "Rendered %d bodies at %s (size offset: %s)", len(results), epoch.isoformat(), use_size_offset
    )
    return results


def get_moon_render(
    provider: EphemerisProvider, earth_position: Vec3, epoch: datetime, mapping: RenderMapping
) -> BodyStateRender:
    """The Moon placed around Earth's scene position.

    Outside true scale the Earth-Moon distance is floored at three times the
    sum of the two scene radii, since log distances crush it to nearly zero.

    Raises:
        MappingValidationError: If `mapping` is inconsistent.
    """
    validate_mapping(mapping)

    moon = provider.get_geocentric_state(Body.MOON, epoch, Frame.ECLIPTIC_J2000)
    distance_au = magnitude(moon.position)
    distance_scene = scale_distance(distance_au, mapping.distance_scale)
    radius = scale_size(Body.MOON, mapping.size_scale)

    if not _is_true_scale(mapping):
        floor = (scale_size(Body.EARTH, mapping.size_scale) + radius) * MIN_MOON_EARTH_RADIUS_RATIO
        if distance_scene < floor:
            logger.debug("Moon distance %.4g raised to floor %.4g", distance_scene, floor)
            distance_scene = floor

    local = _render(Body.MOON, normalize(moon.position), distance_scene, distance_au, radius)
    return replace(local, position=add(earth_position, local.position))
