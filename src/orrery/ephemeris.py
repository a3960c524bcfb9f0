"""Ephemeris provider — frame-tagged state vectors and body orientations over an oracle.

Two error policies live side by side here. State queries fail loudly: a
wrong position has no safe default. Orientation queries degrade to an
analytical model built from the physical tables, since orientation only
drives visual rotation.
"""

import logging
import math
from datetime import datetime

from pytz import utc

from orrery.data.physical import BODY_PHYSICAL
from orrery.frames import ecliptic_to_scene, transform_frame
from orrery.models import (
    PLANETS,
    ZERO,
    Body,
    BodyOrientation,
    DistanceUnit,
    Frame,
    OracleState,
    StateVector,
    Vec3,
)
from orrery.oracle import EphemerisOracle
from orrery.vectors import normalize

logger = logging.getLogger(__name__)

# J2000.0 taken as 12:00 UTC rather than 12:00 TT; the ~64 s offset is
# invisible at rendering precision.
J2000_UTC = datetime(2000, 1, 1, 12, 0, 0, tzinfo=utc)
SECONDS_PER_DAY = 86400.0
DAYS_PER_JULIAN_CENTURY = 36525.0

GEOCENTRIC_BODIES: frozenset[Body] = frozenset({Body.MOON})


class UnsupportedBody(Exception):
    """Body has no heliocentric/geocentric definition."""


def to_utc(epoch: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if epoch.tzinfo is None:
        return utc.localize(epoch)
    return epoch.astimezone(utc)


def days_since_j2000(epoch: datetime) -> float:
    """Days since J2000.0 (negative before it)."""
    return (to_utc(epoch) - J2000_UTC).total_seconds() / SECONDS_PER_DAY


def normalize_deg(deg: float) -> float:
    """Wrap an angle into [0, 360)."""
    deg = math.fmod(deg, 360.0)
    if deg < 0:
        deg += 360.0
    # fmod of a tiny negative can round up to exactly 360
    return 0.0 if deg >= 360.0 else deg


def gmst_deg(epoch: datetime) -> float:
    """Greenwich Mean Sidereal Time in degrees, [0, 360).

    USNO polynomial in days and Julian centuries since J2000.0.
    """
    d = days_since_j2000(epoch)
    t = d / DAYS_PER_JULIAN_CENTURY
    gmst = 280.46061837 + 360.98564736629 * d + 0.000387933 * t * t - (t * t * t) / 38710000.0
    return normalize_deg(gmst)


def earth_rotation_deg(epoch: datetime) -> float:
    """Earth's IAU prime-meridian angle W = GMST - 90°.

    The IAU node for a pole at RA ≈ 0 lies at RA = 90°, hence the offset.
    """
    return normalize_deg(gmst_deg(epoch) - 90.0)


def _coerce_body(body: Body | str) -> Body:
    try:
        return Body(body)
    except ValueError as e:
        raise UnsupportedBody(f"Unknown body: {body!r}") from e


def _spin_from_period(period_hours: float, epoch: datetime) -> float:
    """W = Ẇ·d with W0 = 0; 0 when the period is unknown."""
    if period_hours == 0:
        return 0.0
    rate_deg_per_day = (360.0 / abs(period_hours)) * 24.0
    return normalize_deg(rate_deg_per_day * days_since_j2000(epoch))


def _tilted_pole_ecl(obliquity_deg: float) -> Vec3:
    """Ecliptic north tilted toward +y by the obliquity."""
    if obliquity_deg > 90:
        # Pole below the ecliptic: north follows the angular momentum, which
        # points "down" for retrograde rotators like Venus and Uranus
        effective = math.radians(180.0 - obliquity_deg)
        return Vec3(0.0, math.sin(effective), -math.cos(effective))
    obliquity = math.radians(obliquity_deg)
    return Vec3(0.0, math.sin(obliquity), math.cos(obliquity))


class EphemerisProvider:
    """Frame-tagged states and orientations over a black-box oracle.

    Stateless apart from the oracle reference; safe to share across threads
    when the oracle is.
    """

    def __init__(self, oracle: EphemerisOracle):
        self.oracle = oracle

    @property
    def name(self) -> str:
        return self.oracle.name

    def _state(self, raw: OracleState, epoch: datetime, frame: Frame) -> StateVector:
        velocity = None
        if raw.velocity is not None:
            velocity = transform_frame(raw.velocity, Frame.EQUATORIAL_J2000, frame, epoch)
        return StateVector(
            frame=frame,
            unit=DistanceUnit.AU,
            position=transform_frame(raw.position, Frame.EQUATORIAL_J2000, frame, epoch),
            velocity=velocity,
            epoch=epoch,
        )

    def get_heliocentric_state(
        self, body: Body | str, epoch: datetime, frame: Frame = Frame.ECLIPTIC_J2000
    ) -> StateVector:
        """Position of `body` relative to the Sun.

        The Sun is the exact zero vector for every epoch and frame; the oracle
        is not consulted for it.

        Args:
            body: Body identifier.
            epoch: Epoch; naive values are UTC.
            frame: Output frame.

        Returns:
            StateVector in AU.

        Raises:
            UnsupportedBody: For identifiers outside `Body`.
            UnsupportedFrameTransform: For an unknown output frame.
        """
        body = _coerce_body(body)
        epoch = to_utc(epoch)
        if body == Body.SUN:
            return StateVector(
                frame=frame, unit=DistanceUnit.AU, position=ZERO, velocity=ZERO, epoch=epoch
            )
        return self._state(self.oracle.helio_state(body, epoch), epoch, frame)

    def get_geocentric_state(
        self, body: Body | str, epoch: datetime, frame: Frame = Frame.ECLIPTIC_J2000
    ) -> StateVector:
        """Position of a satellite relative to Earth.

        Raises:
            UnsupportedBody: For bodies with no satellite relationship to Earth.
        """
        body = _coerce_body(body)
        if body not in GEOCENTRIC_BODIES:
            raise UnsupportedBody(f"Body {body.value} not supported for geocentric state")
        epoch = to_utc(epoch)
        return self._state(self.oracle.geo_state(body, epoch), epoch, frame)

    def get_body_orientation(self, body: Body | str, epoch: datetime) -> BodyOrientation:
        """North pole (scene frame), prime-meridian angle and sidereal period at `epoch`.

        Earth's angle comes from the GMST polynomial rather than the oracle so
        it can be checked against independent sidereal-time tables. Other
        oracle-covered bodies keep the oracle's spin, wrapped to [0, 360).
        Bodies the oracle cannot model, or any oracle error, fall back to
        obliquity and sidereal period from the physical tables.
        """
        body = _coerce_body(body)
        epoch = to_utc(epoch)
        period = BODY_PHYSICAL[body].sidereal_rotation_hours or 0.0

        # Fixed model: solar obliquity tilt, uniform spin. No surface tracking.
        if body == Body.SUN:
            return self._orientation_from_physical_data(body, epoch)

        try:
            axis = self.oracle.rotation_axis(body, epoch)
        except Exception as e:
            logger.debug("Oracle has no rotation axis for %s (%s); using physical data", body.value, e)
            return self._orientation_from_physical_data(body, epoch)

        north_ecl = transform_frame(axis.north, Frame.EQUATORIAL_J2000, Frame.ECLIPTIC_J2000, epoch)
        if body == Body.EARTH:
            angle = earth_rotation_deg(epoch)
        else:
            angle = normalize_deg(axis.spin_deg)

        return BodyOrientation(
            north_pole=ecliptic_to_scene(normalize(north_ecl)),
            rotation_angle_deg=angle,
            sidereal_period_hours=period,
        )

    def _orientation_from_physical_data(self, body: Body, epoch: datetime) -> BodyOrientation:
        props = BODY_PHYSICAL[body]
        period = props.sidereal_rotation_hours or 0.0
        north_ecl = normalize(_tilted_pole_ecl(props.obliquity_deg or 0.0))
        return BodyOrientation(
            north_pole=ecliptic_to_scene(north_ecl),
            rotation_angle_deg=_spin_from_period(period, epoch),
            sidereal_period_hours=period,
        )

    def get_moon_phase(self, epoch: datetime) -> float:
        """Moon phase as a fraction: 0 new, 0.5 full, approaching 1 before the next new moon."""
        return normalize_deg(self.oracle.moon_phase(to_utc(epoch))) / 360.0

    def get_planet_positions(self, epoch: datetime) -> dict[Body, StateVector]:
        """Heliocentric ecliptic states of the eight planets, in orbital order."""
        return {p: self.get_heliocentric_state(p, epoch, Frame.ECLIPTIC_J2000) for p in PLANETS}

    def get_moon_position(self, epoch: datetime) -> StateVector:
        return self.get_geocentric_state(Body.MOON, epoch, Frame.ECLIPTIC_J2000)
