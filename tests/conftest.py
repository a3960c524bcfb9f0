"""Shared fixtures: an in-memory circular-orbit oracle and an optional skyfield oracle."""

import math
from datetime import datetime

import pytest
from pytz import utc

from orrery.data.physical import SEMI_MAJOR_AXIS_AU
from orrery.ephemeris import EphemerisProvider, days_since_j2000
from orrery.frames import rotate_ecl_to_eqj
from orrery.models import AxisOrientation, Body, OracleState, Vec3
from orrery.oracle import OracleOrientationFailure

SCENARIO_EPOCH = datetime(2024, 6, 15, 12, 0, 0, tzinfo=utc)

_DAYS_PER_YEAR = 365.25
_MOON_PERIOD_DAYS = 27.321661

# Spread the planets out so no two share a direction
_PHASE_RAD = {body: 0.7 * i for i, body in enumerate(SEMI_MAJOR_AXIS_AU)}


def _circle(radius: float, period_days: float, phase: float, d: float) -> tuple[Vec3, Vec3]:
    """Ecliptic position and velocity (per day) on a circular prograde orbit."""
    n = 2 * math.pi / period_days
    angle = phase + n * d
    position = Vec3(radius * math.cos(angle), radius * math.sin(angle), 0.0)
    velocity = Vec3(-radius * n * math.sin(angle), radius * n * math.cos(angle), 0.0)
    return position, velocity


def _longitude(v: Vec3) -> float:
    return math.degrees(math.atan2(v.y, v.x))


class CircularOrbitOracle:
    """Planets on coplanar circles in the ecliptic at their mean distances.

    Only Earth and Mars have rotation models; everything else raises
    OracleOrientationFailure so the provider's fallback is exercised.
    """

    name = "CircularOrbit"

    def __init__(self):
        self.calls: list[tuple[str, Body]] = []

    def _helio_ecl(self, body: Body, epoch: datetime) -> tuple[Vec3, Vec3]:
        a = SEMI_MAJOR_AXIS_AU[body]
        return _circle(a, _DAYS_PER_YEAR * a**1.5, _PHASE_RAD[body], days_since_j2000(epoch))

    def _moon_ecl(self, epoch: datetime) -> tuple[Vec3, Vec3]:
        return _circle(
            SEMI_MAJOR_AXIS_AU[Body.MOON], _MOON_PERIOD_DAYS, 0.0, days_since_j2000(epoch)
        )

    def helio_state(self, body: Body, epoch: datetime) -> OracleState:
        self.calls.append(("helio", body))
        position, velocity = self._helio_ecl(body, epoch)
        return OracleState(rotate_ecl_to_eqj(position), rotate_ecl_to_eqj(velocity))

    def geo_state(self, body: Body, epoch: datetime) -> OracleState:
        self.calls.append(("geo", body))
        if body != Body.MOON:
            raise KeyError(body)
        position, velocity = self._moon_ecl(epoch)
        return OracleState(rotate_ecl_to_eqj(position), rotate_ecl_to_eqj(velocity))

    def rotation_axis(self, body: Body, epoch: datetime) -> AxisOrientation:
        d = days_since_j2000(epoch)
        if body == Body.EARTH:
            return AxisOrientation(north=Vec3(0.0, 0.0, 1.0), spin_deg=190.147 + 360.9856235 * d)
        if body == Body.MARS:
            ra, dec = math.radians(317.269), math.radians(54.433)
            north = Vec3(math.cos(dec) * math.cos(ra), math.cos(dec) * math.sin(ra), math.sin(dec))
            return AxisOrientation(north=north, spin_deg=176.049863 + 350.891982443297 * d)
        raise OracleOrientationFailure(f"No rotation model for {body}")

    def moon_phase(self, epoch: datetime) -> float:
        earth, _ = self._helio_ecl(Body.EARTH, epoch)
        moon, _ = self._moon_ecl(epoch)
        # Geocentric Sun is opposite heliocentric Earth
        return (_longitude(moon) - (_longitude(earth) + 180.0)) % 360.0


@pytest.fixture
def fake_oracle():
    return CircularOrbitOracle()


@pytest.fixture
def provider(fake_oracle):
    return EphemerisProvider(fake_oracle)


@pytest.fixture
def epoch():
    return SCENARIO_EPOCH


@pytest.fixture(scope="session")
def skyfield_oracle():
    """DE421-backed oracle. Skips when the kernel can be neither read nor downloaded."""
    from orrery.skyfield_oracle import EphemerisUnavailable, SkyfieldOracle

    try:
        return SkyfieldOracle()
    except EphemerisUnavailable as e:
        pytest.skip(f"DE421 kernel unavailable: {e}")
