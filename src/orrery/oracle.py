"""Port interface for the ephemeris oracle.

The core never assumes anything about how an oracle computes its vectors;
adapters (see `orrery.skyfield_oracle`) do the actual work. All vectors cross
this boundary in the equatorial J2000 frame, in AU.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from orrery.models import AxisOrientation, Body, OracleState


class OracleOrientationFailure(Exception):
    """Oracle has no rotation-axis model for a body. Recovered internally."""


@runtime_checkable
class EphemerisOracle(Protocol):
    """Port for heliocentric/geocentric vectors and rotation axes."""

    name: str

    def helio_state(self, body: Body, epoch: datetime) -> OracleState:
        """Position (and velocity, if available) relative to the Sun."""
        ...

    def geo_state(self, body: Body, epoch: datetime) -> OracleState:
        """Position (and velocity, if available) relative to Earth."""
        ...

    def rotation_axis(self, body: Body, epoch: datetime) -> AxisOrientation:
        """North pole and spin angle. Raises OracleOrientationFailure when unmodelled."""
        ...

    def moon_phase(self, epoch: datetime) -> float:
        """Moon-Sun ecliptic longitude difference in degrees, [0, 360)."""
        ...
