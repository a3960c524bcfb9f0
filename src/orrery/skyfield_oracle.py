"""Skyfield-backed ephemeris oracle — JPL kernel positions, lunar phase, IAU rotation axes."""

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

import numpy as np
from pytz import utc
from skyfield import almanac
from skyfield.api import Loader

from orrery.models import AxisOrientation, Body, OracleState, Vec3
from orrery.oracle import OracleOrientationFailure

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent
DEFAULT_DATA_DIR = _ROOT / "resources"
DEFAULT_EPHEMERIS = "de421.bsp"

J2000_JD_TT = 2451545.0

# DE421 carries planet centers only for the inner planets; outer planets are barycenters
_KERNEL_TARGETS: dict[Body, str] = {
    Body.SUN: "sun",
    Body.MERCURY: "mercury",
    Body.VENUS: "venus",
    Body.EARTH: "earth",
    Body.MOON: "moon",
    Body.MARS: "mars barycenter",
    Body.JUPITER: "jupiter barycenter",
    Body.SATURN: "saturn barycenter",
    Body.URANUS: "uranus barycenter",
    Body.NEPTUNE: "neptune barycenter",
}


class EphemerisUnavailable(Exception):
    """The ephemeris kernel could not be loaded or downloaded."""


class _IauRotation(NamedTuple):
    """IAU WGCCRE 2015 rotation elements, secular terms only.

    alpha0 = ra0 + ra_rate * T, delta0 = dec0 + dec_rate * T, W = w0 + w_rate * d
    with T in Julian centuries and d in days since J2000 TDB.
    """

    ra0: float
    ra_rate: float
    dec0: float
    dec_rate: float
    w0: float
    w_rate: float


# Archinal et al. (2018), "Report of the IAU Working Group on Cartographic
# Coordinates and Rotational Elements: 2015". The Moon's model is dominated by
# periodic terms and is left to the analytical fallback.
IAU_ROTATION: dict[Body, _IauRotation] = {
    Body.MERCURY: _IauRotation(281.0103, -0.0328, 61.4155, -0.0049, 329.5988, 6.1385108),
    Body.VENUS: _IauRotation(272.76, 0.0, 67.16, 0.0, 160.20, -1.4813688),
    Body.EARTH: _IauRotation(0.00, -0.641, 90.00, -0.557, 190.147, 360.9856235),
    Body.MARS: _IauRotation(
        317.269202, -0.10927547, 54.432516, -0.05827105, 176.049863, 350.891982443297
    ),
    Body.JUPITER: _IauRotation(268.056595, -0.006499, 64.495303, 0.002413, 284.95, 870.5360000),
    Body.SATURN: _IauRotation(40.589, -0.036, 83.537, -0.004, 38.90, 810.7939024),
    Body.URANUS: _IauRotation(257.311, 0.0, -15.175, 0.0, 203.81, -501.1600928),
    Body.NEPTUNE: _IauRotation(299.36, 0.0, 43.46, 0.0, 249.978, 541.1397757),
}


def _neptune_terms(t_centuries: float) -> tuple[float, float, float]:
    """Neptune's periodic pole and spin corrections (deg) from the N angle."""
    n = math.radians(357.85 + 52.316 * t_centuries)
    return 0.70 * math.sin(n), -0.51 * math.cos(n), -0.48 * math.sin(n)


def _vec(arr: np.ndarray) -> Vec3:
    return Vec3(float(arr[0]), float(arr[1]), float(arr[2]))


class SkyfieldOracle:
    """Ephemeris oracle over a JPL SPK kernel loaded through skyfield.

    Positions are geometric (no light time, no aberration) in the ICRF, which
    agrees with equatorial J2000 to within the ~20 mas frame bias.
    """

    name = "Skyfield"

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR, ephemeris: str = DEFAULT_EPHEMERIS):
        """Load the kernel, downloading it into `data_dir` when missing.

        Raises:
            EphemerisUnavailable: When the kernel can neither be read nor fetched.
        """
        self._loader = Loader(str(data_dir), verbose=False)
        try:
            self._eph = self._loader(ephemeris)
        except (OSError, ValueError) as e:
            raise EphemerisUnavailable(f"Cannot load ephemeris {ephemeris!r} from {data_dir}: {e}") from e
        self._ts = self._loader.timescale(builtin=True)
        logger.debug("Loaded ephemeris %s from %s", ephemeris, data_dir)

    def _time(self, epoch: datetime):
        if epoch.tzinfo is None:
            epoch = utc.localize(epoch)
        return self._ts.from_datetime(epoch)

    def _target(self, body: Body):
        try:
            return self._eph[_KERNEL_TARGETS[body]]
        except KeyError as e:
            raise KeyError(f"Body {body} is not in ephemeris kernel") from e

    def _relative(self, body: Body, center: Body, epoch: datetime) -> OracleState:
        t = self._time(epoch)
        target = self._target(body).at(t)
        origin = self._target(center).at(t)
        return OracleState(
            position=_vec(target.position.au - origin.position.au),
            velocity=_vec(target.velocity.au_per_d - origin.velocity.au_per_d),
        )

    def helio_state(self, body: Body, epoch: datetime) -> OracleState:
        return self._relative(body, Body.SUN, epoch)

    def geo_state(self, body: Body, epoch: datetime) -> OracleState:
        return self._relative(body, Body.EARTH, epoch)

    def rotation_axis(self, body: Body, epoch: datetime) -> AxisOrientation:
        model = IAU_ROTATION.get(body)
        if model is None:
            raise OracleOrientationFailure(f"No IAU rotation model for {body}")

        t = self._time(epoch)
        d = t.tdb - J2000_JD_TT
        t_centuries = d / 36525.0

        ra = model.ra0 + model.ra_rate * t_centuries
        dec = model.dec0 + model.dec_rate * t_centuries
        spin = model.w0 + model.w_rate * d
        if body == Body.NEPTUNE:
            d_ra, d_dec, d_w = _neptune_terms(t_centuries)
            ra, dec, spin = ra + d_ra, dec + d_dec, spin + d_w

        ra_rad, dec_rad = math.radians(ra), math.radians(dec)
        north = Vec3(
            math.cos(dec_rad) * math.cos(ra_rad),
            math.cos(dec_rad) * math.sin(ra_rad),
            math.sin(dec_rad),
        )
        return AxisOrientation(north=north, spin_deg=spin)

    def moon_phase(self, epoch: datetime) -> float:
        return float(almanac.moon_phase(self._eph, self._time(epoch)).degrees) % 360.0
