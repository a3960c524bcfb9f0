"""Planetary ring systems (PDS Rings Node tables)."""

from types import MappingProxyType
from typing import Mapping

from orrery.models import Body, RingComponent, RingSystem

_PDS_RINGS = "https://pds-rings.seti.org"
_SATURN_SRC = f"{_PDS_RINGS}/saturn/saturn_rings_table.html"
_JUPITER_SRC = f"{_PDS_RINGS}/jupiter/jupiter_rings_table.html"
_URANUS_SRC = f"{_PDS_RINGS}/uranus/uranus_rings_table.html"
_NEPTUNE_SRC = f"{_PDS_RINGS}/neptune/neptune_rings_table.html"

SATURN_RINGS: tuple[RingComponent, ...] = (
    RingComponent("D Ring", 66_900, 74_510, _SATURN_SRC, 0.001),
    RingComponent("C Ring (Crepe Ring)", 74_658, 92_000, _SATURN_SRC, 0.1),
    RingComponent("B Ring", 92_000, 117_580, _SATURN_SRC, 1.5),  # densest
    RingComponent("Cassini Division", 117_580, 122_170, _SATURN_SRC, 0.1),  # sparse, not empty
    RingComponent("A Ring", 122_170, 136_775, _SATURN_SRC, 0.5),
    RingComponent("Encke Gap", 133_589, 133_923, _SATURN_SRC, 0.0),
    RingComponent("F Ring", 140_180, 140_680, _SATURN_SRC, 0.1),
    RingComponent("G Ring", 166_000, 175_000, _SATURN_SRC, 0.000001),
    RingComponent("E Ring", 181_000, 483_000, _SATURN_SRC, 0.00001),
)

JUPITER_RINGS: tuple[RingComponent, ...] = (
    RingComponent("Halo Ring", 92_000, 122_500, _JUPITER_SRC, 0.00001),
    RingComponent("Main Ring", 122_500, 129_000, _JUPITER_SRC, 0.000003),
    RingComponent("Amalthea Gossamer Ring", 129_000, 182_000, _JUPITER_SRC, 0.0000001),
    RingComponent("Thebe Gossamer Ring", 129_000, 226_000, _JUPITER_SRC, 0.0000001),
)

URANUS_RINGS: tuple[RingComponent, ...] = (
    RingComponent("Zeta Ring (1986U2R)", 37_000, 39_500, _URANUS_SRC, 0.0001),
    RingComponent("6 Ring", 41_837, 41_840, _URANUS_SRC, 0.3),
    RingComponent("5 Ring", 42_234, 42_237, _URANUS_SRC, 0.5),
    RingComponent("4 Ring", 42_570, 42_573, _URANUS_SRC, 0.3),
    RingComponent("Alpha Ring", 44_718, 44_728, _URANUS_SRC, 0.4),
    RingComponent("Beta Ring", 45_661, 45_672, _URANUS_SRC, 0.3),
    RingComponent("Eta Ring", 47_175, 47_177, _URANUS_SRC, 0.4),
    RingComponent("Gamma Ring", 47_627, 47_631, _URANUS_SRC, 0.7),
    RingComponent("Delta Ring", 48_300, 48_304, _URANUS_SRC, 0.5),
    RingComponent("Lambda Ring", 50_023, 50_025, _URANUS_SRC, 0.1),
    RingComponent("Epsilon Ring", 51_149, 51_158, _URANUS_SRC, 2.0),  # densest Uranian ring
)

NEPTUNE_RINGS: tuple[RingComponent, ...] = (
    RingComponent("Galle Ring", 41_900, 42_900, _NEPTUNE_SRC, 0.00008),
    RingComponent("Le Verrier Ring", 53_200, 53_300, _NEPTUNE_SRC, 0.002),
    RingComponent("Lassell Ring", 53_200, 57_200, _NEPTUNE_SRC, 0.00015),
    RingComponent("Arago Ring", 57_200, 57_400, _NEPTUNE_SRC, 0.0001),
    RingComponent("Adams Ring", 62_932, 62_947, _NEPTUNE_SRC, 0.004),  # contains ring arcs
)

# Ring plane inclination follows the body's obliquity
RING_SYSTEMS: Mapping[Body, RingSystem] = MappingProxyType(
    {
        Body.JUPITER: RingSystem(Body.JUPITER, JUPITER_RINGS, inclination_deg=3.13),
        Body.SATURN: RingSystem(Body.SATURN, SATURN_RINGS, inclination_deg=26.73),
        Body.URANUS: RingSystem(Body.URANUS, URANUS_RINGS, inclination_deg=97.77),
        Body.NEPTUNE: RingSystem(Body.NEPTUNE, NEPTUNE_RINGS, inclination_deg=28.32),
    }
)

_MAIN_VISIBLE: Mapping[Body, frozenset[str]] = MappingProxyType(
    {
        Body.SATURN: frozenset({"C Ring (Crepe Ring)", "B Ring", "Cassini Division", "A Ring"}),
        Body.JUPITER: frozenset({"Main Ring"}),
        Body.URANUS: frozenset({"Epsilon Ring"}),
        Body.NEPTUNE: frozenset({"Adams Ring"}),
    }
)


def get_main_visible_rings(body: Body) -> tuple[RingComponent, ...]:
    """Return the most prominent rings of a body, suitable for distant viewing.

    Bodies without rings return an empty tuple.
    """
    system = RING_SYSTEMS.get(body)
    if system is None:
        return ()
    names = _MAIN_VISIBLE[body]
    return tuple(c for c in system.components if c.name in names)


def get_ring_extent(body: Body) -> tuple[float, float]:
    """Innermost and outermost ring radius in km. (0, 0) for ringless bodies."""
    system = RING_SYSTEMS.get(body)
    if system is None or not system.components:
        return 0.0, 0.0
    inner = min(c.inner_radius_km for c in system.components)
    outer = max(c.outer_radius_km for c in system.components)
    return float(inner), float(outer)
