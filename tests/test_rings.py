"""Tests for planetary ring systems."""

import pytest

from orrery.data.physical import BODY_PHYSICAL
from orrery.data.rings import (
    RING_SYSTEMS,
    SATURN_RINGS,
    get_main_visible_rings,
    get_ring_extent,
)
from orrery.models import RINGED_BODIES, Body


class TestRingSystems:

    def test_ringed_bodies_covered(self):
        assert set(RING_SYSTEMS) == set(RINGED_BODIES)

    @pytest.mark.parametrize("body", RINGED_BODIES)
    def test_components_well_formed(self, body):
        for component in RING_SYSTEMS[body].components:
            assert 0 < component.inner_radius_km < component.outer_radius_km
            assert component.source.startswith("https://")

    @pytest.mark.parametrize("body", RINGED_BODIES)
    def test_rings_outside_planet(self, body):
        inner, _ = get_ring_extent(body)
        assert inner > BODY_PHYSICAL[body].radius_mean_km

    def test_inclination_follows_obliquity(self):
        for body, system in RING_SYSTEMS.items():
            assert system.inclination_deg == pytest.approx(BODY_PHYSICAL[body].obliquity_deg, abs=0.1)

    def test_cassini_division_between_b_and_a(self):
        by_name = {c.name: c for c in SATURN_RINGS}
        assert by_name["Cassini Division"].inner_radius_km == by_name["B Ring"].outer_radius_km
        assert by_name["Cassini Division"].outer_radius_km == by_name["A Ring"].inner_radius_km


class TestMainVisibleRings:

    def test_saturn(self):
        names = [c.name for c in get_main_visible_rings(Body.SATURN)]
        assert names == ["C Ring (Crepe Ring)", "B Ring", "Cassini Division", "A Ring"]

    def test_uranus_epsilon(self):
        assert [c.name for c in get_main_visible_rings(Body.URANUS)] == ["Epsilon Ring"]

    def test_ringless_body_empty(self):
        assert get_main_visible_rings(Body.EARTH) == ()


class TestRingExtent:

    def test_saturn(self):
        assert get_ring_extent(Body.SATURN) == (66_900.0, 483_000.0)

    def test_ringless_body(self):
        assert get_ring_extent(Body.MARS) == (0.0, 0.0)
