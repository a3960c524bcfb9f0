"""Tests for distance/size scaling, mapping validation and presets."""

import math

import pytest

from orrery.data.physical import BODY_PHYSICAL
from orrery.models import (
    Body,
    ClampedMinimum,
    CustomMetric,
    LinearDistance,
    Log10Distance,
    LogCompress,
    PhysicalSize,
    PiecewiseDistance,
    RatioToJupiter,
    RatioToMercury,
    RatioToSun,
    RenderMapping,
)
from orrery.scale import (
    AU_KM,
    DISTANCE_LINEAR,
    DISTANCE_LINEAR_RATIO,
    DISTANCE_LOG,
    DISTANCE_PIECEWISE,
    PRESET_SCHOOL_MODEL,
    PRESET_TRUE_PHYSICAL,
    RENDER_PRESETS,
    SIZE_NORMALIZED,
    SIZE_RATIO_MERCURY,
    MappingValidationError,
    create_mapping,
    create_mapping_from_simple,
    create_physical_mapping,
    create_validated_mapping,
    get_preset,
    scale_distance,
    scale_size,
    validate_mapping,
)


class TestScaleDistance:

    def test_linear(self):
        assert scale_distance(5.2, LinearDistance(au_to_scene=3.0)) == pytest.approx(15.6)

    def test_log_at_zero(self):
        assert scale_distance(0.0, DISTANCE_LOG) == 0.0

    def test_log_formula(self):
        assert scale_distance(1.0, Log10Distance(scale=2.0, multiplier=3.0)) == pytest.approx(
            3.0 * math.log10(3.0)
        )

    @pytest.mark.parametrize("d", [0.39, 1.0, 5.2, 30.07])
    def test_log_is_odd(self, d):
        assert scale_distance(-d, DISTANCE_LOG) == pytest.approx(-scale_distance(d, DISTANCE_LOG))

    def test_log_monotonic(self):
        values = [scale_distance(d, DISTANCE_LOG) for d in (0.39, 0.72, 1.0, 1.52, 5.2, 9.5, 19.2, 30.1)]
        assert values == sorted(values)

    def test_piecewise_linear_inside(self):
        cfg = DISTANCE_PIECEWISE
        assert scale_distance(1.0, cfg) == pytest.approx(1.0 * cfg.inner_scale)

    def test_piecewise_continuous_at_boundary(self):
        cfg = PiecewiseDistance(inner_radius_au=2.0, inner_scale=2.0, outer_log_scale=1.5, outer_multiplier=2.5)
        below = scale_distance(2.0, cfg)
        above = scale_distance(2.0 + 1e-9, cfg)
        assert above == pytest.approx(below, abs=1e-7)

    def test_piecewise_log_beyond(self):
        cfg = DISTANCE_PIECEWISE
        expected = 2.0 * 2.0 + math.log10(1 + 28.0 * 1.5) * 2.5
        assert scale_distance(30.0, cfg) == pytest.approx(expected)

    def test_unknown_config_raises(self):
        with pytest.raises(TypeError):
            scale_distance(1.0, object())  # type: ignore[arg-type]


class TestScaleSize:

    def test_physical(self):
        k = 3.0 / AU_KM
        assert scale_size(Body.EARTH, PhysicalSize(km_to_scene=k)) == pytest.approx(
            BODY_PHYSICAL[Body.EARTH].radius_mean_km * k
        )

    def test_ratio_to_sun_reference(self):
        assert scale_size(Body.SUN, RatioToSun(sun_radius_scene=0.25)) == pytest.approx(0.25)

    def test_ratio_to_mercury_reference(self):
        assert scale_size(Body.MERCURY, RatioToMercury(mercury_radius_scene=0.02)) == pytest.approx(0.02)

    def test_ratio_preserves_planet_ratios(self):
        cfg = RatioToMercury(mercury_radius_scene=0.02)
        ratio = scale_size(Body.JUPITER, cfg) / scale_size(Body.EARTH, cfg)
        physical = BODY_PHYSICAL[Body.JUPITER].radius_mean_km / BODY_PHYSICAL[Body.EARTH].radius_mean_km
        assert ratio == pytest.approx(physical)

    def test_ratio_to_jupiter_shrinks_sun(self):
        cfg = RatioToJupiter(jupiter_radius_scene=0.06)
        assert scale_size(Body.JUPITER, cfg) == pytest.approx(0.06)
        unreduced = 0.06 * BODY_PHYSICAL[Body.SUN].radius_mean_km / BODY_PHYSICAL[Body.JUPITER].radius_mean_km
        assert scale_size(Body.SUN, cfg) == pytest.approx(unreduced * 0.3)

    def test_clamped_minimum_floors_small_bodies(self):
        cfg = ClampedMinimum(min_radius_scene=0.008, base=SIZE_NORMALIZED)
        assert scale_size(Body.MOON, SIZE_NORMALIZED) < 0.008
        assert scale_size(Body.MOON, cfg) == 0.008

    def test_clamped_minimum_keeps_large_bodies(self):
        cfg = ClampedMinimum(min_radius_scene=0.008, base=SIZE_NORMALIZED)
        assert scale_size(Body.JUPITER, cfg) == pytest.approx(0.06)

    def test_custom_metric_radius(self):
        cfg = CustomMetric(metric="radius", reference_body=Body.EARTH, reference_radius_scene=0.1)
        assert scale_size(Body.EARTH, cfg) == pytest.approx(0.1)

    def test_custom_metric_diameter_equals_radius(self):
        by_diameter = CustomMetric(metric="diameter", reference_body=Body.EARTH, reference_radius_scene=0.1)
        by_radius = CustomMetric(metric="radius", reference_body=Body.EARTH, reference_radius_scene=0.1)
        assert scale_size(Body.MARS, by_diameter) == pytest.approx(scale_size(Body.MARS, by_radius))

    def test_custom_metric_volume_cube_root(self):
        """Volume ratios are cube-rooted back to radius ratios."""
        by_volume = CustomMetric(metric="volume", reference_body=Body.EARTH, reference_radius_scene=0.1)
        by_radius = CustomMetric(metric="radius", reference_body=Body.EARTH, reference_radius_scene=0.1)
        assert scale_size(Body.SATURN, by_volume) == pytest.approx(scale_size(Body.SATURN, by_radius))

    def test_custom_metric_mass_log_compressed(self):
        cfg = CustomMetric(
            metric="mass",
            reference_body=Body.EARTH,
            reference_radius_scene=0.05,
            log_compress=LogCompress(scale=0.5, multiplier=1.2),
        )
        assert scale_size(Body.EARTH, cfg) == pytest.approx(0.05 * math.log10(1.5) * 1.2)
        assert scale_size(Body.JUPITER, cfg) > scale_size(Body.EARTH, cfg)

    def test_unknown_config_raises(self):
        with pytest.raises(TypeError):
            scale_size(Body.EARTH, object())  # type: ignore[arg-type]


class TestValidateMapping:

    def test_accepts_exact_physical(self):
        validate_mapping(PRESET_TRUE_PHYSICAL)

    def test_accepts_within_tolerance(self):
        k = 3.0 / AU_KM
        validate_mapping(RenderMapping(LinearDistance(3.0), PhysicalSize(km_to_scene=k * (1 + 1e-12))))

    def test_rejects_physical_with_log_distance(self):
        with pytest.raises(MappingValidationError, match="linear"):
            validate_mapping(RenderMapping(DISTANCE_LOG, PhysicalSize(km_to_scene=3.0 / AU_KM)))

    def test_rejects_physical_with_piecewise_distance(self):
        with pytest.raises(MappingValidationError):
            validate_mapping(RenderMapping(DISTANCE_PIECEWISE, PhysicalSize(km_to_scene=3.0 / AU_KM)))

    def test_rejects_km_to_scene_mismatch(self):
        with pytest.raises(MappingValidationError, match="mismatch"):
            validate_mapping(RenderMapping(LinearDistance(3.0), PhysicalSize(km_to_scene=3.0 / AU_KM * 1.01)))

    def test_rejects_beyond_tolerance(self):
        k = 3.0 / AU_KM
        with pytest.raises(MappingValidationError):
            validate_mapping(RenderMapping(LinearDistance(3.0), PhysicalSize(km_to_scene=k * (1 + 1e-8))))

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.nan, math.inf])
    def test_rejects_bad_linear_scale(self, bad):
        with pytest.raises(MappingValidationError):
            validate_mapping(RenderMapping(LinearDistance(bad), SIZE_NORMALIZED))

    def test_rejects_bad_log_parameters(self):
        with pytest.raises(MappingValidationError):
            validate_mapping(RenderMapping(Log10Distance(scale=0.0, multiplier=3.0), SIZE_NORMALIZED))

    def test_non_physical_sizes_unconstrained(self):
        validate_mapping(RenderMapping(DISTANCE_LOG, SIZE_RATIO_MERCURY))


class TestPresets:

    def test_six_presets(self):
        assert set(RENDER_PRESETS) == {
            "truePhysical",
            "planetRatio",
            "schoolModel",
            "trueSizes",
            "explorer",
            "massComparison",
        }

    @pytest.mark.parametrize("name", sorted(RENDER_PRESETS))
    def test_all_valid(self, name):
        validate_mapping(get_preset(name))

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("galaxyBrain")

    def test_read_only(self):
        with pytest.raises(TypeError):
            RENDER_PRESETS["mine"] = PRESET_TRUE_PHYSICAL  # type: ignore[index]


class TestMappingFactories:

    def test_create_mapping_does_not_validate(self):
        mapping = create_mapping(DISTANCE_LOG, PhysicalSize(km_to_scene=1.0))
        assert mapping.distance_scale == DISTANCE_LOG

    def test_create_validated_mapping_validates(self):
        with pytest.raises(MappingValidationError):
            create_validated_mapping(DISTANCE_LOG, PhysicalSize(km_to_scene=1.0))

    @pytest.mark.parametrize("au_to_scene", [1.0, 3.0, 100.0, 1e6])
    def test_physical_mapping(self, au_to_scene):
        mapping = create_physical_mapping(au_to_scene)
        assert mapping.size_scale.km_to_scene == pytest.approx(au_to_scene / AU_KM, rel=1e-15)

    def test_simple_log_normalized(self):
        assert create_mapping_from_simple("log", "normalized") == PRESET_SCHOOL_MODEL

    def test_simple_real_real_uses_wide_spacing(self):
        mapping = create_mapping_from_simple("real", "real")
        assert mapping.distance_scale == DISTANCE_LINEAR_RATIO
        assert mapping.size_scale == SIZE_RATIO_MERCURY

    def test_simple_real_physical(self):
        mapping = create_mapping_from_simple("real", "physical")
        assert mapping.distance_scale == DISTANCE_LINEAR
        assert isinstance(mapping.size_scale, PhysicalSize)

    def test_simple_log_physical_rejected(self):
        with pytest.raises(MappingValidationError):
            create_mapping_from_simple("log", "physical")
