"""Physical and visual properties of solar system bodies.

Notes on data quality:
- Sun: IAU 2015 nominal values
- Planets: JPL SSD, uncertainties typically < 0.1 %
- Moon: NASA GSFC, laser-ranging precision

All tables are read-only mappings keyed by `Body`, built once at import.
"""

from types import MappingProxyType
from typing import Mapping

from orrery.models import Body, BodyPhysicalProperties, BodyVisualProperties

JPL_SSD_PHYS_PAR = "https://ssd.jpl.nasa.gov/planets/phys_par.html"
NASA_FACT_SHEET = "https://nssdc.gsfc.nasa.gov/planetary/factsheet/"

BODY_PHYSICAL: Mapping[Body, BodyPhysicalProperties] = MappingProxyType(
    {
        Body.SUN: BodyPhysicalProperties(
            id=Body.SUN,
            radius_mean_km=696_340,
            radius_equatorial_km=696_340,
            mass_kg=1.98892e30,
            gm_km3_s2=1.32712440018e11,
            density_g_cm3=1.408,
            sidereal_rotation_hours=609.12,  # ~25.38 days at the equator
            obliquity_deg=7.25,  # to the ecliptic
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.MERCURY: BodyPhysicalProperties(
            id=Body.MERCURY,
            radius_mean_km=2_439.7,
            radius_equatorial_km=2_440.5,
            radius_polar_km=2_438.3,
            mass_kg=3.3011e23,
            gm_km3_s2=2.2032e4,
            density_g_cm3=5.427,
            sidereal_rotation_hours=1407.6,  # 58.646 days
            obliquity_deg=0.034,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.VENUS: BodyPhysicalProperties(
            id=Body.VENUS,
            radius_mean_km=6_051.8,
            radius_equatorial_km=6_051.8,
            mass_kg=4.8675e24,
            gm_km3_s2=3.24859e5,
            density_g_cm3=5.243,
            sidereal_rotation_hours=-5832.5,  # retrograde, 243.025 days
            obliquity_deg=177.36,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.EARTH: BodyPhysicalProperties(
            id=Body.EARTH,
            radius_mean_km=6_371.0,
            radius_equatorial_km=6_378.137,
            radius_polar_km=6_356.752,
            mass_kg=5.9722e24,
            gm_km3_s2=3.986004418e5,
            density_g_cm3=5.514,
            sidereal_rotation_hours=23.9345,
            obliquity_deg=23.4393,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.MOON: BodyPhysicalProperties(
            id=Body.MOON,
            radius_mean_km=1_737.4,
            radius_equatorial_km=1_738.1,
            radius_polar_km=1_736.0,
            mass_kg=7.342e22,
            gm_km3_s2=4.9028695e3,
            density_g_cm3=3.344,
            sidereal_rotation_hours=655.728,  # tidally locked, ~27.32 days
            obliquity_deg=6.68,  # to the ecliptic
            source=NASA_FACT_SHEET,
        ),
        Body.MARS: BodyPhysicalProperties(
            id=Body.MARS,
            radius_mean_km=3_389.5,
            radius_equatorial_km=3_396.2,
            radius_polar_km=3_376.2,
            mass_kg=6.4171e23,
            gm_km3_s2=4.282837e4,
            density_g_cm3=3.933,
            sidereal_rotation_hours=24.6229,
            obliquity_deg=25.19,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.JUPITER: BodyPhysicalProperties(
            id=Body.JUPITER,
            radius_mean_km=69_911,
            radius_equatorial_km=71_492,
            radius_polar_km=66_854,
            mass_kg=1.8982e27,
            gm_km3_s2=1.26686534e8,
            density_g_cm3=1.326,
            sidereal_rotation_hours=9.925,
            obliquity_deg=3.13,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.SATURN: BodyPhysicalProperties(
            id=Body.SATURN,
            radius_mean_km=58_232,
            radius_equatorial_km=60_268,
            radius_polar_km=54_364,
            mass_kg=5.6834e26,
            gm_km3_s2=3.7931187e7,
            density_g_cm3=0.687,  # less dense than water
            sidereal_rotation_hours=10.656,
            obliquity_deg=26.73,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.URANUS: BodyPhysicalProperties(
            id=Body.URANUS,
            radius_mean_km=25_362,
            radius_equatorial_km=25_559,
            radius_polar_km=24_973,
            mass_kg=8.681e25,
            gm_km3_s2=5.793939e6,
            density_g_cm3=1.271,
            sidereal_rotation_hours=-17.24,  # retrograde
            obliquity_deg=97.77,
            source=JPL_SSD_PHYS_PAR,
        ),
        Body.NEPTUNE: BodyPhysicalProperties(
            id=Body.NEPTUNE,
            radius_mean_km=24_622,
            radius_equatorial_km=24_764,
            radius_polar_km=24_341,
            mass_kg=1.02413e26,
            gm_km3_s2=6.836529e6,
            density_g_cm3=1.638,
            sidereal_rotation_hours=16.11,
            obliquity_deg=28.32,
            source=JPL_SSD_PHYS_PAR,
        ),
    }
)

# Colors are approximate averages from spacecraft imagery; textures are 2K maps
BODY_VISUAL: Mapping[Body, BodyVisualProperties] = MappingProxyType(
    {
        Body.SUN: BodyVisualProperties(Body.SUN, "#ffd27d", "/textures/2k_sun.jpg"),
        Body.MERCURY: BodyVisualProperties(Body.MERCURY, "#b5b5b5", "/textures/2k_mercury.jpg"),
        Body.VENUS: BodyVisualProperties(Body.VENUS, "#e6c87a", "/textures/2k_venus_surface.jpg"),
        Body.EARTH: BodyVisualProperties(Body.EARTH, "#6b93d6", "/textures/earth_daymap.jpg"),
        Body.MOON: BodyVisualProperties(Body.MOON, "#aaaaaa", "/textures/2k_moon.jpg"),
        Body.MARS: BodyVisualProperties(Body.MARS, "#c1440e", "/textures/2k_mars.jpg"),
        Body.JUPITER: BodyVisualProperties(
            Body.JUPITER, "#d4a574", "/textures/2k_jupiter.jpg", has_rings=True
        ),
        Body.SATURN: BodyVisualProperties(
            Body.SATURN, "#f4d59e", "/textures/2k_saturn.jpg", has_rings=True
        ),
        Body.URANUS: BodyVisualProperties(
            Body.URANUS, "#b5e3e3", "/textures/2k_uranus.jpg", has_rings=True
        ),
        Body.NEPTUNE: BodyVisualProperties(
            Body.NEPTUNE, "#5b7fde", "/textures/2k_neptune.jpg", has_rings=True
        ),
    }
)

# Mean orbital speed, km/s (NASA fact sheets). Moon is relative to Earth.
ORBITAL_VELOCITY_KMS: Mapping[Body, float] = MappingProxyType(
    {
        Body.SUN: 0.0,
        Body.MERCURY: 47.87,
        Body.VENUS: 35.02,
        Body.EARTH: 29.78,
        Body.MOON: 1.022,
        Body.MARS: 24.07,
        Body.JUPITER: 13.07,
        Body.SATURN: 9.68,
        Body.URANUS: 6.8,
        Body.NEPTUNE: 5.43,
    }
)

# Equatorial rotation speed, km/h (NASA fact sheets)
EQUATORIAL_ROTATION_KMH: Mapping[Body, float] = MappingProxyType(
    {
        Body.SUN: 7189.0,
        Body.MERCURY: 10.83,
        Body.VENUS: 6.52,  # retrograde
        Body.EARTH: 1674.4,
        Body.MOON: 16.7,
        Body.MARS: 868.22,
        Body.JUPITER: 45583.0,
        Body.SATURN: 36840.0,
        Body.URANUS: 9320.0,
        Body.NEPTUNE: 9719.0,
    }
)

# Semi-major axis, AU (JPL SSD). Moon is from Earth.
SEMI_MAJOR_AXIS_AU: Mapping[Body, float] = MappingProxyType(
    {
        Body.SUN: 0.0,
        Body.MERCURY: 0.387,
        Body.VENUS: 0.723,
        Body.EARTH: 1.0,
        Body.MOON: 0.00257,
        Body.MARS: 1.524,
        Body.JUPITER: 5.203,
        Body.SATURN: 9.537,
        Body.URANUS: 19.19,
        Body.NEPTUNE: 30.07,
    }
)

# Orbital inclination to the ecliptic, degrees (JPL SSD)
ORBITAL_INCLINATION_DEG: Mapping[Body, float] = MappingProxyType(
    {
        Body.SUN: 0.0,
        Body.MERCURY: 7.005,
        Body.VENUS: 3.395,
        Body.EARTH: 0.0,
        Body.MOON: 5.145,
        Body.MARS: 1.85,
        Body.JUPITER: 1.303,
        Body.SATURN: 2.489,
        Body.URANUS: 0.773,
        Body.NEPTUNE: 1.77,
    }
)
