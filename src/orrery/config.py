"""Environment-driven settings. Entry points call `load_dotenv()` before `load_settings()`."""

import os
from dataclasses import dataclass
from pathlib import Path

from orrery.skyfield_oracle import DEFAULT_DATA_DIR, DEFAULT_EPHEMERIS


@dataclass(frozen=True)
class Settings:
    data_dir: Path  # Directory holding (or receiving) the SPK kernel
    ephemeris: str  # Kernel file name, e.g. "de421.bsp"
    preset: str  # Default render preset name
    log_level: str


def load_settings() -> Settings:
    """Read settings from the process environment, falling back to defaults."""
    return Settings(
        data_dir=Path(os.environ.get("ORRERY_DATA_DIR", str(DEFAULT_DATA_DIR))),
        ephemeris=os.environ.get("ORRERY_EPHEMERIS", DEFAULT_EPHEMERIS),
        preset=os.environ.get("ORRERY_PRESET", "truePhysical"),
        log_level=os.environ.get("ORRERY_LOG_LEVEL", "WARNING").upper(),
    )
