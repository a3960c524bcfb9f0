"""CLI entry point for solar system snapshots.

    uv run orrery-snapshot 2024-06-15T12:00 --preset schoolModel
    uv run orrery-snapshot --html results/now.html
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from pytz import utc

load_dotenv()

from orrery.config import load_settings  # noqa: E402
from orrery.ephemeris import EphemerisProvider, to_utc  # noqa: E402
from orrery.models import Body  # noqa: E402
from orrery.render import get_moon_render, get_solar_system_render  # noqa: E402
from orrery.renderers.plotly_3d import render_plotly_figure  # noqa: E402
from orrery.renderers.static import save_static_chart  # noqa: E402
from orrery.scale import RENDER_PRESETS, get_preset  # noqa: E402
from orrery.skyfield_oracle import SkyfieldOracle  # noqa: E402

logger = logging.getLogger(__name__)


def _parse_epoch(value: str) -> datetime:
    try:
        return to_utc(datetime.fromisoformat(value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {value!r}") from e


def build_parser(default_preset: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="orrery-snapshot", description="Render the solar system at an epoch.")
    parser.add_argument(
        "epoch",
        nargs="?",
        type=_parse_epoch,
        help="ISO 8601 datetime; naive values are UTC. Defaults to now.",
    )
    parser.add_argument("--preset", default=default_preset, choices=sorted(RENDER_PRESETS))
    parser.add_argument("--output", type=Path, help="PNG path. Defaults to results/<preset>__<epoch>.png")
    parser.add_argument("--html", type=Path, help="Also write an interactive 3D plotly page here")
    parser.add_argument("--no-moon", action="store_true", help="Omit the Moon")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser(settings.preset).parse_args(argv)
    epoch = args.epoch or datetime.now(utc)
    mapping = get_preset(args.preset)

    provider = EphemerisProvider(SkyfieldOracle(settings.data_dir, settings.ephemeris))
    bodies = get_solar_system_render(provider, epoch, mapping)
    if not args.no_moon:
        earth = next(b for b in bodies if b.id == Body.EARTH)
        bodies.append(get_moon_render(provider, earth.position, epoch, mapping))

    for body in bodies:
        logger.info(
            "%-8s %10.5f AU  scene %.4g  r %.3g",
            body.id.value,
            body.distance_au,
            body.distance_scene,
            body.radius_scene,
        )

    path = save_static_chart(bodies, epoch, args.preset, args.output)
    print(f"Saved: {path}")

    if args.html is not None:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        render_plotly_figure(bodies).write_html(args.html)
        print(f"Saved: {args.html}")

    phase = provider.get_moon_phase(epoch)
    print(f"Moon phase: {phase:.3f} (0 new, 0.5 full)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
