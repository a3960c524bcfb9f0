"""Matplotlib static PNG renderer — top-down view of the ecliptic plane."""

from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from orrery.models import Body, BodyStateRender

_ROOT = Path(__file__).parent.parent.parent.parent

_BG = "black"
_ORBIT_COLOR = "#334466"


def _top_down(body: BodyStateRender) -> tuple[float, float]:
    """Scene (x, -z) is ecliptic (x, y): looking down from ecliptic north."""
    return body.position.x, -body.position.z


def render_static_chart(bodies: list[BodyStateRender], chart_size: int = 10) -> Figure:
    """Render body states as a static matplotlib image.

    Orbits are drawn as circles at each body's scene distance from the Sun.
    Bodies keep their scene radius, so under true scale they are sub-pixel;
    markers are drawn as well so every body stays visible.

    Args:
        bodies: Render states, Sun first.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    extent = max((b.distance_scene for b in bodies if b.id != Body.MOON), default=1.0) or 1.0

    for body in bodies:
        if body.id in (Body.SUN, Body.MOON):
            continue
        orbit = Circle((0, 0), radius=body.distance_scene, fill=False, color=_ORBIT_COLOR, linewidth=0.5)
        ax.add_patch(orbit)

    for body in bodies:
        x, y = _top_down(body)
        ax.add_patch(Circle((x, y), radius=body.radius_scene, color=body.color, zorder=3))

    xy = np.array([_top_down(b) for b in bodies])
    ax.scatter(xy[:, 0], xy[:, 1], s=12, c=[b.color for b in bodies], linewidths=0, zorder=4)
    for body, (x, y) in zip(bodies, xy):
        ax.annotate(
            body.id.value,
            (x, y),
            xytext=(4, 4),
            textcoords="offset points",
            color="#cccccc",
            fontsize=7,
        )

    limit = extent * 1.08
    ax.set_xlim(-limit, limit)
    ax.set_ylim(-limit, limit)
    ax.set_aspect("equal")
    ax.axis("off")

    return fig


def save_static_chart(
    bodies: list[BodyStateRender],
    epoch: datetime,
    preset: str,
    output_path: Path | None = None,
) -> Path:
    """Save body states as a PNG file.

    Args:
        bodies: Render states, Sun first.
        epoch: Epoch of the states, used for the default file name.
        preset: Preset name, used for the default file name.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        when_str = epoch.strftime("%Y_%m_%d_%H_%M")
        output_path = _ROOT / "results" / f"{preset}__{when_str}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(bodies)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
