"""Plotly 3D interactive renderer.

Plots scene coordinates directly. Scene y is ecliptic north, so plotly's
z axis carries scene y to keep "up" up.
"""

import math

import plotly.graph_objects as go

from orrery.models import Body, BodyStateRender

_BG = "#050a1a"
_ORBIT_COLOR = "#334466"
_ORBIT_SEGMENTS = 128

# Marker size in px; scene radii span five orders of magnitude
_MIN_MARKER = 3
_MAX_MARKER = 18


def _marker_sizes(bodies: list[BodyStateRender]) -> list[float]:
    largest = max(b.radius_scene for b in bodies) or 1.0
    return [max(_MIN_MARKER, _MAX_MARKER * b.radius_scene / largest) for b in bodies]


def render_plotly_figure(bodies: list[BodyStateRender], show_orbits: bool = True) -> go.Figure:
    """Render body states as a Plotly 3D scatter.

    Orbits are circles in the ecliptic plane at each body's scene distance,
    drawn as one line trace with None separators.

    Args:
        bodies: Render states, Sun first.
        show_orbits: Whether to draw orbit circles.

    Returns:
        Plotly Figure object.
    """
    traces = []

    if show_orbits:
        ox: list[float | None] = []
        oy: list[float | None] = []
        oz: list[float | None] = []
        for body in bodies:
            if body.id in (Body.SUN, Body.MOON):
                continue
            for i in range(_ORBIT_SEGMENTS + 1):
                a = 2 * math.pi * i / _ORBIT_SEGMENTS
                ox.append(body.distance_scene * math.cos(a))
                oy.append(body.distance_scene * math.sin(a))
                oz.append(0.0)
            ox.append(None)
            oy.append(None)
            oz.append(None)
        traces.append(
            go.Scatter3d(
                x=ox,
                y=oy,
                z=oz,
                mode="lines",
                line=dict(color=_ORBIT_COLOR, width=1),
                hoverinfo="skip",
                name="orbits",
            )
        )

    traces.append(
        go.Scatter3d(
            x=[b.position.x for b in bodies],
            y=[-b.position.z for b in bodies],
            z=[b.position.y for b in bodies],
            mode="markers+text",
            marker=dict(size=_marker_sizes(bodies), color=[b.color for b in bodies], line=dict(width=0)),
            text=[b.id.value for b in bodies],
            textposition="top center",
            textfont=dict(color="#cccccc", size=10),
            customdata=[[b.distance_au, b.radius_scene] for b in bodies],
            hovertemplate="%{text}<br>%{customdata[0]:.4f} AU<br>r=%{customdata[1]:.3g}<extra></extra>",
            name="bodies",
        )
    )

    fig = go.Figure(data=traces)
    axis = dict(visible=False, showbackground=False)
    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        scene=dict(xaxis=axis, yaxis=axis, zaxis=axis, aspectmode="data", bgcolor=_BG),
    )
    return fig
