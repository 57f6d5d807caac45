"""Factor-of-safety and footing-size curves along the sweep."""

import plotly.graph_objects as go

from retwall.models import SweepPoint
from .styles import FACTOR_LABELS, LINE_WIDTH_BOLD, LINE_WIDTH_THIN

# Factors above this only stretch the axis
_FACTOR_AXIS_CAP = 10.0


def _sorted(trace: list[SweepPoint]) -> list[SweepPoint]:
    # Bisection points arrive out of order
    return sorted(trace, key=lambda p: p.parameter)


def plot_factor_curves(plotter, trace: list[SweepPoint]):
    """Three factors of safety against the sweep parameter (left panel)."""
    if not trace:
        return

    points = _sorted(trace)
    x = [p.parameter for p in points]
    symbol = plotter.labels["parameter"]
    plotter.min_parameter = min(x)
    plotter.max_parameter = max(x)

    for key in ("overturning", "sliding", "bearing"):
        values = [getattr(p, f"{key}_factor") for p in points]
        plotter.max_factor = min(max(plotter.max_factor, *values), _FACTOR_AXIS_CAP)
        plotter.fig.add_trace(go.Scatter(
            x=x, y=values, mode="lines+markers", name=FACTOR_LABELS[key],
            line=dict(color=plotter.colors[key], width=LINE_WIDTH_BOLD),
            marker=dict(size=6),
            hovertemplate=f"{symbol} = %{{x:.0f}} in<br>{key} = %{{y:.2f}}<extra></extra>",
        ), row=1, col=1)

    plotter._update_axes()


def plot_size_curves(plotter, trace: list[SweepPoint]):
    """Footprint (toe + heel) and thickness against the sweep parameter (right panel)."""
    if not trace:
        return

    points = _sorted(trace)
    x = [p.parameter for p in points]
    footprint = [p.footprint for p in points]
    thickness = [p.thickness for p in points]
    plotter.max_length = max(plotter.max_length, *footprint, *thickness)

    plotter.fig.add_trace(go.Scatter(
        x=x, y=footprint, mode="lines+markers", name="Footprint (toe + heel)",
        line=dict(color=plotter.colors["footprint"], width=LINE_WIDTH_BOLD),
        hovertemplate="footprint = %{y:.0f} in<extra></extra>",
    ), row=1, col=2)
    plotter.fig.add_trace(go.Scatter(
        x=x, y=thickness, mode="lines+markers", name="Thickness",
        line=dict(color=plotter.colors["thickness"], width=LINE_WIDTH_THIN, dash="dash"),
        hovertemplate="t = %{y:.0f} in<extra></extra>",
    ), row=1, col=2)

    plotter._update_axes()
