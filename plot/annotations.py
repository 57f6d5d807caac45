"""Annotations: minimum factor lines and the winning candidate."""

import plotly.graph_objects as go

from .styles import FONT_SIZE


def add_minimum_lines(plotter, minimums: dict[str, float]):
    """Dotted horizontal lines at the required factors of safety."""
    for key, value in minimums.items():
        plotter.fig.add_hline(
            y=value, line_width=2, line_dash="dot", line_color=plotter.colors[key], row=1, col=1,
        )
        plotter.fig.add_annotation(
            x=0.98, y=value, xref="x domain", yref="y",
            text=f"<b>min {key} = {value:.2f}</b>",
            showarrow=False, yshift=10, xanchor="right",
            bgcolor=plotter.colors["annotation_bg"],
            font=dict(color=plotter.colors[key], size=FONT_SIZE - 4),
        )
        plotter.max_factor = max(plotter.max_factor, value)
    plotter._update_axes()


def add_winner_marker(plotter, parameter: float | None, footprint: float | None):
    """Star at the accepted candidate on the footing-size panel."""
    if parameter is None or footprint is None:
        return

    plotter.fig.add_trace(go.Scatter(
        x=[parameter], y=[footprint], mode="markers", name="Selected",
        marker=dict(
            symbol="star", size=18, color=plotter.colors["winner"],
            line=dict(width=1.5, color=plotter.colors["marker_border"]),
        ),
        hovertemplate="selected: footprint = %{y:.0f} in<extra></extra>",
    ), row=1, col=2)
    plotter.fig.add_vline(
        x=parameter, line_width=1, line_dash="dot", line_color=plotter.colors["winner"], row=1, col=1,
    )
