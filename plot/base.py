"""Base plotter: layout and axes."""

from plotly.subplots import make_subplots

from .styles import COLORS_DARK, COLORS_LIGHT, FONT_FAMILY, FONT_SIZE, LABELS


def _auto_dtick(max_val: float, thresholds: list[tuple[float, float]]) -> float:
    """Pick an axis tick step for the data range."""
    for threshold, dtick in thresholds:
        if max_val < threshold:
            return dtick
    return thresholds[-1][1]


# Thresholds per axis
_PARAMETER_THRESHOLDS = [(10, 1), (25, 2), (50, 5), (float("inf"), 10)]
_FACTOR_THRESHOLDS = [(3, 0.25), (6, 0.5), (12, 1.0), (float("inf"), 2.0)]
_LENGTH_THRESHOLDS = [(24, 2), (60, 6), (120, 12), (float("inf"), 24)]


class BasePlotter:
    """Layout and axis setup shared by the sweep charts."""

    def __init__(self, objective: str = "MinimizeExcavation", theme: str = "dark"):
        self.objective = objective
        self.theme = theme
        self.colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
        self.labels = LABELS.get(objective, LABELS["MinimizeExcavation"])
        self.fig = make_subplots(rows=1, cols=2, horizontal_spacing=0.12)
        self._setup_layout()
        self.min_parameter = 0.0
        self.max_parameter = 0.0
        self.max_factor = 0.0
        self.max_length = 0.0

    def _setup_layout(self):
        """Base layout settings."""
        self.fig.update_layout(
            font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            template=self.colors["template"],
            height=700,
            width=1500,
            margin=dict(l=80, r=80, t=120, b=150),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="top", y=-0.15,
                xanchor="center", x=0.5,
                bgcolor=self.colors["legend_bg"],
                bordercolor=self.colors["legend_border"],
                borderwidth=1,
                font=dict(size=13, color=self.colors["text"]),
            ),
            plot_bgcolor=self.colors["plot_bg"],
            paper_bgcolor=self.colors["paper_bg"],
        )

        # Titles
        for text, x in [(self.labels["title_left"], 0.22), (self.labels["title_right"], 0.78)]:
            self.fig.add_annotation(
                text=text, x=x, y=1.08, xref="paper", yref="paper",
                showarrow=False, font=dict(size=18, color=self.colors["text"]),
                xanchor="center", yanchor="bottom",
            )

    def _update_axes(self):
        """Fit the axes to the plotted data."""
        span = max(self.max_parameter - self.min_parameter, 1.0)
        pad = span * 0.05
        x_axis_config = dict(
            title=dict(text=self.labels["x_label"], standoff=10),
            range=[self.min_parameter - pad, self.max_parameter + pad],
            dtick=_auto_dtick(span, _PARAMETER_THRESHOLDS),
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, tickcolor=self.colors["axis_tick"],
            tickfont=dict(family=FONT_FAMILY, size=FONT_SIZE - 2, color=self.colors["text"]),
            mirror=True,
        )
        self.fig.update_xaxes(**x_axis_config, row=1, col=1)
        self.fig.update_xaxes(**x_axis_config, row=1, col=2)

        y_axis_base = dict(
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, tickcolor=self.colors["axis_tick"],
            tickfont=dict(family=FONT_FAMILY, size=FONT_SIZE - 2, color=self.colors["text"]),
            mirror=True,
        )

        # Factors (left)
        max_y_factor = self.max_factor * 1.1 if self.max_factor > 0 else 3.0
        self.fig.update_yaxes(
            title=dict(text="<b>Factor of safety</b>", standoff=10),
            range=[0, max_y_factor],
            dtick=_auto_dtick(max_y_factor, _FACTOR_THRESHOLDS),
            **y_axis_base, row=1, col=1,
        )

        # Footprint and thickness (right)
        max_y_length = self.max_length * 1.1 if self.max_length > 0 else 24.0
        self.fig.update_yaxes(
            title=dict(text="<b>Length, in</b>", standoff=10),
            range=[0, max_y_length],
            dtick=_auto_dtick(max_y_length, _LENGTH_THRESHOLDS),
            **y_axis_base, row=1, col=2,
        )

    def get_figure(self):
        """Return the figure sized for export."""
        self.fig.update_layout(autosize=False, width=1500, height=700)
        return self.fig
