"""Charts of the optimization sweep."""

from retwall.models import DesignResult, DesignSettings, SweepPoint

from .base import BasePlotter
from .curves import plot_factor_curves, plot_size_curves
from .annotations import add_minimum_lines, add_winner_marker
from .zones import add_pass_fail_zones


class SweepPlotter(BasePlotter):
    """Two-panel chart: factors of safety and footing size against the sweep parameter."""

    def plot_factor_curves(self, trace: list[SweepPoint]):
        plot_factor_curves(self, trace)

    def plot_size_curves(self, trace: list[SweepPoint]):
        plot_size_curves(self, trace)

    def add_minimum_lines(self, minimums: dict[str, float]):
        add_minimum_lines(self, minimums)

    def add_pass_fail_zones(self, trace: list[SweepPoint]):
        add_pass_fail_zones(self, trace)

    def add_winner_marker(self, parameter: float | None, footprint: float | None):
        add_winner_marker(self, parameter, footprint)


def sweep_figure(result: DesignResult, settings: DesignSettings, theme: str = "dark"):
    """Full sweep chart of a design run."""
    plotter = SweepPlotter(objective=result.objective.value, theme=theme)

    plotter.add_pass_fail_zones(result.trace)
    plotter.plot_factor_curves(result.trace)
    plotter.plot_size_curves(result.trace)
    plotter.add_minimum_lines({
        "overturning": settings.min_overturning_factor,
        "sliding": settings.min_sliding_factor,
        "bearing": settings.min_bearing_factor,
    })

    if result.specification is not None:
        plotter.add_winner_marker(result.parameter, result.specification.footing.footprint)

    return plotter.get_figure()


__all__ = ["SweepPlotter", "sweep_figure"]
