"""Pass/fail shading along the sweep."""

from retwall.models import SweepPoint


def add_pass_fail_zones(plotter, trace: list[SweepPoint]):
    """Shade sweep intervals where every check passes (green) or one fails (red).

    Each point owns the interval halfway to its neighbours.
    """
    if not trace:
        return

    points = sorted(trace, key=lambda p: p.parameter)
    xs = [p.parameter for p in points]
    edges = [xs[0] - 0.5] + [(a + b) / 2 for a, b in zip(xs, xs[1:])] + [xs[-1] + 0.5]

    # Merge neighbours with the same verdict
    segments = []
    for i, point in enumerate(points):
        if segments and segments[-1]["passed"] == point.passed:
            segments[-1]["x1"] = edges[i + 1]
        else:
            segments.append({"passed": point.passed, "x0": edges[i], "x1": edges[i + 1]})

    for seg in segments:
        color = plotter.colors["pass_zone"] if seg["passed"] else plotter.colors["fail_zone"]
        for col in [1, 2]:
            plotter.fig.add_vrect(
                x0=seg["x0"], x1=seg["x1"],
                fillcolor=color, opacity=1.0, line_width=0, layer="below",
                row=1, col=col,
            )
