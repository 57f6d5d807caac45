"""Optimizer: bounded one-dimensional sweeps over footing thickness or width step."""

import logging
import math

import numpy as np

from retwall.footing import footing_thickness, size_footing
from retwall.models import (
    Candidate,
    DesignContractError,
    DesignInput,
    DesignSettings,
    LoadCase,
    OptimizationObjective,
    OptimizationResult,
    SearchState,
    SweepPoint,
)
from retwall.sections import propose_sections, section_count, width_steps
from retwall.stability import evaluate
from retwall.tables import material_properties

logger = logging.getLogger(__name__)


class _Sweep:
    """Evaluation log shared by the sub-sweeps of one run."""

    def __init__(
        self, design_input: DesignInput, load_case: LoadCase, settings: DesignSettings, min_footprint: float = 0.0
    ):
        self.design_input = design_input
        self.load_case = load_case
        self.settings = settings
        self.min_footprint = min_footprint
        self.iterations = 0
        self.last: Candidate | None = None
        self.clamped = False
        self.oversize = False

    def candidate(self, width_step: float, thickness: float, parameter: float) -> Candidate:
        """Size and check one candidate.

        The heel is lengthened to reach the footprint floor, then held within
        the width limit. A footing whose toe and stem alone exceed the limit
        is still checked for the diagnosis but never qualifies.
        """
        settings = self.settings
        sections = propose_sections(
            self.design_input.height, self.design_input.material, settings.max_sections, width_step, settings
        )
        footing = size_footing(sections, self.load_case, self.design_input.toe_length, settings, thickness)

        floor_heel = math.ceil(self.min_footprint - footing.toe - 1e-9)
        if footing.heel < floor_heel:
            footing = footing.model_copy(update={"heel": float(floor_heel)})

        max_heel = settings.max_footing_width - footing.toe - sections[0].width
        if max_heel < 1.0:
            self.oversize = True
        elif footing.heel > max_heel:
            footing = footing.model_copy(update={"heel": float(math.floor(max_heel))})
            self.clamped = True

        stability = evaluate(sections, footing, self.load_case, settings)
        self.iterations += 1
        self.last = Candidate(sections=sections, footing=footing, stability=stability, parameter=parameter)
        logger.debug(
            "[%d] step=%.0f t=%.0f footprint=%.0f in passed=%s",
            self.iterations, width_step, footing.thickness, footing.footprint, stability.passed,
        )
        return self.last

    def qualifies(self, candidate: Candidate) -> bool:
        """Stable, within the width limit and not below the footprint floor."""
        return (
            candidate.stability.passed
            and candidate.footing_width <= self.settings.max_footing_width + 1e-9
            and candidate.footing.footprint >= self.min_footprint - 1e-9
        )

    def point(self, candidate: Candidate) -> SweepPoint:
        return SweepPoint.from_candidate(candidate).model_copy(update={"passed": self.qualifies(candidate)})


def thickness_grid(start: float, stop: float, max_points: int) -> list[float]:
    """Whole-inch thicknesses from start to stop, thinned to at most max_points."""
    if start > stop:
        return []
    values = np.arange(start, stop + 0.5, 1.0)
    if len(values) > max_points:
        values = np.unique(np.ceil(np.linspace(start, stop, max_points)))
    return [float(v) for v in values]


def _shallowest(sweep: _Sweep, width_step: float, trace: list[SweepPoint] | None) -> Candidate | None:
    """Thinnest passing footing for one width step.

    Ascends the coarse grid to the first passing thickness, then bisects the
    gap below it down to whole inches.
    """
    settings = sweep.settings
    t0 = footing_thickness(sweep.design_input.height, settings)
    grid = thickness_grid(t0, settings.max_footing_thickness, settings.max_iterations)
    if not grid:
        # Thickness rule alone exceeds the limit; checked once for the diagnosis
        sweep.candidate(width_step, t0, t0)
        return None

    previous = None
    for t in grid:
        candidate = sweep.candidate(width_step, t, t)
        if trace is not None:
            trace.append(sweep.point(candidate))
        if sweep.qualifies(candidate):
            break
        previous = t
    else:
        return None

    lo, hi, best = previous, candidate.footing.thickness, candidate
    while lo is not None and hi - lo > 1:
        mid = float((lo + hi) // 2)
        trial = sweep.candidate(width_step, mid, mid)
        if trace is not None:
            trace.append(sweep.point(trial))
        if sweep.qualifies(trial):
            hi, best = mid, trial
        else:
            lo = mid
    return best


def _infeasible(sweep: _Sweep, trace: list[SweepPoint], scope: str) -> OptimizationResult:
    last = sweep.last.stability if sweep.last else None
    notes = []
    if last and last.failed_checks:
        notes.append(f"failing: {', '.join(last.failed_checks)}")
    if sweep.clamped:
        notes.append(f"footing width held at {sweep.settings.max_footing_width:.0f} in")
    if sweep.oversize:
        notes.append(f"toe and stem alone exceed {sweep.settings.max_footing_width:.0f} in")
    if footing_thickness(sweep.design_input.height, sweep.settings) > sweep.settings.max_footing_thickness:
        notes.append(f"thickness rule exceeds {sweep.settings.max_footing_thickness:.0f} in")
    reason = f"No {scope} passes within the practical limits ({'; '.join(notes)})"
    logger.debug(reason)
    return OptimizationResult(
        state=SearchState.INFEASIBLE,
        last_stability=last,
        iterations=sweep.iterations,
        trace=trace,
        reason=reason,
    )


def _converged(sweep: _Sweep, candidate: Candidate, trace: list[SweepPoint]) -> OptimizationResult:
    logger.debug(
        "Converged after %d evaluations: footprint %.0f in, thickness %.0f in",
        sweep.iterations, candidate.footing.footprint, candidate.footing.thickness,
    )
    return OptimizationResult(
        state=SearchState.CONVERGED,
        candidate=candidate,
        last_stability=candidate.stability,
        iterations=sweep.iterations,
        trace=trace,
    )


def minimize_excavation(
    design_input: DesignInput, load_case: LoadCase, settings: DesignSettings, min_footprint: float = 0.0
) -> OptimizationResult:
    """Thinnest footing with the sections fixed at the smallest width step.

    Sweep parameter: footing thickness, in.
    """
    sweep = _Sweep(design_input, load_case, settings, min_footprint)
    trace: list[SweepPoint] = []
    seed = material_properties(design_input.material).width_module

    best = _shallowest(sweep, seed, trace)
    if best is None:
        return _infeasible(sweep, trace, "footing thickness")
    return _converged(sweep, best, trace)


def minimize_footing(
    design_input: DesignInput, load_case: LoadCase, settings: DesignSettings, min_footprint: float = 0.0
) -> OptimizationResult:
    """Smallest footprint over the admissible width steps.

    Sweep parameter: width step, in. For each step the footing is the
    thinnest passing one; ties go to the smaller thickness, then the
    smaller step.
    """
    sweep = _Sweep(design_input, load_case, settings, min_footprint)
    trace: list[SweepPoint] = []
    count = section_count(design_input.height, settings)

    best: Candidate | None = None
    for step in width_steps(count, design_input.material, settings):
        candidate = _shallowest(sweep, step, None)
        shown = candidate or sweep.last
        trace.append(sweep.point(shown).model_copy(update={"parameter": step}))
        if candidate is None:
            continue
        candidate = candidate.model_copy(update={"parameter": step})
        key = (candidate.footing.footprint, candidate.footing.thickness, step)
        if best is None or key < (best.footing.footprint, best.footing.thickness, best.parameter):
            best = candidate

    if best is None:
        return _infeasible(sweep, trace, "width step")
    return _converged(sweep, best, trace)


def optimize(
    design_input: DesignInput,
    load_case: LoadCase,
    settings: DesignSettings | None = None,
    min_footprint: float = 0.0,
) -> OptimizationResult:
    """Search for a passing candidate according to the input's objective.

    The search starts in SEARCHING and ends CONVERGED with the winning
    candidate or INFEASIBLE with the last stability result and a reason.

    Args:
        design_input: Validated site and wall parameters.
        load_case: Derived load case for the input.
        settings: Factors of safety and practical limits; defaults if omitted.
        min_footprint: Toe + heel floor, in. Candidates below it are
            lengthened at the heel; those that cannot reach it do not qualify.
    """
    settings = settings or DesignSettings()
    logger.debug("%s: searching", design_input.optimization_objective.value)
    objective = design_input.optimization_objective
    if objective is OptimizationObjective.MINIMIZE_FOOTING:
        return minimize_footing(design_input, load_case, settings, min_footprint)
    if objective is OptimizationObjective.MINIMIZE_EXCAVATION:
        return minimize_excavation(design_input, load_case, settings, min_footprint)
    raise DesignContractError(f"Unknown optimization objective: {objective!r}")
