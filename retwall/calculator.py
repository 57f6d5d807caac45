"""Retaining wall design pipeline."""

import logging
import math
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor
from functools import lru_cache, partial

from retwall.loads import derive_load_case
from retwall.models import (
    MIN_HEIGHT,
    DesignInput,
    DesignResult,
    DesignSettings,
    InfeasibleDesign,
    SearchState,
)
from retwall.optimizer import optimize
from retwall.specification import build

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4096)
def _carried_footprint(design_input: DesignInput, settings: DesignSettings) -> float:
    """Footprint of the design at this height, or the one carried from below if it fails."""
    below = design_input.height - 1.0
    floor = 0.0
    if below >= MIN_HEIGHT:
        floor = _carried_footprint(design_input.model_copy(update={"height": below}), settings)

    outcome = optimize(design_input, derive_load_case(design_input, settings), settings, floor)
    if outcome.state is SearchState.CONVERGED and outcome.candidate is not None:
        return outcome.candidate.footing.footprint
    return floor


def footprint_floor(design_input: DesignInput, settings: DesignSettings) -> float:
    """Largest converged footprint among the whole-inch heights below the input's, in.

    The designs below are themselves floored, so the carried footprint never
    drops as the height grows. Heights are walked upward so each lookup only
    needs the one beneath it.
    """
    floor = 0.0
    for height in range(int(MIN_HEIGHT), math.ceil(design_input.height)):
        floor = _carried_footprint(design_input.model_copy(update={"height": float(height)}), settings)
    return floor


def run(design_input: DesignInput, settings: DesignSettings | None = None) -> DesignResult:
    """Main design pipeline.

    The footing is never smaller (toe + heel) than the one a shorter wall
    with the same inputs gets.

    Args:
        design_input: Validated site and wall parameters.
        settings: Factors of safety, limits and soil presets; defaults if omitted.

    Returns:
        DesignResult, converged with a specification or infeasible with a
        diagnosis. Both carry the sweep trace.
    """
    settings = settings or DesignSettings()
    load_case = derive_load_case(design_input, settings)
    outcome = optimize(design_input, load_case, settings, footprint_floor(design_input, settings))

    if outcome.state is SearchState.CONVERGED and outcome.candidate is not None:
        specification = build(design_input, outcome.candidate)
        logger.info(
            "%.0f in %s wall: toe %.0f, heel %.0f, thickness %.0f in",
            design_input.height,
            design_input.material.value,
            specification.footing.toe,
            specification.footing.heel,
            specification.footing.thickness,
        )
        return DesignResult(
            status="converged",
            objective=design_input.optimization_objective,
            specification=specification,
            trace=outcome.trace,
            iterations=outcome.iterations,
            parameter=outcome.candidate.parameter,
        )

    logger.warning("%.0f in %s wall: %s", design_input.height, design_input.material.value, outcome.reason)
    last = outcome.last_stability
    return DesignResult(
        status="infeasible",
        objective=design_input.optimization_objective,
        diagnosis=InfeasibleDesign(
            reason=outcome.reason,
            failed_checks=last.failed_checks if last else (),
            last_stability=last,
        ),
        trace=outcome.trace,
        iterations=outcome.iterations,
    )


def run_batch(
    inputs: Iterable[DesignInput],
    settings: DesignSettings | None = None,
    max_workers: int | None = None,
) -> list[DesignResult]:
    """Run independent designs in parallel, results in input order."""
    settings = settings or DesignSettings()
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(partial(run, settings=settings), inputs))
