"""Specification Builder: promote the winning candidate to a wall specification."""

from retwall.models import Candidate, DesignContractError, DesignInput, WallSpecification, total_height


def build(design_input: DesignInput, candidate: Candidate) -> WallSpecification:
    """Assemble the specification of an accepted candidate.

    Raises:
        DesignContractError: The candidate failed a check or its sections do
            not add up to the design height.
    """
    if not candidate.stability.passed:
        raise DesignContractError(
            f"Cannot build a specification from a failed candidate ({', '.join(candidate.stability.failed_checks)})"
        )
    height = total_height(candidate.sections)
    if height != design_input.height:
        raise DesignContractError(f"Sections sum to {height} in, design height is {design_input.height} in")

    return WallSpecification(
        total_height=design_input.height,
        sections=candidate.sections,
        footing=candidate.footing,
        material=design_input.material,
        stability_result=candidate.stability,
        objective=design_input.optimization_objective,
        excavation_depth=design_input.topping_depth + candidate.footing.thickness,
    )
