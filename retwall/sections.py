"""Section Builder: stacked wall sections for a total height and width step."""

import math

import numpy as np

from retwall.models import DesignContractError, DesignSettings, Material, WallSection, total_height
from retwall.tables import material_properties


def section_count(height: float, settings: DesignSettings) -> int:
    """Number of stacked sections, 1..max_sections."""
    return max(1, min(settings.max_sections, math.ceil(height / settings.max_section_height)))


def section_heights(height: float, count: int, module: float) -> list[float]:
    """Heights bottom to top.

    Upper sections get height/count snapped down to the module; the bottom
    section takes the remainder so the sum is exact.
    """
    upper = math.floor(height / count / module) * module
    if count > 1 and upper <= 0:
        raise DesignContractError(f"Height {height} in is too short for {count} sections")
    bottom = height - upper * (count - 1)
    return [bottom] + [upper] * (count - 1)


def propose_sections(
    height: float,
    material: Material,
    max_sections: int,
    width_step: float,
    settings: DesignSettings | None = None,
) -> tuple[WallSection, ...]:
    """Build the wall cross-section.

    Section i (0 = bottom) is min_width + (n − i)·step wide, so widths
    strictly decrease upward.

    Args:
        height: Total wall height above the footing, in.
        material: Wall material.
        max_sections: Upper bound on the section count.
        width_step: Width increment per section, in (multiple of the module).
        settings: Section height limit; defaults if omitted.

    Returns:
        Sections ordered bottom to top.
    """
    settings = settings or DesignSettings()
    props = material_properties(material)

    if width_step <= 0:
        raise DesignContractError(f"Width step must be positive, got {width_step}")
    if not math.isclose(width_step / props.width_module, round(width_step / props.width_module)):
        raise DesignContractError(
            f"Width step {width_step} in is not a multiple of the {props.width_module} in module"
        )

    count = max(1, min(max_sections, section_count(height, settings)))
    heights = section_heights(height, count, props.height_module)
    sections = tuple(
        WallSection(height_above_footing=h, width=props.min_width + (count - i) * width_step)
        for i, h in enumerate(heights)
    )

    if total_height(sections) != height:
        raise DesignContractError(f"Section heights sum to {total_height(sections)}, expected {height}")
    return sections


def width_steps(count: int, material: Material, settings: DesignSettings | None = None) -> list[float]:
    """Admissible width steps, ascending, at most max_iterations of them.

    The largest step brings the bottom section to the material maximum.
    """
    settings = settings or DesignSettings()
    props = material_properties(material)
    n_max = int((props.max_width - props.min_width) // (count * props.width_module))
    steps = [props.width_module * j for j in range(1, max(n_max, 1) + 1)]

    if len(steps) > settings.max_iterations:
        idx = np.unique(np.linspace(0, len(steps) - 1, settings.max_iterations).round().astype(int))
        steps = [steps[i] for i in idx]
    return steps
