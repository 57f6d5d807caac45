"""Footing Sizer: closed-form toe, heel and thickness for a set of sections."""

import logging
import math

import numpy as np

from retwall.helpers import inches_to_feet, lateral_loads, passive_resistance, stem_loads, totals
from retwall.models import DesignSettings, Footing, LoadCase, WallSection, total_height

logger = logging.getLogger(__name__)


def footing_thickness(height: float, settings: DesignSettings, min_thickness: float = 0.0) -> float:
    """Footing thickness rule, in.

    t = max(t_min, ⌈cover + ratio·H⌉, requested minimum)
    """
    rule = math.ceil(settings.footing_cover + settings.thickness_ratio * height)
    return float(max(settings.min_footing_thickness, rule, min_thickness))


def toe_length(height: float, min_toe: float, settings: DesignSettings) -> float:
    """Toe length rule, in. Never shorter than the requested minimum or 1 in."""
    return float(max(min_toe, math.ceil(settings.toe_ratio * height), 1.0))


def _threshold(a: float, b: float, c: float) -> float | None:
    """Smallest u beyond which a·u² + b·u + c ≥ 0 holds for every larger u.

    Returns:
        -inf if it holds everywhere, None if it fails for large u.
    """
    if abs(a) < 1e-12:
        if abs(b) < 1e-12:
            return -math.inf if c >= 0 else None
        return -c / b if b > 0 else None
    if a < 0:
        return None

    disc = b * b - 4.0 * a * c
    if disc < 0:
        return -math.inf
    return (-b + math.sqrt(disc)) / (2.0 * a)


def heel_criteria(
    sections: tuple[WallSection, ...],
    load_case: LoadCase,
    toe: float,
    thickness: float,
    settings: DesignSettings,
) -> dict[str, float | None]:
    """Base-width thresholds (ft) for each stability criterion.

    With u = toe + stem + heel (ft), the heel soil and footing concrete add
    k = γc·t + γ·H per foot of base width, so

        V(u)   = Vc + k·u
        M_r(u) = K0 + k·u²/2

    and every criterion reduces to a quadratic in u.

    Returns:
        Mapping criterion name → threshold (ft), None where no base width
        satisfies it.
    """
    height_ft = inches_to_feet(total_height(sections))
    t_ft = inches_to_feet(thickness)
    b0 = inches_to_feet(toe + sections[0].width)

    v_fix, m_fix = totals(stem_loads(sections, toe, load_case))
    c = settings.footing_unit_weight * t_ft
    s = load_case.effective_soil_unit_weight * height_ft
    k = c + s
    vc = v_fix - s * b0
    k0 = m_fix - s * b0**2 / 2.0

    lateral = lateral_loads(load_case, thickness)
    m_o = lateral.overturning_moment
    p_h = lateral.total
    pp = passive_resistance(load_case, thickness, settings.passive_reduction) if settings.include_passive else 0.0
    mu = load_case.friction_coefficient
    qc = load_case.allowable_bearing_pressure / settings.min_bearing_factor
    net = k0 - m_o

    return {
        "middle third (toe)": _threshold(k / 6.0, -vc / 3.0, net),
        "middle third (heel)": _threshold(k / 6.0, 2.0 * vc / 3.0, -net),
        "overturning": _threshold(k / 2.0, 0.0, k0 - settings.min_overturning_factor * m_o),
        "sliding": _threshold(0.0, mu * k, mu * vc + pp - settings.min_sliding_factor * p_h),
        "bearing (toe)": _threshold(qc - k, -4.0 * vc, 6.0 * net),
        "bearing (heel)": _threshold(qc - k, 2.0 * vc, -6.0 * net),
    }


def size_footing(
    sections: tuple[WallSection, ...],
    load_case: LoadCase,
    min_toe: float,
    settings: DesignSettings | None = None,
    min_thickness: float = 0.0,
) -> Footing:
    """Size one footing for the given sections.

    The heel is the smallest whole inch strictly beyond the governing
    threshold. Criteria with no admissible base width are left to the
    stability checker to report.

    Args:
        sections: Wall sections, bottom first.
        load_case: Derived load case.
        min_toe: Minimum toe length, in.
        settings: Sizing rules and factors of safety; defaults if omitted.
        min_thickness: Lower bound on the thickness rule, in.

    Returns:
        Footing (toe, heel, thickness in inches).
    """
    settings = settings or DesignSettings()
    height = total_height(sections)
    thickness = footing_thickness(height, settings, min_thickness)
    toe = toe_length(height, min_toe, settings)

    criteria = heel_criteria(sections, load_case, toe, thickness, settings)
    b0 = inches_to_feet(toe + sections[0].width)
    width = max([b0, *(u for u in criteria.values() if u is not None)])
    heel = float(np.floor((width - b0) * 12.0) + 1.0)

    unsatisfiable = [name for name, u in criteria.items() if u is None]
    logger.debug("Footing t=%.0f toe=%.0f heel=%.0f in", thickness, toe, heel)
    if unsatisfiable:
        logger.debug("No base width satisfies: %s", ", ".join(unsatisfiable))
    return Footing(toe=toe, heel=heel, thickness=thickness)
