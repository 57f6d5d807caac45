"""Stability Checker: overturning, sliding and bearing for one candidate."""

import logging
from dataclasses import dataclass

from retwall.helpers import (
    LateralLoads,
    WeightItem,
    footing_loads,
    inches_to_feet,
    lateral_loads,
    passive_resistance,
    stem_loads,
    totals,
)
from retwall.models import DesignSettings, Footing, LoadCase, StabilityResult, WallSection

logger = logging.getLogger(__name__)

OVERTURNING = "overturning"
SLIDING = "sliding"
BEARING = "bearing"


@dataclass(frozen=True)
class WallForces:
    """Free body of the wall and footing, per foot of wall."""

    weights: list[WeightItem]
    lateral: LateralLoads
    passive: float  # lb/ft
    base_width: float  # ft

    @property
    def vertical(self) -> float:
        return totals(self.weights)[0]

    @property
    def resisting_moment(self) -> float:
        return totals(self.weights)[1]


def wall_forces(
    sections: tuple[WallSection, ...],
    footing: Footing,
    load_case: LoadCase,
    settings: DesignSettings,
) -> WallForces:
    weights = stem_loads(sections, footing.toe, load_case) + footing_loads(
        sections, footing, load_case, settings.footing_unit_weight
    )
    passive = (
        passive_resistance(load_case, footing.thickness, settings.passive_reduction)
        if settings.include_passive
        else 0.0
    )
    return WallForces(
        weights=weights,
        lateral=lateral_loads(load_case, footing.thickness),
        passive=passive,
        base_width=inches_to_feet(footing.toe + sections[0].width + footing.heel),
    )


def max_base_pressure(vertical: float, net_moment: float, width: float) -> tuple[float, float]:
    """Peak soil pressure under the base and the eccentricity.

    x = (M_r − M_o)/V, e = B/2 − x (positive toward the toe).
    Trapezoid for |e| ≤ B/6: q = V/B·(1 + 6|e|/B);
    triangle otherwise: q = 2V/(3x') over the contact length 3x'.

    Returns:
        (q_max in psf or inf when the resultant leaves the base, e in ft).
    """
    x_r = net_moment / vertical
    e = width / 2.0 - x_r
    if x_r <= 0 or x_r >= width:
        return float("inf"), e
    if abs(e) <= width / 6.0:
        return vertical / width * (1.0 + 6.0 * abs(e) / width), e
    contact = 3.0 * x_r if e > 0 else 3.0 * (width - x_r)
    return 2.0 * vertical / contact, e


def evaluate(
    sections: tuple[WallSection, ...],
    footing: Footing,
    load_case: LoadCase,
    settings: DesignSettings | None = None,
) -> StabilityResult:
    """Check a candidate against the minimum factors of safety.

    FS_ot = ΣM_r / ΣM_o
    FS_sl = (μ·V + Pp) / P_h
    FS_b  = q_allow / q_max

    Args:
        sections: Wall sections, bottom first.
        footing: Footing dimensions.
        load_case: Derived load case.
        settings: Minimum factors and passive options; defaults if omitted.

    Returns:
        StabilityResult; passed only if all three factors pass.
    """
    settings = settings or DesignSettings()
    forces = wall_forces(sections, footing, load_case, settings)
    vertical = forces.vertical
    m_r = forces.resisting_moment
    m_o = forces.lateral.overturning_moment

    overturning = m_r / m_o
    sliding = (load_case.friction_coefficient * vertical + forces.passive) / forces.lateral.total
    q_max, eccentricity = max_base_pressure(vertical, m_r - m_o, forces.base_width)
    bearing = load_case.allowable_bearing_pressure / q_max

    failed = tuple(
        name
        for name, value, minimum in (
            (OVERTURNING, overturning, settings.min_overturning_factor),
            (SLIDING, sliding, settings.min_sliding_factor),
            (BEARING, bearing, settings.min_bearing_factor),
        )
        if value < minimum
    )
    result = StabilityResult(
        overturning_factor=overturning,
        sliding_factor=sliding,
        bearing_factor=bearing,
        passed=not failed,
        failed_checks=failed,
        max_bearing_pressure=q_max,
        eccentricity=eccentricity,
    )
    logger.debug(
        "FS_ot=%.2f FS_sl=%.2f FS_b=%.2f q_max=%.0f psf%s",
        overturning, sliding, bearing, q_max, f" (fails {', '.join(failed)})" if failed else "",
    )
    return result
