"""Load Model: earth pressure and surcharge for a design input."""

import logging

import numpy as np

from retwall.helpers import inches_to_feet
from retwall.models import DesignInput, DesignSettings, LoadCase
from retwall.tables import (
    material_properties,
    rankine_active,
    rankine_active_sloped,
    rankine_passive,
    slope_angle,
)

logger = logging.getLogger(__name__)


def slope_surcharge(ka_h: float, ka_level: float, gamma: float, height_ft: float) -> float:
    """Uniform surcharge on level backfill equivalent to the sloped wedge.

    Matching the extra lateral resultant of the slope:
        ½·(Ka_h − Ka0)·γ·H² = Ka0·q·H  →  q = (Ka_h − Ka0)/Ka0 · γ·H/2

    Args:
        ka_h: Horizontal active coefficient for the sloped backfill.
        ka_level: Active coefficient for level backfill.
        gamma: Soil unit weight, pcf.
        height_ft: Retained height, ft.

    Returns:
        q, psf (never negative).
    """
    return max(0.0, (ka_h - ka_level) / ka_level * gamma * height_ft / 2.0)


def derive_load_case(design_input: DesignInput, settings: DesignSettings | None = None) -> LoadCase:
    """Derive the load case shared by every candidate of a run.

    Args:
        design_input: Validated site and wall parameters.
        settings: Soil presets and slab surcharge; defaults if omitted.

    Returns:
        LoadCase with the horizontal active coefficient, the equivalent
        surcharge and the soil properties for the selected stiffness.
    """
    settings = settings or DesignSettings()
    soil = settings.soil(design_input.soil_stiffness)
    # Fail early on an unknown material
    material_properties(design_input.material)

    phi = soil.friction_angle
    beta = slope_angle(design_input.surcharge)
    beta_eff = min(beta, phi)

    ka_level = rankine_active(phi)
    ka_h = rankine_active_sloped(phi, beta_eff) * float(np.cos(np.radians(beta_eff)))

    q = slope_surcharge(ka_h, ka_level, soil.unit_weight, inches_to_feet(design_input.height))
    if design_input.has_adjacent_slab:
        q += settings.adjacent_slab_surcharge

    load_case = LoadCase(
        active_earth_pressure_coefficient=ka_h,
        surcharge_load=q,
        effective_soil_unit_weight=soil.unit_weight,
        level_active_coefficient=ka_level,
        passive_earth_pressure_coefficient=rankine_passive(phi),
        friction_coefficient=soil.friction_coefficient,
        allowable_bearing_pressure=soil.allowable_bearing,
        overburden_pressure=soil.unit_weight * inches_to_feet(design_input.topping_depth),
        slope_angle=beta_eff,
        friction_angle=phi,
        wall_height=design_input.height,
        topping_depth=design_input.topping_depth,
        material=design_input.material,
    )
    logger.debug(
        "Load case: Ka_h=%.4f Ka0=%.4f q=%.1f psf γ=%.0f pcf",
        ka_h, ka_level, q, soil.unit_weight,
    )
    return load_case
