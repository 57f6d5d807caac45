"""Material presets, backfill slopes and earth-pressure coefficients.

Sources:
- Rankine earth pressure for level and inclined backfill
- NCMA TEK 14-07 (grouted CMU unit weight, 8 in course)
- ACI 318 (normal-weight concrete)
"""

from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from retwall.models import DesignContractError, Material, Surcharge


# --- Materials ---


@dataclass(frozen=True)
class MaterialProperties:
    """Unit weight and dimensional modules of a wall material.

    Widths are in inches, unit weight in pcf.
    """

    unit_weight: float
    min_width: float
    max_width: float
    width_module: float
    height_module: float


_MATERIALS = {
    Material.CONCRETE: MaterialProperties(
        unit_weight=150.0, min_width=8.0, max_width=24.0, width_module=1.0, height_module=1.0
    ),
    # Fully grouted units, 8 in course
    Material.CMU: MaterialProperties(
        unit_weight=125.0, min_width=8.0, max_width=16.0, width_module=2.0, height_module=8.0
    ),
}


def material_properties(material: Material) -> MaterialProperties:
    try:
        return _MATERIALS[Material(material)]
    except (KeyError, ValueError) as exc:
        raise DesignContractError(f"Unknown wall material: {material!r}") from exc


# --- Backfill slopes (rise, run) ---

_SLOPES = {
    Surcharge.FLAT: (0.0, 1.0),
    Surcharge.SLOPE_1_1: (1.0, 1.0),
    Surcharge.SLOPE_1_2: (1.0, 2.0),
    Surcharge.SLOPE_1_4: (1.0, 4.0),
}


@lru_cache(maxsize=16)
def slope_angle(surcharge: Surcharge) -> float:
    """Backfill slope angle β = atan(rise/run), degrees."""
    try:
        rise, run = _SLOPES[Surcharge(surcharge)]
    except (KeyError, ValueError) as exc:
        raise DesignContractError(f"Unknown surcharge: {surcharge!r}") from exc
    return float(np.degrees(np.arctan2(rise, run)))


# --- Earth pressure coefficients ---


@lru_cache(maxsize=256)
def rankine_active(phi_deg: float) -> float:
    """Active coefficient for level backfill.

    Ka = tan²(45° − φ/2)
    """
    return float(np.tan(np.radians(45.0 - phi_deg / 2.0)) ** 2)


@lru_cache(maxsize=256)
def rankine_passive(phi_deg: float) -> float:
    """Passive coefficient for level ground in front of the toe.

    Kp = tan²(45° + φ/2)
    """
    return float(np.tan(np.radians(45.0 + phi_deg / 2.0)) ** 2)


@lru_cache(maxsize=512)
def rankine_active_sloped(phi_deg: float, beta_deg: float) -> float:
    """Active coefficient for backfill inclined at β (resultant parallel to the slope).

    Ka = cos β · (cos β − √(cos²β − cos²φ)) / (cos β + √(cos²β − cos²φ))

    A slope steeper than φ is evaluated at β = φ, which gives Ka = cos φ.

    Args:
        phi_deg: Internal friction angle, degrees.
        beta_deg: Backfill slope, degrees.

    Returns:
        Ka along the slope direction (not yet resolved to horizontal).
    """
    if beta_deg <= 0:
        return rankine_active(phi_deg)

    beta = np.radians(min(beta_deg, phi_deg))
    phi = np.radians(phi_deg)
    cos_b = np.cos(beta)
    root = np.sqrt(max(cos_b**2 - np.cos(phi) ** 2, 0.0))
    return float(cos_b * (cos_b - root) / (cos_b + root))
