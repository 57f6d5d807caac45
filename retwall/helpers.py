"""Shared bookkeeping for the footing sizer and the stability checker.

All forces are per foot of wall (lb/ft), lever arms are measured from the toe
edge (ft). The front face of the wall is flush with the top of the toe; the
sections step back on the soil side.
"""

from dataclasses import dataclass

from retwall.models import Footing, LoadCase, WallSection
from retwall.tables import material_properties

INCHES_PER_FOOT = 12.0


def inches_to_feet(value: float) -> float:
    return value / INCHES_PER_FOOT


@dataclass(frozen=True)
class WeightItem:
    """Vertical load and its lever arm about the toe."""

    name: str
    weight: float  # lb/ft
    arm: float  # ft

    @property
    def moment(self) -> float:
        return self.weight * self.arm


@dataclass(frozen=True)
class LateralLoads:
    """Horizontal thrust on the virtual back of the wall."""

    earth: float  # lb/ft, triangle
    surcharge: float  # lb/ft, rectangle
    overturning_moment: float  # lb·ft/ft about the toe
    height: float  # ft, wall + footing

    @property
    def total(self) -> float:
        return self.earth + self.surcharge


def stem_loads(sections: tuple[WallSection, ...], toe: float, load_case: LoadCase) -> list[WeightItem]:
    """Weights that do not depend on the heel length.

    Wall sections, soil on the stepped back of the upper sections and topping
    over the toe.

    Args:
        sections: Wall sections, bottom first.
        toe: Toe length, in.
        load_case: Derived load case.
    """
    gamma_wall = material_properties(load_case.material).unit_weight
    gamma_soil = load_case.effective_soil_unit_weight
    x_toe = inches_to_feet(toe)
    w_base = inches_to_feet(sections[0].width)

    items = []
    for i, section in enumerate(sections):
        w = inches_to_feet(section.width)
        h = inches_to_feet(section.height_above_footing)
        items.append(WeightItem(f"section {i + 1}", gamma_wall * w * h, x_toe + w / 2.0))
        if w < w_base:
            items.append(
                WeightItem(f"step soil {i + 1}", gamma_soil * (w_base - w) * h, x_toe + (w + w_base) / 2.0)
            )

    if load_case.overburden_pressure > 0:
        items.append(WeightItem("topping", load_case.overburden_pressure * x_toe, x_toe / 2.0))
    return items


def footing_loads(
    sections: tuple[WallSection, ...],
    footing: Footing,
    load_case: LoadCase,
    concrete_unit_weight: float,
) -> list[WeightItem]:
    """Footing concrete and soil over the heel."""
    width = inches_to_feet(footing.toe + sections[0].width + footing.heel)
    thickness = inches_to_feet(footing.thickness)
    heel = inches_to_feet(footing.heel)
    height = inches_to_feet(sum(s.height_above_footing for s in sections))

    return [
        WeightItem("footing", concrete_unit_weight * thickness * width, width / 2.0),
        WeightItem("heel soil", load_case.effective_soil_unit_weight * height * heel, width - heel / 2.0),
    ]


def lateral_loads(load_case: LoadCase, thickness: float) -> LateralLoads:
    """Active thrust over the wall height plus footing thickness.

    Pa = ½·Ka0·γ·H² at H/3, Pq = Ka0·q·H at H/2 (H = wall + footing, ft).
    The backfill slope enters through the equivalent surcharge q.
    """
    height = inches_to_feet(load_case.wall_height + thickness)
    ka = load_case.level_active_coefficient
    earth = 0.5 * ka * load_case.effective_soil_unit_weight * height**2
    surcharge = ka * load_case.surcharge_load * height
    moment = earth * height / 3.0 + surcharge * height / 2.0
    return LateralLoads(earth=earth, surcharge=surcharge, overturning_moment=moment, height=height)


def passive_resistance(load_case: LoadCase, thickness: float, reduction: float) -> float:
    """Reduced passive force in front of the toe over topping + footing, lb/ft.

    Pp = r·½·Kp·γ·D²
    """
    depth = inches_to_feet(load_case.topping_depth + thickness)
    return reduction * 0.5 * load_case.passive_earth_pressure_coefficient * load_case.effective_soil_unit_weight * depth**2


def totals(items: list[WeightItem]) -> tuple[float, float]:
    """(ΣW, ΣW·x) of a list of weight items."""
    return sum(item.weight for item in items), sum(item.moment for item in items)
