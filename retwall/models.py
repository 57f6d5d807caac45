"""Data models for retaining wall design."""

import math
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DesignContractError(RuntimeError):
    """Internal defect: out-of-contract data reached the engine."""


# --- Enumerations ---


class Material(str, Enum):
    CONCRETE = "Concrete"
    CMU = "CMU"


class Surcharge(str, Enum):
    FLAT = "Flat"
    SLOPE_1_1 = "Slope1_1"
    SLOPE_1_2 = "Slope1_2"
    SLOPE_1_4 = "Slope1_4"


class OptimizationObjective(str, Enum):
    MINIMIZE_EXCAVATION = "MinimizeExcavation"
    MINIMIZE_FOOTING = "MinimizeFooting"


class SoilStiffness(str, Enum):
    STIFF = "Stiff"
    SOFT = "Soft"


class SearchState(str, Enum):
    SEARCHING = "Searching"
    CONVERGED = "Converged"
    INFEASIBLE = "Infeasible"


# --- Input ---

MIN_HEIGHT = 24.0
MAX_HEIGHT = 144.0


class DesignInput(BaseModel):
    """Site and wall parameters for one design run."""

    model_config = ConfigDict(frozen=True)

    height: float = Field(
        ge=MIN_HEIGHT, le=MAX_HEIGHT, multiple_of=1, description="Wall height above footing, whole in"
    )
    material: Material
    surcharge: Surcharge = Surcharge.FLAT
    optimization_objective: OptimizationObjective = OptimizationObjective.MINIMIZE_EXCAVATION
    soil_stiffness: SoilStiffness = SoilStiffness.STIFF
    topping_depth: float = Field(default=0.0, ge=0, le=24, description="Fill over the toe, in")
    has_adjacent_slab: bool = False
    toe_length: float = Field(default=0.0, ge=0, le=120, description="Minimum toe length, in")


# --- Configuration ---


class SoilParameters(BaseModel):
    """Presumptive properties of a soil class."""

    model_config = ConfigDict(frozen=True)

    friction_angle: float = Field(gt=0, lt=90, description="Internal friction angle φ, °")
    unit_weight: float = Field(gt=0, description="Unit weight γ, pcf")
    allowable_bearing: float = Field(gt=0, description="Allowable bearing pressure, psf")
    friction_coefficient: float = Field(gt=0, le=1.0, description="Base friction coefficient μ")


class DesignSettings(BaseModel):
    """Factors of safety, practical limits and sizing rules.

    Defaults follow common practice for short cantilever walls; jurisdiction
    specific values are supplied through the ``[settings]`` table of the input.
    """

    model_config = ConfigDict(frozen=True)

    # Factors of safety
    min_overturning_factor: float = Field(default=1.5, gt=0)
    min_sliding_factor: float = Field(default=1.5, gt=0)
    min_bearing_factor: float = Field(default=1.0, gt=0)
    include_passive: bool = Field(default=True, description="Count passive resistance in front of the toe")
    passive_reduction: float = Field(default=0.5, ge=0, le=1.0, description="Fraction of passive force relied on")

    # Search
    max_iterations: int = Field(default=50, ge=1, description="Sweep points per scalar parameter")
    max_sections: int = Field(default=3, ge=1, le=3)
    max_section_height: float = Field(default=48.0, gt=0, description="Height that triggers another section, in")

    # Footing sizing rules
    min_footing_thickness: float = Field(default=8.0, gt=0, description="in")
    max_footing_thickness: float = Field(default=36.0, gt=0, description="in")
    footing_cover: float = Field(default=3.0, ge=0, description="Concrete cover cast against earth, in")
    thickness_ratio: float = Field(default=0.08, ge=0, description="Thickness added per inch of wall height")
    toe_ratio: float = Field(default=0.1, ge=0, description="Toe length per inch of wall height")
    max_footing_width: float = Field(default=180.0, gt=0, description="Toe + stem + heel limit, in")
    footing_unit_weight: float = Field(default=150.0, gt=0, description="Footing concrete, pcf")

    # Loads
    adjacent_slab_surcharge: float = Field(default=100.0, ge=0, description="Slab surcharge behind the wall, psf")

    stiff_soil: SoilParameters = SoilParameters(
        friction_angle=34.0, unit_weight=120.0, allowable_bearing=3000.0, friction_coefficient=0.45
    )
    soft_soil: SoilParameters = SoilParameters(
        friction_angle=28.0, unit_weight=110.0, allowable_bearing=2000.0, friction_coefficient=0.35
    )

    def soil(self, stiffness: SoilStiffness) -> SoilParameters:
        if stiffness == SoilStiffness.STIFF:
            return self.stiff_soil
        if stiffness == SoilStiffness.SOFT:
            return self.soft_soil
        raise DesignContractError(f"Unknown soil stiffness: {stiffness!r}")


# --- Derived loads ---


class LoadCase(BaseModel):
    """Earth pressure and surcharge for one design input.

    Computed once per run and shared by every candidate.
    """

    model_config = ConfigDict(frozen=True)

    active_earth_pressure_coefficient: float = Field(gt=0, description="Horizontal Ka for the sloped backfill")
    surcharge_load: float = Field(ge=0, description="Equivalent uniform surcharge on level backfill, psf")
    effective_soil_unit_weight: float = Field(gt=0, description="γ, pcf")

    level_active_coefficient: float = Field(gt=0, description="Ka for level backfill")
    passive_earth_pressure_coefficient: float = Field(gt=0, description="Kp")
    friction_coefficient: float = Field(gt=0, description="μ")
    allowable_bearing_pressure: float = Field(gt=0, description="psf")
    overburden_pressure: float = Field(ge=0, description="Topping over the toe, psf")
    slope_angle: float = Field(ge=0, description="Backfill slope used for Ka, °")
    friction_angle: float = Field(gt=0, description="φ, °")
    wall_height: float = Field(gt=0, description="in")
    topping_depth: float = Field(ge=0, description="in")
    material: Material


# --- Geometry ---


class WallSection(BaseModel):
    """One stacked wall segment."""

    model_config = ConfigDict(frozen=True)

    height_above_footing: float = Field(gt=0, description="in")
    width: float = Field(gt=0, description="in")


class Footing(BaseModel):
    """Spread footing under the wall (toe in front, heel under the retained soil)."""

    model_config = ConfigDict(frozen=True)

    toe: float = Field(gt=0, description="in")
    heel: float = Field(gt=0, description="in")
    thickness: float = Field(gt=0, description="in")

    @computed_field
    @property
    def footprint(self) -> float:
        """Toe + heel, in."""
        return self.toe + self.heel


# --- Results ---


class StabilityResult(BaseModel):
    """Factors of safety for one candidate."""

    model_config = ConfigDict(frozen=True)

    overturning_factor: float = Field(ge=0)
    sliding_factor: float = Field(ge=0)
    bearing_factor: float = Field(ge=0)
    passed: bool
    failed_checks: tuple[str, ...] = ()
    max_bearing_pressure: float = Field(ge=0, description="psf")
    eccentricity: float = Field(description="Resultant offset from base center toward the toe, ft")


class Candidate(BaseModel):
    """Sections, footing and verdict produced by one sweep point."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[WallSection, ...]
    footing: Footing
    stability: StabilityResult
    parameter: float = Field(description="Sweep value that produced the candidate")

    @computed_field
    @property
    def footing_width(self) -> float:
        """Toe + bottom section width + heel, in."""
        return self.footing.toe + self.sections[0].width + self.footing.heel


class WallSpecification(BaseModel):
    """Accepted wall design."""

    model_config = ConfigDict(frozen=True)

    total_height: float = Field(gt=0, description="in")
    sections: tuple[WallSection, ...]
    footing: Footing
    material: Material
    stability_result: StabilityResult
    objective: OptimizationObjective
    excavation_depth: float = Field(gt=0, description="Topping + footing thickness, in")


class InfeasibleDesign(BaseModel):
    """Diagnosis for a run with no stable candidate inside the limits."""

    model_config = ConfigDict(frozen=True)

    reason: str
    failed_checks: tuple[str, ...] = ()
    last_stability: StabilityResult | None = None


class SweepPoint(BaseModel):
    """One evaluated sweep point (for charts and tables)."""

    parameter: float
    overturning_factor: float
    sliding_factor: float
    bearing_factor: float
    footprint: float = Field(description="in")
    thickness: float = Field(description="in")
    passed: bool

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "SweepPoint":
        return cls(
            parameter=candidate.parameter,
            overturning_factor=candidate.stability.overturning_factor,
            sliding_factor=candidate.stability.sliding_factor,
            bearing_factor=candidate.stability.bearing_factor,
            footprint=candidate.footing.footprint,
            thickness=candidate.footing.thickness,
            passed=candidate.stability.passed,
        )


class OptimizationResult(BaseModel):
    """Outcome of the optimizer's sweep."""

    state: SearchState
    candidate: Candidate | None = None
    last_stability: StabilityResult | None = None
    iterations: int = Field(default=0, ge=0)
    trace: list[SweepPoint] = Field(default_factory=list)
    reason: str = ""


class DesignResult(BaseModel):
    """Result of one design run: a specification or a diagnosis."""

    status: Literal["converged", "infeasible"]
    objective: OptimizationObjective
    specification: WallSpecification | None = None
    diagnosis: InfeasibleDesign | None = None
    trace: list[SweepPoint] = Field(default_factory=list)
    iterations: int = Field(default=0, ge=0)
    parameter: float | None = Field(default=None, description="Sweep value of the accepted candidate")

    @computed_field
    @property
    def is_feasible(self) -> bool:
        return self.status == "converged"


def total_height(sections: tuple[WallSection, ...] | list[WallSection]) -> float:
    """Exact sum of section heights, in."""
    return math.fsum(section.height_above_footing for section in sections)
