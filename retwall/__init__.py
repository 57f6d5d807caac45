"""Retaining wall design and optimization engine.

Modules:
- models: Data types (DesignInput, WallSection, Footing, LoadCase, ...)
- tables: Material presets, backfill slopes, earth pressure coefficients
- loads: Load Model
- sections: Section Builder
- footing: Footing Sizer
- stability: Stability Checker
- optimizer: Thickness and width-step sweeps
- specification: Specification Builder
- calculator: Pipeline (run, run_batch)

Usage:
    from retwall import run
    from retwall.models import DesignInput, Material
"""

from .calculator import run, run_batch
from .models import (
    DesignContractError,
    DesignInput,
    DesignResult,
    DesignSettings,
    Material,
    OptimizationObjective,
    SoilStiffness,
    Surcharge,
    WallSpecification,
)

__all__ = [
    "run",
    "run_batch",
    "DesignContractError",
    "DesignInput",
    "DesignResult",
    "DesignSettings",
    "Material",
    "OptimizationObjective",
    "SoilStiffness",
    "Surcharge",
    "WallSpecification",
]
