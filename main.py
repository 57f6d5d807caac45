import logging
import sys
import tomllib

from retwall.calculator import run
from retwall.models import DesignInput, DesignResult, DesignSettings
from plot import sweep_figure

logger = logging.getLogger(__name__)


def load_input(path: str) -> tuple[DesignInput, DesignSettings, dict]:
    """Load the design input and settings from TOML."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    wall = data["wall"]
    site = data.get("site", {})
    design = data.get("design", {})

    design_input = DesignInput(
        height=wall["height"],
        material=wall["material"],
        surcharge=site.get("surcharge", "Flat"),
        soil_stiffness=site.get("soil_stiffness", "Stiff"),
        topping_depth=site.get("topping_depth", 0.0),
        has_adjacent_slab=site.get("has_adjacent_slab", False),
        toe_length=site.get("toe_length", 0.0),
        optimization_objective=design.get("optimization_objective", "MinimizeExcavation"),
    )

    # Omitted keys (and soil presets) keep their defaults
    settings = DesignSettings(**data.get("settings", {}))

    params = {
        "name": data.get("project", {}).get("name", ""),
        "theme": design.get("theme", "light"),
    }
    return design_input, settings, params


def report(result: DesignResult) -> None:
    """Log the specification or the diagnosis."""
    if result.is_feasible:
        spec = result.specification
        fs = spec.stability_result
        logger.info("Status: converged (%s, %d evaluations)", result.objective.value, result.iterations)
        for i, section in enumerate(spec.sections, start=1):
            logger.info("  Section %d: h = %.0f in, w = %.0f in", i, section.height_above_footing, section.width)
        logger.info(
            "  Footing: toe = %.0f in, heel = %.0f in, t = %.0f in (footprint %.0f in)",
            spec.footing.toe, spec.footing.heel, spec.footing.thickness, spec.footing.footprint,
        )
        logger.info("  Excavation depth = %.0f in", spec.excavation_depth)
        logger.info(
            "  FS_ot = %.2f, FS_sl = %.2f, FS_b = %.2f (q_max = %.0f psf)",
            fs.overturning_factor, fs.sliding_factor, fs.bearing_factor, fs.max_bearing_pressure,
        )
    else:
        logger.error("Status: infeasible. %s", result.diagnosis.reason)


def main(input_file: str = "input.toml") -> DesignResult:
    """Load → run → report → chart."""
    design_input, settings, params = load_input(input_file)
    result = run(design_input, settings)

    logger.info("Project: %s", params["name"])
    logger.info("Wall: %.0f in %s, %s backfill, %s soil",
                design_input.height, design_input.material.value,
                design_input.surcharge.value, design_input.soil_stiffness.value)
    report(result)

    fig = sweep_figure(result, settings, theme=params["theme"])
    output_name = input_file.replace(".toml", ".html")
    fig.write_html(output_name)
    logger.info("Chart: %s", output_name)

    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    sys.exit(0 if main(input_file).is_feasible else 1)
