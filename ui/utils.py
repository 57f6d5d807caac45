"""UI helpers: state ↔ models ↔ TOML."""

import io
import tomllib

import tomli_w

from retwall.models import DesignInput, DesignSettings, Material
from retwall.sections import section_count
from retwall.tables import material_properties


def default_settings() -> dict:
    """DesignSettings defaults as plain dicts (soil presets nested)."""
    return DesignSettings().model_dump()


def wall_caption(wall: dict, settings: dict) -> str:
    """Material data and section count shown under the wall form."""
    props = material_properties(Material(wall["material"]))
    count = section_count(wall["height"], DesignSettings(**settings))
    return (
        f"{props.unit_weight:.0f} pcf, width {props.min_width:.0f}–{props.max_width:.0f} in, "
        f"course {props.height_module:.0f} in, {count} section(s)"
    )


def build_models(state) -> tuple[DesignInput, DesignSettings]:
    """Convert state to pydantic models."""
    design_input = DesignInput(
        **state["wall"],
        **state["site"],
        optimization_objective=state["objective"],
    )
    return design_input, DesignSettings(**state["settings"])


def export_toml(state) -> str:
    """Export state as a TOML string (same layout as the CLI input)."""
    doc = {
        "project": {"name": "Streamlit export"},
        "wall": state["wall"],
        "site": state["site"],
        "design": {"optimization_objective": state["objective"]},
        "settings": state["settings"],
    }
    return tomli_w.dumps(doc)


def import_toml(content: bytes) -> dict:
    """Import TOML into the state layout; missing values take the defaults."""
    data = tomllib.load(io.BytesIO(content))

    wall_defaults = {"height": 48.0, "material": "Concrete"}
    site_defaults = {
        "surcharge": "Flat", "soil_stiffness": "Stiff", "topping_depth": 0.0,
        "has_adjacent_slab": False, "toe_length": 0.0,
    }

    settings = default_settings()
    for key, value in data.get("settings", {}).items():
        if isinstance(value, dict):
            settings[key] = {**settings.get(key, {}), **value}
        else:
            settings[key] = value

    return {
        "objective": data.get("design", {}).get("optimization_objective", "MinimizeExcavation"),
        "wall": {**wall_defaults, **data.get("wall", {})},
        "site": {**site_defaults, **data.get("site", {})},
        "settings": settings,
    }
