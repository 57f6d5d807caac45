import tomllib

from retwall.models import OptimizationObjective, SoilStiffness
from ui.utils import build_models, default_settings, export_toml, import_toml, wall_caption


def _state():
    return {
        "objective": "MinimizeFooting",
        "wall": {"height": 72.0, "material": "CMU"},
        "site": {
            "surcharge": "Slope1_2",
            "soil_stiffness": "Soft",
            "topping_depth": 6.0,
            "has_adjacent_slab": True,
            "toe_length": 10.0,
        },
        "settings": default_settings(),
    }


def test_build_models_from_state():
    design_input, settings = build_models(_state())
    assert design_input.optimization_objective is OptimizationObjective.MINIMIZE_FOOTING
    assert design_input.soil_stiffness is SoilStiffness.SOFT
    assert design_input.has_adjacent_slab
    assert settings.min_sliding_factor == 1.5


def test_export_toml_uses_cli_layout():
    data = tomllib.loads(export_toml(_state()))
    assert data["wall"]["material"] == "CMU"
    assert data["design"]["optimization_objective"] == "MinimizeFooting"
    assert data["settings"]["soft_soil"]["friction_angle"] == 28.0


def test_exported_state_imports_back():
    state = _state()
    state["settings"]["max_footing_width"] = 150.0
    assert import_toml(export_toml(state).encode()) == state


def test_import_fills_defaults_and_merges_soil_presets():
    content = b'[wall]\nheight = 60\n[settings.stiff_soil]\nallowable_bearing = 4000\n'
    state = import_toml(content)

    assert state["wall"] == {"height": 60, "material": "Concrete"}
    assert state["site"]["surcharge"] == "Flat"
    assert state["objective"] == "MinimizeExcavation"
    assert state["settings"]["stiff_soil"]["allowable_bearing"] == 4000
    assert state["settings"]["stiff_soil"]["friction_angle"] == 34.0
    _, settings = build_models(state)
    assert settings.stiff_soil.allowable_bearing == 4000.0


def test_wall_caption_counts_sections_like_the_engine():
    settings = default_settings()
    assert wall_caption({"height": 48.0, "material": "Concrete"}, settings).endswith("1 section(s)")
    assert wall_caption({"height": 49.0, "material": "Concrete"}, settings).endswith("2 section(s)")

    settings["max_sections"] = 2
    caption = wall_caption({"height": 144.0, "material": "CMU"}, settings)
    assert caption == "125 pcf, width 8–16 in, course 8 in, 2 section(s)"
