"""Design settings form: factors of safety, limits, soil presets."""

import streamlit as st


def _soil_inputs(soil: dict, key: str):
    soil["friction_angle"] = st.number_input(
        "φ, °", min_value=20.0, max_value=45.0, value=float(soil["friction_angle"]), step=1.0, key=f"{key}_phi",
    )
    soil["unit_weight"] = st.number_input(
        "γ, pcf", min_value=80.0, max_value=150.0, value=float(soil["unit_weight"]), step=5.0, key=f"{key}_gamma",
    )
    soil["allowable_bearing"] = st.number_input(
        "q_allow, psf", min_value=500.0, max_value=10000.0, value=float(soil["allowable_bearing"]),
        step=250.0, key=f"{key}_q",
    )
    soil["friction_coefficient"] = st.number_input(
        "μ", min_value=0.1, max_value=1.0, value=float(soil["friction_coefficient"]), step=0.05, key=f"{key}_mu",
    )


def render_settings_form():
    """Factors of safety, footing limits and soil presets."""

    settings = st.session_state.settings

    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("**Factors of safety**")
        settings["min_overturning_factor"] = st.number_input(
            "Overturning", min_value=1.0, max_value=3.0,
            value=float(settings["min_overturning_factor"]), step=0.1,
        )
        settings["min_sliding_factor"] = st.number_input(
            "Sliding", min_value=1.0, max_value=3.0,
            value=float(settings["min_sliding_factor"]), step=0.1,
        )
        settings["min_bearing_factor"] = st.number_input(
            "Bearing", min_value=1.0, max_value=3.0,
            value=float(settings["min_bearing_factor"]), step=0.1,
        )
        settings["include_passive"] = st.checkbox(
            "Passive resistance at the toe", value=bool(settings["include_passive"]),
        )
        settings["passive_reduction"] = st.number_input(
            "Passive reduction", min_value=0.0, max_value=1.0,
            value=float(settings["passive_reduction"]), step=0.1,
            disabled=not settings["include_passive"],
        )

    with col2:
        st.markdown("**Footing**")
        settings["min_footing_thickness"] = st.number_input(
            "Min thickness, in", min_value=4.0, max_value=24.0,
            value=float(settings["min_footing_thickness"]), step=1.0,
        )
        settings["max_footing_thickness"] = st.number_input(
            "Max thickness, in", min_value=8.0, max_value=60.0,
            value=float(settings["max_footing_thickness"]), step=1.0,
        )
        settings["max_footing_width"] = st.number_input(
            "Max footing width, in", min_value=24.0, max_value=360.0,
            value=float(settings["max_footing_width"]), step=6.0,
        )
        settings["adjacent_slab_surcharge"] = st.number_input(
            "Slab surcharge, psf", min_value=0.0, max_value=500.0,
            value=float(settings["adjacent_slab_surcharge"]), step=25.0,
        )
        settings["max_iterations"] = int(st.number_input(
            "Sweep points", min_value=5, max_value=200,
            value=int(settings["max_iterations"]), step=5,
        ))

    with col3:
        stiff_tab, soft_tab = st.tabs(["Stiff soil", "Soft soil"])
        with stiff_tab:
            _soil_inputs(settings["stiff_soil"], "stiff")
        with soft_tab:
            _soil_inputs(settings["soft_soil"], "soft")

    st.session_state.settings = settings
