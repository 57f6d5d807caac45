"""Streamlit session state."""

import streamlit as st

from ui.utils import default_settings


def init_state():
    """Fill session_state with defaults."""

    defaults = {
        # Objective
        "objective": "MinimizeExcavation",

        # Chart theme
        "plot_theme": "dark",

        # Wall
        "wall": {
            "height": 48.0,
            "material": "Concrete",
        },

        # Site
        "site": {
            "surcharge": "Flat",
            "soil_stiffness": "Stiff",
            "topping_depth": 0.0,
            "has_adjacent_slab": False,
            "toe_length": 12.0,
        },

        # Factors of safety, limits, soil presets
        "settings": default_settings(),

        # Design result (None until the first run)
        "result": None,
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
