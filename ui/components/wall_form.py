"""Wall parameters form."""

import streamlit as st

from retwall.models import MAX_HEIGHT, MIN_HEIGHT, Material
from ui.utils import wall_caption


def render_wall_form():
    """Wall height and material."""

    st.subheader("Wall")

    wall = st.session_state.wall
    materials = [m.value for m in Material]

    wall["height"] = st.number_input(
        "Height above footing, in",
        min_value=MIN_HEIGHT,
        max_value=MAX_HEIGHT,
        value=float(wall.get("height", 48.0)),
        step=1.0,
    )

    wall["material"] = st.selectbox(
        "Material",
        options=materials,
        index=materials.index(wall.get("material", "Concrete")),
        help="Concrete: 1 in width module. CMU: 2 in width module, 8 in courses.",
    )

    # Derived (informational)
    st.caption(wall_caption(wall, st.session_state.settings))

    st.session_state.wall = wall
