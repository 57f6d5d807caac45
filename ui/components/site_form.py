"""Site conditions form."""

import streamlit as st

from retwall.models import SoilStiffness, Surcharge
from retwall.tables import slope_angle

_SURCHARGE_LABELS = {
    "Flat": "Level backfill",
    "Slope1_1": "Slope 1:1",
    "Slope1_2": "Slope 1:2",
    "Slope1_4": "Slope 1:4",
}


def render_site_form():
    """Backfill, soil and toe constraints."""

    st.subheader("Site")

    site = st.session_state.site
    surcharges = [s.value for s in Surcharge]
    soils = [s.value for s in SoilStiffness]

    col1, col2 = st.columns(2)
    with col1:
        site["surcharge"] = st.selectbox(
            "Backfill",
            options=surcharges,
            format_func=lambda x: _SURCHARGE_LABELS.get(x, x),
            index=surcharges.index(site.get("surcharge", "Flat")),
        )
        site["soil_stiffness"] = st.radio(
            "Soil",
            options=soils,
            index=soils.index(site.get("soil_stiffness", "Stiff")),
            horizontal=True,
        )
        site["has_adjacent_slab"] = st.checkbox(
            "Slab behind the wall",
            value=bool(site.get("has_adjacent_slab", False)),
            help="Adds the slab surcharge from the settings",
        )
    with col2:
        site["topping_depth"] = st.number_input(
            "Topping over the toe, in",
            min_value=0.0,
            max_value=24.0,
            value=float(site.get("topping_depth", 0.0)),
            step=1.0,
        )
        site["toe_length"] = st.number_input(
            "Minimum toe, in",
            min_value=0.0,
            max_value=120.0,
            value=float(site.get("toe_length", 0.0)),
            step=1.0,
            help="Lower bound; the toe rule may give more",
        )

    st.caption(f"β = {slope_angle(Surcharge(site['surcharge'])):.2f}°")

    st.session_state.site = site
