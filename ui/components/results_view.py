"""Design result view."""

import streamlit as st
import pandas as pd

from plot import sweep_figure
from retwall.models import DesignSettings


def render_results():
    """Specification or diagnosis, factor table and sweep chart."""

    result = st.session_state.result
    if result is None:
        return

    settings = DesignSettings(**st.session_state.settings)

    st.divider()
    st.subheader("Results")

    if result.is_feasible:
        spec = result.specification
        fs = spec.stability_result

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Footprint (toe + heel)", f"{spec.footing.footprint:.0f} in")
        with col2:
            st.metric("Footing thickness", f"{spec.footing.thickness:.0f} in")
        with col3:
            st.metric("Excavation depth", f"{spec.excavation_depth:.0f} in")
        with col4:
            st.metric("Evaluations", result.iterations)

        col1, col2 = st.columns(2)
        with col1:
            st.markdown("**Sections** (bottom to top)")
            df = pd.DataFrame([
                {"#": i, "Height, in": s.height_above_footing, "Width, in": s.width}
                for i, s in enumerate(spec.sections, start=1)
            ])
            st.dataframe(df, width="stretch", hide_index=True)
        with col2:
            st.markdown("**Footing**")
            df = pd.DataFrame([
                {"Toe, in": spec.footing.toe, "Heel, in": spec.footing.heel, "Thickness, in": spec.footing.thickness}
            ])
            st.dataframe(df, width="stretch", hide_index=True)

        st.markdown("**Factors of safety**")
        df = pd.DataFrame([
            {"Check": "Overturning", "FS": fs.overturning_factor, "Required": settings.min_overturning_factor},
            {"Check": "Sliding", "FS": fs.sliding_factor, "Required": settings.min_sliding_factor},
            {"Check": "Bearing", "FS": fs.bearing_factor, "Required": settings.min_bearing_factor},
        ])
        df["OK"] = ["✓" if v >= r else "✗" for v, r in zip(df["FS"], df["Required"])]
        st.dataframe(df.round(2), width="stretch", hide_index=True)
        st.caption(f"q_max = {fs.max_bearing_pressure:.0f} psf, e = {fs.eccentricity:.2f} ft")
    else:
        st.warning(f"No feasible design: {result.diagnosis.reason}")
        last = result.diagnosis.last_stability
        if last is not None:
            st.caption(
                f"Last candidate: FS_ot = {last.overturning_factor:.2f}, "
                f"FS_sl = {last.sliding_factor:.2f}, FS_b = {last.bearing_factor:.2f}"
            )

    # Chart
    st.subheader("Optimization sweep")
    theme = st.session_state.get("plot_theme", "dark")
    fig = sweep_figure(result, settings, theme=theme)
    st.plotly_chart(
        fig,
        width="stretch",
        config={
            "displaylogo": False,
            "toImageButtonOptions": {
                "format": "png",
                "scale": 2,
                "filename": "sweep",
            },
        },
    )

    with st.expander("Sweep table"):
        df = pd.DataFrame([p.model_dump() for p in result.trace])
        st.dataframe(df, width="stretch", hide_index=True)
