"""Streamlit app for retaining wall design."""

import streamlit as st
from pydantic import ValidationError

from ui.state import init_state
from ui.components.wall_form import render_wall_form
from ui.components.site_form import render_site_form
from ui.components.settings_form import render_settings_form
from ui.components.results_view import render_results
from ui.utils import build_models, export_toml, import_toml
from retwall.calculator import run


def render_sidebar():
    """Sidebar with settings."""

    st.header("Settings")

    # Objective
    objective = st.radio(
        "Optimize for",
        options=["MinimizeExcavation", "MinimizeFooting"],
        format_func=lambda x: "Shallowest footing" if x == "MinimizeExcavation" else "Smallest footprint",
        index=0 if st.session_state.objective == "MinimizeExcavation" else 1,
    )
    st.session_state.objective = objective

    st.divider()

    # Chart theme
    st.subheader("Chart theme")

    plot_theme = st.radio(
        "Theme",
        options=["dark", "light"],
        format_func=lambda x: "🌙 Dark" if x == "dark" else "☀️ Light",
        index=0 if st.session_state.get("plot_theme", "dark") == "dark" else 1,
        help="Dark for the screen, light for printing and reports",
    )
    st.session_state.plot_theme = plot_theme

    st.divider()

    # Import/Export
    st.subheader("Import / Export")

    uploaded_file = st.file_uploader(
        "Import TOML",
        type=["toml"],
        help="Load a design from file",
    )

    if uploaded_file is not None:
        # Skip files that were already loaded
        file_id = uploaded_file.file_id
        if "last_uploaded_file_id" not in st.session_state or st.session_state.last_uploaded_file_id != file_id:
            try:
                new_state = import_toml(uploaded_file.read())
            except ValueError as e:
                st.error(f"❌ Could not read TOML: {e}")
            else:
                for key, value in new_state.items():
                    st.session_state[key] = value
                st.session_state.result = None
                st.session_state.last_uploaded_file_id = file_id
                st.success("✅ Design loaded from TOML")
                st.rerun()

    toml_content = export_toml({
        "objective": st.session_state.objective,
        "wall": st.session_state.wall,
        "site": st.session_state.site,
        "settings": st.session_state.settings,
    })

    st.download_button(
        "📥 Export TOML",
        data=toml_content,
        file_name="retaining_wall.toml",
        mime="text/plain",
    )


def run_design():
    """Run the design."""

    try:
        design_input, settings = build_models({
            "objective": st.session_state.objective,
            "wall": st.session_state.wall,
            "site": st.session_state.site,
            "settings": st.session_state.settings,
        })
    except ValidationError as e:
        st.error(f"Invalid input: {e}")
        st.session_state.result = None
        return

    result = run(design_input, settings)
    st.session_state.result = result
    if result.is_feasible:
        st.success("Design converged")
    else:
        st.warning("No feasible design within the limits")


def main():
    st.set_page_config(
        page_title="Retaining wall design",
        page_icon="🧱",
        layout="wide"
    )

    init_state()

    with st.sidebar:
        render_sidebar()

    st.title("Retaining wall design")

    col1, col2 = st.columns(2)
    with col1:
        render_wall_form()
    with col2:
        render_site_form()

    with st.expander("Design settings"):
        render_settings_form()

    if st.button("Calculate", type="primary", width="stretch"):
        run_design()

    if st.session_state.get("result"):
        render_results()


if __name__ == "__main__":
    main()
