"""Dice Duel — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from dice_duel.config.settings import configure_logging


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dice Duel",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    from dice_duel.ui.themes import load_css
    load_css()

    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from dice_duel.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from dice_duel.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from dice_duel.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()


if __name__ == "__main__":
    main()
