"""Home page — title, target score, New Game and About."""

from __future__ import annotations

import streamlit as st

from dice_duel.config.settings import get_settings
from dice_duel.engine.base import MIN_TARGET_SCORE
from dice_duel.engine.errors import InvalidConfigurationError
from dice_duel.ui.session import get_engine, get_tally, go_to


def render_home_page() -> None:
    """Render the home / landing page."""
    st.title("Dice Duel")
    st.caption("Five dice, three rolls, one computer opponent")

    settings = get_settings()
    target = st.number_input(
        "Target Score",
        min_value=MIN_TARGET_SCORE,
        value=st.session_state.get("target_score", settings.default_target_score),
        step=10,
        key="home_target_score",
    )

    if st.button("New Game", type="primary", use_container_width=True):
        try:
            get_engine().start_match(int(target))
        except InvalidConfigurationError as exc:
            st.error(str(exc))
            return
        st.session_state["target_score"] = int(target)
        go_to("game")

    st.caption(f"Session wins: {get_tally().label}")

    st.divider()

    with st.expander("About"):
        st.markdown(
            """
**Race the computer to the target score!**

- Each turn you get up to **three throws** of five dice
- After the first throw, **hold** any dice you like and throw the rest
- Press **Score** to stop early; your turn scores the sum of your dice
- The computer plays its turn alongside yours, one decision per throw
- First to the target wins

**Tie-break:** if you both reach the target in the same turn, each side
gets one throw of all five dice with no holds. Highest total wins; a draw
means throwing again.
"""
        )
