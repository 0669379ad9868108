"""Results page — victory screen, Play Again and Back to Menu."""

from __future__ import annotations

import streamlit as st

from dice_duel.engine.base import Side
from dice_duel.ui.session import get_engine, get_tally, go_to
from dice_duel.ui.themes.animations import render_victory_animation


def render_results_page() -> None:
    """Render the results / victory page."""
    engine = get_engine()
    snapshot = engine.snapshot()

    if snapshot is None or not snapshot.is_over:
        go_to("home")
        return

    name = "You" if snapshot.winner == Side.HUMAN else "Computer"
    render_victory_animation(name, snapshot.human_score, snapshot.computer_score)

    if snapshot.history and snapshot.history[-1].is_tie_break:
        last = snapshot.history[-1]
        st.caption(
            f"Decided by tie-break: {last.human_points} vs {last.computer_points}"
        )

    st.subheader(f"Session wins {get_tally().label}")

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            engine.acknowledge_match_end()
            go_to("game")

    with col2:
        if st.button("Back to Menu", use_container_width=True):
            engine.acknowledge_match_end()
            go_to("home")
