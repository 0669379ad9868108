"""Session-state accessors shared by the pages."""

from __future__ import annotations

import streamlit as st

from dice_duel.engine.events import SessionWinTally
from dice_duel.engine.game import GameEngine


def get_tally() -> SessionWinTally:
    """Win totals for this browser session ("H:x/C:y")."""
    ss = st.session_state
    if "tally" not in ss:
        ss["tally"] = SessionWinTally()
    return ss["tally"]


def get_engine() -> GameEngine:
    """The session's game engine, created on first use."""
    ss = st.session_state
    if "engine" not in ss:
        ss["engine"] = GameEngine.from_settings(tally=get_tally())
    return ss["engine"]


def go_to(page: str) -> None:
    """Switch page and rerun the script."""
    st.session_state["page"] = page
    st.rerun()
