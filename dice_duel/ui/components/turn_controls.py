"""Turn control buttons — Throw and Score Now."""

from __future__ import annotations

import streamlit as st

from dice_duel.engine.base import GameSnapshot


def render_turn_controls(snapshot: GameSnapshot) -> str | None:
    """Render contextual turn-action buttons.

    Returns:
        ``"throw"``, ``"score"``, or ``None`` if no action taken.
    """
    human = snapshot.human
    rolls_left = human.rolls_remaining
    turn_key = f"t{snapshot.turn_number}_r{rolls_left}"

    if snapshot.tie_break_active:
        if st.button(
            "Throw Tie-break",
            key=f"btn_tie_break_{turn_key}",
            use_container_width=True,
            type="primary",
            disabled=rolls_left == 0,
        ):
            return "throw"
        return None

    cols = st.columns(2)

    with cols[0]:
        label = "Throw Dice" if human.is_first_roll_of_turn else f"Throw Again ({rolls_left} left)"
        if st.button(
            label,
            key=f"btn_throw_{turn_key}",
            use_container_width=True,
            type="primary",
            disabled=rolls_left == 0,
        ):
            return "throw"

    with cols[1]:
        total = sum(human.dice)
        can_score = not human.is_first_roll_of_turn and rolls_left > 0
        if st.button(
            f"Score {total} pts" if can_score else "Score",
            key=f"btn_score_{turn_key}",
            use_container_width=True,
            disabled=not can_score,
        ):
            return "score"

    return None
