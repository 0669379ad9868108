"""Game page — both dice trays, controls, and scoreboard."""

from __future__ import annotations

import streamlit as st

from dice_duel.engine.base import GameSnapshot
from dice_duel.ui.components.dice_tray import render_dice_tray
from dice_duel.ui.components.scoreboard import render_scoreboard, render_turn_history
from dice_duel.ui.components.turn_controls import render_turn_controls
from dice_duel.ui.session import get_engine, get_tally, go_to
from dice_duel.ui.themes.animations import render_score_popup, render_tie_break_banner


def render_game_page() -> None:
    """Render the main game page."""
    engine = get_engine()
    snapshot = engine.snapshot()

    if snapshot is None:
        go_to("home")
        return

    if snapshot.is_over:
        go_to("results")
        return

    game_col, score_col = st.columns([3, 1])

    with score_col:
        render_scoreboard(snapshot, get_tally().label)
        render_turn_history(snapshot)

    with game_col:
        if snapshot.tie_break_active:
            render_tie_break_banner(snapshot.tie_break_round_count)
        else:
            st.subheader(f"Turn {snapshot.turn_number}")

        _show_last_turn(snapshot)

        st.markdown("**Computer**")
        render_dice_tray(
            dice=snapshot.computer.dice,
            hold_mask=snapshot.computer.hold_mask,
            owner="computer",
            can_hold=False,
            turn_key=f"t{snapshot.turn_number}",
        )

        st.markdown("**You**")
        human = snapshot.human
        can_hold = (
            not snapshot.tie_break_active
            and not human.is_first_roll_of_turn
            and human.rolls_remaining > 0
        )
        toggled = render_dice_tray(
            dice=human.dice,
            hold_mask=human.hold_mask,
            owner="human",
            can_hold=can_hold,
            turn_key=f"t{snapshot.turn_number}_r{human.rolls_remaining}",
        )
        if toggled:
            for index in toggled:
                engine.toggle_hold(index)
            st.rerun()

        action = render_turn_controls(snapshot)

    if action == "throw":
        engine.throw_dice()
        st.rerun()
    elif action == "score":
        engine.score_now()
        st.rerun()

    if st.button("Back to Menu", key="btn_game_menu"):
        engine.acknowledge_match_end()
        go_to("home")


def _show_last_turn(snapshot: GameSnapshot) -> None:
    """Show what the previous turn banked, on the first throw of a new turn."""
    if not snapshot.history or not snapshot.human.is_first_roll_of_turn:
        return
    last = snapshot.history[-1]
    if last.is_tie_break:
        st.info(
            f"Tie-break drawn at {last.human_points} each. Throw again!"
        )
        return
    st.caption("Last turn")
    render_score_popup(last.human_points)
    st.caption(f"Computer scored {last.computer_points}")
