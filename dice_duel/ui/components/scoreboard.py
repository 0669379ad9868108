"""Scoreboard component — cumulative scores, rolls left and session tally."""

from __future__ import annotations

import streamlit as st

from dice_duel.engine.base import GameSnapshot


def render_scoreboard(snapshot: GameSnapshot, tally_label: str) -> None:
    """Render the scoreboard panel.

    Args:
        snapshot: Current game state.
        tally_label: Session win totals, e.g. ``"H:2/C:1"``.
    """
    rows = [
        ("You", snapshot.human_score, snapshot.human.rolls_remaining),
        ("Computer", snapshot.computer_score, snapshot.computer.rolls_remaining),
    ]
    leader = max(snapshot.human_score, snapshot.computer_score)

    html = ['<div class="scoreboard">']
    html.append(
        f'<div class="scoreboard-title">Scoreboard &mdash; {snapshot.target_score} to Win</div>'
    )
    for name, score, rolls in rows:
        row_classes = ["player-row"]
        if score == leader and score > 0:
            row_classes.append("leading")
        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{name} <small>({rolls} rolls left)</small></span>'
            f'<span class="score">{score}</span>'
            f"</div>"
        )
    html.append(f'<div class="win-tally">{tally_label}</div>')
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)


def render_turn_history(snapshot: GameSnapshot) -> None:
    """Render the list of completed turns, most recent first."""
    if not snapshot.history:
        return

    with st.expander("Turn history"):
        for result in reversed(snapshot.history):
            label = "Tie-break" if result.is_tie_break else f"Turn {result.turn_number}"
            st.markdown(
                f"**{label}:** You {result.human_points} · Computer {result.computer_points}"
            )
