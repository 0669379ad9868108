"""CSS injection and HTML banner helpers."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "theme.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_victory_animation(name: str, human_score: int, computer_score: int) -> None:
    """Render the victory banner with the final score."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{name} Wins!</h1>"
        f"<p>Final score {human_score} &ndash; {computer_score}</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_tie_break_banner(round_count: int) -> None:
    """Render the tie-break banner.

    Args:
        round_count: Number of drawn tie-break rounds so far.
    """
    suffix = f" &mdash; replay #{round_count}" if round_count else ""
    st.markdown(
        '<div class="tie-break-banner">'
        f"TIE-BREAK! One throw each, no holds. Highest total wins{suffix}"
        "</div>",
        unsafe_allow_html=True,
    )


def render_score_popup(points: int) -> None:
    """Render an animated score popup."""
    st.markdown(
        f'<div class="score-popup">+{points}</div>',
        unsafe_allow_html=True,
    )
