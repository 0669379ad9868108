"""Visual theme for Dice Duel."""

from dice_duel.ui.themes.animations import (
    load_css,
    render_score_popup,
    render_tie_break_banner,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_score_popup",
    "render_tie_break_banner",
    "render_victory_animation",
]
