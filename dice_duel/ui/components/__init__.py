"""UI components for Dice Duel."""

from dice_duel.ui.components.dice_tray import render_dice_tray
from dice_duel.ui.components.scoreboard import render_scoreboard, render_turn_history
from dice_duel.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_scoreboard",
    "render_turn_controls",
    "render_turn_history",
]
