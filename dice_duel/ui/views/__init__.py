"""Page renderers for Dice Duel."""

from dice_duel.ui.views.home import render_home_page
from dice_duel.ui.views.game import render_game_page
from dice_duel.ui.views.results import render_results_page

__all__ = ["render_home_page", "render_game_page", "render_results_page"]
