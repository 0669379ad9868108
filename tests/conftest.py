"""
Dice Duel - Test Configuration and Fixtures

Common fixtures and a scripted random source for deterministic tests.
"""

from typing import Callable, Iterable

import pytest

from dice_duel.engine.base import DiceSet, MatchState, PlayerTurnState
from dice_duel.engine.events import SessionWinTally
from dice_duel.engine.game import GameEngine


# =============================================================================
# SCRIPTED RANDOMNESS
# =============================================================================

class FixedRandom:
    """
    DiceRandom that replays scripted values.

    Once a script runs out it falls back to a fixed default: dice show 3,
    floats are 0.99 (the computer stops) and coin flips are False.
    """

    def __init__(
        self,
        dice: Iterable[int] = (),
        floats: Iterable[float] = (),
        coins: Iterable[bool] = (),
        default_die: int = 3,
        default_float: float = 0.99,
    ) -> None:
        self.dice = list(dice)
        self.floats = list(floats)
        self.coins = list(coins)
        self.default_die = default_die
        self.default_float = default_float
        self.dice_drawn = 0

    def roll_die(self) -> int:
        self.dice_drawn += 1
        return self.dice.pop(0) if self.dice else self.default_die

    def random_float(self) -> float:
        return self.floats.pop(0) if self.floats else self.default_float

    def coin_flip(self, probability: float = 0.5) -> bool:
        return self.coins.pop(0) if self.coins else False


@pytest.fixture
def make_rng() -> Callable[..., FixedRandom]:
    """Factory for scripted random sources."""
    return FixedRandom


@pytest.fixture
def rng() -> FixedRandom:
    """Scripted source with no script: every die shows 3, computer stops."""
    return FixedRandom()


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def tally() -> SessionWinTally:
    return SessionWinTally()


@pytest.fixture
def engine(rng, tally) -> GameEngine:
    """Engine with a started match (target 50) and scripted dice."""
    game = GameEngine(rng=rng, tally=tally)
    game.start_match(50)
    return game


@pytest.fixture
def strict_engine(rng, tally) -> GameEngine:
    """Strict engine with no match started."""
    return GameEngine(rng=rng, tally=tally, strict=True)


@pytest.fixture
def rolled_state() -> PlayerTurnState:
    """Turn state after one roll of (1, 2, 3, 4, 5)."""
    return PlayerTurnState(
        dice=DiceSet(values=(1, 2, 3, 4, 5)),
        rolls_remaining=2,
        is_first_roll_of_turn=False,
    )


@pytest.fixture
def both_reached_match() -> MatchState:
    """Match where both players just crossed a target of 50."""
    return MatchState(target_score=50, human_score=55, computer_score=52)
