"""
Dice Duel - Random Sources

All randomness in the engine (die faces, reroll decisions, hold coin flips)
goes through a DiceRandom so games can be replayed from a seed.
"""

import random
from typing import Protocol

from dice_duel.engine.base import DIE_FACES


class DiceRandom(Protocol):
    """Capability interface for the engine's random draws."""

    def roll_die(self) -> int:
        """Uniform int in [1, 6]."""
        ...

    def random_float(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def coin_flip(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        ...


class SeededRandom:
    """DiceRandom backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None) -> None:
        """
        Args:
            seed: Optional seed for reproducible games (useful for testing)
        """
        self._random = random.Random(seed)

    def roll_die(self) -> int:
        return self._random.randint(1, DIE_FACES)

    def random_float(self) -> float:
        return self._random.random()

    def coin_flip(self, probability: float = 0.5) -> bool:
        return self._random.random() < probability
