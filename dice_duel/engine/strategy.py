"""
Dice Duel - Computer Strategy

Stochastic reroll policy for the computer opponent. The policy does not look
at the dice: after the opening roll it keeps rerolling with probability 0.7,
holding each die on an independent fair coin.

All methods are stateless class methods. ``decide`` is pure; ``apply``
writes a decision back into a PlayerTurnState.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from dice_duel.engine.base import (
    MAX_ROLLS,
    NUM_DICE,
    DiceSet,
    HoldMask,
    PlayerTurnState,
    empty_hold_mask,
)
from dice_duel.engine.rng import DiceRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyDecision:
    """
    Outcome of one strategy step.

    Attributes:
        dice: Dice after the step
        rolls_remaining: Roll counter after the step
        rolled: Whether any die was generated this step
        hold_mask: Dice kept during a reroll (all False otherwise)
    """
    dice: DiceSet
    rolls_remaining: int
    rolled: bool
    hold_mask: HoldMask


class ComputerStrategy:
    """Stateless reroll policy for the computer player."""

    REROLL_PROBABILITY: ClassVar[float] = 0.7
    HOLD_PROBABILITY: ClassVar[float] = 0.5

    @classmethod
    def decide(
        cls,
        state: PlayerTurnState,
        rng: DiceRandom,
        tie_break: bool = False,
    ) -> StrategyDecision:
        """
        Take one decision for the computer's turn.

        Policy:
        - Tie-break: roll all five dice, no further rolls.
        - Opening roll (3 rolls left): roll all five dice.
        - Otherwise: with probability 0.7 reroll, holding each die with
          probability 0.5; else stop and keep the dice.

        Args:
            state: Computer's current turn state (not modified)
            rng: Random source
            tie_break: Whether the match is in tie-break mode

        Returns:
            StrategyDecision describing the new dice and roll counter
        """
        no_holds = empty_hold_mask()

        if tie_break:
            dice = DiceSet(values=tuple(rng.roll_die() for _ in range(NUM_DICE)))
            return StrategyDecision(dice=dice, rolls_remaining=0, rolled=True, hold_mask=no_holds)

        if state.rolls_remaining >= MAX_ROLLS:
            dice = DiceSet(values=tuple(rng.roll_die() for _ in range(NUM_DICE)))
            return StrategyDecision(
                dice=dice,
                rolls_remaining=state.rolls_remaining - 1,
                rolled=True,
                hold_mask=no_holds,
            )

        if state.rolls_remaining > 0 and rng.random_float() < cls.REROLL_PROBABILITY:
            hold_mask = tuple(rng.coin_flip(cls.HOLD_PROBABILITY) for _ in range(NUM_DICE))
            dice = DiceSet(values=tuple(
                value if held else rng.roll_die()
                for value, held in zip(state.dice.values, hold_mask)
            ))
            return StrategyDecision(
                dice=dice,
                rolls_remaining=state.rolls_remaining - 1,
                rolled=True,
                hold_mask=hold_mask,
            )

        return StrategyDecision(
            dice=state.dice, rolls_remaining=0, rolled=False, hold_mask=no_holds
        )

    @classmethod
    def apply(
        cls,
        state: PlayerTurnState,
        rng: DiceRandom,
        tie_break: bool = False,
    ) -> StrategyDecision:
        """Run ``decide`` and store the result in ``state``."""
        decision = cls.decide(state, rng, tie_break=tie_break)

        state.dice = decision.dice
        state.rolls_remaining = decision.rolls_remaining
        if decision.rolled:
            state.is_first_roll_of_turn = False
            state.hold_mask = decision.hold_mask

        logger.debug(
            "Computer %s: dice=%s rolls_remaining=%d",
            "rolled" if decision.rolled else "stopped",
            decision.dice.values,
            decision.rolls_remaining,
        )
        return decision
