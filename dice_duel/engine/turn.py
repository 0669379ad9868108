"""
Dice Duel - Turn Engine

Roll counting, dice retention and turn completion for both players.

Normal turns give each player up to three rolls. The human may hold dice
between rolls; the first roll of a turn always rolls all five. Tie-break
turns are a single all-dice roll per player.

All methods are stateless class methods; turn and match state are passed
in and mutated in place.
"""

import logging
from typing import ClassVar

from dice_duel.engine.base import (
    MAX_ROLLS,
    NUM_DICE,
    DiceSet,
    HoldMask,
    MatchState,
    PlayerTurnState,
    TurnResult,
    empty_hold_mask,
)
from dice_duel.engine.rng import DiceRandom
from dice_duel.engine.strategy import ComputerStrategy
from dice_duel.engine.validators import validate_hold_mask

logger = logging.getLogger(__name__)


class TurnEngine:
    """Stateless engine for turn sequencing."""

    # Computer Strategy always lowers or zeroes the counter, so three
    # iterations exhaust any turn.
    MAX_SWEEP_ITERATIONS: ClassVar[int] = MAX_ROLLS

    @classmethod
    def roll_dice(cls, dice: DiceSet, hold_mask: HoldMask, rng: DiceRandom) -> DiceSet:
        """
        Regenerate every die that is not held.

        Args:
            dice: Current dice
            hold_mask: True for each die to keep
            rng: Random source

        Returns:
            New DiceSet with held faces preserved
        """
        mask = validate_hold_mask(hold_mask)
        return DiceSet(values=tuple(
            value if held else rng.roll_die()
            for value, held in zip(dice.values, mask)
        ))

    @classmethod
    def roll_human(
        cls,
        state: PlayerTurnState,
        hold_mask: HoldMask | None,
        rng: DiceRandom,
    ) -> DiceSet:
        """
        Roll the human's dice once.

        The first roll of a turn ignores the hold mask. Does nothing when
        no rolls remain.

        Args:
            state: Human's turn state (mutated)
            hold_mask: Dice to keep; None keeps nothing
            rng: Random source

        Returns:
            The human's dice after the roll
        """
        if state.rolls_remaining <= 0:
            return state.dice

        mask = validate_hold_mask(hold_mask)
        if state.is_first_roll_of_turn:
            mask = empty_hold_mask()

        state.dice = cls.roll_dice(state.dice, mask, rng)
        state.hold_mask = mask
        state.rolls_remaining -= 1
        state.is_first_roll_of_turn = False

        logger.debug(
            "Human rolled: dice=%s held=%s rolls_remaining=%d",
            state.dice.values,
            mask,
            state.rolls_remaining,
        )
        return state.dice

    @classmethod
    def roll_tie_break(cls, state: PlayerTurnState, rng: DiceRandom) -> DiceSet:
        """Roll all five dice for a tie-break round and close the turn."""
        state.dice = DiceSet(values=tuple(rng.roll_die() for _ in range(NUM_DICE)))
        state.hold_mask = empty_hold_mask()
        state.rolls_remaining = 0
        state.is_first_roll_of_turn = False
        return state.dice

    @classmethod
    def sweep_computer(cls, state: PlayerTurnState, rng: DiceRandom) -> int:
        """
        Let the computer use up any rolls it has left.

        Args:
            state: Computer's turn state (mutated)
            rng: Random source

        Returns:
            Number of strategy steps taken
        """
        steps = 0
        while state.rolls_remaining > 0 and steps < cls.MAX_SWEEP_ITERATIONS:
            ComputerStrategy.apply(state, rng)
            steps += 1
        return steps

    @classmethod
    def score_turn(
        cls,
        match: MatchState,
        human: PlayerTurnState,
        computer: PlayerTurnState,
    ) -> TurnResult | None:
        """
        Add both players' dice totals to their cumulative scores.

        Returns None (and adds nothing) if this turn was already scored.
        """
        if match.turn_scored:
            return None

        result = TurnResult(
            turn_number=match.turn_number,
            human_points=human.dice.total,
            computer_points=computer.dice.total,
        )
        match.human_score += result.human_points
        match.computer_score += result.computer_points
        match.turn_scored = True
        match.history.append(result)

        logger.debug(
            "Turn %d scored: human +%d (%d), computer +%d (%d)",
            result.turn_number,
            result.human_points,
            match.human_score,
            result.computer_points,
            match.computer_score,
        )
        return result

    @classmethod
    def score_tie_break(
        cls,
        match: MatchState,
        human: PlayerTurnState,
        computer: PlayerTurnState,
    ) -> TurnResult | None:
        """Record a tie-break round's roll sums. Cumulative scores are untouched."""
        if match.turn_scored:
            return None

        result = TurnResult(
            turn_number=match.turn_number,
            human_points=human.dice.total,
            computer_points=computer.dice.total,
            is_tie_break=True,
        )
        match.tie_break_human_score = result.human_points
        match.tie_break_computer_score = result.computer_points
        match.turn_scored = True
        match.history.append(result)
        return result

    @classmethod
    def start_new_turn(
        cls,
        match: MatchState,
        human: PlayerTurnState,
        computer: PlayerTurnState,
    ) -> None:
        """Reinitialize both players for the next turn (1 roll in tie-break)."""
        human.start_turn(tie_break=match.tie_break_active)
        computer.start_turn(tie_break=match.tie_break_active)
        match.turn_number += 1
        match.turn_scored = False
