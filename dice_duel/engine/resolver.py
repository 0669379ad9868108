"""
Dice Duel - Match Resolver

Decides, after every completed turn, whether the match goes on, enters or
repeats a tie-break, or has a winner.

Rules:
- Only one player at or above the target: that player wins
- Both at or above the target: play single-roll, no-hold tie-break rounds
  until one round sum strictly beats the other
"""

import logging
from enum import Enum, auto

from dice_duel.engine.base import MatchOutcome, MatchState

logger = logging.getLogger(__name__)


class Resolution(Enum):
    """Transition taken by the resolver for a completed turn."""
    CONTINUE = auto()
    TIE_BREAK_STARTED = auto()
    TIE_BREAK_REPLAY = auto()
    HUMAN_WON = auto()
    COMPUTER_WON = auto()

    @property
    def is_win(self) -> bool:
        return self in (Resolution.HUMAN_WON, Resolution.COMPUTER_WON)


class MatchResolver:
    """Stateless state machine over MatchState.outcome."""

    @classmethod
    def resolve(cls, match: MatchState) -> Resolution:
        """
        Evaluate the match after score accumulation.

        Mutates the outcome and tie-break fields of ``match``. Turn states
        are left alone; the caller reinitializes them unless the match is
        over.

        Args:
            match: Match state (mutated)

        Returns:
            The transition that was taken
        """
        # Terminal outcomes are sticky until the match is reset
        if match.outcome == MatchOutcome.HUMAN_WON:
            return Resolution.HUMAN_WON
        if match.outcome == MatchOutcome.COMPUTER_WON:
            return Resolution.COMPUTER_WON

        human_reached = match.human_score >= match.target_score
        computer_reached = match.computer_score >= match.target_score

        if human_reached and computer_reached:
            if not match.tie_break_active:
                return cls._start_tie_break(match)
            return cls._settle_tie_break(match)

        if human_reached:
            match.outcome = MatchOutcome.HUMAN_WON
            logger.info("Human wins %d-%d", match.human_score, match.computer_score)
            return Resolution.HUMAN_WON

        if computer_reached:
            match.outcome = MatchOutcome.COMPUTER_WON
            logger.info("Computer wins %d-%d", match.computer_score, match.human_score)
            return Resolution.COMPUTER_WON

        return Resolution.CONTINUE

    @classmethod
    def _start_tie_break(cls, match: MatchState) -> Resolution:
        match.tie_break_active = True
        match.tie_break_round_count = 0
        match.tie_break_human_score = 0
        match.tie_break_computer_score = 0
        logger.info(
            "Both players reached %d (%d-%d); entering tie-break",
            match.target_score,
            match.human_score,
            match.computer_score,
        )
        return Resolution.TIE_BREAK_STARTED

    @classmethod
    def _settle_tie_break(cls, match: MatchState) -> Resolution:
        human = match.tie_break_human_score
        computer = match.tie_break_computer_score

        if human > computer:
            match.outcome = MatchOutcome.HUMAN_WON
            match.tie_break_active = False
            logger.info("Human wins tie-break %d-%d", human, computer)
            return Resolution.HUMAN_WON

        if computer > human:
            match.outcome = MatchOutcome.COMPUTER_WON
            match.tie_break_active = False
            logger.info("Computer wins tie-break %d-%d", computer, human)
            return Resolution.COMPUTER_WON

        match.tie_break_round_count += 1
        match.tie_break_human_score = 0
        match.tie_break_computer_score = 0
        logger.info("Tie-break round drawn at %d; replaying", human)
        return Resolution.TIE_BREAK_REPLAY
