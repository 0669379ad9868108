"""
Dice Duel - Game Engine Base Classes

This module defines the data structures and enums shared by the turn engine,
the computer strategy and the match resolver. Dice values and snapshots are
immutable (frozen dataclasses); the per-turn and per-match state containers
are plain mutable dataclasses owned by a single GameEngine.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence


NUM_DICE = 5
DIE_FACES = 6
MAX_ROLLS = 3
TIE_BREAK_ROLLS = 1
MIN_TARGET_SCORE = 10


class Side(Enum):
    """The two participants of a match."""
    HUMAN = "human"
    COMPUTER = "computer"


class MatchOutcome(Enum):
    """Terminal (or not yet terminal) result of a match."""
    IN_PROGRESS = auto()
    HUMAN_WON = auto()
    COMPUTER_WON = auto()


_OUTCOME_WINNERS: dict[MatchOutcome, Side] = {
    MatchOutcome.HUMAN_WON: Side.HUMAN,
    MatchOutcome.COMPUTER_WON: Side.COMPUTER,
}


HoldMask = tuple[bool, ...]


def empty_hold_mask() -> HoldMask:
    """A hold mask with no dice held."""
    return (False,) * NUM_DICE


@dataclass(frozen=True)
class DiceSet:
    """
    Immutable set of five D6 faces.

    Attributes:
        values: Tuple of exactly five face values (1-6)
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Fail fast on malformed dice."""
        # Local import: validators depends on this module's constants
        from dice_duel.engine.validators import validate_dice_values

        validate_dice_values(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    @property
    def total(self) -> int:
        """Sum of all five faces; this is what a turn scores."""
        return sum(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceSet":
        """Create a DiceSet from any sequence type."""
        return cls(values=tuple(values))

    @classmethod
    def placeholder(cls) -> "DiceSet":
        """Faces shown before the first roll of a match."""
        return cls(values=(1,) * NUM_DICE)


@dataclass
class PlayerTurnState:
    """
    Mutable per-player turn state.

    Attributes:
        dice: Current dice on the table
        hold_mask: Dice marked to keep on the next reroll
        rolls_remaining: Rolls left this turn (3 normally, 1 in tie-break)
        is_first_roll_of_turn: True until the player rolls in this turn
    """
    dice: DiceSet = field(default_factory=DiceSet.placeholder)
    hold_mask: HoldMask = field(default_factory=empty_hold_mask)
    rolls_remaining: int = MAX_ROLLS
    is_first_roll_of_turn: bool = True

    def start_turn(self, tie_break: bool = False) -> None:
        """Reset for a new turn. Dice stay on the table until the next roll."""
        self.hold_mask = empty_hold_mask()
        self.rolls_remaining = TIE_BREAK_ROLLS if tie_break else MAX_ROLLS
        self.is_first_roll_of_turn = True


@dataclass(frozen=True)
class TurnResult:
    """Points recorded for one completed turn or tie-break round."""
    turn_number: int
    human_points: int
    computer_points: int
    is_tie_break: bool = False


@dataclass
class MatchState:
    """
    Mutable state of a whole match.

    Attributes:
        target_score: Cumulative score that ends the match
        human_score: Human's cumulative score
        computer_score: Computer's cumulative score
        tie_break_active: Whether the match is in the tie-break sub-mode
        tie_break_human_score: Human's roll sum for the current tie-break round
        tie_break_computer_score: Computer's roll sum for the current round
        tie_break_round_count: Number of drawn tie-break rounds so far
        outcome: Current match outcome
        turn_number: 1-based number of the turn being played
        turn_scored: Guard set once the current turn has been accumulated
        history: Completed turns, oldest first
    """
    target_score: int
    human_score: int = 0
    computer_score: int = 0
    tie_break_active: bool = False
    tie_break_human_score: int = 0
    tie_break_computer_score: int = 0
    tie_break_round_count: int = 0
    outcome: MatchOutcome = MatchOutcome.IN_PROGRESS
    turn_number: int = 1
    turn_scored: bool = False
    history: list[TurnResult] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.outcome != MatchOutcome.IN_PROGRESS

    @property
    def winner(self) -> Side | None:
        return _OUTCOME_WINNERS.get(self.outcome)


@dataclass(frozen=True)
class PlayerSnapshot:
    """Read-only view of one player's turn state."""
    dice: tuple[int, ...]
    hold_mask: HoldMask
    rolls_remaining: int
    is_first_roll_of_turn: bool

    @classmethod
    def of(cls, state: PlayerTurnState) -> "PlayerSnapshot":
        return cls(
            dice=state.dice.values,
            hold_mask=state.hold_mask,
            rolls_remaining=state.rolls_remaining,
            is_first_roll_of_turn=state.is_first_roll_of_turn,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of the whole game, published after every command.

    Attributes:
        human: Human player's dice and roll counter
        computer: Computer player's dice and roll counter
        human_score: Human's cumulative score
        computer_score: Computer's cumulative score
        target_score: Score that ends the match
        tie_break_active: Whether tie-break mode is on
        tie_break_human_score: Human's current tie-break round sum
        tie_break_computer_score: Computer's current tie-break round sum
        tie_break_round_count: Drawn tie-break rounds so far
        outcome: Match outcome
        turn_number: Turn currently being played
        history: Completed turn results
    """
    human: PlayerSnapshot
    computer: PlayerSnapshot
    human_score: int
    computer_score: int
    target_score: int
    tie_break_active: bool
    tie_break_human_score: int
    tie_break_computer_score: int
    tie_break_round_count: int
    outcome: MatchOutcome
    turn_number: int
    history: tuple[TurnResult, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.outcome != MatchOutcome.IN_PROGRESS

    @property
    def winner(self) -> Side | None:
        return _OUTCOME_WINNERS.get(self.outcome)

    @classmethod
    def capture(
        cls,
        match: MatchState,
        human: PlayerTurnState,
        computer: PlayerTurnState,
    ) -> "GameSnapshot":
        """Freeze the current engine state."""
        return cls(
            human=PlayerSnapshot.of(human),
            computer=PlayerSnapshot.of(computer),
            human_score=match.human_score,
            computer_score=match.computer_score,
            target_score=match.target_score,
            tie_break_active=match.tie_break_active,
            tie_break_human_score=match.tie_break_human_score,
            tie_break_computer_score=match.tie_break_computer_score,
            tie_break_round_count=match.tie_break_round_count,
            outcome=match.outcome,
            turn_number=match.turn_number,
            history=tuple(match.history),
        )


@dataclass(frozen=True)
class MatchConfig:
    """
    Configuration for one match.

    Attributes:
        target_score: Score needed to win (at least 10)
    """
    target_score: int

    def __post_init__(self) -> None:
        """Validate configuration."""
        # Local import: validators depends on this module's constants
        from dice_duel.engine.validators import validate_target_score

        validate_target_score(self.target_score)
