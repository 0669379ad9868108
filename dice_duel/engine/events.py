"""
Dice Duel - Game Events

Event types published to observers after every engine command, and the
win-tally collaborator notified when a match is decided.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from dice_duel.engine.base import GameSnapshot
from dice_duel.engine.resolver import Resolution


class GameEvent(Enum):
    """Events that can occur during a match."""

    MATCH_STARTED = auto()
    DICE_THROWN = auto()
    HOLD_TOGGLED = auto()
    TURN_SCORED = auto()
    TIE_BREAK_STARTED = auto()
    TIE_BREAK_ROUND = auto()
    MATCH_WON = auto()
    MATCH_RESET = auto()


@dataclass(frozen=True)
class GameEventPayload:
    """Wrapper for an event and the state it left behind."""

    event: GameEvent
    snapshot: GameSnapshot


# Map resolver transitions to the event published after a completed turn
_RESOLUTION_EVENT_MAP: dict[Resolution, GameEvent] = {
    Resolution.CONTINUE: GameEvent.TURN_SCORED,
    Resolution.TIE_BREAK_STARTED: GameEvent.TIE_BREAK_STARTED,
    Resolution.TIE_BREAK_REPLAY: GameEvent.TIE_BREAK_ROUND,
    Resolution.HUMAN_WON: GameEvent.MATCH_WON,
    Resolution.COMPUTER_WON: GameEvent.MATCH_WON,
}


def classify_resolution(resolution: Resolution) -> GameEvent:
    """Determine the game event for a completed turn."""
    return _RESOLUTION_EVENT_MAP[resolution]


class WinTally(Protocol):
    """Collaborator that owns session win totals."""

    def on_human_win(self) -> None:
        ...

    def on_computer_win(self) -> None:
        ...


@dataclass
class SessionWinTally:
    """In-memory win totals for the lifetime of a session."""

    human_wins: int = 0
    computer_wins: int = 0

    def on_human_win(self) -> None:
        self.human_wins += 1

    def on_computer_win(self) -> None:
        self.computer_wins += 1

    @property
    def label(self) -> str:
        """Scoreboard text, e.g. ``"H:2/C:1"``."""
        return f"H:{self.human_wins}/C:{self.computer_wins}"
