"""
Dice Duel - Game Engine

Owns the state of one game session and runs the inbound commands:
start_match, throw_dice, toggle_hold, score_now, finalize_turn and
acknowledge_match_end.

Each human throw is followed by exactly one computer strategy step, so the
two players' roll counters advance together action by action. When the
human runs out of rolls (or scores early) the computer's remaining rolls
are swept, both totals are banked and the match resolver runs.

After every command a GameEventPayload with a fresh snapshot is published
to subscribed listeners.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from dice_duel.config.settings import Settings, get_settings
from dice_duel.engine.base import (
    GameSnapshot,
    MatchConfig,
    MatchState,
    PlayerTurnState,
)
from dice_duel.engine.errors import IllegalActionError
from dice_duel.engine.events import (
    GameEvent,
    GameEventPayload,
    SessionWinTally,
    WinTally,
    classify_resolution,
)
from dice_duel.engine.resolver import MatchResolver, Resolution
from dice_duel.engine.rng import DiceRandom, SeededRandom
from dice_duel.engine.strategy import ComputerStrategy
from dice_duel.engine.turn import TurnEngine
from dice_duel.engine.validators import validate_die_index, validate_hold_mask

logger = logging.getLogger(__name__)

Listener = Callable[[GameEventPayload], None]


class GameEngine:
    """Single-session game engine: one human against the computer.

    Commands run synchronously to completion. Illegal commands (throwing
    with no rolls left, acting on a finished match, ...) are ignored unless
    the engine was built with ``strict=True``, in which case they raise
    IllegalActionError.
    """

    def __init__(
        self,
        rng: DiceRandom | None = None,
        tally: WinTally | None = None,
        strict: bool = False,
    ) -> None:
        self._rng = rng if rng is not None else SeededRandom()
        self._tally = tally if tally is not None else SessionWinTally()
        self._strict = strict
        self._match: MatchState | None = None
        self._human = PlayerTurnState()
        self._computer = PlayerTurnState()
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        tally: WinTally | None = None,
    ) -> GameEngine:
        """Build an engine using the configured seed and strictness."""
        settings = settings or get_settings()
        return cls(
            rng=SeededRandom(settings.rng_seed),
            tally=tally,
            strict=settings.strict_actions,
        )

    # ── Read access ─────────────────────────────────────────────────────

    @property
    def match(self) -> MatchState | None:
        return self._match

    @property
    def human(self) -> PlayerTurnState:
        return self._human

    @property
    def computer(self) -> PlayerTurnState:
        return self._computer

    @property
    def tally(self) -> WinTally:
        return self._tally

    def snapshot(self) -> GameSnapshot | None:
        """Current state, or None before the first match is started."""
        if self._match is None:
            return None
        return GameSnapshot.capture(self._match, self._human, self._computer)

    # ── Observers ───────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event: GameEvent) -> GameSnapshot:
        snapshot = self.snapshot()
        payload = GameEventPayload(event=event, snapshot=snapshot)
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener failed while handling %s", event.name)
        return snapshot

    # ── Commands ────────────────────────────────────────────────────────

    def start_match(self, target_score: int) -> GameSnapshot:
        """
        Begin a new match.

        Args:
            target_score: Cumulative score that wins (at least 10)

        Returns:
            Snapshot of the fresh match

        Raises:
            InvalidConfigurationError: If target_score is below 10
        """
        config = MatchConfig(target_score=target_score)

        if self._match is not None and not self._match.is_over:
            logger.info("Abandoning match in progress to start a new one")

        self._match = MatchState(target_score=config.target_score)
        self._human = PlayerTurnState()
        self._computer = PlayerTurnState()
        logger.info("Match started: first to %d", config.target_score)
        return self._publish(GameEvent.MATCH_STARTED)

    def throw_dice(self, hold_mask: Sequence[bool] | None = None) -> GameSnapshot | None:
        """
        Roll for the human, then let the computer take one step.

        Args:
            hold_mask: Dice to keep; None uses the holds set via toggle_hold.
                Ignored on the first roll of a turn and during tie-break.

        Returns:
            Snapshot after the throw (and any turn completion)
        """
        match = self._match
        if match is None:
            return self._illegal("No match has been started.")
        if match.is_over:
            return self._illegal("The match is over.")
        if self._human.rolls_remaining <= 0:
            return self._illegal("No rolls remaining this turn.")

        if match.tie_break_active:
            return self._throw_tie_break(match)

        mask = validate_hold_mask(hold_mask) if hold_mask is not None else self._human.hold_mask
        TurnEngine.roll_human(self._human, mask, self._rng)
        ComputerStrategy.apply(self._computer, self._rng)

        if self._human.rolls_remaining == 0:
            return self._complete_turn(match)
        return self._publish(GameEvent.DICE_THROWN)

    def toggle_hold(self, index: int) -> GameSnapshot | None:
        """Flip whether the human keeps die ``index`` on the next reroll."""
        validate_die_index(index)
        match = self._match
        if match is None:
            return self._illegal("No match has been started.")
        if match.is_over:
            return self._illegal("The match is over.")
        if match.tie_break_active:
            return self._illegal("Dice cannot be held during a tie-break.")
        if self._human.is_first_roll_of_turn:
            return self._illegal("Roll before holding dice.")
        if self._human.rolls_remaining <= 0:
            return self._illegal("No rolls remaining this turn.")

        mask = list(self._human.hold_mask)
        mask[index] = not mask[index]
        self._human.hold_mask = tuple(mask)
        return self._publish(GameEvent.HOLD_TOGGLED)

    def score_now(self) -> GameSnapshot | None:
        """Stop rolling and bank the current dice."""
        match = self._match
        if match is None:
            return self._illegal("No match has been started.")
        if match.is_over:
            return self._illegal("The match is over.")
        if match.tie_break_active:
            return self._illegal("Tie-break rounds are scored by throwing.")
        if self._human.rolls_remaining <= 0:
            return self._illegal("No rolls remaining this turn.")
        if self._human.is_first_roll_of_turn:
            return self._illegal("Roll at least once before scoring.")

        return self._complete_turn(match)

    def finalize_turn(self) -> GameSnapshot | None:
        """
        Finish the current normal turn.

        Safe to call repeatedly: a turn that is already banked, not yet
        rolled, or part of a finished match is left untouched.
        """
        match = self._match
        if match is None or match.is_over or match.tie_break_active:
            return self.snapshot()
        if match.turn_scored or self._human.is_first_roll_of_turn:
            return self.snapshot()
        return self._complete_turn(match)

    def acknowledge_match_end(self) -> GameSnapshot | None:
        """Reset scores and turn state for a new match with the same target.

        Win totals held by the tally are not touched.
        """
        match = self._match
        if match is None:
            return self._illegal("No match has been started.")

        self._match = MatchState(target_score=match.target_score)
        self._human = PlayerTurnState()
        self._computer = PlayerTurnState()
        logger.info("Match reset (target %d)", match.target_score)
        return self._publish(GameEvent.MATCH_RESET)

    # ── Internals ───────────────────────────────────────────────────────

    def _throw_tie_break(self, match: MatchState) -> GameSnapshot:
        TurnEngine.roll_tie_break(self._human, self._rng)
        ComputerStrategy.apply(self._computer, self._rng, tie_break=True)
        TurnEngine.score_tie_break(match, self._human, self._computer)
        logger.debug(
            "Tie-break round %d: human %d, computer %d",
            match.tie_break_round_count + 1,
            match.tie_break_human_score,
            match.tie_break_computer_score,
        )
        return self._resolve(match)

    def _complete_turn(self, match: MatchState) -> GameSnapshot:
        TurnEngine.sweep_computer(self._computer, self._rng)
        TurnEngine.score_turn(match, self._human, self._computer)
        return self._resolve(match)

    def _resolve(self, match: MatchState) -> GameSnapshot:
        resolution = MatchResolver.resolve(match)

        if resolution == Resolution.HUMAN_WON:
            self._tally.on_human_win()
        elif resolution == Resolution.COMPUTER_WON:
            self._tally.on_computer_win()
        else:
            TurnEngine.start_new_turn(match, self._human, self._computer)

        return self._publish(classify_resolution(resolution))

    def _illegal(self, message: str) -> GameSnapshot | None:
        if self._strict:
            raise IllegalActionError(message)
        logger.debug("Ignored illegal action: %s", message)
        return self.snapshot()
