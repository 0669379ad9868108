"""Tests for dice_duel/engine/events.py — event types and the win tally."""

import pytest

from dice_duel.engine.base import GameSnapshot, MatchState, PlayerTurnState
from dice_duel.engine.events import (
    GameEvent,
    GameEventPayload,
    SessionWinTally,
    classify_resolution,
)
from dice_duel.engine.resolver import Resolution


# ── GameEvent enum ──────────────────────────────────────────────────────

class TestGameEvent:
    def test_all_events_defined(self):
        expected = {
            "MATCH_STARTED", "DICE_THROWN", "HOLD_TOGGLED", "TURN_SCORED",
            "TIE_BREAK_STARTED", "TIE_BREAK_ROUND", "MATCH_WON", "MATCH_RESET",
        }
        assert {e.name for e in GameEvent} == expected

    def test_events_are_unique(self):
        values = [e.value for e in GameEvent]
        assert len(values) == len(set(values))


# ── GameEventPayload ────────────────────────────────────────────────────

class TestGameEventPayload:
    def test_payload(self):
        snap = GameSnapshot.capture(MatchState(target_score=20), PlayerTurnState(), PlayerTurnState())
        payload = GameEventPayload(event=GameEvent.MATCH_STARTED, snapshot=snap)
        assert payload.event == GameEvent.MATCH_STARTED
        assert payload.snapshot.target_score == 20


# ── classify_resolution ─────────────────────────────────────────────────

class TestClassifyResolution:
    @pytest.mark.parametrize("resolution,event", [
        (Resolution.CONTINUE, GameEvent.TURN_SCORED),
        (Resolution.TIE_BREAK_STARTED, GameEvent.TIE_BREAK_STARTED),
        (Resolution.TIE_BREAK_REPLAY, GameEvent.TIE_BREAK_ROUND),
        (Resolution.HUMAN_WON, GameEvent.MATCH_WON),
        (Resolution.COMPUTER_WON, GameEvent.MATCH_WON),
    ])
    def test_mapping(self, resolution, event):
        assert classify_resolution(resolution) == event

    def test_every_resolution_mapped(self):
        for resolution in Resolution:
            assert isinstance(classify_resolution(resolution), GameEvent)


# ── SessionWinTally ─────────────────────────────────────────────────────

class TestSessionWinTally:
    def test_starts_at_zero(self, tally):
        assert tally.label == "H:0/C:0"

    def test_counts_wins(self, tally):
        tally.on_human_win()
        tally.on_human_win()
        tally.on_computer_win()
        assert tally.human_wins == 2
        assert tally.computer_wins == 1
        assert tally.label == "H:2/C:1"

    def test_separate_instances(self):
        a = SessionWinTally()
        SessionWinTally().on_human_win()
        assert a.human_wins == 0
