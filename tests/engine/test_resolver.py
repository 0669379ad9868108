"""
Dice Duel - Match Resolver Tests
"""

import pytest

from dice_duel.engine.base import MatchOutcome, MatchState
from dice_duel.engine.resolver import MatchResolver, Resolution


class TestNormalMode:
    """Resolution outside tie-break."""

    def test_nobody_reached(self):
        match = MatchState(target_score=50, human_score=30, computer_score=49)
        assert MatchResolver.resolve(match) == Resolution.CONTINUE
        assert match.outcome == MatchOutcome.IN_PROGRESS

    def test_human_reached(self):
        match = MatchState(target_score=101, human_score=101, computer_score=80)
        assert MatchResolver.resolve(match) == Resolution.HUMAN_WON
        assert match.outcome == MatchOutcome.HUMAN_WON

    def test_computer_reached(self):
        match = MatchState(target_score=50, human_score=20, computer_score=64)
        assert MatchResolver.resolve(match) == Resolution.COMPUTER_WON
        assert match.outcome == MatchOutcome.COMPUTER_WON

    def test_exact_target_counts(self):
        match = MatchState(target_score=50, human_score=49, computer_score=50)
        assert MatchResolver.resolve(match) == Resolution.COMPUTER_WON

    def test_outcome_is_sticky(self):
        match = MatchState(
            target_score=50, human_score=10, computer_score=60,
            outcome=MatchOutcome.HUMAN_WON,
        )
        assert MatchResolver.resolve(match) == Resolution.HUMAN_WON
        assert match.outcome == MatchOutcome.HUMAN_WON


class TestTieBreakEntry:
    """Both players reaching the target in one turn."""

    def test_enters_tie_break(self, both_reached_match):
        both_reached_match.tie_break_human_score = 7
        both_reached_match.tie_break_computer_score = 9
        both_reached_match.tie_break_round_count = 3

        assert MatchResolver.resolve(both_reached_match) == Resolution.TIE_BREAK_STARTED
        assert both_reached_match.tie_break_active is True
        assert both_reached_match.outcome == MatchOutcome.IN_PROGRESS
        assert both_reached_match.tie_break_human_score == 0
        assert both_reached_match.tie_break_computer_score == 0
        assert both_reached_match.tie_break_round_count == 0

    def test_higher_cumulative_does_not_win(self):
        """Simultaneous reach ignores who is ahead."""
        match = MatchState(target_score=50, human_score=80, computer_score=50)
        assert MatchResolver.resolve(match) == Resolution.TIE_BREAK_STARTED


class TestTieBreakResolution:
    """Comparing tie-break round sums."""

    @pytest.fixture
    def tie_break_match(self, both_reached_match):
        both_reached_match.tie_break_active = True
        return both_reached_match

    def test_human_wins(self, tie_break_match):
        tie_break_match.tie_break_human_score = 20
        tie_break_match.tie_break_computer_score = 15

        assert MatchResolver.resolve(tie_break_match) == Resolution.HUMAN_WON
        assert tie_break_match.outcome == MatchOutcome.HUMAN_WON
        assert tie_break_match.tie_break_active is False

    def test_computer_wins(self, tie_break_match):
        tie_break_match.tie_break_human_score = 12
        tie_break_match.tie_break_computer_score = 13

        assert MatchResolver.resolve(tie_break_match) == Resolution.COMPUTER_WON
        assert tie_break_match.outcome == MatchOutcome.COMPUTER_WON
        assert tie_break_match.tie_break_active is False

    def test_draw_replays(self, tie_break_match):
        tie_break_match.tie_break_human_score = 18
        tie_break_match.tie_break_computer_score = 18

        assert MatchResolver.resolve(tie_break_match) == Resolution.TIE_BREAK_REPLAY
        assert tie_break_match.outcome == MatchOutcome.IN_PROGRESS
        assert tie_break_match.tie_break_active is True
        assert tie_break_match.tie_break_round_count == 1
        assert tie_break_match.tie_break_human_score == 0
        assert tie_break_match.tie_break_computer_score == 0

    def test_repeated_draws_count_up(self, tie_break_match):
        for expected in (1, 2, 3):
            tie_break_match.tie_break_human_score = 18
            tie_break_match.tie_break_computer_score = 18
            MatchResolver.resolve(tie_break_match)
            assert tie_break_match.tie_break_round_count == expected


class TestResolution:

    @pytest.mark.parametrize("resolution,is_win", [
        (Resolution.CONTINUE, False),
        (Resolution.TIE_BREAK_STARTED, False),
        (Resolution.TIE_BREAK_REPLAY, False),
        (Resolution.HUMAN_WON, True),
        (Resolution.COMPUTER_WON, True),
    ])
    def test_is_win(self, resolution, is_win):
        assert resolution.is_win is is_win
