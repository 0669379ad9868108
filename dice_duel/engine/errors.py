"""
Dice Duel - Engine Exceptions

Every error raised by the game engine derives from GameEngineError.
"""


class GameEngineError(Exception):
    """Base class for all game engine errors."""


class InvalidConfigurationError(GameEngineError, ValueError):
    """A match was configured with unusable settings (e.g. target < 10).

    Raised before any state is mutated.
    """


class IllegalActionError(GameEngineError):
    """A command was issued that the current match state does not allow.

    Non-strict engines log and ignore these; strict engines raise them.
    """


class InvariantViolationError(GameEngineError, AssertionError):
    """Internal state broke a structural rule (bad die face, wrong length).

    Indicates a programming error in the engine, never a user mistake.
    """
