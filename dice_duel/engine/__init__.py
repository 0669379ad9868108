"""
Dice Duel Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, the computer's reroll policy, turn scoring and
tie-break resolution.
"""

from dice_duel.engine.base import (
    DiceSet,
    GameSnapshot,
    MatchConfig,
    MatchOutcome,
    MatchState,
    PlayerSnapshot,
    PlayerTurnState,
    Side,
    TurnResult,
)
from dice_duel.engine.errors import (
    GameEngineError,
    IllegalActionError,
    InvalidConfigurationError,
    InvariantViolationError,
)
from dice_duel.engine.events import GameEvent, GameEventPayload, SessionWinTally, WinTally
from dice_duel.engine.game import GameEngine
from dice_duel.engine.resolver import MatchResolver, Resolution
from dice_duel.engine.rng import DiceRandom, SeededRandom
from dice_duel.engine.strategy import ComputerStrategy, StrategyDecision
from dice_duel.engine.turn import TurnEngine

__all__ = [
    # Data Classes
    "DiceSet",
    "GameSnapshot",
    "MatchConfig",
    "MatchState",
    "PlayerSnapshot",
    "PlayerTurnState",
    "StrategyDecision",
    "TurnResult",
    # Enums
    "GameEvent",
    "MatchOutcome",
    "Resolution",
    "Side",
    # Errors
    "GameEngineError",
    "IllegalActionError",
    "InvalidConfigurationError",
    "InvariantViolationError",
    # Collaborators
    "DiceRandom",
    "GameEventPayload",
    "SeededRandom",
    "SessionWinTally",
    "WinTally",
    # Engines
    "ComputerStrategy",
    "GameEngine",
    "MatchResolver",
    "TurnEngine",
]
