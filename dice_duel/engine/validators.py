"""
Dice Duel - Input Validation Utilities

Validation functions for game engine inputs. Validators either return
normalized data or raise one of the engine's exception types.
"""

from typing import Sequence

from dice_duel.engine.base import DIE_FACES, MIN_TARGET_SCORE, NUM_DICE, HoldMask
from dice_duel.engine.errors import InvalidConfigurationError, InvariantViolationError


def validate_dice_values(values: Sequence[int]) -> tuple[int, ...]:
    """
    Validate and normalize a full set of dice values.

    Args:
        values: Sequence of five dice values

    Returns:
        Validated values as a tuple

    Raises:
        InvariantViolationError: If the count or any face is out of range
    """
    values_tuple = tuple(values)

    if len(values_tuple) != NUM_DICE:
        raise InvariantViolationError(
            f"Exactly {NUM_DICE} dice required, got {len(values_tuple)}."
        )

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvariantViolationError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DIE_FACES):
            raise InvariantViolationError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_hold_mask(mask: Sequence[bool] | None) -> HoldMask:
    """
    Validate a hold mask.

    Args:
        mask: Five booleans, one per die; None means nothing held

    Returns:
        Validated mask as a tuple of bools

    Raises:
        InvariantViolationError: If the mask does not have one entry per die
    """
    if mask is None:
        return (False,) * NUM_DICE

    mask_tuple = tuple(bool(held) for held in mask)

    if len(mask_tuple) != NUM_DICE:
        raise InvariantViolationError(
            f"Hold mask must have {NUM_DICE} entries, got {len(mask_tuple)}."
        )

    return mask_tuple


def validate_die_index(index: int) -> int:
    """
    Validate the index of a single die.

    Raises:
        InvariantViolationError: If the index is not 0-4
    """
    if not isinstance(index, int) or isinstance(index, bool) or not (0 <= index < NUM_DICE):
        raise InvariantViolationError(
            f"Die index {index} is out of range. Must be between 0 and {NUM_DICE - 1}."
        )
    return index


def validate_target_score(score: int) -> int:
    """
    Validate the target score for a match.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        InvalidConfigurationError: If score is not an int of at least 10
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise InvalidConfigurationError(
            f"Target score must be an integer, got {type(score).__name__}."
        )

    if score < MIN_TARGET_SCORE:
        raise InvalidConfigurationError(
            f"Target score must be at least {MIN_TARGET_SCORE}, got {score}."
        )

    return score
