"""Dice Duel: race a computer opponent to a target score with five dice."""

__version__ = "0.1.0"
