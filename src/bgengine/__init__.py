"""
Backgammon Engine - rules engine for two-player backgammon: board, dice,
legal-move generation and the turn state machine.
"""

__version__ = "0.1.0"

# Core exports
from bgengine.core.types import (
    Bar,
    BearOff,
    Color,
    InvariantViolation,
    Move,
    OnPoint,
    Phase,
)
from bgengine.core.board import BoardState
from bgengine.core.dice import DiceSet
from bgengine.core.engine import GameEngine

__all__ = [
    "Bar",
    "BearOff",
    "Color",
    "InvariantViolation",
    "Move",
    "OnPoint",
    "Phase",
    "BoardState",
    "DiceSet",
    "GameEngine",
]
