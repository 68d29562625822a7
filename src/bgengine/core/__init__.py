"""Core game logic and data structures."""

from bgengine.core.types import (
    Bar,
    BearOff,
    BoardPosition,
    Color,
    InvariantViolation,
    Move,
    OnPoint,
    Phase,
    TurnLogEntry,
)
from bgengine.core.point import Point
from bgengine.core.board import BoardState, initial_board, empty_board, board_to_string
from bgengine.core.dice import DiceSet
from bgengine.core.engine import GameEngine

__all__ = [
    "Bar",
    "BearOff",
    "BoardPosition",
    "Color",
    "InvariantViolation",
    "Move",
    "OnPoint",
    "Phase",
    "TurnLogEntry",
    "Point",
    "BoardState",
    "initial_board",
    "empty_board",
    "board_to_string",
    "DiceSet",
    "GameEngine",
]
