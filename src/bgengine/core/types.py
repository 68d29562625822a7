"""Core type definitions for the backgammon rules engine.

This module defines the value types shared by the board, the dice, the
move validator and the game engine.

Board indexing:
    Points are indexed 0-23. White moves from index 23 toward 0 and bears
    off past index 0 (home board: 0-5). Black moves from index 0 toward 23
    and bears off past index 23 (home board: 18-23).

    Positions that are not on a point (the bar, borne-off checkers) are
    represented by their own types rather than by reserved indices.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ==============================================================================
# CONSTANTS
# ==============================================================================

NUM_POINTS = 24
CHECKERS_PER_PLAYER = 15
HOME_BOARD_SIZE = 6


class InvariantViolation(RuntimeError):
    """Raised when an engine operation would break a board invariant.

    This signals a bug in the caller (a move that should never have been
    allowed), not bad user input. Rejected user input is reported through
    boolean results instead.
    """


# ==============================================================================
# PLAYERS AND PHASES
# ==============================================================================


class Color(Enum):
    """Player colors."""
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Color":
        """Return the opposing color."""
        return Color.BLACK if self == Color.WHITE else Color.WHITE

    def __str__(self) -> str:
        return self.value


class Phase(Enum):
    """Lifecycle of a game."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


# ==============================================================================
# BOARD POSITIONS
# ==============================================================================


@dataclass(frozen=True)
class OnPoint:
    """A position on one of the 24 points.

    Attributes:
        index: Point index (0-23)
    """
    index: int

    def __post_init__(self):
        if not 0 <= self.index < NUM_POINTS:
            raise ValueError(f"Invalid point index: {self.index}")

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Bar:
    """The bar of one color (checkers waiting to re-enter)."""
    color: Color

    def __str__(self) -> str:
        return "bar"


@dataclass(frozen=True)
class BearOff:
    """The borne-off tray of one color."""
    color: Color

    def __str__(self) -> str:
        return "off"


BoardPosition = Union[OnPoint, Bar, BearOff]


@dataclass(frozen=True)
class Move:
    """A single checker movement.

    Attributes:
        from_pos: Where the checker starts (a point or the mover's bar)
        to_pos: Where the checker ends (a point or the mover's bear-off tray)
    """
    from_pos: BoardPosition
    to_pos: BoardPosition

    def __str__(self) -> str:
        return f"{self.from_pos} -> {self.to_pos}"


# ==============================================================================
# PER-COLOR MOVEMENT RULES
# ==============================================================================


@dataclass(frozen=True)
class ColorRules:
    """Movement geometry of one color.

    Every index a color can reach is ``bar_edge + direction * pips`` for some
    number of pips. The bar sits one step before the first point the color
    can enter on, and the bear-off tray sits one step past its last point.

    Attributes:
        color: The color these rules describe
        direction: -1 for white (23 -> 0), +1 for black (0 -> 23)
        bar_edge: Virtual index of the bar (24 for white, -1 for black)
        off_edge: Virtual index of the bear-off tray (-1 for white, 24 for black)
    """
    color: Color
    direction: int
    bar_edge: int
    off_edge: int

    @property
    def home_board(self) -> range:
        """Point indices of this color's home board."""
        if self.direction < 0:
            return range(0, HOME_BOARD_SIZE)
        return range(NUM_POINTS - HOME_BOARD_SIZE, NUM_POINTS)

    @property
    def entry_range(self) -> range:
        """Point indices this color may enter on from the bar."""
        if self.direction < 0:
            return range(NUM_POINTS - HOME_BOARD_SIZE, NUM_POINTS)
        return range(0, HOME_BOARD_SIZE)

    def entry_index(self, die: int) -> int:
        """Point index reached when entering from the bar with ``die``."""
        return self.bar_edge + self.direction * die

    def entry_distance(self, index: int) -> int:
        """Die value needed to enter from the bar onto ``index``."""
        return (index - self.bar_edge) * self.direction

    def off_distance(self, index: int) -> int:
        """Die value needed to bear off exactly from ``index``."""
        return (self.off_edge - index) * self.direction

    def distance(self, from_index: int, to_index: int) -> int:
        """Pips travelled from ``from_index`` to ``to_index`` (negative if backwards)."""
        return (to_index - from_index) * self.direction

    def advance(self, index: int, die: int) -> int:
        """Index reached by moving ``die`` pips forward; may fall off the board."""
        return index + self.direction * die


_COLOR_RULES = {
    Color.WHITE: ColorRules(color=Color.WHITE, direction=-1, bar_edge=NUM_POINTS, off_edge=-1),
    Color.BLACK: ColorRules(color=Color.BLACK, direction=1, bar_edge=-1, off_edge=NUM_POINTS),
}


def rules_for(color: Color) -> ColorRules:
    """Look up the movement rules of a color."""
    return _COLOR_RULES[color]


# ==============================================================================
# TURN LOG
# ==============================================================================


@dataclass(frozen=True)
class TurnLogEntry:
    """One applied move of the current turn, with what undo needs to reverse it.

    Attributes:
        move: The move that was applied
        die_used: Die value consumed (may exceed the distance on an over-roll bear-off)
        hit: Whether the move sent an opposing blot to the bar
    """
    move: Move
    die_used: int
    hit: bool = False
