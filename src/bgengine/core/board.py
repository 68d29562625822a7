"""Board representation.

This module implements the board state of a backgammon game:
- The 24 points, the bar and the borne-off tray of each color
- The single checker-moving primitive used by the game engine
- Board queries (home board completeness, bear-off ordering, pip count)
- Board construction and display

Board Layout (point indices):
    White moves 23→0→off (home board: 0-5)
    Black moves 0→23→off (home board: 18-23)

    12 13 14 15 16 17    18 19 20 21 22 23
    +------------------+------------------+
    |                  |                  |  Black home
    |                  |                  |
    |                  |                  |
    |                  |                  |
    |                  |                  |
    |                  |                  |  White home
    +------------------+------------------+
    11 10  9  8  7  6     5  4  3  2  1  0
"""

import logging
from typing import Dict, List, Optional

from bgengine.core.point import Point
from bgengine.core.types import (
    CHECKERS_PER_PLAYER,
    NUM_POINTS,
    Bar,
    BearOff,
    BoardPosition,
    Color,
    InvariantViolation,
    OnPoint,
    rules_for,
)

logger = logging.getLogger(__name__)

# Standard starting layout: point index -> checker count
STANDARD_WHITE_SETUP = {23: 2, 12: 5, 7: 3, 5: 5}
STANDARD_BLACK_SETUP = {0: 2, 11: 5, 16: 3, 18: 5}


class BoardState:
    """Full board: 24 points plus per-color bar and borne-off counts.

    Between operations, every color accounts for exactly 15 checkers across
    its points, its bar and its borne-off tray. The only way the game engine
    changes a board is :meth:`move_checker` (and :meth:`reverse_checker` for
    undo); the ``place``/``set_*`` helpers exist to build positions.
    """

    def __init__(self):
        self._points: List[Point] = [Point(i) for i in range(NUM_POINTS)]
        self._bar: Dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 0}
        self._borne_off: Dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 0}

    # ==========================================================================
    # QUERIES
    # ==========================================================================

    def point_at(self, index: int) -> Point:
        """Get the point at ``index`` (0-23).

        Raises:
            ValueError: If ``index`` is outside 0-23
        """
        _check_index(index)
        return self._points[index]

    def bar_count(self, color: Color) -> int:
        """Number of ``color`` checkers waiting on the bar."""
        return self._bar[color]

    def home_count(self, color: Color) -> int:
        """Number of ``color`` checkers borne off."""
        return self._borne_off[color]

    def checkers_on_points(self, color: Color) -> int:
        """Number of ``color`` checkers on the 24 points."""
        return sum(p.count for p in self._points if p.has_color(color))

    def checker_total(self, color: Color) -> int:
        """Checkers of ``color`` on points, on the bar and borne off."""
        return self.checkers_on_points(color) + self._bar[color] + self._borne_off[color]

    def occupied_indices(self, color: Color) -> List[int]:
        """Indices of the points holding ``color`` checkers, in ascending order."""
        return [p.index for p in self._points if p.has_color(color)]

    def has_won(self, color: Color) -> bool:
        """True once all 15 ``color`` checkers are borne off."""
        return self._borne_off[color] == CHECKERS_PER_PLAYER

    def all_checkers_in_home_board(self, color: Color) -> bool:
        """Check whether ``color`` may bear off.

        True when the color has nothing on the bar and no checker on a point
        outside its home board.
        """
        if self._bar[color] > 0:
            return False
        home = rules_for(color).home_board
        return all(i in home for i in self.occupied_indices(color))

    def highest_occupied_in_home_board(self, color: Color) -> Optional[int]:
        """Home-board point holding ``color``'s checker farthest from bearing off.

        Args:
            color: Which player

        Returns:
            Point index (highest index for white, lowest for black), or None
            if the color has no checker in its home board
        """
        rules = rules_for(color)
        occupied = [i for i in rules.home_board if self._points[i].has_color(color)]
        if not occupied:
            return None
        return max(occupied, key=rules.off_distance)

    def pip_count(self, color: Color) -> int:
        """Total pips ``color`` needs to bear off every checker (bar counts 25)."""
        rules = rules_for(color)
        total = self._bar[color] * (NUM_POINTS + 1)
        for point in self._points:
            if point.has_color(color):
                total += point.count * rules.off_distance(point.index)
        return total

    def validate(self) -> None:
        """Check checker conservation for both colors.

        Raises:
            InvariantViolation: If a color does not account for exactly 15 checkers
        """
        for color in Color:
            total = self.checker_total(color)
            if total != CHECKERS_PER_PLAYER:
                raise InvariantViolation(
                    f"{color} has {total} checkers, should have {CHECKERS_PER_PLAYER}"
                )

    # ==========================================================================
    # MUTATION
    # ==========================================================================

    def move_checker(self, from_pos: BoardPosition, to_pos: BoardPosition, color: Color) -> bool:
        """Move one ``color`` checker from ``from_pos`` to ``to_pos``.

        Landing on a lone opposing checker hits it: that checker goes to its
        owner's bar. Legality (dice, blocking, bear-off rules) is the caller's
        responsibility.

        Args:
            from_pos: A point holding ``color`` or ``Bar(color)``
            to_pos: A point or ``BearOff(color)``
            color: Color of the moving checker

        Returns:
            True if the move hit an opposing blot

        Raises:
            InvariantViolation: If the source holds no ``color`` checker, the
                destination is blocked, or a position belongs to the other color
        """
        # Check the destination first so a failed move leaves the board intact.
        if isinstance(to_pos, BearOff):
            self._check_owner(to_pos, color)
        elif not isinstance(to_pos, OnPoint):
            raise InvariantViolation(f"Cannot move a checker onto {to_pos!r}")
        elif self._points[to_pos.index].is_blocked_for(color):
            raise InvariantViolation(f"Point {to_pos.index} is blocked for {color}")

        self._take_from(from_pos, color)

        if isinstance(to_pos, BearOff):
            self._borne_off[color] += 1
            return False

        hit = self._points[to_pos.index].add_checker(color)
        if hit:
            self._bar[color.opposite()] += 1
            logger.debug("%s hits %s blot on point %d", color, color.opposite(), to_pos.index)
        return hit

    def reverse_checker(self, from_pos: BoardPosition, to_pos: BoardPosition, color: Color) -> None:
        """Undo :meth:`move_checker` for the mover's own checker.

        The checker is taken back from ``to_pos`` (a point or the borne-off
        tray) and returned to ``from_pos`` (its point or the bar). An opposing
        checker that was hit stays on the bar.

        Raises:
            InvariantViolation: If ``to_pos`` holds no ``color`` checker
        """
        if isinstance(to_pos, BearOff):
            self._check_owner(to_pos, color)
            if self._borne_off[color] <= 0:
                raise InvariantViolation(f"No {color} checkers borne off")
            self._borne_off[color] -= 1
        else:
            self._take_from(to_pos, color)

        if isinstance(from_pos, Bar):
            self._check_owner(from_pos, color)
            self._bar[color] += 1
        elif isinstance(from_pos, OnPoint):
            self._points[from_pos.index].add_checker(color)
        else:
            raise InvariantViolation(f"Cannot return a checker to {from_pos!r}")

    def _take_from(self, pos: BoardPosition, color: Color) -> None:
        if isinstance(pos, Bar):
            self._check_owner(pos, color)
            if self._bar[color] <= 0:
                raise InvariantViolation(f"No {color} checkers on the bar")
            self._bar[color] -= 1
        elif isinstance(pos, OnPoint):
            point = self._points[pos.index]
            if point.count > 0 and point.color != color:
                raise InvariantViolation(f"Point {pos.index} holds {point.color}, not {color}")
            point.remove_checker()
        else:
            raise InvariantViolation(f"Cannot take a checker from {pos!r}")

    @staticmethod
    def _check_owner(pos, color: Color) -> None:
        if pos.color != color:
            raise InvariantViolation(f"{pos!r} does not belong to {color}")

    # ==========================================================================
    # SETUP HELPERS
    # ==========================================================================

    def place(self, index: int, color: Color, count: int) -> "BoardState":
        """Set point ``index`` to ``count`` checkers of ``color`` (0 clears it)."""
        _check_index(index)
        if count < 0 or count > CHECKERS_PER_PLAYER:
            raise ValueError(f"Invalid checker count: {count}")
        self._points[index] = Point(index, color if count else None, count)
        return self

    def set_bar(self, color: Color, count: int) -> "BoardState":
        """Set the number of ``color`` checkers on the bar."""
        if count < 0 or count > CHECKERS_PER_PLAYER:
            raise ValueError(f"Invalid checker count: {count}")
        self._bar[color] = count
        return self

    def set_borne_off(self, color: Color, count: int) -> "BoardState":
        """Set the number of ``color`` checkers already borne off."""
        if count < 0 or count > CHECKERS_PER_PLAYER:
            raise ValueError(f"Invalid checker count: {count}")
        self._borne_off[color] = count
        return self

    def snapshot(self) -> "BoardState":
        """Create an independent deep copy of the board."""
        copy = BoardState()
        copy._points = [p.copy() for p in self._points]
        copy._bar = dict(self._bar)
        copy._borne_off = dict(self._borne_off)
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self._points == other._points
            and self._bar == other._bar
            and self._borne_off == other._borne_off
        )

    def __repr__(self) -> str:
        return (
            f"BoardState(white_pips={self.pip_count(Color.WHITE)}, "
            f"black_pips={self.pip_count(Color.BLACK)})"
        )


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_POINTS:
        raise ValueError(f"Invalid point index: {index}")


# ==============================================================================
# BOARD CONSTRUCTION
# ==============================================================================


def initial_board() -> BoardState:
    """Create the standard backgammon starting position.

    Standard setup (point indices):
    - White: 2 on 23, 5 on 12, 3 on 7, 5 on 5
    - Black: 2 on 0, 5 on 11, 3 on 16, 5 on 18

    Returns:
        Board in the starting position
    """
    board = BoardState()
    for index, count in STANDARD_WHITE_SETUP.items():
        board.place(index, Color.WHITE, count)
    for index, count in STANDARD_BLACK_SETUP.items():
        board.place(index, Color.BLACK, count)
    return board


def empty_board() -> BoardState:
    """Create a board with no checkers on it (for building test positions)."""
    return BoardState()


# ==============================================================================
# BOARD DISPLAY
# ==============================================================================


def _point_cell(point: Point) -> str:
    if point.is_empty:
        return " . "
    symbol = "W" if point.color == Color.WHITE else "B"
    return f"{symbol}{point.count:<2d}"


def board_to_string(board: BoardState) -> str:
    """Convert board to an ASCII representation.

    Args:
        board: Board to display

    Returns:
        Multi-line string with both rows, the bar and the borne-off trays
    """
    top = range(12, 24)
    bottom = range(11, -1, -1)

    lines = []
    lines.append(" ".join(f"{i:2d} " for i in top))
    lines.append(" ".join(_point_cell(board.point_at(i)) for i in top))
    lines.append(
        f"Bar: W{board.bar_count(Color.WHITE)} B{board.bar_count(Color.BLACK)}   "
        f"Off: W{board.home_count(Color.WHITE)} B{board.home_count(Color.BLACK)}"
    )
    lines.append(" ".join(_point_cell(board.point_at(i)) for i in bottom))
    lines.append(" ".join(f"{i:2d} " for i in bottom))
    lines.append(
        f"Pips: W{board.pip_count(Color.WHITE)} B{board.pip_count(Color.BLACK)}"
    )
    return "\n".join(lines)
