"""A single point of the board: a stack of checkers of at most one color."""

from typing import Optional

from bgengine.core.types import Color, InvariantViolation


class Point:
    """Checker stack on one board location.

    A point is empty or holds ``count`` checkers of a single ``color``. It has
    no knowledge of the bar: when :meth:`add_checker` replaces a lone opposing
    checker, the caller must credit that checker to the opponent's bar.

    Attributes:
        index: Point index (0-23)
        color: Owner of the checkers, None when empty
        count: Number of checkers on the point
    """

    __slots__ = ("index", "color", "count")

    def __init__(self, index: int, color: Optional[Color] = None, count: int = 0):
        self.index = index
        self.color = color if count > 0 else None
        self.count = count if color is not None else 0

    def add_checker(self, color: Color) -> bool:
        """Put one checker of ``color`` on this point.

        Args:
            color: Color of the arriving checker

        Returns:
            True if a lone opposing checker was displaced (a hit)

        Raises:
            InvariantViolation: If the point is held by two or more opposing checkers
        """
        if self.count == 0:
            self.color = color
            self.count = 1
            return False

        if self.color == color:
            self.count += 1
            return False

        if self.count > 1:
            raise InvariantViolation(
                f"Cannot add {color} checker to point {self.index} "
                f"held by {self.count} {self.color} checkers"
            )

        # Hit: the opposing blot is replaced in one step.
        self.color = color
        self.count = 1
        return True

    def remove_checker(self) -> Color:
        """Take one checker off this point.

        Returns:
            Color of the removed checker

        Raises:
            InvariantViolation: If the point is empty
        """
        if self.count == 0 or self.color is None:
            raise InvariantViolation(f"Cannot remove checker from empty point {self.index}")

        removed = self.color
        self.count -= 1
        if self.count == 0:
            self.color = None
        return removed

    @property
    def is_empty(self) -> bool:
        """True if no checker sits here."""
        return self.count == 0

    @property
    def is_blot(self) -> bool:
        """True if exactly one checker sits here."""
        return self.count == 1

    @property
    def is_made(self) -> bool:
        """True if two or more checkers sit here."""
        return self.count >= 2

    def has_color(self, color: Color) -> bool:
        """True if this point holds at least one checker of ``color``."""
        return self.count > 0 and self.color == color

    def is_blocked_for(self, color: Color) -> bool:
        """True if ``color`` cannot land here (two or more opposing checkers)."""
        return self.is_made and self.color != color

    def copy(self) -> "Point":
        """Independent copy of this point."""
        return Point(self.index, self.color, self.count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.index, self.color, self.count) == (other.index, other.color, other.count)

    def __repr__(self) -> str:
        if self.is_empty:
            return f"Point({self.index}, empty)"
        return f"Point({self.index}, {self.count} {self.color})"
