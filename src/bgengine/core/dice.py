"""Dice utilities for backgammon.

This module handles dice rolling, the doubles rule, and the per-turn
``DiceSet`` that tracks which rolled values are still available.
"""

from typing import List, Tuple

import numpy as np

# (die1, die2) where 1 <= die1, die2 <= 6
Dice = Tuple[int, int]


def is_doubles(dice: Dice) -> bool:
    """Check if dice roll is doubles."""
    return dice[0] == dice[1]


def dice_values(dice: Dice) -> List[int]:
    """Get the dice values to use for moves.

    For doubles, you get 4 moves. For non-doubles, you get 2 moves.

    Examples:
        >>> dice_values((3, 5))
        [3, 5]
        >>> dice_values((4, 4))
        [4, 4, 4, 4]
    """
    if is_doubles(dice):
        return [dice[0]] * 4
    return [dice[0], dice[1]]


def roll_dice(rng: np.random.Generator) -> Dice:
    """Roll two dice.

    Args:
        rng: NumPy random generator

    Returns:
        Tuple of (die1, die2) where each is 1-6
    """
    die1 = int(rng.integers(1, 7))
    die2 = int(rng.integers(1, 7))
    return (die1, die2)


# ==============================================================================
# DICE SET
# ==============================================================================


class DiceSet:
    """The dice of the current turn, each entry flagged used or unused.

    After a roll the set holds two entries, or four equal entries for
    doubles. Between turns it is empty.
    """

    def __init__(self):
        self._values: List[int] = []
        self._used: List[bool] = []

    def roll(self, rng: np.random.Generator) -> Dice:
        """Roll two dice and load them as the turn's unused entries.

        Args:
            rng: NumPy random generator

        Returns:
            The two faces rolled
        """
        dice = roll_dice(rng)
        self.set_values(*dice)
        return dice

    def set_values(self, die1: int, die2: int) -> None:
        """Load a fixed roll, applying the doubles rule."""
        for die in (die1, die2):
            if not 1 <= die <= 6:
                raise ValueError(f"Invalid die: {die}")
        self._values = dice_values((die1, die2))
        self._used = [False] * len(self._values)

    def use_value(self, value: int) -> bool:
        """Mark one unused entry equal to ``value`` as used.

        Returns:
            False if no unused entry has that value
        """
        for i, die in enumerate(self._values):
            if die == value and not self._used[i]:
                self._used[i] = True
                return True
        return False

    def restore_value(self, value: int) -> bool:
        """Mark one used entry equal to ``value`` as unused again (for undo)."""
        for i, die in enumerate(self._values):
            if die == value and self._used[i]:
                self._used[i] = False
                return True
        return False

    def is_available(self, value: int) -> bool:
        return any(d == value and not u for d, u in zip(self._values, self._used))

    def available_values(self) -> List[int]:
        """Unused die values, in roll order (duplicates kept for doubles)."""
        return [d for d, u in zip(self._values, self._used) if not u]

    def distinct_available_values(self) -> List[int]:
        """Unused die values without duplicates, in roll order."""
        return list(dict.fromkeys(self.available_values()))

    def available_count(self) -> int:
        return self._used.count(False)

    def has_available_moves(self) -> bool:
        return not all(self._used)

    def reset(self) -> None:
        """Clear all entries (end of turn)."""
        self._values = []
        self._used = []

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(self._values)

    @property
    def used(self) -> Tuple[bool, ...]:
        return tuple(self._used)

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return ", ".join(
            f"{d}(used)" if u else str(d) for d, u in zip(self._values, self._used)
        )
