"""Move legality and legal-move generation.

Everything here is a pure function of (board, dice, color, move): nothing is
mutated and nothing is cached, so automated players may call these as often
as they like while scanning candidates.

Rules enforced:
- A checker on the bar must enter before any other checker moves
- The die needed by a move is the geometric distance it covers
- A point held by two or more opposing checkers is blocked
- Bearing off requires every checker in the home board; a die larger than
  needed may only bear off the checker farthest from home
"""

import logging
from typing import List, Optional

from bgengine.core.board import BoardState
from bgengine.core.dice import DiceSet
from bgengine.core.types import (
    NUM_POINTS,
    Bar,
    BearOff,
    Color,
    Move,
    OnPoint,
    rules_for,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# DISTANCES
# ==============================================================================


def die_needed(move: Move, color: Color) -> Optional[int]:
    """Exact die value implied by the geometry of a move.

    Args:
        move: Candidate move
        color: Color making the move

    Returns:
        Distance in pips, or None if the move is not shaped like a move of
        ``color`` (wrong bar or tray, backwards, entry outside the entry range,
        more than six pips between two points)
    """
    rules = rules_for(color)
    src, dst = move.from_pos, move.to_pos

    if isinstance(src, Bar):
        if src.color != color or not isinstance(dst, OnPoint):
            return None
        if dst.index not in rules.entry_range:
            return None
        return rules.entry_distance(dst.index)

    if not isinstance(src, OnPoint):
        return None

    if isinstance(dst, BearOff):
        if dst.color != color:
            return None
        return rules.off_distance(src.index)

    if isinstance(dst, OnPoint):
        distance = rules.distance(src.index, dst.index)
        if 1 <= distance <= 6:
            return distance
    return None


def die_for_move(move: Move, color: Color, board: BoardState, dice: DiceSet) -> Optional[int]:
    """Die value that applying a legal move would consume.

    The exact distance is used when available. A bear-off over-roll consumes
    the smallest available die that exceeds the distance.

    Returns:
        Die value, or None if the move is not legal
    """
    if not is_legal(move, color, board, dice):
        return None
    needed = die_needed(move, color)
    if dice.is_available(needed):
        return needed
    return min(d for d in dice.available_values() if d > needed)


# ==============================================================================
# LEGALITY
# ==============================================================================


def is_legal(move: Move, color: Color, board: BoardState, dice: DiceSet) -> bool:
    """Check whether ``color`` may play ``move`` with the remaining dice.

    Args:
        move: Candidate move
        color: Color making the move
        board: Current board (not modified)
        dice: Current dice (not modified)

    Returns:
        True if the move is legal
    """
    if not dice.has_available_moves():
        return False

    if board.bar_count(color) > 0 and move.from_pos != Bar(color):
        return False

    needed = die_needed(move, color)
    if needed is None:
        return False

    src, dst = move.from_pos, move.to_pos

    if isinstance(src, Bar):
        if board.bar_count(color) == 0:
            return False
    elif not board.point_at(src.index).has_color(color):
        return False

    if isinstance(dst, OnPoint):
        if board.point_at(dst.index).is_blocked_for(color):
            return False
        return dice.is_available(needed)

    return _can_bear_off(src.index, needed, color, board, dice)


def _can_bear_off(index: int, needed: int, color: Color, board: BoardState, dice: DiceSet) -> bool:
    if not board.all_checkers_in_home_board(color):
        return False

    if dice.is_available(needed):
        return True

    # Over-roll: only the checker farthest from home may use a larger die.
    highest = board.highest_occupied_in_home_board(color)
    return index == highest and any(d > needed for d in dice.available_values())


# ==============================================================================
# MOVE GENERATION
# ==============================================================================


def legal_moves(color: Color, board: BoardState, dice: DiceSet) -> List[Move]:
    """Enumerate every legal single-checker move for ``color``.

    With checkers on the bar only entering moves are generated. Otherwise
    each occupied point is paired with each distinct available die value;
    a target past the board edge becomes a bear-off candidate once every
    checker is home.

    The order is deterministic for a given board and dice (points in
    ascending index, dice in roll order) and the list holds no duplicates.

    Args:
        color: Color to move
        board: Current board (not modified)
        dice: Current dice (not modified)

    Returns:
        List of legal moves, empty when the color cannot move
    """
    if not dice.has_available_moves():
        return []

    rules = rules_for(color)
    candidates: List[Move] = []

    if board.bar_count(color) > 0:
        bar = Bar(color)
        for index in rules.entry_range:
            candidates.append(Move(bar, OnPoint(index)))
    else:
        can_bear_off = board.all_checkers_in_home_board(color)
        for index in board.occupied_indices(color):
            for die in dice.distinct_available_values():
                target = rules.advance(index, die)
                if 0 <= target < NUM_POINTS:
                    candidates.append(Move(OnPoint(index), OnPoint(target)))
                elif can_bear_off:
                    candidates.append(Move(OnPoint(index), BearOff(color)))

    moves = [m for m in dict.fromkeys(candidates) if is_legal(m, color, board, dice)]
    logger.debug("%d legal moves for %s with dice [%s]", len(moves), color, dice)
    return moves
