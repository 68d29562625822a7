"""Automated players for the game engine.

This module provides agents that pick a move for the engine's current
player:
- Random agent: selects a legal move uniformly at random
- Heuristic agent: scores each legal move with fixed positional priorities

Agents only read from the engine (legal moves, board, dice). Applying the
chosen move is the driver's job.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from bgengine.core.board import BoardState
from bgengine.core.engine import GameEngine
from bgengine.core.types import Bar, BearOff, Color, Move, OnPoint, rules_for


# ==============================================================================
# AGENT BASE CLASS
# ==============================================================================


@dataclass
class Agent:
    """Base agent class for playing backgammon.

    Attributes:
        name: Agent name for identification
        select_move_fn: Function that picks a move for the engine's current
            player, or None when there is nothing to play
    """
    name: str
    select_move_fn: Callable[[GameEngine], Optional[Move]]

    def select_move(self, engine: GameEngine) -> Optional[Move]:
        """Select a move for the engine's current player."""
        return self.select_move_fn(engine)


# ==============================================================================
# RANDOM AGENT
# ==============================================================================


def random_agent(seed: Optional[int] = None) -> Agent:
    """Create an agent that selects moves uniformly at random.

    Args:
        seed: Random seed (optional, for reproducibility)

    Returns:
        Random agent
    """
    rng = np.random.default_rng(seed)

    def select_random_move(engine: GameEngine) -> Optional[Move]:
        legal_moves = engine.legal_moves()
        if not legal_moves:
            return None
        return legal_moves[int(rng.integers(0, len(legal_moves)))]

    return Agent(name="Random", select_move_fn=select_random_move)


# ==============================================================================
# HEURISTIC AGENT
# ==============================================================================


@dataclass
class HeuristicConfig:
    """Scoring weights for the heuristic agent (higher score is better).

    Attributes:
        bar_entry_bonus: Any move that brings a checker in from the bar
        safe_entry_bonus: Entering onto a point we already hold
        entry_hit_bonus: Entering onto an opposing blot
        bear_off_bonus: Bearing a checker off
        hit_bonus: Landing on an opposing blot
        home_hit_bonus: Extra for hitting inside our own home board
        make_point_bonus: Landing on a point we already hold
        home_point_bonus: Extra for stacking inside our own home board
        escape_bonus: Moving a checker out of the opponent's home board
        blot_penalty: Leaving a single checker behind on the source point
    """
    bar_entry_bonus: int = 100
    safe_entry_bonus: int = 50
    entry_hit_bonus: int = 40
    bear_off_bonus: int = 90
    hit_bonus: int = 80
    home_hit_bonus: int = 20
    make_point_bonus: int = 60
    home_point_bonus: int = 20
    escape_bonus: int = 30
    blot_penalty: int = 20


def score_move(move: Move, board: BoardState, color: Color, config: HeuristicConfig) -> int:
    """Score a single legal move from ``color``'s perspective.

    Args:
        move: Legal move to score
        board: Board before the move
        color: Color making the move
        config: Scoring weights

    Returns:
        Integer score (higher is better)
    """
    rules = rules_for(color)
    opponent_home = rules_for(color.opposite()).home_board
    src, dst = move.from_pos, move.to_pos
    score = 0

    dest_point = board.point_at(dst.index) if isinstance(dst, OnPoint) else None
    lands_on_blot = (
        dest_point is not None
        and dest_point.has_color(color.opposite())
        and dest_point.is_blot
    )

    if isinstance(src, Bar):
        score += config.bar_entry_bonus
        if dest_point is not None and dest_point.has_color(color):
            score += config.safe_entry_bonus
        if lands_on_blot:
            score += config.entry_hit_bonus

    if isinstance(dst, BearOff):
        score += config.bear_off_bonus

    if lands_on_blot:
        score += config.hit_bonus
        if dst.index in rules.home_board:
            score += config.home_hit_bonus

    if dest_point is not None and dest_point.has_color(color):
        score += config.make_point_bonus
        if dst.index in rules.home_board:
            score += config.home_point_bonus

    if isinstance(src, OnPoint):
        if src.index in opponent_home:
            score += config.escape_bonus
        if board.point_at(src.index).count == 2:
            score -= config.blot_penalty

    return score


def heuristic_agent(config: Optional[HeuristicConfig] = None) -> Agent:
    """Create an agent that plays the best-scoring legal move.

    Ties go to the move listed first by the engine, so the agent is
    deterministic for a given position and roll.

    Args:
        config: Scoring weights (uses defaults if None)

    Returns:
        Heuristic agent
    """
    if config is None:
        config = HeuristicConfig()

    def select_best_move(engine: GameEngine) -> Optional[Move]:
        legal_moves = engine.legal_moves()
        if not legal_moves:
            return None
        board = engine.board()
        color = engine.current_player()
        return max(legal_moves, key=lambda m: score_move(m, board, color, config))

    return Agent(name="Heuristic", select_move_fn=select_best_move)


AGENT_FACTORIES = {
    "random": random_agent,
    "heuristic": lambda seed=None: heuristic_agent(),
}


def make_agent(kind: str, seed: Optional[int] = None) -> Agent:
    """Build an agent by name ("random" or "heuristic")."""
    try:
        factory = AGENT_FACTORIES[kind]
    except KeyError:
        raise ValueError(f"Unknown agent type: {kind}") from None
    return factory(seed)
