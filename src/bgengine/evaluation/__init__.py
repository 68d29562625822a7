"""Automated players and the game driver."""

from bgengine.evaluation.agents import (
    Agent,
    HeuristicConfig,
    random_agent,
    heuristic_agent,
    score_move,
    make_agent,
)
from bgengine.evaluation.self_play import (
    GameResult,
    GameStep,
    MatchConfig,
    play_game,
    play_match,
)

__all__ = [
    # Agents
    "Agent",
    "HeuristicConfig",
    "random_agent",
    "heuristic_agent",
    "score_move",
    "make_agent",
    # Game driver
    "GameResult",
    "GameStep",
    "MatchConfig",
    "play_game",
    "play_match",
]
