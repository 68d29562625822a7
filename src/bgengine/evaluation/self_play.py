"""Automated game driver.

Plays complete games between two agents through the public engine
interface: roll, ask the agent for a move, submit it, repeat.
"""

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

import numpy as np

from bgengine.core.board import BoardState, board_to_string
from bgengine.core.engine import GameEngine
from bgengine.core.types import Color, Move, Phase
from bgengine.evaluation.agents import Agent, make_agent

logger = logging.getLogger(__name__)


class GameStep(NamedTuple):
    """Single move played during a game."""
    turn: int
    player: Color
    dice: tuple
    move: Move


@dataclass
class GameResult:
    """Result of a game.

    Attributes:
        winner: Winning color, None if the turn cap was reached
        num_turns: Number of dice rolls made
        steps: Every move played, in order
        final_board: Board at the end of the game
    """
    winner: Optional[Color]
    num_turns: int
    steps: List[GameStep] = field(default_factory=list)
    final_board: Optional[BoardState] = None

    @property
    def num_moves(self) -> int:
        return len(self.steps)


@dataclass
class MatchConfig:
    """Configuration for an automated game.

    Attributes:
        seed: Seed for the dice and for random agents (None for fresh entropy)
        max_turns: Rolls allowed before the game is abandoned
        white_agent: Agent type for white ("random" or "heuristic")
        black_agent: Agent type for black ("random" or "heuristic")
        verbose: Print the board after every turn
    """
    seed: Optional[int] = None
    max_turns: int = 1000
    white_agent: str = "heuristic"
    black_agent: str = "random"
    verbose: bool = False


def play_game(
    white_agent: Agent,
    black_agent: Agent,
    engine: Optional[GameEngine] = None,
    max_turns: int = 1000,
    rng: Optional[np.random.Generator] = None,
    on_turn_end=None,
) -> GameResult:
    """Play a single game between two agents.

    Args:
        white_agent: Agent playing white
        black_agent: Agent playing black
        engine: Engine to drive; a new one (using ``rng``) if None. An engine
            that has not been started is started from the standard layout.
        max_turns: Maximum rolls before giving up
        rng: Random number generator for a new engine
        on_turn_end: Optional callback ``(engine, turn)`` called after each turn

    Returns:
        GameResult with every move played

    Raises:
        ValueError: If an agent returns a move the engine rejects
    """
    if engine is None:
        engine = GameEngine(rng=rng)
    if engine.phase() != Phase.IN_PROGRESS:
        engine.start_game()

    steps: List[GameStep] = []
    turn = 0

    while engine.phase() == Phase.IN_PROGRESS and turn < max_turns:
        player = engine.current_player()
        agent = white_agent if player == Color.WHITE else black_agent
        turn += 1

        dice = engine.roll_dice()

        while engine.phase() == Phase.IN_PROGRESS and engine.current_player() == player:
            move = agent.select_move(engine)
            if move is None:
                engine.end_turn()
                break
            if not engine.submit_move(move):
                raise ValueError(f"{agent.name} chose an illegal move: {move}")
            steps.append(GameStep(turn=turn, player=player, dice=dice, move=move))

        if on_turn_end is not None:
            on_turn_end(engine, turn)

    if engine.winner() is None:
        logger.warning("Game abandoned after %d turns", turn)

    return GameResult(
        winner=engine.winner(),
        num_turns=turn,
        steps=steps,
        final_board=engine.board(),
    )


def play_match(config: MatchConfig) -> GameResult:
    """Play one game as described by ``config``."""
    rng = np.random.default_rng(config.seed)
    white = make_agent(config.white_agent, seed=config.seed)
    black = make_agent(config.black_agent, seed=None if config.seed is None else config.seed + 1)
    engine = GameEngine(rng=rng)

    on_turn_end = None
    if config.verbose:
        def on_turn_end(eng: GameEngine, turn: int) -> None:
            print(f"--- after turn {turn}, {eng.current_player()} to move ---")
            print(board_to_string(eng.board()))

    return play_game(white, black, engine=engine, max_turns=config.max_turns, on_turn_end=on_turn_end)
