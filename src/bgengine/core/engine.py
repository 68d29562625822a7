"""Game engine: the turn state machine around one board and one set of dice.

Lifecycle:
    NOT_STARTED --start_game()--> IN_PROGRESS --15th checker off--> FINISHED

Within IN_PROGRESS, each turn is roll_dice() followed by submit_move() calls
until the dice are spent or no legal move remains, at which point the turn
passes automatically. ``current_player`` is the only turn discriminator.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from bgengine.core import validator
from bgengine.core.board import BoardState, initial_board
from bgengine.core.dice import DiceSet
from bgengine.core.types import Color, Move, Phase, TurnLogEntry

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the board, the dice and the current turn's move log.

    Collaborators (input handlers, automated players) use the query methods
    and submit moves; they never mutate the board or the dice directly.

    Args:
        rng: NumPy random generator used for dice rolls (seed it for
            reproducible games)
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self._board = initial_board()
        self._dice = DiceSet()
        self._turn_log: List[TurnLogEntry] = []
        self._phase = Phase.NOT_STARTED
        self._current_player = Color.WHITE
        self._winner: Optional[Color] = None

    # ==========================================================================
    # MUTATORS
    # ==========================================================================

    def start_game(self, board: Optional[BoardState] = None) -> None:
        """Start (or restart) a game.

        Args:
            board: Position to start from; the standard layout when None
        """
        self._board = board.snapshot() if board is not None else initial_board()
        self._board.validate()
        self._dice.reset()
        self._turn_log.clear()
        self._phase = Phase.IN_PROGRESS
        self._current_player = Color.WHITE
        self._winner = None
        logger.info("Game started, %s to move", self._current_player)
        self._check_game_over()

    def roll_dice(self) -> Tuple[int, ...]:
        """Roll for the current player.

        If the roll leaves the player without a legal move, the turn passes
        immediately.

        Returns:
            The dice entries rolled (two, or four for doubles); empty if no
            game is in progress
        """
        if self._phase != Phase.IN_PROGRESS:
            logger.debug("Roll rejected: game is %s", self._phase.value)
            return ()

        self._dice.roll(self._rng)
        return self._after_roll()

    def set_dice(self, die1: int, die2: int) -> Tuple[int, ...]:
        """Load a fixed roll for the current player instead of rolling.

        Behaves like :meth:`roll_dice` otherwise, including the automatic
        pass when nothing can be played.
        """
        if self._phase != Phase.IN_PROGRESS:
            logger.debug("Roll rejected: game is %s", self._phase.value)
            return ()

        self._dice.set_values(die1, die2)
        return self._after_roll()

    def _after_roll(self) -> Tuple[int, ...]:
        rolled = self._dice.values
        self._turn_log.clear()
        logger.debug("%s rolls %s", self._current_player, list(rolled))

        if not self.legal_moves():
            logger.debug("%s has no legal move, passing", self._current_player)
            self.end_turn()
        return rolled

    def submit_move(self, move: Move) -> bool:
        """Apply a move for the current player if it is legal.

        Returns:
            True if the move was applied; False leaves all state unchanged
        """
        if self._phase != Phase.IN_PROGRESS:
            return False

        color = self._current_player
        die = validator.die_for_move(move, color, self._board, self._dice)
        if die is None:
            logger.debug("Rejected %s for %s with dice [%s]", move, color, self._dice)
            return False

        self._dice.use_value(die)
        hit = self._board.move_checker(move.from_pos, move.to_pos, color)
        self._turn_log.append(TurnLogEntry(move=move, die_used=die, hit=hit))
        logger.debug("%s plays %s using %d", color, move, die)

        self._check_game_over()

        if not self._dice.has_available_moves() or not self.legal_moves():
            self.end_turn()
        return True

    def end_turn(self) -> None:
        """Clear the dice and the turn log and pass to the other player."""
        if self._phase != Phase.IN_PROGRESS:
            return

        self._dice.reset()
        self._turn_log.clear()
        self._current_player = self._current_player.opposite()
        logger.debug("Turn passes to %s", self._current_player)

    def undo_last_move(self) -> bool:
        """Take back the most recent move of the current turn.

        The die is restored and the mover's checker returns to where it came
        from. An opposing checker it hit stays on the bar.

        Returns:
            False if no move has been played this turn or the game is over
        """
        if self._phase != Phase.IN_PROGRESS or not self._turn_log:
            return False

        entry = self._turn_log.pop()
        self._dice.restore_value(entry.die_used)
        self._board.reverse_checker(entry.move.from_pos, entry.move.to_pos, self._current_player)
        logger.debug("%s takes back %s", self._current_player, entry.move)
        return True

    def _check_game_over(self) -> None:
        for color in Color:
            if self._board.has_won(color):
                self._phase = Phase.FINISHED
                self._winner = color
                logger.info("Game over, %s wins", color)
                return

    # ==========================================================================
    # QUERIES
    # ==========================================================================

    def legal_moves(self) -> List[Move]:
        """Legal moves for the current player with the remaining dice."""
        if self._phase != Phase.IN_PROGRESS:
            return []
        return validator.legal_moves(self._current_player, self._board, self._dice)

    def is_legal(self, move: Move) -> bool:
        if self._phase != Phase.IN_PROGRESS:
            return False
        return validator.is_legal(move, self._current_player, self._board, self._dice)

    def die_for_move(self, move: Move) -> Optional[int]:
        """Die value the move would consume, or None if it is not legal now."""
        if self._phase != Phase.IN_PROGRESS:
            return None
        return validator.die_for_move(move, self._current_player, self._board, self._dice)

    def board(self) -> BoardState:
        """Independent copy of the current board."""
        return self._board.snapshot()

    def dice(self) -> Tuple[Tuple[int, ...], Tuple[bool, ...]]:
        """Current dice entries and their used flags."""
        return self._dice.values, self._dice.used

    def turn_log(self) -> List[TurnLogEntry]:
        """Moves played so far this turn, oldest first."""
        return list(self._turn_log)

    def current_player(self) -> Color:
        return self._current_player

    def winner(self) -> Optional[Color]:
        return self._winner

    def phase(self) -> Phase:
        return self._phase
