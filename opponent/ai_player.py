"""
AI player for TicTacToe.
Picks moves for the computer at the selected difficulty.
"""

import threading
from typing import Optional

import numpy as np

from rules.board import Board, Move, Player

from .config import Difficulty, OpponentConfig
from .strategies import MinimaxSearch, select_move


class AIPlayer:
    """
    The computer opponent.

    EASY plays randomly, MEDIUM takes wins and blocks threats,
    HARD searches the whole game tree and never loses.
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = OpponentConfig.DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            difficulty: Starting difficulty tier.
            rng: Random generator for EASY/MEDIUM. Built from seed if None.
            seed: Seed for the generator, for reproducible games.
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

        # One search at a time per AI
        self._lock = threading.Lock()

    @property
    def opponent(self) -> Player:
        return self.player.opposite()

    def set_difficulty(self, difficulty: Difficulty):
        """Change the tier. Used from the next move on."""
        self.difficulty = difficulty

    def get_best_move(self, board: Board) -> Move:
        """
        Get the move for the current position at the current difficulty.

        Args:
            board: Current board. Not modified, and not kept.

        Returns:
            (row, col) of the chosen move.

        Raises:
            NoLegalMove: If the board is full.
            ValueError: If the difficulty isn't a Difficulty.
        """
        with self._lock:
            self.moves_evaluated = 0

            search = MinimaxSearch(self.player, self.opponent)
            move = select_move(
                board, self.difficulty, self.player, self.opponent,
                rng=self.rng, search=search
            )
            self.moves_evaluated = search.positions_evaluated

            if self.difficulty == Difficulty.HARD and OpponentConfig.VERBOSE:
                print(f"AI evaluated {self.moves_evaluated} positions. "
                      f"Best move: {tuple(move)} (score: {search.best_score})")

            return move

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        if not board.empty_cells():
            return "No moves available!"

        row, col = self.get_best_move(board)
        return f"Place {self.player.symbol} at position ({row}, {col})"
