"""
Move-selection strategies for the computer opponent.

Each strategy takes a board and the players, and returns one legal
Move. The board passed in is never modified: strategies that try
moves do so on their own scratch copy and undo every placement.
"""

from typing import Dict, List, Optional

import numpy as np

from rules.board import Board, Move, Player
from rules.errors import NoLegalMove
from rules.win_checker import is_full, winner

from .config import Difficulty, OpponentConfig


def _legal_moves(board: Board) -> List[Move]:
    moves = board.empty_cells()
    if not moves:
        raise NoLegalMove("No empty cell left on the board")
    return moves


def _wins_with(scratch: Board, move: Move, player: Player) -> bool:
    """Would placing player at move complete a line? Leaves scratch unchanged."""
    scratch.place(move, player)
    try:
        return winner(scratch) == player
    finally:
        scratch.clear(move)


def random_move(board: Board, rng: Optional[np.random.Generator] = None) -> Move:
    """
    Pick a uniformly random empty cell (Easy).

    Args:
        board: Current board.
        rng: Random generator. Pass a seeded one for reproducible play.

    Returns:
        The chosen Move.
    """
    moves = _legal_moves(board)
    if rng is None:
        rng = np.random.default_rng()
    return moves[int(rng.integers(len(moves)))]


def heuristic_move(
    board: Board,
    player: Player,
    opponent: Player,
    rng: Optional[np.random.Generator] = None
) -> Move:
    """
    Take a winning cell or block the opponent, else play randomly (Medium).

    Cells are scanned in row-major order and each cell is checked for
    a win first, then for a block. The first cell that does either is
    returned, so an early block beats a later win.

    Args:
        board: Current board.
        player: The player to move.
        opponent: The other player.
        rng: Random generator for the fallback.

    Returns:
        The chosen Move.
    """
    moves = _legal_moves(board)
    scratch = board.copy()

    for move in moves:
        if _wins_with(scratch, move, player):
            return move
        if _wins_with(scratch, move, opponent):
            return move

    return random_move(board, rng)


class MinimaxSearch:
    """
    Exhaustive game-tree search (Hard).

    Terminal positions are scored from the searching player's side:
    WIN_SCORE - depth for a win, depth - WIN_SCORE for a loss and
    DRAW_SCORE for a draw. depth counts plies below the root's
    candidate move, so quicker wins and slower losses score higher.

    Each position is scored once per search and kept in a
    transposition table. A position's depth follows from how many
    marks it has, so reusing a score never changes the result.
    """

    def __init__(self, player: Player, opponent: Player):
        self.player = player
        self.opponent = opponent

        # Stats from the last search (for debugging)
        self.positions_evaluated = 0
        self.best_score: Optional[int] = None

        self._table: Dict[bytes, int] = {}

    def best_move(self, board: Board) -> Move:
        """
        Search the full tree and return the best move.

        Ties go to the earliest cell in row-major order.
        """
        moves = _legal_moves(board)

        self._table = {}
        self.positions_evaluated = 0
        self.best_score = None

        scratch = board.copy()
        best_move = moves[0]

        for move in moves:
            scratch.place(move, self.player)
            try:
                score = self._minimax(scratch, depth=0, is_maximizing=False)
            finally:
                scratch.clear(move)

            if self.best_score is None or score > self.best_score:
                self.best_score = score
                best_move = move

        return best_move

    def _minimax(self, scratch: Board, depth: int, is_maximizing: bool) -> int:
        """
        Score a position by searching every continuation.

        Args:
            scratch: Owned board, restored before returning.
            depth: Plies below the root candidate.
            is_maximizing: True if it's the searching player's turn.

        Returns:
            The score of the position.
        """
        key = scratch.to_bytes()
        if key in self._table:
            return self._table[key]

        self.positions_evaluated += 1

        # Check terminal states
        won = winner(scratch)

        if won == self.player:
            score = OpponentConfig.WIN_SCORE - depth
        elif won == self.opponent:
            score = depth - OpponentConfig.WIN_SCORE
        elif is_full(scratch):
            score = OpponentConfig.DRAW_SCORE
        else:
            mover = self.player if is_maximizing else self.opponent
            scores = []
            for move in scratch.empty_cells():
                scratch.place(move, mover)
                try:
                    scores.append(self._minimax(scratch, depth + 1, not is_maximizing))
                finally:
                    scratch.clear(move)
            score = max(scores) if is_maximizing else min(scores)

        self._table[key] = score
        return score


def minimax_move(board: Board, player: Player, opponent: Player) -> Move:
    """Best move for player by full minimax search (Hard)."""
    return MinimaxSearch(player, opponent).best_move(board)


def select_move(
    board: Board,
    tier: Difficulty,
    player: Player,
    opponent: Player,
    rng: Optional[np.random.Generator] = None,
    search: Optional[MinimaxSearch] = None
) -> Move:
    """
    Choose the computer's move for a difficulty tier.

    Args:
        board: Current board. Must have at least one empty cell.
        tier: EASY (random), MEDIUM (win/block) or HARD (minimax).
        player: The player to move.
        opponent: The other player.
        rng: Random generator used by EASY and the MEDIUM fallback.
        search: MinimaxSearch to run for HARD, so the caller can read
                its stats afterwards. Must be built for player/opponent.

    Returns:
        A legal Move.

    Raises:
        NoLegalMove: If the board is full.
        ValueError: If the tier is unknown or the players are the same.
    """
    if player == opponent:
        raise ValueError(f"Player and opponent must differ, both are {player.symbol}")

    if tier == Difficulty.EASY:
        return random_move(board, rng)
    if tier == Difficulty.MEDIUM:
        return heuristic_move(board, player, opponent, rng)
    if tier == Difficulty.HARD:
        if search is None:
            return minimax_move(board, player, opponent)
        return search.best_move(board)

    raise ValueError(f"Unknown difficulty: {tier!r}")
