"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .board import Board, Move, Player
from .config import GameConfig


# All possible winning lines (as tuples of (row, col))
WINNING_LINES = (
    # Rows
    (Move(0, 0), Move(0, 1), Move(0, 2)),
    (Move(1, 0), Move(1, 1), Move(1, 2)),
    (Move(2, 0), Move(2, 1), Move(2, 2)),
    # Columns
    (Move(0, 0), Move(1, 0), Move(2, 0)),
    (Move(0, 1), Move(1, 1), Move(2, 1)),
    (Move(0, 2), Move(1, 2), Move(2, 2)),
    # Diagonals
    (Move(0, 0), Move(1, 1), Move(2, 2)),
    (Move(0, 2), Move(1, 1), Move(2, 0)),
)

# Same lines as flat indices, shape (8, 3)
_LINE_INDICES = np.array([[m.index for m in line] for line in WINNING_LINES])


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    The result of a board: still playing, won, or drawn.

    Always recomputed from the board, never stored alongside it.
    """
    status: GameStatus
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[Move, Move, Move]] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def describe(self) -> str:
        if self.status == GameStatus.WIN:
            return f"{self.winner.symbol} WINS!"
        if self.status == GameStatus.DRAW:
            return "It's a DRAW!"
        return "Game in progress"


def _first_completed_line(board: Board) -> Optional[int]:
    """Index into WINNING_LINES of the first line held by one player."""
    marks = board.cells.ravel()[_LINE_INDICES]
    complete = (marks[:, 0] != GameConfig.EMPTY) & (marks == marks[:, :1]).all(axis=1)
    hits = np.flatnonzero(complete)
    if hits.size == 0:
        return None
    return int(hits[0])


def winner(board: Board) -> Optional[Player]:
    """
    Check if there's a winner.

    Lines are checked rows, then columns, then diagonals. If lines of
    both players were complete (impossible with alternating play) the
    first one found wins.

    Returns:
        The winning Player, or None if no winner yet.
    """
    line = _first_completed_line(board)
    if line is None:
        return None
    first_cell = WINNING_LINES[line][0]
    return board.get(first_cell)


def winning_line(board: Board) -> Optional[Tuple[Move, Move, Move]]:
    """Get the winning line as three Moves, or None."""
    line = _first_completed_line(board)
    if line is None:
        return None
    return WINNING_LINES[line]


def is_full(board: Board) -> bool:
    """True iff no cell is empty."""
    return not bool(np.any(board.cells == GameConfig.EMPTY))


def outcome(board: Board) -> GameOutcome:
    """
    Work out the state of the game.

    A win is checked before a draw, so a full board with a
    completed line is a win.
    """
    line = _first_completed_line(board)
    if line is not None:
        cells = WINNING_LINES[line]
        return GameOutcome(GameStatus.WIN, board.get(cells[0]), cells)

    if is_full(board):
        return GameOutcome(GameStatus.DRAW)

    return GameOutcome(GameStatus.IN_PROGRESS)
