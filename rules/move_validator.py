"""
Move validator for TicTacToe.
Validates that moves follow the rules, and applies legal ones.
"""

from typing import Optional
from dataclasses import dataclass

import numpy as np

from .board import Board, Move, Player
from .config import GameConfig
from .errors import InvalidMove


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be on the board (row and col in 0-2)
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, move) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            move: (row, col) to place a mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check the shape of the move itself
        try:
            row, col = move
        except (TypeError, ValueError):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move!r}. Expected (row, col)."
            )

        if not (_is_index(row) and _is_index(col)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move!r}. Row and column must be integers."
            )

        # Check if row/col are in valid range
        last = GameConfig.BOARD_SIZE - 1
        if not (0 <= row <= last and 0 <= col <= last):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{last}."
            )

        # Check if cell is empty
        if not board.is_empty((row, col)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.get((row, col)).symbol}"
            )

        return ValidationResult(is_valid=True)


def _is_index(value) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


_validator = MoveValidator()


def is_legal(board: Board, move) -> bool:
    """True iff move is on the board and its cell is empty."""
    return _validator.validate_move(board, move).is_valid


def apply_move(board: Board, move, player: Player) -> Board:
    """
    Place a player's mark on a copy of the board.

    Args:
        board: Current board. Never modified.
        move: (row, col) of an empty cell.
        player: Player making the move.

    Returns:
        A new Board with the mark placed.

    Raises:
        InvalidMove: If the cell is occupied or out of bounds.
    """
    result = _validator.validate_move(board, move)
    if not result.is_valid:
        raise InvalidMove(result.error_message)

    new_board = board.copy()
    new_board.place(Move(int(move[0]), int(move[1])), player)
    return new_board
