"""
Rules module for TicTacToe.
Handles the board, legal moves and win/draw detection.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, InvalidMove, NoLegalMove
from .board import Board, Move, Player, new_board
from .move_validator import MoveValidator, ValidationResult, apply_move, is_legal
from .win_checker import (
    WINNING_LINES,
    GameOutcome,
    GameStatus,
    is_full,
    outcome,
    winner,
    winning_line,
)
