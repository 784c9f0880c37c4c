"""
Computer opponent for TicTacToe.
Random, blocking and minimax move selection.
"""

from .config import Difficulty, OpponentConfig
from .strategies import (
    MinimaxSearch,
    heuristic_move,
    minimax_move,
    random_move,
    select_move,
)
from .ai_player import AIPlayer
