"""
Errors raised by the rules engine and the computer opponent.
"""


class GameError(Exception):
    """Base class for all game errors."""


class InvalidMove(GameError):
    """
    A move addressed an occupied or out-of-bounds cell,
    or was played after the game ended.

    The caller should re-prompt. The board is left unchanged.
    """


class NoLegalMove(GameError):
    """
    A strategy was asked for a move on a board with no empty cell.

    This is a caller error: check the outcome before asking for a move.
    """
