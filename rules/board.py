"""
Board representation for TicTacToe.
Holds the 3x3 grid of marks as a numpy array.
"""

from enum import Enum
from typing import List, NamedTuple

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = 1
    O = 2

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        return self.name


class Move(NamedTuple):
    """A (row, col) position on the board."""
    row: int
    col: int

    @property
    def index(self) -> int:
        """Flat index 0-8 (row-major)."""
        return self.row * GameConfig.BOARD_SIZE + self.col

    @classmethod
    def from_index(cls, index: int) -> "Move":
        """Build a move from a flat index 0-8."""
        row, col = divmod(index, GameConfig.BOARD_SIZE)
        return cls(row, col)


class Board:
    """
    The 3x3 TicTacToe board.

    Cells hold GameConfig.EMPTY, or the value of a Player.
    The rules engine treats boards as values: apply_move() returns a
    new board. place() and clear() mutate in place and are only meant
    for scratch copies owned by a search (push, evaluate, undo).
    """

    def __init__(self, cells=None):
        """
        Initialize the board.

        Args:
            cells: Optional 3x3 (or flat 9) sequence of cell values.
                   Player members and None (empty) are accepted
                   as well as raw ints.
                   Defaults to an empty board.
        """
        size = GameConfig.BOARD_SIZE

        if cells is None:
            self.cells = np.zeros((size, size), dtype=np.int8)
        else:
            values = [_cell_value(cell) for cell in np.asarray(cells, dtype=object).ravel()]
            if len(values) != GameConfig.NUM_CELLS:
                raise ValueError(f"Board needs {GameConfig.NUM_CELLS} cells, got {len(values)}")

            allowed = {GameConfig.EMPTY, Player.X.value, Player.O.value}
            if not set(values) <= allowed:
                raise ValueError(f"Unknown cell value in {values}")

            self.cells = np.array(values, dtype=np.int8).reshape(size, size)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.cells = self.cells.copy()
        return new_board

    def get(self, move: Move):
        """
        Get the contents of a cell.

        Returns:
            The Player occupying the cell, or None if empty.
        """
        value = int(self.cells[move[0], move[1]])
        if value == GameConfig.EMPTY:
            return None
        return Player(value)

    def is_empty(self, move: Move) -> bool:
        """True iff the cell holds no mark."""
        return bool(self.cells[move[0], move[1]] == GameConfig.EMPTY)

    def place(self, move: Move, player: Player):
        """Set a cell in place. Scratch boards only."""
        self.cells[move[0], move[1]] = player.value

    def clear(self, move: Move):
        """Empty a cell in place (undo of place)."""
        self.cells[move[0], move[1]] = GameConfig.EMPTY

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            List of Moves in row-major order.
        """
        rows, cols = np.nonzero(self.cells == GameConfig.EMPTY)
        return [Move(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, player: Player) -> int:
        """Number of cells marked by a player."""
        return int(np.count_nonzero(self.cells == player.value))

    def to_bytes(self) -> bytes:
        """Raw cell bytes. Two boards are identical iff these match."""
        return self.cells.tobytes()

    def render(self) -> str:
        """Render the board as a text grid."""
        lines = ["    0   1   2", "  ┌───┬───┬───┐"]

        for row in range(GameConfig.BOARD_SIZE):
            glyphs = [GameConfig.GLYPHS[int(v)] for v in self.cells[row]]
            lines.append(f"{row} │ " + " │ ".join(glyphs) + " │")
            if row < GameConfig.BOARD_SIZE - 1:
                lines.append("  ├───┼───┼───┤")

        lines.append("  └───┴───┴───┘")
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self):
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Board({self.cells.tolist()})"


def new_board() -> Board:
    """Create a fresh, empty 3x3 board."""
    return Board()


def _cell_value(cell):
    """Cell value for a Player, None (empty) or raw int."""
    if cell is None:
        return GameConfig.EMPTY
    if isinstance(cell, Player):
        return cell.value
    if isinstance(cell, (int, np.integer)) and not isinstance(cell, bool):
        return int(cell)
    raise ValueError(f"Unknown cell value {cell!r}")
