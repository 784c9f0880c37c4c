"""
Game session management for TicTacToe.
Tracks the board, whose turn it is, move history and the score.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from rules.board import Board, Move, Player, new_board
from rules.errors import InvalidMove, NoLegalMove
from rules.move_validator import MoveValidator, apply_move
from rules.win_checker import GameOutcome, GameStatus, outcome

from opponent.ai_player import AIPlayer
from opponent.config import Difficulty, OpponentConfig


class GameMode(Enum):
    """Who plays O (or X, with --computer-first)."""
    VS_COMPUTER = "vs_computer"
    TWO_PLAYER = "two_player"


@dataclass
class MoveRecord:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


@dataclass
class Scoreboard:
    """
    Running totals for this session. Never saved.

    Against the computer the counts are from the human's side,
    in two-player mode from X's side.
    """
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    def summary(self) -> str:
        return f"Wins: {self.wins}  Losses: {self.losses}  Draws: {self.draws}"


@dataclass
class GameState:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The 3x3 board
    - Current player
    - Move history and the last move
    - Game mode and the computer opponent
    - Win/loss/draw totals

    The result of the game is worked out from the board on each
    access, so it can never disagree with the board.
    """

    mode: GameMode = GameMode.VS_COMPUTER

    # Side the human plays against the computer
    human_player: Player = Player.X

    difficulty: Difficulty = OpponentConfig.DEFAULT_DIFFICULTY

    # Seed for the computer's random choices
    seed: Optional[int] = None

    board: Board = field(default_factory=new_board)
    current_player: Player = Player.X
    moves: List[MoveRecord] = field(default_factory=list)
    scores: Scoreboard = field(default_factory=Scoreboard)

    ai: Optional[AIPlayer] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.validator = MoveValidator()
        if self.mode == GameMode.VS_COMPUTER:
            self.ai = AIPlayer(
                self.human_player.opposite(),
                difficulty=self.difficulty,
                seed=self.seed
            )

    @property
    def outcome(self) -> GameOutcome:
        return outcome(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def last_move(self) -> Optional[Move]:
        if not self.moves:
            return None
        last = self.moves[-1]
        return Move(last.row, last.col)

    @property
    def computer_player(self) -> Optional[Player]:
        return self.ai.player if self.ai is not None else None

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.ai is not None
            and not self.is_game_over
            and self.current_player == self.ai.player
        )

    def set_difficulty(self, difficulty: Difficulty):
        """Change the tier. Takes effect at the computer's next turn."""
        self.difficulty = difficulty
        if self.ai is not None:
            self.ai.set_difficulty(difficulty)

    def make_move(self, row: int, col: int) -> GameOutcome:
        """
        Make a move for the current player.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The outcome after the move.

        Raises:
            InvalidMove: If the game is over or the cell can't be played.
                         The state is left unchanged.
        """
        if self.is_game_over:
            raise InvalidMove("Game is already over!")

        result = self.validator.validate_move(self.board, (row, col))
        if not result.is_valid:
            raise InvalidMove(result.error_message)

        self.board = apply_move(self.board, (row, col), self.current_player)

        self.moves.append(MoveRecord(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        self.current_player = self.current_player.opposite()

        new_outcome = self.outcome
        if new_outcome.is_terminal:
            self._record_result(new_outcome)

        return new_outcome

    def computer_move(self) -> Move:
        """
        Let the computer play its move at the current difficulty.

        Returns:
            The move that was played.

        Raises:
            InvalidMove: If there is no computer or it's not its turn.
            NoLegalMove: If the board is full.
        """
        if self.ai is None:
            raise InvalidMove("There is no computer player in two-player mode")
        if self.is_game_over:
            raise NoLegalMove("Game is already over!")
        if self.current_player != self.ai.player:
            raise InvalidMove(f"It's not {self.ai.player.symbol}'s turn!")

        move = self.ai.get_best_move(self.board)
        self.make_move(move.row, move.col)
        return move

    def _record_result(self, result: GameOutcome):
        if result.status == GameStatus.DRAW:
            self.scores.draws += 1
            return

        # Against the computer score the human's side, otherwise X's
        side = self.human_player if self.mode == GameMode.VS_COMPUTER else Player.X
        if result.winner == side:
            self.scores.wins += 1
        else:
            self.scores.losses += 1

    def reset(self):
        """Start a new game. Scores are kept."""
        self.board = new_board()
        self.current_player = Player.X
        self.moves = []

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.render())

        # Print game info
        result = self.outcome
        if result.is_terminal:
            print(f"\n{result.describe()}")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")
