"""
Console front end for TicTacToe.

This script ties together:
- Rules (board, move validation, win/draw detection)
- Opponent (random, blocking and minimax AI)
- Game session (turns, history, scores)

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Callable, Optional

from rules.board import Move, Player
from rules.config import GameConfig
from rules.errors import InvalidMove
from rules.win_checker import GameStatus

from opponent.ai_player import AIPlayer
from opponent.config import Difficulty, OpponentConfig

from game_state import GameMode, GameState


class ConsoleConfig:
    """Settings for the console game."""

    # Pause before the computer plays, so its move is easy to follow
    COMPUTER_MOVE_DELAY_S = 0.5

    QUIT_COMMANDS = ("q", "quit", "exit")

    # "d hard" changes the computer's difficulty before its next move
    DIFFICULTY_COMMAND = "d"


def parse_move(text: str) -> Move:
    """
    Parse a move typed by the player.

    Accepts "row col", "row,col" or a single flat index 0-8.

    Raises:
        ValueError: If the text isn't a move.
    """
    parts = text.replace(",", " ").split()

    if len(parts) == 1:
        index = int(parts[0])
        if not 0 <= index < GameConfig.NUM_CELLS:
            raise ValueError(f"Cell index must be 0-{GameConfig.NUM_CELLS - 1}")
        return Move.from_index(index)

    if len(parts) == 2:
        return Move(int(parts[0]), int(parts[1]))

    raise ValueError("Enter 'row col' (e.g. '1 1') or a cell index 0-8")


class TicTacToeConsole:
    """
    Text-mode game controller.

    Game flow:
    1. Human enters a move
    2. Move is validated and applied
    3. Computer picks its reply at the chosen difficulty
    4. Repeat until someone wins or it's a draw
    5. Show the score and offer another game
    """

    def __init__(
        self,
        state: GameState,
        input_func: Callable[[str], str] = input,
        move_delay: float = ConsoleConfig.COMPUTER_MOVE_DELAY_S
    ):
        """
        Initialize the console game.

        Args:
            state: The game session to drive.
            input_func: Where to read player input from.
            move_delay: Seconds to wait before each computer move.
        """
        self.state = state
        self.input_func = input_func
        self.move_delay = move_delay
        self.is_running = False

        print("\n" + "="*60)
        print("   TicTacToe")
        print("="*60)
        if state.mode == GameMode.VS_COMPUTER:
            print(f"   Human plays:    {state.human_player.symbol}")
            print(f"   Computer plays: {state.computer_player.symbol}")
            print(f"   Difficulty:     {state.difficulty.name.lower()}")
        else:
            print("   Two players: X and O take turns")
        print("="*60 + "\n")

    def start(self):
        """Play games until the user quits."""
        print("Enter moves as 'row col' or a cell index 0-8. Type 'q' to quit.")
        if self.state.mode == GameMode.VS_COMPUTER:
            print("Type 'd easy', 'd medium' or 'd hard' to change the difficulty.")
        print()

        self.is_running = True
        while self.is_running:
            self._game_loop()

            if self.is_running:
                self._show_game_result()
                self.is_running = self._ask_play_again()
                if self.is_running:
                    self._reset_game()

    def _game_loop(self):
        """Play one game."""
        self.state.print_board()

        while self.is_running and not self.state.is_game_over:
            if self.state.is_computer_turn:
                self._computer_move()
            else:
                self._human_move()

    def _human_move(self):
        """Read and play one human move, re-prompting until it's legal."""
        while True:
            text = self._read(f"{self.state.current_player.symbol} to move > ")
            if text is None:
                return

            if self._change_difficulty(text):
                continue

            try:
                move = parse_move(text)
                self.state.make_move(move.row, move.col)
            except ValueError as e:
                print(f"  {e}")
                continue
            except InvalidMove as e:
                print(f"  {e} Try again.")
                continue

            self.state.print_board()
            return

    def _change_difficulty(self, text: str) -> bool:
        """
        Handle a "d <tier>" command.

        Returns:
            True if the text was a difficulty command (handled or
            rejected), False if it should be read as a move.
        """
        parts = text.split()
        if not parts or parts[0].lower() != ConsoleConfig.DIFFICULTY_COMMAND:
            return False

        if self.state.mode != GameMode.VS_COMPUTER:
            print("  There is no computer player in two-player mode.")
            return True

        if len(parts) != 2:
            print("  Usage: d easy|medium|hard")
            return True

        try:
            difficulty = Difficulty.from_name(parts[1])
        except ValueError as e:
            print(f"  {e}")
            return True

        self.state.set_difficulty(difficulty)
        print(f"  Difficulty set to: {difficulty.name.lower()}")
        return True

    def _computer_move(self):
        """Execute the computer's move."""
        print("\n>>> Computer is thinking...")
        if self.move_delay > 0:
            time.sleep(self.move_delay)

        move = self.state.computer_move()
        print(f">>> Computer plays ({move.row}, {move.col})")
        self.state.print_board()

    def _read(self, prompt: str) -> Optional[str]:
        """Read a line. Returns None (and stops) on quit or end of input."""
        try:
            text = self.input_func(prompt).strip()
        except EOFError:
            text = "q"

        if text.lower() in ConsoleConfig.QUIT_COMMANDS:
            print("\nGame quit by user.")
            self.is_running = False
            return None
        return text

    def _ask_play_again(self) -> bool:
        text = self._read("Play again? [y/n] > ")
        return text is not None and text.lower().startswith("y")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        result = self.state.outcome
        if result.status == GameStatus.WIN:
            line = " ".join(f"({m.row},{m.col})" for m in result.winning_line)
            if self.state.mode == GameMode.TWO_PLAYER:
                print(f"\n{result.winner.symbol} wins! Line: {line}")
            elif result.winner == self.state.human_player:
                print(f"\nCongratulations! You won! Line: {line}")
            else:
                print(f"\nComputer wins! Better luck next time! Line: {line}")
        else:
            print("\nIt's a draw! Good game!")

        print(f"\n{self.state.scores.summary()}")
        print("="*60)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.state.reset()


def self_play(difficulty: Difficulty, seed: Optional[int] = None) -> GameState:
    """
    Let the computer play both sides at one difficulty.

    Returns:
        The finished game.
    """
    state = GameState(mode=GameMode.TWO_PLAYER)
    players = {
        Player.X: AIPlayer(Player.X, difficulty, seed=seed),
        Player.O: AIPlayer(Player.O, difficulty, seed=None if seed is None else seed + 1),
    }

    while not state.is_game_over:
        move = players[state.current_player].get_best_move(state.board)
        state.make_move(move.row, move.col)

    return state


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--difficulty",
        type=Difficulty.from_name,
        default=OpponentConfig.DEFAULT_DIFFICULTY,
        help="Computer strength: easy, medium or hard (default: medium)"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans take turns, no computer"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print search statistics"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays itself at the chosen difficulty"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        OpponentConfig.VERBOSE = True

    if args.self_play:
        state = self_play(args.difficulty, seed=args.seed)
        state.print_board()
        return 0

    if args.two_player:
        state = GameState(mode=GameMode.TWO_PLAYER)
    else:
        state = GameState(
            mode=GameMode.VS_COMPUTER,
            human_player=Player.O if args.computer_first else Player.X,
            difficulty=args.difficulty,
            seed=args.seed
        )

    game = TicTacToeConsole(state)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
