"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end: a hot-seat game for two
players, analysis of a board position, and a small benchmark.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

import numpy as np

from connectfour.debug import debug, DebugLevel
from connectfour.game.board import Board
from connectfour.game.engine import GameEngine
from connectfour.game.events import GameListener
from connectfour.game.rules import find_winning_line, has_win, is_tie
from connectfour.utils import GameResult, IllegalMoveReason, Player, parse_position

QUIT_COMMANDS = ('q', 'quit', 'exit')


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


class TerminalRenderer(GameListener):
    """Prints the board and game messages as the engine reports them."""

    def __init__(self, engine: GameEngine, output: Callable[[str], None] = print):
        self.engine = engine
        self.output = output

    def on_piece_landed(self, row: int, column: int, player: Player) -> None:
        self.output(f"{player} ({player.symbol}) drops into column {column}.")
        self.output(self.engine.render())

    def on_game_ended(self, result: GameResult) -> None:
        if result.winner is not None:
            self.output(f"{result.winner} won!")
        else:
            self.output("Board filled. Game is a tie.")

    def on_illegal_move(self, reason: IllegalMoveReason) -> None:
        self.output(f"Illegal move: {reason.message}")


def find_floating_pieces(grid: np.ndarray) -> List[tuple]:
    """Occupied cells sitting above an empty cell in the same column."""
    rows, cols = grid.shape
    floating = []
    for row in range(rows - 1):
        for col in range(cols):
            if grid[row, col] != Player.EMPTY.value and grid[row + 1, col] == Player.EMPTY.value:
                floating.append((row, col))
    return floating


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input):
        """Initialize the CLI."""
        self.input_func = input_func
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
        play_parser.add_argument('--first', type=int, choices=[1, 2], default=1,
                                 help='Which player moves first')

        check_parser = subparsers.add_parser('check', help='Analyse a board position')
        check_parser.add_argument('--position', type=str, required=True,
                                  help='Comma-separated row-major cell values (0 empty, 1, 2), top row first')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark the engine')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'check':
            return self.check_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> Optional[GameResult]:
        """Play a hot-seat game; returns the final result, or None if a player quit."""
        engine = GameEngine(first_player=Player(self.args.first))
        engine.add_listener(TerminalRenderer(engine))

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{engine.board.width - 1}) to drop a piece, 'q' to quit.")
        print(engine.render())

        while not engine.is_game_over():
            column = self.get_column(engine.current_player)
            if column is None:
                print("Quitting game.")
                debug.info("Game abandoned", "cli")
                return None
            engine.request_drop(column)

        return engine.result

    def get_column(self, player: Player) -> Optional[int]:
        """
        Prompt until the player enters a column number or quits.

        Returns:
            The column entered, or None to quit. Range checks are left to the engine.
        """
        while True:
            try:
                user_input = self.input_func(f"{player} ({player.symbol}), your move: ").strip().lower()
            except EOFError:
                return None

            if user_input in QUIT_COMMANDS:
                return None

            try:
                return int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or 'q'.")

    def check_position(self) -> int:
        """Analyse a position given on the command line."""
        try:
            grid = parse_position(self.args.position)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        board = Board.from_grid(grid)
        print("Loaded position:")
        print(board.render())

        floating = find_floating_pieces(grid)
        if floating:
            print(f"Warning: pieces without support at {floating}")

        winners = []
        for player in (Player.ONE, Player.TWO):
            if has_win(board, player):
                winners.append(player)
                print(f"Win for {player}: {find_winning_line(board, player)}")

        if not winners:
            print("No win detected for any player")
            if is_tie(board, Player.ONE) and is_tie(board, Player.TWO):
                print("Board is full: the game is a tie")
            else:
                empty_count = int(np.sum(grid == Player.EMPTY.value))
                print(f"Empty spaces: {empty_count}")
                print(f"Valid moves: {board.valid_columns()}")
        return 0

    def benchmark(self) -> None:
        """Benchmark board creation, random games and full-board win scans."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board()
        board_init_time = debug.end_timer("board_init", "cli")
        print(f"Board initialization: {board_init_time:.6f} seconds total, "
              f"{board_init_time / iterations * 1000:.6f} ms per board")

        debug.start_timer("game_simulation")
        games_played = 0
        total_moves = 0
        boards = []
        for _ in range(max(iterations // 10, 1)):
            engine = GameEngine()
            while not engine.is_game_over():
                engine.request_drop(rng.choice(engine.valid_moves()))
            games_played += 1
            total_moves += engine.move_count
            boards.append(engine.board)
        simulation_time = debug.end_timer("game_simulation", "cli")
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{simulation_time:.6f} seconds total, "
              f"{simulation_time / total_moves * 1000:.6f} ms per move")

        debug.start_timer("win_scan")
        for board in boards:
            has_win(board, Player.ONE)
            has_win(board, Player.TWO)
        scan_time = debug.end_timer("win_scan", "cli")
        print(f"Full-board win scans on {len(boards) * 2} boards: {scan_time:.6f} seconds total")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
