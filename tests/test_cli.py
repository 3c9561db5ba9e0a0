"""Tests for the terminal front end."""

import numpy as np
import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.interfaces.cli import SimpleCLI, TerminalRenderer, find_floating_pieces, main
from connectfour.game.engine import GameEngine
from connectfour.utils import GameResult, IllegalMoveReason


@pytest.fixture(autouse=True)
def restore_debug_level():
    level = debug.level
    yield
    debug.configure(level=level)


def scripted(*answers):
    answers = iter(answers)

    def fake_input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return fake_input


def run_cli(argv, *answers):
    cli = SimpleCLI(input_func=scripted(*answers))
    cli.parse_args(argv)
    return cli


class TestTerminalRenderer:
    def test_messages(self):
        lines = []
        engine = GameEngine()
        renderer = TerminalRenderer(engine, output=lines.append)
        engine.add_listener(renderer)

        engine.request_drop(9)
        renderer.on_game_ended(GameResult.PLAYER_TWO_WIN)
        renderer.on_game_ended(GameResult.TIE)

        assert lines == [
            f"Illegal move: {IllegalMoveReason.COLUMN_OUT_OF_RANGE.message}",
            "Player 2 won!",
            "Board filled. Game is a tie.",
        ]

    def test_board_printed_after_landing(self):
        lines = []
        engine = GameEngine()
        engine.add_listener(TerminalRenderer(engine, output=lines.append))
        engine.request_drop(0)
        assert lines[0] == "Player 1 (X) drops into column 0."
        assert lines[1] == engine.render()


class TestPlay:
    def test_game_to_a_win(self, capsys):
        cli = run_cli(['play'], '0', '1', '0', '1', '0', '1', '0')
        assert cli.play_game() == GameResult.PLAYER_ONE_WIN
        assert "Player 1 won!" in capsys.readouterr().out

    def test_bad_input_and_quit(self, capsys):
        cli = run_cli(['play'], 'abc', '7', 'q')
        assert cli.play_game() is None

        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Illegal move: That column does not exist." in out
        assert "Quitting game." in out

    def test_end_of_input_quits(self):
        cli = run_cli(['play', '--first', '2'], '3')
        assert cli.play_game() is None


class TestCheckPosition:
    def test_reports_win(self, capsys):
        grid = np.zeros((6, 7), dtype=int)
        grid[5, :4] = 2
        position = ",".join(str(v) for v in grid.flatten())

        cli = run_cli(['check', '--position', position])
        assert cli.check_position() == 0
        assert "Win for Player 2: [(5, 0), (5, 1), (5, 2), (5, 3)]" in capsys.readouterr().out

    def test_reports_open_position(self, capsys):
        grid = np.zeros((6, 7), dtype=int)
        grid[:, 2] = [1, 2, 1, 2, 1, 2]
        position = ",".join(str(v) for v in grid.flatten())

        cli = run_cli(['check', '--position', position])
        cli.check_position()
        out = capsys.readouterr().out
        assert "No win detected for any player" in out
        assert "Empty spaces: 36" in out
        assert "Valid moves: [0, 1, 3, 4, 5, 6]" in out

    def test_bad_position(self, capsys):
        cli = run_cli(['check', '--position', '1,2,3'])
        assert cli.check_position() == 1
        assert "Error parsing position" in capsys.readouterr().out

    def test_floating_pieces(self):
        grid = np.zeros((3, 2), dtype=int)
        grid[0, 0] = 1
        grid[2, 1] = 2
        assert find_floating_pieces(grid) == [(0, 0)]


class TestRun:
    def test_benchmark(self, capsys):
        assert main(['benchmark', '--iterations', '10', '--seed', '1']) == 0
        out = capsys.readouterr().out
        assert "Board initialization" in out
        assert "Played 1 games" in out

    @pytest.mark.parametrize("iterations", ["0", "-5"])
    def test_benchmark_rejects_non_positive_iterations(self, iterations, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['benchmark', '--iterations', iterations])
        assert exc_info.value.code == 2
        assert "must be a positive integer" in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out

    def test_debug_flag_sets_level(self):
        run_cli(['--debug', 'check', '--position', ','.join(['0'] * 42)])
        assert debug.level == DebugLevel.DEBUG
