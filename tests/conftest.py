"""Shared fixtures: board builders, a recording listener, scripted games."""

import numpy as np
import pytest

from connectfour.game.board import Board
from connectfour.game.events import GameListener
from connectfour.utils import Player

SYMBOLS = {'.': Player.EMPTY.value, 'X': Player.ONE.value, 'O': Player.TWO.value}

# Legal alternating game (Player 1 first) that fills all 42 cells with no
# four-in-a-row. Columns are filled in pairs, then 4-5-6 together.
TIE_SEQUENCE = (
    [0, 1, 0, 1, 1, 0, 1, 0, 0, 1, 1, 0]
    + [2, 3, 2, 3, 3, 2, 3, 2, 2, 3, 3, 2]
    + [4, 5, 4, 5, 6, 4, 6, 4, 4, 4, 5, 6, 5, 6, 6, 5, 5, 6]
)

# Scenario A: Player 1 stacks column 0 while Player 2 stacks column 1
VERTICAL_WIN_SEQUENCE = [0, 1, 0, 1, 0, 1, 0]


class RecordingListener(GameListener):
    def __init__(self):
        self.events = []

    def on_piece_landed(self, row, column, player):
        self.events.append(('landed', row, column, player))

    def on_game_ended(self, result):
        self.events.append(('ended', result))

    def on_illegal_move(self, reason):
        self.events.append(('illegal', reason))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def board_from_rows():
    """Build a Board from strings, top row first: '.' empty, 'X' player one, 'O' player two."""
    def build(*rows):
        grid = np.array([[SYMBOLS[ch] for ch in row] for row in rows], dtype=int)
        return Board.from_grid(grid)
    return build


@pytest.fixture
def tie_sequence():
    return list(TIE_SEQUENCE)


@pytest.fixture
def vertical_win_sequence():
    return list(VERTICAL_WIN_SEQUENCE)
