"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board dimensions, the player and outcome
enumerations, direction vectors used by the win detector, and the
ASCII renderer shared by the board and the command-line interface.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

Position = Tuple[int, int]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return {Player.EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}[self]

    def __str__(self):
        if self == Player.EMPTY:
            return "Empty"
        return f"Player {self.value}"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        """Check if the outcome is terminal."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win outcome for {player!r}")


class IllegalMoveReason(Enum):
    """Why a drop request was rejected."""
    COLUMN_FULL = auto()
    COLUMN_OUT_OF_RANGE = auto()
    GAME_ALREADY_OVER = auto()

    @property
    def message(self) -> str:
        return {
            IllegalMoveReason.COLUMN_FULL: "That column is full.",
            IllegalMoveReason.COLUMN_OUT_OF_RANGE: "That column does not exist.",
            IllegalMoveReason.GAME_ALREADY_OVER: "The game is already over.",
        }[self]


class Direction(Enum):
    """Directions a four-in-a-row can run, anchored at its first cell."""
    HORIZONTAL = auto()      # left to right
    VERTICAL = auto()        # top to bottom
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Board height
        cols: Board width

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art, top row first.

    Args:
        grid: 2D array of player values

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    symbols = {player.value: player.symbol for player in Player}

    lines: List[str] = ["|" + "-" * (cols * 2 - 1) + "|"]
    for row in range(rows):
        lines.append("|" + " ".join(symbols[int(cell)] for cell in grid[row]) + "|")
    lines.append("|" + "-" * (cols * 2 - 1) + "|")
    lines.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(lines)


def parse_position(position: str, rows: int = ROWS, cols: int = COLS) -> np.ndarray:
    """
    Parse a comma-separated, row-major position string into a grid.

    Raises:
        ValueError: If the string has the wrong length or unknown cell values
    """
    values = [int(value) for value in position.split(',')]
    if len(values) != rows * cols:
        raise ValueError(f"Position string must have {rows * cols} values, got {len(values)}")

    allowed = {player.value for player in Player}
    unknown = set(values) - allowed
    if unknown:
        raise ValueError(f"Unknown cell values in position: {sorted(unknown)}")

    return np.array(values, dtype=int).reshape(rows, cols)
