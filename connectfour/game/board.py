"""
board.py - Board representation and drop resolution for Connect Four

This module implements the Board class: a fixed-size grid of cells, each
empty or owned by a player, with gravity-based drop resolution. Row 0 is
the top of the board; pieces settle towards row ``height - 1``.
"""

from typing import List, Optional

import numpy as np

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, Player, is_valid_position,
                               render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    The board only stores cell occupancy. Turn order and outcome live in
    the GameEngine, and win detection lives in connectfour.game.rules.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        """
        Create an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        debug.debug(f"Creating empty {width}x{height} board", "board")
        self.width = width
        self.height = height
        self.grid = np.full((height, width), Player.EMPTY.value, dtype=int)

    @classmethod
    def from_grid(cls, grid: np.ndarray) -> 'Board':
        """Build a board holding a copy of an existing grid (for analysis and tests)."""
        height, width = grid.shape
        board = cls(width=width, height=height)
        board.grid = np.array(grid, dtype=int, copy=True)
        return board

    def cell(self, row: int, col: int) -> Player:
        """
        Get the occupant of a cell.

        Args:
            row: Row index (0 is the top row)
            col: Column index

        Returns:
            The Player in the cell, Player.EMPTY if unoccupied
        """
        return Player(int(self.grid[row, col]))

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if (row, col) lies on this board."""
        return is_valid_position(row, col, self.height, self.width)

    def is_valid_column(self, column: int) -> bool:
        """
        Check if a column index exists on this board.

        Args:
            column: Column index; must be an integer, bools are rejected

        Returns:
            True if column is an integer in [0, width), False otherwise
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.width

    def is_full(self) -> bool:
        """Check whether every cell on the board is occupied."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land in.

        Scans from the bottom row upward and returns the first empty row.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The landing row, or None if the column is full

        Raises:
            ValueError: If the column is not an integer or is out of range
        """
        if not self.is_valid_column(column):
            raise ValueError(f"Column {column!r} is not a column index in [0, {self.width})")

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row

        debug.trace(f"Column {column} is full", "board")
        return None

    def valid_columns(self) -> List[int]:
        """Columns that can still accept a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]

    def place(self, column: int, player: Player) -> int:
        """
        Drop a piece for ``player`` into ``column``.

        Returns:
            The row the piece landed in

        Raises:
            ValueError: If the column is out of range or full, or player is EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place a piece for Player.EMPTY")

        row = self.find_landing_row(column)
        if row is None:
            raise ValueError(f"Column {column} is full")

        debug.trace(f"Placing {player} at ({row}, {column})", "board")
        self.grid[row, column] = player.value
        return row

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid of player values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            ASCII representation of the board, top row first
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
