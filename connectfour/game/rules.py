"""
rules.py - Win and tie detection for Connect Four

A win is CONNECT_N cells owned by one player forming a contiguous run
horizontally, vertically, or along either diagonal. Candidate runs are
anchored at a cell and extend in one of the four DIRECTION_VECTORS; a run
that leaves the board is rejected before any cell is inspected.
"""

from typing import Iterator, List, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, DIRECTION_VECTORS, Player, Position


def candidate_lines(row: int, col: int, length: int = CONNECT_N) -> Iterator[List[Position]]:
    """
    Yield the runs anchored at (row, col), one per direction.

    Args:
        row: Anchor row
        col: Anchor column
        length: Cells per run

    Yields:
        Lists of (row, col) coordinates; some may lie off the board
    """
    for dr, dc in DIRECTION_VECTORS.values():
        yield [(row + dr * i, col + dc * i) for i in range(length)]


def is_winning_line(board: Board, line: List[Position], player: Player) -> bool:
    """True iff every cell of ``line`` is on the board and owned by ``player``."""
    if not all(board.is_valid_position(r, c) for r, c in line):
        return False
    return all(board.grid[r, c] == player.value for r, c in line)


def _lines_through(row: int, col: int, length: int = CONNECT_N) -> Iterator[List[Position]]:
    # Every run containing (row, col) is anchored up to length-1 steps behind it
    for dr, dc in DIRECTION_VECTORS.values():
        for offset in range(length):
            anchor_row, anchor_col = row - dr * offset, col - dc * offset
            yield [(anchor_row + dr * i, anchor_col + dc * i) for i in range(length)]


def find_winning_line(board: Board, player: Player,
                      last_move: Optional[Position] = None) -> List[Position]:
    """
    Find a winning run for ``player``.

    Args:
        board: The board to inspect
        player: The player to check for
        last_move: If given, only runs through this cell are considered

    Returns:
        The coordinates of the first winning run found, or an empty list
    """
    if player == Player.EMPTY:
        return []

    if last_move is None:
        lines = (line
                 for row in range(board.height)
                 for col in range(board.width)
                 for line in candidate_lines(row, col))
    else:
        lines = _lines_through(*last_move)

    for line in lines:
        if is_winning_line(board, line, player):
            debug.trace(f"Winning line for {player}: {line}", "rules")
            return line
    return []


def has_win(board: Board, player: Player) -> bool:
    """
    Check the whole board for a four-in-a-row owned by ``player``.

    Every cell is tried as the anchor of a run in each of the four
    directions, so the answer does not depend on which move came last.
    """
    return bool(find_winning_line(board, player))


def has_win_through(board: Board, row: int, col: int, player: Player) -> bool:
    """Same as has_win, restricted to runs passing through (row, col)."""
    return bool(find_winning_line(board, player, last_move=(row, col)))


def is_tie(board: Board, last_player: Player) -> bool:
    """
    A tie is a full board on which ``last_player`` has no win.

    The win check comes first, so a move that both wins and fills the
    board is never reported as a tie.
    """
    if has_win(board, last_player):
        return False
    return board.is_full()
