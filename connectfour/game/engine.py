"""
engine.py - Turn orchestration for a single Connect Four game

GameEngine owns one board and one turn tracker. Callers drive it through
request_drop(); it validates the request, applies the move, evaluates win
then tie, and notifies its listeners of what happened. Illegal requests
are returned as values and never raise.
"""

from typing import Iterable, List, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.events import DropResult, GameListener, Move
from connectfour.game.rules import find_winning_line
from connectfour.utils import (ROWS, COLS, GameResult, IllegalMoveReason,
                               Player, Position)


class GameEngine:
    """
    State machine for one game session.

    IN_PROGRESS(active player) moves to PLAYER_ONE_WIN, PLAYER_TWO_WIN or
    TIE, all terminal. Use a new engine for a new game.
    """

    def __init__(self, width: int = COLS, height: int = ROWS,
                 first_player: Player = Player.ONE,
                 listeners: Iterable[GameListener] = ()):
        """
        Initialize a new game.

        Args:
            width: Number of columns
            height: Number of rows
            first_player: Who moves first
            listeners: Listeners notified of every state change

        Raises:
            ValueError: If the dimensions are invalid or first_player is EMPTY
        """
        if first_player == Player.EMPTY:
            raise ValueError("first_player must be Player.ONE or Player.TWO")

        self._board = Board(width=width, height=height)
        self._current_player = first_player
        self._result = GameResult.IN_PROGRESS
        self._last_move: Optional[Move] = None
        self._winning_line: List[Position] = []
        self._move_count = 0
        self._listeners: List[GameListener] = list(listeners)
        debug.debug(f"New game on {width}x{height} board, {first_player} to move", "engine")

    @property
    def board(self) -> Board:
        """The board this game is played on; mutate it only through request_drop."""
        return self._board

    @property
    def current_player(self) -> Player:
        """The player whose move is next (the last mover once the game is over)."""
        return self._current_player

    @property
    def result(self) -> GameResult:
        """The current game result, IN_PROGRESS until a win or tie."""
        return self._result

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while in progress or after a tie."""
        return self._result.winner

    @property
    def last_move(self) -> Optional[Move]:
        """The most recently accepted move, or None before the first one."""
        return self._last_move

    @property
    def move_count(self) -> int:
        """Number of accepted moves so far."""
        return self._move_count

    @property
    def winning_line(self) -> List[Position]:
        """
        Get the cells of the winning run.

        Returns:
            (row, col) positions of the four-in-a-row, or an empty list if no one has won
        """
        return list(self._winning_line)

    def is_game_over(self) -> bool:
        """Check if the game has reached a win or a tie."""
        return self._result.is_game_over()

    def valid_moves(self) -> List[int]:
        """
        Get the columns that would accept a drop.

        Returns:
            List of column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def add_listener(self, listener: GameListener) -> None:
        """Register a listener; adding the same listener twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        """Unregister a listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def request_drop(self, column: int) -> DropResult:
        """
        Drop a piece for the active player into ``column``.

        Args:
            column: The column to play (0-indexed); non-integers are rejected
                as COLUMN_OUT_OF_RANGE

        Returns:
            A DropResult holding the landed move, or the reason the
            request was rejected, and the game result afterwards
        """
        if self.is_game_over():
            return self._reject(IllegalMoveReason.GAME_ALREADY_OVER)

        if not self._board.is_valid_column(column):
            return self._reject(IllegalMoveReason.COLUMN_OUT_OF_RANGE)

        if self._board.find_landing_row(column) is None:
            return self._reject(IllegalMoveReason.COLUMN_FULL)

        player = self._current_player
        row = self._board.place(column, player)
        move = Move(row=row, column=column, player=player)
        self._last_move = move
        self._move_count += 1
        debug.debug(f"{player} dropped into column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        self._winning_line = find_winning_line(self._board, player, last_move=(row, column))
        debug.end_timer("win_check", "engine")

        # Fullness is only consulted once the move is known not to win
        if self._winning_line:
            self._result = GameResult.win_for(player)
        elif self._board.is_full():
            self._result = GameResult.TIE
        else:
            self._current_player = player.other()

        # State is settled before any listener runs
        for listener in list(self._listeners):
            listener.on_piece_landed(row, column, player)
        if self._result.is_game_over():
            self._finish()

        return DropResult(result=self._result, move=move)

    def render(self) -> str:
        """Render the board as ASCII art."""
        return self._board.render()

    def _reject(self, reason: IllegalMoveReason) -> DropResult:
        debug.debug(f"Rejected drop: {reason.name}", "engine")
        for listener in list(self._listeners):
            listener.on_illegal_move(reason)
        return DropResult(result=self._result, reason=reason)

    def _finish(self) -> None:
        debug.info(f"Game over: {self._result.name} after {self._move_count} moves", "engine")
        for listener in list(self._listeners):
            listener.on_game_ended(self._result)
