"""
events.py - Move records, drop results and the listener interface

The engine reports every state change to its listeners synchronously, in
registration order, so a presentation layer can render without the core
knowing how.
"""

from dataclasses import dataclass
from typing import Optional

from connectfour.utils import GameResult, IllegalMoveReason, Player


@dataclass(frozen=True)
class Move:
    """A piece that has landed: where it came to rest and who dropped it."""
    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class DropResult:
    """Outcome of a single drop request."""
    result: GameResult
    move: Optional[Move] = None
    reason: Optional[IllegalMoveReason] = None

    @property
    def accepted(self) -> bool:
        return self.move is not None

    @property
    def is_game_over(self) -> bool:
        return self.result.is_game_over()


class GameListener:
    """
    Receives notifications from a GameEngine.

    Subclass and override the hooks you need; the defaults do nothing.
    """

    def on_piece_landed(self, row: int, column: int, player: Player) -> None:
        """Called exactly once for every accepted move."""

    def on_game_ended(self, result: GameResult) -> None:
        """Called once, when the game reaches a win or a tie."""

    def on_illegal_move(self, reason: IllegalMoveReason) -> None:
        """Called for every rejected drop request."""
