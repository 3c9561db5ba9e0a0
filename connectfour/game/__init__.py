"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win and tie detection,
and the engine that orchestrates turns for one game session.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine
from connectfour.game.events import DropResult, GameListener, Move
from connectfour.game.rules import has_win, has_win_through, is_tie

__all__ = ['Board', 'GameEngine', 'GameListener', 'DropResult', 'Move',
           'has_win', 'has_win_through', 'is_tie']
