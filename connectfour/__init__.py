"""
connectfour - Connect Four game engine

This package provides the board, the win and tie rules, a turn-based
game engine that reports to pluggable listeners, and a command-line
interface for playing and analysing positions.
"""

from connectfour.game import Board, DropResult, GameEngine, GameListener, Move
from connectfour.utils import COLS, CONNECT_N, ROWS, GameResult, IllegalMoveReason, Player

# Version number
__version__ = '0.1.0'

__all__ = ['Board', 'DropResult', 'GameEngine', 'GameListener', 'Move',
           'GameResult', 'IllegalMoveReason', 'Player', 'ROWS', 'COLS', 'CONNECT_N']
