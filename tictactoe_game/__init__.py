"""
TicTacToe Game
==============
Two players take turns placing X and O on a 3x3 board.
Handles game state, win/draw detection, and a running score across rounds.

X always opens a round.
"""

__version__ = "1.0.0"

from .config import GameConfig, configure_logging
from .game_state import Mark, RoundState, Outcome, OutcomeKind, Score, empty_board
from .win_checker import WinChecker, WINNING_LINES, evaluate, calculate_winner, is_draw
from .move_validator import MoveValidator, ValidationResult
from .session import GameSession
