"""tictactoe_ai package.

Board state, a three-tier move engine, a game session, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import DRAW, IN_PROGRESS, WIN_LINES, Board, Mark, Outcome, Status
from .engine import Difficulty, select_move
from .errors import EngineMisuse, InvalidMove, TicTacToeError
from .game import Game, TurnResult

__all__ = [
    "Board",
    "Mark",
    "Outcome",
    "Status",
    "IN_PROGRESS",
    "DRAW",
    "WIN_LINES",
    "Difficulty",
    "select_move",
    "Game",
    "TurnResult",
    "TicTacToeError",
    "InvalidMove",
    "EngineMisuse",
]
