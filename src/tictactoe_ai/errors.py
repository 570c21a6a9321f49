"""Exceptions raised on contract violations. None of them are retried."""


class TicTacToeError(Exception):
    pass


class InvalidMove(TicTacToeError, ValueError):
    """Placement on an occupied or out-of-range cell, or after the game ended."""


class EngineMisuse(TicTacToeError, RuntimeError):
    """The engine was asked for a move on a board with nothing left to decide."""
