"""
Move engine: picks the computer's cell under one of three difficulty tiers.

- easy:   uniform random choice among the empty cells.
- medium: take an immediate win, else block the opponent's immediate win,
          else play like easy. No look-ahead beyond that.
- hard:   exhaustive minimax (no pruning, no depth discount). Scores are
          +1 computer win, -1 opponent win, 0 draw; ties go to the lowest
          cell index.

The engine keeps no state between calls. It searches a private copy of the
cells, so the caller's board is never touched.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

import numpy as np

from .board import Board, Mark, available_cells, get_winner
from .errors import EngineMisuse
from .tactics import completing_cell


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (choose from {choices})") from None


def random_move(cells: List[Mark], rng: np.random.Generator) -> int:
    return int(rng.choice(available_cells(cells)))


def medium_move(cells: List[Mark], computer: Mark, opponent: Mark, rng: np.random.Generator) -> int:
    win = completing_cell(cells, computer)
    if win is not None:
        return win
    block = completing_cell(cells, opponent)
    if block is not None:
        return block
    return random_move(cells, rng)


def minimax(cells: List[Mark], maximizing: bool, computer: Mark, opponent: Mark) -> int:
    """Score `cells` with `computer` fixed as the +1 side for the whole search.

    `maximizing` is True when the computer is to move. `cells` is mutated
    during the search and restored before returning.
    """
    w = get_winner(cells)
    if w == computer:
        return 1
    if w == opponent:
        return -1
    if Mark.EMPTY not in cells:
        return 0

    if maximizing:
        best = -2
        for i in available_cells(cells):
            cells[i] = computer
            score = minimax(cells, False, computer, opponent)
            cells[i] = Mark.EMPTY
            best = max(best, score)
        return best
    best = 2
    for i in available_cells(cells):
        cells[i] = opponent
        score = minimax(cells, True, computer, opponent)
        cells[i] = Mark.EMPTY
        best = min(best, score)
    return best


def best_move(cells: List[Mark], computer: Mark, opponent: Mark) -> int:
    best_score = -2
    move = -1
    for i in available_cells(cells):
        cells[i] = computer
        score = minimax(cells, False, computer, opponent)
        cells[i] = Mark.EMPTY
        if score > best_score:
            best_score = score
            move = i
    logging.debug("minimax best=%d score=%d", move, best_score)
    return move


def select_move(
    board: Board,
    difficulty: Difficulty,
    computer_mark: Mark,
    opponent_mark: Mark,
    rng: Optional[np.random.Generator] = None,
) -> int:
    if computer_mark not in (Mark.X, Mark.O) or opponent_mark not in (Mark.X, Mark.O):
        raise EngineMisuse("Both marks must be X or O")
    if computer_mark == opponent_mark:
        raise EngineMisuse("Computer and opponent marks must differ")
    cells = list(board.cells)
    if not available_cells(cells):
        raise EngineMisuse("No available cells: the board is full")
    if get_winner(cells) != Mark.EMPTY:
        raise EngineMisuse("The game is already decided")
    computer, opponent = Mark(computer_mark), Mark(opponent_mark)
    difficulty = Difficulty(difficulty)
    if rng is None:
        rng = np.random.default_rng()

    if difficulty is Difficulty.EASY:
        move = random_move(cells, rng)
    elif difficulty is Difficulty.MEDIUM:
        move = medium_move(cells, computer, opponent, rng)
    else:
        move = best_move(cells, computer, opponent)
    logging.debug("engine tier=%s mark=%s move=%d", difficulty.value, computer.name, move)
    return move
