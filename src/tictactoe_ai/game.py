"""
Game session: one human against the engine on a single board.

The session owns the turn bookkeeping that the browser game kept in
globals. X always moves first; when the human plays O the computer opens
as soon as the game starts or restarts. Changing the difficulty restarts
the game.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Mark, Outcome, Status
from .engine import Difficulty, select_move
from .errors import InvalidMove


@dataclass
class TurnResult:
    human_move: Optional[int]
    computer_move: Optional[int]
    outcome: Outcome


@dataclass
class Game:
    difficulty: Difficulty = Difficulty.EASY
    human: Mark = Mark.X
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    board: Board = field(default_factory=Board, init=False)
    current: Mark = field(default=Mark.X, init=False)
    history: List[Tuple[Mark, int]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        if self.human not in (Mark.X, Mark.O):
            raise ValueError("The human must play X or O")
        self.human = Mark(self.human)
        self.restart()

    @property
    def computer(self) -> Mark:
        return self.human.opponent

    @property
    def active(self) -> bool:
        return not self.board.outcome().is_over

    def outcome(self) -> Outcome:
        return self.board.outcome()

    def restart(self) -> Optional[int]:
        """Clear the board. Returns the computer's opening cell, if it opens."""
        self.board.reset()
        self.history = []
        self.current = Mark.X
        logging.debug("game restarted difficulty=%s human=%s", self.difficulty.value, self.human.name)
        if self.current == self.computer:
            return self._computer_turn()
        return None

    def set_difficulty(self, difficulty: Difficulty) -> Optional[int]:
        self.difficulty = Difficulty(difficulty)
        return self.restart()

    def play(self, index: int) -> TurnResult:
        if not self.active:
            raise InvalidMove("The game is already over")
        if self.current != self.human:
            raise InvalidMove("It is not the human player's turn")
        outcome = self._place(index, self.human)
        if outcome.is_over:
            return TurnResult(index, None, outcome)
        reply = self._computer_turn()
        return TurnResult(index, reply, self.board.outcome())

    def status_message(self) -> str:
        outcome = self.board.outcome()
        if outcome.status is Status.WIN:
            return f"{outcome.winner.name} Wins!"
        if outcome.status is Status.DRAW:
            return "Draw!"
        return ""

    def _computer_turn(self) -> int:
        move = select_move(self.board, self.difficulty, self.computer, self.human, rng=self.rng)
        self._place(move, self.computer)
        return move

    def _place(self, index: int, mark: Mark) -> Outcome:
        outcome = self.board.apply(index, mark)
        self.history.append((mark, index))
        if outcome.is_over:
            logging.debug("game over outcome=%s moves=%d", outcome.label, len(self.history))
        else:
            self.current = mark.opponent
        return outcome
