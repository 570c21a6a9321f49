"""
Board state: marks, winning lines, outcome evaluation, and the mutable Board.
Notes:
- Cells are stored as Mark values: 0=empty, 1=X, 2=O. X always starts.
- A board serializes to 9 digits, row-major ("120000000").
- Outcomes are derived on demand and never stored.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidMove

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

SIZE = 9


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return " " if self is Mark.EMPTY else self.name

    @classmethod
    def parse(cls, value: str) -> "Mark":
        try:
            mark = cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown mark: {value!r}") from None
        if mark is cls.EMPTY:
            raise ValueError("A player mark must be X or O")
        return mark


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(Status.WIN, Mark(mark))

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def label(self) -> str:
        """Short machine-friendly name: in_progress, x_wins, o_wins or draw."""
        if self.status is Status.WIN:
            return f"{self.winner.name.lower()}_wins"
        return self.status.value


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def serialize_board(cells: Sequence[int]) -> str:
    return ''.join(str(int(cell)) for cell in cells)


def deserialize_board(board_str: str) -> List[Mark]:
    raw = board_str.strip()
    if len(raw) != SIZE or any(c not in "012" for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    return [Mark(int(c)) for c in raw]


def get_winner(cells: Sequence[int]) -> Mark:
    for a, b, c in WIN_LINES:
        v = cells[a]
        if v and v == cells[b] and v == cells[c]:
            return Mark(v)
    return Mark.EMPTY


def available_cells(cells: Sequence[int]) -> List[int]:
    return [i for i, v in enumerate(cells) if v == Mark.EMPTY]


def is_draw(cells: Sequence[int]) -> bool:
    return Mark.EMPTY not in cells and get_winner(cells) == Mark.EMPTY


def evaluate(cells: Sequence[int]) -> Outcome:
    """Win is checked before draw, so a full board with a line is a win."""
    w = get_winner(cells)
    if w != Mark.EMPTY:
        return Outcome.win(w)
    if Mark.EMPTY not in cells:
        return DRAW
    return IN_PROGRESS


def get_piece_counts(cells: Sequence[int]) -> Tuple[int, int]:
    return list(cells).count(Mark.X), list(cells).count(Mark.O)


def side_to_move(cells: Sequence[int]) -> Mark:
    x, o = get_piece_counts(cells)
    return Mark.X if x == o else Mark.O


def is_valid_state(cells: Sequence[int]) -> bool:
    """True when the board is reachable by alternating play with X first."""
    x_count, o_count = get_piece_counts(cells)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: Mark) -> int:
        return sum(1 for line in WIN_LINES if all(cells[i] == p for i in line))

    x_wins, o_wins = count_wins(Mark.X), count_wins(Mark.O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


class Board:
    """A single game's 3x3 grid. Each game owns its own instance."""

    def __init__(self, cells: Optional[Iterable[int]] = None) -> None:
        if cells is None:
            self._cells: List[Mark] = [Mark.EMPTY] * SIZE
        else:
            values = list(cells)
            if len(values) != SIZE:
                raise ValueError(f"A board has {SIZE} cells, got {len(values)}")
            self._cells = [Mark(v) for v in values]

    @classmethod
    def from_string(cls, board_str: str) -> "Board":
        return cls(deserialize_board(board_str))

    @property
    def cells(self) -> Tuple[Mark, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return SIZE

    def __getitem__(self, index: int) -> Mark:
        return self._cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return serialize_board(self._cells)

    def __repr__(self) -> str:
        return f"Board('{self}')"

    def copy(self) -> "Board":
        return Board(self._cells)

    def outcome(self) -> Outcome:
        return evaluate(self._cells)

    def available_cells(self) -> List[int]:
        return available_cells(self._cells)

    def apply(self, index: int, mark: Mark) -> Outcome:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < SIZE:
            raise InvalidMove(f"Cell index out of range: {index!r}")
        if mark not in (Mark.X, Mark.O):
            raise InvalidMove(f"Cannot place mark {mark!r}")
        if self.outcome().is_over:
            raise InvalidMove("The game is already over")
        if self._cells[index] != Mark.EMPTY:
            raise InvalidMove(f"Cell {index} is already taken by {self._cells[index].name}")
        self._cells[index] = Mark(mark)
        return self.outcome()

    def reset(self) -> None:
        self._cells = [Mark.EMPTY] * SIZE

    def render(self) -> str:
        rows = []
        for r in range(3):
            rows.append(" " + " | ".join(self._cells[r * 3 + c].symbol for c in range(3)) + " ")
        return "\n---+---+---\n".join(rows)
