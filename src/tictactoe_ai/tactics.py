"""
Tactics: immediate wins and blocks found by scanning the winning lines.
Notes:
- A line is a threat for a player when it holds two of their marks and
  exactly one empty cell. Lines with two empty cells never qualify.
- Threats are reported in line order (rows, columns, diagonals).
"""
from typing import List, Optional, Sequence

from .board import WIN_LINES, Mark


def line_threats(cells: Sequence[int], mark: Mark) -> List[int]:
    threats: List[int] = []
    for line in WIN_LINES:
        values = [cells[i] for i in line]
        if values.count(mark) == 2 and values.count(Mark.EMPTY) == 1:
            threats.append(line[values.index(Mark.EMPTY)])
    return threats


def completing_cell(cells: Sequence[int], mark: Mark) -> Optional[int]:
    """Empty cell of the first line that `mark` would complete, if any."""
    threats = line_threats(cells, mark)
    return threats[0] if threats else None
