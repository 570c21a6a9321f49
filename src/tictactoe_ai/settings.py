"""Environment-driven defaults for the game and the CLI.

Environment first, with fallbacks that match the browser game: the easy
tier is selected and the human plays X. Command-line flags override these.
"""

from __future__ import annotations

import os

from .board import Mark
from .engine import Difficulty


def default_difficulty() -> Difficulty:
    raw = os.getenv("TTT_DIFFICULTY")
    if not raw:
        return Difficulty.EASY
    try:
        return Difficulty.parse(raw)
    except ValueError as exc:
        raise ValueError(f"TTT_DIFFICULTY: {exc}") from None


def default_human_mark() -> Mark:
    raw = os.getenv("TTT_HUMAN_MARK")
    if not raw:
        return Mark.X
    try:
        return Mark.parse(raw)
    except ValueError as exc:
        raise ValueError(f"TTT_HUMAN_MARK: {exc}") from None


def default_seed() -> int | None:
    """Seed for the engine's random generator; None means OS entropy."""
    raw = os.getenv("TTT_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TTT_SEED must be an integer, got {raw!r}") from None
