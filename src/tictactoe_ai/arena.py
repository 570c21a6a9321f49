"""
Headless engine-versus-engine games and win/draw tallies.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .board import Board, Mark, Outcome, side_to_move
from .engine import Difficulty, select_move


@dataclass
class GameRecord:
    moves: List[Tuple[Mark, int]]
    outcome: Outcome


def play_game(
    x_tier: Difficulty,
    o_tier: Difficulty,
    rng: Optional[np.random.Generator] = None,
    board: Optional[Board] = None,
) -> GameRecord:
    """Play one game to the end, X first unless `board` says otherwise."""
    if rng is None:
        rng = np.random.default_rng()
    board = Board() if board is None else board.copy()
    tiers = {Mark.X: Difficulty(x_tier), Mark.O: Difficulty(o_tier)}
    mark = side_to_move(board.cells)
    moves: List[Tuple[Mark, int]] = []
    outcome = board.outcome()
    while not outcome.is_over:
        mv = select_move(board, tiers[mark], mark, mark.opponent, rng=rng)
        outcome = board.apply(mv, mark)
        moves.append((mark, mv))
        mark = mark.opponent
    return GameRecord(moves=moves, outcome=outcome)


def run_matchup(tier_a: Difficulty, tier_b: Difficulty, games: int = 100, seed: int = 42) -> Dict[str, int]:
    """Tier A plays X on even-numbered games and O on odd-numbered ones."""
    if games < 1:
        raise ValueError(f"games must be positive, got {games}")
    rng = np.random.default_rng(seed)
    a_wins = b_wins = draws = 0
    for g in range(games):
        a_mark = Mark.X if g % 2 == 0 else Mark.O
        if a_mark is Mark.X:
            record = play_game(tier_a, tier_b, rng=rng)
        else:
            record = play_game(tier_b, tier_a, rng=rng)
        winner = record.outcome.winner
        if winner is None:
            draws += 1
        elif winner == a_mark:
            a_wins += 1
        else:
            b_wins += 1
    logging.info(
        "matchup %s vs %s: games=%d a_wins=%d b_wins=%d draws=%d",
        Difficulty(tier_a).value, Difficulty(tier_b).value, games, a_wins, b_wins, draws,
    )
    return {"games": games, "a_wins": a_wins, "b_wins": b_wins, "draws": draws}
