#!/usr/bin/env python3
from __future__ import annotations

import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from tictactoe_ai.arena import run_matchup
from tictactoe_ai.board import Board, Mark
from tictactoe_ai.engine import Difficulty, select_move


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 5
    games: int = 40


def main() -> int:
    cfg = Config()
    tiers = [Difficulty.EASY, Difficulty.MEDIUM]
    print("| A | B | A win rate | B win rate | draw rate |")
    print("|---|---|---|---|---|")
    for a in tiers:
        for b in tiers:
            a_rates: List[float] = []
            b_rates: List[float] = []
            d_rates: List[float] = []
            for s in range(cfg.seeds):
                res = run_matchup(a, b, games=cfg.games, seed=s)
                a_rates.append(res["a_wins"] / res["games"])
                b_rates.append(res["b_wins"] / res["games"])
                d_rates.append(res["draws"] / res["games"])
            cells = [f"{m:.3f} ± {h:.3f}" for m, h in (ci95(a_rates), ci95(b_rates), ci95(d_rates))]
            print(f"| {a.value} | {b.value} | " + " | ".join(cells) + " |")

    # one full search from the empty board dominates the hard tier's cost
    times: List[float] = []
    for _ in range(cfg.seeds):
        t0 = time.perf_counter()
        select_move(Board(), Difficulty.HARD, Mark.X, Mark.O)
        times.append(time.perf_counter() - t0)
    m, h = ci95(times)
    print(f"\nhard opening move: mean={m:.3f}s ± {h:.3f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
