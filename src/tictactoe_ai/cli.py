from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

import numpy as np

from .arena import run_matchup
from .board import Board, Mark, is_valid_state, side_to_move
from .engine import Difficulty, select_move
from .errors import InvalidMove
from .game import Game
from .settings import default_difficulty, default_human_mark, default_seed

DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-ai", description="Tic-tac-toe against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the engine's random choices (default: $TTT_SEED or OS entropy)",
    )

    p_move = sub.add_parser("move", help="Pick the computer's move for a board (9 digits, 0=empty,1=X,2=O)")
    p_move.add_argument("--board", required=True, help="Board string, e.g., 110020000")
    p_move.add_argument(
        "--difficulty",
        choices=DIFFICULTY_CHOICES,
        default=None,
        help="Difficulty tier (default: $TTT_DIFFICULTY or easy)",
    )
    p_move.add_argument(
        "--computer",
        choices=["X", "O"],
        default=None,
        help="Mark the computer plays (default: side to move)",
    )

    p_out = sub.add_parser("outcome", help="Report whether a board is won, drawn or in progress")
    p_out.add_argument("--board", required=True, help="Board string, e.g., 121212212")

    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument("--difficulty", choices=DIFFICULTY_CHOICES, default=None)
    p_play.add_argument("--human", choices=["X", "O"], default=None, help="Your mark (X moves first)")

    p_arena = sub.add_parser("arena", help="Play two difficulty tiers against each other")
    p_arena.add_argument("--a", dest="tier_a", choices=DIFFICULTY_CHOICES, required=True)
    p_arena.add_argument("--b", dest="tier_b", choices=DIFFICULTY_CHOICES, required=True)
    p_arena.add_argument("--games", type=int, default=20, help="Number of games (sides alternate)")

    return p


def _parse_board(raw: str) -> Optional[Board]:
    try:
        board = Board.from_string(raw)
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return None
    if not is_valid_state(board.cells):
        logging.error("Board is not a valid reachable state.")
        return None
    return board


def _make_rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed if seed is not None else default_seed())


def play_interactive(game: Game, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    def show() -> None:
        print(game.board.render(), file=stdout)
        print(file=stdout)

    print(f"You are {game.human.name}. Difficulty: {game.difficulty.value}.", file=stdout)
    print("Enter a cell 0-8 (row-major), or q to quit.", file=stdout)
    show()
    while game.active:
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            return 1
        raw = line.strip().lower()
        if raw in ("q", "quit"):
            return 1
        try:
            index = int(raw)
        except ValueError:
            print("Please enter a number from 0 to 8.", file=stdout)
            continue
        try:
            result = game.play(index)
        except InvalidMove as exc:
            print(f"Invalid move: {exc}", file=stdout)
            continue
        if result.computer_move is not None:
            print(f"Computer plays {result.computer_move}", file=stdout)
        show()
    print(game.status_message(), file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-ai"))
        except Exception:
            print("unknown")
        return 0

    try:
        difficulty = Difficulty.parse(ns.difficulty) if getattr(ns, "difficulty", None) else default_difficulty()
        rng = _make_rng(ns.seed)
    except ValueError as exc:
        logging.error("%s", exc)
        return 2

    if ns.cmd == "move":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        if board.outcome().is_over:
            logging.error("Board is already finished: %s", board.outcome().label)
            return 2
        computer = Mark.parse(ns.computer) if ns.computer else side_to_move(board.cells)
        move = select_move(board, difficulty, computer, computer.opponent, rng=rng)
        logging.info("difficulty=%s computer=%s move=%d", difficulty.value, computer.name, move)
        return 0

    if ns.cmd == "outcome":
        board = _parse_board(ns.board)
        if board is None:
            return 2
        logging.info("outcome=%s", board.outcome().label)
        return 0

    if ns.cmd == "play":
        try:
            human = Mark.parse(ns.human) if ns.human else default_human_mark()
        except ValueError as exc:
            logging.error("%s", exc)
            return 2
        return play_interactive(Game(difficulty=difficulty, human=human, rng=rng))

    if ns.cmd == "arena":
        if ns.games < 1:
            logging.error("--games must be positive: %s", ns.games)
            return 2
        seed = ns.seed if ns.seed is not None else default_seed()
        run_matchup(
            Difficulty.parse(ns.tier_a),
            Difficulty.parse(ns.tier_b),
            games=ns.games,
            seed=42 if seed is None else seed,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
