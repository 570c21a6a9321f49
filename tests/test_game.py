import numpy as np
import pytest

from tictactoe_ai.board import IN_PROGRESS, Mark, Outcome, Status
from tictactoe_ai.engine import Difficulty
from tictactoe_ai.errors import InvalidMove
from tictactoe_ai.game import Game


def make_game(difficulty=Difficulty.HARD, human=Mark.X, seed=0) -> Game:
    return Game(difficulty=difficulty, human=human, rng=np.random.default_rng(seed))


def test_new_game_human_x_waits_for_human():
    g = make_game()
    assert g.current == Mark.X
    assert g.computer == Mark.O
    assert g.history == []
    assert g.active
    assert g.outcome() == IN_PROGRESS
    assert g.status_message() == ""


def test_play_applies_human_then_computer():
    g = make_game()
    result = g.play(0)
    assert result.human_move == 0
    # hard answers a corner with the centre
    assert result.computer_move == 4
    assert result.outcome == IN_PROGRESS
    assert g.history == [(Mark.X, 0), (Mark.O, 4)]
    assert g.current == Mark.X


def test_occupied_cell_rejected_without_computer_reply():
    g = make_game()
    g.play(0)
    snapshot = str(g.board)
    with pytest.raises(InvalidMove):
        g.play(4)
    assert str(g.board) == snapshot
    assert len(g.history) == 2


def test_hard_blocks_and_game_ends_in_draw_or_computer_win():
    g = make_game()
    for cell in [0, 1, 2, 3, 5, 6, 7, 8]:
        if not g.active:
            break
        if g.board[cell] != Mark.EMPTY:
            continue
        g.play(cell)
    # keep filling any free cell until the game is over
    while g.active:
        g.play(g.board.available_cells()[0])
    assert g.outcome().winner in (None, Mark.O)
    assert g.status_message() in ("Draw!", "O Wins!")


def test_play_after_game_over_rejected():
    g = make_game()
    while g.active:
        g.play(g.board.available_cells()[0])
    with pytest.raises(InvalidMove):
        g.play(g.board.available_cells()[0] if g.board.available_cells() else 0)


def test_human_win_reports_message_and_no_computer_move():
    g = make_game(difficulty=Difficulty.EASY)
    # force a position where X wins next move
    g.board.apply(0, Mark.X)
    g.board.apply(3, Mark.O)
    g.board.apply(1, Mark.X)
    g.board.apply(4, Mark.O)
    result = g.play(2)
    assert result.computer_move is None
    assert result.outcome == Outcome.win(Mark.X)
    assert g.status_message() == "X Wins!"
    assert not g.active


def test_human_o_computer_opens():
    g = make_game(human=Mark.O)
    assert g.computer == Mark.X
    assert len(g.history) == 1
    assert g.history[0][0] == Mark.X
    # hard with no depth discount opens in cell 0
    assert g.board[0] == Mark.X
    assert g.current == Mark.O


def test_restart_clears_board():
    g = make_game(difficulty=Difficulty.MEDIUM)
    g.play(4)
    assert g.restart() is None
    assert g.board.available_cells() == list(range(9))
    assert g.history == []
    assert g.current == Mark.X


def test_set_difficulty_restarts():
    g = make_game(difficulty=Difficulty.EASY)
    g.play(4)
    g.set_difficulty(Difficulty.MEDIUM)
    assert g.difficulty is Difficulty.MEDIUM
    assert g.board.available_cells() == list(range(9))


def test_set_difficulty_with_computer_first_reopens():
    g = make_game(difficulty=Difficulty.EASY, human=Mark.O)
    opening = g.set_difficulty("hard")
    assert opening == 0
    assert g.difficulty is Difficulty.HARD


def test_medium_session_blocks():
    g = make_game(difficulty=Difficulty.MEDIUM)
    g.board.apply(0, Mark.X)
    g.board.apply(8, Mark.O)
    result = g.play(1)
    assert result.computer_move == 2


def test_bad_human_mark():
    with pytest.raises(ValueError):
        Game(human=Mark.EMPTY)


def test_outcome_status_draw_message():
    g = make_game(difficulty=Difficulty.EASY)
    for idx, mark in zip([0, 1, 2, 4, 3, 5, 7, 6], [Mark.X, Mark.O] * 4):
        g.board.apply(idx, mark)
    g.play(8)
    assert g.outcome().status is Status.DRAW
    assert g.status_message() == "Draw!"
