"""
Tests for the game session: moves, turns, score, and resets.
"""

import logging

import pytest

from tictactoe_game.config import GameConfig
from tictactoe_game.game_state import Mark, RoundState, Score
from tictactoe_game.session import GameSession


def play(session, moves):
    for index in moves:
        session.play_move(index)
    return session


# X: 0 2 3 7 8, O: 1 4 5 6 -> X O X / X O O / O X X
DRAW_MOVES = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def test_new_session():
    session = GameSession()
    assert session.board == (None,) * 9
    assert session.current_mark == Mark.X
    assert session.state == RoundState.IN_PROGRESS
    assert session.score == Score(0, 0, 0)
    assert session.status == "Turn: X"
    assert session.valid_moves == list(range(9))


def test_x_wins_top_row():
    session = play(GameSession(), [0, 3, 1, 4, 2])

    assert session.state == RoundState.WON
    assert session.winner == Mark.X
    assert session.winning_line == (0, 1, 2)
    assert session.status == "Winner: X"
    assert session.score == Score(x_wins=1, o_wins=0, draws=0)
    # Winning move does not hand the turn over
    assert session.current_mark == Mark.X


def test_draw():
    session = play(GameSession(), DRAW_MOVES)

    assert [cell.value for cell in session.board] == ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    assert session.state == RoundState.DRAWN
    assert session.winner is None
    assert session.winning_line is None
    assert session.status == "It's a draw."
    assert session.score == Score(x_wins=0, o_wins=0, draws=1)


def test_occupied_cell_is_ignored():
    session = GameSession()
    assert session.play_move(0) is True
    board = session.board

    assert session.play_move(0) is False
    assert session.board == board
    assert session.current_mark == Mark.O


def test_turns_alternate():
    session = GameSession()
    marks = []
    for index in (4, 0, 8):
        marks.append(session.current_mark)
        session.play_move(index)
    assert marks == [Mark.X, Mark.O, Mark.X]
    assert session.board[4] == Mark.X
    assert session.board[0] == Mark.O
    assert session.current_mark == Mark.O


@pytest.mark.parametrize("index", [-1, 9, 100, 1.0, "4", None, True])
def test_bad_index_is_ignored(index):
    session = GameSession()
    assert session.play_move(index) is False
    assert session.board == (None,) * 9
    assert session.current_mark == Mark.X


def test_moves_after_win_are_ignored():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    snapshot = session.snapshot()

    for index in (5, 6, 7, 8):
        assert session.play_move(index) is False

    assert session.snapshot() == snapshot
    assert session.valid_moves == []
    assert not session.can_play


def test_moves_after_draw_are_ignored():
    session = play(GameSession(), DRAW_MOVES)
    session.play_move(0)
    assert session.score.draws == 1
    assert session.state == RoundState.DRAWN


def test_reset_round_keeps_score():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    session.reset_round()

    assert session.board == (None,) * 9
    assert session.current_mark == Mark.X
    assert session.state == RoundState.IN_PROGRESS
    assert session.score == Score(x_wins=1)


def test_reset_round_mid_game():
    session = play(GameSession(), [4, 0])
    session.reset_round()
    assert session.board == (None,) * 9
    assert session.current_mark == Mark.X
    assert session.score == Score()


def test_reset_all_zeroes_score():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    session.reset_round()
    play(session, DRAW_MOVES)
    session.reset_all()

    assert session.board == (None,) * 9
    assert session.current_mark == Mark.X
    assert session.state == RoundState.IN_PROGRESS
    assert session.score == Score(0, 0, 0)


def test_score_accumulates_across_rounds():
    session = GameSession()
    # X wins
    play(session, [0, 3, 1, 4, 2])
    session.reset_round()
    # O wins the middle row
    play(session, [0, 3, 1, 4, 8, 5])
    session.reset_round()
    play(session, DRAW_MOVES)

    assert session.score.as_dict() == {"X": 1, "O": 1, "draws": 1}
    assert session.score.wins_for(Mark.O) == 1


def test_score_projection_is_a_copy():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    score = session.score
    score.reset()
    assert session.score.x_wins == 1


def test_board_projection_is_a_copy():
    session = GameSession()
    board = session.board
    assert isinstance(board, tuple)
    session.play_move(0)
    assert board[0] is None


def test_cell_flags():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    assert not any(session.is_cell_playable(index) for index in range(9))
    assert [index for index in range(9) if session.is_highlighted(index)] == [0, 1, 2]

    session.reset_round()
    session.play_move(4)
    assert not session.is_cell_playable(4)
    assert session.is_cell_playable(0)
    assert not session.is_cell_playable(9)
    assert not session.is_highlighted(4)


def test_snapshot():
    session = play(GameSession(), [0, 3, 1, 4, 2])
    assert session.snapshot() == {
        "board": ["X", "X", "X", "O", "O", None, None, None, None],
        "current_mark": "X",
        "state": "won",
        "status": "Winner: X",
        "winning_line": [0, 1, 2],
        "score": {"X": 1, "O": 0, "draws": 0},
        "valid_moves": [],
    }


def test_render():
    session = play(GameSession(), [0, 4])
    assert session.render() == "X . .\n. O .\n. . ."


def test_custom_status_text():
    class ShortConfig(GameConfig):
        STATUS_TURN = "{mark} to move"
        STATUS_WIN = "{mark} wins"
        STATUS_DRAW = "draw"

    session = GameSession(ShortConfig)
    assert session.status == "X to move"
    play(session, [0, 3, 1, 4, 2])
    assert session.status == "X wins"
    session.reset_round()
    play(session, DRAW_MOVES)
    assert session.status == "draw"


def test_camel_case_names():
    session = GameSession()
    session.playMove(0)
    assert session.board[0] == Mark.X
    session.resetRound()
    assert session.board == (None,) * 9
    play(session, [0, 3, 1, 4, 2])
    session.resetAll()
    assert session.score == Score()


def test_from_board_in_progress():
    session = GameSession.from_board(["X", "O", "X", None, None, None, None, None, None])
    assert session.current_mark == Mark.O
    assert session.state == RoundState.IN_PROGRESS
    assert session.play_move(4) is True
    assert session.board[4] == Mark.O


def test_from_board_won():
    session = GameSession.from_board(["O", "O", "O", "X", "X", None, "X", None, None])
    assert session.state == RoundState.WON
    assert session.winner == Mark.O
    assert session.current_mark == Mark.O
    assert session.score == Score()
    assert session.play_move(5) is False


def test_from_board_draw():
    session = GameSession.from_board(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert session.state == RoundState.DRAWN
    assert session.status == "It's a draw."


@pytest.mark.parametrize("board", [
    [None] * 8,
    [None] * 10,
    ["Z", None, None, None, None, None, None, None, None],
])
def test_from_board_rejects_bad_board(board):
    with pytest.raises(ValueError):
        GameSession.from_board(board)


def test_ignored_move_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="tictactoe_game")
    session = GameSession()
    session.play_move(0)
    session.play_move(0)

    ignored = [r for r in caplog.records if "Ignored move" in r.getMessage()]
    assert len(ignored) == 1
    assert ignored[0].levelno == logging.DEBUG
    assert "already occupied" in ignored[0].getMessage()


def test_round_result_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="tictactoe_game")
    play(GameSession(), [0, 3, 1, 4, 2])
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert "X wins with line [0, 1, 2]" in messages
