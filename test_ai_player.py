"""
Tests for the minimax AI player.
"""

import pytest

from tictactoe import AIPlayer, Board, MoveValidator, Player, WinChecker

X, O, _ = "X", "O", None


def test_takes_immediate_win():
    board = Board.from_rows([[X, O, X], [O, X, O], [_, _, _]])
    ai = AIPlayer(Player.X)

    scores = ai.score_moves(board)
    move = ai.get_best_move(board)

    # Both bottom corners complete a diagonal; row-major order picks (2, 0)
    assert scores[(2, 0)] == 10
    assert scores[(2, 2)] == 10
    assert max(scores.values()) == 10
    assert move == (2, 0)
    assert WinChecker().check_winner(board.with_mark(*move, Player.X.mark)) == Player.X


def test_blocks_forced_loss():
    board = Board.from_rows([[X, X, _], [O, _, _], [_, _, _]])
    ai = AIPlayer(Player.O)

    scores = ai.score_moves(board)

    assert ai.get_best_move(board) == (0, 2)
    # Every other reply lets X complete the top row next ply
    for move, score in scores.items():
        if move != (0, 2):
            assert score == -9
    assert scores[(0, 2)] > -9


def test_first_move_tie_break():
    ai = AIPlayer(Player.X)
    scores = ai.score_moves(Board.empty())

    assert list(scores) == [(r, c) for r in range(3) for c in range(3)]
    assert set(scores.values()) == {0}
    assert ai.get_best_move(Board.empty()) == (0, 0)


def test_prefers_faster_win():
    board = Board.from_rows([[X, O, O], [_, X, _], [_, _, _]])
    ai = AIPlayer(Player.X)

    scores = ai.score_moves(board)

    assert scores[(2, 2)] == 10
    # (1, 0) also wins by force, but one move later
    assert scores[(1, 0)] == 8
    assert ai.get_best_move(board) == (2, 2)


def test_prefers_slowest_loss_and_breaks_ties_in_order():
    # X threatens both (0, 2) and (2, 0); O cannot stop both
    board = Board.from_rows([[X, X, _], [X, O, _], [_, _, O]])
    ai = AIPlayer(Player.O)

    scores = ai.score_moves(board)

    assert set(scores.values()) == {-9}
    assert ai.get_best_move(board) == (0, 2)


def test_is_deterministic():
    board = Board.from_rows([[X, _, _], [_, O, _], [_, _, X]])
    ai = AIPlayer(Player.O)
    moves = {ai.get_best_move(board) for _ in range(3)}
    assert len(moves) == 1
    assert AIPlayer(Player.O).get_best_move(board) in moves


def test_search_leaves_board_untouched():
    board = Board.from_rows([[X, _, _], [_, _, _], [_, _, _]])
    before = board.tobytes()
    AIPlayer(Player.O).get_best_move(board)
    assert board.tobytes() == before


def test_counts_positions():
    board = Board.from_rows([[X, O, X], [O, X, O], [_, _, _]])
    ai = AIPlayer(Player.X)
    ai.get_best_move(board)
    assert ai.positions_evaluated > 0


@pytest.mark.parametrize("rows", [
    [[X, X, X], [O, O, _], [_, _, _]],   # already won
    [[X, O, X], [X, O, O], [O, X, X]],   # full
])
def test_terminal_board_is_rejected(rows):
    with pytest.raises(ValueError):
        AIPlayer(Player.O).get_best_move(Board.from_rows(rows))


def test_move_suggestion():
    ai = AIPlayer(Player.O)
    board = Board.from_rows([[X, X, _], [O, _, _], [_, _, _]])
    assert ai.get_move_suggestion(board) == "Place O at position (0, 2)"
    assert ai.get_move_suggestion(Board.from_rows([[X, X, X], [O, O, _], [_, _, _]])) == "No moves available!"


def test_optimal_play_is_a_draw():
    checker = WinChecker()
    validator = MoveValidator()
    players = {Player.X: AIPlayer(Player.X), Player.O: AIPlayer(Player.O)}

    board = Board.empty()
    to_move = Player.X
    while not checker.evaluate_status(board).is_terminal:
        row, col = players[to_move].get_best_move(board)
        board = validator.apply_move(board, row, col, to_move).value
        to_move = to_move.opposite()

    assert checker.check_winner(board) is None
    assert checker.check_draw(board)


@pytest.mark.parametrize("opening", [(r, c) for r in range(3) for c in range(3)])
def test_never_loses_after_any_opening(opening):
    # Human X opens anywhere and then plays the first free cell; O must not lose
    checker = WinChecker()
    ai = AIPlayer(Player.O)

    board = Board.empty().with_mark(*opening, Player.X.mark)
    to_move = Player.O
    while not checker.evaluate_status(board).is_terminal:
        if to_move == Player.O:
            row, col = ai.get_best_move(board)
        else:
            row, col = board.empty_cells()[0]
        board = board.with_mark(row, col, to_move.mark)
        to_move = to_move.opposite()

    assert checker.check_winner(board) != Player.X
