"""
Tests for the board, win checker and move validator.
"""

import itertools

import numpy as np
import pytest

from tictactoe import Board, ErrorKind, Mark, Move, MoveValidator, Outcome, Player, Status, WinChecker

X, O, _ = "X", "O", None


@pytest.fixture
def checker():
    return WinChecker()


@pytest.fixture
def validator():
    return MoveValidator()


class TestBoard:
    """Board construction and value semantics."""

    def test_empty_board(self):
        board = Board.empty()
        assert board.cells.shape == (3, 3)
        assert all(mark == Mark.EMPTY for row in board.rows() for mark in row)
        assert len(board.empty_cells()) == 9

    def test_from_rows_accepts_mixed_values(self):
        board = Board.from_rows([
            [Mark.X, Player.O, "x"],
            [None, "", " "],
            [".", "O", Mark.EMPTY],
        ])
        assert board[0, 0] == Mark.X
        assert board[0, 1] == Mark.O
        assert board[0, 2] == Mark.X
        assert board[2, 1] == Mark.O
        assert board.count(Mark.EMPTY) == 5

    def test_from_rows_rejects_unknown_values(self):
        with pytest.raises(ValueError):
            Board.from_rows([["Z", _, _], [_, _, _], [_, _, _]])

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            Board(np.zeros((4, 4), dtype=np.int8))

    def test_cells_are_read_only(self):
        board = Board.empty()
        with pytest.raises(ValueError):
            board.cells[0, 0] = Mark.X

    def test_with_mark_returns_new_board(self):
        board = Board.empty()
        new_board = board.with_mark(1, 1, Mark.O)
        assert new_board[1, 1] == Mark.O
        assert board[1, 1] == Mark.EMPTY

    def test_equality_and_hash(self):
        a = Board.from_rows([[X, _, _], [_, O, _], [_, _, _]])
        b = Board.empty().with_mark(0, 0, Mark.X).with_mark(1, 1, Mark.O)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Board.empty()

    def test_to_list_is_a_copy(self):
        board = Board.empty()
        cells = board.to_list()
        cells[4] = int(Mark.X)
        assert board[1, 1] == Mark.EMPTY


class TestWinChecker:
    """Win and draw detection."""

    @pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
    @pytest.mark.parametrize("player", [Player.X, Player.O])
    def test_each_line_wins(self, checker, line, player):
        board = Board.empty()
        for row, col in line:
            board = board.with_mark(row, col, player.mark)
        assert checker.check_winner(board) == player
        assert checker.get_winning_line(board) == [Move(r, c) for r, c in line]
        assert checker.evaluate_status(board) == Status.win(player)

    def test_no_winner_on_empty_board(self, checker):
        board = Board.empty()
        assert checker.check_winner(board) is None
        assert not checker.check_draw(board)
        assert checker.evaluate_status(board).outcome == Outcome.IN_PROGRESS

    def test_mixed_line_is_not_a_win(self, checker):
        board = Board.from_rows([[X, X, O], [_, _, _], [_, _, _]])
        assert checker.check_winner(board) is None
        assert checker.get_winning_line(board) is None

    def test_draw(self, checker):
        board = Board.from_rows([[X, O, X], [X, O, O], [O, X, X]])
        assert checker.check_winner(board) is None
        assert checker.check_draw(board)
        assert checker.evaluate_status(board) == Status.draw()

    def test_full_board_with_winner_is_not_a_draw(self, checker):
        board = Board.from_rows([[X, X, X], [O, O, X], [X, O, O]])
        assert checker.check_winner(board) == Player.X
        assert not checker.check_draw(board)
        assert checker.evaluate_status(board) == Status.win(Player.X)

    def test_winner_matches_uniform_lines_on_every_board(self, checker):
        for values in itertools.product((Mark.EMPTY, Mark.X, Mark.O), repeat=9):
            owners = {
                values[r1 * 3 + c1]
                for (r1, c1), (r2, c2), (r3, c3) in WinChecker.WINNING_LINES
                if values[r1 * 3 + c1] != Mark.EMPTY
                and values[r1 * 3 + c1] == values[r2 * 3 + c2] == values[r3 * 3 + c3]
            }
            # Boards where both players own a line can't come up in play
            if len(owners) > 1:
                continue

            board = Board(np.array(values, dtype=np.int8).reshape(3, 3))
            winner = checker.check_winner(board)
            if owners:
                assert winner == owners.pop().player
                assert not checker.check_draw(board)
            else:
                assert winner is None
                assert checker.check_draw(board) == (Mark.EMPTY not in values)

    def test_status_text(self):
        assert str(Status.in_progress()) == "Playing"
        assert str(Status.win(Player.O)) == "O Wins!"
        assert str(Status.draw()) == "Draw!"


class TestMoveValidator:
    """Legality and move application."""

    def test_valid_moves_are_row_major(self, validator):
        board = Board.from_rows([[X, _, _], [_, O, _], [_, _, X]])
        assert validator.get_valid_moves(board) == [
            (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1),
        ]

    def test_no_valid_moves_on_full_board(self, validator):
        board = Board.from_rows([[X, O, X], [X, O, O], [O, X, X]])
        assert validator.get_valid_moves(board) == []

    def test_apply_move(self, validator):
        board = Board.empty()
        result = validator.apply_move(board, 2, 1, Player.O)
        assert result.is_valid
        assert result.value[2, 1] == Mark.O
        assert board[2, 1] == Mark.EMPTY

    def test_occupied_cell_rejected(self, validator):
        board = Board.empty().with_mark(1, 1, Mark.X)
        before = board.tobytes()

        result = validator.apply_move(board, 1, 1, Player.O)

        assert not result.is_valid
        assert result.error == ErrorKind.INVALID_MOVE
        assert "occupied" in result.error_message
        assert result.value is board
        assert board.tobytes() == before

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 3), (0, -1)])
    def test_out_of_range_rejected(self, validator, row, col):
        board = Board.empty()
        before = board.tobytes()

        result = validator.apply_move(board, row, col, Player.X)

        assert result.error == ErrorKind.INVALID_MOVE
        assert board.tobytes() == before

    @pytest.mark.parametrize("row, col", [(1.0, 1), ("1", 1), (True, 0)])
    def test_non_integer_rejected(self, validator, row, col):
        result = validator.validate_move(Board.empty(), row, col)
        assert result.error == ErrorKind.INVALID_MOVE

    def test_numpy_integers_accepted(self, validator):
        result = validator.validate_move(Board.empty(), np.int64(2), np.int8(0))
        assert result.is_valid
