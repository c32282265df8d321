"""Tests for minimax tic-tac-toe."""
import pytest
from gameai.core.minimax import Grid, Move, minimax, best_spot


def board(text):
    """Grid from a 9-character string, '_' for empty."""
    return Grid(" " if c == "_" else c for c in text)


class TestGrid:
    """Test cases for the tic-tac-toe grid."""

    def test_empty_indices(self):
        """Test listing empty squares."""
        assert board("__o_x____").empty_indices() == [0, 1, 3, 5, 6, 7, 8]

    def test_winning_lines(self):
        """Test row, column and diagonal wins."""
        assert board("xxx______").winning("x")
        assert board("o__o__o__").winning("o")
        assert board("x___x___x").winning("x")
        assert not board("xx_______").winning("x")

    def test_str(self):
        """Test text rendering."""
        assert str(board("xo_xo_xo_")) == "[x,o, \n x,o, \n x,o, ]"

    def test_invalid_squares(self):
        """Test that bad input is rejected."""
        with pytest.raises(ValueError):
            Grid("xo")
        with pytest.raises(ValueError):
            Grid("xoqxoxoxo")

    def test_copy_is_independent(self):
        """Test that a copy does not share squares."""
        grid = board("_________")
        other = grid.copy()
        other.set(0, "x")

        assert grid.squares[0] == " "
        assert grid != other


class TestMinimax:
    """Test cases for minimax search."""

    def test_takes_winning_square(self):
        """Test that an immediate win is chosen."""
        assert best_spot(board("xx_oo____"), "x", "o") == 2

    def test_blocks_opponent(self):
        """Test that the only non-losing square is chosen."""
        grid = board("x__oo_x__")

        root = minimax(grid, "x", "x", "o")

        assert root.best().spot_index == 5
        assert root.get_score() >= 0

    def test_terminal_positions(self):
        """Test full and won boards."""
        tie = board("xoxxoooxx")
        assert best_spot(tie, "x", "o") is None
        assert minimax(tie, "x", "x", "o").get_score() == 0

        won = minimax(board("xxxoo____"), "o", "x", "o")
        assert won.get_score() == 10
        assert won.best() is None

    def test_minimizer_score(self):
        """Test that a won position for the minimizer scores -10."""
        assert minimax(board("ooox_x___"), "x", "x", "o").get_score() == -10

    def test_last_square(self):
        """Test the tree below a single empty square."""
        root = minimax(board("xoxoxo_xo"), "x", "x", "o")

        assert root.count_nodes() == 2
        assert root.at(0).spot_index == 6
        assert root.get_score() == 10

    def test_grid_not_modified(self):
        """Test that the search leaves the input grid untouched."""
        grid = board("x__oo_x__")
        minimax(grid, "x", "x", "o")

        assert grid == board("x__oo_x__")

    def test_move_str(self):
        """Test Move rendering."""
        move = Move(board("xoxxoooxx"))

        assert str(move) == "[x,o,x\n x,o,o\n o,x,x]\n0\n0\n-1\n"
