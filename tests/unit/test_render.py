"""
Unit tests for text rendering.
"""
from minesweeper import Board, render_board
from minesweeper.render import row_label


class TestRenderBoard:
    """Test board rendering."""

    def test_new_board_is_all_hidden(self) -> None:
        """Fresh board renders header and underscores."""
        board = Board(4, 1)
        expected = "\n".join([
            "  1 2 3 4",
            "A _ _ _ _",
            "B _ _ _ _",
            "C _ _ _ _",
            "D _ _ _ _",
        ])
        assert render_board(board) == expected

    def test_player_view_after_cascade(self, corner_mine_board: Board) -> None:
        """Revealed cells show counts while the mine stays hidden."""
        corner_mine_board.reveal(0, 0)
        lines = render_board(corner_mine_board).splitlines()
        assert lines[1] == "A 0 0 0 0 0"
        assert lines[4] == "D 0 0 0 1 1"
        assert lines[5] == "E 0 0 0 1 _"

    def test_reveal_all_shows_solution(self, corner_mine_board: Board) -> None:
        """Solution view shows every mine and count."""
        corner_mine_board.reveal(0, 0)
        lines = render_board(corner_mine_board, reveal_all=True).splitlines()
        assert lines[5] == "E 0 0 0 1 *"

    def test_row_labels(self) -> None:
        """Rows are lettered from A."""
        assert row_label(0) == "A"
        assert row_label(25) == "Z"
