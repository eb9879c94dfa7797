"""
Text rendering of a Minesweeper board.

Rows are labelled with letters starting at 'A' and columns with
1-based numbers, matching the coordinates the console game accepts.
"""
from .board import Board


def row_label(row: int) -> str:
    """Letter used for a 0-based row index."""
    return chr(ord("A") + row)


def render_board(board: Board, reveal_all: bool = False) -> str:
    """
    Render board as a text grid.

    Args:
        board: Board to render.
        reveal_all: Show mines and counts for every cell, used once
            the game has ended.

    Returns:
        Multi-line string with a column header and one line per row.
    """
    header = "  " + " ".join(str(col + 1) for col in range(board.size))
    lines = [header]

    for row in range(board.size):
        symbols = []
        for col in range(board.size):
            cell = board.get_cell(row, col)
            symbols.append(cell.solution_symbol if reveal_all else cell.symbol)
        lines.append(f"{row_label(row)} " + " ".join(symbols))

    return "\n".join(lines)
