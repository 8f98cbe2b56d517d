"""N-queens placement by column-wise backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def solve_n_queens(n: int) -> list[str] | None:
    """Return the first board found for ``n`` queens, one string per row, or None."""
    if n < 0:
        raise ValueError("board size must not be negative")
    queen_row: list[int] = []
    rows_used: set[int] = set()
    sums_used: set[int] = set()
    diffs_used: set[int] = set()

    def place(col: int) -> bool:
        if col == n:
            return True
        for row in range(n):
            if row in rows_used or row + col in sums_used or col - row in diffs_used:
                continue
            queen_row.append(row)
            rows_used.add(row)
            sums_used.add(row + col)
            diffs_used.add(col - row)
            if place(col + 1):
                return True
            queen_row.pop()
            rows_used.discard(row)
            sums_used.discard(row + col)
            diffs_used.discard(col - row)
        return False

    if not place(0):
        return None
    board = [["."] * n for _ in range(n)]
    for col, row in enumerate(queen_row):
        board[row][col] = "Q"
    return ["".join(row) for row in board]


def format_board(board: Sequence[str]) -> str:
    """Render a board with its cells separated by spaces, one row per line."""
    return "\n".join(" ".join(row) for row in board)