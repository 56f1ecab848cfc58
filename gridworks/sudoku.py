"""Sudoku boards: formatting, candidate numbers, placement and a backtracking solver."""

from __future__ import annotations

Board = list[list[int]]

_SAMPLE = (
    (0, 0, 0, 4, 0, 0, 0, 9, 2),
    (0, 0, 9, 7, 0, 3, 0, 0, 0),
    (0, 6, 0, 0, 0, 0, 0, 0, 4),
    (0, 1, 3, 0, 0, 0, 0, 0, 0),
    (2, 0, 7, 8, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 2, 0, 5, 0),
    (8, 0, 0, 0, 5, 0, 0, 4, 0),
    (7, 0, 0, 0, 9, 0, 1, 0, 8),
    (0, 0, 0, 0, 0, 4, 0, 0, 0),
)

DIGITS = range(1, 10)


class MoveError(ValueError):
    """Raised when a number cannot be placed on the board."""


def _check_board(board: Board) -> None:
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def sample_puzzle() -> Board:
    """Return a fresh copy of the built-in puzzle."""
    return [list(row) for row in _SAMPLE]


def format_board(board: Board) -> str:
    """Render a board with dots for empty cells and gaps between 3x3 boxes."""
    _check_board(board)
    lines = []
    for i, row in enumerate(board):
        prefix = "\n" if i % 3 == 0 else ""
        cells = []
        for j, value in enumerate(row):
            cells.append(f"{value}  " if value else ".  ")
            if (j + 1) % 3 == 0:
                cells.append("  ")
        lines.append(prefix + "".join(cells) + "\n")
    return "".join(lines) + "\n"


def valid_numbers(board: Board, row: int, col: int) -> list[int]:
    """Numbers 1-9 not yet used in the cell's row, column or 3x3 box, in ascending order."""
    _check_board(board)
    used = set(board[row])
    used.update(r[col] for r in board)
    top, left = (row // 3) * 3, (col // 3) * 3
    used.update(value for r in board[top:top + 3] for value in r[left:left + 3])
    return [n for n in DIGITS if n not in used]


def solve(board: Board) -> bool:
    """Solve the board in place by backtracking; return whether a solution was found.

    Empty cells are filled in reading order and candidates are tried in ascending
    order. On failure the board is left as it was.
    """
    _check_board(board)
    rows = [set(r) for r in board]
    cols = [set(c) for c in zip(*board)]
    boxes: list[set[int]] = [set() for _ in range(9)]
    empties = []
    for r, line in enumerate(board):
        for c, value in enumerate(line):
            if value:
                boxes[_box(r, c)].add(value)
            else:
                empties.append((r, c))

    def fill(k: int) -> bool:
        if k == len(empties):
            return True
        r, c = empties[k]
        b = _box(r, c)
        for n in DIGITS:
            if n in rows[r] or n in cols[c] or n in boxes[b]:
                continue
            board[r][c] = n
            rows[r].add(n)
            cols[c].add(n)
            boxes[b].add(n)
            if fill(k + 1):
                return True
            rows[r].discard(n)
            cols[c].discard(n)
            boxes[b].discard(n)
            board[r][c] = 0
        return False

    return fill(0)


def place(board: Board, row: int, col: int, value: int) -> None:
    """Put value into the empty cell at (row, col), counted from zero."""
    _check_board(board)
    if not (0 <= row < 9 and 0 <= col < 9):
        raise MoveError(f"cell ({row}, {col}) is outside the board")
    if value not in DIGITS:
        raise MoveError(f"{value} is not a number from 1 to 9")
    if board[row][col]:
        raise MoveError(f"cell ({row}, {col}) already holds a number")
    board[row][col] = value