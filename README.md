# gridworks

Sudoku you can play in a terminal or in a pygame window, built around a
backtracking solver. A separate part is a small toolkit for 2-D matrices
that includes Strassen multiplication.

## Install

```
pip install .
```

This also installs `pygame`, which the window game and the `Button` widget need.

## Commands

### Terminal game

```
gridworks-sudoku
```

The game prints the built-in puzzle, with dots for empty cells. It then shows
a menu and reads one line per choice:

- `P` asks for a row, a column and a number, each from 1 to 9, and asks again
  until you give a valid one. The number goes into the cell if the cell is
  empty. If the cell is already filled, you get a message that it cannot be
  changed. Either way, the board is printed again.
- `S` solves the board by backtracking and prints the solved board. If the
  board has no solution, it says so instead.
- `C` only prints "Created new puzzle!". The board does not change.
- `Q` quits. Progress is not saved.

Any other choice prints "Invalid option. Try again." The game also ends when
input runs out.

### Window game

```
gridworks-sudoku-gui [--font PATH]
```

`--font` takes a TrueType font file. Without it, pygame's default font is used.
If the font cannot be loaded, the command prints "Failed to load font" and
exits with status 1.

To play:

1. Click **PLAY**.
2. Choose EASY, MEDIUM, HARD or EXPERT.
3. Click a cell and press a digit key from 1 to 9.

What happens to the digit:

- If it matches the solution, it goes into the empty cell.
- If it does not match, the "Incorrect" counter goes up.

What gets outlined:

- Select an empty cell, and that cell is outlined together with the filled
  cells in its row and column.
- Select a filled cell, and every cell that holds the same number is outlined
  in green.

A timer shows the elapsed time as `M:SS`. **SOLVE** fills in the whole board
and stops the timer. **Back** returns to the title screen. Escape or closing
the window quits.

### Matrix demo

```
gridworks-matrix
```

This builds two 4×4 matrices and fills them with random values from -10 to 10,
seeded the same way on every run. It prints both matrices, then prints their
product twice: once from Strassen's method and once from the schoolbook method.

## Library use

```python
from gridworks import matrix, sudoku

board = sudoku.sample_puzzle()
print(sudoku.valid_numbers(board, 0, 0))   # numbers still allowed in the top-left cell
sudoku.place(board, 0, 0, 1)               # row and column counted from zero
sudoku.solve(board)                        # fills the board in place, returns True if solved
print(sudoku.format_board(board))

a = matrix.fill_random(matrix.new_matrix(4, 4))
b = matrix.fill_random(matrix.new_matrix(4, 4))
print(matrix.format_matrix(matrix.strassen(a, b)))
print(matrix.format_matrix(matrix.multiply(a, b)))
```

### `gridworks.sudoku`

- `sample_puzzle()` returns a fresh copy of the built-in puzzle.
- `format_board(board)` renders a board as text.
- `valid_numbers(board, row, col)` lists the numbers not yet used in the cell's
  row, column or 3×3 box.
- `solve(board)` solves the board in place. If there is no solution, it returns
  `False` and leaves the board as it was.
- `place(board, row, col, value)` fills an empty cell. It raises `MoveError` in
  these cases:
  - the cell is outside the board;
  - the value is not from 1 to 9;
  - the cell already holds a number.

Any function given a board that is not 9 rows of 9 cells raises `ValueError`.

### `gridworks.matrix`

Matrices are lists of lists of floats. The module provides:

- `new_matrix`
- `fill_random`
- `format_matrix`
- `multiply`
- `add`
- `subtract`
- `vertical_stack`
- `horizontal_stack`
- `split`, which returns the four quadrants of an even-sized square matrix
- `strassen`, which takes square matrices whose size is 1, 2 or a power of two

Each of these raises `MatrixError`, a subclass of `ValueError`, in these cases:

- a matrix is empty;
- a matrix is ragged, meaning its rows differ in length;
- the dimensions do not fit the operation.

### `gridworks.console`, `gridworks.gui`, `gridworks.button`

`console.ConsoleGame` runs the terminal game. It takes a `read` callable that
returns one line and a `write` callable for output, so it can be driven
without a terminal.

`gui.GameState` holds the window game's screen, board, solution, selection and
counters, and needs no window. `gui.cell_at` maps a window point to a grid
cell. `gui.format_time` renders the timer text.

`button.Button` is a pygame rectangle with a centred label. It changes colour
when hovered or pressed and reports left-button clicks.

## What it does not do

There is only the one built-in puzzle. The package does not generate new
puzzles:

- The difficulty level chosen in the window game is recorded, but the puzzle
  stays the same.
- The terminal game's `C` choice does not make a new board.

Games cannot be saved or loaded.

## Tests

```
pip install .[test]
pytest
```