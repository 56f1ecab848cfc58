"""A terminal Sudoku game driven by a simple menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from gridworks.sudoku import Board, MoveError, format_board, place, sample_puzzle, solve


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write(text: str) -> None:
    sys.stdout.write(text)


class ConsoleGame:
    """Menu-driven Sudoku played through line-based input and text output.

    ``read`` returns one line of input and raises EOFError when input ends;
    ``write`` receives text to show.
    """

    def __init__(
        self,
        board: Board | None = None,
        read: Callable[[], str] = _read_line,
        write: Callable[[str], None] = _write,
    ) -> None:
        self.board = board if board is not None else sample_puzzle()
        self.read = read
        self.write = write

    def ask_number(self, label: str) -> int:
        """Prompt until a number from 1 to 9 is entered."""
        self.write(f"{label}(1-9): ")
        while True:
            text = self.read().strip()
            try:
                value = int(text)
            except ValueError:
                value = 0
            if 1 <= value <= 9:
                return value
            self.write(f"Please give valid {label}(1-9): ")

    def ask_move(self) -> tuple[int, int, int]:
        """Ask for a row, column and number, all counted from 1."""
        self.write("Please let me know what row, column and the number you want to try! \n")
        return self.ask_number("Row"), self.ask_number("Col"), self.ask_number("Number")

    def step(self) -> bool:
        """Show the menu and carry out one choice; return False when the player quits."""
        self.write(
            "What would you like to do? \n"
            "Press C to create new game!\n"
            "Press P to solve the puzzle!\n"
            "Press S to get the Solution!\n"
            "Press Q to quit the program! \n"
            "Option: "
        )
        text = self.read().strip()
        choice = text[:1].upper()
        self.write("\n")

        if choice == "C":
            self.write("Created new puzzle!")
        elif choice == "P":
            self.write("Call add function!\n")
            row, col, number = self.ask_move()
            try:
                place(self.board, row - 1, col - 1, number)
            except MoveError:
                self.write(f"You can not change number in this position, Row:{row}, Col:{col}.\n")
            self.write(format_board(self.board))
        elif choice == "Q":
            self.write("No Progress will be saved! Goodbye! \n")
            return False
        elif choice == "S":
            self.write("Call solve Function! \n")
            if solve(self.board):
                self.write(format_board(self.board))
            else:
                self.write("This puzzle has no solution.\n")
        else:
            self.write("Invalid option. Try again.\n")
        return True

    def run(self) -> None:
        """Show the board and keep taking choices until the player quits or input ends."""
        self.write("Sudoku Game \n")
        self.write(format_board(self.board))
        while True:
            try:
                if not self.step():
                    return
            except EOFError:
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Play the built-in puzzle in the terminal."""
    parser = argparse.ArgumentParser(description="Play Sudoku in the terminal.")
    parser.parse_args(argv)
    ConsoleGame().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())