"""A windowed Sudoku game: screen state, input handling and pygame drawing."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from collections.abc import Sequence

import pygame

from gridworks.button import Button
from gridworks.sudoku import Board, sample_puzzle, solve

SCREEN_SIZE = (800, 750)
CELL_SIZE = 76
WIDTH_OFFSET = 58
HEIGHT_OFFSET = 8
GRID_SIZE = CELL_SIZE * 9

BACKGROUND = (33, 52, 72)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

SELECTED_COLOR = (255, 50, 50)
PEER_COLOR = (100, 30, 30)
MATCH_COLOR = (0, 255, 0)

LEVELS = ("EASY", "MEDIUM", "HARD", "EXPERT")

Cell = tuple[int, int]
Color = tuple[int, int, int]


class Screen(enum.Enum):
    PLAY = "play"
    LEVEL = "level"
    GAME = "game"


def cell_at(x: int, y: int) -> Cell:
    """Return the (row, column) of the grid cell under window point (x, y)."""
    return int((y - HEIGHT_OFFSET) / CELL_SIZE), int((x - WIDTH_OFFSET) / CELL_SIZE)


def format_time(seconds: float) -> str:
    """Render elapsed seconds as 'Time: M:SS'."""
    minutes, secs = divmod(int(seconds), 60)
    return f"Time: {minutes}:{secs:02d}"


class GameState:
    """Which screen is shown, the board, its solution and the player's progress."""

    def __init__(self, puzzle: Board | None = None) -> None:
        self.puzzle: Board = [list(row) for row in (puzzle if puzzle is not None else sample_puzzle())]
        self.solution: Board = [list(row) for row in self.puzzle]
        if not solve(self.solution):
            raise ValueError("puzzle has no solution")
        self.screen = Screen.PLAY
        self.level = 0
        self.selected: Cell | None = None
        self.incorrect = 0
        self.solved = False
        self.timer_started = False

    def press_play(self) -> bool:
        """Leave the title screen for level selection."""
        if self.screen is not Screen.PLAY:
            return False
        self.screen = Screen.LEVEL
        return True

    def choose_level(self, level: int) -> bool:
        """Pick a difficulty (an index into LEVELS) and start the game."""
        if not 0 <= level < len(LEVELS):
            raise ValueError(f"level must be from 0 to {len(LEVELS) - 1}")
        if self.screen is not Screen.LEVEL:
            return False
        self.level = level
        self.screen = Screen.GAME
        return True

    def select_at(self, x: int, y: int) -> bool:
        """Select the cell under a click, if the click falls inside the grid."""
        inside = (
            WIDTH_OFFSET < x < WIDTH_OFFSET + GRID_SIZE
            and HEIGHT_OFFSET < y < HEIGHT_OFFSET + GRID_SIZE
        )
        if self.screen is not Screen.GAME or not inside:
            return False
        self.selected = cell_at(x, y)
        return True

    def enter_number(self, value: int) -> bool:
        """Try a number in the selected empty cell; return whether it was placed.

        A number that does not match the solution counts as incorrect.
        """
        if self.screen is not Screen.GAME or self.selected is None or not 1 <= value <= 9:
            return False
        row, col = self.selected
        if self.puzzle[row][col]:
            return False
        if self.solution[row][col] == value:
            self.puzzle[row][col] = value
            return True
        self.incorrect += 1
        return False

    def reveal_solution(self) -> None:
        """Fill the board with its solution and stop the timer."""
        self.puzzle = [list(row) for row in self.solution]
        self.solved = True

    def go_back(self) -> None:
        """Return to the title screen."""
        self.screen = Screen.PLAY
        self.solved = False
        self.timer_started = False

    def highlights(self) -> list[tuple[Cell, Color]]:
        """Cells to outline for the current selection, with their colours.

        An empty selection is outlined together with the filled cells in its row
        and column; a filled one together with every cell holding the same number.
        """
        if self.selected is None:
            return []
        row, col = self.selected
        value = self.puzzle[row][col]
        if value:
            return [
                ((r, c), MATCH_COLOR)
                for r, line in enumerate(self.puzzle)
                for c, cell in enumerate(line)
                if cell == value
            ]
        marks: list[tuple[Cell, Color]] = [((row, col), SELECTED_COLOR)]
        marks += [((row, c), PEER_COLOR) for c, cell in enumerate(self.puzzle[row]) if c != col and cell]
        marks += [((r, col), PEER_COLOR) for r, line in enumerate(self.puzzle) if r != row and line[col]]
        return marks


class _Fonts:
    def __init__(self, path: str | None) -> None:
        self.path = path
        self.cache: dict[int, pygame.font.Font] = {}

    def __call__(self, size: int) -> pygame.font.Font:
        if size not in self.cache:
            self.cache[size] = pygame.font.Font(self.path, size)
        return self.cache[size]


def _draw_text(surface: pygame.Surface, font: pygame.font.Font, text: str, color: Color, topleft: tuple[int, int]) -> None:
    surface.blit(font.render(text, True, color), topleft)


def _draw_grid(surface: pygame.Surface) -> None:
    bottom = HEIGHT_OFFSET + GRID_SIZE
    right = WIDTH_OFFSET + GRID_SIZE
    for i in range(10):
        x = WIDTH_OFFSET + CELL_SIZE * i
        y = HEIGHT_OFFSET + CELL_SIZE * i
        if i % 3:
            pygame.draw.line(surface, BLACK, (x, HEIGHT_OFFSET), (x, bottom))
            pygame.draw.line(surface, BLACK, (WIDTH_OFFSET, y), (right, y))
        else:
            pygame.draw.rect(surface, BLACK, pygame.Rect(x - 3, HEIGHT_OFFSET, 3, GRID_SIZE))
            pygame.draw.rect(surface, BLACK, pygame.Rect(WIDTH_OFFSET - 3, y - 3, GRID_SIZE + 3, 3))


def _draw_game(surface: pygame.Surface, fonts: _Fonts, state: GameState, elapsed: float) -> None:
    surface.fill(BACKGROUND)
    _draw_grid(surface)

    for (row, col), color in state.highlights():
        box = pygame.Rect(
            WIDTH_OFFSET + 5 + col * CELL_SIZE - 3,
            HEIGHT_OFFSET + 5 + row * CELL_SIZE - 3,
            CELL_SIZE - 10 + 6,
            CELL_SIZE - 10 + 6,
        )
        pygame.draw.rect(surface, color, box, width=3)

    if state.incorrect:
        _draw_text(surface, fonts(30), f"Incorrect: {state.incorrect}", RED, (50, 705))
    _draw_text(surface, fonts(30), format_time(elapsed), WHITE, (250, 705))

    number_font = fonts(35)
    for i, line in enumerate(state.puzzle):
        for j, value in enumerate(line):
            if not value:
                continue
            label = number_font.render(str(value), True, WHITE)
            center = (
                WIDTH_OFFSET + CELL_SIZE * j + CELL_SIZE // 2,
                HEIGHT_OFFSET + CELL_SIZE * i + CELL_SIZE // 2,
            )
            surface.blit(label, label.get_rect(center=center))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the Sudoku window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Play Sudoku in a window.")
    parser.add_argument("--font", default=None, help="TrueType font file to use (default: pygame's font)")
    args = parser.parse_args(argv)

    state = GameState()

    pygame.init()
    try:
        fonts = _Fonts(args.font)
        try:
            button_font = fonts(30)
        except (OSError, pygame.error):
            print("Failed to load font", file=sys.stderr)
            return 1

        window = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Sudoku")

        play = Button((200, 50), (300, 475), "PLAY", button_font)
        level_buttons = []
        level_colors = (
            ((122, 245, 122), (120, 255, 120), (70, 210, 70)),
            ((245, 224, 20), (255, 220, 60), (200, 150, 0)),
            ((235, 122, 20), (255, 130, 30), (180, 70, 0)),
            ((214, 20, 20), (230, 0, 0), (150, 0, 0)),
        )
        for index, (name, colors) in enumerate(zip(LEVELS, level_colors)):
            button = Button((300, 50), (250, 300 + 60 * index), name, button_font)
            button.set_colors(*colors)
            level_buttons.append(button)
        solve_button = Button((150, 30), (600, 705), "SOLVE", button_font)
        solve_button.set_colors((214, 20, 20), (230, 0, 0), (150, 0, 0))
        back_button = Button((150, 30), (440, 705), "Back", button_font)
        back_button.set_colors((122, 245, 122), (120, 255, 120), (70, 210, 70))

        clock = pygame.time.Clock()
        started_at = time.monotonic()
        elapsed = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    running = False
                mouse = pygame.mouse.get_pos()

                if state.screen is Screen.PLAY and play.is_clicked(event, mouse):
                    state.press_play()
                    continue
                if state.screen is Screen.LEVEL:
                    chosen = next(
                        (i for i, b in enumerate(level_buttons) if b.is_clicked(event, mouse)), None
                    )
                    if chosen is not None:
                        state.choose_level(chosen)
                        continue
                if state.screen is Screen.GAME and solve_button.is_clicked(event, mouse):
                    state.reveal_solution()
                    continue
                if state.screen is Screen.GAME and back_button.is_clicked(event, mouse):
                    state.go_back()
                    continue

                if event.type == pygame.MOUSEBUTTONDOWN:
                    state.select_at(*mouse)
                if event.type == pygame.KEYDOWN and pygame.K_1 <= event.key <= pygame.K_9:
                    state.enter_number(event.key - pygame.K_0)

            mouse = pygame.mouse.get_pos()
            left = pygame.mouse.get_pressed()[0]
            if state.screen is Screen.PLAY:
                window.fill(BACKGROUND)
                _draw_text(window, fonts(75), "SODOKU", WHITE, (250, 50))
                play.render(window)
                play.update(mouse, left)
            elif state.screen is Screen.LEVEL:
                window.fill(BACKGROUND)
                _draw_text(window, fonts(30), "Select a difficulty level: ", WHITE, (240, 250))
                for button in level_buttons:
                    button.render(window)
                for button in level_buttons:
                    button.update(mouse, left)
            else:
                now = time.monotonic()
                if not state.solved:
                    elapsed = now - started_at
                if not state.timer_started:
                    started_at = now
                    state.timer_started = True
                _draw_game(window, fonts, state, elapsed)
                for button in (solve_button, back_button):
                    button.render(window)
                    button.update(mouse, left)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())