"""A clickable rectangular button with a centred text label, drawn with pygame."""

from __future__ import annotations

from typing import Any

import pygame

Color = tuple[int, int, int]
Point = tuple[float, float]

IDLE_COLOR: Color = (84, 89, 172)
HOVER_COLOR: Color = (100, 141, 179)
PRESSED_COLOR: Color = (178, 216, 206)
TEXT_COLOR: Color = (255, 255, 255)


class Button:
    """A rectangle that changes colour under the mouse and reports left clicks.

    ``font`` is any object with a pygame-style ``render(text, antialias, color)``
    method returning a surface; the label is drawn centred on the button.
    """

    def __init__(self, size: Point, position: Point, text: str, font: Any) -> None:
        self.rect = pygame.Rect(position, size)
        self.text = text
        self.font = font
        self.text_color: Color = TEXT_COLOR
        self.idle_color: Color = IDLE_COLOR
        self.hover_color: Color = HOVER_COLOR
        self.pressed_color: Color = PRESSED_COLOR
        self.fill_color: Color = self.idle_color

    @property
    def label_center(self) -> tuple[int, int]:
        """The point the label is centred on."""
        return self.rect.center

    def set_text(self, text: str) -> None:
        """Change the label text; it stays centred on the button."""
        self.text = text

    def set_position(self, position: Point) -> None:
        """Move the button's top-left corner, keeping its size."""
        self.rect.topleft = (int(position[0]), int(position[1]))

    def set_colors(self, idle: Color, hover: Color, pressed: Color) -> None:
        """Set the colours used when idle, hovered and pressed."""
        self.idle_color = idle
        self.hover_color = hover
        self.pressed_color = pressed

    def is_mouse_over(self, mouse_pos: Point) -> bool:
        """Whether the mouse position lies inside the button."""
        return bool(self.rect.collidepoint(int(mouse_pos[0]), int(mouse_pos[1])))

    def update(self, mouse_pos: Point, left_pressed: bool) -> None:
        """Pick the fill colour from the mouse position and left-button state."""
        if self.is_mouse_over(mouse_pos):
            self.fill_color = self.pressed_color if left_pressed else self.hover_color
        else:
            self.fill_color = self.idle_color

    def is_clicked(self, event: Any, mouse_pos: Point) -> bool:
        """Whether the event is a left-button release over the button."""
        return (
            event.type == pygame.MOUSEBUTTONUP
            and getattr(event, "button", None) == 1
            and self.is_mouse_over(mouse_pos)
        )

    def render(self, surface: pygame.Surface) -> None:
        """Draw the button and its label onto the surface."""
        pygame.draw.rect(surface, self.fill_color, self.rect)
        label = self.font.render(self.text, True, self.text_color)
        surface.blit(label, label.get_rect(center=self.label_center))