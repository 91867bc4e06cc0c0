"""Text drawing helpers on pygame surfaces."""

from __future__ import annotations

import functools

import pygame

from .geometry import Color

LINE_SPACING = 2


@functools.lru_cache(maxsize=None)
def _font(font_size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, font_size)


def measure_text(text: str, font_size: int) -> int:
    """Width in pixels of the widest line of text."""
    font = _font(font_size)
    return max(font.size(line)[0] for line in text.split("\n"))


def draw_text(
    surface: pygame.Surface, text: str, x: int, y: int, font_size: int, color: Color
) -> pygame.Rect:
    """Draw text, one line under another, and return the area it occupies."""
    font = _font(font_size)
    lines = text.split("\n")
    step = font_size + LINE_SPACING
    for row, line in enumerate(lines):
        if line:
            surface.blit(font.render(line, True, color), (x, y + row * step))
    height = len(lines) * font_size + (len(lines) - 1) * LINE_SPACING
    return pygame.Rect(x, y, measure_text(text, font_size), height)


def draw_centered_text(
    surface: pygame.Surface, text: str, font_size: int, color: Color
) -> pygame.Rect:
    """Draw text centred on the surface."""
    x = (surface.get_width() - measure_text(text, font_size)) // 2
    y = (surface.get_height() - font_size) // 2
    return draw_text(surface, text, x, y, font_size, color)


def draw_centered_text_horizontal(
    surface: pygame.Surface, text: str, y: int, font_size: int, color: Color
) -> pygame.Rect:
    """Draw text centred across the surface at height y."""
    x = (surface.get_width() - measure_text(text, font_size)) // 2
    return draw_text(surface, text, x, y, font_size, color)


def draw_centered_text_vertical(
    surface: pygame.Surface, text: str, x: int, font_size: int, color: Color
) -> pygame.Rect:
    """Draw text centred down the surface at column x."""
    y = (surface.get_height() - font_size) // 2
    return draw_text(surface, text, x, y, font_size, color)