"""Keyboard keys the game reacts to and a per-frame snapshot of them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto

import pygame


class Key(Enum):
    """Keys used by the players and the menus."""

    W = auto()
    S = auto()
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    SPACE = auto()
    ESCAPE = auto()


_PYGAME_KEYS: dict[Key, int] = {
    Key.W: pygame.K_w,
    Key.S: pygame.K_s,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.ENTER: pygame.K_RETURN,
    Key.SPACE: pygame.K_SPACE,
    Key.ESCAPE: pygame.K_ESCAPE,
}
_KEYS_BY_CODE: dict[int, Key] = {code: key for key, code in _PYGAME_KEYS.items()}


@dataclass(frozen=True)
class InputState:
    """Keys held down and keys newly pressed during one frame."""

    down: frozenset[Key] = frozenset()
    pressed: frozenset[Key] = frozenset()

    def is_down(self, key: Key) -> bool:
        """Whether the key is held this frame."""
        return key in self.down

    def is_pressed(self, key: Key) -> bool:
        """Whether the key went down this frame."""
        return key in self.pressed

    @classmethod
    def from_pygame(cls, events: Iterable[pygame.event.Event], held: Sequence[bool]) -> InputState:
        """Build a snapshot from a frame's events and the held-key table."""
        pressed = frozenset(
            _KEYS_BY_CODE[event.key]
            for event in events
            if event.type == pygame.KEYDOWN and event.key in _KEYS_BY_CODE
        )
        down = frozenset(key for key, code in _PYGAME_KEYS.items() if held[code])
        return cls(down=down | pressed, pressed=pressed)