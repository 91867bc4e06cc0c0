"""The application: logo screen, menus, settings and the running match."""

from __future__ import annotations

import argparse
import dataclasses
import time
from enum import Enum

import pygame

from .controls import InputState, Key
from .drawing import draw_centered_text, draw_centered_text_horizontal, draw_text
from .game import Pong
from .geometry import BLACK, DARKGRAY, LIGHTGRAY, TARGET_FPS, YELLOW
from .settings import (
    APP_DATA_PATH,
    MAX_BALL_COUNT,
    MAX_MOVING_OBSTACLES,
    MAX_ROUNDS,
    MAX_STATIC_OBSTACLES,
    cycle_player_type,
    load_settings,
    player_type_label,
    save_settings,
)

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900
WINDOW_MIN_WIDTH = 1280
WINDOW_MIN_HEIGHT = 720
LOGO_DISPLAY_TIME = 2.0

MENU_ITEMS = ("Continue Game", "New Game", "Settings", "Exit")
SETTINGS_ITEMS = (
    "Left Player: ",
    "Right Player: ",
    "Rounds: ",
    "Ball Count: ",
    "Static Obstacles: ",
    "Moving Obstacles: ",
    "Back",
)
PAUSE_ITEMS = ("Continue", "Back to Menu")

CONTROLS_TEXT = (
    "Controls:\n"
    "Player 1: W - Up, S - Down\n"
    "Player 2: Arrow Up - Up, Arrow Down - Down\n"
    "Space - Pause\n"
    "Arrow Keys - Navigate Menu\n"
    "Enter - Select"
)

_PAUSE_SHADE_ALPHA = round(0.55 * 255)


class AppState(Enum):
    """Which screen the application shows."""

    LOGO = 0
    MENU = 1
    GAME = 2


class MenuOption(Enum):
    """Entries of the main menu, in display order."""

    CONTINUE = 0
    NEW_GAME = 1
    SETTINGS = 2
    EXIT = 3


def _step(index: int, keys: InputState, count: int) -> int:
    if keys.is_pressed(Key.DOWN):
        index = (index + 1) % count
    if keys.is_pressed(Key.UP):
        index = (index - 1 + count) % count
    return index


class Application:
    """Screens, menus and the current match, driven one frame at a time."""

    def __init__(self, settings_path: str = APP_DATA_PATH) -> None:
        self.settings_path = settings_path
        self.settings = load_settings(settings_path)
        self.running = True
        self.state = AppState.LOGO
        self.game: Pong | None = None
        self.menu_selection = MenuOption.CONTINUE
        self.in_settings = False
        self.setting_selection = 0
        self.paused = False
        self.pause_selection = 0

    # ----------------------------------------------------------------- update

    def update(self, dt: float, keys: InputState | None = None, elapsed: float = 0.0) -> None:
        """Advance one frame; elapsed is the time since the window opened."""
        keys = keys if keys is not None else InputState()

        if self.state is AppState.LOGO:
            if keys.is_pressed(Key.ENTER) or elapsed >= LOGO_DISPLAY_TIME:
                self.state = AppState.MENU
        elif self.state is AppState.MENU:
            if self.in_settings:
                self._update_settings(keys)
            else:
                self._update_main_menu(keys)
        elif self.state is AppState.GAME and self.game is not None:
            if keys.is_pressed(Key.SPACE) and not self.game.game_over:
                self.paused = not self.paused

            if self.paused:
                self._update_pause_menu(keys)
            else:
                self.game.update(dt, keys)

            if self.game.quit_requested:
                self.game = None
                self.state = AppState.MENU

    def _update_main_menu(self, keys: InputState) -> None:
        self.menu_selection = MenuOption(_step(self.menu_selection.value, keys, len(MENU_ITEMS)))

        if self.game is None and self.menu_selection is MenuOption.CONTINUE:
            self.menu_selection = MenuOption.NEW_GAME

        if not keys.is_pressed(Key.ENTER):
            return
        if self.menu_selection is MenuOption.CONTINUE:
            if self.game is not None:
                self.state = AppState.GAME
        elif self.menu_selection is MenuOption.NEW_GAME:
            self.game = Pong(dataclasses.replace(self.settings))
            self.state = AppState.GAME
        elif self.menu_selection is MenuOption.SETTINGS:
            self.in_settings = True
            self.setting_selection = 0
        elif self.menu_selection is MenuOption.EXIT:
            self.running = False

    def _update_settings(self, keys: InputState) -> None:
        self.setting_selection = _step(self.setting_selection, keys, len(SETTINGS_ITEMS))

        if not keys.is_pressed(Key.ENTER):
            return
        s = self.settings
        match self.setting_selection:
            case 0:
                s.left_computer, s.left_difficulty = cycle_player_type(
                    s.left_computer, s.left_difficulty
                )
            case 1:
                s.right_computer, s.right_difficulty = cycle_player_type(
                    s.right_computer, s.right_difficulty
                )
            case 2:
                s.rounds = s.rounds % MAX_ROUNDS + 1
            case 3:
                s.ball_count = s.ball_count % MAX_BALL_COUNT + 1
            case 4:
                s.static_obstacles = (s.static_obstacles + 1) % (MAX_STATIC_OBSTACLES + 1)
            case 5:
                s.moving_obstacles = (s.moving_obstacles + 1) % (MAX_MOVING_OBSTACLES + 1)
            case 6:
                self.in_settings = False

    def _update_pause_menu(self, keys: InputState) -> None:
        self.pause_selection = _step(self.pause_selection, keys, len(PAUSE_ITEMS))

        if not keys.is_pressed(Key.ENTER):
            return
        self.paused = False
        if self.pause_selection == 1:
            self.state = AppState.MENU

    def _settings_labels(self) -> list[str]:
        s = self.settings
        values = (
            player_type_label(s.left_computer, s.left_difficulty),
            player_type_label(s.right_computer, s.right_difficulty),
            str(s.rounds),
            str(s.ball_count),
            str(s.static_obstacles),
            str(s.moving_obstacles),
            "",
        )
        return [item + value for item, value in zip(SETTINGS_ITEMS, values)]

    # ----------------------------------------------------------------- render

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current screen."""
        if self.state is AppState.LOGO:
            draw_centered_text(surface, "PONG", 100, LIGHTGRAY)
        elif self.state is AppState.MENU:
            if self.in_settings:
                self._render_settings(surface)
            else:
                self._render_main_menu(surface)
        elif self.state is AppState.GAME:
            if self.game is not None:
                self.game.render(surface)
            if self.paused:
                self._render_pause_menu(surface)

    def _render_main_menu(self, surface: pygame.Surface) -> None:
        font_size, padding = 30, 50
        row = font_size + padding
        start_y = (surface.get_height() - len(MENU_ITEMS) * row) // 2
        first = 0 if self.game is not None else 1
        for index, item in enumerate(MENU_ITEMS):
            if index < first:
                continue
            color = YELLOW if MenuOption(index) is self.menu_selection else LIGHTGRAY
            draw_centered_text_horizontal(surface, item, start_y + index * row, font_size, color)
        self._render_controls(surface)

    def _render_settings(self, surface: pygame.Surface) -> None:
        font_size, padding = 30, 40
        row = font_size + padding
        start_y = (surface.get_height() - len(SETTINGS_ITEMS) * row) // 2
        for index, label in enumerate(self._settings_labels()):
            color = YELLOW if index == self.setting_selection else LIGHTGRAY
            draw_centered_text_horizontal(surface, label, start_y + index * row, font_size, color)

    def _render_pause_menu(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        rect_w, rect_h = width // 2, height // 3
        rect_x, rect_y = (width - rect_w) // 2, (height - rect_h) // 2

        shade = pygame.Surface((rect_w, rect_h), pygame.SRCALPHA)
        shade.fill((*BLACK[:3], _PAUSE_SHADE_ALPHA))
        surface.blit(shade, (rect_x, rect_y))

        font_size, padding = 40, 20
        row = font_size + padding
        start_y = rect_y + (rect_h - len(PAUSE_ITEMS) * row) // 2
        for index, item in enumerate(PAUSE_ITEMS):
            color = YELLOW if index == self.pause_selection else LIGHTGRAY
            draw_centered_text_horizontal(surface, item, start_y + index * row, font_size, color)
        self._render_controls(surface)

    @staticmethod
    def _render_controls(surface: pygame.Surface) -> None:
        padding = 70
        draw_text(surface, CONTROLS_TEXT, padding, padding, 20, LIGHTGRAY)

    # -------------------------------------------------------------------- run

    def run(self) -> None:
        """Open the window and play until closed; store the settings on the way out."""
        pygame.init()
        try:
            pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
            pygame.display.set_caption("Pong")
            clock = pygame.time.Clock()
            started = time.monotonic()

            while self.running:
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                self._enforce_min_size(events)

                keys = InputState.from_pygame(events, pygame.key.get_pressed())
                if keys.is_pressed(Key.ESCAPE):
                    break

                dt = clock.tick(TARGET_FPS) / 1000.0
                self.update(dt, keys, time.monotonic() - started)

                surface = pygame.display.get_surface()
                surface.fill(DARKGRAY)
                self.render(surface)
                pygame.display.flip()
        finally:
            save_settings(self.settings, self.settings_path)
            pygame.quit()

    @staticmethod
    def _enforce_min_size(events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type != pygame.VIDEORESIZE:
                continue
            width = max(event.w, WINDOW_MIN_WIDTH)
            height = max(event.h, WINDOW_MIN_HEIGHT)
            if (width, height) != (event.w, event.h):
                pygame.display.set_mode((width, height), pygame.RESIZABLE)


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="pong", description="Play Pong.")
    parser.add_argument(
        "--settings",
        default=APP_DATA_PATH,
        help="file the game settings are loaded from and saved to",
    )
    args = parser.parse_args(argv)
    Application(args.settings).run()
    return 0