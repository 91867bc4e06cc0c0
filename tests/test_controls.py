from collections import defaultdict

import pygame

from pong.controls import InputState, Key


def test_empty_state_reports_nothing():
    state = InputState()
    assert not any(state.is_down(key) for key in Key)
    assert not any(state.is_pressed(key) for key in Key)


def test_down_and_pressed_are_separate():
    state = InputState(down=frozenset({Key.W}), pressed=frozenset({Key.ENTER}))
    assert state.is_down(Key.W)
    assert not state.is_pressed(Key.W)
    assert state.is_pressed(Key.ENTER)
    assert not state.is_down(Key.S)


def test_from_pygame_reads_keydown_events():
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)]
    state = InputState.from_pygame(events, defaultdict(bool))
    assert state.pressed == frozenset({Key.ENTER})
    assert state.is_down(Key.ENTER)


def test_from_pygame_reads_held_keys():
    held = defaultdict(bool, {pygame.K_w: True, pygame.K_DOWN: True})
    state = InputState.from_pygame([], held)
    assert state.down == frozenset({Key.W, Key.DOWN})
    assert state.pressed == frozenset()


def test_from_pygame_ignores_unknown_keys_and_keyup():
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE),
    ]
    state = InputState.from_pygame(events, defaultdict(bool))
    assert state.pressed == frozenset()
    assert state.down == frozenset()