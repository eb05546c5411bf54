"""Tests for keyboard command mapping."""

import pygame

from rgbbeam.input import KeyboardInput
from rgbbeam.models import Color


def _key(key, kind=pygame.KEYDOWN):
    return pygame.event.Event(kind, key=key)


def test_color_keys_queue_shots():
    keys = KeyboardInput()
    for key in (pygame.K_q, pygame.K_w, pygame.K_e):
        keys.feed_event(_key(key))
    commands = [keys.poll() for _ in range(3)]
    assert [c.kind for c in commands] == ["shoot"] * 3
    assert [c.color for c in commands] == [Color.RED, Color.GREEN, Color.BLUE]
    assert keys.poll() is None


def test_r_requests_restart():
    keys = KeyboardInput()
    keys.feed_event(_key(pygame.K_r))
    command = keys.poll()
    assert command.kind == "restart"
    assert command.color is None


def test_key_up_and_unmapped_keys_are_ignored():
    keys = KeyboardInput()
    keys.feed_event(_key(pygame.K_q, pygame.KEYUP))
    keys.feed_event(_key(pygame.K_z))
    assert keys.poll() is None
