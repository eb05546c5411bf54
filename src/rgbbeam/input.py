"""Keyboard input mapped to game commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pygame

from rgbbeam.models import Color


@dataclass
class InputCommand:
    kind: Literal["shoot", "restart"]
    color: Color | None = None


_KEY_TO_COLOR: dict[int, Color] = {
    pygame.K_q: Color.RED,
    pygame.K_w: Color.GREEN,
    pygame.K_e: Color.BLUE,
}
_RESTART_KEY = pygame.K_r


class KeyboardInput:
    """Queues shoot/restart commands from pygame key presses."""

    def __init__(self) -> None:
        self._commands: list[InputCommand] = []

    def feed_event(self, event: pygame.event.Event) -> None:
        """Call from the game loop for each pygame event."""
        if event.type != pygame.KEYDOWN:
            return
        if event.key in _KEY_TO_COLOR:
            self._commands.append(InputCommand(kind="shoot", color=_KEY_TO_COLOR[event.key]))
        elif event.key == _RESTART_KEY:
            self._commands.append(InputCommand(kind="restart"))

    def poll(self) -> InputCommand | None:
        if self._commands:
            return self._commands.pop(0)
        return None

    def close(self) -> None:
        self._commands.clear()
