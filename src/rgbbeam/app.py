"""Top-level application: initializes pygame, wires input and renderer to a session, runs the loop."""

from __future__ import annotations

import logging
import random

import pygame

from rgbbeam.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from rgbbeam.input import KeyboardInput
from rgbbeam.models import RoundState
from rgbbeam.renderer import colors as colors_mod
from rgbbeam.renderer.hud import render_hud
from rgbbeam.renderer.lane import LaneRenderer
from rgbbeam.session import GameSession

logger = logging.getLogger(__name__)


def status_message(session: GameSession, fallback: str) -> str:
    """NEXT/TIME line while a target is being timed, otherwise the last renderer message."""
    target = session.current_target()
    if session.state is RoundState.PLAYING and target is not None and session.time_left_ms is not None:
        return f"NEXT: {target.color.label}  |  TIME: {session.time_left_ms / 1000:.2f}s"
    return fallback


class App:
    def __init__(self, seed: int | None = None) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.renderer = LaneRenderer()
        self.keyboard_input = KeyboardInput()
        self.session = GameSession(listeners=[self.renderer], rng=random.Random(seed))

    def run(self) -> None:
        self.session.restart()
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                else:
                    self.keyboard_input.feed_event(event)
            if running:
                self._dispatch_input()
                self.session.tick(dt)
                self.renderer.update(dt)
            self.draw()
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _dispatch_input(self) -> None:
        while (command := self.keyboard_input.poll()) is not None:
            if command.kind == "restart":
                self.session.restart()
            elif command.kind == "shoot":
                self.session.shoot(command.color)

    def draw(self) -> None:
        self.screen.fill(colors_mod.BG)
        self.renderer.draw(self.screen)
        render_hud(
            self.screen,
            score=self.renderer.score,
            speed_factor=self.renderer.speed_factor,
            timer_ratio=self.renderer.timer_ratio,
            message=status_message(self.session, self.renderer.message),
        )

    def _cleanup(self) -> None:
        logger.info("Exiting with score %d", self.session.score)
        self.session.dispose()
        self.keyboard_input.close()
