"""Heads-up display — score, speed, timer bar and status message."""

from __future__ import annotations

import pygame

from rgbbeam.renderer.colors import HUD_TEXT, TIMER_BAR, TIMER_BAR_LOW, TIMER_BAR_TRACK


def render_hud(
    surface: pygame.Surface,
    score: int,
    speed_factor: float,
    timer_ratio: float,
    message: str,
) -> None:
    font = pygame.font.SysFont("monospace", 20)
    w = surface.get_width()

    score_text = font.render(f"Score: {score}", True, HUD_TEXT)
    surface.blit(score_text, (10, 10))
    speed_text = font.render(f"Speed: {speed_factor:.2f}", True, HUD_TEXT)
    surface.blit(speed_text, (w - speed_text.get_width() - 10, 10))

    # Timer bar
    track = pygame.Rect(10, 42, w - 20, 10)
    pygame.draw.rect(surface, TIMER_BAR_TRACK, track, border_radius=3)
    fill = track.copy()
    fill.w = int(track.w * max(0.0, min(1.0, timer_ratio)))
    color = TIMER_BAR if timer_ratio > 0.3 else TIMER_BAR_LOW
    pygame.draw.rect(surface, color, fill, border_radius=3)

    if message:
        y = surface.get_height() // 2 - 40
        for line in message.split("\n"):
            text = font.render(line, True, HUD_TEXT)
            surface.blit(text, (w // 2 - text.get_width() // 2, y))
            y += 28
