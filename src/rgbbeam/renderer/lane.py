"""Falling-block lane visualization driven by session events."""

from __future__ import annotations

import pygame

from rgbbeam.config import BEAM_LIFETIME_MS, BLOCK_SIZE, LANE_HEIGHT, LANE_TOP
from rgbbeam.events import NullListener
from rgbbeam.models import Color, RoundState
from rgbbeam.renderer.colors import BLOCK_COLORS, FLOOR_LINE, LANE_BG


class LaneRenderer(NullListener):
    """Mirrors the session through its events and draws the lane.

    Keeps its own block id -> (color, position) map; never touches Block objects.
    """

    def __init__(self) -> None:
        self.blocks: dict[int, tuple[Color, float]] = {}
        self.beams: list[tuple[Color, float]] = []  # (color, remaining ms)
        self.message = ""
        self.score = 0
        self.speed_factor = 1.0
        self.timer_ratio = 1.0
        self.state = RoundState.READY

    def on_block_spawned(self, block_id: int, color: Color, position: float) -> None:
        self.blocks[block_id] = (color, position)

    def on_block_position_changed(self, block_id: int, position: float) -> None:
        if block_id in self.blocks:
            self.blocks[block_id] = (self.blocks[block_id][0], position)

    def on_block_removed(self, block_id: int) -> None:
        self.blocks.pop(block_id, None)

    def on_beam_fired(self, color: Color) -> None:
        self.beams.append((color, float(BEAM_LIFETIME_MS)))

    def on_game_over(self, reason_text: str) -> None:
        self.message = reason_text

    def on_score_changed(self, score: int) -> None:
        self.score = score

    def on_speed_changed(self, speed_factor: float) -> None:
        self.speed_factor = speed_factor

    def on_timer_ratio_changed(self, ratio: float) -> None:
        self.timer_ratio = ratio

    def on_countdown_tick(self, seconds_remaining: int) -> None:
        self.message = f"READY... {seconds_remaining}" if seconds_remaining > 0 else "GO!"

    def on_round_state_changed(self, state: RoundState) -> None:
        self.state = state

    def update(self, dt: float) -> None:
        """Expire beams; dt is in seconds."""
        elapsed_ms = dt * 1000.0
        self.beams = [(c, left - elapsed_ms) for c, left in self.beams if left - elapsed_ms > 0]

    def draw(self, surface: pygame.Surface) -> None:
        w = surface.get_width()
        lane_rect = pygame.Rect(w // 2 - BLOCK_SIZE, LANE_TOP, BLOCK_SIZE * 2, LANE_HEIGHT)
        pygame.draw.rect(surface, LANE_BG, lane_rect)
        pygame.draw.line(
            surface, FLOOR_LINE,
            (lane_rect.left, lane_rect.bottom), (lane_rect.right, lane_rect.bottom), 2,
        )

        # Beams shoot up the lane from the floor
        for color, left in self.beams:
            alpha = left / BEAM_LIFETIME_MS
            beam_w = max(2, int(BLOCK_SIZE * 0.3 * alpha))
            beam = pygame.Rect(w // 2 - beam_w // 2, LANE_TOP, beam_w, LANE_HEIGHT)
            pygame.draw.rect(surface, BLOCK_COLORS[color], beam)

        # Clip blocks still above the lane top
        previous_clip = surface.get_clip()
        surface.set_clip(lane_rect)
        for color, position in self.blocks.values():
            rect = pygame.Rect(w // 2 - BLOCK_SIZE // 2, int(LANE_TOP + position), BLOCK_SIZE, BLOCK_SIZE)
            pygame.draw.rect(surface, BLOCK_COLORS[color], rect, border_radius=6)
        surface.set_clip(previous_clip)
