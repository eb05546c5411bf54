"""Outbound event interface between the game core and its renderer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rgbbeam.models import Color, RoundState


@runtime_checkable
class GameListener(Protocol):
    """Everything a renderer needs to mirror a GameSession."""

    def on_block_spawned(self, block_id: int, color: Color, position: float) -> None: ...
    def on_block_position_changed(self, block_id: int, position: float) -> None: ...
    def on_block_removed(self, block_id: int) -> None: ...
    def on_beam_fired(self, color: Color) -> None: ...
    def on_game_over(self, reason_text: str) -> None: ...
    def on_score_changed(self, score: int) -> None: ...
    def on_speed_changed(self, speed_factor: float) -> None: ...
    def on_timer_ratio_changed(self, ratio: float) -> None: ...
    def on_countdown_tick(self, seconds_remaining: int) -> None: ...
    def on_round_state_changed(self, state: RoundState) -> None: ...


class NullListener:
    """No-op implementation of every GameListener method. Subclass and override."""

    def on_block_spawned(self, block_id: int, color: Color, position: float) -> None:
        pass

    def on_block_position_changed(self, block_id: int, position: float) -> None:
        pass

    def on_block_removed(self, block_id: int) -> None:
        pass

    def on_beam_fired(self, color: Color) -> None:
        pass

    def on_game_over(self, reason_text: str) -> None:
        pass

    def on_score_changed(self, score: int) -> None:
        pass

    def on_speed_changed(self, speed_factor: float) -> None:
        pass

    def on_timer_ratio_changed(self, ratio: float) -> None:
        pass

    def on_countdown_tick(self, seconds_remaining: int) -> None:
        pass

    def on_round_state_changed(self, state: RoundState) -> None:
        pass
