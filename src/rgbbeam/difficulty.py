"""Difficulty curve — spawn interval, fall speed and per-target time limit."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rgbbeam.config import (
    FALL_SPEED_GROWTH,
    INITIAL_FALL_SPEED,
    INITIAL_SPAWN_INTERVAL_MS,
    MAX_FALL_SPEED,
    MAX_TIME_LIMIT_MS,
    MIN_SPAWN_INTERVAL_MS,
    MIN_TIME_LIMIT_MS,
    SPAWN_INTERVAL_DECAY,
    TIME_LIMIT_SCALE,
)


def recalc_time_limit(spawn_interval_ms: int) -> int:
    """Time allowed per target, a little longer than one spawn interval.

    clamp(floor(spawn_interval_ms * 1.25), 420, 1400)
    """
    scaled = math.floor(spawn_interval_ms * TIME_LIMIT_SCALE)
    return max(MIN_TIME_LIMIT_MS, min(MAX_TIME_LIMIT_MS, scaled))


@dataclass
class DifficultyState:
    """Current difficulty. One acceleration step per call to accelerate()."""

    spawn_interval_ms: int = INITIAL_SPAWN_INTERVAL_MS
    fall_speed: float = INITIAL_FALL_SPEED  # units per reference frame
    time_limit_ms: int = field(init=False)

    def __post_init__(self) -> None:
        self.time_limit_ms = recalc_time_limit(self.spawn_interval_ms)

    def accelerate(self) -> None:
        self.spawn_interval_ms = max(
            MIN_SPAWN_INTERVAL_MS,
            math.floor(self.spawn_interval_ms * SPAWN_INTERVAL_DECAY),
        )
        self.fall_speed = min(MAX_FALL_SPEED, self.fall_speed * FALL_SPEED_GROWTH)
        self.time_limit_ms = recalc_time_limit(self.spawn_interval_ms)

    @property
    def speed_factor(self) -> float:
        return 1000 / self.spawn_interval_ms
