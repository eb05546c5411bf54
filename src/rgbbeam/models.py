"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @classmethod
    def parse(cls, value: object) -> Color | None:
        """Accept a Color or a case-insensitive color name. Returns None otherwise."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.value.upper()


class RoundState(Enum):
    READY = auto()
    COUNTDOWN = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class GameOverReason(Enum):
    WRONG_COLOR = auto()
    TIMEOUT = auto()
    FLOOR_REACHED = auto()


@dataclass
class Block:
    """A single falling block in the lane."""

    id: int
    color: Color
    position: float  # units from the lane top; grows toward the floor
    spawn_time_ms: float


class ShotGrade(Enum):
    HIT = auto()
    MISS = auto()


@dataclass
class ShotResult:
    target: Block
    played: Color
    grade: ShotGrade

    @property
    def is_hit(self) -> bool:
        return self.grade == ShotGrade.HIT
