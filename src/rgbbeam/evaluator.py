"""Shot evaluation — compare the fired color to the current target."""

from __future__ import annotations

from rgbbeam.models import Block, Color, ShotGrade, ShotResult


def resolve_shot(target: Block, played: Color) -> ShotResult:
    grade = ShotGrade.HIT if played == target.color else ShotGrade.MISS
    return ShotResult(target=target, played=played, grade=grade)
