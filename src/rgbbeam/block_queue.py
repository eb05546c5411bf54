"""In-flight blocks and target selection."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from rgbbeam.config import FLOOR_POSITION
from rgbbeam.models import Block, Color


class BlockQueue:
    """Blocks in spawn order. The target is the block closest to the floor."""

    def __init__(self, floor: float = FLOOR_POSITION) -> None:
        self.floor = floor
        self._blocks: list[Block] = []
        self._ids = count(1)

    def spawn(self, color: Color, start_position: float, spawn_time_ms: float = 0.0) -> Block:
        block = Block(
            id=next(self._ids),
            color=color,
            position=start_position,
            spawn_time_ms=spawn_time_ms,
        )
        self._blocks.append(block)
        return block

    def current_target(self) -> Block | None:
        """Bottom-most block; the earlier spawn wins a tie."""
        best: Block | None = None
        for block in self._blocks:
            if best is None or block.position > best.position:
                best = block
        return best

    def remove(self, block: Block) -> bool:
        for i, candidate in enumerate(self._blocks):
            if candidate is block:
                del self._blocks[i]
                return True
        return False

    def advance_all(self, delta: float) -> bool:
        """Move every block down by delta. Returns True if any block reached the floor."""
        reached = False
        for block in self._blocks:
            block.position += delta
            if block.position >= self.floor:
                reached = True
        return reached

    def distance_to_floor(self) -> float | None:
        target = self.current_target()
        if target is None:
            return None
        return max(0.0, self.floor - target.position)

    def clear(self) -> list[Block]:
        removed, self._blocks = self._blocks, []
        return removed

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(list(self._blocks))

    def __bool__(self) -> bool:
        return bool(self._blocks)
