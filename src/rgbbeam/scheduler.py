"""Discrete-event scheduler driven by explicit time advancement."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum, auto

logger = logging.getLogger(__name__)


class ProcessKind(Enum):
    SPAWN = auto()
    ACCELERATE = auto()
    TARGET_TICK = auto()
    COUNTDOWN = auto()


@dataclass(eq=False)
class Process:
    """A periodic process. Re-armed after each firing until cancelled."""

    kind: ProcessKind
    period_ms: float
    next_fire_ms: float
    seq: int
    cancelled: bool = field(default=False)


class Scheduler:
    """Priority queue of (fire_time_ms, seq, process) entries.

    Nothing happens on its own: the owner moves time forward with pop_due()
    and advance_to(). Entries due at the same instant fire in the order their
    processes were first scheduled.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._heap: list[tuple[float, int, Process]] = []
        self._seq = 0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    def schedule(self, kind: ProcessKind, period_ms: float) -> Process:
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        self._seq += 1
        process = Process(
            kind=kind,
            period_ms=period_ms,
            next_fire_ms=self._now_ms + period_ms,
            seq=self._seq,
        )
        heapq.heappush(self._heap, (process.next_fire_ms, process.seq, process))
        return process

    def cancel(self, process: Process | None) -> None:
        if process is None or process.cancelled:
            return
        process.cancelled = True
        logger.debug("Cancelled %s process", process.kind.name)

    def cancel_all(self) -> None:
        for _, _, process in self._heap:
            process.cancelled = True
        self._heap.clear()

    def next_fire_time(self) -> float | None:
        self._drop_cancelled()
        if not self._heap:
            return None
        return self._heap[0][0]

    def pop_due(self, until_ms: float) -> Process | None:
        """Return the next live process due at or before until_ms.

        The clock moves to the fire time and the process is re-armed for its
        next period before it is returned.
        """
        self._drop_cancelled()
        if not self._heap or self._heap[0][0] > until_ms:
            return None
        fire_ms, seq, process = heapq.heappop(self._heap)
        self._now_ms = max(self._now_ms, fire_ms)
        process.next_fire_ms = fire_ms + process.period_ms
        heapq.heappush(self._heap, (process.next_fire_ms, seq, process))
        return process

    def advance_to(self, time_ms: float) -> None:
        if time_ms < self._now_ms:
            raise ValueError(f"cannot move clock back from {self._now_ms} to {time_ms}")
        self._now_ms = time_ms

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0][2].cancelled:
            heapq.heappop(self._heap)

    def __len__(self) -> int:
        return sum(1 for _, _, p in self._heap if not p.cancelled)
