"""Game session — round state machine, per-target timer and input handling.

A GameSession owns every piece of mutable game state. It never reads a wall
clock: the host moves it forward with advance_time() (or tick() from a frame
loop), which fires scheduled processes in time order and integrates block
fall between them.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from rgbbeam.block_queue import BlockQueue
from rgbbeam.config import (
    ACCELERATION_PERIOD_MS,
    BLOCK_SIZE,
    COUNTDOWN_START,
    COUNTDOWN_STEP_MS,
    LANE_HEIGHT,
    REFERENCE_FPS,
    SEED_BLOCK_COUNT,
    SEED_BLOCK_SPACING,
    SPAWN_POSITION,
    TARGET_TICK_MS,
)
from rgbbeam.difficulty import DifficultyState
from rgbbeam.evaluator import resolve_shot
from rgbbeam.events import GameListener
from rgbbeam.models import Block, Color, GameOverReason, RoundState, ShotResult
from rgbbeam.scheduler import Process, ProcessKind, Scheduler

logger = logging.getLogger(__name__)

_REASON_TEXT = {
    GameOverReason.WRONG_COLOR: "WRONG! Needed {color}",
    GameOverReason.TIMEOUT: "TIME UP! Needed {color} (press R to restart)",
    GameOverReason.FLOOR_REACHED: "A block hit the floor! (press R to restart)",
}


class SessionDisposedError(Exception):
    """Raised when a disposed GameSession is used."""


class GameSession:
    """One game instance: owns the lane, the difficulty and every scheduled process."""

    def __init__(
        self,
        listeners: Iterable[GameListener] = (),
        rng: random.Random | None = None,
        lane_height: float = LANE_HEIGHT,
    ) -> None:
        self._listeners: list[GameListener] = list(listeners)
        self._rng = rng if rng is not None else random.Random()
        self._scheduler = Scheduler()
        self._queue = BlockQueue(floor=lane_height - BLOCK_SIZE)
        self.difficulty = DifficultyState()
        self.state = RoundState.READY
        self.score = 0
        self.countdown = 0
        self.time_left_ms: float | None = None  # None while no target is being timed
        self.game_over_reason: GameOverReason | None = None
        self.game_over_text = ""
        self._disposed = False

        # One live reference per process; None once cancelled
        self._spawn_process: Process | None = None
        self._accel_process: Process | None = None
        self._tick_process: Process | None = None
        self._countdown_process: Process | None = None

        self._handlers = {
            ProcessKind.SPAWN: self._on_spawn,
            ProcessKind.ACCELERATE: self._on_accelerate,
            ProcessKind.TARGET_TICK: self._on_target_tick,
            ProcessKind.COUNTDOWN: self._on_countdown,
        }

    # -- listeners --------------------------------------------------------

    def add_listener(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, method: str, *args: object) -> None:
        for listener in list(self._listeners):
            getattr(listener, method)(*args)

    # -- read-only views ----------------------------------------------------

    @property
    def now_ms(self) -> float:
        return self._scheduler.now_ms

    @property
    def blocks(self) -> list[Block]:
        return list(self._queue)

    @property
    def speed_factor(self) -> float:
        return self.difficulty.speed_factor

    @property
    def timer_ratio(self) -> float:
        if self.time_left_ms is None:
            return 1.0
        return max(0.0, min(1.0, self.time_left_ms / self.difficulty.time_limit_ms))

    def current_target(self) -> Block | None:
        return self._queue.current_target()

    # -- inbound operations -------------------------------------------------

    def restart(self) -> None:
        """Reset the round and start the 3-2-1 countdown. Accepted in any state."""
        self._check_alive()
        self._stop_processes()
        for block in self._queue.clear():
            self._emit("on_block_removed", block.id)

        self.score = 0
        self.difficulty = DifficultyState()
        self.time_left_ms = None
        self.game_over_reason = None
        self.game_over_text = ""
        self._emit("on_score_changed", self.score)
        self._emit("on_speed_changed", self.speed_factor)
        self._emit("on_timer_ratio_changed", self.timer_ratio)

        self._set_state(RoundState.COUNTDOWN)
        self.countdown = COUNTDOWN_START
        self._emit("on_countdown_tick", self.countdown)
        self._countdown_process = self._scheduler.schedule(ProcessKind.COUNTDOWN, COUNTDOWN_STEP_MS)

    def shoot(self, color: Color | str) -> ShotResult | None:
        """Fire a beam at the current target. Returns None when the shot was ignored."""
        self._check_alive()
        if self.state is not RoundState.PLAYING or not self._queue:
            return None
        played = Color.parse(color)
        if played is None:
            logger.debug("Ignoring shot with unknown color %r", color)
            return None

        target = self._queue.current_target()
        self._emit("on_beam_fired", played)
        result = resolve_shot(target, played)

        if not result.is_hit:
            self._game_over(GameOverReason.WRONG_COLOR, target)
            return result

        self._queue.remove(target)
        self._emit("on_block_removed", target.id)
        self.score += 1
        self._emit("on_score_changed", self.score)
        if self._queue:
            self._reset_target_timer()
        else:
            self.time_left_ms = None
            self._emit("on_timer_ratio_changed", self.timer_ratio)
        return result

    def advance_time(self, delta_ms: float) -> None:
        """Move game time forward, firing every process that falls due."""
        self._check_alive()
        if delta_ms < 0:
            raise ValueError(f"delta_ms must not be negative, got {delta_ms}")
        end_ms = self._scheduler.now_ms + delta_ms

        while True:
            due = self._scheduler.next_fire_time()
            self._fall_until(end_ms if due is None or due > end_ms else due)
            process = self._scheduler.pop_due(end_ms)
            if process is None:
                break
            self._handlers[process.kind]()

        self._scheduler.advance_to(end_ms)

    def tick(self, dt: float) -> None:
        """Frame-loop entry point; dt is in seconds."""
        self.advance_time(dt * 1000.0)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._stop_processes()
        self._scheduler.cancel_all()
        self._queue.clear()
        self._listeners.clear()
        self._disposed = True
        logger.debug("Session disposed")

    # -- scheduled processes ------------------------------------------------

    def _on_countdown(self) -> None:
        self.countdown -= 1
        self._emit("on_countdown_tick", self.countdown)
        if self.countdown > 0:
            return

        self._scheduler.cancel(self._countdown_process)
        self._countdown_process = None
        self._seed_lane()
        self._set_state(RoundState.PLAYING)
        self._reset_target_timer()
        self._start_processes()

    def _on_spawn(self) -> None:
        self._spawn_block(self._random_color(), SPAWN_POSITION)
        if len(self._queue) == 1:
            self._reset_target_timer()

    def _on_accelerate(self) -> None:
        self.difficulty.accelerate()
        self._scheduler.cancel(self._spawn_process)
        self._spawn_process = self._scheduler.schedule(
            ProcessKind.SPAWN, self.difficulty.spawn_interval_ms
        )
        logger.debug(
            "Accelerated: spawn every %d ms, fall speed %.2f, time limit %d ms",
            self.difficulty.spawn_interval_ms,
            self.difficulty.fall_speed,
            self.difficulty.time_limit_ms,
        )
        self._emit("on_speed_changed", self.speed_factor)
        self._emit("on_timer_ratio_changed", self.timer_ratio)

    def _on_target_tick(self) -> None:
        if self.time_left_ms is None or not self._queue:
            return
        self.time_left_ms -= TARGET_TICK_MS
        self._emit("on_timer_ratio_changed", self.timer_ratio)
        if self.time_left_ms <= 0:
            self._game_over(GameOverReason.TIMEOUT, self._queue.current_target())

    # -- internals ----------------------------------------------------------

    def _fall_until(self, time_ms: float) -> None:
        """Integrate block fall up to time_ms, stopping early if a block lands."""
        now = self._scheduler.now_ms
        elapsed = time_ms - now
        if elapsed <= 0:
            return
        if self.state is RoundState.PLAYING and self._queue:
            rate = self.difficulty.fall_speed * REFERENCE_FPS / 1000.0  # units per ms
            gap = self._queue.distance_to_floor()
            travel = rate * elapsed
            if travel >= gap:
                self._move_blocks(gap)
                self._scheduler.advance_to(min(time_ms, now + gap / rate))
                self._game_over(GameOverReason.FLOOR_REACHED, self._queue.current_target())
                return
            if self._move_blocks(travel):
                self._scheduler.advance_to(time_ms)
                self._game_over(GameOverReason.FLOOR_REACHED, self._queue.current_target())
                return
        self._scheduler.advance_to(time_ms)

    def _move_blocks(self, delta: float) -> bool:
        reached = self._queue.advance_all(delta)
        for block in self._queue:
            self._emit("on_block_position_changed", block.id, block.position)
        return reached

    def _seed_lane(self) -> None:
        # First seeded block lowest, so seed order is also target order
        for i in range(SEED_BLOCK_COUNT):
            offset = (SEED_BLOCK_COUNT - 1 - i) * SEED_BLOCK_SPACING
            self._spawn_block(self._random_color(), SPAWN_POSITION + offset)

    def _spawn_block(self, color: Color, position: float) -> Block:
        block = self._queue.spawn(color, position, self._scheduler.now_ms)
        logger.debug("Spawned block %d (%s) at %.1f", block.id, color.value, position)
        self._emit("on_block_spawned", block.id, block.color, block.position)
        return block

    def _random_color(self) -> Color:
        return self._rng.choice(list(Color))

    def _reset_target_timer(self) -> None:
        self.time_left_ms = self.difficulty.time_limit_ms
        self._emit("on_timer_ratio_changed", self.timer_ratio)

    def _start_processes(self) -> None:
        self._spawn_process = self._scheduler.schedule(
            ProcessKind.SPAWN, self.difficulty.spawn_interval_ms
        )
        self._accel_process = self._scheduler.schedule(ProcessKind.ACCELERATE, ACCELERATION_PERIOD_MS)
        self._tick_process = self._scheduler.schedule(ProcessKind.TARGET_TICK, TARGET_TICK_MS)

    def _stop_processes(self) -> None:
        for attr in ("_spawn_process", "_accel_process", "_tick_process", "_countdown_process"):
            self._scheduler.cancel(getattr(self, attr))
            setattr(self, attr, None)

    def _game_over(self, reason: GameOverReason, target: Block | None) -> None:
        self._stop_processes()
        color = target.color.label if target is not None else "?"
        self.game_over_reason = reason
        self.game_over_text = _REASON_TEXT[reason].format(color=color)
        self._set_state(RoundState.GAME_OVER)
        self._emit("on_game_over", self.game_over_text)

    def _set_state(self, state: RoundState) -> None:
        if state is self.state:
            return
        logger.info("Round %s -> %s (score %d)", self.state.name, state.name, self.score)
        self.state = state
        self._emit("on_round_state_changed", state)

    def _check_alive(self) -> None:
        if self._disposed:
            raise SessionDisposedError("GameSession has been disposed")
