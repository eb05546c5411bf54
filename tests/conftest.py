"""Shared fixtures: a recording listener and seeded sessions."""

import random

import pytest

from rgbbeam.config import COUNTDOWN_START, COUNTDOWN_STEP_MS
from rgbbeam.session import GameSession


class RecordingListener:
    """Records every on_* call as (name, args)."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple]] = []

    def __getattr__(self, name: str):
        if not name.startswith("on_"):
            raise AttributeError(name)

        def record(*args):
            self.events.append((name, args))

        return record

    def of(self, name: str) -> list[tuple]:
        return [args for n, args in self.events if n == name]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def session(listener):
    return GameSession(listeners=[listener], rng=random.Random(1234))


@pytest.fixture
def playing_session(session):
    session.restart()
    session.advance_time(COUNTDOWN_START * COUNTDOWN_STEP_MS)
    return session
