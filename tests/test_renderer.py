"""Tests for the event-driven lane renderer and status line."""

import random

from rgbbeam.app import status_message
from rgbbeam.models import RoundState
from rgbbeam.renderer.lane import LaneRenderer
from rgbbeam.session import GameSession


def _session_with_renderer():
    renderer = LaneRenderer()
    session = GameSession(listeners=[renderer], rng=random.Random(11))
    return session, renderer


def test_renderer_mirrors_blocks():
    session, renderer = _session_with_renderer()
    session.restart()
    assert renderer.message == "READY... 3"
    session.advance_time(3000)
    assert renderer.message == "GO!"
    assert renderer.state is RoundState.PLAYING

    session.advance_time(200)
    expected = {b.id: (b.color, b.position) for b in session.blocks}
    assert renderer.blocks == expected

    session.shoot(session.current_target().color)
    assert len(renderer.blocks) == 4
    assert renderer.score == 1


def test_beams_expire():
    session, renderer = _session_with_renderer()
    session.restart()
    session.advance_time(3000)
    session.shoot(session.current_target().color)
    assert len(renderer.beams) == 1
    renderer.update(0.1)
    assert len(renderer.beams) == 1
    renderer.update(0.1)
    assert renderer.beams == []


def test_game_over_message_kept():
    session, renderer = _session_with_renderer()
    session.restart()
    session.advance_time(3000)
    session.advance_time(1250)
    assert renderer.state is RoundState.GAME_OVER
    assert renderer.message == session.game_over_text
    assert status_message(session, renderer.message) == session.game_over_text


def test_status_line_while_playing():
    session, renderer = _session_with_renderer()
    session.restart()
    session.advance_time(3000)
    session.advance_time(250)
    label = session.current_target().color.label
    assert status_message(session, renderer.message) == f"NEXT: {label}  |  TIME: 1.00s"
