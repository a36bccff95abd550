"""
Pytest configuration and shared fixtures for the Wordle engine tests.
"""

import os
import random
import tempfile

# Keep test logs out of the working directory; must happen before the
# package (and its module-level logger) is imported.
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordle_engine_test_logs'))

import pytest

from wordle_engine.models.game import RawKeyEvent
from wordle_engine.services import game_service as game_service_module
from wordle_engine.services.game_engine import GameEngine
from wordle_engine.services.game_service import GameService
from wordle_engine.services.input_classifier import classify_key
from wordle_engine.services.word_source import WordSource

EXTENDED = ["speed", "trace", "crate", "react", "cigar", "rebus", "sissy", "eerie", "apple"]


def fixed_source(solution, extended=EXTENDED):
    """A word source whose only candidate solution is `solution`."""
    return WordSource([solution], extended, rng=random.Random(0))


@pytest.fixture
def word_source():
    return WordSource(["crane", "erase", "slate", "pilot", "ab"], EXTENDED, rng=random.Random(42))


@pytest.fixture
def make_game():
    """Factory: (engine, state) for a game whose solution is known."""
    def _make(solution="crane", max_attempts=6, game_id="test-game"):
        engine = GameEngine(fixed_source(solution), word_length=len(solution), max_attempts=max_attempts)
        return engine, engine.new_game(game_id)
    return _make


@pytest.fixture
def press():
    """Send raw keys to an engine; returns the last snapshot."""
    def _press(engine, state, *keys):
        snapshot = engine.snapshot(state)
        for key in keys:
            if isinstance(key, RawKeyEvent):
                event = key
            elif key in ('Enter', 'Backspace'):
                event = RawKeyEvent(key=key, code=key)
            else:
                event = RawKeyEvent(key=key)
            _, snapshot = engine.apply_input(state, classify_key(event))
        return snapshot
    return _press


@pytest.fixture
def guess(press):
    """Type a word and press Enter."""
    def _guess(engine, state, word):
        return press(engine, state, *word, 'Enter')
    return _guess


@pytest.fixture
def service(monkeypatch):
    """Global game service whose solution is always CRANE."""
    svc = GameService(fixed_source("crane"))
    monkeypatch.setattr(game_service_module, '_game_service', svc)
    return svc


@pytest.fixture
def app(service):
    from wordle_engine import create_app
    from wordle_engine.config import TestingConfig

    flask_app, socketio = create_app(TestingConfig)
    flask_app.socketio = socketio
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    socket_client = app.socketio.test_client(app)
    yield socket_client
    if socket_client.is_connected():
        socket_client.disconnect()
