"""
Pytest fixtures for Word Tiles tests.
"""

import asyncio
import random

import pytest

from ..config import Settings
from ..managers.game import GameSession, SessionManager
from ..store import InMemoryHighScoreStore


class FakeDictionary:
    """Dictionary double: knows a fixed word list and records every lookup."""

    def __init__(self, words=()):
        self.words = {w.upper() for w in words}
        self.calls = []

    async def is_valid(self, word):
        self.calls.append(word)
        return word.upper() in self.words

    async def definition(self, word):
        return f"Definition of {word.upper()}." if word.upper() in self.words else None

    async def lookup(self, word):
        self.calls.append(word)
        if word.upper() not in self.words:
            return False, None
        return True, f"Definition of {word.upper()}."


class GatedDictionary(FakeDictionary):
    """Lookups block until release() so tests can interleave submissions."""

    def __init__(self, words=()):
        super().__init__(words)
        self._gate = None

    async def is_valid(self, word):
        self.calls.append(word)
        if self._gate is None:
            self._gate = asyncio.Event()
        await self._gate.wait()
        return word.upper() in self.words

    def release(self):
        if self._gate is None:
            self._gate = asyncio.Event()
        self._gate.set()


class FakeSio:
    """Records Socket.IO emits instead of sending them."""

    def __init__(self):
        self.emitted = []

    async def emit(self, event, data=None, room=None, to=None):
        self.emitted.append((event, data, room or to))

    def events(self, name):
        return [data for event, data, _ in self.emitted if event == name]


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a short feedback lifetime so timers expire quickly."""
    return Settings(FEEDBACK_DURATION_MS=20, LETTERS_PER_GAME=5)


@pytest.fixture
def dictionary() -> FakeDictionary:
    return FakeDictionary({"EAT", "RATE", "TEA", "ATE", "TAX", "ABBA"})


@pytest.fixture
def high_scores() -> InMemoryHighScoreStore:
    return InMemoryHighScoreStore()


@pytest.fixture
def fake_sio() -> FakeSio:
    return FakeSio()


@pytest.fixture
def session(fake_sio, dictionary, high_scores, test_settings) -> GameSession:
    """Session dealt the letters E, A, T, X, R."""
    s = GameSession("game-1", fake_sio, dictionary, high_scores, test_settings, random.Random(7))
    s.letters = ["E", "A", "T", "X", "R"]
    return s


@pytest.fixture
def manager(fake_sio, dictionary, high_scores, test_settings) -> SessionManager:
    return SessionManager(fake_sio, dictionary, high_scores, test_settings, random.Random(11))
