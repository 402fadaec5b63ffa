"""Pytest configuration and fixtures for garden tests."""

import random
from collections import deque

import pytest


class ScriptedRandom(random.Random):
    """Random source whose ``random()`` replays queued values first.

    ``choice``/``randrange`` keep using the seeded bit generator, so only the
    probability checks are scripted.
    """

    def __init__(self, values=(), seed=0):
        super().__init__(seed)
        self._values = deque(values)

    def random(self):
        if self._values:
            return self._values.popleft()
        return super().random()

    def getrandbits(self, k):
        return super().getrandbits(k)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """Factory for RNGs whose next ``random()`` results are fixed."""

    def _make(*values):
        return ScriptedRandom(values)

    return _make


@pytest.fixture
def api_client():
    """A test client for a fresh, seeded garden app."""
    from fastapi.testclient import TestClient

    from backend.app_factory import create_app

    return TestClient(create_app(seed=42))
