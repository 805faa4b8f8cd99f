"""
Wordle Engine - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import os
import random
import tempfile
from datetime import datetime, timedelta, timezone

# Keep log files out of the working tree; must run before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-engine-logs-'))

import pytest

from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.services import GameRegistry, GameService, GameStorage, WordSource


# =============================================================================
# WORD LIST TEST DATA
# =============================================================================

TEST_WORDS = [
    "crane", "pilot", "husky", "badge", "epoxy", "final", "wrong",
    "smell", "slate", "state", "guess", "flash", "eerie", "geese",
    "sassy", "sissy", "asses",
]


@pytest.fixture
def words() -> list[str]:
    return list(TEST_WORDS)


@pytest.fixture
def word_source(words) -> WordSource:
    """Word source with a fixed seed so target selection is reproducible."""
    return WordSource(words, rng=random.Random(1234))


# =============================================================================
# CLOCK / STORAGE FIXTURES
# =============================================================================

class FakeClock:
    """Clock that advances one minute per call."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def save_path(tmp_path) -> str:
    return str(tmp_path / "data" / "save_data.json")


@pytest.fixture
def storage(save_path, clock) -> GameStorage:
    return GameStorage(save_path, clock=clock)


@pytest.fixture
def registry(clock) -> GameRegistry:
    return GameRegistry(clock=clock)


@pytest.fixture
def game_service(word_source, storage, registry) -> GameService:
    return GameService(word_source, storage, registry)


# =============================================================================
# FLASK FIXTURES
# =============================================================================

@pytest.fixture
def flask_app(game_service):
    return create_app(TestingConfig, game_service)


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


def target_of(service: GameService, game_id: str) -> str:
    """Reads a game's answer straight from the registry."""
    return service.registry.get(game_id).target_word


def wrong_guesses(target: str, count: int) -> list[str]:
    """``count`` vocabulary words that are not ``target``."""
    return [word for word in TEST_WORDS if word != target][:count]
