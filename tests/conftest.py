"""
Pytest configuration and shared fixtures for the book_similarity test suite.

Fixtures:
- log_messages: list of messages emitted through Loguru during the test
- write_corpus: writes {name: text} into a temporary directory
- small_settings: Settings for tiny corpora (no size check)
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Ensure project root is on sys.path so tests can import book_similarity.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from book_similarity.application.settings import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    # Application code replaces handlers in setup_logging(); start and end clean.
    logger.remove()
    get_settings.cache_clear()
    yield
    logger.remove()
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def write_corpus(tmp_path):
    def _write(files, directory=None):
        root = directory or tmp_path / "books"
        root.mkdir(parents=True, exist_ok=True)
        for name, text in files.items():
            (root / name).write_text(text, encoding="latin-1")
        return root

    return _write


@pytest.fixture
def filler_texts():
    """Factory: `count` texts whose words never overlap with each other or with plain English."""

    def _make(count, prefix="book"):
        return {
            f"{prefix}{i:02d}.txt": " ".join(f"F{i}W{k}" for k in range(5))
            for i in range(count)
        }

    return _make


@pytest.fixture
def small_settings():
    return Settings(_env_file=None, expected_file_count=None)
