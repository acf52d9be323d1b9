"""
Pytest configuration and fixtures for the transliteration engine.

This module provides:
- An isolated log directory for the whole session
- Registry, cache and pipeline fixtures
- Fake translation backends for queue and pipeline tests
"""

import asyncio
import os
import shutil
import tempfile

# Logs go to a throwaway directory; must be set before the logger module is imported
_LOG_DIR = tempfile.mkdtemp(prefix="xlit_test_logs_")
os.environ.setdefault("XLIT_LOG_DIR", _LOG_DIR)

import pytest

from xlit.src.core.exceptions import TranslationError
from xlit.src.main import BidirectionalPipeline
from xlit.src.services.cache import CacheTier
from xlit.src.services.registry import LanguageRegistry


class RecordingBackend:
    """Async backend that records every call in dispatch order."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.calls = []

    async def translate(self, text, source_code, target_code):
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        return f"{text}->{target_code}"

    def is_ready(self):
        return True


class FailingBackend:
    """Sync backend that always raises, run on the queue's executor."""

    def __init__(self):
        self.calls = 0

    def translate(self, text, source_code, target_code):
        self.calls += 1
        raise TranslationError("backend unavailable")

    def is_ready(self):
        return False


class StaticModelBackend:
    """Sync stand-in for a heavy model: tags the text it was given."""

    def __init__(self):
        self.calls = []

    def translate(self, text, source_code, target_code):
        self.calls.append((text, source_code, target_code))
        return f"[{target_code}] {text}"

    def is_ready(self):
        return True


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_LOG_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def registry() -> LanguageRegistry:
    """The registry is read-only, so one instance serves every test."""
    return LanguageRegistry()


@pytest.fixture
def cache() -> CacheTier:
    return CacheTier()


@pytest.fixture
def pipeline(registry, cache):
    """Dictionary-only pipeline."""
    p = BidirectionalPipeline(registry=registry, cache=cache)
    yield p
    p.shutdown()


@pytest.fixture
def model_backend() -> StaticModelBackend:
    return StaticModelBackend()


@pytest.fixture
def model_pipeline(registry, model_backend):
    """Pipeline with a heavy fallback behind the dictionary."""
    p = BidirectionalPipeline(registry=registry, cache=CacheTier(), fallback_backend=model_backend)
    yield p
    p.shutdown()


@pytest.fixture
def failing_pipeline(registry):
    """Pipeline whose queue backend always fails."""
    p = BidirectionalPipeline(registry=registry, cache=CacheTier(), backend=FailingBackend())
    yield p
    p.shutdown()
