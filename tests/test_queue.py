"""Tests for the priority job queue."""

import asyncio
import time

import pytest

from xlit.src.core.exceptions import JobCancelledError, TranslationFailedError
from xlit.src.core.languages import LanguageId
from xlit.src.services.queue import TranslationJobQueue

from conftest import FailingBackend, RecordingBackend, StaticModelBackend

HI = LanguageId.HINDI
TE = LanguageId.TELUGU


class TestDispatch:
    """Ordering, concurrency and results."""

    @pytest.mark.asyncio
    async def test_higher_priority_runs_first(self):
        backend = RecordingBackend()
        queue = TranslationJobQueue(backend, max_concurrency=1)
        try:
            futures = [queue.enqueue(f"p{p}", HI, TE, priority=p) for p in (1, 5, 3)]
            await asyncio.gather(*futures)
        finally:
            queue.shutdown()
        assert backend.calls == ["p5", "p3", "p1"]

    @pytest.mark.asyncio
    async def test_equal_priority_is_fifo(self):
        backend = RecordingBackend()
        queue = TranslationJobQueue(backend, max_concurrency=1)
        try:
            await asyncio.gather(*[queue.enqueue(t, HI, TE) for t in ("a", "b", "c")])
        finally:
            queue.shutdown()
        assert backend.calls == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_result_and_metrics(self):
        queue = TranslationJobQueue(RecordingBackend())
        try:
            result = await queue.enqueue("namaste", HI, TE)
        finally:
            queue.shutdown()
        assert result == "namaste->te"
        metrics = queue.metrics()
        assert metrics["completed"] == 1
        assert metrics["failed"] == 0
        assert metrics["count"] == 1

    @pytest.mark.asyncio
    async def test_sync_backend_runs_on_executor(self):
        backend = StaticModelBackend()
        queue = TranslationJobQueue(backend)
        try:
            assert await queue.enqueue("hello", HI, TE) == "[te] hello"
        finally:
            queue.shutdown()
        assert backend.calls == [("hello", "hi", "te")]

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self):
        queue = TranslationJobQueue(RecordingBackend(delay=0.05), max_concurrency=2)
        try:
            futures = [queue.enqueue(str(i), HI, TE) for i in range(5)]
            await asyncio.sleep(0.01)
            stats = queue.stats()
            assert stats["active"] == 2
            assert stats["pending"] == 3
            assert stats["ready"] is True
            await asyncio.gather(*futures)
        finally:
            queue.shutdown()
        assert queue.stats()["active"] == 0


class TestFailures:
    """Failures, timeouts and cancellation reject the job's future."""

    @pytest.mark.asyncio
    async def test_backend_error_rejects_future(self):
        queue = TranslationJobQueue(FailingBackend())
        try:
            with pytest.raises(TranslationFailedError) as exc_info:
                await queue.enqueue("x", HI, TE)
        finally:
            queue.shutdown()
        assert "backend unavailable" in exc_info.value.reason
        assert queue.metrics()["failed"] == 1

    @pytest.mark.asyncio
    async def test_failed_job_is_not_retried(self):
        backend = FailingBackend()
        queue = TranslationJobQueue(backend)
        try:
            with pytest.raises(TranslationFailedError):
                await queue.enqueue("x", HI, TE)
        finally:
            queue.shutdown()
        assert backend.calls == 1

    @pytest.mark.asyncio
    async def test_timeout(self):
        queue = TranslationJobQueue(RecordingBackend(delay=1.0), timeout=0.05)
        try:
            with pytest.raises(TranslationFailedError) as exc_info:
                await queue.enqueue("slow", HI, TE)
        finally:
            queue.shutdown()
        assert exc_info.value.reason == "timeout"

    @pytest.mark.asyncio
    async def test_cancel_queued_jobs(self):
        backend = RecordingBackend(delay=0.05)
        queue = TranslationJobQueue(backend, max_concurrency=1)
        try:
            running = queue.enqueue("a", HI, TE)
            queued = [queue.enqueue(t, HI, TE) for t in ("b", "c")]
            # Let the first job dispatch
            await asyncio.sleep(0)
            assert queue.cancel(lambda job: job.text in ("b", "c")) == 2
            for future in queued:
                with pytest.raises(JobCancelledError):
                    await future
            assert await running == "a->te"
        finally:
            queue.shutdown()
        assert backend.calls == ["a"]
        assert queue.metrics()["cancelled"] == 2

    @pytest.mark.asyncio
    async def test_cancel_without_matches(self):
        queue = TranslationJobQueue(RecordingBackend())
        try:
            assert queue.cancel(lambda job: True) == 0
        finally:
            queue.shutdown()

    @pytest.mark.asyncio
    async def test_shutdown_rejects_pending(self):
        queue = TranslationJobQueue(RecordingBackend(delay=0.05), max_concurrency=1)
        first = queue.enqueue("a", HI, TE)
        second = queue.enqueue("b", HI, TE)
        await asyncio.sleep(0)
        queue.shutdown()
        with pytest.raises(JobCancelledError):
            await second
        assert await first == "a->te"


class SlowOnceBackend:
    """Sync backend whose first call outlives the job timeout."""

    def __init__(self, first_delay: float):
        self.first_delay = first_delay
        self.calls = []

    def translate(self, text, source_code, target_code):
        self.calls.append(text)
        if len(self.calls) == 1:
            time.sleep(self.first_delay)
            return "slow"
        return "fast"

    def is_ready(self):
        return True


class LazyBackend:
    """Sync backend that must be loaded before use; loading is slow."""

    def __init__(self, load_delay: float):
        self.load_delay = load_delay
        self.loads = 0
        self.loaded = False

    def load(self):
        time.sleep(self.load_delay)
        self.loads += 1
        self.loaded = True

    def is_ready(self):
        return self.loaded

    def translate(self, text, source_code, target_code):
        return f"{text}:{self.loaded}"


class TestSlotAccounting:
    """A timed out worker thread keeps its slot until it returns."""

    @pytest.mark.asyncio
    async def test_timed_out_thread_holds_slot(self):
        backend = SlowOnceBackend(first_delay=0.5)
        queue = TranslationJobQueue(backend, max_concurrency=1, timeout=0.2)
        try:
            first = queue.enqueue("one", HI, TE)
            second = queue.enqueue("two", HI, TE)
            with pytest.raises(TranslationFailedError) as exc_info:
                await first
            assert exc_info.value.reason == "timeout"
            # The thread is still sleeping, so the second job has not started
            assert queue.stats()["active"] == 1
            assert backend.calls == ["one"]
            assert await second == "fast"
        finally:
            queue.shutdown()
        assert backend.calls == ["one", "two"]
        assert queue.stats()["active"] == 0

    @pytest.mark.asyncio
    async def test_load_runs_outside_job_timeout(self):
        backend = LazyBackend(load_delay=0.3)
        queue = TranslationJobQueue(backend, timeout=0.1)
        try:
            assert await queue.enqueue("hello", HI, TE) == "hello:True"
            assert await queue.enqueue("again", HI, TE) == "again:True"
        finally:
            queue.shutdown()
        assert backend.loads == 1

    @pytest.mark.asyncio
    async def test_warm_up_loads_once(self):
        backend = LazyBackend(load_delay=0.0)
        queue = TranslationJobQueue(backend)
        try:
            await queue.warm_up()
            await queue.warm_up()
            assert backend.is_ready()
        finally:
            queue.shutdown()
        assert backend.loads == 1

    @pytest.mark.asyncio
    async def test_warm_up_without_load(self):
        queue = TranslationJobQueue(RecordingBackend())
        try:
            await queue.warm_up()
        finally:
            queue.shutdown()
