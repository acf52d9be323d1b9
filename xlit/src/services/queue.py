"""Priority job queue that runs translations off the keystroke path."""

from __future__ import annotations
import asyncio
import heapq
import inspect
import itertools
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional, Tuple

# Import config
from ..core.config import JOB_TIMEOUT_S, MAX_CONCURRENT_JOBS

# Import exceptions
from ..core.exceptions import JobCancelledError, TranslationFailedError

# Import language data
from ..core.languages import LanguageId

# Import schemas
from ..api.schemas import TranslationJob

# Import shared utilities
from common.utils import gen_id, latency_summary, now_ms

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("queue")


class TranslationJobQueue:
    """Heap-ordered queue with bounded concurrency.

    Higher priority dispatches first; equal priorities dispatch in arrival
    order. Draining is scheduled with ``loop.call_soon`` so every job enqueued
    in the same synchronous turn is ordered before the first dispatch. The
    heap is only touched on the event loop thread.
    """

    def __init__(self, backend,
                 max_concurrency: int = MAX_CONCURRENT_JOBS,
                 timeout: Optional[float] = JOB_TIMEOUT_S,
                 executor: Optional[ThreadPoolExecutor] = None):
        self.backend = backend
        self.max_concurrency = max(1, max_concurrency)
        self.timeout = timeout
        self.executor = executor or ThreadPoolExecutor(
            max_workers=self.max_concurrency, thread_name_prefix="xlit-job"
        )

        self._heap: List[Tuple[int, int, TranslationJob]] = []
        self._seq = itertools.count()
        self._active = 0
        self._drain_scheduled = False
        self._tasks = set()

        self._latencies = deque(maxlen=1000)
        self._completed = 0
        self._failed = 0
        self._cancelled = 0

    def enqueue(self, text: str, source: LanguageId, target: LanguageId, priority: int = 0) -> "asyncio.Future[str]":
        """Queue a job and return a future resolved with the translated text"""
        loop = asyncio.get_running_loop()
        seq = next(self._seq)
        job = TranslationJob(
            id=gen_id("job"),
            text=text,
            source=source,
            target=target,
            priority=priority,
            future=loop.create_future(),
            seq=seq,
        )
        heapq.heappush(self._heap, (-priority, seq, job))
        log.debug(f"[{job.id}] Enqueued {source.value}->{target.value} priority={priority} "
                  f"pending={len(self._heap)}")
        self._schedule_drain(loop)
        return job.future

    def _schedule_drain(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        if self._drain_scheduled:
            return
        loop = loop or asyncio.get_running_loop()
        self._drain_scheduled = True
        loop.call_soon(self._drain)

    def _drain(self) -> None:
        self._drain_scheduled = False
        loop = asyncio.get_running_loop()
        while self._heap and self._active < self.max_concurrency:
            _, _, job = heapq.heappop(self._heap)
            if job.future.done():
                # The caller gave up on it already
                continue
            self._active += 1
            task = loop.create_task(self._run(job))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _run(self, job: TranslationJob) -> None:
        loop = asyncio.get_running_loop()
        worker = None
        try:
            await self._ensure_loaded()
            t0 = now_ms()
            translate = self.backend.translate
            if inspect.iscoroutinefunction(translate):
                pending = translate(job.text, job.source.value, job.target.value)
            else:
                worker = self.executor.submit(translate, job.text, job.source.value, job.target.value)
                pending = asyncio.wrap_future(worker)
            if self.timeout:
                result = await asyncio.wait_for(pending, self.timeout)
            else:
                result = await pending
        except asyncio.TimeoutError:
            self._failed += 1
            log.error(f"[{job.id}] Job timed out after {self.timeout}s")
            if not job.future.done():
                job.future.set_exception(TranslationFailedError(job.id, "timeout"))
        except Exception as e:
            self._failed += 1
            log.error(f"[{job.id}] Job failed: {e}")
            if not job.future.done():
                job.future.set_exception(TranslationFailedError(job.id, str(e)))
        else:
            self._completed += 1
            latency_ms = now_ms() - t0
            self._latencies.append(latency_ms)
            log.debug(f"[{job.id}] Job complete in {latency_ms:.0f}ms")
            if not job.future.done():
                job.future.set_result(result)
        finally:
            if worker is not None and not worker.done():
                # A timed out thread keeps its slot until the call returns
                log.warning(f"[{job.id}] Worker still busy after timeout; holding its slot")
                worker.add_done_callback(lambda _: self._release_threadsafe(loop))
            else:
                self._release()

    async def _ensure_loaded(self) -> None:
        """Load a lazy backend before the job clock starts"""
        load = getattr(self.backend, "load", None)
        if load is None or self.backend.is_ready():
            return
        await asyncio.get_running_loop().run_in_executor(self.executor, load)

    async def warm_up(self) -> None:
        await self._ensure_loaded()

    def _release(self) -> None:
        self._active -= 1
        self._schedule_drain()

    def _release_threadsafe(self, loop: asyncio.AbstractEventLoop) -> None:
        if not loop.is_closed():
            loop.call_soon_threadsafe(self._release)

    def cancel(self, predicate: Callable[[TranslationJob], bool]) -> int:
        """Drop queued jobs matching ``predicate``; dispatched jobs run to completion"""
        kept = []
        cancelled = []
        for item in self._heap:
            if predicate(item[2]):
                cancelled.append(item[2])
            else:
                kept.append(item)
        if not cancelled:
            return 0

        heapq.heapify(kept)
        self._heap = kept
        for job in cancelled:
            if not job.future.done():
                job.future.set_exception(JobCancelledError(job.id))
        self._cancelled += len(cancelled)
        log.info(f"Cancelled {len(cancelled)} queued job(s)")
        return len(cancelled)

    def stats(self) -> Dict[str, Any]:
        return {
            "pending": len(self._heap),
            "active": self._active,
            "ready": bool(self.backend.is_ready()),
        }

    def metrics(self) -> Dict[str, Any]:
        summary = latency_summary(self._latencies)
        summary.update({
            "completed": self._completed,
            "failed": self._failed,
            "cancelled": self._cancelled,
        })
        return summary

    def shutdown(self, wait: bool = False) -> None:
        """Reject everything still queued and stop the worker threads"""
        self.cancel(lambda job: True)
        self.executor.shutdown(wait=wait)
        log.info("Job queue shut down")
