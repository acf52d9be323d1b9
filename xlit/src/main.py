"""Main entry point for the transliteration engine."""

from __future__ import annotations
import asyncio
import inspect
import time
from typing import Any, Dict, Optional

# Import shared utilities
from common.utils import gen_id

# Import config
from .core.config import (
    INCOMING_JOB_PRIORITY,
    JOB_TIMEOUT_S,
    MAX_CONCURRENT_JOBS,
    OUTGOING_JOB_PRIORITY,
    TRANSLATION_CONFIDENCE,
)

# Import exceptions
from .core.exceptions import JobCancelledError, ModelLoadError, XlitError

# Import language data
from .core.languages import LanguageId

# Import schemas
from .api.schemas import (
    BiDirectionalMessage,
    CorrectionResult,
    DetectionResult,
    TranslationCallbacks,
    TranslationMethod,
    TranslationOutcome,
    TranslationStatus,
)

# Import services
from .services.cache import CacheTier
from .services.correction import PhoneticCorrector
from .services.detection import ScriptDetector, is_latin_text
from .services.engine import DictionaryBackend
from .services.pivot import PhraseDictionary, PivotTranslator
from .services.queue import TranslationJobQueue
from .services.registry import LanguageRegistry
from .services.transliteration import TransliterationEngine

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("pipeline")

# Bidirectional Message Pipeline

class BidirectionalPipeline:
    """Outgoing, incoming and live-preview orchestration for one chat pair.

    Every component is built once here and handed to the ones that need it.
    ``backend`` replaces the queue's dictionary backend outright;
    ``fallback_backend`` (NLLB or HTTP) is only consulted on a dictionary miss.
    """

    def __init__(self,
                 registry: Optional[LanguageRegistry] = None,
                 cache: Optional[CacheTier] = None,
                 backend=None,
                 fallback_backend=None,
                 max_concurrency: int = MAX_CONCURRENT_JOBS,
                 job_timeout: Optional[float] = JOB_TIMEOUT_S):

        log.info("Initializing bidirectional transliteration pipeline")

        # Core components
        self.registry = registry or LanguageRegistry()
        self.cache = cache or CacheTier()
        self.detector = ScriptDetector(self.registry)
        self.corrector = PhoneticCorrector(self.registry)
        self.transliterator = TransliterationEngine(self.registry, self.cache)
        self.dictionary = PhraseDictionary(self.registry, self.corrector, self.transliterator)
        self.translator = PivotTranslator(self.registry, self.dictionary, self.transliterator, self.cache)

        # Background work
        self.fallback_backend = fallback_backend
        self.backend = backend or DictionaryBackend(self.translator, fallback_backend)
        self.queue = TranslationJobQueue(self.backend, max_concurrency=max_concurrency, timeout=job_timeout)
        self._settling: Dict[str, asyncio.Task] = {}

        log.info(f"Pipeline ready: {len(self.registry)} languages, {len(self.dictionary)} phrases, "
                 f"backend={type(self.backend).__name__}")

    # ------------------------------------------------------------------
    def detect(self, text: str, hint: Optional[LanguageId] = None) -> DetectionResult:
        hint_code = hint.value if isinstance(hint, LanguageId) else (hint or "")
        return self.cache.get_or_compute(
            "detection", f"{text}|{hint_code}", lambda: self.detector.detect(text, hint)
        )

    def correct(self, text: str, lang: LanguageId) -> CorrectionResult:
        return self.cache.get_or_compute(
            "correction", f"{text}|{lang.value}", lambda: self.corrector.correct(text, lang)
        )

    async def process_outgoing_message(self,
                                       text: str,
                                       sender,
                                       receiver,
                                       callbacks: Optional[TranslationCallbacks] = None) -> BiDirectionalMessage:
        """Build the sender view now and leave the receiver view to the job queue"""
        callbacks = callbacks or TranslationCallbacks()
        sender = self.registry.normalize(sender)
        receiver = self.registry.normalize(receiver)
        message_id = gen_id("msg")

        detection = self.detect(text, sender)
        corrections = []
        working = text
        if detection.is_latin:
            result = self.correct(text, sender)
            working = result.corrected_text
            corrections = list(result.corrections)

        sender_view = working
        if detection.is_latin and not self.registry.is_latin_script(sender):
            sender_view = self.transliterator.transliterate(working, sender)

        # Native input typed in another script than the sender's own keeps its detected language
        source = sender
        if not detection.is_latin and self.registry.script_of(sender) != detection.script:
            source = detection.language

        message = BiDirectionalMessage(
            id=message_id,
            timestamp=time.time(),
            original_input=text,
            detection=detection,
            sender_language=sender,
            sender_native_text=sender_view,
            receiver_language=receiver,
            corrections=corrections,
        )
        self.cache.set("messages", message_id, message)

        log.info(f"[{message_id}] Outgoing {sender.value}->{receiver.value} "
                 f"script={detection.script.value} conf={detection.confidence} corrections={len(corrections)}")

        if self.registry.is_same(source, receiver):
            receiver_view = sender_view
            if is_latin_text(receiver_view) and not self.registry.is_latin_script(receiver):
                receiver_view = self.transliterator.transliterate(receiver_view, receiver)
            message.receiver_native_text = receiver_view
            message.status = TranslationStatus.NOT_NEEDED
            message.translation = self.translator.resolve(sender_view, source, receiver)
            await self._fire(callbacks.on_sender_view_ready, message)
            await self._fire(callbacks.on_receiver_view_ready, message)
            return message

        message.status = TranslationStatus.PENDING
        await self._fire(callbacks.on_sender_view_ready, message)

        future = self.queue.enqueue(sender_view, source, receiver, priority=OUTGOING_JOB_PRIORITY)
        task = asyncio.get_running_loop().create_task(self._settle(message, source, future, callbacks))
        self._settling[message_id] = task
        task.add_done_callback(lambda _: self._settling.pop(message_id, None))
        return message

    async def _settle(self, message: BiDirectionalMessage, source: LanguageId,
                      future: "asyncio.Future[str]", callbacks: TranslationCallbacks) -> None:
        try:
            translated = await future
        except JobCancelledError as e:
            self._fail(message, e)
            log.warning(f"[{message.id}] Translation cancelled")
            await self._fire(callbacks.on_translation_error, message, e)
            return
        except XlitError as e:
            self._fail(message, e)
            log.error(f"[{message.id}] Translation failed: {e}")
            await self._fire(callbacks.on_translation_error, message, e)
            return

        outcome = self.translator.resolve(message.sender_native_text, source, message.receiver_language)
        if outcome.text != translated:
            outcome = TranslationOutcome(
                text=translated,
                translated=True,
                confidence=TRANSLATION_CONFIDENCE["model"],
                method=TranslationMethod.MODEL,
                direction=outcome.direction,
                english_pivot=outcome.english_pivot,
            )
        message.receiver_native_text = translated
        message.translation = outcome
        message.status = TranslationStatus.COMPLETE
        log.info(f"[{message.id}] Receiver view ready via {outcome.method.value} "
                 f"({outcome.direction.value}, conf={outcome.confidence})")
        await self._fire(callbacks.on_receiver_view_ready, message)

    @staticmethod
    def _fail(message: BiDirectionalMessage, error: Exception) -> None:
        message.receiver_native_text = message.sender_native_text
        message.status = TranslationStatus.FAILED
        message.error = str(error)

    async def _fire(self, callback, *args) -> None:
        if callback is None:
            return
        try:
            result = callback(*args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            log.error(f"[{args[0].id}] Callback {getattr(callback, '__name__', callback)} raised: {e}")

    async def wait_for_receiver(self, message_id: str) -> Optional[BiDirectionalMessage]:
        """Wait until the receiver view of a message has settled"""
        task = self._settling.get(message_id)
        if task is not None:
            await asyncio.shield(task)
        return self.get_message(message_id)

    def get_message(self, message_id: str) -> Optional[BiDirectionalMessage]:
        return self.cache.get("messages", message_id)

    # ------------------------------------------------------------------
    async def process_incoming_message(self, text: str, sender_lang, receiver_lang) -> str:
        """Translate a peer's message for display; never raises"""
        source = self.registry.normalize(sender_lang)
        target = self.registry.normalize(receiver_lang)
        if self.registry.is_same(source, target) or not text:
            return text

        outcome = self.translator.resolve(text, source, target)
        if self.translator.is_resolved(outcome) or self.fallback_backend is None:
            return outcome.text

        try:
            return await self.queue.enqueue(text, source, target, priority=INCOMING_JOB_PRIORITY)
        except XlitError as e:
            log.error(f"Incoming translation {source.value}->{target.value} failed: {e}")
            return outcome.text or text

    def get_live_preview(self, text: str, mother_tongue) -> str:
        """Keystroke preview: correction then transliteration, cache first, never queued"""
        if not text:
            return text
        lang = self.registry.normalize(mother_tongue)
        if self.registry.is_latin_script(lang) or not is_latin_text(text):
            return text
        return self.cache.get_or_compute(
            "preview",
            f"{text}|{lang.value}",
            lambda: self.transliterator.transliterate(self.correct(text, lang).corrected_text, lang),
        )

    # ------------------------------------------------------------------
    def queue_stats(self) -> Dict[str, Any]:
        return self.queue.stats()

    def clear_caches(self) -> None:
        """Drop derived results; stored messages stay so pending lookups still resolve"""
        self.cache.clear(keep=("messages",))

    def translator_state(self) -> Dict[str, Any]:
        return {
            "languages": len(self.registry),
            "dictionary_entries": len(self.dictionary),
            "backend": type(self.backend).__name__,
            "fallback_backend": type(self.fallback_backend).__name__ if self.fallback_backend else None,
            "caches": self.cache.stats(),
            "queue": self.queue.stats(),
            "metrics": self.queue.metrics(),
        }

    async def warm_up(self) -> None:
        """Load a lazy fallback model before the first job needs it"""
        try:
            await self.queue.warm_up()
        except ModelLoadError as e:
            log.error(f"Fallback backend failed to load; jobs that need it will fail: {e}")

    def shutdown(self) -> None:
        self.queue.shutdown()
