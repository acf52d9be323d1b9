"""End-to-end tests for the bidirectional message pipeline."""

import pytest

from xlit.src.api.schemas import (
    TranslationCallbacks,
    TranslationDirection,
    TranslationMethod,
    TranslationStatus,
)
from xlit.src.core.exceptions import ModelLoadError, TranslationError
from xlit.src.core.languages import LanguageId
from xlit.src.main import BidirectionalPipeline
from xlit.src.services.cache import CacheTier

from conftest import FailingBackend


class TestOutgoing:
    """Sender view now, receiver view when the background job settles."""

    @pytest.mark.asyncio
    async def test_same_language_needs_no_translation(self, pipeline):
        message = await pipeline.process_outgoing_message("namaste", "hi", "hi")
        assert message.status == TranslationStatus.NOT_NEEDED
        assert message.sender_native_text == "नमस्ते"
        assert message.receiver_native_text == message.sender_native_text
        assert message.detection.language == LanguageId.HINDI
        assert pipeline.queue_stats()["pending"] == 0

    @pytest.mark.asyncio
    async def test_romanized_telugu_to_english(self, pipeline):
        message = await pipeline.process_outgoing_message("bagunnava", "te", "en")
        assert message.sender_native_text == "బగున్నవ"
        assert message.status == TranslationStatus.PENDING
        assert message.receiver_native_text is None

        settled = await pipeline.wait_for_receiver(message.id)
        assert settled is message
        assert message.status == TranslationStatus.COMPLETE
        assert message.receiver_native_text == "how are you"
        assert message.translation.direction == TranslationDirection.ENGLISH_TARGET

    @pytest.mark.asyncio
    async def test_native_hindi_to_telugu(self, pipeline):
        message = await pipeline.process_outgoing_message("आप कैसे हैं", "hi", "te")
        assert message.detection.confidence >= 0.9
        assert not message.detection.is_latin
        assert message.corrections == []
        assert message.sender_native_text == "आप कैसे हैं"

        await pipeline.wait_for_receiver(message.id)
        assert message.status == TranslationStatus.COMPLETE
        assert message.receiver_native_text == "మీరు ఎలా ఉన్నారు"
        assert message.translation.direction == TranslationDirection.PIVOT

    @pytest.mark.asyncio
    async def test_corrections_are_reported(self, pipeline):
        message = await pipeline.process_outgoing_message("namste", "hi", "hi")
        assert message.corrections == ["namste → namaste"]
        assert message.sender_native_text == "नमस्ते"

    @pytest.mark.asyncio
    async def test_native_input_in_another_script_keeps_detected_language(self, pipeline):
        message = await pipeline.process_outgoing_message("నమస్కారం", "hi", "en")
        assert message.detection.language == LanguageId.TELUGU
        await pipeline.wait_for_receiver(message.id)
        assert message.receiver_native_text == "hello"

    @pytest.mark.asyncio
    async def test_message_is_stored(self, pipeline):
        message = await pipeline.process_outgoing_message("hello", "en", "hi")
        assert pipeline.get_message(message.id) is message
        await pipeline.wait_for_receiver(message.id)
        assert message.to_dict()["receiver_native_text"] == "नमस्ते"
        assert pipeline.get_message("msg_missing") is None

    @pytest.mark.asyncio
    async def test_backend_failure_shows_sender_text(self, failing_pipeline):
        errors = []
        callbacks = TranslationCallbacks(on_translation_error=lambda m, e: errors.append(e))
        message = await failing_pipeline.process_outgoing_message("namaste", "hi", "te", callbacks)
        await failing_pipeline.wait_for_receiver(message.id)

        assert message.status == TranslationStatus.FAILED
        assert message.receiver_native_text == message.sender_native_text
        assert "backend unavailable" in message.error
        assert len(errors) == 1


class TestCallbacks:
    """Callbacks fire in order; sync and async callbacks both work."""

    @pytest.mark.asyncio
    async def test_order_for_pending_message(self, pipeline):
        events = []

        async def receiver_ready(message):
            events.append(("receiver", message.status))

        callbacks = TranslationCallbacks(
            on_sender_view_ready=lambda m: events.append(("sender", m.status)),
            on_receiver_view_ready=receiver_ready,
        )
        message = await pipeline.process_outgoing_message("hello", "en", "te", callbacks)
        assert events == [("sender", TranslationStatus.PENDING)]

        await pipeline.wait_for_receiver(message.id)
        assert events == [
            ("sender", TranslationStatus.PENDING),
            ("receiver", TranslationStatus.COMPLETE),
        ]

    @pytest.mark.asyncio
    async def test_both_fire_for_same_language(self, pipeline):
        events = []
        callbacks = TranslationCallbacks(
            on_sender_view_ready=lambda m: events.append("sender"),
            on_receiver_view_ready=lambda m: events.append("receiver"),
        )
        await pipeline.process_outgoing_message("namaste", "hi", "hi", callbacks)
        assert events == ["sender", "receiver"]

    @pytest.mark.asyncio
    async def test_raising_callback_does_not_break_pipeline(self, pipeline):
        def boom(message):
            raise RuntimeError("ui gone")

        message = await pipeline.process_outgoing_message(
            "hello", "en", "hi", TranslationCallbacks(on_sender_view_ready=boom, on_receiver_view_ready=boom)
        )
        await pipeline.wait_for_receiver(message.id)
        assert message.status == TranslationStatus.COMPLETE


class TestIncoming:
    """Peer messages translated for display."""

    @pytest.mark.asyncio
    async def test_same_language_unchanged(self, pipeline):
        assert await pipeline.process_incoming_message("नमस्ते", "hi", "Hindi") == "नमस्ते"

    @pytest.mark.asyncio
    async def test_dictionary_hit(self, pipeline):
        assert await pipeline.process_incoming_message("नमस्ते", "hi", "en") == "hello"

    @pytest.mark.asyncio
    async def test_miss_without_model_returns_resolver_text(self, pipeline):
        assert await pipeline.process_incoming_message("कमल", "hi", "en") == "kamal"
        assert pipeline.queue.metrics()["completed"] == 0

    @pytest.mark.asyncio
    async def test_miss_with_model_goes_through_queue(self, model_pipeline, model_backend):
        translated = await model_pipeline.process_incoming_message("कमल", "hi", "en")
        assert translated == "[en] कमल"
        assert model_backend.calls == [("कमल", "hi", "en")]

        # The model's answer is remembered
        outcome = model_pipeline.translator.resolve("कमल", "hi", "en")
        assert outcome.method == TranslationMethod.MODEL
        assert await model_pipeline.process_incoming_message("कमल", "hi", "en") == "[en] कमल"
        assert len(model_backend.calls) == 1

    @pytest.mark.asyncio
    async def test_hit_with_model_skips_queue(self, model_pipeline, model_backend):
        assert await model_pipeline.process_incoming_message("नमस्ते", "hi", "en") == "hello"
        assert model_backend.calls == []


class TestPreview:
    """Keystroke preview: correction then transliteration, cache first."""

    def test_preview(self, pipeline):
        assert pipeline.get_live_preview("namste", "hi") == "नमस्ते"

    def test_latin_language_unchanged(self, pipeline):
        assert pipeline.get_live_preview("hola", "es") == "hola"

    def test_native_input_unchanged(self, pipeline):
        assert pipeline.get_live_preview("नमस्ते", "hi") == "नमस्ते"

    def test_empty(self, pipeline):
        assert pipeline.get_live_preview("", "hi") == ""

    def test_second_call_is_cached(self, pipeline):
        pipeline.get_live_preview("kaise ho", "hi")
        pipeline.get_live_preview("kaise ho", "hi")
        assert pipeline.cache.stats()["preview"]["hits"] == 1

    def test_preview_never_enqueues(self, pipeline):
        pipeline.get_live_preview("bagunnava", "te")
        assert pipeline.queue_stats()["pending"] == 0


class TestState:
    """Introspection and cache control."""

    def test_translator_state(self, pipeline):
        state = pipeline.translator_state()
        assert state["languages"] == len(pipeline.registry)
        assert state["dictionary_entries"] > 0
        assert state["backend"] == "DictionaryBackend"
        assert state["fallback_backend"] is None
        assert "translation" in state["caches"]

    def test_clear_caches(self, pipeline):
        pipeline.get_live_preview("namaste", "hi")
        pipeline.clear_caches()
        assert pipeline.cache.stats()["preview"]["size"] == 0

    @pytest.mark.asyncio
    async def test_clear_caches_keeps_messages(self, pipeline):
        message = await pipeline.process_outgoing_message("hello", "en", "hi")
        await pipeline.wait_for_receiver(message.id)
        pipeline.clear_caches()
        assert pipeline.get_message(message.id) is message
        assert pipeline.cache.stats()["translation"]["size"] == 0


class UnloadableBackend:
    """Lazy fallback whose model never loads."""

    def load(self):
        raise ModelLoadError("weights missing")

    def is_ready(self):
        return False

    def translate(self, text, source_code, target_code):
        raise ModelLoadError("weights missing")


class TestFallbackFailures:
    """A failing heavy backend rejects the job instead of passing the miss through."""

    def test_backend_raises(self, registry):
        pipeline = BidirectionalPipeline(registry=registry, cache=CacheTier(), fallback_backend=FailingBackend())
        try:
            with pytest.raises(TranslationError):
                pipeline.backend.translate("कमल", "hi", "te")
            # Dictionary hits never reach the fallback
            assert pipeline.backend.translate("नमस्ते", "hi", "te") == "నమస్కారం"
        finally:
            pipeline.shutdown()
        assert pipeline.fallback_backend.calls == 1

    @pytest.mark.asyncio
    async def test_outgoing_miss_fails(self, registry):
        pipeline = BidirectionalPipeline(registry=registry, cache=CacheTier(), fallback_backend=FailingBackend())
        errors = []
        callbacks = TranslationCallbacks(on_translation_error=lambda m, e: errors.append(e))
        try:
            message = await pipeline.process_outgoing_message("kamal", "hi", "te", callbacks)
            await pipeline.wait_for_receiver(message.id)
        finally:
            pipeline.shutdown()

        assert message.status == TranslationStatus.FAILED
        assert message.receiver_native_text == message.sender_native_text
        assert "backend unavailable" in message.error
        assert len(errors) == 1

    @pytest.mark.asyncio
    async def test_warm_up_tolerates_load_failure(self, registry):
        pipeline = BidirectionalPipeline(registry=registry, cache=CacheTier(),
                                         fallback_backend=UnloadableBackend())
        try:
            await pipeline.warm_up()
            assert pipeline.queue_stats()["ready"] is False
            # Dictionary hits still work without the model
            assert await pipeline.process_incoming_message("नमस्ते", "hi", "en") == "hello"
        finally:
            pipeline.shutdown()

    @pytest.mark.asyncio
    async def test_warm_up_without_fallback(self, pipeline):
        await pipeline.warm_up()
        assert pipeline.queue_stats()["ready"] is True
