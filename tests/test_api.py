"""Smoke tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from xlit.src.api.routes import create_app


@pytest.fixture
def client(pipeline):
    with TestClient(create_app(pipeline)) as test_client:
        yield test_client


class TestReadEndpoints:
    """Health, languages, state and queue stats."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["queue"]["pending"] == 0

    def test_languages(self, client, registry):
        languages = client.get("/languages").json()
        assert len(languages) == len(registry)
        hindi = next(lang for lang in languages if lang["id"] == "hi")
        assert hindi["script"] == "Devanagari"
        assert hindi["nllb_code"] == "hin_Deva"

    def test_state(self, client):
        state = client.get("/state").json()
        assert state["backend"] == "DictionaryBackend"

    def test_queue_stats(self, client):
        body = client.get("/queue/stats").json()
        assert body["pending"] == 0
        assert body["metrics"]["completed"] == 0


class TestTextEndpoints:
    """Detection, correction and transliteration."""

    def test_detect(self, client):
        body = client.post("/detect", json={"text": "नमस्ते", "hint": "mr"}).json()
        assert body["script"] == "Devanagari"
        assert body["language"] == "mr"

    def test_correct_with_suggestions(self, client):
        body = client.post("/correct", json={"text": "namste", "language": "hi", "suggest": True}).json()
        assert body["corrected_text"] == "namaste"
        assert body["corrections"] == ["namste → namaste"]
        assert "namaste" in body["suggestions"]

    def test_transliterate(self, client):
        body = client.post("/transliterate", json={"text": "namaste", "language": "Hindi"}).json()
        assert body["output"] == "नमस्ते"
        assert body["language"] == "hi"
        assert body["valid"] is True

    def test_reverse_transliterate(self, client):
        body = client.post("/reverse-transliterate", json={"text": "नमस्ते", "language": "hi"}).json()
        assert body["output"] == "namaste"

    def test_preview(self, client):
        body = client.post("/preview", json={"text": "bagunnava", "language": "te"}).json()
        assert body["preview"] == "బగున్నవ"


class TestTranslationEndpoints:
    """Translation and chat messages."""

    def test_translate(self, client):
        body = client.post("/translate", json={"text": "hello", "source_lang": "en", "target_lang": "hi"}).json()
        assert body["text"] == "नमस्ते"
        assert body["translated_text"] == "नमस्ते"
        assert body["method"] == "phrase"
        assert body["direction"] == "english_source"

    def test_outgoing_and_lookup(self, client):
        body = client.post(
            "/messages/outgoing", json={"text": "namaste", "sender_lang": "hi", "receiver_lang": "hi"}
        ).json()
        assert body["status"] == "not_needed"
        assert body["sender_native_text"] == "नमस्ते"

        stored = client.get(f"/messages/{body['id']}")
        assert stored.status_code == 200
        assert stored.json()["receiver_native_text"] == "नमस्ते"

    def test_unknown_message(self, client):
        assert client.get("/messages/msg_missing").status_code == 404

    def test_incoming(self, client):
        body = client.post(
            "/messages/incoming", json={"text": "మీరు ఎలా ఉన్నారు", "sender_lang": "te", "receiver_lang": "hi"}
        ).json()
        assert body["translated_text"] == "आप कैसे हैं"

    def test_clear_cache(self, client, pipeline):
        client.post("/preview", json={"text": "namaste", "language": "hi"})
        assert client.post("/cache/clear").json() == {"status": "cleared"}
        assert pipeline.cache.stats()["preview"]["size"] == 0

    def test_clear_cache_keeps_messages(self, client):
        body = client.post(
            "/messages/outgoing", json={"text": "namaste", "sender_lang": "hi", "receiver_lang": "hi"}
        ).json()
        client.post("/cache/clear")
        stored = client.get(f"/messages/{body['id']}")
        assert stored.status_code == 200
        assert stored.json()["id"] == body["id"]


class TestErrors:
    """Unknown languages are rejected on the API boundary."""

    def test_unknown_language_is_422(self, client):
        response = client.post("/transliterate", json={"text": "namaste", "language": "klingon"})
        assert response.status_code == 422
        assert response.json()["language"] == "klingon"

    def test_missing_field_is_422(self, client):
        assert client.post("/translate", json={"text": "hello"}).status_code == 422

