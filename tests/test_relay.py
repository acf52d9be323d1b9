"""Tests for the websocket chat relay handlers."""

import asyncio
import json
from collections import defaultdict

import pytest

import websocket_server


class FakeSocket:
    """Collects everything the relay sends to one client."""

    def __init__(self):
        self.sent = []

    async def send(self, data):
        self.sent.append(json.loads(data))

    def of_type(self, kind):
        return [payload for payload in self.sent if payload["type"] == kind]


@pytest.fixture
def relay(monkeypatch, pipeline):
    monkeypatch.setattr(websocket_server, "pipeline", pipeline)
    monkeypatch.setattr(websocket_server, "clients", {})
    monkeypatch.setattr(websocket_server, "rooms", defaultdict(set))
    monkeypatch.setattr(websocket_server, "relay_tasks", set())
    return websocket_server


async def connect(relay, client_id, room, language):
    socket = FakeSocket()
    relay.clients[client_id] = {"websocket": socket, "room": None, "language": "en"}
    await relay.handle_join(client_id, {"type": "join", "room": room, "language": language})
    return socket


class TestRelay:
    """Join, typing preview and message fan-out."""

    @pytest.mark.asyncio
    async def test_join(self, relay):
        await connect(relay, "a", "r1", "Hindi")
        socket = await connect(relay, "b", "r1", "te")
        joined = socket.of_type("joined")[0]
        assert joined["language"] == "te"
        assert joined["peers"] == [{"client_id": "a", "language": "hi"}]

    @pytest.mark.asyncio
    async def test_typing_preview(self, relay):
        socket = await connect(relay, "a", "r1", "hi")
        await relay.handle_typing("a", {"type": "typing", "text": "namaste"})
        assert socket.of_type("preview")[0]["preview"] == "नमस्ते"

    @pytest.mark.asyncio
    async def test_message_reaches_peer_in_their_language(self, relay, pipeline):
        author = await connect(relay, "a", "r1", "hi")
        peer = await connect(relay, "b", "r1", "te")

        await relay.handle_message("a", {"type": "message", "text": "namaste"})
        sender_view = author.of_type("sender_view")[0]
        assert sender_view["sender_native_text"] == "नमस्ते"

        await pipeline.wait_for_receiver(sender_view["id"])
        receiver_view = peer.of_type("receiver_view")[0]
        assert receiver_view["from"] == "a"
        assert receiver_view["receiver_native_text"] == "నమస్కారం"
        assert author.of_type("receiver_view") == []

    @pytest.mark.asyncio
    async def test_every_peer_gets_a_view(self, relay, pipeline):
        author = await connect(relay, "a", "r1", "hi")
        telugu = await connect(relay, "b", "r1", "te")
        english = await connect(relay, "c", "r1", "en")
        await connect(relay, "d", "r2", "ta")

        await relay.handle_message("a", {"type": "message", "text": "namaste"})
        # One fan-out task for the peer past the first
        assert len(relay.relay_tasks) == 1
        await pipeline.wait_for_receiver(author.of_type("sender_view")[0]["id"])
        await asyncio.gather(*relay.relay_tasks)

        assert telugu.of_type("receiver_view")[0]["receiver_native_text"] == "నమస్కారం"
        assert english.of_type("receiver_view")[0]["receiver_native_text"] == "hello"
        assert relay.clients["d"]["websocket"].sent[-1]["type"] == "joined"

    @pytest.mark.asyncio
    async def test_alone_in_room(self, relay):
        author = await connect(relay, "a", "r1", "hi")
        await relay.handle_message("a", {"type": "message", "text": "namaste"})
        assert author.of_type("sender_view")[0]["status"] == "not_needed"

    @pytest.mark.asyncio
    async def test_blank_message_is_ignored(self, relay):
        author = await connect(relay, "a", "r1", "hi")
        await relay.handle_message("a", {"type": "message", "text": "   "})
        assert author.of_type("sender_view") == []

    @pytest.mark.asyncio
    async def test_finished_fan_out_tasks_are_dropped(self, relay, pipeline):
        author = await connect(relay, "a", "r1", "hi")
        await connect(relay, "b", "r1", "te")
        await connect(relay, "c", "r1", "en")

        await relay.handle_message("a", {"type": "message", "text": "namaste"})
        tasks = list(relay.relay_tasks)
        await asyncio.gather(*tasks)
        await pipeline.wait_for_receiver(author.of_type("sender_view")[0]["id"])
        # Done callbacks run on the next loop iteration
        await asyncio.sleep(0)
        assert tasks and all(task.done() for task in tasks)
        assert relay.relay_tasks == set()
