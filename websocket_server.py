import argparse
import asyncio
import json
from collections import defaultdict

import websockets

# Import shared utilities
from common.utils import gen_id
from common.logger import setup_relay_logger

# Import the pipeline
from xlit.src.main import BidirectionalPipeline
from xlit.src.core.config import FALLBACK_BACKEND, MT_ENDPOINT, RELAY_PORT
from xlit.src.api.schemas import TranslationCallbacks
from xlit.src.services.engine import build_fallback_backend
from xlit.src.services.registry import LanguageRegistry

logger = setup_relay_logger()

# Connected clients and chat rooms
clients = {}
rooms = defaultdict(set)

pipeline = None

# Fan-out tasks for peers past the first one
relay_tasks = set()


async def send_json(websocket, payload):
    try:
        await websocket.send(json.dumps(payload, ensure_ascii=False))
    except websockets.exceptions.ConnectionClosed:
        logger.info("Dropped message for a closed connection")


def peers_of(client_id):
    room = clients[client_id]["room"]
    return [cid for cid in rooms.get(room, ()) if cid != client_id and cid in clients]


async def handle_join(client_id, data):
    client = clients[client_id]
    previous = client["room"]
    if previous:
        rooms[previous].discard(client_id)

    client["room"] = data.get("room") or "lobby"
    client["language"] = pipeline.registry.normalize(data.get("language")).value
    rooms[client["room"]].add(client_id)
    logger.info(f"{client_id} joined {client['room']} as {client['language']}")

    await send_json(client["websocket"], {
        "type": "joined",
        "client_id": client_id,
        "room": client["room"],
        "language": client["language"],
        "peers": [{"client_id": cid, "language": clients[cid]["language"]} for cid in peers_of(client_id)],
    })


async def handle_typing(client_id, data):
    client = clients[client_id]
    preview = pipeline.get_live_preview(data.get("text", ""), client["language"])
    await send_json(client["websocket"], {"type": "preview", "text": data.get("text", ""), "preview": preview})


async def handle_message(client_id, data):
    client = clients[client_id]
    text = data.get("text", "")
    if not text.strip():
        return

    peers = peers_of(client_id)
    # With nobody else in the room the author's own language stands in for the receiver
    first_peer = peers[0] if peers else None
    receiver_lang = clients[first_peer]["language"] if first_peer else client["language"]

    async def on_sender_view_ready(message):
        await send_json(client["websocket"], {"type": "sender_view", **message.to_dict()})

    async def on_receiver_view_ready(message):
        if first_peer and first_peer in clients:
            await send_json(clients[first_peer]["websocket"], {
                "type": "receiver_view",
                "from": client_id,
                **message.to_dict(),
            })

    async def on_translation_error(message, error):
        logger.error(f"[{message.id}] Translation for {first_peer} failed: {error}")
        await on_receiver_view_ready(message)

    message = await pipeline.process_outgoing_message(
        text,
        client["language"],
        receiver_lang,
        TranslationCallbacks(
            on_sender_view_ready=on_sender_view_ready,
            on_receiver_view_ready=on_receiver_view_ready,
            on_translation_error=on_translation_error,
        ),
    )

    # Rooms with more than two participants: everyone past the first peer gets an incoming translation
    for peer_id in peers[1:]:
        task = asyncio.create_task(relay_to_peer(client_id, peer_id, message))
        relay_tasks.add(task)
        task.add_done_callback(relay_tasks.discard)


async def relay_to_peer(client_id, peer_id, message):
    peer = clients.get(peer_id)
    if peer is None:
        return
    translated = await pipeline.process_incoming_message(
        message.sender_native_text, message.sender_language, peer["language"]
    )
    await send_json(peer["websocket"], {
        "type": "receiver_view",
        "from": client_id,
        "id": message.id,
        "original_input": message.original_input,
        "sender_native_text": message.sender_native_text,
        "receiver_native_text": translated,
        "receiver_language": peer["language"],
    })


HANDLERS = {
    "join": handle_join,
    "typing": handle_typing,
    "message": handle_message,
}


async def handle_client(websocket):
    """Handle WebSocket client connections"""
    client_id = gen_id("client")
    logger.info(f"New client connected: {client_id}")

    clients[client_id] = {
        "websocket": websocket,
        "room": None,
        "language": "en",
    }

    try:
        async for raw in websocket:
            try:
                data = json.loads(raw)
            except (json.JSONDecodeError, TypeError):
                await send_json(websocket, {"type": "error", "error": "invalid json"})
                continue

            handler = HANDLERS.get(data.get("type"))
            if handler is None:
                await send_json(websocket, {"type": "error", "error": f"unknown type {data.get('type')!r}"})
                continue
            if handler is not handle_join and clients[client_id]["room"] is None:
                await send_json(websocket, {"type": "error", "error": "join a room first"})
                continue
            await handler(client_id, data)

    except websockets.exceptions.ConnectionClosed:
        logger.info(f"Client {client_id} disconnected")
    except Exception as e:
        logger.error(f"Error handling client {client_id}: {e}")
    finally:
        # Clean up
        client = clients.pop(client_id, None)
        if client and client["room"]:
            rooms[client["room"]].discard(client_id)
        logger.info(f"Client {client_id} connection closed")


async def serve(host, port):
    await pipeline.warm_up()
    async with websockets.serve(handle_client, host, port):
        logger.info(f"WebSocket relay started on {host}:{port}")
        await asyncio.Future()


def main():
    global pipeline

    parser = argparse.ArgumentParser(description="Bilingual chat relay with live transliteration")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=RELAY_PORT)
    parser.add_argument("--model", choices=["none", "nllb", "http"], default=FALLBACK_BACKEND)
    parser.add_argument("--mt-endpoint", default=MT_ENDPOINT)
    args = parser.parse_args()

    registry = LanguageRegistry()
    pipeline = BidirectionalPipeline(
        registry=registry,
        fallback_backend=build_fallback_backend(args.model, registry, args.mt_endpoint),
    )

    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        logger.info("Relay stopped")
    finally:
        pipeline.shutdown()


if __name__ == "__main__":
    main()
