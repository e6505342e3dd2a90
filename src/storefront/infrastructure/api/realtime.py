"""WebSocket channel that relays product announcements to clients."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from loguru import logger

from storefront.domain.ports import PRODUCT_CREATED
from storefront.infrastructure.json_values import finite_or_null

router = APIRouter(tags=["realtime"])

CLIENT_ADD_PRODUCT = "addProduct"


async def _pump(websocket: WebSocket, queue: asyncio.Queue[dict]) -> None:
    """Send queued events to the client until it goes away."""
    while True:
        message = await queue.get()
        try:
            await websocket.send_json(message)
        except (WebSocketDisconnect, RuntimeError) as exc:
            logger.debug("Stopped relaying to a closed websocket: {}", exc)
            return


@router.websocket("/ws")
async def realtime(websocket: WebSocket):
    """Push ``newProduct`` events to the client as they happen.

    Clients may also send ``{"event": "addProduct", "data": ...}``, which
    is re-broadcast as ``newProduct`` to every connected client.
    """
    notifier = websocket.app.state.container.notifier
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[dict] = asyncio.Queue()

    def forward(event: str, payload: Any) -> None:
        message = {"event": event, "data": finite_or_null(payload)}
        loop.call_soon_threadsafe(queue.put_nowait, message)

    # Subscribe before accepting so nothing published after the handshake is missed.
    unsubscribe = notifier.subscribe(forward)
    await websocket.accept()
    logger.info("Realtime client connected")
    sender = asyncio.create_task(_pump(websocket, queue))

    try:
        while True:
            text = await websocket.receive_text()
            try:
                message = json.loads(text)
            except ValueError:
                logger.warning("Ignoring malformed realtime message: {!r}", text[:200])
                continue
            if isinstance(message, dict) and message.get("event") == CLIENT_ADD_PRODUCT:
                notifier.publish(PRODUCT_CREATED, message.get("data"))
    except WebSocketDisconnect:
        logger.info("Realtime client disconnected")
    finally:
        unsubscribe()
        sender.cancel()
