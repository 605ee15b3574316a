"""Rotas WebSocket e SSE que conectam clientes ao ``BroadcastHub``."""
from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from typing import Any, AsyncIterator

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect
from sse_starlette.sse import EventSourceResponse

from pulso.application import ArticleMutationService

from .broadcast import BroadcastHub, Subscription
from .events import CONNECTED, NEW_ARTICLE, PING, PONG, envelope

log = logging.getLogger("pulso.realtime")


def _describe(client: Any) -> str:
    if client is None:
        return "anonymous"
    return f"{client.host}:{client.port}"


async def sse_events(
    hub: BroadcastHub, request: Request
) -> AsyncIterator[dict[str, str]]:
    """Converte os eventos do hub no formato esperado pelo ``EventSourceResponse``."""

    subscription = hub.subscribe(f"sse:{_describe(request.client)}")
    try:
        async for message in subscription:
            if await request.is_disconnected():
                break
            yield {"event": message["event"], "data": json.dumps(message["data"])}
    finally:
        hub.unsubscribe(subscription)


def create_realtime_router(
    hub: BroadcastHub, mutations: ArticleMutationService
) -> APIRouter:
    """Cria as rotas do canal bidirecional (``/ws``) e do feed SSE."""

    router = APIRouter(tags=["Tempo real"])

    async def forward(websocket: WebSocket, subscription: Subscription) -> None:
        async for message in subscription:
            try:
                await websocket.send_json(message)
            except (WebSocketDisconnect, RuntimeError):
                return

    async def handle_message(websocket: WebSocket, raw: str) -> None:
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            log.warning("Mensagem inválida ignorada (JSON malformado)")
            return
        if not isinstance(message, dict):
            log.warning("Mensagem inválida ignorada (esperado objeto JSON)")
            return

        event = message.get("event")
        if event == NEW_ARTICLE:
            result = await mutations.ingest_from_channel(message.get("data"))
            if not result.ok:
                log.warning("Evento %s descartado: %s", NEW_ARTICLE, result.error)
        elif event == PING:
            await websocket.send_json(envelope(PONG))
        else:
            log.debug("Evento desconhecido ignorado: %r", event)

    async def receive(websocket: WebSocket) -> None:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                return
            raw = frame.get("text")
            if raw is None:
                log.warning("Frame binário ignorado em /ws")
                continue
            await handle_message(websocket, raw)

    @router.websocket("/ws")
    async def news_channel(websocket: WebSocket) -> None:
        """Canal bidirecional: recebe ``new-article`` e envia ``news-update``."""

        await websocket.accept()
        subscription = hub.subscribe(f"ws:{_describe(websocket.client)}")
        await websocket.send_json(envelope(CONNECTED, {"clients": hub.client_count}))

        receiver = asyncio.create_task(receive(websocket))
        sender = asyncio.create_task(forward(websocket, subscription))
        try:
            done, _ = await asyncio.wait(
                {receiver, sender}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            receiver.cancel()
            sender.cancel()
            hub.unsubscribe(subscription)

        for task in done:
            if not task.cancelled() and task.exception() is not None:
                log.error(
                    "Falha no canal %s",
                    subscription.client_id,
                    exc_info=task.exception(),
                )

        if sender in done and not receiver.done():
            # fila encerrada pelo hub (cliente lento ou desligamento)
            with contextlib.suppress(RuntimeError):
                await websocket.close(code=1001)

    @router.get("/news/stream")
    async def stream_news(request: Request) -> EventSourceResponse:
        """Transmite os eventos ``news-update`` via Server-Sent Events."""

        return EventSourceResponse(sse_events(hub, request))

    return router


__all__ = ["create_realtime_router", "sse_events"]
