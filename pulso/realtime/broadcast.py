"""Difusão em memória de eventos para todos os clientes conectados.

Cada cliente (WebSocket ou SSE) recebe uma :class:`Subscription` com fila
própria. ``BroadcastHub.publish`` coloca o mesmo envelope em todas as filas
sem bloquear; clientes lentos cuja fila enche são desconectados.
"""
from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any

from .events import envelope

log = logging.getLogger("pulso.realtime")


class Subscription:
    """Fila de eventos pendentes de um único cliente."""

    def __init__(self, client_id: str, maxsize: int) -> None:
        self.client_id = client_id
        self._queue: asyncio.Queue[dict[str, Any] | None] = asyncio.Queue(maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, message: dict[str, Any]) -> bool:
        if self._closed:
            return False
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            return False
        return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        # descarta pendências para garantir espaço ao marcador de fim
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    async def get(self) -> dict[str, Any] | None:
        return await self._queue.get()

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> dict[str, Any]:
        message = await self.get()
        if message is None:
            raise StopAsyncIteration
        return message


class BroadcastHub:
    """Registro de clientes conectados e difusão de eventos para todos eles."""

    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._subscriptions: dict[str, Subscription] = {}
        self._ids = itertools.count(1)
        self._messages_broadcast = 0

    @property
    def client_count(self) -> int:
        return len(self._subscriptions)

    @property
    def messages_broadcast(self) -> int:
        return self._messages_broadcast

    def subscribe(self, label: str = "client") -> Subscription:
        """Registra um novo cliente e devolve sua fila de eventos."""

        client_id = f"{label}#{next(self._ids)}"
        subscription = Subscription(client_id, self._queue_size)
        self._subscriptions[client_id] = subscription
        log.info("Cliente conectado: %s (total: %d)", client_id, self.client_count)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove o cliente do registro; chamadas repetidas são ignoradas."""

        subscription.close()
        if self._subscriptions.pop(subscription.client_id, None) is not None:
            log.info(
                "Cliente desconectado: %s (total: %d)",
                subscription.client_id,
                self.client_count,
            )

    async def publish(self, event: str, data: Any) -> int:
        """Envia o evento a todos os clientes e retorna quantos o receberam."""

        message = envelope(event, data)
        delivered = 0
        dropped: list[Subscription] = []
        for subscription in list(self._subscriptions.values()):
            if subscription.push(message):
                delivered += 1
            else:
                dropped.append(subscription)

        for subscription in dropped:
            log.warning(
                "Fila do cliente %s cheia; desconectando", subscription.client_id
            )
            self.unsubscribe(subscription)

        self._messages_broadcast += 1
        log.debug("Evento %s entregue a %d cliente(s)", event, delivered)
        return delivered

    async def shutdown(self) -> None:
        """Desconecta todos os clientes."""

        for subscription in list(self._subscriptions.values()):
            self.unsubscribe(subscription)


__all__ = ["BroadcastHub", "Subscription"]
