"""Nomes de eventos e envelope das mensagens trocadas no canal em tempo real."""
from __future__ import annotations

from typing import Any

#: Cliente -> servidor: cria uma notícia a partir do canal.
NEW_ARTICLE = "new-article"
#: Servidor -> todos: registro canônico após criação ou curtida.
NEWS_UPDATE = "news-update"
#: Servidor -> cliente recém-conectado.
CONNECTED = "connected"
PING = "ping"
PONG = "pong"


def envelope(event: str, data: Any = None) -> dict[str, Any]:
    """Monta a mensagem ``{"event": ..., "data": ...}`` enviada aos clientes."""

    return {"event": event, "data": data}


__all__ = [
    "CONNECTED",
    "NEWS_UPDATE",
    "NEW_ARTICLE",
    "PING",
    "PONG",
    "envelope",
]
