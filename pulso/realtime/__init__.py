"""Canal de difusão em tempo real das alterações de notícias."""

from .broadcast import BroadcastHub, Subscription
from .events import CONNECTED, NEW_ARTICLE, NEWS_UPDATE, PING, PONG, envelope

__all__ = [
    "BroadcastHub",
    "CONNECTED",
    "NEWS_UPDATE",
    "NEW_ARTICLE",
    "PING",
    "PONG",
    "Subscription",
    "envelope",
]
