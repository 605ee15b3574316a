"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 5000
_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_SUBSCRIBER_QUEUE_SIZE = 100


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Retorna a porta configurada para expor a API de notícias."""

    return int(os.getenv("PULSO_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Retorna o host utilizado pelo Uvicorn para escutar conexões."""

    return os.getenv("PULSO_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    """Retorna o nível de log configurado para o processo."""

    return os.getenv("PULSO_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


@lru_cache(maxsize=None)
def get_cors_origins() -> tuple[str, ...]:
    """Retorna as origens liberadas no CORS (``*`` por padrão)."""

    raw = os.getenv("PULSO_CORS_ORIGINS", "*")
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


@lru_cache(maxsize=None)
def get_subscriber_queue_size() -> int:
    """Quantidade máxima de eventos pendentes por cliente conectado."""

    return int(
        os.getenv("PULSO_SUBSCRIBER_QUEUE_SIZE", _DEFAULT_SUBSCRIBER_QUEUE_SIZE)
    )


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_cors_origins",
    "get_log_level",
    "get_subscriber_queue_size",
]
