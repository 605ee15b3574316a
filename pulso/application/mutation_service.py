"""Casos de uso que alteram notícias e notificam os clientes conectados.

Toda escrita bem-sucedida é seguida de exatamente um evento ``news-update``
com o registro canônico relido do armazenamento. Falhas de escrita nunca
geram broadcast.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError

from pulso.domain import (
    Article,
    ArticleNotFoundError,
    ArticleRepository,
    ArticleStoreError,
    NewArticle,
)
from pulso.realtime import NEWS_UPDATE, BroadcastHub
from pulso.schemas import ArticlePayload

T = TypeVar("T")


@dataclass(frozen=True)
class IngestResult:
    """Resultado de uma notícia recebida pelo canal em tempo real."""

    #: Registro persistido quando a ingestão foi concluída.
    article: Optional[Article] = None
    #: Motivo da falha quando a notícia não foi persistida.
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.article is not None


class ArticleMutationService:
    """Coordena escrita no repositório e difusão do registro resultante."""

    def __init__(
        self,
        repository: ArticleRepository,
        broadcaster: BroadcastHub,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._broadcaster = broadcaster
        self._log = logger or logging.getLogger("pulso.mutations")

    async def create(self, candidate: NewArticle) -> Article:
        """Persiste uma nova notícia e a difunde para todos os clientes."""

        article = await self._run(self._repository.insert, candidate)
        self._log.info("Notícia criada: %s (%s)", article.id, article.category)
        await self._broadcast(article)
        return article

    async def like(self, article_id: str) -> Article:
        """Soma uma curtida à notícia e difunde o registro atualizado."""

        article = await self._run(self._repository.increment_likes, article_id)
        if article is None:
            raise ArticleNotFoundError(article_id)
        self._log.info("Notícia %s curtida (likes=%d)", article.id, article.likes)
        await self._broadcast(article)
        return article

    async def ingest_from_channel(self, payload: Any) -> IngestResult:
        """Cria uma notícia vinda do canal; falhas são devolvidas, não lançadas."""

        try:
            candidate = ArticlePayload.model_validate(payload).to_domain()
        except ValidationError as exc:
            self._log.warning(
                "Notícia recebida pelo canal rejeitada: %d erro(s) de validação",
                exc.error_count(),
            )
            return IngestResult(error="Invalid article payload")

        try:
            article = await self.create(candidate)
        except ArticleStoreError as exc:
            self._log.error("Falha ao persistir notícia do canal: %s", exc, exc_info=exc)
            return IngestResult(error=str(exc))
        return IngestResult(article=article)

    async def _broadcast(self, article: Article) -> None:
        await self._broadcaster.publish(NEWS_UPDATE, article.to_mapping())

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args))


__all__ = ["ArticleMutationService", "IngestResult"]
