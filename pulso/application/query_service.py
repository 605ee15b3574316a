"""Casos de uso relacionados à consulta de notícias."""
from __future__ import annotations

from pulso.domain import Article, ArticleRepository

TRENDING_LIMIT = 5


class ArticleQueryService:
    """Fornece acesso somente leitura às notícias armazenadas."""

    def __init__(self, repository: ArticleRepository) -> None:
        self._repository = repository

    def list_all(self) -> list[Article]:
        """Lista todas as notícias da mais recente para a mais antiga."""

        return self._repository.list_recent()

    def list_trending(self, limit: int = TRENDING_LIMIT) -> list[Article]:
        """Lista até ``limit`` notícias com mais visualizações."""

        # views só muda por escritores externos; a ordem pode ser estável
        return self._repository.list_most_viewed(min(limit, TRENDING_LIMIT))


__all__ = ["ArticleQueryService", "TRENDING_LIMIT"]
