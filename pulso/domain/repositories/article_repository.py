"""Contrato de persistência de notícias."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Article, NewArticle


class ArticleRepository(ABC):
    """Define as operações de leitura e escrita sobre notícias."""

    @abstractmethod
    def insert(self, candidate: NewArticle) -> Article:
        """Persiste uma nova notícia e retorna o registro canônico armazenado."""

    @abstractmethod
    def increment_likes(self, article_id: str) -> Optional[Article]:
        """Soma uma curtida e retorna o registro atualizado, ou ``None``."""

    @abstractmethod
    def list_recent(self) -> list[Article]:
        """Lista todas as notícias da mais recente para a mais antiga."""

    @abstractmethod
    def list_most_viewed(self, limit: int) -> list[Article]:
        """Lista até ``limit`` notícias ordenadas por visualizações."""


__all__ = ["ArticleRepository"]
