"""Modelos de resposta expostos pela API de notícias."""
from __future__ import annotations

from pydantic import BaseModel

from pulso.domain import Article


class ArticleResponse(BaseModel):
    """Representação pública de uma notícia armazenada."""

    #: Identificador atribuído pelo MongoDB.
    id: str
    #: Título da notícia.
    title: str
    #: Categoria da notícia.
    category: str
    #: Conteúdo da notícia.
    content: str
    #: Total de curtidas.
    likes: int
    #: Total de visualizações.
    views: int
    #: Instante de criação em formato ISO 8601.
    timestamp: str

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleResponse":
        return cls(**article.to_mapping())


class ErrorResponse(BaseModel):
    """Corpo mínimo retornado em falhas, sem detalhes do driver."""

    error: str


__all__ = ["ArticleResponse", "ErrorResponse"]
