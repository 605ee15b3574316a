"""Modelos Pydantic para validar notícias recebidas pela API e pelo canal."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from pulso.domain import NewArticle


class ArticlePayload(BaseModel):
    """Estrutura intermediária para validar notícias recebidas."""

    #: Título da notícia exatamente como enviado pelo cliente.
    title: str
    #: Categoria livre informada pelo cliente.
    category: str
    #: Corpo integral da notícia em texto puro.
    content: str
    #: Curtidas iniciais; por padrão a notícia nasce sem curtidas.
    likes: int = Field(default=0, ge=0)
    #: Visualizações iniciais, quando importadas de outra fonte.
    views: int = Field(default=0, ge=0)
    #: Instante de criação; omitido significa "agora".
    timestamp: datetime | None = None

    def to_domain(self) -> NewArticle:
        """Converte os dados validados em um candidato ``NewArticle``."""

        timestamp = self.timestamp
        if timestamp is not None and timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return NewArticle(
            title=self.title,
            category=self.category,
            content=self.content,
            likes=self.likes,
            views=self.views,
            timestamp=timestamp,
        )


__all__ = ["ArticlePayload"]
