"""Entidades que representam notícias persistidas pelo serviço."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class NewArticle:
    """Candidato a notícia já validado, ainda sem identificador."""

    #: Título informado pelo autor da notícia.
    title: str
    #: Categoria livre utilizada pelos clientes para agrupar notícias.
    category: str
    #: Corpo da notícia em texto plano.
    content: str
    #: Curtidas iniciais; novas notícias começam sem curtidas.
    likes: int = 0
    #: Visualizações iniciais, alimentadas apenas por escritores externos.
    views: int = 0
    #: Instante de criação; quando omitido o repositório usa o horário atual.
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class Article:
    """Notícia canônica, exatamente como armazenada no MongoDB."""

    #: Identificador atribuído pelo armazenamento na criação.
    id: str
    #: Título informado na criação.
    title: str
    #: Categoria informada na criação.
    category: str
    #: Corpo da notícia.
    content: str
    #: Total de curtidas recebidas pela notícia.
    likes: int
    #: Total de visualizações registradas para a notícia.
    views: int
    #: Instante de criação, imutável após a inserção.
    timestamp: datetime

    def to_mapping(self) -> dict[str, Any]:
        """Representação JSON usada tanto nas respostas quanto nos broadcasts."""

        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "content": self.content,
            "likes": self.likes,
            "views": self.views,
            "timestamp": self.timestamp.isoformat(),
        }


__all__ = ["Article", "NewArticle"]
