"""Erros de domínio propagados até a borda HTTP e o canal em tempo real."""
from __future__ import annotations


class PulsoError(Exception):
    """Erro base do serviço de notícias."""


class ConfigurationError(PulsoError):
    """Configuração obrigatória ausente ou inválida na inicialização."""


class ArticleNotFoundError(PulsoError):
    """Nenhuma notícia corresponde ao identificador informado."""

    def __init__(self, article_id: str) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class ArticleStoreError(PulsoError):
    """Falha de leitura ou escrita no armazenamento de notícias."""


__all__ = [
    "ArticleNotFoundError",
    "ArticleStoreError",
    "ConfigurationError",
    "PulsoError",
]
