"""API pública do domínio de notícias.

Centraliza entidades, erros e repositórios para que possam ser importados
diretamente de ``pulso.domain``.
"""

from .entities import Article, NewArticle
from .exceptions import (
    ArticleNotFoundError,
    ArticleStoreError,
    ConfigurationError,
    PulsoError,
)
from .repositories import ArticleRepository

__all__ = [
    "Article",
    "ArticleNotFoundError",
    "ArticleRepository",
    "ArticleStoreError",
    "ConfigurationError",
    "NewArticle",
    "PulsoError",
]
