"""Adaptadores de infraestrutura do serviço de notícias."""

from .database import MongoClientFactory, MongoSettings
from .repositories import MongoArticleRepository, ensure_article_indexes

__all__ = [
    "MongoArticleRepository",
    "MongoClientFactory",
    "MongoSettings",
    "ensure_article_indexes",
]
