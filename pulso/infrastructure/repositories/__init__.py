"""Implementações concretas de repositórios."""

from .article_indexes import ensure_article_indexes
from .mongo_article_repository import MongoArticleRepository

__all__ = ["MongoArticleRepository", "ensure_article_indexes"]
