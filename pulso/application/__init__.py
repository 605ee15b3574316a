"""Casos de uso do serviço de notícias."""

from .mutation_service import ArticleMutationService, IngestResult
from .query_service import TRENDING_LIMIT, ArticleQueryService

__all__ = [
    "ArticleMutationService",
    "ArticleQueryService",
    "IngestResult",
    "TRENDING_LIMIT",
]
