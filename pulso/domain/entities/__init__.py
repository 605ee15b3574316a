"""Entidades do domínio de notícias."""

from .article import Article, NewArticle

__all__ = ["Article", "NewArticle"]
