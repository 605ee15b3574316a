"""Pulso - API de notícias com difusão em tempo real."""
from .container import NewsContainer, build_news_container
from .domain import Article, NewArticle

__all__ = [
    "Article",
    "NewArticle",
    "NewsContainer",
    "build_news_container",
]
