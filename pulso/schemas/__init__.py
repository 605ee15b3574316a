"""Esquemas de entrada e saída da API de notícias."""

from .article_payload import ArticlePayload
from .article_response import ArticleResponse, ErrorResponse

__all__ = ["ArticlePayload", "ArticleResponse", "ErrorResponse"]
