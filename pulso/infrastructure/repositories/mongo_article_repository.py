"""Implementação MongoDB do repositório de notícias."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from pulso.domain import Article, ArticleRepository, ArticleStoreError, NewArticle

from .article_indexes import ensure_article_indexes


class MongoArticleRepository(ArticleRepository):
    """Persiste entidades :class:`Article` utilizando MongoDB."""

    def __init__(self, collection: Collection) -> None:
        self._collection: Collection = collection
        """Coleção MongoDB responsável por armazenar as notícias."""

        ensure_article_indexes(self._collection)

    def insert(self, candidate: NewArticle) -> Article:
        document = self._serialize_candidate(candidate)
        try:
            result = self._collection.insert_one(document)
        except (PyMongoError, InvalidDocument) as exc:
            raise ArticleStoreError("Failed to add news") from exc
        document["_id"] = result.inserted_id
        return self._deserialize_article(document)

    def increment_likes(self, article_id: str) -> Optional[Article]:
        object_id = _parse_object_id(article_id)
        if object_id is None:
            return None
        try:
            data = self._collection.find_one_and_update(
                {"_id": object_id},
                {"$inc": {"likes": 1}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise ArticleStoreError("Failed to like news") from exc
        return self._deserialize_article(data) if data else None

    def list_recent(self) -> list[Article]:
        try:
            cursor = self._collection.find({}).sort("timestamp", DESCENDING)
            return [self._deserialize_article(data) for data in cursor]
        except PyMongoError as exc:
            raise ArticleStoreError("Internal Server Error") from exc

    def list_most_viewed(self, limit: int) -> list[Article]:
        try:
            cursor = (
                self._collection.find({}).sort("views", DESCENDING).limit(limit)
            )
            return [self._deserialize_article(data) for data in cursor]
        except PyMongoError as exc:
            raise ArticleStoreError("Failed to fetch trending news") from exc

    def _serialize_candidate(self, candidate: NewArticle) -> dict[str, Any]:
        return {
            "title": candidate.title,
            "category": candidate.category,
            "content": candidate.content,
            "likes": candidate.likes,
            "views": candidate.views,
            "timestamp": _normalize_timestamp(
                candidate.timestamp or datetime.now(timezone.utc)
            ),
        }

    def _deserialize_article(self, data: dict[str, Any]) -> Article:
        timestamp: datetime = data["timestamp"]
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return Article(
            id=str(data["_id"]),
            title=data.get("title", ""),
            category=data.get("category", ""),
            content=data.get("content", ""),
            likes=int(data.get("likes", 0)),
            views=int(data.get("views", 0)),
            timestamp=timestamp,
        )


def _normalize_timestamp(value: datetime) -> datetime:
    # BSON guarda datas em UTC com precisão de milissegundos
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _parse_object_id(article_id: str) -> ObjectId | None:
    if not ObjectId.is_valid(article_id):
        return None
    return ObjectId(article_id)


__all__ = ["MongoArticleRepository"]
