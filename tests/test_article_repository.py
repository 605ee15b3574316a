"""Testes do repositório MongoDB de notícias."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DocumentTooLarge, PyMongoError

from pulso.domain import ArticleStoreError, NewArticle
from pulso.infrastructure import MongoArticleRepository


def _candidate(title: str = "A", **overrides) -> NewArticle:
    data = {"title": title, "category": "tech", "content": "x"}
    data.update(overrides)
    return NewArticle(**data)


def test_insert_assigns_id_and_defaults(collection):
    repository = MongoArticleRepository(collection)

    article = repository.insert(_candidate())

    assert ObjectId.is_valid(article.id)
    assert article.likes == 0
    assert article.views == 0
    assert article.timestamp.tzinfo is not None
    assert len(collection.documents) == 1


def test_insert_returns_record_as_stored(collection):
    repository = MongoArticleRepository(collection)
    timestamp = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)

    article = repository.insert(_candidate(timestamp=timestamp))

    # o MongoDB guarda apenas milissegundos
    assert article.timestamp == timestamp.replace(microsecond=123000)
    assert repository.list_recent() == [article]


def test_insert_normalizes_timestamp_to_utc(collection):
    repository = MongoArticleRepository(collection)
    local = timezone(timedelta(hours=-3))

    article = repository.insert(
        _candidate(timestamp=datetime(2024, 5, 1, 9, 0, tzinfo=local))
    )

    assert article.timestamp.utcoffset() == timedelta(0)
    assert article.timestamp.isoformat() == "2024-05-01T12:00:00+00:00"
    assert repository.list_recent() == [article]


def test_insert_does_not_depend_on_a_read_back():
    collection = MagicMock()
    inserted_id = ObjectId()
    collection.insert_one.return_value = SimpleNamespace(inserted_id=inserted_id)
    collection.find_one.side_effect = PyMongoError("read timed out")
    repository = MongoArticleRepository(collection)

    article = repository.insert(_candidate())

    assert article.id == str(inserted_id)
    assert article.timestamp.microsecond % 1000 == 0
    collection.find_one.assert_not_called()


def test_oversized_document_is_reported_as_store_error():
    collection = MagicMock()
    collection.insert_one.side_effect = DocumentTooLarge("BSON document too large")
    repository = MongoArticleRepository(collection)

    with pytest.raises(ArticleStoreError, match="Failed to add news"):
        repository.insert(_candidate(content="x" * 10))


def test_indexes_are_created_on_init(collection):
    MongoArticleRepository(collection)

    assert collection.indexes == ["timestamp_desc", "views_desc"]


def test_increment_likes_adds_exactly_one(collection):
    repository = MongoArticleRepository(collection)
    article = repository.insert(_candidate())

    first = repository.increment_likes(article.id)
    second = repository.increment_likes(article.id)

    assert first.likes == 1
    assert second.likes == 2
    assert second.timestamp == article.timestamp
    assert repository.increment_likes("missing") is None


def test_list_recent_orders_by_timestamp_desc(collection):
    repository = MongoArticleRepository(collection)
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for offset, title in ((1, "middle"), (0, "oldest"), (2, "newest")):
        repository.insert(_candidate(title, timestamp=base + timedelta(hours=offset)))

    titles = [article.title for article in repository.list_recent()]

    assert titles == ["newest", "middle", "oldest"]


def test_list_most_viewed_limits_and_sorts(collection):
    repository = MongoArticleRepository(collection)
    for views in (3, 10, 0, 7, 1, 5, 8):
        repository.insert(_candidate(f"v{views}", views=views))

    articles = repository.list_most_viewed(5)

    assert [article.views for article in articles] == [10, 8, 7, 5, 3]


def test_store_errors_are_wrapped():
    collection = MagicMock()
    collection.insert_one.side_effect = PyMongoError("connection refused")
    collection.find.side_effect = PyMongoError("connection refused")
    collection.find_one_and_update.side_effect = PyMongoError("connection refused")
    repository = MongoArticleRepository(collection)

    with pytest.raises(ArticleStoreError, match="Failed to add news"):
        repository.insert(_candidate())
    with pytest.raises(ArticleStoreError):
        repository.list_recent()
    with pytest.raises(ArticleStoreError, match="Failed to like news"):
        repository.increment_likes(str(ObjectId()))
