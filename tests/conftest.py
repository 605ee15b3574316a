"""Fixtures compartilhadas: coleção MongoDB em memória e aplicação de teste."""
from __future__ import annotations

from copy import deepcopy
from datetime import datetime
from types import SimpleNamespace
from typing import Any

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from pulso.api import create_app
from pulso.container import NewsContainer, build_news_container


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]):
        self._documents = documents

    def sort(self, key: str, direction: int):
        reverse = direction < 0
        self._documents.sort(key=lambda doc: doc.get(key, 0), reverse=reverse)
        return self

    def limit(self, count: int):
        if count:
            self._documents = self._documents[:count]
        return self

    def __iter__(self):
        return iter(self._documents)


def _truncate_to_millis(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.replace(microsecond=(value.microsecond // 1000) * 1000)
    return value


def _matches(document: dict[str, Any], criteria: dict[str, Any]) -> bool:
    return all(document.get(key) == expected for key, expected in criteria.items())


class FakeCollection:
    """Subconjunto da API de ``pymongo.collection.Collection`` usado pelo serviço."""

    def __init__(self):
        self._documents: list[dict[str, Any]] = []
        self.indexes: list[str] = []

    @property
    def documents(self) -> list[dict[str, Any]]:
        return self._documents

    def create_index(self, keys, **options) -> str:
        name = options.get("name", "_".join(f"{k}_{d}" for k, d in keys))
        self.indexes.append(name)
        return name

    def insert_one(self, document: dict[str, Any]):
        document.setdefault("_id", ObjectId())
        stored = {key: _truncate_to_millis(value) for key, value in document.items()}
        self._documents.append(stored)
        return SimpleNamespace(inserted_id=document["_id"])

    def find_one(self, criteria: dict[str, Any]):
        for document in self._documents:
            if _matches(document, criteria):
                return deepcopy(document)
        return None

    def find(self, criteria: dict[str, Any] | None = None):
        criteria = criteria or {}
        matched = [deepcopy(doc) for doc in self._documents if _matches(doc, criteria)]
        return FakeCursor(matched)

    def find_one_and_update(
        self,
        criteria: dict[str, Any],
        update: dict[str, Any],
        return_document: bool = ReturnDocument.BEFORE,
    ):
        for document in self._documents:
            if _matches(document, criteria):
                before = deepcopy(document)
                for key, amount in update.get("$inc", {}).items():
                    document[key] = document.get(key, 0) + amount
                for key, value in update.get("$set", {}).items():
                    document[key] = value
                return deepcopy(document) if return_document else before
        return None


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def container(collection: FakeCollection) -> NewsContainer:
    return build_news_container(collection=collection)


@pytest.fixture
def client(container: NewsContainer):
    with TestClient(create_app(container)) as test_client:
        yield test_client
