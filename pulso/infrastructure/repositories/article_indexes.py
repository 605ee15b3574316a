"""Utilitários para criação de índices da coleção de notícias."""
from __future__ import annotations

import logging

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.errors import OperationFailure

log = logging.getLogger("pulso.database")

# IndexOptionsConflict e IndexKeySpecsConflict
_INDEX_CONFLICT_CODES = frozenset({85, 86})


def ensure_article_indexes(collection: Collection) -> None:
    """Garante que os índices usados pelas listagens existam."""

    definitions: tuple[tuple[list[tuple[str, int]], dict[str, object]], ...] = (
        (
            [("timestamp", DESCENDING)],
            {"name": "timestamp_desc", "background": True},
        ),
        (
            [("views", DESCENDING)],
            {"name": "views_desc", "background": True},
        ),
    )

    for keys, options in definitions:
        try:
            collection.create_index(keys, **options)
        except OperationFailure as exc:
            if exc.code not in _INDEX_CONFLICT_CODES:
                raise
            log.warning("Índice %s já existe com outra definição", options["name"])


__all__ = ["ensure_article_indexes"]
