"""Dependency container for the news service."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pulso.application import ArticleMutationService, ArticleQueryService
from pulso.domain import ArticleRepository
from pulso.infrastructure import MongoArticleRepository, MongoClientFactory
from pulso.realtime import BroadcastHub
from pulso.settings import get_subscriber_queue_size


@dataclass
class NewsContainer:
    """Container exposing the service dependencies and their lifecycle."""

    article_repository: ArticleRepository
    broadcaster: BroadcastHub
    mutation_service: ArticleMutationService
    query_service: ArticleQueryService
    factory: MongoClientFactory | None = None

    def startup(self) -> None:
        """Checks the store connection; failures abort the startup."""
        if self.factory is not None:
            self.factory.ping()

    async def shutdown(self) -> None:
        await self.broadcaster.shutdown()
        if self.factory is not None:
            self.factory.close()


def build_news_container(
    factory: MongoClientFactory | None = None,
    *,
    collection: Any | None = None,
    broadcaster: BroadcastHub | None = None,
) -> NewsContainer:
    """Build the news service container.

    When ``collection`` is given it is used as-is and no Mongo client is
    created; otherwise ``factory`` (or one built from the environment)
    provides the collection.
    """

    if collection is None:
        factory = factory or MongoClientFactory()
        collection = factory.get_collection()

    article_repository = MongoArticleRepository(collection)
    broadcaster = broadcaster or BroadcastHub(queue_size=get_subscriber_queue_size())
    mutation_service = ArticleMutationService(article_repository, broadcaster)
    query_service = ArticleQueryService(article_repository)

    return NewsContainer(
        article_repository=article_repository,
        broadcaster=broadcaster,
        mutation_service=mutation_service,
        query_service=query_service,
        factory=factory,
    )


__all__ = ["NewsContainer", "build_news_container"]
