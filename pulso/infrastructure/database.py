"""Mongo database utilities."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient

from pulso.domain.exceptions import ConfigurationError

log = logging.getLogger("pulso.database")


def get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if not value:
        raise ConfigurationError(f"Environment variable '{name}' is not set")
    return value


@dataclass
class MongoSettings:
    uri: str
    database: str = "pulso"
    collection: str = "news"

    @classmethod
    def from_env(cls) -> "MongoSettings":
        # MONGO_URI is mandatory: the service never runs without a store
        uri = get_env("MONGO_URI")
        database = get_env("MONGO_DATABASE", "pulso")
        collection = get_env("MONGO_COLLECTION", "news")
        return cls(uri=uri, database=database, collection=collection)


class MongoClientFactory:
    """Creates and owns the process-wide Mongo client."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None

    @property
    def settings(self) -> MongoSettings:
        return self._settings

    def create_client(self) -> MongoClient:
        if not self._client:
            # tz_aware keeps stored timestamps comparable with UTC datetimes
            self._client = MongoClient(self._settings.uri, tz_aware=True)
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        return client[self._settings.database]

    def get_collection(self) -> Any:
        return self.get_database()[self._settings.collection]

    def ping(self) -> None:
        """Fails fast when the configured server cannot be reached."""
        self.create_client().admin.command("ping")
        log.info("MongoDB conectado (database=%s)", self._settings.database)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            log.info("Conexão com o MongoDB encerrada")
