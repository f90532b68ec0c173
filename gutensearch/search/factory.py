"""Adapter table and dispatcher factories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from gutensearch.config.schema import Config, ElasticsearchConfig
from gutensearch.db.postgres import PostgresStore
from gutensearch.search.dispatcher import Adapter, SearchDispatcher
from gutensearch.search.elastic import search_elastic
from gutensearch.search.models import Hit
from gutensearch.search.postgres import search_postgres


def build_elastic_adapter(config: ElasticsearchConfig) -> Adapter:
    """Bind an Elasticsearch endpoint into a phrase -> hits adapter."""

    async def adapter(phrase: str) -> list[Hit]:
        return await search_elastic(
            phrase=phrase,
            base_url=config.base_url,
            index=config.index,
            timeout=config.timeout,
        )

    return adapter


def build_postgres_adapter(store: PostgresStore, limit: int) -> Adapter:
    """Bind a Postgres store into a phrase -> hits adapter."""

    async def adapter(phrase: str) -> list[Hit]:
        connection = await store.connection()
        return await search_postgres(phrase=phrase, connection=connection, limit=limit)

    return adapter


def build_adapters(config: Config, store: PostgresStore) -> dict[str, Adapter]:
    """Map backend identifiers to adapters, in comparison order."""
    return {
        "es": build_elastic_adapter(config.elasticsearch),
        "pg": build_postgres_adapter(store, config.search.result_limit),
    }


@asynccontextmanager
async def open_dispatcher(
    config: Config,
    store: PostgresStore | None = None,
) -> AsyncIterator[SearchDispatcher]:
    """Yield a dispatcher for both backends and close the Postgres connection after."""
    store = store or PostgresStore(config.postgres)
    try:
        yield SearchDispatcher(
            build_adapters(config, store),
            timeout=config.search.dispatch_timeout,
        )
    finally:
        await store.close()
