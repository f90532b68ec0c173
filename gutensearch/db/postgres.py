"""PostgreSQL connection holder shared by search and book lookup."""

from __future__ import annotations

from typing import Any

import psycopg
from loguru import logger
from psycopg.rows import dict_row

from gutensearch.config.schema import PostgresConfig

BOOK_QUERY = "select details from book where book_id = %s"


class PostgresStore:
    """Lazily opened async connection with dict rows."""

    def __init__(self, config: PostgresConfig | None = None):
        self.config = config or PostgresConfig()
        self._conn: psycopg.AsyncConnection | None = None

    async def connection(self) -> psycopg.AsyncConnection:
        if self._conn is None or self._conn.closed:
            self._conn = await psycopg.AsyncConnection.connect(
                self.config.conninfo(),
                autocommit=True,
                row_factory=dict_row,
            )
            logger.info("Connected to PostgreSQL")
        return self._conn

    async def fetch_book(self, book_id: str) -> dict[str, Any] | None:
        """Return a book's details, or None when no row has that id."""
        conn = await self.connection()
        cursor = await conn.execute(BOOK_QUERY, (book_id,))
        row = await cursor.fetchone()
        return row["details"] if row else None

    async def close(self) -> None:
        if self._conn is not None and not self._conn.closed:
            await self._conn.close()
            logger.info("PostgreSQL connection closed")
        self._conn = None
