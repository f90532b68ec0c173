"""Database connection management."""

from gutensearch.db.postgres import PostgresStore

__all__ = ["PostgresStore"]
