"""PostgreSQL dialect package."""

from .postgres_dialect import PostgreSQLDialect

__all__ = ['PostgreSQLDialect']
