"""Database connection management."""

import psycopg
import pymysql
from contextlib import contextmanager
import logging

from ..config import DatabaseConfig
from ..connector.dialect_factory import DialectFactory
from ..connector.postgres import PostgreSQLDialect

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Opens DB-API connections for the configured dialect."""

    def __init__(self, config: DatabaseConfig):
        """Initialize database connection.

        Args:
            config: Database connection configuration
        """
        self.config = config

    @property
    def is_postgres(self) -> bool:
        return DialectFactory.resolve_name(self.config.dialect) == PostgreSQLDialect.name

    def _connect(self):
        if self.is_postgres:
            # Catalog reads only; a failed lookup must not abort later ones
            return psycopg.connect(self.config.get_connection_string(),
                                   connect_timeout=self.config.connect_timeout,
                                   autocommit=True)

        params = self.config.get_connection_params()
        return pymysql.connect(
            host=params['host'],
            port=params['port'],
            user=params['user'],
            password=params['password'] or '',
            database=params['database'],
            connect_timeout=self.config.connect_timeout,
            charset='utf8mb4'
        )

    @contextmanager
    def get_connection(self):
        """Get database connection as context manager."""
        connection = None
        try:
            connection = self._connect()
            yield connection
        except Exception as e:
            logger.error(f"Database connection error: {e}")
            if connection:
                connection.rollback()
            raise
        finally:
            if connection:
                connection.close()

    def test_connection(self) -> bool:
        """Test database connection.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            with self.get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1")
                    result = cur.fetchone()
                    return result[0] == 1
        except Exception as e:
            logger.error(f"Connection test failed: {e}")
            return False
