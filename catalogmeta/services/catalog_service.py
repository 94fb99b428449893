"""Catalog service wiring configuration, connection and normalizer together."""

import logging
from typing import Optional, Dict, Any

from ..config import AppConfig
from ..connector import CatalogDialect, DialectFactory
from ..db.connection import DatabaseConnection
from ..extractor.metadata_normalizer import MetadataNormalizer
from ..utils import setup_logging

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for reading catalog metadata of the configured database."""

    def __init__(self, config: AppConfig, db_connection: Optional[DatabaseConnection] = None):
        """Initialize catalog service.

        Args:
            config: Application configuration
            db_connection: Connection manager, built from config when omitted
        """
        self.config = config
        self.db_connection = db_connection or DatabaseConnection(config.database)
        self.dialect = self._create_dialect()
        self.normalizer = MetadataNormalizer(self.dialect)

    @classmethod
    def from_config_file(cls, config_path: str) -> "CatalogService":
        """Load configuration, apply environment overrides and set up logging."""
        config = AppConfig.from_file(config_path)
        config.load_environment_variables()
        setup_logging(config.logging.level, config.logging.file)
        return cls(config)

    def _create_dialect(self) -> CatalogDialect:
        dialect = DialectFactory.create_dialect(self.config.database.dialect)
        if dialect is None:
            raise ValueError(f"Unsupported dialect: {self.config.database.dialect}")

        if self.config.system_databases is not None:
            dialect.system_databases = tuple(self.config.system_databases)

        return dialect

    def list_databases(self):
        """List databases of the configured server."""
        with self.db_connection.get_connection() as conn:
            return self.normalizer.databases(conn)

    def describe_table(self, database_name: str, table_name: str,
                       schema_name: Optional[str] = None) -> Dict[str, Any]:
        """Read table, columns, indexes and DDL over a single connection.

        Args:
            database_name: Database name
            table_name: Table name
            schema_name: Schema name, for dialects with schemas

        Returns:
            Dictionary with ``table`` (None if missing), ``columns``,
            ``indexes`` and ``ddl``
        """
        logger.info(f"Describing table {database_name}.{table_name}")

        with self.db_connection.get_connection() as conn:
            tables = self.normalizer.tables(conn, database_name, schema_name, table_name)
            if not tables:
                logger.info(f"Table {database_name}.{table_name} not found")
                return {'table': None, 'columns': [], 'indexes': [], 'ddl': None}

            columns = self.normalizer.columns(conn, database_name, schema_name, table_name)
            indexes = self.normalizer.indexes(conn, database_name, schema_name, table_name)
            ddl = self.normalizer.table_ddl(conn, database_name, schema_name, table_name)

        table = tables[0]
        table.ddl = ddl

        return {
            'table': table,
            'columns': columns,
            'indexes': indexes,
            'ddl': ddl
        }
