"""Tests for the catalog service."""

import os
import tempfile
import pytest
from contextlib import contextmanager
from unittest.mock import Mock, patch

from catalogmeta.config import AppConfig, DatabaseConfig, LoggingConfig
from catalogmeta.connector.postgres import PostgreSQLDialect
from catalogmeta.services.catalog_service import CatalogService

TABLE_LABELS = ["TABLE_SCHEMA", "TABLE_NAME", "ENGINE", "VERSION", "TABLE_ROWS", "DATA_LENGTH",
                "AUTO_INCREMENT", "CREATE_TIME", "UPDATE_TIME", "TABLE_COLLATION", "TABLE_COMMENT"]

COLUMN_LABELS = ["COLUMN_NAME", "ORDINAL_POSITION", "COLUMN_DEFAULT", "IS_NULLABLE", "DATA_TYPE",
                 "COLUMN_TYPE", "NUMERIC_SCALE", "CHARACTER_SET_NAME", "COLLATION_NAME", "COLUMN_KEY",
                 "EXTRA", "COLUMN_COMMENT"]

INDEX_LABELS = ["Table", "Non_unique", "Key_name", "Seq_in_index", "Column_name", "Collation",
                "Cardinality", "Sub_part", "Packed", "Null", "Index_type", "Comment", "Index_comment"]


def make_service(fake_connection, dialect="mysql", system_databases=None):
    config = AppConfig(
        database=DatabaseConfig(dialect=dialect, host="db.local", user="reader"),
        logging=LoggingConfig(),
        system_databases=system_databases
    )

    @contextmanager
    def get_connection():
        yield fake_connection

    db_connection = Mock()
    db_connection.get_connection = get_connection
    return CatalogService(config, db_connection)


class TestCatalogService:
    """Test CatalogService class."""

    def test_unsupported_dialect(self, fake_connection):
        """Test configuration with an unknown dialect is rejected."""
        with pytest.raises(ValueError):
            make_service(fake_connection, dialect="oracle")

    def test_list_databases_with_configured_system_names(self, fake_connection):
        """Test system databases from configuration replace the dialect's."""
        fake_connection.add("SHOW DATABASES", ["Database"], [("audit",), ("mysql",), ("shop",)])
        service = make_service(fake_connection, system_databases=["audit"])

        databases = service.list_databases()

        assert [d.name for d in databases] == ["mysql", "shop", "audit"]
        assert [d.system for d in databases] == [False, False, True]

    def test_describe_table(self, fake_connection):
        """Test table, columns, indexes and DDL are read together."""
        fake_connection.add("INFORMATION_SCHEMA.TABLES", TABLE_LABELS, [
            ("shop", "orders", "InnoDB", 10, 1, 16384, None, None, None, None, ""),
        ])
        fake_connection.add("information_schema.COLUMNS", COLUMN_LABELS, [
            ("id", 1, None, "NO", "bigint", "bigint", 0, None, None, "PRI", "auto_increment", ""),
        ])
        fake_connection.add("SHOW INDEX", INDEX_LABELS, [
            ("orders", 0, "PRIMARY", 1, "id", "A", 1, None, None, "", "BTREE", "", ""),
        ])
        fake_connection.add("SHOW CREATE TABLE", ["Table", "Create Table"], [("orders", "CREATE TABLE ...")])
        service = make_service(fake_connection)

        result = service.describe_table("shop", "orders")

        assert result['table'].name == "orders"
        assert result['table'].ddl == "CREATE TABLE ..."
        assert [c.name for c in result['columns']] == ["id"]
        assert [i.name for i in result['indexes']] == ["PRIMARY"]
        assert result['ddl'] == "CREATE TABLE ..."

    def test_describe_missing_table(self, fake_connection):
        """Test a missing table skips the column, index and DDL queries."""
        service = make_service(fake_connection)

        result = service.describe_table("shop", "ghost")

        assert result['table'] is None
        assert result['columns'] == []
        assert result['indexes'] == []
        assert result['ddl'] is None
        assert len(fake_connection.executed) == 1
        assert "INFORMATION_SCHEMA.TABLES" in fake_connection.executed[0]


class TestFromConfigFile:
    """Test building the service from a YAML file."""

    def test_from_config_file(self):
        """Test configuration, logging and dialect are set up."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yml', delete=False) as f:
            f.write("database:\n  dialect: postgresql\n  dsn: postgresql://u:p@h/shop\nlogging:\n  level: DEBUG\n")
            f.flush()

            try:
                with patch('catalogmeta.services.catalog_service.setup_logging') as mock_logging:
                    service = CatalogService.from_config_file(f.name)

                mock_logging.assert_called_once_with("DEBUG", None)
                assert isinstance(service.dialect, PostgreSQLDialect)
                assert service.db_connection.is_postgres
            finally:
                os.unlink(f.name)
