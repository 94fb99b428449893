"""Tests for database connection management."""

import pytest
from unittest.mock import MagicMock, patch

from catalogmeta.config import DatabaseConfig
from catalogmeta.db.connection import DatabaseConnection


class TestDatabaseConnection:
    """Test DatabaseConnection class."""

    def test_mysql_connect(self):
        """Test PyMySQL is used for MySQL."""
        config = DatabaseConfig(host="db.local", user="reader", password="secret", database="shop")

        with patch('catalogmeta.db.connection.pymysql.connect') as mock_connect:
            with DatabaseConnection(config).get_connection() as conn:
                assert conn is mock_connect.return_value

        mock_connect.assert_called_once_with(
            host="db.local",
            port=3306,
            user="reader",
            password="secret",
            database="shop",
            connect_timeout=10,
            charset='utf8mb4'
        )
        mock_connect.return_value.close.assert_called_once()

    def test_postgres_connect(self):
        """Test psycopg is used for PostgreSQL."""
        config = DatabaseConfig(dialect="postgresql", dsn="postgresql://u:p@h:5432/shop", connect_timeout=3)
        connection = DatabaseConnection(config)

        with patch('catalogmeta.db.connection.psycopg.connect') as mock_connect:
            with connection.get_connection():
                pass

        assert connection.is_postgres
        mock_connect.assert_called_once_with("postgresql://u:p@h:5432/shop", connect_timeout=3, autocommit=True)

    def test_error_rolls_back_and_closes(self):
        """Test errors inside the block roll back and re-raise."""
        config = DatabaseConfig(host="db.local", user="reader")

        with patch('catalogmeta.db.connection.pymysql.connect') as mock_connect:
            with pytest.raises(RuntimeError):
                with DatabaseConnection(config).get_connection():
                    raise RuntimeError("boom")

        mock_connect.return_value.rollback.assert_called_once()
        mock_connect.return_value.close.assert_called_once()

    def test_test_connection(self):
        """Test connectivity check."""
        config = DatabaseConfig(host="db.local", user="reader")
        conn = MagicMock()
        conn.cursor.return_value.__enter__.return_value.fetchone.return_value = (1,)

        with patch('catalogmeta.db.connection.pymysql.connect', return_value=conn):
            assert DatabaseConnection(config).test_connection() is True

    def test_test_connection_failure(self):
        """Test connectivity check reports failures as False."""
        config = DatabaseConfig(host="db.local", user="reader")

        with patch('catalogmeta.db.connection.pymysql.connect', side_effect=OSError("refused")):
            assert DatabaseConnection(config).test_connection() is False

    def test_dialect_aliases(self):
        """Test driver selection follows the dialect registry aliases."""
        assert DatabaseConnection(DatabaseConfig(dialect="postgres")).is_postgres
        assert not DatabaseConnection(DatabaseConfig(dialect="MariaDB")).is_postgres
