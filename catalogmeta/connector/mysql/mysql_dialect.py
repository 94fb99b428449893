"""MySQL catalog dialect (also used for MariaDB)."""

from typing import Optional

import pymysql

from ..base_dialect import CatalogDialect
from .mysql_types import mysql_table_meta
from ...models.catalog_models import RoutineKind, TableMeta

# ER_BAD_DB_ERROR, ER_NO_SUCH_TABLE, ER_SP_DOES_NOT_EXIST
NOT_FOUND_ERROR_CODES = {1049, 1146, 1305}


class MySQLDialect(CatalogDialect):
    """Reads MySQL metadata from INFORMATION_SCHEMA and SHOW statements.

    MySQL has no schema level below the database, so ``schema_name`` is
    carried through to the returned entities but never used for scoping.
    """

    name = "mysql"
    identifier_quote = "`"
    system_databases = ("information_schema", "performance_schema", "mysql", "sys")
    primary_key_index_name = "PRIMARY"
    primary_key_indicator = "PRI"
    data_access_errors = (pymysql.MySQLError,)

    def is_not_found(self, error: BaseException) -> bool:
        return (isinstance(error, pymysql.MySQLError)
                and bool(error.args) and error.args[0] in NOT_FOUND_ERROR_CODES)

    def databases_sql(self) -> str:
        return "SHOW DATABASES"

    def tables_sql(self, database_name: str, schema_name: Optional[str],
                   table_name: Optional[str] = None) -> str:
        sql = """
            SELECT
                TABLE_SCHEMA,
                TABLE_NAME,
                ENGINE,
                VERSION,
                TABLE_ROWS,
                DATA_LENGTH,
                AUTO_INCREMENT,
                CREATE_TIME,
                UPDATE_TIME,
                TABLE_COLLATION,
                TABLE_COMMENT
            FROM INFORMATION_SCHEMA.TABLES
            WHERE TABLE_TYPE = 'BASE TABLE'
            AND TABLE_SCHEMA = '%s'""" % database_name
        if table_name and table_name.strip():
            sql += " AND TABLE_NAME = '%s'" % table_name
        return sql

    def table_ddl_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return f"SHOW CREATE TABLE {self.quote_identifiers(database_name, table_name)}"

    def columns_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return """
            SELECT
                COLUMN_NAME,
                ORDINAL_POSITION,
                COLUMN_DEFAULT,
                IS_NULLABLE,
                DATA_TYPE,
                COLUMN_TYPE,
                NUMERIC_SCALE,
                CHARACTER_SET_NAME,
                COLLATION_NAME,
                COLUMN_KEY,
                EXTRA,
                COLUMN_COMMENT
            FROM information_schema.COLUMNS
            WHERE TABLE_SCHEMA = '%s' AND TABLE_NAME = '%s'
            ORDER BY ORDINAL_POSITION
        """ % (database_name, table_name)

    def indexes_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return (f"SHOW INDEX FROM {self.quote_identifiers(table_name)} "
                f"FROM {self.quote_identifiers(database_name)}")

    def views_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        return """
            SELECT TABLE_NAME
            FROM information_schema.VIEWS
            WHERE TABLE_SCHEMA = '%s'
            ORDER BY TABLE_NAME
        """ % database_name

    def view_ddl_sql(self, database_name: str, schema_name: Optional[str], view_name: str) -> str:
        return f"SHOW CREATE VIEW {self.quote_identifiers(database_name, view_name)}"

    def triggers_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        return """
            SELECT TRIGGER_NAME
            FROM INFORMATION_SCHEMA.TRIGGERS
            WHERE TRIGGER_SCHEMA = '%s'
        """ % database_name

    def trigger_sql(self, database_name: str, schema_name: Optional[str], trigger_name: str) -> str:
        return """
            SELECT TRIGGER_NAME, EVENT_MANIPULATION, ACTION_STATEMENT
            FROM INFORMATION_SCHEMA.TRIGGERS
            WHERE TRIGGER_SCHEMA = '%s' AND TRIGGER_NAME = '%s'
        """ % (database_name, trigger_name)

    def routines_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str]) -> str:
        return f"SHOW {kind.value} STATUS WHERE Db = '{database_name}'"

    def routine_info_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                         routine_name: str) -> str:
        return """
            SELECT SPECIFIC_NAME, ROUTINE_COMMENT, ROUTINE_DEFINITION
            FROM information_schema.ROUTINES
            WHERE ROUTINE_TYPE = '%s'
            AND ROUTINE_SCHEMA = '%s'
            AND ROUTINE_NAME = '%s'
        """ % (kind.value, database_name, routine_name)

    def routine_ddl_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                        routine_name: str) -> str:
        return f"SHOW CREATE {kind.value} {self.quote_identifiers(database_name, routine_name)}"

    def table_meta(self) -> TableMeta:
        return mysql_table_meta()
