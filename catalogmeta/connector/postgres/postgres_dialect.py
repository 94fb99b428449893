"""PostgreSQL catalog dialect."""

from typing import Optional

import psycopg

from ..base_dialect import CatalogDialect
from .postgres_types import postgres_table_meta
from ...models.catalog_models import RoutineKind, TableMeta

_PROKIND = {
    RoutineKind.FUNCTION: "f",
    RoutineKind.PROCEDURE: "p",
}


class PostgreSQLDialect(CatalogDialect):
    """Reads PostgreSQL metadata from pg_catalog and information_schema.

    The connection is bound to one database, so queries are scoped by schema
    (``public`` when none is given). Result columns are aliased to the
    MySQL-style labels the normalizer reads.
    """

    name = "postgresql"
    identifier_quote = '"'
    system_databases = ("postgres", "template0", "template1")
    # Primary keys are flagged through Is_primary, their names are not reserved
    primary_key_index_name = None
    primary_key_indicator = "PRI"
    default_schema = "public"
    data_access_errors = (psycopg.Error,)
    aborts_transaction_on_error = True

    def databases_sql(self) -> str:
        return """
            SELECT datname AS "Database"
            FROM pg_catalog.pg_database
            WHERE datistemplate = false
            ORDER BY datname
        """

    def tables_sql(self, database_name: str, schema_name: Optional[str],
                   table_name: Optional[str] = None) -> str:
        sql = """
            SELECT
                c.relname AS "TABLE_NAME",
                NULL AS "ENGINE",
                GREATEST(c.reltuples, 0)::bigint AS "TABLE_ROWS",
                pg_catalog.pg_relation_size(c.oid) AS "DATA_LENGTH",
                NULL AS "CREATE_TIME",
                NULL AS "UPDATE_TIME",
                NULL AS "TABLE_COLLATION",
                obj_description(c.oid, 'pg_class') AS "TABLE_COMMENT"
            FROM pg_catalog.pg_class c
            JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
            WHERE c.relkind IN ('r', 'p')
            AND n.nspname = '%s'""" % self.resolve_schema(schema_name)
        if table_name and table_name.strip():
            sql += " AND c.relname = '%s'" % table_name
        return sql

    def table_ddl_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return """
            SELECT
                'CREATE TABLE ' || quote_ident(n.nspname) || '.' || quote_ident(c.relname) || ' (' || chr(10)
                || string_agg(
                    '    ' || quote_ident(a.attname) || ' '
                    || pg_catalog.format_type(a.atttypid, a.atttypmod)
                    || CASE WHEN a.attnotnull THEN ' NOT NULL' ELSE '' END,
                    ',' || chr(10) ORDER BY a.attnum
                )
                || chr(10) || ')' AS "Create Table"
            FROM pg_catalog.pg_class c
            JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
            JOIN pg_catalog.pg_attribute a ON a.attrelid = c.oid AND a.attnum > 0 AND NOT a.attisdropped
            WHERE n.nspname = '%s'
            AND c.relname = '%s'
            AND c.relkind IN ('r', 'p')
            GROUP BY n.nspname, c.relname
        """ % (self.resolve_schema(schema_name), table_name)

    def columns_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return """
            SELECT
                c.column_name AS "COLUMN_NAME",
                c.ordinal_position AS "ORDINAL_POSITION",
                c.column_default AS "COLUMN_DEFAULT",
                c.is_nullable AS "IS_NULLABLE",
                c.data_type AS "DATA_TYPE",
                pg_catalog.format_type(a.atttypid, a.atttypmod) AS "COLUMN_TYPE",
                c.numeric_scale AS "NUMERIC_SCALE",
                c.character_set_name AS "CHARACTER_SET_NAME",
                c.collation_name AS "COLLATION_NAME",
                CASE WHEN EXISTS (
                    SELECT 1 FROM pg_catalog.pg_index ix
                    WHERE ix.indrelid = a.attrelid AND ix.indisprimary AND a.attnum = ANY(ix.indkey)
                ) THEN 'PRI' ELSE '' END AS "COLUMN_KEY",
                CASE WHEN c.is_identity = 'YES' OR c.column_default LIKE 'nextval(%%'
                    THEN 'auto_increment' ELSE '' END AS "EXTRA",
                col_description(a.attrelid, a.attnum) AS "COLUMN_COMMENT"
            FROM information_schema.columns c
            JOIN pg_catalog.pg_namespace n ON n.nspname = c.table_schema
            JOIN pg_catalog.pg_class t ON t.relname = c.table_name AND t.relnamespace = n.oid
            JOIN pg_catalog.pg_attribute a ON a.attrelid = t.oid AND a.attname = c.column_name
            WHERE c.table_schema = '%s' AND c.table_name = '%s'
            ORDER BY c.ordinal_position
        """ % (self.resolve_schema(schema_name), table_name)

    def indexes_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        return """
            SELECT
                i.relname AS "Key_name",
                a.attname AS "Column_name",
                k.ord AS "Seq_in_index",
                CASE WHEN ix.indisunique THEN 0 ELSE 1 END AS "Non_unique",
                ix.indisprimary AS "Is_primary",
                upper(am.amname) AS "Index_type",
                obj_description(i.oid, 'pg_class') AS "Index_comment",
                CASE WHEN (ix.indoption[k.ord - 1] & 1) = 1 THEN 'D' ELSE 'A' END AS "Collation",
                NULL AS "Cardinality",
                NULL AS "Sub_part"
            FROM pg_catalog.pg_index ix
            JOIN pg_catalog.pg_class t ON t.oid = ix.indrelid
            JOIN pg_catalog.pg_class i ON i.oid = ix.indexrelid
            JOIN pg_catalog.pg_namespace n ON n.oid = t.relnamespace
            JOIN pg_catalog.pg_am am ON am.oid = i.relam
            CROSS JOIN LATERAL unnest(ix.indkey) WITH ORDINALITY AS k(attnum, ord)
            JOIN pg_catalog.pg_attribute a ON a.attrelid = t.oid AND a.attnum = k.attnum
            WHERE n.nspname = '%s'
            AND t.relname = '%s'
            ORDER BY i.relname, k.ord
        """ % (self.resolve_schema(schema_name), table_name)

    def views_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        return """
            SELECT table_name AS "TABLE_NAME"
            FROM information_schema.views
            WHERE table_schema = '%s'
            ORDER BY table_name
        """ % self.resolve_schema(schema_name)

    def view_ddl_sql(self, database_name: str, schema_name: Optional[str], view_name: str) -> str:
        return """
            SELECT
                'CREATE VIEW ' || quote_ident(schemaname) || '.' || quote_ident(viewname)
                || ' AS' || chr(10) || definition AS "Create View"
            FROM pg_catalog.pg_views
            WHERE schemaname = '%s' AND viewname = '%s'
        """ % (self.resolve_schema(schema_name), view_name)

    def triggers_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        return """
            SELECT DISTINCT trigger_name AS "TRIGGER_NAME"
            FROM information_schema.triggers
            WHERE trigger_schema = '%s'
            ORDER BY trigger_name
        """ % self.resolve_schema(schema_name)

    def trigger_sql(self, database_name: str, schema_name: Optional[str], trigger_name: str) -> str:
        return """
            SELECT
                t.tgname AS "TRIGGER_NAME",
                pg_catalog.pg_get_triggerdef(t.oid, true) AS "ACTION_STATEMENT"
            FROM pg_catalog.pg_trigger t
            JOIN pg_catalog.pg_class c ON c.oid = t.tgrelid
            JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
            WHERE NOT t.tgisinternal
            AND n.nspname = '%s'
            AND t.tgname = '%s'
        """ % (self.resolve_schema(schema_name), trigger_name)

    def routines_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str]) -> str:
        return """
            SELECT
                p.proname AS "Name",
                obj_description(p.oid, 'pg_proc') AS "Comment"
            FROM pg_catalog.pg_proc p
            JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
            WHERE p.prokind = '%s'
            AND n.nspname = '%s'
            ORDER BY p.proname
        """ % (_PROKIND[kind], self.resolve_schema(schema_name))

    def routine_info_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                         routine_name: str) -> str:
        return """
            SELECT
                p.proname || '_' || p.oid AS "SPECIFIC_NAME",
                obj_description(p.oid, 'pg_proc') AS "ROUTINE_COMMENT"
            FROM pg_catalog.pg_proc p
            JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
            WHERE p.prokind = '%s'
            AND n.nspname = '%s'
            AND p.proname = '%s'
        """ % (_PROKIND[kind], self.resolve_schema(schema_name), routine_name)

    def routine_ddl_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                        routine_name: str) -> str:
        return """
            SELECT pg_catalog.pg_get_functiondef(p.oid) AS "%s"
            FROM pg_catalog.pg_proc p
            JOIN pg_catalog.pg_namespace n ON n.oid = p.pronamespace
            WHERE p.prokind = '%s'
            AND n.nspname = '%s'
            AND p.proname = '%s'
        """ % (kind.ddl_label, _PROKIND[kind], self.resolve_schema(schema_name), routine_name)

    def table_meta(self) -> TableMeta:
        return postgres_table_meta()
