"""Normalization of dialect catalog results into catalog models."""

import logging
from typing import Callable, Iterable, List, Optional

from ..connector.base_dialect import CatalogDialect
from ..db.executor import ResultCursor, SQLExecutor
from ..db.sorting import sort_databases
from ..models.catalog_models import (
    Column, Database, Index, Routine, RoutineKind, Table, TableMeta, Trigger, View
)
from .index_aggregator import IndexRow, aggregate_indexes
from .type_size import apply_type_size

logger = logging.getLogger(__name__)

AUTO_INCREMENT_MARKER = "auto_increment"

DatabaseSorter = Callable[[List[Database], Iterable[str], object], List[Database]]


class MetadataNormalizer:
    """Read structural metadata through a catalog dialect.

    Every call runs its catalog queries sequentially on the caller's
    connection and returns freshly built entities. Driver errors propagate
    unchanged; objects that do not exist are never reported as errors.
    """

    def __init__(self, dialect: CatalogDialect, executor: Optional[SQLExecutor] = None,
                 database_sorter: DatabaseSorter = sort_databases):
        """Initialize metadata normalizer.

        Args:
            dialect: Catalog dialect of the connected engine
            executor: Query executor, a plain SQLExecutor by default
            database_sorter: Callable ordering the database list
        """
        self.dialect = dialect
        self.executor = executor or SQLExecutor()
        self.database_sorter = database_sorter

    @property
    def system_databases(self) -> List[str]:
        return list(self.dialect.system_databases)

    def databases(self, connection) -> List[Database]:
        """List databases, system databases flagged and ordered by the sorter."""
        databases = self.executor.databases(connection, self.dialect.databases_sql())
        return self.database_sorter(databases, self.dialect.system_databases, connection)

    def tables(self, connection, database_name: str, schema_name: Optional[str] = None,
               table_name: Optional[str] = None) -> List[Table]:
        """List base tables of a database.

        Args:
            connection: DB-API connection
            database_name: Database to read
            schema_name: Schema to read, for dialects with schemas
            table_name: Restrict the result to this table

        Returns:
            Base tables; views and other object kinds are excluded
        """
        self._require_database(database_name)
        sql = self.dialect.tables_sql(database_name, schema_name, table_name)

        def map_tables(cursor: ResultCursor) -> List[Table]:
            tables = []
            while cursor.next():
                tables.append(Table(
                    database_name=database_name,
                    schema_name=schema_name,
                    name=cursor.get_string("TABLE_NAME"),
                    engine=cursor.get_string("ENGINE"),
                    rows=cursor.get_long("TABLE_ROWS"),
                    data_length=cursor.get_long("DATA_LENGTH"),
                    create_time=cursor.get_string("CREATE_TIME"),
                    update_time=cursor.get_string("UPDATE_TIME"),
                    collation=cursor.get_string("TABLE_COLLATION"),
                    comment=cursor.get_string("TABLE_COMMENT")
                ))
            return tables

        tables = self.executor.execute(connection, sql, map_tables)
        logger.debug(f"Found {len(tables)} tables in {database_name}")
        return tables

    def table_ddl(self, connection, database_name: str, schema_name: Optional[str],
                  table_name: str) -> Optional[str]:
        """Get the DDL of a table, or None if the catalog returns nothing."""
        self._require_database(database_name)
        sql = self.dialect.table_ddl_sql(database_name, schema_name, table_name)
        return self._execute_unless_missing(
            connection, sql, lambda cursor: self._first_string(cursor, "Create Table"), None
        )

    def columns(self, connection, database_name: str, schema_name: Optional[str],
                table_name: str) -> List[Column]:
        """List the columns of a table in the catalog's ordinal order."""
        self._require_database(database_name)
        sql = self.dialect.columns_sql(database_name, schema_name, table_name)

        def map_columns(cursor: ResultCursor) -> List[Column]:
            columns = []
            while cursor.next():
                columns.append(self._column_from_row(cursor, database_name, schema_name, table_name))
            return columns

        return self.executor.execute(connection, sql, map_columns)

    def _column_from_row(self, cursor: ResultCursor, database_name: str, schema_name: Optional[str],
                         table_name: str) -> Column:
        name = cursor.get_string("COLUMN_NAME")
        data_type = cursor.get_string("DATA_TYPE")
        extra = cursor.get_string("EXTRA") or ""
        column_key = cursor.get_string("COLUMN_KEY") or ""
        is_nullable = cursor.get_string("IS_NULLABLE") or ""

        column = Column(
            database_name=database_name,
            schema_name=schema_name,
            table_name=table_name,
            name=name,
            old_name=name,
            column_type=data_type.upper() if data_type else None,
            nullable=is_nullable.upper() == "YES",
            default_value=cursor.get_string("COLUMN_DEFAULT"),
            auto_increment=AUTO_INCREMENT_MARKER in extra,
            primary_key=column_key.upper() == self.dialect.primary_key_indicator.upper(),
            ordinal_position=cursor.get_int("ORDINAL_POSITION"),
            decimal_digits=cursor.get_int("NUMERIC_SCALE"),
            charset_name=cursor.get_string("CHARACTER_SET_NAME"),
            collation_name=cursor.get_string("COLLATION_NAME"),
            comment=cursor.get_string("COLUMN_COMMENT")
        )
        return apply_type_size(column, cursor.get_string("COLUMN_TYPE"))

    def indexes(self, connection, database_name: str, schema_name: Optional[str],
                table_name: str) -> List[Index]:
        """List the indexes of a table, one entry per index with ordered columns."""
        self._require_database(database_name)
        sql = self.dialect.indexes_sql(database_name, schema_name, table_name)

        def map_index_rows(cursor: ResultCursor) -> List[IndexRow]:
            has_primary_flag = cursor.has_label("Is_primary")
            rows = []
            while cursor.next():
                rows.append(IndexRow(
                    key_name=cursor.get_string("Key_name"),
                    column_name=cursor.get_string("Column_name"),
                    seq_in_index=cursor.get_int("Seq_in_index"),
                    unique=not cursor.get_bool("Non_unique"),
                    index_type=cursor.get_string("Index_type"),
                    comment=cursor.get_string("Index_comment"),
                    collation=cursor.get_string("Collation"),
                    cardinality=cursor.get_long("Cardinality"),
                    sub_part=cursor.get_long("Sub_part"),
                    primary=bool(has_primary_flag and cursor.get_bool("Is_primary"))
                ))
            return rows

        rows = self._execute_unless_missing(connection, sql, map_index_rows, [])
        return aggregate_indexes(
            rows, database_name, schema_name, table_name,
            primary_key_name=self.dialect.primary_key_index_name
        )

    def views(self, connection, database_name: str, schema_name: Optional[str] = None) -> List[View]:
        """List views by name; DDL is only fetched by ``view``."""
        self._require_database(database_name)
        sql = self.dialect.views_sql(database_name, schema_name)

        def map_views(cursor: ResultCursor) -> List[View]:
            views = []
            while cursor.next():
                views.append(View(
                    database_name=database_name,
                    schema_name=schema_name,
                    name=cursor.get_string("TABLE_NAME")
                ))
            return views

        return self.executor.execute(connection, sql, map_views)

    def view(self, connection, database_name: str, schema_name: Optional[str], view_name: str) -> View:
        """Get one view with its DDL. A missing view yields an empty DDL."""
        self._require_database(database_name)
        view = View(database_name=database_name, schema_name=schema_name, name=view_name, ddl="")
        sql = self.dialect.view_ddl_sql(database_name, schema_name, view_name)
        ddl = self._execute_unless_missing(
            connection, sql, lambda cursor: self._first_string(cursor, "Create View"), None
        )
        if ddl is not None:
            view.ddl = ddl
        return view

    def triggers(self, connection, database_name: str, schema_name: Optional[str] = None) -> List[Trigger]:
        """List triggers by name, without bodies."""
        self._require_database(database_name)
        sql = self.dialect.triggers_sql(database_name, schema_name)

        def map_triggers(cursor: ResultCursor) -> List[Trigger]:
            triggers = []
            while cursor.next():
                triggers.append(Trigger(
                    database_name=database_name,
                    schema_name=schema_name,
                    name=cursor.get_string("TRIGGER_NAME")
                ))
            return triggers

        return self.executor.execute(connection, sql, map_triggers)

    def trigger(self, connection, database_name: str, schema_name: Optional[str],
                trigger_name: str) -> Trigger:
        """Get one trigger with its body.

        The returned trigger always carries the requested identity, even
        when the catalog has no such trigger.
        """
        self._require_database(database_name)
        trigger = Trigger(database_name=database_name, schema_name=schema_name, name=trigger_name)
        sql = self.dialect.trigger_sql(database_name, schema_name, trigger_name)
        body = self.executor.execute(connection, sql, lambda cursor: self._first_string(cursor, "ACTION_STATEMENT"))
        if body is not None:
            trigger.body = body
        return trigger

    def functions(self, connection, database_name: str, schema_name: Optional[str] = None) -> List[Routine]:
        """List stored functions by name."""
        return self._routines(connection, RoutineKind.FUNCTION, database_name, schema_name)

    def function(self, connection, database_name: str, schema_name: Optional[str],
                 function_name: str) -> Routine:
        """Get one stored function with its definition."""
        return self._routine(connection, RoutineKind.FUNCTION, database_name, schema_name, function_name)

    def procedures(self, connection, database_name: str, schema_name: Optional[str] = None) -> List[Routine]:
        """List stored procedures by name."""
        return self._routines(connection, RoutineKind.PROCEDURE, database_name, schema_name)

    def procedure(self, connection, database_name: str, schema_name: Optional[str],
                  procedure_name: str) -> Routine:
        """Get one stored procedure with its definition."""
        return self._routine(connection, RoutineKind.PROCEDURE, database_name, schema_name, procedure_name)

    def _routines(self, connection, kind: RoutineKind, database_name: str,
                  schema_name: Optional[str]) -> List[Routine]:
        self._require_database(database_name)
        sql = self.dialect.routines_sql(kind, database_name, schema_name)

        def map_routines(cursor: ResultCursor) -> List[Routine]:
            has_comment = cursor.has_label("Comment")
            routines = []
            while cursor.next():
                routines.append(Routine(
                    kind=kind,
                    database_name=database_name,
                    schema_name=schema_name,
                    name=cursor.get_string("Name"),
                    comment=cursor.get_string("Comment") if has_comment else None
                ))
            return routines

        return self.executor.execute(connection, sql, map_routines)

    def _routine(self, connection, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                 routine_name: str) -> Routine:
        """Fetch routine info, then its definition.

        The two queries are not atomic. The definition query always runs;
        if it fails, the routine is returned with its body unset.
        """
        self._require_database(database_name)
        routine = Routine(kind=kind, database_name=database_name, schema_name=schema_name, name=routine_name)

        def enrich_info(cursor: ResultCursor) -> None:
            if cursor.next():
                routine.specific_name = cursor.get_string("SPECIFIC_NAME")
                routine.comment = cursor.get_string("ROUTINE_COMMENT")

        info_sql = self.dialect.routine_info_sql(kind, database_name, schema_name, routine_name)
        self.executor.execute(connection, info_sql, enrich_info)

        ddl_sql = self.dialect.routine_ddl_sql(kind, database_name, schema_name, routine_name)
        try:
            body = self.executor.execute(connection, ddl_sql, lambda cursor: self._first_string(cursor, kind.ddl_label))
        except self.dialect.data_access_errors as e:
            self._recover(connection)
            if self.dialect.is_not_found(e):
                logger.debug(f"No definition for {kind.value.lower()} {database_name}.{routine_name}: {e}")
            else:
                logger.warning(f"Could not fetch definition of {kind.value.lower()} {database_name}.{routine_name}: {e}")
            return routine

        if body is not None:
            routine.body = body
        return routine

    def table_meta(self, database_name: Optional[str] = None, schema_name: Optional[str] = None,
                   table_name: Optional[str] = None) -> TableMeta:
        """Get the dialect's editing capabilities. No catalog query is issued."""
        return self.dialect.table_meta()

    def quote_identifiers(self, *names: Optional[str]) -> str:
        """Quote and dot-join identifier parts, skipping blank ones."""
        return self.dialect.quote_identifiers(*names)

    def _execute_unless_missing(self, connection, sql: str, mapper, missing):
        """Run a lookup whose target may not exist; a not-found error yields ``missing``."""
        try:
            return self.executor.execute(connection, sql, mapper)
        except self.dialect.data_access_errors as e:
            if not self.dialect.is_not_found(e):
                raise
            logger.debug(f"Catalog object not found: {e}")
            self._recover(connection)
            return missing

    def _recover(self, connection) -> None:
        if self.dialect.aborts_transaction_on_error:
            connection.rollback()

    @staticmethod
    def _first_string(cursor: ResultCursor, label: str) -> Optional[str]:
        if cursor.next():
            return cursor.get_string(label)
        return None

    @staticmethod
    def _require_database(database_name: str) -> None:
        if not database_name or not database_name.strip():
            raise ValueError("Database name is required")
