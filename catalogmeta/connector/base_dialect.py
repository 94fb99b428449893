"""Base class for catalog dialects.

A dialect knows how to ask one database engine for its structural metadata.
Every SQL builder must return statements whose result columns carry the
labels the metadata normalizer reads:

- tables: TABLE_NAME, ENGINE, TABLE_ROWS, DATA_LENGTH, CREATE_TIME,
  UPDATE_TIME, TABLE_COLLATION, TABLE_COMMENT
- table DDL: ``Create Table``; view DDL: ``Create View``
- columns: COLUMN_NAME, DATA_TYPE, COLUMN_TYPE, COLUMN_DEFAULT, EXTRA,
  COLUMN_COMMENT, COLUMN_KEY, IS_NULLABLE, ORDINAL_POSITION, NUMERIC_SCALE,
  CHARACTER_SET_NAME, COLLATION_NAME
- indexes: Key_name, Column_name, Seq_in_index, Non_unique, Index_type,
  Index_comment, Collation, Cardinality, Sub_part (optionally Is_primary)
- views: TABLE_NAME; triggers: TRIGGER_NAME (and ACTION_STATEMENT)
- routine lists: Name, Comment; routine info: SPECIFIC_NAME,
  ROUTINE_COMMENT; routine DDL: ``Create Function`` / ``Create Procedure``
- databases: Database
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Type

from ..models.catalog_models import RoutineKind, TableMeta


class CatalogDialect(ABC):
    """Abstract base class for catalog dialects."""

    name: str = ""
    identifier_quote: str = '"'
    system_databases: Tuple[str, ...] = ()
    # Reserved name of the primary key index, for catalogs that have one
    primary_key_index_name: Optional[str] = None
    # Value of COLUMN_KEY marking a primary key column
    primary_key_indicator: str = "PRI"
    default_schema: Optional[str] = None
    data_access_errors: Tuple[Type[BaseException], ...] = ()
    # A failed statement aborts the open transaction until it is rolled back
    aborts_transaction_on_error: bool = False

    def is_not_found(self, error: BaseException) -> bool:
        """Whether ``error`` reports that the requested object does not exist."""
        return False

    def quote_identifiers(self, *names: Optional[str]) -> str:
        """Quote and join identifier parts with ``.``, skipping blank parts.

        Args:
            *names: Identifier parts, e.g. database and table name

        Returns:
            Quoted identifier such as `` `db1`.`tbl1` ``
        """
        quote = self.identifier_quote
        return ".".join(
            f"{quote}{name.replace(quote, quote * 2)}{quote}"
            for name in names
            if name and name.strip()
        )

    def resolve_schema(self, schema_name: Optional[str]) -> Optional[str]:
        """Schema to scope queries to when the caller gives none."""
        return schema_name or self.default_schema

    @abstractmethod
    def databases_sql(self) -> str:
        """List databases."""
        pass

    @abstractmethod
    def tables_sql(self, database_name: str, schema_name: Optional[str],
                   table_name: Optional[str] = None) -> str:
        """List base tables, optionally narrowed to one table."""
        pass

    @abstractmethod
    def table_ddl_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        """Fetch the definition of one table."""
        pass

    @abstractmethod
    def columns_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        """List the columns of a table ordered by ordinal position."""
        pass

    @abstractmethod
    def indexes_sql(self, database_name: str, schema_name: Optional[str], table_name: str) -> str:
        """List one row per (index, column) of a table."""
        pass

    @abstractmethod
    def views_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        """List views."""
        pass

    @abstractmethod
    def view_ddl_sql(self, database_name: str, schema_name: Optional[str], view_name: str) -> str:
        """Fetch the definition of one view."""
        pass

    @abstractmethod
    def triggers_sql(self, database_name: str, schema_name: Optional[str]) -> str:
        """List trigger names."""
        pass

    @abstractmethod
    def trigger_sql(self, database_name: str, schema_name: Optional[str], trigger_name: str) -> str:
        """Fetch one trigger with its body."""
        pass

    @abstractmethod
    def routines_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str]) -> str:
        """List functions or procedures."""
        pass

    @abstractmethod
    def routine_info_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                         routine_name: str) -> str:
        """Fetch the specific name and comment of one routine."""
        pass

    @abstractmethod
    def routine_ddl_sql(self, kind: RoutineKind, database_name: str, schema_name: Optional[str],
                        routine_name: str) -> str:
        """Fetch the definition of one routine."""
        pass

    @abstractmethod
    def table_meta(self) -> TableMeta:
        """Static column types, charsets, collations, index kinds and default values."""
        pass
