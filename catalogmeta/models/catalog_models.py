"""Dialect-neutral catalog models returned by the metadata normalizer."""

from enum import Enum
from typing import Dict, List, Any, Optional, Tuple
from dataclasses import dataclass


class IndexKind(Enum):
    """Normalized index kinds."""
    PRIMARY_KEY = "PRIMARY_KEY"
    UNIQUE = "UNIQUE"
    NORMAL = "NORMAL"
    SPATIAL = "SPATIAL"
    FULLTEXT = "FULLTEXT"


class SortDirection(Enum):
    """Sort direction of a column inside an index."""
    ASCENDING = "ASC"
    DESCENDING = "DESC"
    UNSPECIFIED = ""


class RoutineKind(Enum):
    """Stored routine kinds."""
    FUNCTION = "FUNCTION"
    PROCEDURE = "PROCEDURE"

    @property
    def ddl_label(self) -> str:
        """Result column holding the routine definition, e.g. ``Create Function``."""
        return f"Create {self.value.title()}"


@dataclass
class Database:
    """Database (catalog) entry."""
    name: str
    system: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {"name": self.name, "system": self.system}


@dataclass
class Table:
    """Base table with storage statistics."""
    database_name: str
    schema_name: Optional[str] = None
    name: str = ""
    engine: Optional[str] = None
    rows: Optional[int] = None
    data_length: Optional[int] = None
    create_time: Optional[str] = None
    update_time: Optional[str] = None
    collation: Optional[str] = None
    comment: Optional[str] = None
    ddl: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            "name": self.name,
            "engine": self.engine,
            "rows": self.rows,
            "dataLength": self.data_length,
            "createTime": self.create_time,
            "updateTime": self.update_time,
            "collate": self.collation,
            "comment": self.comment,
            "ddl": self.ddl
        }


@dataclass
class Column:
    """Table column.

    ``column_size`` and ``value`` are mutually exclusive: enumerated types
    (ENUM, SET) carry their raw value list in ``value`` and never a size.
    """
    database_name: str
    table_name: str
    name: str
    schema_name: Optional[str] = None
    old_name: Optional[str] = None
    column_type: Optional[str] = None
    nullable: bool = True
    default_value: Optional[str] = None
    auto_increment: bool = False
    primary_key: bool = False
    ordinal_position: Optional[int] = None
    decimal_digits: Optional[int] = None
    charset_name: Optional[str] = None
    collation_name: Optional[str] = None
    column_size: Optional[int] = None
    value: Optional[str] = None
    comment: Optional[str] = None

    def __post_init__(self):
        if self.old_name is None:
            self.old_name = self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format.

        ``nullable`` is emitted as 1 (nullable) / 0 (not nullable) to keep
        the integer encoding existing clients expect.
        """
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            "tableName": self.table_name,
            "name": self.name,
            "oldName": self.old_name,
            "columnType": self.column_type,
            "nullable": 1 if self.nullable else 0,
            "defaultValue": self.default_value,
            "autoIncrement": self.auto_increment,
            "primaryKey": self.primary_key,
            "ordinalPosition": self.ordinal_position,
            "decimalDigits": self.decimal_digits,
            "charSetName": self.charset_name,
            "collationName": self.collation_name,
            "columnSize": self.column_size,
            "value": self.value,
            "comment": self.comment
        }


@dataclass(frozen=True)
class IndexColumn:
    """One column of an index, positioned by ``ordinal_position`` (1-based)."""
    column_name: str
    ordinal_position: int
    direction: SortDirection = SortDirection.UNSPECIFIED
    collation: Optional[str] = None
    cardinality: Optional[int] = None
    sub_part: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "columnName": self.column_name,
            "ordinalPosition": self.ordinal_position,
            "ascOrDesc": self.direction.value or None,
            "collation": self.collation,
            "cardinality": self.cardinality,
            "subPart": self.sub_part
        }


@dataclass(frozen=True)
class Index:
    """Index with its columns ordered by position."""
    database_name: str
    table_name: str
    name: str
    kind: IndexKind
    schema_name: Optional[str] = None
    unique: bool = False
    comment: Optional[str] = None
    columns: Tuple[IndexColumn, ...] = ()

    @property
    def column_names(self) -> List[str]:
        return [column.column_name for column in self.columns]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            "tableName": self.table_name,
            "name": self.name,
            "type": self.kind.value,
            "unique": self.unique,
            "comment": self.comment,
            "columnList": [column.to_dict() for column in self.columns]
        }


@dataclass
class View:
    """View identity plus its DDL text."""
    database_name: str
    schema_name: Optional[str] = None
    name: str = ""
    ddl: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            "name": self.name,
            "ddl": self.ddl
        }


@dataclass
class Trigger:
    """Trigger; ``body`` is only filled when fetched individually."""
    database_name: str
    schema_name: Optional[str] = None
    name: Optional[str] = None
    body: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            "triggerName": self.name,
            "triggerBody": self.body
        }


@dataclass
class Routine:
    """Stored function or procedure."""
    kind: RoutineKind
    database_name: str
    schema_name: Optional[str] = None
    name: Optional[str] = None
    specific_name: Optional[str] = None
    comment: Optional[str] = None
    body: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        prefix = self.kind.value.lower()
        return {
            "databaseName": self.database_name,
            "schemaName": self.schema_name,
            f"{prefix}Name": self.name,
            "specificName": self.specific_name,
            "remarks": self.comment,
            f"{prefix}Body": self.body
        }


@dataclass(frozen=True)
class ColumnType:
    """Column type supported by a dialect and the attributes it accepts."""
    name: str
    support_length: bool = False
    support_scale: bool = False
    support_nullable: bool = True
    support_auto_increment: bool = False
    support_charset: bool = False
    support_collation: bool = False
    support_default_value: bool = True
    support_value: bool = False


@dataclass(frozen=True)
class Charset:
    """Character set and its default collation."""
    name: str
    default_collation: Optional[str] = None


@dataclass(frozen=True)
class Collation:
    """Collation name."""
    name: str


@dataclass(frozen=True)
class DefaultValue:
    """Default-value template offered when editing a column."""
    name: str


@dataclass(frozen=True)
class TableMeta:
    """Static capabilities of a dialect, used to drive table editing."""
    column_types: Tuple[ColumnType, ...] = ()
    charsets: Tuple[Charset, ...] = ()
    collations: Tuple[Collation, ...] = ()
    index_kinds: Tuple[IndexKind, ...] = ()
    default_values: Tuple[DefaultValue, ...] = ()

    def column_type(self, name: str) -> Optional[ColumnType]:
        """Look up a column type by name, case-insensitively."""
        return next((t for t in self.column_types if t.name.upper() == name.upper()), None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "columnTypes": [t.name for t in self.column_types],
            "charsets": [c.name for c in self.charsets],
            "collations": [c.name for c in self.collations],
            "indexTypes": [k.value for k in self.index_kinds],
            "defaultValues": [d.name for d in self.default_values]
        }
