"""Data models package."""

from .catalog_models import (
    Database,
    Table,
    Column,
    Index,
    IndexColumn,
    IndexKind,
    SortDirection,
    View,
    Trigger,
    Routine,
    RoutineKind,
    ColumnType,
    Charset,
    Collation,
    DefaultValue,
    TableMeta
)

__all__ = [
    'Database',
    'Table',
    'Column',
    'Index',
    'IndexColumn',
    'IndexKind',
    'SortDirection',
    'View',
    'Trigger',
    'Routine',
    'RoutineKind',
    'ColumnType',
    'Charset',
    'Collation',
    'DefaultValue',
    'TableMeta'
]
