"""Folding of flat index rows into composite indexes."""

import logging
from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass

from ..models.catalog_models import Index, IndexColumn, IndexKind, SortDirection

logger = logging.getLogger(__name__)

PRIMARY_KEY_NAME = "PRIMARY"


@dataclass(frozen=True)
class IndexRow:
    """One raw (index, column) row as reported by the catalog."""
    key_name: str
    column_name: str
    seq_in_index: int
    unique: bool = False
    index_type: Optional[str] = None
    comment: Optional[str] = None
    collation: Optional[str] = None
    cardinality: Optional[int] = None
    sub_part: Optional[int] = None
    # Set by catalogs that flag the primary key instead of reserving its name
    primary: bool = False


def classify_index_kind(key_name: str, unique: bool, index_type: Optional[str],
                        primary: bool = False, primary_key_name: Optional[str] = PRIMARY_KEY_NAME) -> IndexKind:
    """Classify an index; the first matching rule wins."""
    if primary or (primary_key_name and key_name and key_name.upper() == primary_key_name.upper()):
        return IndexKind.PRIMARY_KEY
    if unique:
        return IndexKind.UNIQUE
    if index_type and index_type.upper() == "SPATIAL":
        return IndexKind.SPATIAL
    if index_type and index_type.upper() == "FULLTEXT":
        return IndexKind.FULLTEXT
    return IndexKind.NORMAL


def sort_direction(collation: Optional[str]) -> SortDirection:
    """Map a single-letter collation code (``A``/``D``) to a sort direction."""
    if collation and collation.upper() == "A":
        return SortDirection.ASCENDING
    if collation and collation.upper() == "D":
        return SortDirection.DESCENDING
    return SortDirection.UNSPECIFIED


def index_column_from_row(row: IndexRow) -> IndexColumn:
    return IndexColumn(
        column_name=row.column_name,
        ordinal_position=row.seq_in_index,
        direction=sort_direction(row.collation),
        collation=row.collation,
        cardinality=row.cardinality,
        sub_part=row.sub_part
    )


class IndexBuilder:
    """Accumulates the columns of one index while the row stream is consumed."""

    def __init__(self, database_name: str, schema_name: Optional[str], table_name: str,
                 first_row: IndexRow, primary_key_name: Optional[str] = PRIMARY_KEY_NAME):
        self.database_name = database_name
        self.schema_name = schema_name
        self.table_name = table_name
        self.name = first_row.key_name
        self.unique = first_row.unique
        self.comment = first_row.comment
        self.kind = classify_index_kind(
            first_row.key_name, first_row.unique, first_row.index_type,
            primary=first_row.primary, primary_key_name=primary_key_name
        )
        self.columns: List[IndexColumn] = []
        self.append(first_row)

    def append(self, row: IndexRow) -> None:
        """Add a column and keep the list ordered by position."""
        self.columns.append(index_column_from_row(row))
        self.columns.sort(key=lambda column: column.ordinal_position)

    def build(self) -> Index:
        return Index(
            database_name=self.database_name,
            schema_name=self.schema_name,
            table_name=self.table_name,
            name=self.name,
            kind=self.kind,
            unique=self.unique,
            comment=self.comment,
            columns=tuple(self.columns)
        )


def aggregate_indexes(rows: Iterable[IndexRow], database_name: str, schema_name: Optional[str],
                      table_name: str, primary_key_name: Optional[str] = PRIMARY_KEY_NAME) -> List[Index]:
    """Group index rows by index name.

    Args:
        rows: Raw index rows in catalog order
        database_name: Owning database
        schema_name: Owning schema, if the dialect has schemas
        table_name: Owning table
        primary_key_name: Reserved name of the primary key index, if any

    Returns:
        One index per distinct name, in the order names were first seen
    """
    builders: Dict[str, IndexBuilder] = {}
    for row in rows:
        builder = builders.get(row.key_name)
        if builder is None:
            builders[row.key_name] = IndexBuilder(
                database_name, schema_name, table_name, row, primary_key_name=primary_key_name
            )
        else:
            builder.append(row)

    indexes = [builder.build() for builder in builders.values()]
    logger.debug(f"Aggregated {len(indexes)} indexes for {database_name}.{table_name}")
    return indexes
