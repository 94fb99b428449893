"""Column types, collations and default values offered for PostgreSQL."""

from ...models.catalog_models import (
    Charset, Collation, ColumnType, DefaultValue, IndexKind, TableMeta
)

COLUMN_TYPES = (
    ColumnType("SMALLINT"),
    ColumnType("INTEGER"),
    ColumnType("BIGINT"),
    ColumnType("SMALLSERIAL", support_auto_increment=True),
    ColumnType("SERIAL", support_auto_increment=True),
    ColumnType("BIGSERIAL", support_auto_increment=True),
    ColumnType("NUMERIC", support_length=True, support_scale=True),
    ColumnType("DECIMAL", support_length=True, support_scale=True),
    ColumnType("REAL"),
    ColumnType("DOUBLE PRECISION"),
    ColumnType("MONEY"),
    ColumnType("BOOLEAN"),
    ColumnType("CHARACTER", support_length=True, support_collation=True),
    ColumnType("CHARACTER VARYING", support_length=True, support_collation=True),
    ColumnType("TEXT", support_collation=True),
    ColumnType("BYTEA"),
    ColumnType("DATE"),
    ColumnType("TIME WITHOUT TIME ZONE", support_length=True),
    ColumnType("TIME WITH TIME ZONE", support_length=True),
    ColumnType("TIMESTAMP WITHOUT TIME ZONE", support_length=True),
    ColumnType("TIMESTAMP WITH TIME ZONE", support_length=True),
    ColumnType("INTERVAL", support_length=True),
    ColumnType("UUID"),
    ColumnType("JSON"),
    ColumnType("JSONB"),
    ColumnType("XML"),
    ColumnType("INET"),
    ColumnType("CIDR"),
    ColumnType("MACADDR"),
    ColumnType("BIT", support_length=True),
    ColumnType("BIT VARYING", support_length=True),
    ColumnType("POINT"),
    ColumnType("LINE"),
    ColumnType("POLYGON"),
    ColumnType("TSVECTOR"),
)

CHARSETS = (
    Charset("UTF8", "en_US.UTF-8"),
    Charset("LATIN1", "C"),
    Charset("SQL_ASCII", "C"),
)

COLLATIONS = (
    Collation("default"),
    Collation("C"),
    Collation("POSIX"),
    Collation("en_US.UTF-8"),
    Collation("und-x-icu"),
)

INDEX_KINDS = (
    IndexKind.PRIMARY_KEY,
    IndexKind.NORMAL,
    IndexKind.UNIQUE,
)

DEFAULT_VALUES = (
    DefaultValue("EMPTY_STRING"),
    DefaultValue("NULL"),
    DefaultValue("CURRENT_TIMESTAMP"),
    DefaultValue("now()"),
    DefaultValue("gen_random_uuid()"),
)


def postgres_table_meta() -> TableMeta:
    return TableMeta(
        column_types=COLUMN_TYPES,
        charsets=CHARSETS,
        collations=COLLATIONS,
        index_kinds=INDEX_KINDS,
        default_values=DEFAULT_VALUES
    )
