"""Column types, charsets, collations and default values offered for MySQL."""

from ...models.catalog_models import (
    Charset, Collation, ColumnType, DefaultValue, IndexKind, TableMeta
)


def _integer(name: str) -> ColumnType:
    return ColumnType(name, support_length=True, support_auto_increment=True)


def _text(name: str, support_length: bool = True) -> ColumnType:
    return ColumnType(name, support_length=support_length, support_charset=True, support_collation=True)


COLUMN_TYPES = (
    ColumnType("BIT", support_length=True),
    _integer("TINYINT"),
    _integer("SMALLINT"),
    _integer("MEDIUMINT"),
    _integer("INT"),
    _integer("INTEGER"),
    _integer("BIGINT"),
    ColumnType("BOOL"),
    ColumnType("BOOLEAN"),
    ColumnType("DECIMAL", support_length=True, support_scale=True),
    ColumnType("NUMERIC", support_length=True, support_scale=True),
    ColumnType("DEC", support_length=True, support_scale=True),
    ColumnType("FLOAT", support_length=True, support_scale=True, support_auto_increment=True),
    ColumnType("DOUBLE", support_length=True, support_scale=True, support_auto_increment=True),
    ColumnType("REAL", support_length=True, support_scale=True),
    ColumnType("DATE"),
    ColumnType("DATETIME", support_length=True),
    ColumnType("TIMESTAMP", support_length=True),
    ColumnType("TIME", support_length=True),
    ColumnType("YEAR"),
    _text("CHAR"),
    _text("VARCHAR"),
    ColumnType("BINARY", support_length=True),
    ColumnType("VARBINARY", support_length=True),
    ColumnType("TINYBLOB", support_default_value=False),
    ColumnType("BLOB", support_default_value=False),
    ColumnType("MEDIUMBLOB", support_default_value=False),
    ColumnType("LONGBLOB", support_default_value=False),
    _text("TINYTEXT", support_length=False),
    _text("TEXT", support_length=False),
    _text("MEDIUMTEXT", support_length=False),
    _text("LONGTEXT", support_length=False),
    ColumnType("ENUM", support_charset=True, support_collation=True, support_value=True),
    ColumnType("SET", support_charset=True, support_collation=True, support_value=True),
    ColumnType("JSON", support_default_value=False),
    ColumnType("GEOMETRY"),
    ColumnType("POINT"),
    ColumnType("LINESTRING"),
    ColumnType("POLYGON"),
    ColumnType("MULTIPOINT"),
    ColumnType("MULTILINESTRING"),
    ColumnType("MULTIPOLYGON"),
    ColumnType("GEOMETRYCOLLECTION"),
)

CHARSETS = (
    Charset("utf8mb4", "utf8mb4_0900_ai_ci"),
    Charset("utf8mb3", "utf8mb3_general_ci"),
    Charset("utf8", "utf8_general_ci"),
    Charset("latin1", "latin1_swedish_ci"),
    Charset("ascii", "ascii_general_ci"),
    Charset("binary", "binary"),
    Charset("gbk", "gbk_chinese_ci"),
    Charset("gb18030", "gb18030_chinese_ci"),
    Charset("big5", "big5_chinese_ci"),
    Charset("ucs2", "ucs2_general_ci"),
    Charset("utf16", "utf16_general_ci"),
    Charset("utf32", "utf32_general_ci"),
)

COLLATIONS = (
    Collation("utf8mb4_0900_ai_ci"),
    Collation("utf8mb4_0900_as_cs"),
    Collation("utf8mb4_general_ci"),
    Collation("utf8mb4_unicode_ci"),
    Collation("utf8mb4_bin"),
    Collation("utf8mb3_general_ci"),
    Collation("utf8mb3_bin"),
    Collation("utf8_general_ci"),
    Collation("utf8_unicode_ci"),
    Collation("utf8_bin"),
    Collation("latin1_swedish_ci"),
    Collation("latin1_bin"),
    Collation("ascii_general_ci"),
    Collation("ascii_bin"),
    Collation("binary"),
    Collation("gbk_chinese_ci"),
    Collation("gbk_bin"),
)

INDEX_KINDS = (
    IndexKind.PRIMARY_KEY,
    IndexKind.NORMAL,
    IndexKind.UNIQUE,
    IndexKind.FULLTEXT,
    IndexKind.SPATIAL,
)

DEFAULT_VALUES = (
    DefaultValue("EMPTY_STRING"),
    DefaultValue("NULL"),
    DefaultValue("CURRENT_TIMESTAMP"),
)


def mysql_table_meta() -> TableMeta:
    return TableMeta(
        column_types=COLUMN_TYPES,
        charsets=CHARSETS,
        collations=COLLATIONS,
        index_kinds=INDEX_KINDS,
        default_values=DEFAULT_VALUES
    )
