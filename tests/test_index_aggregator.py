"""Tests for composite index aggregation."""

from catalogmeta.extractor.index_aggregator import (
    IndexRow, IndexBuilder, aggregate_indexes, classify_index_kind, sort_direction
)
from catalogmeta.models.catalog_models import IndexKind, SortDirection


def row(key_name, column_name, seq, **kwargs):
    return IndexRow(key_name=key_name, column_name=column_name, seq_in_index=seq, **kwargs)


class TestClassifyIndexKind:
    """Test index kind classification."""

    def test_primary_name_wins_over_uniqueness(self):
        assert classify_index_kind("PRIMARY", True, "BTREE") == IndexKind.PRIMARY_KEY
        assert classify_index_kind("primary", False, "BTREE") == IndexKind.PRIMARY_KEY

    def test_unique_before_index_type(self):
        assert classify_index_kind("uk_geo", True, "SPATIAL") == IndexKind.UNIQUE

    def test_spatial_and_fulltext(self):
        assert classify_index_kind("sp_idx", False, "spatial") == IndexKind.SPATIAL
        assert classify_index_kind("ft_idx", False, "FULLTEXT") == IndexKind.FULLTEXT

    def test_normal_fallback(self):
        assert classify_index_kind("idx_a", False, "BTREE") == IndexKind.NORMAL
        assert classify_index_kind("idx_a", False, None) == IndexKind.NORMAL

    def test_primary_flag_without_reserved_name(self):
        kind = classify_index_kind("users_pkey", True, "BTREE", primary=True, primary_key_name=None)
        assert kind == IndexKind.PRIMARY_KEY

    def test_no_reserved_name(self):
        assert classify_index_kind("PRIMARY", False, "BTREE", primary_key_name=None) == IndexKind.NORMAL


class TestSortDirection:
    """Test collation letter mapping."""

    def test_letters(self):
        assert sort_direction("A") == SortDirection.ASCENDING
        assert sort_direction("a") == SortDirection.ASCENDING
        assert sort_direction("D") == SortDirection.DESCENDING
        assert sort_direction("d") == SortDirection.DESCENDING

    def test_other_values(self):
        assert sort_direction(None) == SortDirection.UNSPECIFIED
        assert sort_direction("") == SortDirection.UNSPECIFIED
        assert sort_direction("X") == SortDirection.UNSPECIFIED


class TestIndexBuilder:
    """Test IndexBuilder class."""

    def test_columns_stay_sorted_after_each_append(self):
        builder = IndexBuilder("db1", None, "t1", row("idx", "c", 3))
        builder.append(row("idx", "a", 1))
        assert [c.ordinal_position for c in builder.columns] == [1, 3]
        builder.append(row("idx", "b", 2))
        assert [c.column_name for c in builder.columns] == ["a", "b", "c"]

    def test_build_is_immutable_snapshot(self):
        builder = IndexBuilder("db1", None, "t1", row("idx", "a", 1))
        index = builder.build()
        builder.append(row("idx", "b", 2))
        assert index.column_names == ["a"]
        assert isinstance(index.columns, tuple)


class TestAggregateIndexes:
    """Test aggregate_indexes function."""

    def test_groups_in_first_seen_order_with_sorted_columns(self):
        rows = [
            row("idx_name_age", "age", 2, collation="D"),
            row("PRIMARY", "id", 1, unique=True, index_type="BTREE", collation="A"),
            row("idx_name_age", "name", 1, collation="A", sub_part=10),
            row("uk_email", "email", 1, unique=True),
        ]

        indexes = aggregate_indexes(rows, "db1", None, "users")

        assert [i.name for i in indexes] == ["idx_name_age", "PRIMARY", "uk_email"]
        composite = indexes[0]
        assert composite.kind == IndexKind.NORMAL
        assert composite.column_names == ["name", "age"]
        assert composite.columns[0].direction == SortDirection.ASCENDING
        assert composite.columns[0].sub_part == 10
        assert composite.columns[1].direction == SortDirection.DESCENDING
        assert indexes[1].kind == IndexKind.PRIMARY_KEY
        assert indexes[2].kind == IndexKind.UNIQUE
        assert all(i.table_name == "users" and i.database_name == "db1" for i in indexes)

    def test_index_attributes_come_from_first_row(self):
        rows = [
            row("ft_body", "body", 2, index_type="FULLTEXT", comment="search"),
            row("ft_body", "title", 1, index_type="FULLTEXT", comment="ignored"),
        ]

        index = aggregate_indexes(rows, "db1", None, "posts")[0]

        assert index.kind == IndexKind.FULLTEXT
        assert index.comment == "search"
        assert index.column_names == ["title", "body"]

    def test_empty_stream(self):
        assert aggregate_indexes([], "db1", None, "t1") == []
