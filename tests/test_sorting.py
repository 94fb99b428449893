"""Tests for database ordering."""

from catalogmeta.db.sorting import sort_databases
from catalogmeta.models.catalog_models import Database


class TestSortDatabases:
    """Test sort_databases function."""

    def test_system_databases_last_in_catalog_order(self):
        databases = [Database("sys"), Database("zeta"), Database("mysql"), Database("alpha")]

        result = sort_databases(databases, ["mysql", "sys"])

        assert [d.name for d in result] == ["zeta", "alpha", "sys", "mysql"]
        assert [d.system for d in result] == [False, False, True, True]

    def test_match_is_case_insensitive(self):
        result = sort_databases([Database("INFORMATION_SCHEMA"), Database("shop")], ("information_schema",))
        assert result[1].name == "INFORMATION_SCHEMA"
        assert result[1].system is True

    def test_input_is_not_mutated(self):
        databases = [Database("mysql")]
        sort_databases(databases, ["mysql"])
        assert databases[0].system is False

    def test_empty(self):
        assert sort_databases([], ["mysql"], connection=object()) == []
