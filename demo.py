#!/usr/bin/env python3
"""Demo script for the catalog metadata adapter."""

import sys

from catalogmeta.services.catalog_service import CatalogService


def demo_catalog(config_file: str = "config.yml", table_name: str = None):
    """Demonstrate database listing and table description."""
    print("🚀 Catalog Metadata Demo")
    print("=" * 50)

    try:
        service = CatalogService.from_config_file(config_file)
        print(f"✅ Configuration loaded ({service.dialect.name})")
    except FileNotFoundError:
        print("❌ Configuration file not found. Please create config.yml")
        return

    if not service.db_connection.test_connection():
        print("❌ Database connection failed")
        return
    print("✅ Database connection successful")

    print("\n📚 Databases:")
    for database in service.list_databases():
        marker = " (system)" if database.system else ""
        print(f"   - {database.name}{marker}")

    database_name = service.config.database.get_connection_params()['database']
    if not table_name or not database_name:
        return

    print(f"\n📊 Describing {database_name}.{table_name}...")
    result = service.describe_table(database_name, table_name)
    if result['table'] is None:
        print("❌ Table not found")
        return

    for column in result['columns']:
        size = f"({column.column_size})" if column.column_size is not None else ""
        flags = " PK" if column.primary_key else ""
        print(f"   - {column.name}: {column.column_type}{size}{flags}")

    for index in result['indexes']:
        print(f"   - {index.kind.value} {index.name} ({', '.join(index.column_names)})")

    print("\n🎉 Demo completed!")


if __name__ == "__main__":
    demo_catalog(table_name=sys.argv[1] if len(sys.argv) > 1 else None)
