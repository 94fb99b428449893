"""Connector package with per-engine catalog dialects."""

from .base_dialect import CatalogDialect
from .dialect_factory import DialectFactory

__all__ = ['CatalogDialect', 'DialectFactory']
