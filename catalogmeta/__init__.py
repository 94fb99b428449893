"""Catalog metadata adapter: normalized databases, tables, columns, indexes and routines."""

from .config import AppConfig
from .connector import CatalogDialect, DialectFactory
from .extractor import MetadataNormalizer
from .services import CatalogService

__version__ = "0.1.0"

__all__ = ['AppConfig', 'CatalogDialect', 'DialectFactory', 'MetadataNormalizer', 'CatalogService']
