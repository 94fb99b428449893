"""MySQL dialect package."""

from .mysql_dialect import MySQLDialect

__all__ = ['MySQLDialect']
