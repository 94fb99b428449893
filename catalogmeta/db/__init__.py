# Database connection and catalog query modules

from .connection import DatabaseConnection
from .executor import ResultCursor, SQLExecutor
from .sorting import sort_databases

__all__ = ['DatabaseConnection', 'ResultCursor', 'SQLExecutor', 'sort_databases']
