"""Registry of catalog dialects, keyed by dialect name with engine aliases."""

import logging
from typing import Dict, List, Optional, Type

from .base_dialect import CatalogDialect
from .mysql.mysql_dialect import MySQLDialect
from .postgres.postgres_dialect import PostgreSQLDialect

logger = logging.getLogger(__name__)


class DialectFactory:
    """Creates dialects by name.

    Each dialect registers under its own ``name``; engines that share a
    catalog layout (MariaDB and MySQL) are mapped onto it as aliases.
    """

    _dialects: Dict[str, Type[CatalogDialect]] = {
        MySQLDialect.name: MySQLDialect,
        PostgreSQLDialect.name: PostgreSQLDialect,
    }
    _aliases: Dict[str, str] = {
        'mariadb': MySQLDialect.name,
        'postgres': PostgreSQLDialect.name,
    }

    @classmethod
    def resolve_name(cls, dialect_name: Optional[str]) -> Optional[str]:
        """Map a configured engine name to a registered dialect name, or None."""
        key = (dialect_name or "").strip().lower()
        key = cls._aliases.get(key, key)
        return key if key in cls._dialects else None

    @classmethod
    def create_dialect(cls, dialect_name: Optional[str]) -> Optional[CatalogDialect]:
        """Create a dialect for the specified engine.

        Args:
            dialect_name: Engine name or alias, e.g. ``mysql`` or ``mariadb``

        Returns:
            Dialect instance or None if the engine is not supported
        """
        name = cls.resolve_name(dialect_name)
        if name is None:
            logger.error(f"Unsupported dialect: {dialect_name}")
            return None

        return cls._dialects[name]()

    @classmethod
    def get_supported_dialects(cls) -> List[str]:
        """Registered dialect names followed by their aliases."""
        return list(cls._dialects) + list(cls._aliases)

    @classmethod
    def register_dialect(cls, dialect_class: Type[CatalogDialect], *aliases: str) -> None:
        """Register a dialect under its ``name`` and any extra aliases.

        Raises:
            ValueError: If the class is not a named CatalogDialect
        """
        if not isinstance(dialect_class, type) or not issubclass(dialect_class, CatalogDialect):
            raise ValueError("Dialect class must inherit from CatalogDialect")
        if not dialect_class.name:
            raise ValueError("Dialect class must define a name")

        name = dialect_class.name.lower()
        cls._dialects[name] = dialect_class
        for alias in aliases:
            cls._aliases[alias.lower()] = name
        logger.info(f"Registered dialect: {name}")

    @classmethod
    def unregister_dialect(cls, dialect_name: str) -> None:
        """Remove a dialect and the aliases pointing at it."""
        name = dialect_name.lower()
        cls._dialects.pop(name, None)
        for alias in [a for a, target in cls._aliases.items() if target == name]:
            del cls._aliases[alias]
