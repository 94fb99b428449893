"""Default ordering of user and system databases."""

from dataclasses import replace
from typing import Iterable, List

from ..models.catalog_models import Database


def sort_databases(databases: List[Database], system_names: Iterable[str], connection=None) -> List[Database]:
    """Flag system databases and list them after user databases.

    Catalog order is kept within each group. ``connection`` is accepted so
    sorters that need session state can be swapped in; this one ignores it.
    """
    _ = connection
    system = {name.lower() for name in system_names}
    flagged = [replace(database, system=database.name.lower() in system) for database in databases]
    return [d for d in flagged if not d.system] + [d for d in flagged if d.system]
