"""Size, scale and value-list parsing for raw column type declarations.

Parsing is best effort. A declaration that cannot be parsed (non-numeric
size, unbalanced parentheses, missing input) leaves the column's existing
size and scale untouched and never aborts the surrounding metadata fetch.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from ..models.catalog_models import Column

logger = logging.getLogger(__name__)

# Types whose parenthesized qualifier is a value list rather than a size
ENUMERATED_TYPES = {"ENUM", "SET"}


@dataclass(frozen=True)
class TypeSize:
    """Parsed qualifier of a type declaration."""
    size: Optional[int] = None
    scale: Optional[int] = None
    value: Optional[str] = None


def parse_type_size(column_type: Optional[str], base_type: Optional[str]) -> Optional[TypeSize]:
    """Parse the parenthesized qualifier of a type declaration.

    Args:
        column_type: Raw declaration, e.g. ``decimal(10,2)`` or ``enum('a','b')``
        base_type: Already extracted base type name, e.g. ``DECIMAL``

    Returns:
        ``None`` when the declaration has no qualifier, otherwise the parsed
        size/scale pair or the verbatim value list for ENUM and SET.

    Raises:
        ValueError: If the qualifier is malformed
    """
    if column_type is None:
        raise ValueError("Missing column type declaration")

    if "(" not in column_type:
        return None

    start = column_type.index("(") + 1
    end = column_type.rfind(")")
    if end < start:
        raise ValueError(f"Unbalanced parentheses in type declaration: {column_type}")

    content = column_type[start:end]

    if base_type and base_type.upper() in ENUMERATED_TYPES:
        return TypeSize(value=content)

    if "," not in content:
        return TypeSize(size=int(content))

    parts = content.split(",")
    size = int(parts[0]) if parts[0].strip() else None
    scale = int(parts[1]) if parts[1].strip() else None
    return TypeSize(size=size, scale=scale)


def apply_type_size(column: Column, column_type: Optional[str]) -> Column:
    """Apply the parsed qualifier of ``column_type`` to ``column``.

    Only the parsed parts are written; unset parts keep their current value.
    Parse failures are a no-op.
    """
    try:
        parsed = parse_type_size(column_type, column.column_type)
    except ValueError as e:
        logger.debug(f"Ignoring unparsable type declaration for column {column.name}: {e}")
        return column

    if parsed is None:
        return column

    if parsed.value is not None:
        column.value = parsed.value
        return column

    if parsed.size is not None:
        column.column_size = parsed.size
    if parsed.scale is not None:
        column.decimal_digits = parsed.scale
    return column
