"""Catalog normalization: type sizes, index aggregation and per-kind mapping."""

from .index_aggregator import IndexRow, aggregate_indexes
from .metadata_normalizer import MetadataNormalizer
from .type_size import TypeSize, apply_type_size, parse_type_size

__all__ = [
    'IndexRow',
    'aggregate_indexes',
    'MetadataNormalizer',
    'TypeSize',
    'apply_type_size',
    'parse_type_size'
]
