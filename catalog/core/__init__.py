"""
Catalog core: the in-memory store, link normalization and filtering.
"""

from .filters import (
    effective_category,
    filter_products,
    matches_category,
    matches_query,
)
from .normalizer import (
    derive_supplier_name,
    detect_link_format,
    effective_suppliers,
    effective_urls,
    normalize_links,
)
from .store import CatalogStore

__all__ = [
    'CatalogStore',
    'derive_supplier_name',
    'detect_link_format',
    'effective_category',
    'effective_suppliers',
    'effective_urls',
    'filter_products',
    'matches_category',
    'matches_query',
    'normalize_links',
]
