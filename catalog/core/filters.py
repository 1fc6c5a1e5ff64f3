"""
Filter Engine

Computes the visible subset of the catalog from a category selector and a
free-text query. Every function here is pure: the result depends only on the
products passed in and the filter inputs, and catalog order is preserved.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..common.constants import ALL_CATEGORIES
from ..common.text_utils import field_text


def _is_all(category: Optional[str]) -> bool:
    return not category or category.strip().lower() == ALL_CATEGORIES


def has_category(product: dict) -> bool:
    """True when the product carries a non-empty category value."""
    category = product.get('category')
    return category is not None and str(category).strip() != ''


def matches_keywords(product: dict, keywords: Iterable[str]) -> bool:
    """Heuristic match of any keyword against name + description."""
    text = f"{field_text(product, 'name')} {field_text(product, 'description')}".casefold()
    return any(keyword.casefold() in text for keyword in keywords)


def matches_category(
    product: dict,
    category: Optional[str],
    keywords: Optional[Dict[str, List[str]]] = None,
) -> bool:
    """
    Category test for a single product.

    Args:
        product: Product record
        category: "all" (or empty) for no restriction, else a category key
        keywords: Optional keyword table (category key -> keywords). Only
            consulted for products without a category field.
    """
    if _is_all(category):
        return True

    selected = category.strip().casefold()

    if has_category(product):
        return str(product['category']).strip().casefold() == selected

    if keywords is None:
        return False
    return matches_keywords(product, keywords.get(selected, []))


def matches_query(product: dict, query: Optional[str]) -> bool:
    """Case-insensitive substring test on name or description."""
    needle = (query or '').strip().casefold()
    if not needle:
        return True
    return (
        needle in field_text(product, 'name').casefold()
        or needle in field_text(product, 'description').casefold()
    )


def filter_products(
    products: Iterable[dict],
    category: Optional[str] = ALL_CATEGORIES,
    query: Optional[str] = '',
    keywords: Optional[Dict[str, List[str]]] = None,
) -> List[dict]:
    """
    Apply the category filter, then the text filter.

    Args:
        products: Catalog contents in order
        category: Category selector ("all" or a category key)
        query: Free-text search
        keywords: Keyword table enabling the storefront heuristic fallback

    Returns:
        Matching products in their original order
    """
    by_category = [p for p in products if matches_category(p, category, keywords)]
    return [p for p in by_category if matches_query(p, query)]


def effective_category(button_category: Optional[str], dropdown_category: Optional[str]) -> str:
    """
    Combine the storefront category buttons with the top dropdown.

    The dropdown wins whenever it is set to something other than "all".
    """
    if not _is_all(dropdown_category):
        return dropdown_category.strip()
    if not _is_all(button_category):
        return button_category.strip()
    return ALL_CATEGORIES
