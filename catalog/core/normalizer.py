"""
Product Link Normalizer

Products written by different versions of the admin tool store purchase
links in one of three shapes:

    {"link": "https://..."}                                   # oldest
    {"links": ["https://...", "https://..."]}                 # legacy list
    {"links": [{"url": "https://...", "supplier": "acme"}]}   # current

Everything that shows or filters links goes through normalize_links() so the
shape checks live in one place.
"""

from __future__ import annotations

import logging
from typing import Any, List
from urllib.parse import urlsplit

from ..common.constants import MAX_LINKS, SUPPLIER_FALLBACK
from ..models import LinkFormat, SupplierLink

logger = logging.getLogger(__name__)


def derive_supplier_name(url: Any) -> str:
    """
    Derive a short supplier label from a URL.

    "https://www.acme-widgets.com/x" -> "acme-widgets"

    Never raises: anything that does not parse as an absolute URL with a
    hostname yields "Supplier".
    """
    if not isinstance(url, str):
        return SUPPLIER_FALLBACK

    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        logger.debug("Could not parse supplier URL %r", url)
        return SUPPLIER_FALLBACK

    if not parts.scheme or not hostname:
        return SUPPLIER_FALLBACK

    if hostname.startswith('www.'):
        hostname = hostname[4:]
    return hostname.split('.')[0] or SUPPLIER_FALLBACK


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def detect_link_format(product: dict) -> LinkFormat:
    """Resolve which link shape a product uses, in priority order."""
    links = product.get('links')
    if _non_empty_list(links):
        first = links[0]
        if isinstance(first, dict) and 'url' in first:
            return LinkFormat.STRUCTURED_LINK_LIST
        return LinkFormat.LEGACY_URL_LIST

    link = product.get('link')
    if isinstance(link, str) and link.strip():
        return LinkFormat.SINGLE_LEGACY_LINK

    return LinkFormat.EMPTY


def _structured_links(entries) -> List[SupplierLink]:
    result = []
    for entry in entries:
        if isinstance(entry, dict):
            url = entry.get('url')
            supplier = entry.get('supplier')
        else:
            url, supplier = entry, None

        # Empty slot
        if not isinstance(url, str) or not url.strip():
            continue

        url = url.strip()
        if not isinstance(supplier, str) or not supplier.strip():
            supplier = derive_supplier_name(url)
        result.append(SupplierLink(url=url, supplier=supplier.strip()))
    return result


def _legacy_links(entries) -> List[SupplierLink]:
    return [
        SupplierLink(url=url.strip(), supplier=derive_supplier_name(url))
        for url in entries
        if isinstance(url, str) and url.strip()
    ]


def normalize_links(product: dict) -> List[SupplierLink]:
    """
    Build the effective link list of a product.

    Returns:
        Up to MAX_LINKS SupplierLink entries, each with a non-empty URL,
        in stored order. Empty when the product has no link fields.
    """
    link_format = detect_link_format(product)

    if link_format is LinkFormat.STRUCTURED_LINK_LIST:
        links = _structured_links(product['links'])
    elif link_format is LinkFormat.LEGACY_URL_LIST:
        links = _legacy_links(product['links'])
    elif link_format is LinkFormat.SINGLE_LEGACY_LINK:
        links = _legacy_links([product['link']])
    else:
        links = []

    return links[:MAX_LINKS]


def effective_urls(product: dict) -> List[str]:
    """Return the normalized link URLs of a product."""
    return [link.url for link in normalize_links(product)]


def effective_suppliers(product: dict) -> List[str]:
    """Return the normalized supplier labels of a product."""
    return [link.supplier for link in normalize_links(product)]
