"""
Product data models.

Products themselves are stored as plain dicts so that imported records keep
every field and its order. The classes here describe the derived views built
from them. No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LinkFormat(Enum):
    """Shape of the link fields stored on a product."""
    EMPTY = "empty"                                 # no link fields
    SINGLE_LEGACY_LINK = "single_legacy_link"       # "link": "https://..."
    LEGACY_URL_LIST = "legacy_url_list"             # "links": ["https://...", ...]
    STRUCTURED_LINK_LIST = "structured_link_list"   # "links": [{"url": ..., "supplier": ...}]


@dataclass(frozen=True)
class SupplierLink:
    """A purchase link with its supplier label."""
    url: str
    supplier: str

    def to_dict(self) -> dict:
        return {'url': self.url, 'supplier': self.supplier}


@dataclass
class Notification:
    """User-facing message produced by an admin or storefront command."""
    message: str
    level: str = "success"     # "success", "error" or "info"


@dataclass
class CatalogStatistics:
    """Counts shown in the admin dashboard."""
    total_products: int = 0
    total_categories: int = 0


@dataclass
class AdminTableRow:
    """One row of the admin products table."""
    product_id: object
    name: str
    description: str
    price: str                      # Formatted, e.g. "£12.50"
    suppliers: str                  # Comma-separated labels or "None"
    category: str                   # Category key or "Uncategorized"
    image_url: Optional[str] = None # None means show the placeholder


@dataclass
class ProductCard:
    """Storefront grid card."""
    product_id: object
    name: str
    description: str
    price: str
    image_url: Optional[str] = None


@dataclass
class BuyLink:
    """Storefront detail purchase button."""
    label: str                  # "Buy Link 1", "Buy Link 2", ...
    url: str
    supplier: str


@dataclass
class ProductDetail:
    """Storefront product detail view."""
    product_id: object
    name: str
    description: str
    price: str
    image_url: Optional[str] = None
    links: List[BuyLink] = field(default_factory=list)
