"""
Storefront View

Public catalog browsing: category buttons, a top category dropdown, text
search, product cards and the product detail view. Products without a
category are matched against the keyword table from config/categories.yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..common.config_loader import build_keyword_table
from ..common.constants import ALL_CATEGORIES
from ..common.text_utils import field_text, format_price, is_web_url
from ..core.filters import effective_category, filter_products
from ..core.normalizer import normalize_links
from ..core.store import CatalogStore
from ..interchange.loader import DEFAULT_TIMEOUT, load_products
from ..models import BuyLink, ProductCard, ProductDetail

logger = logging.getLogger(__name__)


def _image_or_placeholder(product: dict) -> Optional[str]:
    image = product.get('image')
    return image.strip() if is_web_url(image) else None


def build_card(product: dict) -> ProductCard:
    return ProductCard(
        product_id=product.get('id'),
        name=field_text(product, 'name'),
        description=field_text(product, 'description'),
        price=format_price(product.get('price')),
        image_url=_image_or_placeholder(product),
    )


def build_detail(product: dict) -> ProductDetail:
    """Detail view with up to four numbered buy links."""
    links = [
        BuyLink(label=f"Buy Link {i}", url=link.url, supplier=link.supplier)
        for i, link in enumerate(normalize_links(product), 1)
    ]
    return ProductDetail(
        product_id=product.get('id'),
        name=field_text(product, 'name'),
        description=field_text(product, 'description'),
        price=format_price(product.get('price')),
        image_url=_image_or_placeholder(product),
        links=links,
    )


class Storefront:
    """
    Storefront state over a catalog store.

    Usage:
        shop = Storefront()
        shop.load("https://example.com/products.json")
        shop.select_category("tech")
        shop.search("phone")
        for card in shop.cards():
            ...
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        keywords: Optional[Dict[str, List[str]]] = None,
        render: Optional[Callable[['Storefront'], None]] = None,
    ):
        """
        Args:
            store: Catalog store to read (default: a new empty store)
            keywords: Category keyword table (if None, loads from config)
            render: Called with the storefront after every command
        """
        self.store = store if store is not None else CatalogStore()
        self.keywords = keywords if keywords is not None else build_keyword_table()
        self.render = render

        self.button_category = ALL_CATEGORIES
        self.dropdown_category = ALL_CATEGORIES
        self.query = ""

    def _refresh(self) -> None:
        if self.render is not None:
            self.render(self)

    def load(self, source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> int:
        """
        Load the published products file.

        A missing or unusable file leaves an empty catalog.

        Returns:
            Number of products available
        """
        products = load_products(source, timeout=timeout)
        try:
            self.store.load(products)
        except ValueError as e:
            logger.warning("Ignoring products file %s: %s", source, e)
            self.store.load([])

        self._refresh()
        return len(self.store)

    def select_category(self, category: str) -> List[dict]:
        """Category button click."""
        self.button_category = category or ALL_CATEGORIES
        self._refresh()
        return self.visible_products()

    def select_dropdown(self, category: str) -> List[dict]:
        """Top dropdown change; overrides the buttons unless set to "all"."""
        self.dropdown_category = category or ALL_CATEGORIES
        self._refresh()
        return self.visible_products()

    def search(self, query: str) -> List[dict]:
        self.query = query or ""
        self._refresh()
        return self.visible_products()

    @property
    def active_category(self) -> str:
        return effective_category(self.button_category, self.dropdown_category)

    def visible_products(self) -> List[dict]:
        return filter_products(
            self.store.all(),
            category=self.active_category,
            query=self.query,
            keywords=self.keywords,
        )

    def cards(self) -> List[ProductCard]:
        return [build_card(product) for product in self.visible_products()]

    def detail(self, product_id: Any) -> Optional[ProductDetail]:
        product = self.store.get(product_id)
        if product is None:
            return None
        return build_detail(product)
