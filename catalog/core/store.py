"""
Catalog Store

Holds the ordered list of products for one session. Nothing is persisted:
the list has to be exported explicitly to replace the static products file.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


def _is_int_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CatalogStore:
    """
    In-memory ordered list of product records.

    Usage:
        store = CatalogStore()
        store.load(json.loads(text))
        product = store.upsert({"name": "Lamp", "price": 20.0})
        store.remove(product["id"])
    """

    def __init__(self, products: Optional[List[Dict[str, Any]]] = None):
        self._products: List[Dict[str, Any]] = []
        if products is not None:
            self.load(products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(list(self._products))

    def load(self, source: Any) -> None:
        """
        Replace the entire product list.

        Args:
            source: Parsed JSON array or import result

        Raises:
            ValueError: If source is not a list of objects (state is unchanged)
        """
        if not isinstance(source, list):
            raise ValueError(
                f"Catalog must be a list of products, got {type(source).__name__}"
            )
        for index, item in enumerate(source):
            if not isinstance(item, dict):
                raise ValueError(
                    f"Catalog entry {index + 1} is not an object ({type(item).__name__})"
                )

        self._products = list(source)
        logger.debug("Loaded %d products", len(self._products))

    def next_id(self) -> int:
        """Return max(existing integer ids) + 1, or 1 for an empty catalog."""
        ids = [p.get('id') for p in self._products if _is_int_id(p.get('id'))]
        return max(ids) + 1 if ids else 1

    def get(self, product_id: Any) -> Optional[Dict[str, Any]]:
        for product in self._products:
            if product.get('id') == product_id:
                return product
        return None

    def upsert(self, product_data: Dict[str, Any], existing_id: Any = None) -> Dict[str, Any]:
        """
        Update a product in place or append a new one.

        If existing_id matches a stored product, the fields of product_data
        overwrite that record's fields (shallow merge). Otherwise the data is
        appended under a freshly assigned id. Ids are owned by the store, so an
        'id' key in product_data is ignored.

        Returns:
            The stored product record
        """
        fields = {k: v for k, v in product_data.items() if k != 'id'}

        if existing_id is not None:
            existing = self.get(existing_id)
            if existing is not None:
                existing.update(fields)
                logger.debug("Updated product %s", existing_id)
                return existing

        product = {'id': self.next_id(), **fields}
        self._products.append(product)
        logger.debug("Added product %s", product['id'])
        return product

    def remove(self, product_id: Any) -> bool:
        """
        Delete the product with this id.

        Returns:
            True if a product was removed, False if none matched
        """
        remaining = [p for p in self._products if p.get('id') != product_id]
        removed = len(remaining) != len(self._products)
        self._products = remaining
        if removed:
            logger.debug("Removed product %s", product_id)
        return removed

    def all(self) -> List[Dict[str, Any]]:
        """Return the products in catalog order (a new list)."""
        return list(self._products)

    def filtered(self, predicate: Callable[[Dict[str, Any]], bool]) -> List[Dict[str, Any]]:
        """Return the products matching predicate, in catalog order."""
        return [p for p in self._products if predicate(p)]

    def categories(self) -> set:
        """Return the set of distinct non-empty category values."""
        return {p.get('category') for p in self._products if p.get('category')}
