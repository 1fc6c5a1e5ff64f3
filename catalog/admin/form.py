"""
Admin Product Form

Form model behind the admin add/edit panel: four link slots with optional
supplier names, basic field validation, and conversion to and from stored
product records.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..common.constants import MAX_LINKS
from ..common.text_utils import coerce_price, field_text, is_web_url
from ..core.normalizer import derive_supplier_name, normalize_links


def _pad(values: List[str]) -> List[str]:
    values = [v or '' for v in values[:MAX_LINKS]]
    return values + [''] * (MAX_LINKS - len(values))


@dataclass
class ProductForm:
    """
    Values of the admin product form, as typed.

    Usage:
        form = ProductForm(name="Desk Lamp", description="LED lamp", price="24.99",
                           links=["https://www.lamps.com/desk"])
        errors = form.validate()
        if not errors:
            store.upsert(form.to_product_data())
    """
    name: str = ""
    description: str = ""
    price: str = ""
    image: str = ""
    links: List[str] = field(default_factory=list)
    suppliers: List[str] = field(default_factory=list)
    category: str = ""

    def __post_init__(self):
        self.links = _pad(self.links)
        self.suppliers = _pad(self.suppliers)

    def validate(self, categories: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """
        Check the form fields.

        Args:
            categories: Allowed category keys (blank is always allowed)

        Returns:
            Mapping of field name to error message; empty when valid.
            Link slots are reported as link1..link4.
        """
        errors: Dict[str, str] = {}

        if not self.name.strip():
            errors['name'] = "Name is required"
        if not self.description.strip():
            errors['description'] = "Description is required"

        price_text = str(self.price).strip()
        if not price_text:
            errors['price'] = "Price is required"
        else:
            try:
                price = float(price_text)
            except ValueError:
                errors['price'] = f"Price must be a number (got {price_text!r})"
            else:
                if not math.isfinite(price):
                    errors['price'] = f"Price must be a number (got {price_text!r})"
                elif price < 0:
                    errors['price'] = "Price must not be negative"

        if self.image.strip() and not is_web_url(self.image):
            errors['image'] = "Image must be an absolute http(s) URL"

        for slot, url in enumerate(self.links, 1):
            if url.strip() and not is_web_url(url):
                errors[f'link{slot}'] = f"Link {slot} must be an absolute http(s) URL"

        if self.category.strip() and categories is not None:
            allowed = {c.lower() for c in categories}
            if self.category.strip().lower() not in allowed:
                errors['category'] = f"Unknown category: {self.category.strip()}"

        return errors

    def to_product_data(self) -> Dict[str, Any]:
        """
        Build the product fields written to the store.

        The first link slot is also kept in the legacy 'link' field.
        Blank supplier names fall back to the name derived from the URL.
        """
        links = []
        for url, supplier in zip(self.links, self.suppliers):
            url = url.strip()
            if url:
                links.append({'url': url, 'supplier': supplier.strip() or derive_supplier_name(url)})

        return {
            'name': self.name.strip(),
            'description': self.description.strip(),
            'price': coerce_price(str(self.price).strip()),
            'image': self.image.strip(),
            'link': self.links[0].strip(),
            'links': links,
            'category': self.category.strip() or None,
        }

    @classmethod
    def from_product(cls, product: dict) -> ProductForm:
        """Pre-fill the form from a stored product, whatever its link format."""
        normalized = normalize_links(product)
        price = product.get('price')
        return cls(
            name=field_text(product, 'name'),
            description=field_text(product, 'description'),
            price='' if price is None else str(price),
            image=field_text(product, 'image'),
            links=[link.url for link in normalized],
            suppliers=[link.supplier for link in normalized],
            category=field_text(product, 'category'),
        )
