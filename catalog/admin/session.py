"""
Admin Session

Command dispatch for the admin tool. Each user action (add, edit, delete,
import, export, save, copy, filter change, keyboard shortcut) maps to one
store or filter operation followed by one render call. Rendering only reads
the session: it receives the session after the command has finished.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, TextIO

from ..common.constants import (
    ALL_CATEGORIES,
    NO_SUPPLIERS_LABEL,
    PRODUCTS_FILENAME,
    UNCATEGORIZED_LABEL,
)
from ..common.text_utils import field_text, format_price, is_web_url
from ..core.filters import filter_products
from ..core.normalizer import effective_suppliers
from ..core.store import CatalogStore
from ..interchange.clipboard import copy_to_clipboard
from ..interchange.exporter import export_json, write_export_file
from ..interchange.importer import import_catalog_file, parse_csv_catalog, parse_json_catalog
from ..interchange.loader import DEFAULT_TIMEOUT, load_products
from ..models import AdminTableRow, CatalogStatistics, Notification
from .form import ProductForm

logger = logging.getLogger(__name__)

# (key, needs ctrl/cmd) -> action name
KEYBOARD_SHORTCUTS = {
    ('s', True): 'save',
    ('n', True): 'new',
    ('escape', False): 'cancel',
}

# Bound whatever modifiers are held
UNMODIFIED_KEYS = {'escape'}

TEXT_PARSERS = {
    'json': parse_json_catalog,
    'csv': parse_csv_catalog,
}


class AdminSession:
    """
    State and commands of one admin tool session.

    Usage:
        session = AdminSession(render=print_table)
        session.load_existing("products.json")
        session.submit(ProductForm(name="Lamp", description="Desk lamp", price="20"))
        session.save("products.json")
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        categories: Optional[Iterable[str]] = None,
        render: Optional[Callable[['AdminSession'], None]] = None,
    ):
        """
        Initialize the session.

        Args:
            store: Catalog store to operate on (default: a new empty store)
            categories: Allowed category keys for form validation
            render: Called with the session after every command
        """
        self.store = store if store is not None else CatalogStore()
        self.categories = list(categories) if categories is not None else None
        self.render = render

        self.editing_product_id: Any = None
        self.has_unsaved_changes = False
        self.search_query = ""
        self.category_filter = ALL_CATEGORIES
        self.form_errors: Dict[str, str] = {}
        self.notifications: List[Notification] = []

    # ── Notifications ────────────────────────────────────────────────────

    def notify(self, message: str, level: str = "success") -> Notification:
        notification = Notification(message=message, level=level)
        self.notifications.append(notification)
        log = logger.error if level == "error" else logger.info
        log("%s", message)
        return notification

    @property
    def last_notification(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def _refresh(self) -> None:
        if self.render is not None:
            self.render(self)

    # ── Loading ──────────────────────────────────────────────────────────

    def load_existing(self, source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> int:
        """
        Load the published products file, starting blank if it is unusable.

        Returns:
            Number of products loaded
        """
        products = load_products(source, timeout=timeout)
        try:
            self.store.load(products)
        except ValueError as e:
            logger.warning("Ignoring products file %s: %s", source, e)
            self.store.load([])

        if self.store.all():
            logger.info("Loaded existing %s", source)
        else:
            logger.info("No pre-existing products found, starting blank")
        self._refresh()
        return len(self.store)

    # ── Form commands ────────────────────────────────────────────────────

    def start_add(self) -> ProductForm:
        """Open an empty form for a new product."""
        self.editing_product_id = None
        self.form_errors = {}
        self._refresh()
        return ProductForm()

    def start_edit(self, product_id: Any) -> Optional[ProductForm]:
        """Open the form pre-filled with an existing product."""
        product = self.store.get(product_id)
        if product is None:
            return None

        self.editing_product_id = product_id
        self.form_errors = {}
        self._refresh()
        return ProductForm.from_product(product)

    def cancel_edit(self) -> bool:
        """Abandon the current edit. Returns False if nothing was being edited."""
        if self.editing_product_id is None:
            return False
        self.editing_product_id = None
        self.form_errors = {}
        self._refresh()
        return True

    def submit(self, form: ProductForm) -> Optional[Dict[str, Any]]:
        """
        Validate the form and add or update the product.

        Returns:
            The stored product, or None when validation failed (the store is
            not touched and form_errors lists the offending fields)
        """
        self.form_errors = form.validate(self.categories)
        if self.form_errors:
            self.notify("Please fill in all required fields", "error")
            self._refresh()
            return None

        editing = self.editing_product_id
        updating = editing is not None and self.store.get(editing) is not None
        product = self.store.upsert(form.to_product_data(), editing)

        if updating:
            self.notify("Product updated successfully!")
        else:
            self.notify("Product added successfully!")

        self.editing_product_id = None
        self.has_unsaved_changes = True
        self._refresh()
        return product

    def delete(self, product_id: Any) -> bool:
        """Remove a product. Confirmation is the caller's job."""
        removed = self.store.remove(product_id)
        if removed:
            if self.editing_product_id == product_id:
                self.editing_product_id = None
            self.has_unsaved_changes = True
            self.notify("Product deleted successfully!")
        else:
            self.notify(f"Product {product_id} not found", "info")
        self._refresh()
        return removed

    # ── Import / export ──────────────────────────────────────────────────

    def _replace_catalog(self, products: List[Dict[str, Any]], message: str) -> bool:
        try:
            self.store.load(products)
        except ValueError as e:
            self.notify(f"Invalid catalog: {e}", "error")
            return False
        self.has_unsaved_changes = True
        self.notify(message)
        return True

    def import_file(self, file_path: str | Path) -> bool:
        """
        Replace the catalog with the contents of a .json or .csv file.

        The store is left untouched when the file cannot be read or parsed.
        """
        path = Path(file_path)
        try:
            products = import_catalog_file(path)
        except (ValueError, OSError) as e:
            self.notify(f"Error importing {path.name}: {e}", "error")
            self._refresh()
            return False

        kind = 'CSV' if path.suffix.lower() == '.csv' else 'JSON'
        imported = self._replace_catalog(products, f"{kind} imported successfully!")
        self._refresh()
        return imported

    def import_text(self, text: str, kind: str = 'json') -> bool:
        """Replace the catalog from pasted JSON or CSV text."""
        kind = kind.lower().lstrip('.')
        parser = TEXT_PARSERS.get(kind)
        if parser is None:
            self.notify(f"Error importing {kind.upper()}: Unsupported file type: {kind} "
                        "(expected json or csv)", "error")
            self._refresh()
            return False

        try:
            products = parser(text)
        except ValueError as e:
            self.notify(f"Error importing {kind.upper()}: {e}", "error")
            self._refresh()
            return False

        imported = self._replace_catalog(products, f"{kind.upper()} imported successfully!")
        self._refresh()
        return imported

    def output_json(self) -> str:
        """Current catalog as it would be exported."""
        return export_json(self.store.all())

    def export(self, file_path: str | Path = PRODUCTS_FILENAME) -> Optional[Path]:
        """Write the catalog to a JSON file. Refuses to export an empty catalog."""
        path = self._export(file_path)
        self._refresh()
        return path

    def _export(self, file_path: str | Path) -> Optional[Path]:
        if not len(self.store):
            self.notify("No products to export", "error")
            return None

        path = write_export_file(self.store.all(), file_path)
        self.notify("Products exported successfully!")
        return path

    def save(self, file_path: str | Path = PRODUCTS_FILENAME) -> Optional[Path]:
        """Export only when there are unsaved changes."""
        if not self.has_unsaved_changes:
            self.notify("No changes to save", "info")
            self._refresh()
            return None

        path = self._export(file_path)
        if path is not None:
            self.has_unsaved_changes = False
            self.notify("Changes saved!")
        self._refresh()
        return path

    def copy_json(self, stream: Optional[TextIO] = None) -> str:
        """Copy the exported JSON to the clipboard (or the fallback stream)."""
        method = copy_to_clipboard(self.output_json(), stream=stream)
        self.notify("JSON copied to clipboard!")
        self._refresh()
        return method

    # ── Filtering and views ──────────────────────────────────────────────

    def set_filter(self, query: Optional[str] = None, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """Update the table filter and return the visible products."""
        if query is not None:
            self.search_query = query
        if category is not None:
            self.category_filter = category or ALL_CATEGORIES
        self._refresh()
        return self.visible_products()

    def visible_products(self) -> List[Dict[str, Any]]:
        """Products shown in the admin table (category + text, no heuristic)."""
        return filter_products(self.store.all(), self.category_filter, self.search_query)

    def table_rows(self) -> List[AdminTableRow]:
        rows = []
        for product in self.visible_products():
            suppliers = effective_suppliers(product)
            image = product.get('image')
            rows.append(AdminTableRow(
                product_id=product.get('id'),
                name=field_text(product, 'name'),
                description=field_text(product, 'description'),
                price=format_price(product.get('price')),
                suppliers=', '.join(suppliers) or NO_SUPPLIERS_LABEL,
                category=field_text(product, 'category') or UNCATEGORIZED_LABEL,
                image_url=image if is_web_url(image) else None,
            ))
        return rows

    def statistics(self) -> CatalogStatistics:
        return CatalogStatistics(
            total_products=len(self.store),
            total_categories=len(self.store.categories()),
        )

    # ── Keyboard ─────────────────────────────────────────────────────────

    def handle_key(self, key: str, ctrl: bool = False, meta: bool = False,
                   file_path: str | Path = PRODUCTS_FILENAME) -> Optional[str]:
        """
        Dispatch a keyboard shortcut.

        ctrl/cmd+s saves, ctrl/cmd+n opens a new product form, escape cancels
        an edit in progress whatever modifiers are held.

        Returns:
            Name of the action performed, or None if the key is not bound
        """
        key = key.lower()
        modified = False if key in UNMODIFIED_KEYS else (ctrl or meta)
        action = KEYBOARD_SHORTCUTS.get((key, modified))
        if action == 'save':
            self.save(file_path)
        elif action == 'new':
            self.start_add()
        elif action == 'cancel':
            if not self.cancel_edit():
                return None
        return action
