#!/usr/bin/env python3
"""
Product Catalog Admin

Maintains the static products.json: list, add, edit, delete, bulk import
from JSON or CSV, export and copy to clipboard. Changes are only kept when
they are saved, which every mutating command does at the end.

Usage:
    python3 scripts/admin.py list
    python3 scripts/admin.py list --search lamp --category home
    python3 scripts/admin.py show 3
    python3 scripts/admin.py add --name "Desk Lamp" --description "LED lamp" --price 24.99 \\
        --link https://www.lamps.com/desk --category home
    python3 scripts/admin.py edit 3 --price 19.99 --supplier 1=Lamps
    python3 scripts/admin.py delete 3 --yes
    python3 scripts/admin.py import data/products.csv
    python3 scripts/admin.py export --output dist/products.json
    python3 scripts/admin.py copy
    python3 scripts/admin.py stats

Products file (in order of precedence):
    1. --source flag (path or http(s) URL)
    2. CATALOG_SOURCE environment variable (.env is read)
    3. products_file from config/settings.yaml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from catalog.admin import AdminSession, ProductForm
from catalog.common.config_loader import get_category_keys, load_settings
from catalog.common.constants import MAX_LINKS, PRODUCTS_FILENAME
from catalog.common.log_config import setup_logging

load_dotenv()

logger = logging.getLogger(__name__)


def _resolve_source(args, settings: dict) -> str:
    return args.source or os.environ.get("CATALOG_SOURCE") or settings.get("products_file", PRODUCTS_FILENAME)


def _resolve_output(args, source: str) -> str:
    if getattr(args, "output", None):
        return args.output
    if source.lower().startswith(("http://", "https://")):
        return PRODUCTS_FILENAME
    return source


def _parse_product_id(value: str):
    try:
        return int(value)
    except ValueError:
        return value


def _apply_form_args(form: ProductForm, args) -> ProductForm:
    """Overwrite form fields with the values given on the command line."""
    for field_name in ("name", "description", "price", "image", "category"):
        value = getattr(args, field_name)
        if value is not None:
            setattr(form, field_name, value)

    if args.link:
        links = args.link[:MAX_LINKS]
        form.links = links + [""] * (MAX_LINKS - len(links))
        form.suppliers = [""] * MAX_LINKS

    for entry in args.supplier or []:
        slot, _, supplier = entry.partition("=")
        if not slot.isdigit() or not 1 <= int(slot) <= MAX_LINKS:
            raise ValueError(f"--supplier expects SLOT=NAME with SLOT 1-{MAX_LINKS}, got {entry!r}")
        form.suppliers[int(slot) - 1] = supplier

    return form


def print_table(session: AdminSession) -> None:
    rows = session.table_rows()
    if not rows:
        print("No products found")
        return

    print(f"{'ID':>5}  {'Name':<30} {'Price':>10}  {'Category':<14} Suppliers")
    print("-" * 80)
    for row in rows:
        print(f"{str(row.product_id):>5}  {row.name[:30]:<30} {row.price:>10}  {row.category:<14} {row.suppliers}")


def print_notifications(session: AdminSession) -> None:
    for notification in session.notifications:
        prefix = "ERROR: " if notification.level == "error" else ""
        print(f"{prefix}{notification.message}")


def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name")
    parser.add_argument("--description")
    parser.add_argument("--price")
    parser.add_argument("--image", help="Absolute image URL")
    parser.add_argument("--category", help="tech, home or lifestyle (empty for none)")
    parser.add_argument("--link", action="append", metavar="URL",
                        help=f"Purchase link, repeat up to {MAX_LINKS} times")
    parser.add_argument("--supplier", action="append", metavar="SLOT=NAME",
                        help="Supplier name for a link slot, e.g. 1=Acme")
    parser.add_argument("--output", "-o", help="Where to save (default: the products file)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Maintain the static product catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--source", "-s", help="products.json path or URL")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List products")
    list_parser.add_argument("--search", default="")
    list_parser.add_argument("--category", default="")

    show_parser = sub.add_parser("show", help="Show one product as an edit form")
    show_parser.add_argument("product_id")

    add_parser = sub.add_parser("add", help="Add a product")
    _add_form_arguments(add_parser)

    edit_parser = sub.add_parser("edit", help="Edit a product")
    edit_parser.add_argument("product_id")
    _add_form_arguments(edit_parser)

    delete_parser = sub.add_parser("delete", help="Delete a product")
    delete_parser.add_argument("product_id")
    delete_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    delete_parser.add_argument("--output", "-o")

    import_parser = sub.add_parser("import", help="Replace the catalog from a .json or .csv file")
    import_parser.add_argument("file")
    import_parser.add_argument("--output", "-o")

    export_parser = sub.add_parser("export", help="Write the catalog as JSON")
    export_parser.add_argument("--output", "-o", default=PRODUCTS_FILENAME)

    sub.add_parser("copy", help="Copy the catalog JSON to the clipboard")
    sub.add_parser("stats", help="Show catalog statistics")

    return parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    settings = load_settings()
    source = _resolve_source(args, settings)

    session = AdminSession(categories=get_category_keys())
    session.load_existing(source, timeout=settings.get("fetch_timeout", 10))

    if args.command == "list":
        session.set_filter(query=args.search, category=args.category)
        print_table(session)
        return

    if args.command == "stats":
        stats = session.statistics()
        print(f"Total products:   {stats.total_products}")
        print(f"Total categories: {stats.total_categories}")
        return

    if args.command == "show":
        form = session.start_edit(_parse_product_id(args.product_id))
        if form is None:
            print(f"ERROR: Product {args.product_id} not found")
            sys.exit(1)
        print(f"Name:        {form.name}")
        print(f"Description: {form.description}")
        print(f"Price:       {form.price}")
        print(f"Image:       {form.image or '-'}")
        print(f"Category:    {form.category or '-'}")
        for slot, (url, supplier) in enumerate(zip(form.links, form.suppliers), 1):
            if url:
                print(f"Link {slot}:      {url} ({supplier})")
        return

    if args.command == "export":
        session.export(args.output)
        print_notifications(session)
        sys.exit(0 if session.last_notification.level != "error" else 1)

    if args.command == "copy":
        session.copy_json()
        print_notifications(session)
        return

    if args.command in ("add", "edit"):
        if args.command == "add":
            form = session.start_add()
        else:
            form = session.start_edit(_parse_product_id(args.product_id))
            if form is None:
                print(f"ERROR: Product {args.product_id} not found")
                sys.exit(1)
        try:
            form = _apply_form_args(form, args)
        except ValueError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        if session.submit(form) is None:
            print_notifications(session)
            for field_name, message in session.form_errors.items():
                print(f"  {field_name}: {message}")
            sys.exit(1)

    elif args.command == "delete":
        product_id = _parse_product_id(args.product_id)
        if not args.yes:
            answer = input(f"Are you sure you want to delete product {product_id}? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                print("Cancelled")
                return
        if not session.delete(product_id):
            print_notifications(session)
            sys.exit(1)

    elif args.command == "import":
        if not session.import_file(args.file):
            print_notifications(session)
            sys.exit(1)

    session.save(_resolve_output(args, source))
    print_notifications(session)


if __name__ == "__main__":
    main()
