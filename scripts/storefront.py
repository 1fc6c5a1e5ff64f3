#!/usr/bin/env python3
"""
Storefront Browser

Prints the public product list the way the storefront page shows it:
category buttons, the top category dropdown (which wins unless it is "all"),
text search, and the product detail view with its buy links.

Usage:
    python3 scripts/storefront.py
    python3 scripts/storefront.py --category tech --search phone
    python3 scripts/storefront.py --category home --dropdown tech
    python3 scripts/storefront.py --detail 4
    python3 scripts/storefront.py --source https://example.com/products.json
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from catalog.common.config_loader import get_category_labels, load_settings
from catalog.common.constants import ALL_CATEGORIES, NO_LINKS_MESSAGE, PRODUCTS_FILENAME
from catalog.common.log_config import setup_logging
from catalog.storefront import Storefront

load_dotenv()

PLACEHOLDER = "[no image]"


def print_cards(shop: Storefront) -> None:
    cards = shop.cards()
    labels = get_category_labels()
    active = shop.active_category
    heading = "All products" if active == ALL_CATEGORIES else labels.get(active.lower(), active)
    print(f"{heading} ({len(cards)})")
    print()

    if not cards:
        print("No products found")
        print("Try adjusting your filters or check back later.")
        return

    for card in cards:
        print(f"[{card.product_id}] {card.name}  {card.price}")
        print(f"    {card.description}")
        print(f"    {card.image_url or PLACEHOLDER}")


def print_detail(shop: Storefront, product_id) -> bool:
    detail = shop.detail(product_id)
    if detail is None:
        return False

    print(detail.name)
    print(detail.price)
    print(detail.image_url or PLACEHOLDER)
    print()
    print(detail.description)
    print()
    if detail.links:
        for link in detail.links:
            print(f"{link.label} ({link.supplier}): {link.url}")
    else:
        print(NO_LINKS_MESSAGE)
    print()
    print("You'll be redirected to the supplier's website to complete your purchase.")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Browse the product catalog as the storefront shows it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--source", "-s", help="products.json path or URL")
    parser.add_argument("--category", "-c", default=ALL_CATEGORIES,
                        help="Category button (default: all)")
    parser.add_argument("--dropdown", "-d", default=ALL_CATEGORIES,
                        help="Top dropdown category; overrides --category unless 'all'")
    parser.add_argument("--search", "-q", default="", help="Text search")
    parser.add_argument("--detail", metavar="ID", help="Show one product in detail")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    settings = load_settings()
    source = args.source or os.environ.get("CATALOG_SOURCE") or settings.get("products_file", PRODUCTS_FILENAME)

    shop = Storefront()
    shop.load(source, timeout=settings.get("fetch_timeout", 10))

    if args.detail:
        product_id = int(args.detail) if args.detail.isdigit() else args.detail
        if not print_detail(shop, product_id):
            print(f"ERROR: Product {args.detail} not found")
            sys.exit(1)
        return

    shop.select_category(args.category)
    shop.select_dropdown(args.dropdown)
    shop.search(args.search)
    print_cards(shop)


if __name__ == "__main__":
    main()
