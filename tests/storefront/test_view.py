"""Tests for catalog/storefront/view.py"""

from unittest.mock import patch

import pytest

from catalog.core import CatalogStore
from catalog.storefront import Storefront, build_card, build_detail


@pytest.fixture
def shop(sample_store, sample_keywords):
    return Storefront(store=sample_store, keywords=sample_keywords)


def _ids(products):
    return [p["id"] for p in products]


class TestLoad:
    def test_loads_products(self, sample_keywords, fixtures_dir):
        shop = Storefront(keywords=sample_keywords)
        assert shop.load(fixtures_dir / "products.json") == 4

    def test_unreachable_file_is_empty_catalog(self, sample_keywords):
        shop = Storefront(store=CatalogStore([{"id": 1}]), keywords=sample_keywords)
        with patch("catalog.storefront.view.load_products", return_value=[]):
            assert shop.load("https://shop.example.com/products.json") == 0
        assert shop.cards() == []

    def test_default_keywords_from_config(self):
        shop = Storefront()
        assert "phone" in shop.keywords["tech"]


class TestFiltering:
    def test_all_by_default(self, shop):
        assert _ids(shop.visible_products()) == [1, 2, 3, 4]

    def test_category_button_uses_heuristic(self, shop):
        assert _ids(shop.select_category("tech")) == [1, 4]

    def test_category_and_search(self, shop):
        shop.select_category("tech")
        assert _ids(shop.search("phone")) == [1]

    def test_dropdown_overrides_buttons(self, shop):
        shop.select_category("home")
        assert _ids(shop.select_dropdown("lifestyle")) == [3]
        assert shop.active_category == "lifestyle"

    def test_dropdown_all_restores_buttons(self, shop):
        shop.select_category("home")
        shop.select_dropdown("lifestyle")
        assert _ids(shop.select_dropdown("all")) == [2]

    def test_search_only(self, shop):
        assert _ids(shop.search("  POT ")) == [2]

    def test_render_callback(self, sample_store, sample_keywords):
        seen = []
        shop = Storefront(store=sample_store, keywords=sample_keywords,
                          render=lambda s: seen.append(s.active_category))
        shop.select_category("home")
        shop.select_dropdown("tech")
        assert seen == ["home", "tech"]


class TestCards:
    def test_card_fields(self, sample_products):
        card = build_card(sample_products[0])
        assert card.product_id == 1
        assert card.price == "£19.99"
        assert card.image_url == "https://images.example.com/stand.jpg"

    def test_relative_image_uses_placeholder(self, sample_products):
        assert build_card(sample_products[1]).image_url is None

    def test_cards_follow_filter(self, shop):
        shop.search("mat")
        assert [c.name for c in shop.cards()] == ["Yoga Mat"]


class TestDetail:
    def test_structured_links(self, shop):
        detail = shop.detail(1)
        assert [(l.label, l.supplier) for l in detail.links] == [
            ("Buy Link 1", "GadgetWorld"),
            ("Buy Link 2", "amazon"),
        ]

    def test_legacy_list_links(self, shop):
        assert [l.url for l in shop.detail(2).links] == [
            "https://www.potterybarn.com/pot",
            "https://etsy.com/listing/42",
        ]

    def test_single_link(self, shop):
        assert [l.supplier for l in shop.detail(3).links] == ["fitgear"]

    def test_no_links(self, shop):
        detail = shop.detail(4)
        assert detail.links == []
        assert detail.price == "£0.00"

    def test_unknown_product(self, shop):
        assert shop.detail(99) is None

    def test_at_most_four_links(self):
        product = {"id": 1, "name": "x", "links": [f"https://s{i}.com" for i in range(5)]}
        assert len(build_detail(product).links) == 4
