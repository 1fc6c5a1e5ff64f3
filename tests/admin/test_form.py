"""Tests for catalog/admin/form.py"""

import pytest

from catalog.admin.form import ProductForm

CATEGORIES = ["tech", "home", "lifestyle"]


@pytest.fixture
def valid_form():
    return ProductForm(
        name=" Desk Lamp ",
        description="LED lamp",
        price="24.99",
        image="https://images.example.com/lamp.jpg",
        links=["https://www.lamps.com/desk", "", "https://etsy.com/lamp"],
        suppliers=["", "", "Etsy Seller"],
        category="home",
    )


class TestSlots:
    def test_padded_to_four(self):
        form = ProductForm(links=["https://a.com"])
        assert form.links == ["https://a.com", "", "", ""]
        assert form.suppliers == ["", "", "", ""]

    def test_truncated_to_four(self):
        form = ProductForm(links=[f"https://s{i}.com" for i in range(6)])
        assert len(form.links) == 4


class TestValidate:
    def test_valid(self, valid_form):
        assert valid_form.validate(CATEGORIES) == {}

    def test_required_fields(self):
        errors = ProductForm().validate()
        assert set(errors) == {"name", "description", "price"}

    def test_whitespace_only_name(self, valid_form):
        valid_form.name = "   "
        assert "name" in valid_form.validate()

    @pytest.mark.parametrize("price", ["abc", "nan", "inf"])
    def test_price_must_be_number(self, valid_form, price):
        valid_form.price = price
        assert "must be a number" in valid_form.validate()["price"]

    def test_negative_price(self, valid_form):
        valid_form.price = "-1"
        assert valid_form.validate()["price"] == "Price must not be negative"

    def test_zero_price_is_valid(self, valid_form):
        valid_form.price = "0"
        assert valid_form.validate() == {}

    def test_relative_image(self, valid_form):
        valid_form.image = "lamp.jpg"
        assert "image" in valid_form.validate()

    def test_invalid_link_slot(self, valid_form):
        valid_form.links[1] = "www.lamps.com"
        assert set(valid_form.validate()) == {"link2"}

    def test_unknown_category(self, valid_form):
        valid_form.category = "toys"
        assert "category" in valid_form.validate(CATEGORIES)

    def test_category_not_checked_without_list(self, valid_form):
        valid_form.category = "toys"
        assert valid_form.validate() == {}


class TestToProductData:
    def test_fields(self, valid_form):
        data = valid_form.to_product_data()
        assert data == {
            "name": "Desk Lamp",
            "description": "LED lamp",
            "price": 24.99,
            "image": "https://images.example.com/lamp.jpg",
            "link": "https://www.lamps.com/desk",
            "links": [
                {"url": "https://www.lamps.com/desk", "supplier": "lamps"},
                {"url": "https://etsy.com/lamp", "supplier": "Etsy Seller"},
            ],
            "category": "home",
        }

    def test_blank_category_is_none(self, valid_form):
        valid_form.category = ""
        assert valid_form.to_product_data()["category"] is None

    def test_no_links(self):
        data = ProductForm(name="A", description="B", price="1").to_product_data()
        assert data["links"] == []
        assert data["link"] == ""


class TestFromProduct:
    def test_structured_links(self, sample_products):
        form = ProductForm.from_product(sample_products[0])
        assert form.links == ["https://www.gadgetworld.co.uk/stand", "https://amazon.co.uk/dp/B000STAND", "", ""]
        assert form.suppliers == ["GadgetWorld", "amazon", "", ""]
        assert form.category == "tech"
        assert form.price == "19.99"

    def test_legacy_links_get_derived_suppliers(self, sample_products):
        form = ProductForm.from_product(sample_products[1])
        assert form.suppliers[:2] == ["potterybarn", "etsy"]

    def test_single_link(self, sample_products):
        form = ProductForm.from_product(sample_products[2])
        assert form.links[0] == "https://www.fitgear.com/mat"
        assert form.suppliers[0] == "fitgear"
        assert form.category == ""
        assert form.image == ""

    def test_round_trip_through_form(self, sample_products):
        form = ProductForm.from_product(sample_products[0])
        data = form.to_product_data()
        assert data["links"] == [
            {"url": "https://www.gadgetworld.co.uk/stand", "supplier": "GadgetWorld"},
            {"url": "https://amazon.co.uk/dp/B000STAND", "supplier": "amazon"},
        ]
