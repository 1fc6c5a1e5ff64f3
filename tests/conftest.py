"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from catalog.core import CatalogStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


def _read_fixture_products():
    return json.loads((FIXTURES_DIR / "products.json").read_text(encoding="utf-8"))


@pytest.fixture
def sample_products():
    """Products covering every link format, loaded from the JSON fixture."""
    return _read_fixture_products()


@pytest.fixture
def sample_store():
    """Store holding its own copy of the fixture products."""
    return CatalogStore(_read_fixture_products())


@pytest.fixture
def sample_keywords():
    """Keyword table matching config/categories.yaml."""
    return {
        "tech": ["tech", "electronic", "gadget", "phone", "computer", "laptop"],
        "home": ["home", "kitchen", "furniture", "decor", "garden"],
        "lifestyle": ["fitness", "health", "beauty", "fashion", "outdoor"],
    }


@pytest.fixture
def sample_categories():
    """Small category dict for config_loader tests."""
    return {
        "tech": {"label": "Tech", "keywords": ["Tech", "Phone"]},
        "Home": {"label": "Home & Garden", "keywords": ["kitchen"]},
        "lifestyle": {},
    }
