"""Tests for catalog/interchange/loader.py"""

import json
from unittest.mock import MagicMock, patch

import requests

from catalog.interchange.loader import load_products

URL = "https://shop.example.com/products.json"


def _response(status_code=200, text="[]"):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestLoadFromPath:
    def test_reads_file(self, fixtures_dir, sample_products):
        assert load_products(fixtures_dir / "products.json") == sample_products

    def test_missing_file_is_empty(self, tmp_path):
        assert load_products(tmp_path / "products.json") == []

    def test_malformed_file_is_empty(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("[{", encoding="utf-8")
        assert load_products(path) == []

    def test_object_root_is_empty(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"products": []}), encoding="utf-8")
        assert load_products(path) == []


class TestLoadFromUrl:
    def test_successful_get(self):
        with patch("catalog.interchange.loader.requests.get",
                   return_value=_response(text='[{"id": 1}]')) as get:
            assert load_products(URL, timeout=3) == [{"id": 1}]

        get.assert_called_once_with(URL, headers={"Accept": "application/json"}, timeout=3)

    def test_non_200_is_empty(self):
        with patch("catalog.interchange.loader.requests.get", return_value=_response(404, "Not Found")):
            assert load_products(URL) == []

    def test_timeout_is_empty(self):
        with patch("catalog.interchange.loader.requests.get", side_effect=requests.exceptions.Timeout):
            assert load_products(URL) == []

    def test_connection_error_is_empty(self):
        with patch("catalog.interchange.loader.requests.get",
                   side_effect=requests.exceptions.ConnectionError("refused")):
            assert load_products(URL) == []

    def test_uses_session_when_given(self):
        session = MagicMock()
        session.get.return_value = _response(text='[{"id": 2}]')
        assert load_products(URL, session=session) == [{"id": 2}]
        session.get.assert_called_once()
