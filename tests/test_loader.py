"""Tests for the startup data source."""

import json
from pathlib import Path

import pytest
import requests

from stock_dashboard import loader
from stock_dashboard.loader import is_url, load_products, parse_products


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class TestLocalFiles:
    """Tests for loading from a JSON file."""

    def test_load_fixture(self, products_file: Path):
        records = load_products(str(products_file))
        assert len(records) == 20
        assert records[0].name == "Red Shirt"
        assert records[0].id == 1

    def test_missing_id_is_tolerated(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"name": "Mug", "price": 3, "category": "Kitchen"}]))
        records = load_products(str(path))
        assert len(records) == 1
        assert records[0].id is None
        assert records[0].stock == 0

    def test_missing_file_gives_empty_list(self, tmp_path: Path):
        assert load_products(str(tmp_path / "nope.json")) == []

    def test_malformed_json_gives_empty_list(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text("{not json")
        assert load_products(str(path)) == []

    def test_wrong_shape_gives_empty_list(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"products": []}))
        assert load_products(str(path)) == []

    def test_invalid_record_gives_empty_list(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"name": "Mug", "price": -1, "category": "Kitchen"}]))
        assert load_products(str(path)) == []


class TestUrls:
    """Tests for loading over HTTP."""

    def test_is_url(self):
        assert is_url("http://example.com/products.json")
        assert is_url("https://example.com/products.json")
        assert not is_url("products.json")

    def test_fetch_success(self, monkeypatch: pytest.MonkeyPatch):
        seen = {}

        def fake_get(url, timeout):
            seen["url"] = url
            seen["timeout"] = timeout
            return FakeResponse([{"id": 3, "name": "Lamp", "price": 10, "category": "Home"}])

        monkeypatch.setattr(loader.requests, "get", fake_get)
        records = load_products("https://shop.test/products.json", timeout=2.5)

        assert [r.id for r in records] == [3]
        assert seen == {"url": "https://shop.test/products.json", "timeout": 2.5}

    def test_http_error_gives_empty_list(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(loader.requests, "get", lambda url, timeout: FakeResponse([], 500))
        assert load_products("https://shop.test/products.json") == []

    def test_connection_error_gives_empty_list(self, monkeypatch: pytest.MonkeyPatch):
        def fail(url, timeout):
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(loader.requests, "get", fail)
        assert load_products("https://shop.test/products.json") == []


class TestParse:
    """Tests for record validation."""

    def test_extra_fields_are_ignored(self):
        records = parse_products(
            [{"id": 1, "name": "Mug", "price": 3, "category": "Kitchen", "image": "mug.png"}]
        )
        assert records[0].name == "Mug"

    def test_numeric_strings_are_coerced(self):
        records = parse_products([{"name": "Mug", "price": "3.5", "category": "K", "stock": "4"}])
        assert records[0].price == 3.5
        assert records[0].stock == 4
