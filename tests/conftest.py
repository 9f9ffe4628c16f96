"""Shared test fixtures for stock-dashboard."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from stock_dashboard.config import DashboardConfig
from stock_dashboard.models import ProductFields, ProductRecord
from stock_dashboard.store import ProductStore


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def products_file() -> Path:
    """Path to the fixture catalogue of 20 products."""
    return Path(__file__).parent / "fixtures" / "products.json"


@pytest.fixture
def sample_records(products_file: Path) -> list[ProductRecord]:
    """The fixture catalogue as loader records."""
    return [ProductRecord.model_validate(r) for r in json.loads(products_file.read_text())]


@pytest.fixture
def store(sample_records: list[ProductRecord]) -> ProductStore:
    """A store seeded with the fixture catalogue."""
    return ProductStore(sample_records)


def make_fields(name: str = "Widget", **overrides) -> ProductFields:
    """Build editable product fields with sensible defaults."""
    values = {
        "name": name,
        "price": 10.0,
        "category": "Misc",
        "stock": 1,
        "description": "",
    }
    values.update(overrides)
    return ProductFields(**values)


def make_config(source: Path | str, **overrides) -> DashboardConfig:
    """Config for UI tests: short debounce so tests stay quick."""
    values = {"source": str(source), "debounce_ms": 50}
    values.update(overrides)
    return DashboardConfig(**values)
