"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from stock_dashboard import CONFIG_DIR
from stock_dashboard.config import DashboardConfig, load_config, save_config


class TestDashboardConfig:
    """Tests for DashboardConfig."""

    def test_defaults(self):
        config = DashboardConfig()
        assert config.source == "products.json"
        assert config.page_size == 8
        assert config.debounce_ms == 500
        assert config.debounce_seconds == 0.5
        assert config.low_stock_threshold == 5
        assert config.currency_symbol == "₹"

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            DashboardConfig(page_size=0)


class TestLoadConfig:
    """Tests for load_config / save_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path) == DashboardConfig()

    def test_roundtrip_through_project_dir(self, tmp_path: Path):
        save_config(DashboardConfig(source="stock.json", page_size=12), tmp_path)
        assert (tmp_path / CONFIG_DIR / "config.json").exists()

        config = load_config(tmp_path)
        assert config.source == "stock.json"
        assert config.page_size == 12

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"currency_symbol": "$"}))
        assert load_config(config_path=path).currency_symbol == "$"

    def test_invalid_file_raises(self, tmp_path: Path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"page_size": -4}))
        with pytest.raises(ValidationError):
            load_config(config_path=path)

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STOCK_DASHBOARD_SOURCE", "https://shop.test/p.json")
        monkeypatch.setenv("STOCK_DASHBOARD_PAGE_SIZE", "4")
        config = load_config(tmp_path)
        assert config.source == "https://shop.test/p.json"
        assert config.page_size == 4
