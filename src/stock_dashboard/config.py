"""Configuration management for Stock Dashboard."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field

from . import (
    CONFIG_DIR,
    CONFIG_FILE,
    CURRENCY_SYMBOL,
    DEBOUNCE_MS,
    DEFAULT_SOURCE,
    LOW_STOCK_THRESHOLD,
    PAGE_SIZE,
)


class DashboardConfig(BaseModel):
    """Configuration for Stock Dashboard."""

    version: int = 1
    source: str = DEFAULT_SOURCE
    page_size: int = Field(default=PAGE_SIZE, ge=1)
    debounce_ms: int = Field(default=DEBOUNCE_MS, ge=0)
    low_stock_threshold: int = Field(default=LOW_STOCK_THRESHOLD, ge=0)
    currency_symbol: str = CURRENCY_SYMBOL
    request_timeout: float = Field(default=10.0, gt=0)

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


def get_config_dir(project_root: Path) -> Path:
    """Get the .stock-dashboard directory path."""
    return project_root / CONFIG_DIR


def get_config_path(project_root: Path) -> Path:
    """Get the config file path."""
    return get_config_dir(project_root) / CONFIG_FILE


def load_config(
    project_root: Path | None = None, config_path: Path | None = None
) -> DashboardConfig:
    """Load configuration from an explicit file or the project's config file.

    Falls back to defaults if the file doesn't exist.
    Environment variables can override config values.
    """
    if config_path is None:
        config_path = get_config_path(project_root or Path.cwd())

    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
        config = DashboardConfig.model_validate(data)
    else:
        config = DashboardConfig()

    return _apply_env_overrides(config)


def save_config(config: DashboardConfig, project_root: Path) -> None:
    """Save configuration to the project's config file."""
    config_path = get_config_path(project_root)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)


def _apply_env_overrides(config: DashboardConfig) -> DashboardConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    # STOCK_DASHBOARD_SOURCE
    if source := os.environ.get("STOCK_DASHBOARD_SOURCE"):
        data["source"] = source

    # STOCK_DASHBOARD_PAGE_SIZE
    if page_size := os.environ.get("STOCK_DASHBOARD_PAGE_SIZE"):
        data["page_size"] = page_size

    return DashboardConfig.model_validate(data)
