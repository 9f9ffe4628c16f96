"""Textual TUI components for Stock Dashboard."""

from .app import DashboardApp, run_app

__all__ = [
    "DashboardApp",
    "run_app",
]
