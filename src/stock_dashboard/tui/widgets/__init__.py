"""TUI widgets for Stock Dashboard."""

from .controls import ControlsBar
from .header import DashboardHeader
from .pagination import PaginationBar
from .product_views import EditRequested, ProductCard, ProductGrid, ProductTable
from .stat_cards import StatCard, StatCards
from .status_bar import StatusBar

__all__ = [
    # Main layout widgets
    "ControlsBar",
    "DashboardHeader",
    "PaginationBar",
    "StatCards",
    "StatusBar",
    # Product views
    "EditRequested",
    "ProductCard",
    "ProductGrid",
    "ProductTable",
    "StatCard",
]
