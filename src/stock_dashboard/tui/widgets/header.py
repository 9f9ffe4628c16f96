"""Dashboard header with title and the add-product action."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static


class DashboardHeader(Horizontal):
    """Title block on the left, "Add New Product" button on the right."""

    DEFAULT_CSS = """
    DashboardHeader {
        height: auto;
        padding: 1 2;
        background: $boost;
    }
    DashboardHeader #titles {
        width: 1fr;
        height: auto;
    }
    DashboardHeader #brand-title {
        color: $text-muted;
    }
    DashboardHeader #dashboard-title {
        text-style: bold;
        color: $accent;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="titles"):
            yield Static("Product Management System", id="brand-title")
            yield Static("Inventory Dashboard", id="dashboard-title")
        yield Button("＋ Add New Product", id="add-product", variant="primary")
