"""Search box and grid/list toggle."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input

from ...state import ViewMode


class ControlsBar(Horizontal):
    """Search input bound to the raw query, plus the view toggle."""

    DEFAULT_CSS = """
    ControlsBar {
        height: auto;
        margin: 1 1 0 1;
    }
    ControlsBar #search {
        width: 1fr;
    }
    ControlsBar Button {
        margin-left: 1;
    }
    ControlsBar Button.active {
        background: $accent;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search products by name...", id="search")
        yield Button("Grid View", id="view-grid", classes="active")
        yield Button("List View", id="view-list")

    def set_view_mode(self, mode: ViewMode) -> None:
        """Highlight the button of the active view."""
        self.query_one("#view-grid", Button).set_class(mode == ViewMode.Grid, "active")
        self.query_one("#view-list", Button).set_class(mode == ViewMode.List, "active")
