"""Status bar widget for bottom of screen."""

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar showing load status, data source and match count.

    Layout:
        : Ready                        products.json  12 of 40 products
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        padding: 0 2;
        dock: bottom;
    }
    """

    def __init__(self, source: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._source = source
        self._status = "Ready"
        self._status_style = "green"
        self._matching: int | None = None
        self._total: int | None = None

    def update_counts(self, matching: int, total: int) -> None:
        """Update the product counts shown on the right."""
        self._matching = matching
        self._total = total
        self.refresh()

    def set_ready(self) -> None:
        """Set status to ready state."""
        self._status = "Ready"
        self._status_style = "green"
        self.refresh()

    def set_loading(self) -> None:
        """Set status to loading state."""
        self._status = "Loading products..."
        self._status_style = "cyan"
        self.refresh()

    def set_status(self, message: str, style: str = "yellow") -> None:
        """Set a temporary status message.

        Args:
            message: Status message to display
            style: Rich style for the message (default: yellow)
        """
        self._status = message
        self._status_style = style
        self.refresh()

    @property
    def status(self) -> str:
        return self._status

    def render(self) -> RenderableType:
        # Left side: Status indicator
        left = Text()
        left.append(": ", style="dim")
        left.append(self._status, style=self._status_style)

        # Right side: Source and product counts
        right = Text()
        right.append(self._source, style="blue dim")
        right.append("  ")
        right.append(self._get_count_info(), style="dim")

        grid = Table.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(justify="right")
        grid.add_row(left, right)

        return grid

    def _get_count_info(self) -> str:
        """Get product count info string."""
        if self._total is None:
            return ""
        if self._matching is None or self._matching == self._total:
            return f"{self._total} products"
        return f"{self._matching} of {self._total} products"
