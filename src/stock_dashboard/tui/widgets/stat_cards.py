"""Summary statistic cards."""

from rich.console import RenderableType
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from ...pipeline import SummaryStats, format_amount, format_money


class StatCard(Static):
    """A single labelled number."""

    DEFAULT_CSS = """
    StatCard {
        width: 1fr;
        height: 5;
        padding: 1 2;
        margin: 0 1;
        border: round $accent;
    }
    StatCard.purple { border: round #a78bfa; }
    StatCard.pink { border: round #f472b6; }
    StatCard.blue { border: round #60a5fa; }
    StatCard.green { border: round #4ade80; }
    """

    def __init__(self, label: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.label = label
        self.value = "0"

    def set_value(self, value: str) -> None:
        self.value = value
        self.refresh()

    def render(self) -> RenderableType:
        text = Text()
        text.append(self.label, style="dim")
        text.append("\n")
        text.append(self.value, style="bold")
        return text


class StatCards(Horizontal):
    """Total products, low stock, total stock and total value."""

    DEFAULT_CSS = """
    StatCards {
        height: auto;
        margin: 1 1 0 1;
    }
    """

    def __init__(self, currency_symbol: str = "₹", **kwargs) -> None:
        super().__init__(**kwargs)
        self._currency_symbol = currency_symbol

    def compose(self) -> ComposeResult:
        yield StatCard("Total Products", id="stat-total", classes="purple")
        yield StatCard("Low Stock Items", id="stat-low-stock", classes="pink")
        yield StatCard("Total Stock", id="stat-stock", classes="blue")
        yield StatCard("Total Value", id="stat-value", classes="green")

    def update_stats(self, stats: SummaryStats) -> None:
        self.query_one("#stat-total", StatCard).set_value(str(stats.total_products))
        self.query_one("#stat-low-stock", StatCard).set_value(str(stats.low_stock))
        self.query_one("#stat-stock", StatCard).set_value(format_amount(stats.total_stock))
        self.query_one("#stat-value", StatCard).set_value(
            format_money(stats.total_value, self._currency_symbol)
        )
