"""First / Prev / Page X of Y / Next / Last controls."""

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Static

from ...pipeline import PageNav


class PaginationBar(Horizontal):
    """Page navigation; each button is disabled at its boundary."""

    DEFAULT_CSS = """
    PaginationBar {
        height: auto;
        align: center middle;
        margin: 1 1;
    }
    PaginationBar Button {
        min-width: 8;
        margin: 0 1;
    }
    PaginationBar #page-label {
        width: auto;
        padding: 1 2;
    }
    """

    class Navigate(Message):
        """Posted when a navigation button is pressed."""

        def __init__(self, target: str) -> None:
            self.target = target  # "first", "prev", "next" or "last"
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Button("First", id="page-first")
        yield Button("Prev", id="page-prev")
        yield Static("Page 1 of 1", id="page-label")
        yield Button("Next", id="page-next")
        yield Button("Last", id="page-last")

    def update_pages(self, page: int, page_count: int, nav: PageNav) -> None:
        self.query_one("#page-label", Static).update(f"Page {page} of {page_count}")
        self.query_one("#page-first", Button).disabled = nav.first_disabled
        self.query_one("#page-prev", Button).disabled = nav.prev_disabled
        self.query_one("#page-next", Button).disabled = nav.next_disabled
        self.query_one("#page-last", Button).disabled = nav.last_disabled

    @on(Button.Pressed)
    def _on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        target = (event.button.id or "").removeprefix("page-")
        self.post_message(self.Navigate(target))
