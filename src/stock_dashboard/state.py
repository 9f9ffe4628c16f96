"""UI control state for the dashboard."""

from dataclasses import dataclass, replace
from enum import StrEnum, auto

from .models import Product


class ViewMode(StrEnum):
    """How the visible products are rendered."""

    Grid = auto()
    List = auto()


@dataclass(frozen=True)
class ControlState:
    """Ephemeral state owned by the view layer.

    Transitions return a new state; the dashboard is re-derived from
    the latest one.
    """

    query: str = ""
    debounced_query: str = ""
    view_mode: ViewMode = ViewMode.Grid
    page: int = 1
    modal_open: bool = False
    edit_target: Product | None = None

    def with_query(self, query: str) -> "ControlState":
        """Raw query changed: page goes back to 1."""
        return replace(self, query=query, page=1)

    def with_debounced_query(self, query: str) -> "ControlState":
        return replace(self, debounced_query=query)

    def with_view_mode(self, mode: ViewMode) -> "ControlState":
        return replace(self, view_mode=mode)

    def toggled_view(self) -> "ControlState":
        mode = ViewMode.List if self.view_mode == ViewMode.Grid else ViewMode.Grid
        return self.with_view_mode(mode)

    def go_to(self, page: int, page_count: int) -> "ControlState":
        """Move to a page, clamped to ``[1, page_count]``."""
        return replace(self, page=min(max(page, 1), page_count))

    def first_page(self, page_count: int) -> "ControlState":
        return self.go_to(1, page_count)

    def prev_page(self, page_count: int) -> "ControlState":
        return self.go_to(self.page - 1, page_count)

    def next_page(self, page_count: int) -> "ControlState":
        return self.go_to(self.page + 1, page_count)

    def last_page(self, page_count: int) -> "ControlState":
        return self.go_to(page_count, page_count)

    def open_create(self) -> "ControlState":
        return replace(self, modal_open=True, edit_target=None)

    def open_edit(self, product: Product) -> "ControlState":
        return replace(self, modal_open=True, edit_target=product)

    def close_modal(self) -> "ControlState":
        return replace(self, modal_open=False, edit_target=None)
