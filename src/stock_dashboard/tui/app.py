"""Main TUI application for Stock Dashboard."""

import asyncio
import logging
from functools import partial
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, ContentSwitcher, Input

from ..config import DashboardConfig, load_config
from ..loader import load_products
from ..models import Product
from ..pipeline import DashboardView, derive, filter_products
from ..state import ControlState, ViewMode
from ..store import ProductStore
from .screens import ProductFormScreen, SavedProduct
from .widgets import (
    ControlsBar,
    DashboardHeader,
    EditRequested,
    PaginationBar,
    ProductGrid,
    ProductTable,
    StatCards,
    StatusBar,
)

logger = logging.getLogger(__name__)


class DashboardApp(App):
    """Inventory dashboard over an in-memory product store."""

    TITLE = "Stock Dashboard"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("ctrl+n", "add_product", "Add"),
        Binding("ctrl+g", "toggle_view", "Grid/List"),
        Binding("ctrl+f", "focus_search", "Search"),
        Binding("pageup", "page('prev')", "Prev page", show=False),
        Binding("pagedown", "page('next')", "Next page", show=False),
        Binding("ctrl+home", "page('first')", "First page", show=False),
        Binding("ctrl+end", "page('last')", "Last page", show=False),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    # Reactive state: every change re-derives the whole dashboard
    products: reactive[tuple[Product, ...]] = reactive(tuple, init=False)
    controls: reactive[ControlState] = reactive(ControlState, init=False)

    def __init__(
        self,
        config: DashboardConfig | None = None,
        store: ProductStore | None = None,
        autoload: bool = True,
    ) -> None:
        super().__init__()
        self.config = config or load_config()
        self.store = store if store is not None else ProductStore()
        self._autoload = autoload
        self._query_timer: Timer | None = None  # Pending debounced query
        self._dashboard_ready = False
        self.current_view: DashboardView | None = None

        # Filtering is memoised on (snapshot, debounced query)
        self._filter_key: tuple[tuple[Product, ...], str] | None = None
        self._filtered: tuple[Product, ...] = ()

    def compose(self) -> ComposeResult:
        """Header, stats, controls, product views and pagination."""
        yield DashboardHeader(id="header")
        with VerticalScroll(id="body"):
            yield StatCards(currency_symbol=self.config.currency_symbol, id="stats")
            yield ControlsBar(id="controls")
            with ContentSwitcher(initial="grid", id="views"):
                yield ProductGrid(
                    page_size=self.config.page_size,
                    currency_symbol=self.config.currency_symbol,
                    low_stock_threshold=self.config.low_stock_threshold,
                    id="grid",
                )
                yield ProductTable(currency_symbol=self.config.currency_symbol, id="list")
            yield PaginationBar(id="pagination")
        yield StatusBar(source=self.config.source, id="status")

    def on_mount(self) -> None:
        """Render the current store and kick off the one-time fetch."""
        # The form is a modal screen, so keep handles on the dashboard widgets
        self._stat_cards = self.query_one("#stats", StatCards)
        self._controls_bar = self.query_one("#controls", ControlsBar)
        self._search_input = self.query_one("#search", Input)
        self._view_switcher = self.query_one("#views", ContentSwitcher)
        self._product_grid = self.query_one("#grid", ProductGrid)
        self._product_table = self.query_one("#list", ProductTable)
        self._pagination_bar = self.query_one("#pagination", PaginationBar)
        self._status_bar = self.query_one("#status", StatusBar)

        self._dashboard_ready = True
        self.products = self.store.products
        self._refresh_dashboard()

        if self._autoload:
            self._status_bar.set_loading()
            self.run_worker(self._load_products(), name="load-products", exclusive=True)

    async def _load_products(self) -> None:
        """Fetch the startup data; failures leave the store empty."""
        records = await asyncio.to_thread(
            load_products, self.config.source, timeout=self.config.request_timeout
        )
        self.store.load(records)
        self.products = self.store.products

        if records:
            self._status_bar.set_ready()
        else:
            self._status_bar.set_status("No products loaded")

    # ─────────────────────────────────────────────────────────────────────
    # Derivation
    # ─────────────────────────────────────────────────────────────────────

    def watch_products(self) -> None:
        self._refresh_dashboard()

    def watch_controls(self) -> None:
        self._refresh_dashboard()

    def _filtered_products(self) -> tuple[Product, ...]:
        key = (self.products, self.controls.debounced_query)
        if (
            self._filter_key is None
            or self._filter_key[0] is not key[0]
            or self._filter_key[1] != key[1]
        ):
            self._filter_key = key
            self._filtered = filter_products(*key)
        return self._filtered

    def _refresh_dashboard(self) -> None:
        """Recompute the view from the current snapshot and control state."""
        if not self._dashboard_ready:
            return

        view = derive(
            self.products,
            self.controls,
            page_size=self.config.page_size,
            low_stock_threshold=self.config.low_stock_threshold,
            filtered=self._filtered_products(),
        )
        self.current_view = view

        self._stat_cards.update_stats(view.stats)
        self._controls_bar.set_view_mode(self.controls.view_mode)

        if self.controls.view_mode == ViewMode.Grid:
            self._view_switcher.current = "grid"
            self._product_grid.show_products(view.visible)
        else:
            self._view_switcher.current = "list"
            self._product_table.show_products(view.visible)

        self._pagination_bar.update_pages(view.page, view.page_count, view.nav)
        self._status_bar.update_counts(
            len(view.filtered), view.stats.total_products
        )

    # ─────────────────────────────────────────────────────────────────────
    # Search and view controls
    # ─────────────────────────────────────────────────────────────────────

    @on(Input.Changed, "#search")
    def _on_search_changed(self, event: Input.Changed) -> None:
        """Raw query drives the input and resets the page; filtering waits."""
        self.controls = self.controls.with_query(event.value)
        if self._query_timer is not None:
            self._query_timer.stop()
        self._query_timer = self.set_timer(
            self.config.debounce_seconds, partial(self._apply_query, event.value)
        )

    def _apply_query(self, query: str) -> None:
        self._query_timer = None
        self.controls = self.controls.with_debounced_query(query)

    @on(Button.Pressed, "#view-grid")
    def _on_grid_view(self, event: Button.Pressed) -> None:
        self.controls = self.controls.with_view_mode(ViewMode.Grid)

    @on(Button.Pressed, "#view-list")
    def _on_list_view(self, event: Button.Pressed) -> None:
        self.controls = self.controls.with_view_mode(ViewMode.List)

    @on(PaginationBar.Navigate)
    def _on_navigate(self, event: PaginationBar.Navigate) -> None:
        self.action_page(event.target)

    def action_page(self, target: str) -> None:
        """Move to the first, previous, next or last page."""
        count = self.current_view.page_count if self.current_view else 1
        moves = {
            "first": self.controls.first_page,
            "prev": self.controls.prev_page,
            "next": self.controls.next_page,
            "last": self.controls.last_page,
        }
        if target in moves:
            self.controls = moves[target](count)

    def action_toggle_view(self) -> None:
        self.controls = self.controls.toggled_view()

    def action_focus_search(self) -> None:
        self._search_input.focus()

    # ─────────────────────────────────────────────────────────────────────
    # Product form
    # ─────────────────────────────────────────────────────────────────────

    @on(Button.Pressed, "#add-product")
    def _on_add_pressed(self, event: Button.Pressed) -> None:
        self.action_add_product()

    @on(EditRequested)
    def _on_edit_requested(self, event: EditRequested) -> None:
        self.open_form(event.product)

    def action_add_product(self) -> None:
        self.open_form(None)

    def open_form(self, product: Product | None) -> None:
        """Show the form in create mode (no product) or edit mode."""
        if self.controls.modal_open:
            return
        if product is None:
            self.controls = self.controls.open_create()
        else:
            self.controls = self.controls.open_edit(product)
        logger.debug("Opening product form (%s)", "create" if product is None else product.id)
        self.push_screen(ProductFormScreen(product), self._on_form_closed)

    def _on_form_closed(self, result: SavedProduct | None) -> None:
        """Save callback: create-or-update the store, then close the modal."""
        if result is not None:
            saved = self.store.save(result.fields, result.product_id)
            if saved is None:
                logger.debug("Product %s no longer exists, edit dropped", result.product_id)
            self.products = self.store.products
        self.controls = self.controls.close_modal()


def run_app(config: DashboardConfig | None = None, project_root: Path | None = None) -> None:
    """Run the TUI application."""
    app = DashboardApp(config or load_config(project_root))
    app.run()
