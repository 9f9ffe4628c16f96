"""Grid and list renderings of the visible products."""

from collections.abc import Sequence

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, DataTable, Static

from ...models import Product
from ...pipeline import format_amount, format_money


class EditRequested(Message):
    """Posted when the user asks to edit a product."""

    def __init__(self, product: Product) -> None:
        self.product = product
        super().__init__()


class ProductCard(Vertical):
    """One product in grid mode.

    Cards are reused across renders; an empty card is hidden.
    """

    DEFAULT_CSS = """
    ProductCard {
        height: auto;
        padding: 0 1;
        border: round $panel-lighten-2;
    }
    ProductCard.low-stock {
        border: round $warning;
    }
    ProductCard .category-tag {
        color: $accent;
        text-style: italic;
    }
    ProductCard .name {
        text-style: bold;
    }
    ProductCard .description {
        color: $text-muted;
        height: 2;
    }
    ProductCard .card-footer {
        height: 1;
    }
    ProductCard .price-tag {
        width: 1fr;
        color: $success;
    }
    ProductCard .stock-badge {
        width: auto;
    }
    ProductCard Button {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(
        self, currency_symbol: str = "₹", low_stock_threshold: int = 5, **kwargs
    ) -> None:
        super().__init__(**kwargs)
        self.product: Product | None = None
        self._currency_symbol = currency_symbol
        self._low_stock_threshold = low_stock_threshold

    def compose(self) -> ComposeResult:
        yield Static("", classes="category-tag")
        yield Static("", classes="name")
        yield Static("", classes="description")
        with Horizontal(classes="card-footer"):
            yield Static("", classes="price-tag")
            yield Static("", classes="stock-badge")
        yield Button("Edit", classes="edit")

    def show_product(self, product: Product | None) -> None:
        self.product = product
        self.display = product is not None
        if product is None:
            return
        self.query_one(".category-tag", Static).update(Text(product.category))
        self.query_one(".name", Static).update(Text(product.name))
        self.query_one(".description", Static).update(Text(product.description))
        self.query_one(".price-tag", Static).update(
            format_money(product.price, self._currency_symbol)
        )
        self.query_one(".stock-badge", Static).update(f"{product.stock} units")
        self.set_class(product.stock < self._low_stock_threshold, "low-stock")

    @on(Button.Pressed, ".edit")
    def _on_edit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if self.product is not None:
            self.post_message(EditRequested(self.product))


class ProductGrid(Grid):
    """Cards for the visible page, one slot per page position."""

    DEFAULT_CSS = """
    ProductGrid {
        grid-size: 4;
        grid-gutter: 1 2;
        grid-rows: auto;
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        page_size: int = 8,
        currency_symbol: str = "₹",
        low_stock_threshold: int = 5,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._page_size = page_size
        self._currency_symbol = currency_symbol
        self._low_stock_threshold = low_stock_threshold

    def compose(self) -> ComposeResult:
        for _ in range(self._page_size):
            yield ProductCard(self._currency_symbol, self._low_stock_threshold)

    @property
    def cards(self) -> list[ProductCard]:
        return list(self.query(ProductCard))

    def show_products(self, products: Sequence[Product]) -> None:
        for i, card in enumerate(self.cards):
            card.show_product(products[i] if i < len(products) else None)


class ProductTable(DataTable):
    """List mode: one row per visible product. Enter on a row edits it."""

    DEFAULT_CSS = """
    ProductTable {
        height: auto;
        max-height: 100%;
        margin: 0 1;
    }
    """

    COLUMNS = ("Name", "Price", "Category", "Stock", "Actions")

    def __init__(self, currency_symbol: str = "₹", **kwargs) -> None:
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self._currency_symbol = currency_symbol
        self._products: dict[str, Product] = {}
        self.add_columns(*self.COLUMNS)

    def show_products(self, products: Sequence[Product]) -> None:
        self.clear()
        self._products = {str(p.id): p for p in products}
        for p in products:
            self.add_row(
                Text(p.name),
                format_money(p.price, self._currency_symbol),
                Text(p.category),
                format_amount(p.stock),
                Text("Edit", style="underline"),
                key=str(p.id),
            )

    def product_at(self, key: str) -> Product | None:
        return self._products.get(key)

    @on(DataTable.RowSelected)
    def _on_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        product = self.product_at(event.row_key.value)
        if product is not None:
            self.post_message(EditRequested(product))
