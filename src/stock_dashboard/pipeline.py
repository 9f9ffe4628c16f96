"""Derivation pipeline: filtering, pagination and summary statistics.

Everything here is a pure function of the store snapshot and the control
state, so the view can be recomputed from scratch on every change.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from . import CURRENCY_SYMBOL, LOW_STOCK_THRESHOLD, PAGE_SIZE
from .models import Product
from .state import ControlState


@dataclass(frozen=True)
class SummaryStats:
    """Statistics over the full, unfiltered store."""

    total_products: int
    low_stock: int
    total_stock: int
    total_value: float


@dataclass(frozen=True)
class PageNav:
    """Which pagination controls are disabled."""

    first_disabled: bool
    prev_disabled: bool
    next_disabled: bool
    last_disabled: bool


@dataclass(frozen=True)
class DashboardView:
    """Everything the view layer needs for one render."""

    filtered: tuple[Product, ...]
    visible: tuple[Product, ...]
    page: int
    page_count: int
    nav: PageNav
    stats: SummaryStats


def filter_products(products: Sequence[Product], query: str) -> tuple[Product, ...]:
    """Case-insensitive substring match of the query against product names.

    A blank query matches everything; otherwise the query is matched as typed,
    surrounding whitespace included.
    """
    if not query.strip():
        return tuple(products)
    q = query.lower()
    return tuple(p for p in products if q in p.name.lower())


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for ``total`` items, never less than one."""
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, count: int) -> int:
    return min(max(page, 1), count)


def page_window(
    items: Sequence[Product], page: int, page_size: int = PAGE_SIZE
) -> tuple[Product, ...]:
    """Items shown on a 1-based page."""
    start = (page - 1) * page_size
    return tuple(items[start : start + page_size])


def page_nav(page: int, count: int) -> PageNav:
    at_start = page <= 1
    at_end = page >= count
    return PageNav(
        first_disabled=at_start,
        prev_disabled=at_start,
        next_disabled=at_end,
        last_disabled=at_end,
    )


def summarize(
    products: Sequence[Product], low_stock_threshold: int = LOW_STOCK_THRESHOLD
) -> SummaryStats:
    """Totals shown on the stat cards."""
    return SummaryStats(
        total_products=len(products),
        low_stock=sum(1 for p in products if p.stock < low_stock_threshold),
        total_stock=sum(p.stock for p in products),
        total_value=sum(p.price * p.stock for p in products),
    )


def derive(
    products: Sequence[Product],
    state: ControlState,
    page_size: int = PAGE_SIZE,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    filtered: Sequence[Product] | None = None,
) -> DashboardView:
    """Recompute the whole dashboard from a snapshot and the control state.

    ``filtered`` may be passed when the caller already holds the result of
    filtering this snapshot by the debounced query.
    """
    if filtered is None:
        filtered = filter_products(products, state.debounced_query)
    filtered = tuple(filtered)
    count = page_count(len(filtered), page_size)
    page = clamp_page(state.page, count)
    return DashboardView(
        filtered=filtered,
        visible=page_window(filtered, page, page_size),
        page=page,
        page_count=count,
        nav=page_nav(page, count),
        stats=summarize(products, low_stock_threshold),
    )


def format_amount(value: float) -> str:
    """Group digits with commas; integral values drop the decimals.

    >>> format_amount(1234567)
    '1,234,567'
    >>> format_amount(1234.5)
    '1,234.5'
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_money(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
    return f"{symbol}{format_amount(value)}"
