"""Staged product edits and their validation."""

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum, auto

from .models import Product, ProductFields

# Field order as shown in the form
FORM_FIELDS = ("name", "price", "category", "stock", "description")
# Labelled with " *"
STARRED_FIELDS = ("name", "price", "category", "stock")

REQUIRED = "Required"
INVALID = "Invalid"


class FormMode(StrEnum):
    Create = auto()
    Edit = auto()


@dataclass(frozen=True)
class ProductDraft:
    """Form-local copy of a product's fields, kept as typed-in text."""

    name: str = ""
    price: str = ""
    category: str = ""
    stock: str = "0"
    description: str = ""
    id: int | None = None

    @classmethod
    def from_product(cls, product: Product | None) -> "ProductDraft":
        """Blank draft for create mode, pre-filled draft for edit mode."""
        if product is None:
            return cls()
        return cls(
            id=product.id,
            name=product.name,
            price=_number_text(product.price),
            category=product.category,
            stock=str(product.stock),
            description=product.description,
        )

    @property
    def mode(self) -> FormMode:
        return FormMode.Create if self.id is None else FormMode.Edit

    @property
    def title(self) -> str:
        return "Add Product" if self.mode == FormMode.Create else "Edit Product"

    def with_value(self, field: str, value: str) -> "ProductDraft":
        if field not in FORM_FIELDS:
            raise KeyError(field)
        return replace(self, **{field: value})


def parse_price(text: str) -> float | None:
    """Price as a number, or None when it is not a usable price."""
    if text == "":
        return None
    try:
        price = float(text)
    except ValueError:
        return None
    if not math.isfinite(price) or price < 0:
        return None
    return price


def coerce_stock(text: str) -> int:
    """Stock is never rejected: blank or garbage becomes 0, negatives clamp."""
    try:
        stock = float(text)
    except ValueError:
        return 0
    if not math.isfinite(stock):
        return 0
    return max(0, int(stock))


def validate(draft: ProductDraft) -> dict[str, str]:
    """Per-field error messages; empty when the draft can be saved."""
    errors: dict[str, str] = {}
    if not draft.name.strip():
        errors["name"] = REQUIRED
    if parse_price(draft.price) is None:
        errors["price"] = INVALID
    if not draft.category.strip():
        errors["category"] = REQUIRED
    return errors


def to_fields(draft: ProductDraft) -> ProductFields:
    """Coerce a valid draft into product fields."""
    price = parse_price(draft.price)
    if price is None:
        raise ValueError(f"Invalid price: {draft.price!r}")
    return ProductFields(
        name=draft.name,
        price=price,
        category=draft.category,
        stock=coerce_stock(draft.stock),
        description=draft.description,
    )


def submit(
    draft: ProductDraft,
    on_save: Callable[[ProductFields, int | None], object],
) -> dict[str, str]:
    """Validate the draft and hand it to ``on_save`` if it passes.

    Returns the validation errors; ``on_save`` is only called when there
    are none.
    """
    errors = validate(draft)
    if not errors:
        on_save(to_fields(draft), draft.id)
    return errors


def _number_text(value: float) -> str:
    """Render a price the way it would be typed: no trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else str(value)
