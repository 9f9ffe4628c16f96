"""Modal screens for Stock Dashboard."""

from .product_form import ProductFormScreen, SavedProduct

__all__ = ["ProductFormScreen", "SavedProduct"]
