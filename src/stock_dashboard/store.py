"""In-memory product store with immutable snapshots."""

import logging
from collections.abc import Iterable

from .models import Product, ProductFields

logger = logging.getLogger(__name__)


class ProductStore:
    """Owns the ordered product list and the next-id counter.

    Every mutation replaces the snapshot with a new tuple, so a snapshot
    handed out earlier is never changed underneath its holder.
    """

    def __init__(self, records: Iterable[ProductFields] = ()) -> None:
        self._products: tuple[Product, ...] = ()
        self._next_id: int = 1
        self.load(records)

    @property
    def products(self) -> tuple[Product, ...]:
        """Current snapshot."""
        return self._products

    @property
    def next_id(self) -> int:
        """Id the next created product will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._products)

    def get(self, product_id: int) -> Product | None:
        """Find a product by id."""
        return next((p for p in self._products if p.id == product_id), None)

    def load(self, records: Iterable[ProductFields]) -> None:
        """Replace the whole list and recompute the id counter.

        Records without an id, and records repeating an id already taken by
        an earlier record, get fresh ids after the counter has been derived
        from the ids that are present.
        """
        records = list(records)
        present = [rid for r in records if (rid := getattr(r, "id", None)) is not None]
        next_id = max(present, default=0) + 1

        products = []
        seen: set[int] = set()
        for record in records:
            product_id = getattr(record, "id", None)
            if product_id is None or product_id in seen:
                if product_id is not None:
                    logger.debug("Duplicate id %d reassigned to %d", product_id, next_id)
                product_id = next_id
                next_id += 1
            seen.add(product_id)
            products.append(Product(id=product_id, **_fields_of(record)))

        self._products = tuple(products)
        self._next_id = next_id
        logger.debug("Loaded %d products, next id %d", len(products), next_id)

    def create(self, fields: ProductFields) -> Product:
        """Add a new product at the front of the list with a fresh id."""
        product = Product(id=self._next_id, **_fields_of(fields))
        self._next_id += 1
        self._products = (product, *self._products)
        logger.debug("Created product %d (%s)", product.id, product.name)
        return product

    def update(self, product_id: int, fields: ProductFields) -> bool:
        """Replace every field except the id of the matching product.

        Unknown ids leave the store untouched. Returns whether a product
        was updated.
        """
        if self.get(product_id) is None:
            logger.debug("Update ignored, no product with id %d", product_id)
            return False

        values = _fields_of(fields)
        self._products = tuple(
            p.model_copy(update=values) if p.id == product_id else p
            for p in self._products
        )
        logger.debug("Updated product %d", product_id)
        return True

    def save(self, fields: ProductFields, product_id: int | None = None) -> Product | None:
        """Create a product, or update an existing one when an id is given."""
        if product_id is None:
            return self.create(fields)
        self.update(product_id, fields)
        return self.get(product_id)


def _fields_of(record: ProductFields) -> dict:
    """Editable field values of a record, without its id."""
    return record.model_dump(include=set(ProductFields.model_fields))
