"""Product records for Stock Dashboard."""

from pydantic import BaseModel, ConfigDict, Field


class ProductFields(BaseModel):
    """Editable fields of a product (everything except the id)."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: float = Field(ge=0)
    category: str
    stock: int = Field(default=0, ge=0)
    description: str = ""


class Product(ProductFields):
    """A product owned by the store. The id never changes once assigned."""

    id: int


class ProductRecord(ProductFields):
    """A product as it arrives from the data source, id optional."""

    id: int | None = None
