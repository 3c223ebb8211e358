"""Storefront data shapes: catalog products and cart line items."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StorefrontModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogProduct(StorefrontModel):
    """A product as served by the ``/products`` endpoints."""

    product_id: str
    name: str
    description: str | None = None
    price: float
    img_name: str | None = None
    sku: str | None = None
    unit: str | None = None
    supplier_id: str | None = None


class CartItem(StorefrontModel):
    """One line of the cart, with the product fields it was added with."""

    product_id: str
    name: str
    price: float
    img_name: str | None = None
    sku: str | None = None
    quantity: int = Field(default=1, ge=0)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
