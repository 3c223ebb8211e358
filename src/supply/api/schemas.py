"""Pydantic request/response schemas for the Supply API.

API schemas are separate from Protean commands. Required fields are
enforced by the commands, so request bodies stay permissive and a
missing field surfaces through the same error path as any other domain
validation failure.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Supplier Schemas ---


class SupplierRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Premium Cat Supplies Co",
                    "contactPerson": "Jane Smith",
                    "email": "jane@premiumcat.com",
                    "phone": "555-0200",
                    "address": "12 Whisker Lane",
                    "active": True,
                    "verified": True,
                }
            ]
        },
    )

    name: str | None = None
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    active: bool = False
    verified: bool = False


class SupplierResponse(CamelModel):
    supplier_id: str
    name: str
    contact_person: str
    email: str
    phone: str
    address: str | None = None
    active: bool
    verified: bool

    @classmethod
    def from_supplier(cls, supplier) -> SupplierResponse:
        return cls(
            supplier_id=str(supplier.id),
            name=supplier.name,
            contact_person=supplier.contact_person,
            email=supplier.email,
            phone=supplier.phone,
            address=supplier.address,
            active=bool(supplier.active),
            verified=bool(supplier.verified),
        )


class SupplierStatusResponse(BaseModel):
    status: str


# --- Product Schemas ---


class ProductRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "SmartFeeder One",
                    "description": "Wi-Fi enabled feeder with portion control",
                    "price": 249.99,
                    "imgName": "smartfeeder.png",
                    "sku": "SF-001",
                    "unit": "piece",
                    "supplierId": "6f1c2a52-6d3e-4c57-9a1e-1f7d1c5e2b10",
                }
            ]
        },
    )

    name: str | None = None
    description: str | None = None
    price: float | None = None
    img_name: str | None = None
    sku: str | None = None
    unit: str | None = None
    supplier_id: str | None = None


class ProductResponse(CamelModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    img_name: str | None = None
    sku: str
    unit: str | None = None
    supplier_id: str

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            img_name=product.img_name,
            sku=product.sku,
            unit=product.unit,
            supplier_id=str(product.supplier_id),
        )
