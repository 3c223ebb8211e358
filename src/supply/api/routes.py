"""FastAPI routes for the Supply domain.

Thin adapters: writes are translated into domain commands, reads go
straight to the repositories. Each handler body runs inside
``ApiContext.observe`` and answers 404 itself when a repository raises
``ObjectNotFoundError``.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from protean.exceptions import ObjectNotFoundError

from supply.api.instrumentation import ApiContext, get_context
from supply.api.schemas import (
    ProductRequest,
    ProductResponse,
    SupplierRequest,
    SupplierResponse,
    SupplierStatusResponse,
)
from supply.product.creation import CreateProduct
from supply.product.management import DeleteProduct, UpdateProduct
from supply.product.product import Product
from supply.supplier.management import RemoveSupplier, UpdateSupplier
from supply.supplier.registration import RegisterSupplier
from supply.supplier.supplier import Supplier

supplier_router = APIRouter(prefix="/suppliers", tags=["suppliers"])
product_router = APIRouter(prefix="/products", tags=["products"])

SUPPLIER_NOT_FOUND = "Supplier not found"
PRODUCT_NOT_FOUND = "Product not found"


def _not_found(op, message: str) -> PlainTextResponse:
    op.status = 404
    return PlainTextResponse(message, status_code=404)


# ---------------------------------------------------------------------------
# Suppliers
# ---------------------------------------------------------------------------
@supplier_router.post("", status_code=201, response_model=SupplierResponse)
async def create_supplier(body: SupplierRequest, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "create", status=201, supplier_name=body.name) as op:
        command = RegisterSupplier(
            name=body.name,
            contact_person=body.contact_person,
            email=body.email,
            phone=body.phone,
            address=body.address,
            active=body.active,
            verified=body.verified,
        )
        supplier_id = ctx.domain.process(command, asynchronous=False)
        op.fields["supplier_id"] = supplier_id

        supplier = ctx.domain.repository_for(Supplier).get(supplier_id)
        return SupplierResponse.from_supplier(supplier)


@supplier_router.get("", response_model=list[SupplierResponse])
async def list_suppliers(ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "findAll") as op:
        suppliers = ctx.domain.repository_for(Supplier).list_all()
        op.fields["count"] = len(suppliers)
        return [SupplierResponse.from_supplier(supplier) for supplier in suppliers]


@supplier_router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(supplier_id: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "findById", supplier_id=supplier_id) as op:
        try:
            supplier = ctx.domain.repository_for(Supplier).get(supplier_id)
        except ObjectNotFoundError:
            return _not_found(op, SUPPLIER_NOT_FOUND)
        return SupplierResponse.from_supplier(supplier)


@supplier_router.put("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(supplier_id: str, body: SupplierRequest, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "update", supplier_id=supplier_id) as op:
        try:
            ctx.domain.repository_for(Supplier).get(supplier_id)
        except ObjectNotFoundError:
            return _not_found(op, SUPPLIER_NOT_FOUND)

        command = UpdateSupplier(
            supplier_id=supplier_id,
            name=body.name,
            contact_person=body.contact_person,
            email=body.email,
            phone=body.phone,
            address=body.address,
            active=body.active,
            verified=body.verified,
        )
        ctx.domain.process(command, asynchronous=False)

        supplier = ctx.domain.repository_for(Supplier).get(supplier_id)
        return SupplierResponse.from_supplier(supplier)


@supplier_router.delete("/{supplier_id}", status_code=204)
async def delete_supplier(supplier_id: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "delete", status=204, supplier_id=supplier_id) as op:
        try:
            ctx.domain.process(RemoveSupplier(supplier_id=supplier_id), asynchronous=False)
        except ObjectNotFoundError:
            return _not_found(op, SUPPLIER_NOT_FOUND)
        return Response(status_code=204)


@supplier_router.get("/{supplier_id}/status", response_model=SupplierStatusResponse)
async def get_supplier_status(supplier_id: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("supplier", "getStatus", supplier_id=supplier_id) as op:
        try:
            supplier = ctx.domain.repository_for(Supplier).get(supplier_id)
        except ObjectNotFoundError:
            return _not_found(op, SUPPLIER_NOT_FOUND)

        status = supplier.approval_status().value
        op.fields["supplier_status"] = status
        return SupplierStatusResponse(status=status)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: ProductRequest, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "create", status=201, product_name=body.name) as op:
        command = CreateProduct(
            name=body.name,
            description=body.description,
            price=body.price,
            img_name=body.img_name,
            sku=body.sku,
            unit=body.unit,
            supplier_id=body.supplier_id,
        )
        product_id = ctx.domain.process(command, asynchronous=False)
        op.fields["product_id"] = product_id

        product = ctx.domain.repository_for(Product).get(product_id)
        return ProductResponse.from_product(product)


@product_router.get("", response_model=list[ProductResponse])
async def list_products(ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "findAll") as op:
        products = ctx.domain.repository_for(Product).list_all()
        op.fields["count"] = len(products)
        return [ProductResponse.from_product(product) for product in products]


@product_router.get("/name/{name}", response_model=ProductResponse)
async def get_product_by_name(name: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "findByName", product_name=name) as op:
        try:
            product = ctx.domain.repository_for(Product).find_by_name(name)
        except ObjectNotFoundError:
            return _not_found(op, PRODUCT_NOT_FOUND)
        return ProductResponse.from_product(product)


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "findById", product_id=product_id) as op:
        try:
            product = ctx.domain.repository_for(Product).get(product_id)
        except ObjectNotFoundError:
            return _not_found(op, PRODUCT_NOT_FOUND)
        return ProductResponse.from_product(product)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: ProductRequest, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "update", product_id=product_id) as op:
        try:
            ctx.domain.repository_for(Product).get(product_id)
        except ObjectNotFoundError:
            return _not_found(op, PRODUCT_NOT_FOUND)

        command = UpdateProduct(
            product_id=product_id,
            name=body.name,
            description=body.description,
            price=body.price,
            img_name=body.img_name,
            sku=body.sku,
            unit=body.unit,
            supplier_id=body.supplier_id,
        )
        ctx.domain.process(command, asynchronous=False)

        product = ctx.domain.repository_for(Product).get(product_id)
        return ProductResponse.from_product(product)


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str, ctx: ApiContext = Depends(get_context)):
    with ctx.observe("product", "delete", status=204, product_id=product_id) as op:
        try:
            ctx.domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        except ObjectNotFoundError:
            return _not_found(op, PRODUCT_NOT_FOUND)
        return Response(status_code=204)
