"""Supplier maintenance: update and removal commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from supply.domain import supply
from supply.product.product import Product
from supply.supplier.supplier import Supplier


@supply.command(part_of="Supplier")
class UpdateSupplier:
    supplier_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    contact_person: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    phone: String(required=True, max_length=50)
    address: Text()
    active: Boolean(default=False)
    verified: Boolean(default=False)


@supply.command(part_of="Supplier")
class RemoveSupplier:
    supplier_id: Identifier(required=True)


@supply.command_handler(part_of=Supplier)
class ManageSupplierHandler:
    @handle(UpdateSupplier)
    def update_supplier(self, command):
        repo = current_domain.repository_for(Supplier)
        supplier = repo.get(command.supplier_id)
        supplier.update_details(
            name=command.name,
            contact_person=command.contact_person,
            email=command.email,
            phone=command.phone,
            address=command.address,
            active=command.active,
            verified=command.verified,
        )
        repo.add(supplier)
        return str(supplier.id)

    @handle(RemoveSupplier)
    def remove_supplier(self, command):
        repo = current_domain.repository_for(Supplier)
        supplier = repo.get(command.supplier_id)

        products = current_domain.repository_for(Product).list_for_supplier(str(supplier.id))
        if products:
            raise ValidationError(
                {"supplier_id": [f"Supplier {supplier.id} is still referenced by {len(products)} product(s)"]}
            )

        repo._dao.delete(supplier)
