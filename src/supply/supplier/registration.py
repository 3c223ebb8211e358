"""Supplier registration: command and handler."""

from protean import handle
from protean.fields import Boolean, String, Text
from protean.utils.globals import current_domain

from supply.domain import supply
from supply.supplier.supplier import Supplier


@supply.command(part_of="Supplier")
class RegisterSupplier:
    name: String(required=True, max_length=255)
    contact_person: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    phone: String(required=True, max_length=50)
    address: Text()
    active: Boolean(default=False)
    verified: Boolean(default=False)


@supply.command_handler(part_of=Supplier)
class RegisterSupplierHandler:
    @handle(RegisterSupplier)
    def register_supplier(self, command):
        supplier = Supplier.register(
            name=command.name,
            contact_person=command.contact_person,
            email=command.email,
            phone=command.phone,
            address=command.address,
            active=command.active,
            verified=command.verified,
        )
        current_domain.repository_for(Supplier).add(supplier)
        return str(supplier.id)
