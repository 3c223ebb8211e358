"""Supplier aggregate root."""

from enum import Enum

from protean.fields import Boolean, String, Text

from supply.domain import supply


class SupplierStatus(Enum):
    """Approval states reported by the supplier status endpoint."""

    APPROVED = "APPROVED"
    PENDING = "PENDING"


@supply.aggregate
class Supplier:
    """A vendor whose products are listed in the catalog.

    Suppliers are maintained as whole documents: every update replaces all
    mutable fields, and the generated identifier never changes.
    """

    name: String(required=True, max_length=255)
    contact_person: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    phone: String(required=True, max_length=50)
    address: Text()
    active: Boolean(default=False)
    verified: Boolean(default=False)

    @classmethod
    def register(cls, name, contact_person, email, phone, address=None, active=False, verified=False):
        return cls(
            name=name,
            contact_person=contact_person,
            email=email,
            phone=phone,
            address=address,
            active=bool(active),
            verified=bool(verified),
        )

    def update_details(self, name, contact_person, email, phone, address=None, active=False, verified=False):
        """Replace all mutable fields with the supplied document."""
        self.name = name
        self.contact_person = contact_person
        self.email = email
        self.phone = phone
        self.address = address
        self.active = bool(active)
        self.verified = bool(verified)

    def approval_status(self) -> SupplierStatus:
        # Approval depends on `active` alone; `verified` is informational only.
        if self.active:
            return SupplierStatus.APPROVED
        return SupplierStatus.PENDING
