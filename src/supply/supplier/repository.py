"""Repository for the Supplier aggregate."""

from supply.domain import supply
from supply.supplier.supplier import Supplier


@supply.repository(part_of=Supplier)
class SupplierRepository:
    """The base repository provides ``add`` and ``get`` (which raises
    ``ObjectNotFoundError`` for unknown identifiers).
    """

    def list_all(self) -> list[Supplier]:
        return self._dao.query.limit(None).all().items
