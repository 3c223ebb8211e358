"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from supply.domain import supply
from supply.product.product import Product


@supply.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        return self._dao.query.limit(None).all().items

    def find_by_name(self, name: str) -> Product:
        """Return the first product whose name matches exactly."""
        products = self._dao.query.filter(name=name).all().items
        if not products:
            raise ObjectNotFoundError({"_entity": f"Product with name {name!r} not found"})
        return products[0]

    def list_for_supplier(self, supplier_id: str) -> list[Product]:
        return self._dao.query.filter(supplier_id=supplier_id).limit(None).all().items
