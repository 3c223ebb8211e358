"""Product aggregate root."""

from protean.fields import Float, Identifier, String, Text

from supply.domain import supply


@supply.aggregate
class Product:
    """A catalog item sold by a single supplier."""

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    img_name: String(max_length=255)
    sku: String(required=True, max_length=50)
    unit: String(max_length=50)
    supplier_id: Identifier(required=True)

    @classmethod
    def create(cls, name, price, sku, supplier_id, description=None, img_name=None, unit=None):
        return cls(
            name=name,
            description=description,
            price=price,
            img_name=img_name,
            sku=sku,
            unit=unit,
            supplier_id=supplier_id,
        )

    def update_details(self, name, price, sku, supplier_id, description=None, img_name=None, unit=None):
        """Replace all mutable fields with the supplied document."""
        self.name = name
        self.description = description
        self.price = price
        self.img_name = img_name
        self.sku = sku
        self.unit = unit
        self.supplier_id = supplier_id
