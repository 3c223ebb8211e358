"""Product creation: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from supply.domain import supply
from supply.product.product import Product
from supply.supplier.supplier import Supplier


@supply.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    img_name: String(max_length=255)
    sku: String(required=True, max_length=50)
    unit: String(max_length=50)
    supplier_id: Identifier(required=True)


def ensure_supplier_exists(supplier_id):
    """Referential check standing in for the products-to-suppliers foreign key."""
    try:
        current_domain.repository_for(Supplier).get(supplier_id)
    except ObjectNotFoundError:
        raise ValidationError({"supplier_id": [f"Supplier {supplier_id} does not exist"]}) from None


@supply.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        ensure_supplier_exists(command.supplier_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            img_name=command.img_name,
            sku=command.sku,
            unit=command.unit,
            supplier_id=command.supplier_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
