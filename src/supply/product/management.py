"""Product maintenance: update and deletion commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from supply.domain import supply
from supply.product.creation import ensure_supplier_exists
from supply.product.product import Product


@supply.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    img_name: String(max_length=255)
    sku: String(required=True, max_length=50)
    unit: String(max_length=50)
    supplier_id: Identifier(required=True)


@supply.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@supply.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        ensure_supplier_exists(command.supplier_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            img_name=command.img_name,
            sku=command.sku,
            unit=command.unit,
            supplier_id=command.supplier_id,
        )
        repo.add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
