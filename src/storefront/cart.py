"""Client-held shopping cart.

The cart is an ordered mapping of product id to line item. Every
mutation is written through to a ``CartStorage`` so that a cart rebuilt
over the same storage comes back identical, order included.
"""

import math
from collections.abc import Iterator

from storefront.models import CartItem
from storefront.storage import CartStorage, InMemoryCartStorage
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def format_price(amount: float) -> str:
    """Display form of a money amount, e.g. ``$1,189.94``."""
    return f"${amount:,.2f}"


class Cart:
    def __init__(self, storage: CartStorage | None = None):
        self._storage = storage if storage is not None else InMemoryCartStorage()
        self._items: dict[str, CartItem] = {item.product_id: item for item in self._storage.load()}

    # -------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------
    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def get(self, product_id) -> CartItem | None:
        return self._items.get(str(product_id))

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id) -> bool:
        return str(product_id) in self._items

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self._items.values())

    def get_total_price(self) -> float:
        """Sum of price x quantity over all lines.

        ``math.fsum`` rounds the sum exactly once, so the total does not
        depend on the order in which lines were added.
        """
        return math.fsum(item.line_total for item in self._items.values())

    def formatted_total(self) -> str:
        return format_price(self.get_total_price())

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_to_cart(self, product, quantity: int = 1) -> CartItem:
        """Add ``quantity`` units of ``product``, merging into an existing line."""
        if quantity <= 0:
            raise ValueError(f"Quantity to add must be positive, got {quantity}")

        product_id = str(product.product_id)
        existing = self._items.get(product_id)
        if existing is not None:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                product_id=product_id,
                name=product.name,
                price=product.price,
                img_name=product.img_name,
                sku=product.sku,
                quantity=quantity,
            )
            self._items[product_id] = item

        logger.debug("cart_item_added", product_id=product_id, added=quantity, quantity=item.quantity)
        self._persist()
        return item

    def update_quantity(self, product_id, new_quantity: int) -> None:
        """Set the absolute quantity of a line; zero or less removes it."""
        product_id = str(product_id)
        if new_quantity <= 0:
            self.remove_from_cart(product_id)
            return

        item = self._items.get(product_id)
        if item is None:
            return

        item.quantity = new_quantity
        logger.debug("cart_quantity_updated", product_id=product_id, quantity=new_quantity)
        self._persist()

    def remove_from_cart(self, product_id) -> None:
        if self._items.pop(str(product_id), None) is not None:
            logger.debug("cart_item_removed", product_id=str(product_id))
            self._persist()

    def clear_cart(self) -> None:
        self._items.clear()
        self._storage.clear()
        logger.debug("cart_cleared")

    def _persist(self) -> None:
        self._storage.save(self.items)
