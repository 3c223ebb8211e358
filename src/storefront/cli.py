"""Storefront command line.

Browse the catalog and manage a cart kept in a local JSON file.

Usage:
    storefront products
    storefront add PRODUCT_ID --quantity 2
    storefront increase PRODUCT_ID
    storefront show
    storefront clear

STOREFRONT_API_URL and STOREFRONT_CART_FILE override the API address and
cart location; ``--api-url`` and ``--cart-file`` override both.
"""

import argparse
import os
import sys

from storefront.cart import Cart, format_price
from storefront.client import DEFAULT_API_URL, CatalogClient, CatalogError
from storefront.storage import CartStorageError, JsonFileCartStorage
from storefront.utils.logging import configure_logging

DEFAULT_CART_FILE = "~/.storefront/cart.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="OctoCAT storefront")
    parser.add_argument(
        "--api-url",
        default=os.getenv("STOREFRONT_API_URL", DEFAULT_API_URL),
        help="Base URL of the supply API (default: %(default)s)",
    )
    parser.add_argument(
        "--cart-file",
        default=os.getenv("STOREFRONT_CART_FILE", DEFAULT_CART_FILE),
        help="Where the cart is stored (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("products", help="List the catalog")
    subparsers.add_parser("show", help="Show the cart")
    subparsers.add_parser("clear", help="Empty the cart")

    add_parser = subparsers.add_parser("add", help="Add a product to the cart")
    add_parser.add_argument("product_id")
    add_parser.add_argument("--quantity", "-q", type=int, default=1)

    update_parser = subparsers.add_parser("update", help="Set the quantity of a cart line (0 removes it)")
    update_parser.add_argument("product_id")
    update_parser.add_argument("quantity", type=int)

    for name, help_text in (("increase", "Add one unit to a cart line"), ("decrease", "Remove one unit from a cart line")):
        step_parser = subparsers.add_parser(name, help=help_text)
        step_parser.add_argument("product_id")

    remove_parser = subparsers.add_parser("remove", help="Remove a product from the cart")
    remove_parser.add_argument("product_id")

    return parser


def print_products(client: CatalogClient) -> None:
    products = client.list_products()
    if not products:
        print("No products available.")
        return
    for product in products:
        print(f"{product.product_id}  {product.name}  {format_price(product.price)}  SKU: {product.sku}")


def print_cart(cart: Cart) -> None:
    if cart.is_empty:
        print("Your cart is empty")
        return
    for item in cart:
        print(
            f"{item.name}  SKU: {item.sku}  {format_price(item.price)} x {item.quantity}"
            f"  = {format_price(item.line_total)}"
        )
    print(f"Items: {cart.item_count}")
    print(f"Total: {cart.formatted_total()}")


def run(args, cart: Cart, client: CatalogClient) -> None:
    if args.command == "products":
        print_products(client)
        return

    if args.command == "add":
        product = client.get_product(args.product_id)
        cart.add_to_cart(product, args.quantity)
    elif args.command == "update":
        cart.update_quantity(args.product_id, args.quantity)
    elif args.command in ("increase", "decrease"):
        item = cart.get(args.product_id)
        if item is not None:
            step = 1 if args.command == "increase" else -1
            cart.update_quantity(args.product_id, item.quantity + step)
    elif args.command == "remove":
        cart.remove_from_cart(args.product_id)
    elif args.command == "clear":
        cart.clear_cart()

    print_cart(cart)


def main(argv=None, http_client=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        cart = Cart(JsonFileCartStorage(args.cart_file))
        with CatalogClient(base_url=args.api_url, http_client=http_client) as client:
            run(args, cart, client)
    except (CatalogError, CartStorageError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
