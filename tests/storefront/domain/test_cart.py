"""Tests for cart operations and totals."""

import pytest
from storefront.cart import Cart, format_price
from storefront.models import CatalogProduct
from storefront.storage import InMemoryCartStorage


@pytest.fixture()
def cart():
    return Cart()


class TestAddToCart:
    def test_new_cart_is_empty(self, cart):
        assert cart.is_empty
        assert len(cart) == 0
        assert cart.item_count == 0
        assert cart.get_total_price() == 0

    def test_add_creates_line(self, cart, smart_feeder):
        item = cart.add_to_cart(smart_feeder)

        assert item.product_id == "1"
        assert item.name == "SmartFeeder One"
        assert item.price == 249.99
        assert item.sku == "SF-001"
        assert item.img_name == "smartfeeder-one.png"
        assert item.quantity == 1
        assert "1" in cart

    def test_add_existing_product_merges_quantity(self, cart, smart_feeder):
        cart.add_to_cart(smart_feeder, 2)
        cart.add_to_cart(smart_feeder, 1)

        assert len(cart) == 1
        assert cart.get("1").quantity == 3

    def test_lines_keep_insertion_order(self, cart, smart_feeder, purr_collar, litter_box):
        cart.add_to_cart(litter_box)
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)
        cart.add_to_cart(litter_box)

        assert [item.product_id for item in cart] == ["3", "1", "2"]

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_rejected(self, cart, smart_feeder, quantity):
        with pytest.raises(ValueError):
            cart.add_to_cart(smart_feeder, quantity)

        assert cart.is_empty


class TestUpdateQuantity:
    def test_sets_absolute_quantity(self, cart, smart_feeder):
        cart.add_to_cart(smart_feeder, 2)

        cart.update_quantity("1", 5)

        assert cart.get("1").quantity == 5

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_removes_line(self, cart, smart_feeder, purr_collar, quantity):
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)

        cart.update_quantity("1", quantity)

        assert "1" not in cart
        assert [item.product_id for item in cart] == ["2"]

    def test_unknown_product_is_ignored(self, cart, smart_feeder):
        cart.add_to_cart(smart_feeder)

        cart.update_quantity("999", 4)

        assert len(cart) == 1
        assert "999" not in cart


class TestRemoveAndClear:
    def test_remove_line(self, cart, smart_feeder, purr_collar):
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)

        cart.remove_from_cart("1")

        assert [item.product_id for item in cart] == ["2"]

    def test_remove_unknown_line_is_noop(self, cart, smart_feeder):
        cart.add_to_cart(smart_feeder)
        cart.remove_from_cart("999")
        assert len(cart) == 1

    def test_clear(self, cart, smart_feeder, purr_collar):
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)

        cart.clear_cart()

        assert cart.is_empty
        assert cart.get_total_price() == 0


class TestTotals:
    def test_total_of_two_lines(self, cart, smart_feeder):
        cat_bed = CatalogProduct(product_id="4", name="Cozy Cat Bed", price=44.99, sku="CCB-001")
        cart.add_to_cart(smart_feeder, 2)
        cart.add_to_cart(cat_bed, 3)

        assert cart.get_total_price() == pytest.approx(634.95)
        assert cart.formatted_total() == "$634.95"

    def test_total_is_sum_of_line_totals(self, cart, smart_feeder, purr_collar, litter_box):
        cart.add_to_cart(smart_feeder, 2)
        cart.add_to_cart(purr_collar, 3)
        cart.add_to_cart(litter_box)

        assert cart.item_count == 6
        assert cart.get_total_price() == pytest.approx(1189.94)
        assert cart.formatted_total() == "$1,189.94"

    def test_total_does_not_depend_on_insertion_order(self, smart_feeder, purr_collar, litter_box):
        forward = Cart()
        backward = Cart()
        for product, quantity in ((smart_feeder, 2), (purr_collar, 3), (litter_box, 1)):
            forward.add_to_cart(product, quantity)
        for product, quantity in ((litter_box, 1), (purr_collar, 3), (smart_feeder, 2)):
            backward.add_to_cart(product, quantity)

        assert forward.get_total_price() == backward.get_total_price()

    def test_total_follows_quantity_changes(self, cart, smart_feeder, purr_collar):
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)

        cart.update_quantity("2", 2)

        assert cart.get_total_price() == pytest.approx(509.97)

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(0, "$0.00"), (4.5, "$4.50"), (249.99, "$249.99"), (1189.94, "$1,189.94"), (1234567.891, "$1,234,567.89")],
    )
    def test_format_price(self, amount, expected):
        assert format_price(amount) == expected


class TestPersistence:
    def test_cart_is_rebuilt_from_storage(self, smart_feeder, purr_collar):
        storage = InMemoryCartStorage()
        cart = Cart(storage)
        cart.add_to_cart(purr_collar, 2)
        cart.add_to_cart(smart_feeder)

        reloaded = Cart(storage)

        assert [(item.product_id, item.quantity) for item in reloaded] == [("2", 2), ("1", 1)]
        assert reloaded.get_total_price() == cart.get_total_price()

    def test_every_mutation_is_saved(self, smart_feeder, purr_collar):
        storage = InMemoryCartStorage()
        cart = Cart(storage)
        cart.add_to_cart(smart_feeder)
        cart.add_to_cart(purr_collar)
        cart.update_quantity("1", 4)
        cart.remove_from_cart("2")

        assert [(item.product_id, item.quantity) for item in Cart(storage)] == [("1", 4)]

    def test_clear_empties_storage(self, smart_feeder):
        storage = InMemoryCartStorage()
        cart = Cart(storage)
        cart.add_to_cart(smart_feeder)

        cart.clear_cart()

        assert storage.load() == []
        assert Cart(storage).is_empty

    def test_loaded_items_are_independent_copies(self, smart_feeder):
        storage = InMemoryCartStorage()
        cart = Cart(storage)
        cart.add_to_cart(smart_feeder)

        storage.load()[0].quantity = 99

        assert Cart(storage).get("1").quantity == 1
