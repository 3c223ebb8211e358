import pytest
from storefront.models import CatalogProduct


def make_product(product_id, name, price, sku=None):
    return CatalogProduct(
        product_id=product_id,
        name=name,
        price=price,
        img_name=f"{name.lower().replace(' ', '-')}.png",
        sku=sku or f"SKU-{product_id}",
        supplier_id="supplier-1",
    )


@pytest.fixture()
def smart_feeder():
    return make_product("1", "SmartFeeder One", 249.99, sku="SF-001")


@pytest.fixture()
def purr_collar():
    return make_product("2", "CatPurrCollar", 129.99, sku="CPC-001")


@pytest.fixture()
def litter_box():
    return make_product("3", "SmartLitterBox", 299.99, sku="SLB-001")
