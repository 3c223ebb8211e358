import pytest
from fastapi.testclient import TestClient
from supply.api.app import create_app


@pytest.fixture(autouse=True)
def run_around_tests(supply_context):
    yield


@pytest.fixture()
def api(supply_domain):
    return TestClient(create_app(supply_domain))


@pytest.fixture()
def catalog(api):
    """Seed one supplier with three products; returns product ids by name."""
    supplier = api.post(
        "/suppliers",
        json={
            "name": "OctoCAT Devices",
            "contactPerson": "Jane Smith",
            "email": "jane@octocat.example",
            "phone": "555-0200",
            "active": True,
        },
    ).json()

    product_ids = {}
    for name, price, sku in (
        ("SmartFeeder One", 249.99, "SF-001"),
        ("CatPurrCollar", 129.99, "CPC-001"),
        ("SmartLitterBox", 299.99, "SLB-001"),
    ):
        response = api.post(
            "/products",
            json={"name": name, "price": price, "sku": sku, "unit": "piece", "supplierId": supplier["supplierId"]},
        )
        product_ids[name] = response.json()["productId"]
    return product_ids
