import pytest


@pytest.fixture(autouse=True)
def run_around_tests(supply_context):
    yield


@pytest.fixture()
def supplier_payload():
    return {
        "name": "Premium Cat Supplies Co",
        "contactPerson": "Jane Smith",
        "email": "jane@premiumcat.com",
        "phone": "555-0200",
        "active": True,
        "verified": True,
    }


@pytest.fixture()
def product_payload():
    """Product body without ``supplierId``; tests add the supplier they created."""
    return {
        "name": "Cat Food Premium",
        "description": "High quality cat food",
        "price": 29.99,
        "imgName": "catfood.png",
        "sku": "CF-001",
        "unit": "bag",
    }
