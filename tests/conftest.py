"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("STOREFRONT_CURRENCY_SYMBOL", "P")

from storefront.cart import CartStore
from storefront.catalog import CatalogService
from storefront.config import reload_settings
from storefront.services.models import Product


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings so monkeypatched env vars take effect per test."""
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def sample_records():
    """Raw catalog records in the catalog source's camelCase shape"""
    return [
        {
            "id": "tea-red",
            "name": "Red Tea",
            "description": "Loose leaf rooibos",
            "category": "tea",
            "basePrice": 120.0,
            "popular": True,
        },
        {
            "id": "soda-green",
            "name": "Green Soda",
            "description": "Lime flavoured sparkling drink",
            "category": "beverages",
            "basePrice": 45.0,
            "discountPrice": 40.0,
        },
        {
            "id": "tea-jasmine",
            "name": "Jasmine Tea",
            "description": "Green tea scented with jasmine",
            "category": "tea",
            "basePrice": 150.0,
            "isOnDiscount": True,
            "effectivePrice": 99.0,
        },
        {
            "id": "cake-ube",
            "name": "Ube Cake",
            "description": "Purple yam chiffon",
            "category": "hot-desserts",
            "basePrice": 300.0,
            "available": False,
        },
    ]


@pytest.fixture
def sample_products(sample_records):
    """Validated Product models"""
    return [Product.model_validate(record) for record in sample_records]


@pytest.fixture
def sample_product():
    """Single purchasable product"""
    return Product(id="product-123", name="Barako Coffee", category="coffee", base_price=100)


@pytest.fixture
def catalog(sample_records):
    return CatalogService(sample_records)


@pytest.fixture
def cart():
    return CartStore()
