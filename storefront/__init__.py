"""
Storefront Core Module

This package contains the logic-bearing parts of the storefront client:
- catalog: product filtering, price resolution, display projection
- cart: in-memory cart store with frozen line prices
- checkout: browse/view session controller and checkout summary
- services: product model and Decimal money helpers

Note: Imports are lazy so importing a submodule does not pull in the rest.
"""

__version__ = "1.0.0"

__all__ = [
    "CartStore",
    "CatalogService",
    "Product",
    "StorefrontSession",
    "filter_products",
    "resolve_price",
]


def __getattr__(name):
    """Lazy attribute access for the public API."""
    if name == "CartStore":
        from storefront.cart import CartStore
        return CartStore
    elif name == "CatalogService":
        from storefront.catalog import CatalogService
        return CatalogService
    elif name == "Product":
        from storefront.services.models import Product
        return Product
    elif name == "StorefrontSession":
        from storefront.checkout import StorefrontSession
        return StorefrontSession
    elif name == "filter_products":
        from storefront.catalog import filter_products
        return filter_products
    elif name == "resolve_price":
        from storefront.catalog import resolve_price
        return resolve_price
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
