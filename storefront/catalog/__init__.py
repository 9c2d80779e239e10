"""Catalog package: filtering, price resolution, and display projection."""
from .filters import (
    ALL_CATEGORIES,
    BrowseMode,
    ByCategory,
    BySearch,
    filter_by_mode,
    filter_products,
)
from .pricing import (
    Discount,
    ManualDiscount,
    NoDiscount,
    PriceResolution,
    PromotionalDiscount,
    StockStatus,
    is_purchasable,
    projected_stock,
    resolve_discount,
    resolve_price,
)
from .projection import ProductView, clamp_quantity, format_price, project_product, project_products
from .service import CatalogService, load_products

__all__ = [
    "ALL_CATEGORIES",
    "BrowseMode",
    "ByCategory",
    "BySearch",
    "filter_by_mode",
    "filter_products",
    "Discount",
    "ManualDiscount",
    "NoDiscount",
    "PriceResolution",
    "PromotionalDiscount",
    "StockStatus",
    "is_purchasable",
    "projected_stock",
    "resolve_discount",
    "resolve_price",
    "ProductView",
    "clamp_quantity",
    "format_price",
    "project_product",
    "project_products",
    "CatalogService",
    "load_products",
]
