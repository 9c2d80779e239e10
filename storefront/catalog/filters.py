"""
Catalog Filter

Pure functions deriving the displayed product list from a category selector
and a free-text query. No state lives here: the browse controller owns the
BrowseMode and decides when one filter resets the other.
"""
from dataclasses import dataclass
from typing import Iterable, List, Union

from storefront.services.models import Product

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class ByCategory:
    """Browsing a category ("all" means the whole catalog)."""
    category_id: str = ALL_CATEGORIES

    def selector(self) -> str:
        return self.category_id

    def query(self) -> str:
        return ""


@dataclass(frozen=True)
class BySearch:
    """Free-text search across the whole catalog."""
    text: str

    def selector(self) -> str:
        return ALL_CATEGORIES

    def query(self) -> str:
        return self.text


BrowseMode = Union[ByCategory, BySearch]


def matches_category(product: Product, category_selector: str) -> bool:
    """Exact, case-sensitive category match; "all" matches everything."""
    return category_selector == ALL_CATEGORIES or product.category == category_selector


def matches_query(product: Product, search_query: str) -> bool:
    """Case-insensitive substring match on name, description or category."""
    if not search_query:
        return True
    needle = search_query.lower()
    return (
        needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.category.lower()
    )


def filter_products(
    products: Iterable[Product],
    category_selector: str = ALL_CATEGORIES,
    search_query: str = "",
) -> List[Product]:
    """
    Filter products by category and search query.

    Both filters must pass (intersection). Input order is preserved and the
    same product objects are returned.

    Args:
        products: Full catalog
        category_selector: Category id or "all"
        search_query: Free text, empty for no search

    Returns:
        Products passing both filters
    """
    return [
        product
        for product in products
        if matches_category(product, category_selector) and matches_query(product, search_query)
    ]


def filter_by_mode(products: Iterable[Product], mode: BrowseMode) -> List[Product]:
    """Filter products for an already-resolved browse mode."""
    return filter_products(products, mode.selector(), mode.query())
