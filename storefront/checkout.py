"""
Storefront Session

Controller the presentation layer drives: owns the browse mode (category vs
search), the current view (products -> cart -> checkout), and the cart store.
Produces the checkout summary from a cart snapshot.
"""
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from storefront.cart import CartLine, CartStore
from storefront.catalog import (
    ALL_CATEGORIES,
    BrowseMode,
    ByCategory,
    BySearch,
    CatalogService,
    ProductView,
)
from storefront.config import get_settings
from storefront.errors import ERROR_CART_EMPTY, ERROR_SEARCH_TOO_SHORT
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.services.money import format_money

logger = get_logger(__name__)


class View(str, Enum):
    """Top-level storefront views."""
    PRODUCTS = "products"
    CART = "cart"
    CHECKOUT = "checkout"


@dataclass(frozen=True)
class CheckoutSummary:
    """Final item list and total handed to the checkout form."""
    lines: Tuple[CartLine, ...]
    total_items: int
    total_price: Decimal

    @property
    def formatted_total(self) -> str:
        return format_money(self.total_price)

    def to_dict(self) -> dict:
        return {
            "items": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "total_price": str(self.total_price),
            "formatted_total": self.formatted_total,
        }


def build_checkout_summary(cart: CartStore) -> CheckoutSummary:
    snapshot = cart.snapshot()
    return CheckoutSummary(
        lines=snapshot.lines,
        total_items=snapshot.total_items,
        total_price=snapshot.total_price,
    )


def _title_case_category(category_id: str) -> str:
    # "hot-drinks" -> "Hot Drinks"; only the first hyphen becomes a space
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), category_id.replace("-", " ", 1), flags=re.ASCII)


class StorefrontSession:
    """
    One shopper's session.

    Browse rules:
    - selecting a category clears the search
    - a non-empty search resets the category to "all"
    - an empty search clears the search and keeps the current category
    """

    def __init__(self, catalog: CatalogService, cart: Optional[CartStore] = None):
        self.catalog = catalog
        self.cart = cart if cart is not None else CartStore()
        self.mode: BrowseMode = ByCategory(ALL_CATEGORIES)
        self.view: View = View.PRODUCTS

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "StorefrontSession":
        return cls(CatalogService(records))

    # Browse

    @property
    def selected_category(self) -> str:
        return self.mode.selector()

    @property
    def search_query(self) -> str:
        return self.mode.query()

    def select_category(self, category_id: str) -> None:
        """Browse a category; any active search is dropped."""
        self.mode = ByCategory(category_id)

    def search(self, query: str) -> bool:
        """
        Submit a search query.

        Returns:
            False when the query was too short to submit (state unchanged)
        """
        if not query:
            self.mode = ByCategory(self.selected_category)
            return True

        min_length = get_settings().min_search_length
        if len(query) < min_length:
            logger.debug(f"{ERROR_SEARCH_TOO_SHORT}: {sanitize_string_for_logging(query)}")
            return False

        self.mode = BySearch(query)
        return True

    def products(self) -> List[ProductView]:
        """Product cards for the current browse mode."""
        return self.catalog.browse(self.mode)

    def results_heading(self) -> str:
        if self.search_query:
            return f'Search Results for "{self.search_query}"'
        if self.selected_category == ALL_CATEGORIES:
            return "All Products"
        return _title_case_category(self.selected_category)

    def results_count_label(self) -> str:
        count = len(self.catalog.filter(self.mode))
        return f"{count} product{'' if count == 1 else 's'} found"

    # Cart actions by product id

    def add_to_cart(self, product_id: str, quantity: int = 1) -> None:
        """Add a catalog product by id; unknown ids are ignored."""
        product = self.catalog.get_by_id(product_id)
        if product is None:
            logger.debug(f"Add ignored, unknown product {sanitize_id_for_logging(product_id)}")
            return
        self.cart.add_to_cart(product, quantity)

    # Views

    @property
    def can_checkout(self) -> bool:
        return not self.cart.is_empty

    def go_to(self, view: View) -> bool:
        """
        Switch views.

        Returns:
            False when checkout was requested with an empty cart
        """
        view = View(view)
        if view is View.CHECKOUT and not self.can_checkout:
            logger.info(f"Checkout refused: {ERROR_CART_EMPTY}")
            return False
        self.view = view
        return True

    def checkout_summary(self) -> CheckoutSummary:
        return build_checkout_summary(self.cart)
