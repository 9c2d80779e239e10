"""In-memory cart store."""
from decimal import Decimal
from threading import RLock
from typing import List, Optional, Tuple

from storefront.catalog.pricing import is_purchasable, resolve_price
from storefront.errors import (
    ERROR_INVALID_QUANTITY,
    ERROR_LINE_NOT_FOUND,
    ERROR_PRODUCT_NOT_PURCHASABLE,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Product

from .models import CartLine, CartSnapshot

logger = get_logger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class CartStore:
    """
    Owns the shopper's cart lines for one session.

    Features:
    - One line per product id, insertion order preserved
    - Unit price frozen when the line is created
    - Misuse (bad quantity, unavailable product, unknown id) is a silent no-op

    Each public operation runs under one lock, so add/update/remove never
    interleave even if callers share the store across threads.
    """

    def __init__(self):
        self._lines: List[CartLine] = []
        self._lock = RLock()

    def _find(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.product_id == product_id), None)

    # Mutations

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        """Add units of a product, merging into an existing line."""
        if not _is_positive_int(quantity):
            logger.debug(f"{ERROR_INVALID_QUANTITY}: {sanitize_id_for_logging(product.id)} x {quantity!r}")
            return
        if not is_purchasable(product):
            logger.debug(f"{ERROR_PRODUCT_NOT_PURCHASABLE}: {sanitize_id_for_logging(product.id)}")
            return

        with self._lock:
            existing = self._find(product.id)
            if existing:
                # No cap: stock is a display placeholder, capping belongs to the caller
                existing.quantity += quantity
                return

            resolution = resolve_price(product)
            self._lines.append(
                CartLine(
                    product_id=product.id,
                    product_name=product.name,
                    category=product.category,
                    unit_price=resolution.unit_price,
                    quantity=quantity,
                    original_price=resolution.original_price,
                )
            )
            logger.debug(f"Cart line added: {sanitize_id_for_logging(product.id)} x {quantity}")

    def remove_from_cart(self, product_id: str) -> None:
        """Drop the line for product_id if present."""
        with self._lock:
            remaining = [line for line in self._lines if line.product_id != product_id]
            if len(remaining) == len(self._lines):
                logger.debug(f"{ERROR_LINE_NOT_FOUND}: {sanitize_id_for_logging(product_id)}")
                return
            self._lines = remaining

    def update_quantity(self, product_id: str, new_quantity: int) -> None:
        """Set a line's quantity exactly; zero or less removes it."""
        with self._lock:
            if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
                logger.debug(f"{ERROR_INVALID_QUANTITY}: {sanitize_id_for_logging(product_id)} x {new_quantity!r}")
                return
            if new_quantity <= 0:
                self.remove_from_cart(product_id)
                return

            line = self._find(product_id)
            if line is None:
                logger.debug(f"{ERROR_LINE_NOT_FOUND}: {sanitize_id_for_logging(product_id)}")
                return
            line.quantity = new_quantity

    def clear_cart(self) -> None:
        """Empty the cart. Safe to call repeatedly."""
        with self._lock:
            self._lines = []

    # Reads

    def get_total_items(self) -> int:
        """Total number of units in cart."""
        with self._lock:
            return sum(line.quantity for line in self._lines)

    def get_total_price(self) -> Decimal:
        """Sum of frozen unit price x quantity at full precision."""
        with self._lock:
            return sum((line.total_price for line in self._lines), Decimal("0"))

    def get_lines(self) -> Tuple[CartLine, ...]:
        """Copies of the current lines in insertion order."""
        with self._lock:
            return tuple(line.copy() for line in self._lines)

    def get_line(self, product_id: str) -> Optional[CartLine]:
        with self._lock:
            line = self._find(product_id)
            return line.copy() if line else None

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(lines=self.get_lines())

    @property
    def line_count(self) -> int:
        with self._lock:
            return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return self.line_count == 0

    def __len__(self) -> int:
        return self.line_count

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return self._find(product_id) is not None

    # Storefront client names
    addToCart = add_to_cart
    removeFromCart = remove_from_cart
    updateQuantity = update_quantity
    clearCart = clear_cart
    getTotalItems = get_total_items
    getTotalPrice = get_total_price
