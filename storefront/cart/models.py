"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple

from storefront.services.money import multiply, round_money, to_decimal


@dataclass
class CartLine:
    """Single line in the cart: a product snapshot plus quantity."""
    product_id: str
    product_name: str
    category: str
    unit_price: Decimal  # Frozen at add time
    quantity: int
    original_price: Optional[Decimal] = None
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.unit_price = to_decimal(self.unit_price)
        if self.original_price is not None:
            self.original_price = to_decimal(self.original_price)

    @property
    def total_price(self) -> Decimal:
        """Line total at full precision."""
        return multiply(self.unit_price, self.quantity)

    def copy(self) -> "CartLine":
        return CartLine(
            product_id=self.product_id,
            product_name=self.product_name,
            category=self.category,
            unit_price=self.unit_price,
            quantity=self.quantity,
            original_price=self.original_price,
            added_at=self.added_at,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for display layers."""
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "category": self.category,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "original_price": str(self.original_price) if self.original_price is not None else None,
            "total_price": str(round_money(self.total_price)),
            "added_at": self.added_at,
        }


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable view of the cart at one moment."""
    lines: Tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> Decimal:
        """Sum of frozen unit price x quantity, not rounded."""
        return sum((line.total_price for line in self.lines), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        return {
            "items": [line.to_dict() for line in self.lines],
            "total_items": self.total_items,
            "total_price": str(round_money(self.total_price)),
        }
