"""
Price Resolution

Collapses the catalog's overlapping discount fields (discountPrice,
effectivePrice, isOnDiscount) into a single Discount variant, and derives the
unit price / strike-through price pair from it.

Priority is fixed:
1. ManualDiscount: discount_price strictly between 0 and base_price
2. PromotionalDiscount: is_on_discount set (effective_price, else base_price;
   a negative or malformed effective_price counts as absent)
3. NoDiscount: base_price
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from storefront.config import get_settings
from storefront.services.models import Product
from storefront.services.money import percent_off, subtract


@dataclass(frozen=True)
class NoDiscount:
    """Product sells at its base price."""


@dataclass(frozen=True)
class ManualDiscount:
    """Price set by hand in the catalog, wins over promotions."""
    price: Decimal


@dataclass(frozen=True)
class PromotionalDiscount:
    """Time-bound promotion computed by the catalog source."""
    price: Decimal


Discount = Union[NoDiscount, ManualDiscount, PromotionalDiscount]


@dataclass(frozen=True)
class PriceResolution:
    """Resolved display price for one product."""
    unit_price: Decimal
    original_price: Optional[Decimal]
    discount: Discount

    @property
    def is_on_sale(self) -> bool:
        return self.original_price is not None and self.original_price > self.unit_price

    @property
    def discount_percent(self) -> int:
        """Whole percent off the original price, 0 when not on sale."""
        if not self.is_on_sale:
            return 0
        return percent_off(self.original_price, self.unit_price)

    @property
    def savings(self) -> Decimal:
        """Amount saved per unit, 0 when not on sale."""
        if not self.is_on_sale:
            return Decimal("0")
        return subtract(self.original_price, self.unit_price)


class StockStatus(str, Enum):
    """Stock badge shown on product cards."""
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"


def resolve_discount(product: Product) -> Discount:
    """Pick the single discount source that applies to a product."""
    manual = product.discount_price
    if manual is not None and Decimal("0") < manual < product.base_price:
        return ManualDiscount(price=manual)
    if product.is_on_discount:
        promo = product.effective_price
        if promo is None or promo < 0:
            promo = product.base_price
        return PromotionalDiscount(price=promo)
    return NoDiscount()


def resolve_price(product: Product) -> PriceResolution:
    """
    Resolve unit price and strike-through price.

    Pure function of the product record: the result is recomputed on every
    call so a catalog change is always reflected here (carts freeze their own copy).
    """
    discount = resolve_discount(product)
    if isinstance(discount, NoDiscount):
        return PriceResolution(unit_price=product.base_price, original_price=None, discount=discount)
    return PriceResolution(
        unit_price=discount.price,
        original_price=product.base_price,
        discount=discount,
    )


def is_purchasable(product: Product) -> bool:
    """Only an explicit available=False blocks purchase."""
    return product.available is not False


def projected_stock(product: Product) -> int:
    """Informational stock: 0 when unavailable, otherwise the placeholder sentinel."""
    if not is_purchasable(product):
        return 0
    return get_settings().stock_sentinel


def stock_status(in_stock: bool, stock: int) -> StockStatus:
    if not in_stock or stock == 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= get_settings().low_stock_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def stock_label(in_stock: bool, stock: int) -> str:
    """Human-readable stock badge text."""
    status = stock_status(in_stock, stock)
    if status is StockStatus.OUT_OF_STOCK:
        return "Out of Stock"
    if status is StockStatus.LOW_STOCK:
        return f"Low Stock: {stock}"
    return f"In-Stock: {stock}"
