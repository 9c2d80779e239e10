"""Display projection of catalog products for product cards and quick view."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from storefront.catalog.pricing import (
    StockStatus,
    is_purchasable,
    projected_stock,
    resolve_price,
    stock_label,
    stock_status,
)
from storefront.config import get_settings
from storefront.services.models import Product
from storefront.services.money import format_money


@dataclass(frozen=True)
class ProductView:
    """Display-ready product card."""

    id: str
    name: str
    description: str
    category: str
    image_url: str
    price: Decimal
    original_price: Optional[Decimal]
    discount_percent: int
    savings: Decimal
    stock: int
    is_in_stock: bool
    is_popular: bool
    stock_status: StockStatus
    stock_label: str

    @property
    def has_discount(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    @property
    def can_add_to_cart(self) -> bool:
        return self.is_in_stock and self.stock > 0


def project_product(product: Product) -> ProductView:
    """Build the card for one product."""
    resolution = resolve_price(product)
    in_stock = is_purchasable(product)
    stock = projected_stock(product)

    return ProductView(
        id=product.id,
        name=product.name,
        description=product.description,
        category=product.category,
        image_url=product.image or get_settings().placeholder_image,
        price=resolution.unit_price,
        original_price=resolution.original_price,
        discount_percent=resolution.discount_percent,
        savings=resolution.savings,
        stock=stock,
        is_in_stock=in_stock,
        is_popular=product.popular is True,
        stock_status=stock_status(in_stock, stock),
        stock_label=stock_label(in_stock, stock),
    )


def project_products(products: Iterable[Product]) -> List[ProductView]:
    """Project a filtered list, keeping its order."""
    return [project_product(product) for product in products]


def format_price(value) -> str:
    """Price as shown on cards, e.g. "P120.00"."""
    return format_money(value)


def clamp_quantity(view: ProductView, requested: int) -> int:
    """
    Quantity stepper bound for quick view: [1, stock], or 0 when out of stock.

    The cart never caps quantities itself; this is the presentation-side cap.
    """
    if not view.can_add_to_cart:
        return 0
    return max(1, min(requested, view.stock))
