"""
Catalog Service

Holds the product list delivered by the catalog source and answers the
browse queries the storefront needs: lookup by id, category list, filtered
and projected product cards.
"""
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from storefront.catalog.filters import BrowseMode, filter_by_mode
from storefront.catalog.projection import ProductView, project_products
from storefront.errors import ERROR_INVALID_PRODUCT_RECORD
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.models import Product

logger = get_logger(__name__)


def load_products(records: Iterable[Any]) -> List[Product]:
    """
    Validate raw catalog records into Product models.

    Invalid records are skipped with a warning instead of failing the whole
    catalog.
    """
    products: List[Product] = []
    for record in records:
        if isinstance(record, Product):
            products.append(record)
            continue
        try:
            products.append(Product.model_validate(record))
        except ValidationError as e:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.warning(
                f"{ERROR_INVALID_PRODUCT_RECORD} {sanitize_id_for_logging(record_id)}: "
                f"{e.error_count()} error(s)"
            )
    return products


class CatalogService:
    """
    Catalog domain service.

    Provides:
    - Product lookup by id
    - Category listing in catalog order
    - Browse (filter + display projection)
    """

    def __init__(self, products: Optional[Iterable[Any]] = None):
        self._products: List[Product] = load_products(products or [])

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    def replace(self, records: Iterable[Any]) -> None:
        """Swap in a fresh catalog delivery."""
        self._products = load_products(records)
        logger.info(f"Catalog loaded with {len(self._products)} products")

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        seen: List[str] = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return seen

    def filter(self, mode: BrowseMode) -> List[Product]:
        return filter_by_mode(self._products, mode)

    def browse(self, mode: BrowseMode) -> List[ProductView]:
        """Filtered product cards for a browse mode."""
        return project_products(self.filter(mode))
