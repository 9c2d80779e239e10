"""Catalog Models - Pydantic models for product records."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.services.money import parse_decimal as _parse_decimal


class Product(BaseModel):
    """
    Product record as delivered by the catalog source.

    Accepts the catalog's camelCase keys (basePrice, discountPrice, ...) as well
    as the snake_case field names. Read-only to the storefront core.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    description: str = ""
    category: str
    base_price: Decimal = Field(alias="basePrice", ge=0)
    discount_price: Optional[Decimal] = Field(default=None, alias="discountPrice")
    effective_price: Optional[Decimal] = Field(default=None, alias="effectivePrice")
    is_on_discount: bool = Field(default=False, alias="isOnDiscount")
    available: bool = True
    popular: bool = False
    image: Optional[str] = None

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_float_price(cls, v):
        # Anything else goes to pydantic's Decimal parsing, which rejects junk
        return Decimal(str(v)) if isinstance(v, float) else v

    @field_validator("discount_price", "effective_price", mode="before")
    @classmethod
    def convert_optional_price_to_decimal(cls, v):
        # A malformed discount is no discount, not a zero price
        return _parse_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        return v if v is not None else ""

    @field_validator("is_on_discount", "popular", mode="before")
    @classmethod
    def default_flag(cls, v):
        return bool(v) if v is not None else False

    @field_validator("available", mode="before")
    @classmethod
    def default_available(cls, v):
        # Absent or null means purchasable; only an explicit false disables it
        return v is not False
