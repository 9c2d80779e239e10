"""Storefront settings read from the environment."""
import logging
import os
from dataclasses import dataclass
from functools import cache
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200?text=No+Image"


def _get_env(*keys: str, default: Optional[str] = None) -> Optional[str]:
    for key in keys:
        value = os.environ.get(key)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    value = _get_env(*keys)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {keys[0]}: {value!r}, using {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Display, catalog and logging settings."""
    currency_symbol: str = "P"
    # Catalog does not track real stock; purchasable items show this placeholder
    stock_sentinel: int = 999
    low_stock_threshold: int = 10
    min_search_length: int = 2
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE
    log_level: str = "INFO"
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _load_settings() -> Settings:
    return Settings(
        currency_symbol=_get_env("STOREFRONT_CURRENCY_SYMBOL", default="P") or "P",
        stock_sentinel=_get_int("STOREFRONT_STOCK_SENTINEL", default=999),
        low_stock_threshold=_get_int("STOREFRONT_LOW_STOCK_THRESHOLD", default=10),
        min_search_length=_get_int("STOREFRONT_MIN_SEARCH_LENGTH", default=2),
        placeholder_image=_get_env(
            "STOREFRONT_PLACEHOLDER_IMAGE", default=DEFAULT_PLACEHOLDER_IMAGE
        ) or DEFAULT_PLACEHOLDER_IMAGE,
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        environment=(_get_env("STOREFRONT_ENV", default="development") or "development").lower(),
    )


@cache
def get_settings() -> Settings:
    """Get Settings singleton."""
    return _load_settings()


def reload_settings() -> Settings:
    """Drop the cached settings and re-read the environment."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["Settings", "get_settings", "reload_settings"]
