"""
Logging for the storefront core.

The cart and catalog never raise on misuse; they log what they ignored at
debug level instead. Product ids and search text come from the shopper, so
they are passed through the sanitizers here before reaching a log line.

    from storefront.logging import get_logger, sanitize_id_for_logging
    logger = get_logger(__name__)
    logger.debug(f"Line not found: {sanitize_id_for_logging(product_id)}")
"""

import logging
import sys
from functools import cache

from storefront.config import get_settings

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Control characters a shopper could use to forge extra log records
_UNSAFE_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def _install_handler() -> None:
    """Attach one stdout handler to the root logger unless the host app already did."""
    root = logging.getLogger()
    if root.handlers:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(COMPACT_FORMAT if settings.is_production else DETAILED_FORMAT))

    root.setLevel(level)
    root.addHandler(handler)


_install_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    """Module logger, one instance per name."""
    return logging.getLogger(name)


def _clean(value) -> str:
    return str(value).translate(_UNSAFE_CHARS)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Product id cut to 8 characters, or "N/A" when missing."""
    if not id_value:
        return "N/A"
    return _clean(id_value)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Search text or names cut to max_length with a trailing "...", or "N/A"."""
    if not value:
        return "N/A"
    cleaned = _clean(value)
    if len(cleaned) <= max_length:
        return cleaned
    return cleaned[:max_length] + "..."


__all__ = [
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
