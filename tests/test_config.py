"""Tests for settings and logging helpers"""
from storefront.config import Settings, get_settings, reload_settings
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging


def test_default_settings(monkeypatch):
    """Test defaults when nothing is set"""
    for key in (
        "STOREFRONT_CURRENCY_SYMBOL",
        "STOREFRONT_STOCK_SENTINEL",
        "STOREFRONT_LOW_STOCK_THRESHOLD",
        "STOREFRONT_MIN_SEARCH_LENGTH",
        "STOREFRONT_PLACEHOLDER_IMAGE",
        "STOREFRONT_ENV",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)

    assert reload_settings() == Settings()


def test_settings_from_env(monkeypatch):
    """Test environment overrides"""
    monkeypatch.setenv("STOREFRONT_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("STOREFRONT_LOW_STOCK_THRESHOLD", "3")

    settings = reload_settings()

    assert settings.currency_symbol == "$"
    assert settings.low_stock_threshold == 3


def test_invalid_int_falls_back(monkeypatch):
    """Test bad integers keep the default"""
    monkeypatch.setenv("STOREFRONT_STOCK_SENTINEL", "lots")

    assert reload_settings().stock_sentinel == 999


def test_settings_cached():
    """Test settings singleton"""
    assert get_settings() is get_settings()


def test_get_logger_cached():
    """Test logger cache"""
    assert get_logger("storefront.test") is get_logger("storefront.test")


def test_sanitize_id():
    """Test ID truncation and escaping"""
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("abc\ndef-123456") == "abc\\ndef"


def test_sanitize_string():
    """Test string truncation"""
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
    assert sanitize_string_for_logging("short") == "short"


def test_logging_settings_from_env(monkeypatch):
    """Test log level and environment are read through settings"""
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("STOREFRONT_ENV", "Production")

    settings = reload_settings()

    assert settings.log_level == "WARNING"
    assert settings.is_production is True
    assert Settings().is_production is False
