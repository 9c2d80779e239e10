# Services Module
from .models import Product
from .money import format_money, round_money, to_decimal

__all__ = ["Product", "format_money", "round_money", "to_decimal"]
