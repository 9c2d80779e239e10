"""Cart package: line models and the in-memory store."""
from .models import CartLine, CartSnapshot
from .service import CartStore

__all__ = [
    "CartLine",
    "CartSnapshot",
    "CartStore",
]
