"""
Common Message Constants

Centralized messages for ignored operations and validation warnings.
None of these are raised: cart misuse degrades to a no-op and is only logged.
"""

# Cart messages
ERROR_PRODUCT_NOT_PURCHASABLE = "Product is not purchasable"
ERROR_INVALID_QUANTITY = "Quantity must be a positive integer"
ERROR_LINE_NOT_FOUND = "Cart line not found"

# Catalog messages
ERROR_INVALID_PRODUCT_RECORD = "Invalid product record"
ERROR_SEARCH_TOO_SHORT = "Search query too short"

# Checkout messages
ERROR_CART_EMPTY = "Cart is empty"
