"""In-memory shopping carts keyed by customer."""

from .cart import ShoppingCart
from .config import CartSettings
from .exceptions import CartError, InvalidArgumentError
from .factory import CartFactory
from .models import CartLine, CartSummary, Item, Product

__version__ = "0.1.0"

__all__ = [
    "CartError",
    "CartFactory",
    "CartLine",
    "CartSettings",
    "CartSummary",
    "InvalidArgumentError",
    "Item",
    "Product",
    "ShoppingCart",
]
