"""Errors raised by the cart layer."""


class CartError(Exception):
    """Base class for cart errors."""


class InvalidArgumentError(CartError, ValueError):
    """Raised when an item cannot be added because its arguments are invalid."""
