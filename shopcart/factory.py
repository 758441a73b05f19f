"""Registry creating and tracking one shopping cart per customer."""

import logging
import threading
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from .cart import ShoppingCart
from .config import CartSettings, division_context, exact_context

logger = logging.getLogger(__name__)


class CartFactory:
    """
    Creates, retrieves and invalidates shopping carts keyed by customer.

    Factories are independent of each other: a cart created for a customer
    in one factory is unknown to every other factory.
    """

    def __init__(self, settings: Optional[CartSettings] = None) -> None:
        """
        Initialize the factory.

        Args:
            settings: Cart settings (default: two-digit half-up average ticket)
        """
        self.settings = settings or CartSettings()
        self._carts: dict[str, ShoppingCart] = {}
        self._lock = threading.RLock()

    def create(self, customer_id: str) -> ShoppingCart:
        """
        Get the customer's cart, creating an empty one if it does not exist.

        Repeated calls for the same customer return the same cart.
        """
        with self._lock:
            cart = self._carts.get(customer_id)
            if cart is None:
                cart = ShoppingCart()
                self._carts[customer_id] = cart
                logger.info(f"Created cart for customer {customer_id}")
            return cart

    def get(self, customer_id: str) -> Optional[ShoppingCart]:
        """Get the customer's cart without creating one."""
        with self._lock:
            return self._carts.get(customer_id)

    def average_ticket(self) -> Decimal:
        """
        Average cart total across all carts.

        The sum of every cart total divided by the number of carts, rounded
        half-up to the configured number of places (two by default).
        Returns zero when there are no carts.
        """
        quantum = self.settings.ticket_quantum
        with self._lock:
            totals = [cart.total for cart in self._carts.values()]

        if not totals:
            return Decimal(0).quantize(quantum)

        with localcontext(exact_context()):
            total = sum(totals, Decimal("0"))

        with localcontext(division_context(total, len(totals), self.settings.ticket_places)):
            average = total / len(totals)
            ticket = average.quantize(quantum, rounding=ROUND_HALF_UP)

        logger.debug(f"Average ticket over {len(totals)} cart(s): {ticket} (exact: {average})")
        return ticket

    def invalidate(self, customer_id: str) -> bool:
        """
        Remove the customer's cart, e.g. after checkout or session expiry.

        Returns True if the customer had a cart.
        """
        with self._lock:
            cart = self._carts.pop(customer_id, None)
        if cart is None:
            logger.debug(f"No cart to invalidate for customer {customer_id}")
            return False
        logger.info(f"Invalidated cart for customer {customer_id}")
        return True

    def customer_ids(self) -> list[str]:
        with self._lock:
            return list(self._carts)

    def __contains__(self, customer_id: object) -> bool:
        with self._lock:
            return customer_id in self._carts

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)
