"""Shopping cart holding items for a single customer."""

import logging
import threading
from decimal import Decimal, localcontext
from typing import Any, Iterator, Optional, Union

from .config import exact_context
from .exceptions import InvalidArgumentError
from .models import CartLine, CartSummary, Item

logger = logging.getLogger(__name__)


def _as_price(unit_price: Any) -> Decimal:
    """Coerce a unit price to Decimal, rejecting binary floats."""
    if isinstance(unit_price, (bool, float)):
        raise InvalidArgumentError(f"Unit price must be an exact decimal, got {type(unit_price).__name__}")
    if isinstance(unit_price, Decimal):
        price = unit_price
    elif isinstance(unit_price, (int, str)):
        try:
            price = Decimal(unit_price)
        except ArithmeticError as e:
            raise InvalidArgumentError(f"Invalid unit price: {unit_price!r}") from e
    else:
        raise InvalidArgumentError(f"Unsupported unit price type: {type(unit_price).__name__}")

    if not price.is_finite() or price <= 0:
        raise InvalidArgumentError(f"Unit price must be greater than zero, got {unit_price}")
    return price


def _as_quantity(quantity: Any) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidArgumentError(f"Quantity must be an integer, got {type(quantity).__name__}")
    if quantity <= 0:
        raise InvalidArgumentError(f"Quantity must be greater than zero, got {quantity}")
    return quantity


class ShoppingCart:
    """
    A customer's shopping cart.

    Items keep their insertion order, which is what positional removal
    refers to. The cart total is updated incrementally on add and fully
    recalculated after every removal.
    """

    def __init__(
        self,
        product: Optional[Any] = None,
        unit_price: Optional[Any] = None,
        quantity: Optional[int] = None,
    ) -> None:
        """
        Initialize an empty cart, optionally adding a first item.

        Args:
            product: Product of the first item
            unit_price: Unit price of the first item
            quantity: Quantity of the first item

        Raises:
            InvalidArgumentError: If only some of the first item's arguments are given
        """
        self._items: list[Item] = []
        self._total = Decimal("0")
        self._lock = threading.RLock()

        initial = (product, unit_price, quantity)
        if all(arg is None for arg in initial):
            return
        if any(arg is None for arg in initial):
            raise InvalidArgumentError("Product, unit price and quantity are required for the first item")
        self.add_item(product, unit_price, quantity)

    def add_item(self, product: Any, unit_price: Any, quantity: int) -> None:
        """
        Add a product to the cart.

        If the product is already in the cart, its quantity becomes the sum
        of the current and the given quantity, and a different unit price
        replaces the stored one. The total grows by ``unit_price * quantity``
        for the added units only; units already in the cart keep their
        contribution until the next recalculation.

        Raises:
            InvalidArgumentError: If quantity or unit price is not positive
        """
        price = _as_price(unit_price)
        quantity = _as_quantity(quantity)

        with self._lock, localcontext(exact_context()):
            for position, item in enumerate(self._items):
                if item.product != product:
                    continue

                merged = item.with_quantity(item.quantity + quantity)
                if merged.unit_price != price:
                    logger.warning(
                        f"Unit price of {product!r} changed from {item.unit_price} to {price}; "
                        f"cart total now differs from a full recalculation"
                    )
                    merged = merged.with_unit_price(price)
                self._items[position] = merged
                self._total = self._total + price * quantity
                logger.debug(f"Merged {quantity} x {product!r} into existing item (qty: {merged.quantity})")
                return

            self._items.append(Item(product=product, unit_price=price, quantity=quantity))
            self._total = self._total + price * quantity
            logger.debug(f"Added {quantity} x {product!r} at {price}")

    def recalculate_total(self) -> Decimal:
        """Set the total to the exact sum of every item's total."""
        with self._lock, localcontext(exact_context()):
            total = Decimal("0")
            for item in self._items:
                total = total + item.total
            self._total = total
        logger.debug(f"Cart total recalculated: {total}")
        return total

    def remove_product(self, product: Any) -> bool:
        """
        Remove every item for this product.

        Returns True if the product was in the cart.
        """
        with self._lock:
            remaining = [item for item in self._items if item.product != product]
            if len(remaining) == len(self._items):
                logger.debug(f"Product {product!r} not in cart")
                return False
            self._items = remaining
            self.recalculate_total()
        logger.debug(f"Removed {product!r} from cart")
        return True

    def remove_at(self, position: int) -> bool:
        """
        Remove the item at a zero-based position in insertion order.

        Returns False if the position is out of range.
        """
        with self._lock:
            if position < 0 or position >= len(self._items):
                logger.debug(f"No item at position {position}")
                return False
            removed = self._items.pop(position)
            self.recalculate_total()
        logger.debug(f"Removed item {position} ({removed.product!r}) from cart")
        return True

    def remove_item(self, target: Union[int, Any]) -> bool:
        """Remove by position when given an int, otherwise by product."""
        if isinstance(target, int) and not isinstance(target, bool):
            return self.remove_at(target)
        return self.remove_product(target)

    @property
    def total(self) -> Decimal:
        return self._total

    def get_total(self) -> Decimal:
        """Get the cart total without recalculating it."""
        return self._total

    @property
    def items(self) -> tuple[Item, ...]:
        with self._lock:
            return tuple(self._items)

    def get_items(self) -> tuple[Item, ...]:
        """Get cart items in insertion order."""
        return self.items

    def is_empty(self) -> bool:
        return not self._items

    def summary(self) -> CartSummary:
        """Snapshot the cart as a serializable model."""
        with self._lock, localcontext(exact_context()):
            return CartSummary(
                items=[
                    CartLine(
                        product=item.product,
                        unit_price=item.unit_price,
                        quantity=item.quantity,
                        subtotal=item.total,
                    )
                    for item in self._items
                ],
                total=self._total,
                item_count=sum(item.quantity for item in self._items),
            )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"ShoppingCart(items={len(self._items)}, total={self._total})"
