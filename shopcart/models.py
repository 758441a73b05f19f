"""Data models for carts and their items."""

from decimal import Decimal, localcontext
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from .config import exact_context


class Product(BaseModel):
    """Represents a product that can be placed in a cart.

    Carts only rely on equality, so any value-comparable object works as a
    product. This model is frozen, which makes two instances with the same
    fields compare (and hash) equal.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Product ID or SKU")
    name: str = Field(description="Product name")
    description: Optional[str] = Field(None, description="Product description")


class Item(BaseModel):
    """Represents one line in a shopping cart."""

    model_config = ConfigDict(frozen=True)

    product: Any = Field(description="Product this line refers to")
    unit_price: Decimal = Field(gt=0, description="Price of a single unit")
    quantity: int = Field(gt=0, description="Quantity of the product")

    @property
    def total(self) -> Decimal:
        """Subtotal for this line: unit price times quantity, never rounded."""
        with localcontext(exact_context()):
            return self.unit_price * self.quantity

    def with_unit_price(self, unit_price: Decimal) -> "Item":
        return self.model_copy(update={"unit_price": unit_price})

    def with_quantity(self, quantity: int) -> "Item":
        return self.model_copy(update={"quantity": quantity})


class CartLine(BaseModel):
    """Serializable view of an item."""

    product: Any
    unit_price: Decimal
    quantity: int
    subtotal: Decimal


class CartSummary(BaseModel):
    """Read-only snapshot of a cart."""

    model_config = ConfigDict(frozen=True)

    items: list[CartLine] = Field(default_factory=list, description="Cart lines in insertion order")
    total: Decimal = Field(default=Decimal("0"), description="Total cart value")
    item_count: int = Field(default=0, description="Total number of units")
