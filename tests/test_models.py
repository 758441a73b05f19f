from decimal import Decimal

import pytest
from pydantic import ValidationError

from shopcart import CartSummary, Item, Product


def test_products_with_equal_fields_are_equal():
    assert Product(id="1", name="Milk") == Product(id="1", name="Milk")
    assert Product(id="1", name="Milk") != Product(id="2", name="Milk")
    assert hash(Product(id="1", name="Milk")) == hash(Product(id="1", name="Milk"))


def test_item_total_is_price_times_quantity():
    item = Item(product="sku", unit_price=Decimal("2.50"), quantity=3)
    assert item.total == Decimal("7.50")


@pytest.mark.parametrize("price,quantity", [(Decimal("0"), 1), (Decimal("-1"), 1), (Decimal("1"), 0)])
def test_item_rejects_non_positive_values(price, quantity):
    with pytest.raises(ValidationError):
        Item(product="sku", unit_price=price, quantity=quantity)


def test_item_is_frozen():
    item = Item(product="sku", unit_price=Decimal("1"), quantity=1)
    with pytest.raises(ValidationError):
        item.quantity = 5


def test_item_copies_leave_original_untouched():
    item = Item(product="sku", unit_price=Decimal("1.00"), quantity=2)

    updated = item.with_quantity(5).with_unit_price(Decimal("0.90"))

    assert (item.quantity, item.unit_price) == (2, Decimal("1.00"))
    assert (updated.quantity, updated.unit_price) == (5, Decimal("0.90"))
    assert updated.total == Decimal("4.50")


def test_empty_summary_defaults():
    summary = CartSummary()
    assert summary.items == []
    assert summary.total == Decimal("0")
    assert summary.item_count == 0


def test_item_total_keeps_every_digit():
    item = Item(product="sku", unit_price=Decimal("1.00000000000000000000000000001"), quantity=3)

    assert item.total == Decimal("3.00000000000000000000000000003")
