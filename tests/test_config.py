from decimal import Decimal, localcontext

import pytest
from pydantic import ValidationError

from shopcart import CartSettings
from shopcart.config import division_context, exact_context


def test_default_settings():
    settings = CartSettings()
    assert settings.ticket_places == 2
    assert settings.ticket_quantum == Decimal("0.01")


def test_custom_places():
    assert CartSettings(ticket_places=0).ticket_quantum == Decimal("1")
    assert CartSettings(ticket_places=4).ticket_quantum == Decimal("0.0001")


def test_rejects_negative_places():
    with pytest.raises(ValidationError):
        CartSettings(ticket_places=-1)


def test_exact_context_keeps_every_digit():
    with localcontext(exact_context()):
        value = Decimal("12345678901234567890.123456789") * 3 + Decimal("0.000000001")
    assert value == Decimal("37037036703703703670.370370368")


def test_division_context_precision_covers_operands():
    dividend = Decimal("1" * 40 + ".005")
    context = division_context(dividend, 7, 2)
    assert context.prec > len(dividend.as_tuple().digits)
