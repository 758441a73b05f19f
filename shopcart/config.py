"""Cart settings and decimal contexts."""

import decimal
from decimal import ROUND_HALF_UP, Context, Decimal
from pydantic import BaseModel, ConfigDict, Field


class CartSettings(BaseModel):
    """Settings shared by every cart of a factory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ticket_places: int = Field(default=2, ge=0, description="Fractional digits of the average ticket")

    @property
    def ticket_quantum(self) -> Decimal:
        return Decimal(1).scaleb(-self.ticket_places)


def exact_context() -> Context:
    """
    Context for money sums and products.

    Additions and multiplications never round under MAX_PREC; the Inexact
    trap turns any rounding into an error instead of a silently wrong total.
    """
    return Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        rounding=ROUND_HALF_UP,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow, decimal.Inexact],
    )


def division_context(dividend: Decimal, divisor: int, places: int) -> Context:
    """
    Context for dividing ``dividend`` by a positive integer before the
    quotient is quantized to ``places`` fractional digits.

    The quotient keeps more significant digits than the operands carry
    together, so the quantize step cannot land on the wrong side of a
    rounding boundary.
    """
    exponent = dividend.as_tuple().exponent
    scale = max(-exponent, places + 1)
    digits = max(dividend.adjusted() + 1, 0) + scale + len(str(divisor)) + 2
    return Context(
        prec=max(decimal.getcontext().prec, digits),
        rounding=ROUND_HALF_UP,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )
