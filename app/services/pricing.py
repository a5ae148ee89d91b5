"""Pricing engine - subtotal, volume discount, manager discount and total.

Money is handled as ``Decimal``. The subtotal is the exact sum of
price x quantity; each discount amount is rounded half-up to cents and the
total is derived from those rounded amounts, so
``total == subtotal - volume_discount_amount - manual_discount_amount``
always holds exactly.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from app.config import settings
from app.models import LineItem

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class PricingSummary:
    """Derived totals of a pricing table."""
    subtotal: Decimal
    volume_discount_rate: Decimal
    volume_discount_amount: Decimal
    discount_rate: Decimal
    manual_discount_amount: Decimal
    total: Decimal

    @property
    def volume_discount_applied(self) -> bool:
        return self.volume_discount_rate > 0


def percent_of(amount: Decimal, rate: Decimal) -> Decimal:
    """``rate`` percent of ``amount``, rounded half-up to cents."""
    return (amount * rate / HUNDRED).quantize(CENTS, rounding=ROUND_HALF_UP)


def volume_discount_rate(
    items: Iterable[LineItem],
    item_name: Optional[str] = None,
    threshold: Optional[int] = None,
    rate: Optional[Decimal] = None,
) -> Decimal:
    """Rate earned by buying enough of the designated item, else 0."""
    item_name = item_name or settings.volume_discount_item
    threshold = settings.volume_discount_threshold if threshold is None else threshold
    rate = settings.volume_discount_rate if rate is None else rate

    designated = next((item for item in items if item.name == item_name), None)
    if designated is not None and designated.quantity >= threshold:
        return Decimal(rate)
    return Decimal("0")


def calculate_pricing(items: Iterable[LineItem], discount: int | Decimal = 0) -> PricingSummary:
    """Compute the pricing summary for ``items`` and a manager discount percentage."""
    items = list(items)
    subtotal = sum((item.price * item.quantity for item in items), Decimal("0"))

    volume_rate = volume_discount_rate(items)
    discount_rate = Decimal(str(discount))

    volume_amount = percent_of(subtotal, volume_rate)
    manual_amount = percent_of(subtotal, discount_rate)

    return PricingSummary(
        subtotal=subtotal,
        volume_discount_rate=volume_rate,
        volume_discount_amount=volume_amount,
        discount_rate=discount_rate,
        manual_discount_amount=manual_amount,
        total=subtotal - volume_amount - manual_amount,
    )
