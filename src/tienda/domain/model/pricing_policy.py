"""Pricing policy: the fixed tax, discount and shipping rules of the shop.

Built once by the composition root and handed to the calculator. There is
a single policy per process; nothing mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from tienda.domain.exceptions import ValidationError
from tienda.domain.model.value_objects import Money


@dataclass(frozen=True)
class PricingPolicy:
    """Thresholds are compared against amounts, rates are fractions (0.21 = 21%)."""

    tax_rate: Decimal = Decimal("0.21")
    discount_threshold: Money = Money(Decimal("100"))
    discount_rate: Decimal = Decimal("0.05")
    shipping_cost: Money = Money(Decimal("5.99"))
    free_shipping_threshold: Money = Money(Decimal("50"))

    def __post_init__(self) -> None:
        for label, rate in (("Tax", self.tax_rate), ("Discount", self.discount_rate)):
            if not Decimal("0") <= rate <= Decimal("1"):
                raise ValidationError(f"{label} rate must be between 0 and 1, got {rate}")


DEFAULT_POLICY = PricingPolicy()
