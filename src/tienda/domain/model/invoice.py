"""Invoice: the priced result of checking out a cart.

Every amount here is derived from the cart and the pricing policy by the
calculator. An Invoice is built fresh for each request and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from tienda.domain.model.cart import Cart
from tienda.domain.model.customer import Customer
from tienda.domain.model.value_objects import Money


@dataclass(frozen=True)
class Invoice:
    customer: Customer
    items: Cart
    subtotal: Money
    discount: Money
    taxed_base: Money  # subtotal - discount
    tax_amount: Money
    shipping_cost: Money
    total: Money
    needs_fragile_packaging: bool
    estimated_delivery: date
    tax_rate: Decimal

    @property
    def has_free_shipping(self) -> bool:
        return self.shipping_cost.is_zero
