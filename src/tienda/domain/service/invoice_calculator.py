"""Domain service: Invoice Calculator.

Turns a customer and a cart into a priced, rendered invoice. The work runs
in a fixed sequence:

  1. stock check      - fail before any money is computed
  2. aggregation      - subtotal, threshold discount, taxed base
  3. tax & shipping   - tax, free-shipping rule, total, delivery date
  4. rendering        - receipt text

The calculator does no I/O. The current date comes from an injected clock,
read once per call, so one invoice never mixes two dates.

The outcome is returned as a value: ``InvoiceIssued`` or ``StockShortage``.
Callers branch on it explicitly instead of catching an exception.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from tienda.domain.model.cart import Cart, CartItem
from tienda.domain.model.customer import Customer
from tienda.domain.model.invoice import Invoice
from tienda.domain.model.pricing_policy import DEFAULT_POLICY, PricingPolicy
from tienda.domain.model.value_objects import Money
from tienda.domain.service.invoice_renderer import render_invoice
from tienda.domain.service.stock_validator import find_shortages, has_enough_stock

DELIVERY_DAYS = 3
STOCK_SHORTAGE_MESSAGE = "Falta de stock en uno o más productos. Revisa el inventario."

Clock = Callable[[], date]


@dataclass(frozen=True)
class InvoiceIssued:
    invoice: Invoice
    text: str


@dataclass(frozen=True)
class StockShortage:
    """The cart could not be invoiced; ``items`` are the under-stocked lines."""

    message: str
    items: tuple[CartItem, ...]


InvoiceOutcome = InvoiceIssued | StockShortage


class InvoiceCalculator:

    def __init__(self, policy: PricingPolicy, clock: Clock = date.today) -> None:
        self._policy = policy
        self._clock = clock

    def calculate(self, customer: Customer, items: Sequence[CartItem]) -> InvoiceOutcome:
        return compute_invoice(customer, items, self._policy, today=self._clock())


def compute_invoice(
    customer: Customer,
    items: Sequence[CartItem],
    policy: PricingPolicy = DEFAULT_POLICY,
    *,
    today: date,
) -> InvoiceOutcome:
    """Price and render the invoice for *items*, or report a stock shortage."""
    cart: Cart = tuple(items)

    if not has_enough_stock(cart):
        return StockShortage(
            message=STOCK_SHORTAGE_MESSAGE, items=tuple(find_shortages(cart))
        )

    invoice = build_invoice(customer, cart, policy, today)
    return InvoiceIssued(invoice=invoice, text=render_invoice(invoice))


def build_invoice(
    customer: Customer, cart: Cart, policy: PricingPolicy, today: date
) -> Invoice:
    """Derive every amount of the invoice. Assumes the stock check passed."""
    subtotal = calculate_subtotal(cart)
    discount = calculate_discount(subtotal, policy)
    taxed_base = subtotal - discount

    tax_amount = taxed_base * policy.tax_rate
    shipping_cost = calculate_shipping(taxed_base, policy)
    total = taxed_base + tax_amount + shipping_cost

    return Invoice(
        customer=customer,
        items=cart,
        subtotal=subtotal,
        discount=discount,
        taxed_base=taxed_base,
        tax_amount=tax_amount,
        shipping_cost=shipping_cost,
        total=total,
        needs_fragile_packaging=any(item.is_fragile for item in cart),
        estimated_delivery=today + timedelta(days=DELIVERY_DAYS),
        tax_rate=policy.tax_rate,
    )


def calculate_subtotal(cart: Cart) -> Money:
    result = Money(Decimal("0"))
    for item in cart:
        result = result + item.line_total
    return result


def calculate_discount(subtotal: Money, policy: PricingPolicy) -> Money:
    # strictly above: a cart priced exactly at the threshold gets nothing
    if subtotal > policy.discount_threshold:
        return subtotal * policy.discount_rate
    return Money.zero()


def calculate_shipping(taxed_base: Money, policy: PricingPolicy) -> Money:
    """Shipping is waived from the threshold up, measured after the discount.

    A discount can therefore push a cart back under the line and bring the
    shipping charge back.
    """
    if taxed_base >= policy.free_shipping_threshold:
        return Money.zero()
    return policy.shipping_cost
