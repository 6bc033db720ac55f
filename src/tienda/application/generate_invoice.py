"""Application service: Generate Invoice use case.

Maps request specs onto domain objects, runs the invoice calculator and
turns its outcome into a DTO. A stock shortage outcome is raised as
StockShortageError so the edges can handle every domain failure the same
way.
"""

from __future__ import annotations

from datetime import date

from tienda.application.dto import CartItemSpec, CustomerSpec, InvoiceDTO
from tienda.domain.exceptions import StockShortageError
from tienda.domain.model.cart import CartItem
from tienda.domain.model.customer import Customer
from tienda.domain.model.pricing_policy import PricingPolicy
from tienda.domain.model.value_objects import Money, Quantity
from tienda.domain.service.invoice_calculator import (
    Clock,
    InvoiceCalculator,
    InvoiceIssued,
)

SUCCESS_MESSAGE = "Factura generada con éxito"


class GenerateInvoiceHandler:

    def __init__(self, policy: PricingPolicy, clock: Clock = date.today) -> None:
        self._calculator = InvoiceCalculator(policy, clock)

    def handle(
        self, customer_spec: CustomerSpec, item_specs: list[CartItemSpec]
    ) -> InvoiceDTO:
        """Price the cart and render its receipt.

        Steps:
        1. Build the Customer and CartItems (value objects validate input).
        2. Let the calculator check stock and price the cart.
        3. Raise on shortage, otherwise return the rendered ticket.
        """
        customer = Customer.create(customer_spec.name, customer_spec.email)
        items = [
            CartItem(
                name=spec.name,
                quantity=Quantity(spec.quantity),
                unit_price=Money.of(spec.unit_price),
                available_stock=spec.available_stock,
                is_fragile=spec.is_fragile,
            )
            for spec in item_specs
        ]

        outcome = self._calculator.calculate(customer, items)
        if not isinstance(outcome, InvoiceIssued):
            raise StockShortageError(outcome)

        return InvoiceDTO(
            message=SUCCESS_MESSAGE,
            ticket=outcome.text,
            customer_name=outcome.invoice.customer.name,
            total=str(outcome.invoice.total),
        )
