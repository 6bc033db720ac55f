"""Integration tests for the GenerateInvoice use case."""

import pytest

from tienda.application.dto import CartItemSpec, CustomerSpec
from tienda.application.generate_invoice import SUCCESS_MESSAGE, GenerateInvoiceHandler
from tienda.domain.exceptions import StockShortageError, ValidationError
from tienda.domain.model.pricing_policy import DEFAULT_POLICY
from tienda.domain.service.invoice_calculator import STOCK_SHORTAGE_MESSAGE
from tests.fakes import fixed_clock

ANA = CustomerSpec(name="ana", email="a@b.com")


def _spec(name="Maceta", quantity=2, price="60", stock=10, fragile=True) -> CartItemSpec:
    return CartItemSpec(
        name=name,
        quantity=quantity,
        unit_price=price,
        available_stock=stock,
        is_fragile=fragile,
    )


def _handler() -> GenerateInvoiceHandler:
    return GenerateInvoiceHandler(policy=DEFAULT_POLICY, clock=fixed_clock)


class TestGenerateInvoiceHappyPath:

    def test_returns_ticket_and_totals(self):
        dto = _handler().handle(ANA, [_spec()])
        assert dto.message == SUCCESS_MESSAGE
        assert dto.customer_name == "ana"
        assert dto.total == "137.94€"
        assert "👤 Cliente: ANA" in dto.ticket
        assert "2x Maceta" in dto.ticket
        assert "Entrega estimada: 22/10/2026" in dto.ticket

    def test_empty_cart_is_invoiced(self):
        dto = _handler().handle(ANA, [])
        assert dto.total == "5.99€"
        assert "Envío: +5.99€" in dto.ticket


class TestGenerateInvoiceFailures:

    def test_stock_shortage_raised(self):
        with pytest.raises(StockShortageError, match="Falta de stock") as exc_info:
            _handler().handle(ANA, [_spec(name="Lápiz", quantity=5, price="1", stock=2)])
        assert exc_info.value.shortage.message == STOCK_SHORTAGE_MESSAGE
        assert [item.name for item in exc_info.value.shortage.items] == ["Lápiz"]

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _handler().handle(ANA, [_spec(quantity=0)])

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler().handle(ANA, [_spec(price="-1")])
