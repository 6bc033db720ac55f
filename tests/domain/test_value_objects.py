"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from tienda.domain.exceptions import ValidationError
from tienda.domain.model.value_objects import MAX_AMOUNT, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "EUR"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_from_float_keeps_short_repr(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_of_factory_rejects_bool(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(True)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("Infinity")

    def test_amount_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of(1e27)

    def test_amount_at_ceiling_accepted(self):
        assert Money(MAX_AMOUNT).amount == MAX_AMOUNT

    def test_product_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money(MAX_AMOUNT) * 2

    def test_addition(self):
        result = Money.of("10") + Money.of("5.50")
        assert result == Money.of("15.50")

    def test_subtraction(self):
        result = Money.of("10") - Money.of("3")
        assert result == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        result = Money.of("7.50") * 3
        assert result == Money.of("22.50")

    def test_multiplication_by_decimal_keeps_precision(self):
        result = Money.of("100.01") * Decimal("0.05")
        assert result.amount == Decimal("5.0005")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="int or Decimal"):
            Money.of("1") * 0.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "EUR") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00€"
        assert str(Money.of("9.5")) == "9.50€"

    def test_str_with_more_digits_than_decimal_context(self):
        amount = Decimal("999999999999.999999999999999999999")
        assert str(Money(amount)) == "1000000000000.00€"

    def test_str_rounds_half_up(self):
        assert str(Money.of("0.125")) == "0.13€"
        assert str(Money.of("5.0005")) == "5.00€"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
