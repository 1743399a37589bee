"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_equal_regardless_of_scale(self):
        # What the database hands back for a NUMERIC(12, 2) column
        assert Money(Decimal("10.00")) == Money.of("10")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_carries_no_currency(self):
        with pytest.raises(TypeError):
            Money(Decimal("10"), "EUR")

    def test_two_decimal_places_accepted(self):
        assert Money.of("0.12").amount == Decimal("0.12")
        assert Money(Decimal("1.2300")) == Money.of("1.23")

    def test_sub_cent_amount_rejected(self):
        with pytest.raises(ValidationError, match="more than two decimal places"):
            Money.of("0.125")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("NaN")

    def test_amount_beyond_decimal_precision_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            Money.of("1E+30")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.zero()) == "$0.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)
