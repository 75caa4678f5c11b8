"""Unit tests for domain value objects."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from inventory.domain.exceptions import ValidationError
from inventory.domain.model.value_objects import Money, Weight


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "SEK"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10.00")

    def test_amount_always_has_two_decimals(self):
        assert str(Money.of(7).amount) == "7.00"
        assert str(Money.of("3.1").amount) == "3.10"

    def test_rounds_half_up(self):
        assert Money.of("10.005").amount == Decimal("10.01")
        assert Money.of("10.004").amount == Decimal("10.00")
        assert Money.of("0.125").amount == Decimal("0.13")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_rejects_none(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(None)

    def test_of_rejects_nan(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("NaN")

    def test_addition(self):
        result = Money.of("79") + Money.of("49")
        assert result == Money.of("128")

    def test_multiplication_by_decimal(self):
        result = Money.of("2.5") * Decimal("50")
        assert result == Money.of("125")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="Can only multiply"):
            Money.of("2") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "SEK") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("79")) == "79.00 SEK"
        assert str(Money.of("9.5")) == "9.50 SEK"

    def test_immutable(self):
        m = Money.of("10")
        with pytest.raises(FrozenInstanceError):
            m.amount = Decimal("-1")


# ── Weight ───────────────────────────────────────────────────────────────────


class TestWeight:

    def test_valid_weight(self):
        w = Weight.of("2.5")
        assert w.kilograms == Decimal("2.5")

    def test_zero_allowed(self):
        assert Weight.of(0).kilograms == Decimal("0")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Weight.of("-0.1")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid weight"):
            Weight.of("heavy")

    def test_ordering(self):
        assert Weight.of("6.0") > Weight.of("5.0")
        assert not Weight.of("5.0") > Weight.of("5")

    def test_str(self):
        assert str(Weight.of("3.0")) == "3.0 kg"
