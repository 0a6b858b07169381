"""
Tests for the shared value objects: Money and Address
"""
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from domain.shared.exceptions import MissingArgumentException, ValidationException
from domain.shared.value_objects import Address, Money, normalize_currency


class TestMoney:

    @pytest.mark.parametrize("currency", ["usd", "USD", "Usd", "eUr", "jpy"])
    def test_currency_is_stored_uppercased(self, currency):
        assert Money(Decimal("1.00"), currency).currency == currency.upper()

    @pytest.mark.parametrize("currency", ["", "US", "USDX", "U D", "   ", " US", 840, "\u00dfab", "\ufb00xy"])
    def test_invalid_currency_is_rejected(self, currency):
        with pytest.raises(ValidationException) as exc_info:
            Money(Decimal("1.00"), currency)
        assert exc_info.value.field == "currency"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_missing_amount_is_rejected(self):
        with pytest.raises(MissingArgumentException) as exc_info:
            Money(None, "USD")
        assert exc_info.value.field == "amount"

    def test_missing_currency_is_rejected(self):
        with pytest.raises(MissingArgumentException) as exc_info:
            Money(Decimal("1.00"), None)
        assert exc_info.value.code == "MISSING_ARGUMENT"

    @pytest.mark.parametrize("amount", [Decimal("-0.01"), -1, "-100.50", Decimal("-1E10")])
    def test_negative_amount_is_rejected(self, amount):
        with pytest.raises(ValidationException):
            Money(amount, "USD")

    @pytest.mark.parametrize("amount", [Decimal("0"), 0, Decimal("0.01"), "25.99", 1000000])
    def test_non_negative_amount_is_accepted(self, amount):
        money = Money(amount, "USD")
        assert money.amount == Decimal(str(amount))
        assert isinstance(money.amount, Decimal)

    @pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", float("inf"), True, [1]])
    def test_malformed_amount_is_rejected(self, amount):
        with pytest.raises(ValidationException):
            Money(amount, "USD")

    def test_float_amount_keeps_its_decimal_digits(self):
        assert Money(25.99, "USD").amount == Decimal("25.99")

    def test_negative_zero_is_normalized(self):
        assert str(Money(Decimal("-0.00"), "USD")) == "0.00 USD"

    def test_equality_is_by_value(self):
        assert Money(Decimal("10.50"), "usd") == Money(Decimal("10.50"), "USD")
        assert Money(Decimal("10.50"), "USD") != Money(Decimal("10.50"), "EUR")
        assert Money(Decimal("10.50"), "USD") != Money(Decimal("10.51"), "USD")
        assert len({Money(Decimal("1"), "USD"), Money(Decimal("1.00"), "usd")}) == 1

    def test_is_immutable(self):
        money = Money(Decimal("1.00"), "USD")
        with pytest.raises(FrozenInstanceError):
            money.amount = Decimal("2.00")

    def test_string_rendering(self):
        assert str(Money(Decimal("259.90"), "usd")) == "259.90 USD"

    def test_zero(self):
        zero = Money.zero("eur")
        assert zero.amount == 0
        assert str(zero) == "0.00 EUR"


class TestNormalizeCurrency:

    def test_uppercases_code(self):
        assert normalize_currency("gbp") == "GBP"

    def test_reports_given_field_name(self):
        with pytest.raises(ValidationException) as exc_info:
            normalize_currency("XX", field="order_currency")
        assert exc_info.value.field == "order_currency"


ADDRESS_PARTS = ["Supplier St", "123", "SupplierCity", "Supplier State", "12345", "United States"]
ADDRESS_FIELDS = ["street", "number", "city", "state_or_region", "postal_code", "country"]


class TestAddress:

    def test_string_rendering(self, address):
        assert str(address) == "Supplier St 123, SupplierCity, Supplier State, 12345, United States"

    @pytest.mark.parametrize("index", range(6))
    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_part_is_rejected(self, index, blank):
        parts = list(ADDRESS_PARTS)
        parts[index] = blank
        with pytest.raises(ValidationException) as exc_info:
            Address(*parts)
        assert exc_info.value.field == ADDRESS_FIELDS[index]

    @pytest.mark.parametrize("index", range(6))
    def test_missing_part_is_rejected(self, index):
        parts = list(ADDRESS_PARTS)
        parts[index] = None
        with pytest.raises(MissingArgumentException) as exc_info:
            Address(*parts)
        assert exc_info.value.field == ADDRESS_FIELDS[index]

    def test_equality_is_by_value(self, address):
        assert address == Address(*ADDRESS_PARTS)
        assert address != Address(*ADDRESS_PARTS[:-1], "Canada")
