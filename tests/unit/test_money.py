"""
Unit tests for money helpers.

Verifies:
- Exact Decimal construction from typed text
- ROUND_HALF_UP to cents
- Two-decimal display formatting
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

import pytest

from bookstore_kernel.db.types import (
    DEFAULT_ROUNDING,
    MAX_STOCK,
    MONEY_DECIMAL_PLACES,
    format_money,
    money_from_str,
    round_money,
)


class TestMoneyFromStr:
    def test_exact_value_kept(self):
        assert money_from_str("9.99") == Decimal("9.99")

    def test_not_rounded(self):
        assert money_from_str("1.005") == Decimal("1.005")

    def test_invalid_string_raises(self):
        with pytest.raises(InvalidOperation):
            money_from_str("not a number")


class TestRoundMoney:
    def test_constants(self):
        assert MONEY_DECIMAL_PLACES == 2
        assert DEFAULT_ROUNDING == ROUND_HALF_UP
        assert MAX_STOCK == 2147483647

    def test_round_half_up(self):
        assert round_money(Decimal("10.555")) == Decimal("10.56")

    def test_round_down(self):
        assert round_money(Decimal("10.554")) == Decimal("10.55")

    def test_negative(self):
        assert round_money(Decimal("-1.005")) == Decimal("-1.01")

    def test_pads_to_cents(self):
        assert str(round_money(Decimal("3"))) == "3.00"


class TestFormatMoney:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("0"), "0.00"),
            (Decimal("9.99"), "9.99"),
            (Decimal("29.97"), "29.97"),
            (Decimal(".5"), "0.50"),
            (Decimal("1.005"), "1.01"),
            (Decimal("1234567890.12"), "1234567890.12"),
        ],
    )
    def test_two_places(self, value, expected):
        assert format_money(value) == expected
