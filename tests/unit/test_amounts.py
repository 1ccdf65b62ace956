"""Unit tests for amount helpers."""

import pytest

from token_import.schemas.v1.proofs import WalletProof
from token_import.utils.amounts import HIDDEN_BALANCE, format_amount, total_amount


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            (1000, "sat", "1,000 sat"),
            (21, "sat", "21 sat"),
            (1500000, "msat", "1,500,000 msat"),
            (150, "usd", "$1.50"),
            (123456, "eur", "€1,234.56"),
            (5, "gbp", "5.00 GBP"),
            (42, "", "42"),
        ],
    )
    def test_units(self, value, unit, expected):
        assert format_amount(value, unit) == expected

    def test_default_unit_is_sat(self):
        assert format_amount(7) == "7 sat"

    def test_hidden_balance(self):
        assert format_amount(1000, "sat", hide_balance=True) == HIDDEN_BALANCE


def test_total_amount():
    proofs = [
        WalletProof(id="00ad", amount=amount, secret=f"s{amount}", C="02")
        for amount in (1, 4, 16)
    ]
    assert total_amount(proofs) == 21


def test_total_amount_empty():
    assert total_amount([]) == 0


def test_show_balance_overrides_hidden_balance():
    assert format_amount(1000, "sat", hide_balance=True, show_balance=True) == "1,000 sat"


def test_show_balance_without_hiding_is_plain():
    assert format_amount(150, "usd", show_balance=True) == "$1.50"
