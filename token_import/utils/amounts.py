"""Amount helpers for display."""

from __future__ import annotations

from collections.abc import Iterable

from token_import.schemas.v1.common import CurrencyUnit
from token_import.schemas.v1.proofs import WalletProof

HIDDEN_BALANCE = "****"

FIAT_SYMBOLS = {
    CurrencyUnit.USD.value: "$",
    CurrencyUnit.EUR.value: "€",
}


def total_amount(proofs: Iterable[WalletProof]) -> int:
    return sum(proof.amount for proof in proofs)


def format_amount(
    value: int | float,
    unit: str = "sat",
    hide_balance: bool = False,
    show_balance: bool = False,
) -> str:
    """Format an amount in its unit.

    Fiat units are denominated in cents. ``show_balance`` overrides
    ``hide_balance``.
    """
    if hide_balance and not show_balance:
        return HIDDEN_BALANCE
    if unit in (CurrencyUnit.SAT.value, CurrencyUnit.MSAT.value):
        return f"{int(value):,} {unit}"
    if unit in FIAT_SYMBOLS:
        return f"{FIAT_SYMBOLS[unit]}{value / 100:,.2f}"
    if not unit:
        return f"{int(value):,}"
    return f"{value:,.2f} {unit.upper()}"
