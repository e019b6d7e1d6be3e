"""Pip value per lot expressed in the account currency."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sltolot.pairs.pair_parser import CurrencyPair, parse_pair
from sltolot.pairs.pip_size import resolve_pip_size


class ConversionCase(str, Enum):
    """How the account currency relates to the traded pair.

    ACCOUNT_IS_QUOTE needs no rate. ACCOUNT_IS_BASE expects
    "1 account = ? quote" and divides by it. CROSS_PAIR expects
    "1 quote = ? account" and multiplies by it.
    """

    ACCOUNT_IS_QUOTE = "account_is_quote"
    ACCOUNT_IS_BASE = "account_is_base"
    CROSS_PAIR = "cross_pair"

    @classmethod
    def select(cls, pair: CurrencyPair, account_currency: str) -> "ConversionCase":
        # Quote match wins when base and quote are the same code.
        if account_currency == pair.quote:
            return cls.ACCOUNT_IS_QUOTE
        if account_currency == pair.base:
            return cls.ACCOUNT_IS_BASE
        return cls.CROSS_PAIR

    @property
    def needs_conversion(self) -> bool:
        return self is not ConversionCase.ACCOUNT_IS_QUOTE

    def hint(self, pair: CurrencyPair, account_currency: str) -> str:
        if self is ConversionCase.ACCOUNT_IS_BASE:
            return (
                f"Your account currency ({account_currency}) is the BASE of {pair.symbol}.\n"
                f"Enter the rate: 1 {account_currency} = ? {pair.quote}"
            )
        if self is ConversionCase.CROSS_PAIR:
            return (
                f"{pair.symbol} is a cross pair for a {account_currency} account.\n"
                f"Enter the rate: 1 {pair.quote} = ? {account_currency}"
            )
        return ""

    def convert(self, value_in_quote: float, rate: Optional[float]) -> Optional[float]:
        """Convert a quote-currency amount to the account currency."""
        if self is ConversionCase.ACCOUNT_IS_QUOTE:
            return value_in_quote
        if rate is None or not rate > 0:
            return None
        if self is ConversionCase.ACCOUNT_IS_BASE:
            return value_in_quote / rate
        return value_in_quote * rate


@dataclass(frozen=True)
class PipValueResult:
    pip_value: Optional[float]
    needs_conversion: bool
    conversion_case: ConversionCase
    hint: str
    pip_size: float
    base: str
    quote: str

    @property
    def awaiting_rate(self) -> bool:
        return self.needs_conversion and self.pip_value is None


def calculate_pip_value(
    raw_pair: Optional[str],
    account_currency: str,
    contract_size: float,
    conversion_rate: Optional[float] = None,
) -> Optional[PipValueResult]:
    """Compute the pip value of one lot in the account currency.

    pip value in quote = pip size * contract size, then converted per
    ConversionCase. pip_value stays None while a required rate is absent
    or non-positive. Returns None if the pair cannot be parsed.
    """
    pair = parse_pair(raw_pair)
    if pair is None:
        return None
    pip_size = resolve_pip_size(raw_pair)
    if pip_size is None:
        return None

    account = (account_currency or "").upper()
    pip_value_in_quote = pip_size * contract_size
    case = ConversionCase.select(pair, account)

    return PipValueResult(
        pip_value=case.convert(pip_value_in_quote, conversion_rate),
        needs_conversion=case.needs_conversion,
        conversion_case=case,
        hint=case.hint(pair, account),
        pip_size=pip_size,
        base=pair.base,
        quote=pair.quote,
    )
