"""Currency pair parsing helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_NON_ALPHA = re.compile(r"[^A-Za-z]")

MIN_PAIR_LENGTH = 6


@dataclass(frozen=True)
class CurrencyPair:
    """Base and quote codes of a pair such as EUR/USD."""

    base: str
    quote: str

    @property
    def symbol(self) -> str:
        return f"{self.base}{self.quote}"


def clean_pair_symbol(raw: Optional[str]) -> str:
    """Drop every non-letter character and uppercase the rest."""
    if not raw:
        return ""
    return _NON_ALPHA.sub("", raw).upper()


def parse_pair(raw: Optional[str]) -> Optional[CurrencyPair]:
    """Parse "EURUSD", "EUR/USD" or "eur-usd" into a CurrencyPair.

    Returns None when fewer than six letters remain after cleaning.
    Letters past the sixth are ignored, so "EURUSDX" parses as EUR/USD.
    """
    clean = clean_pair_symbol(raw)
    if len(clean) < MIN_PAIR_LENGTH:
        return None
    return CurrencyPair(base=clean[0:3], quote=clean[3:6])
