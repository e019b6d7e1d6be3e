"""Pip size lookup by quote currency."""

from __future__ import annotations

from typing import Optional

from sltolot.pairs.pair_parser import parse_pair

JPY_PIP_SIZE = 0.01
DEFAULT_PIP_SIZE = 0.0001


def resolve_pip_size(raw_pair: Optional[str]) -> Optional[float]:
    """Return 0.01 for JPY-quoted pairs, 0.0001 otherwise, None if unparseable."""
    pair = parse_pair(raw_pair)
    if pair is None:
        return None
    return JPY_PIP_SIZE if pair.quote == "JPY" else DEFAULT_PIP_SIZE
