"""Risk specification and monetary risk resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RiskKind(str, Enum):
    PERCENT = "percent"
    FIXED = "fixed"


@dataclass(frozen=True)
class RiskSpec:
    """Percent of balance or a fixed amount in the account currency."""

    kind: RiskKind
    value: float


def resolve_risk_amount(balance: float, risk: RiskSpec) -> float:
    """Return the amount at risk. No clamping; over-risk is checked by the caller."""
    if risk.kind is RiskKind.PERCENT:
        return balance * (risk.value / 100)
    return risk.value


def risk_input_suffix(kind: RiskKind, account_currency: str = "") -> str:
    """Unit label shown next to the risk field."""
    if kind is RiskKind.PERCENT:
        return "%"
    return (account_currency or "").strip().upper() or "$"
