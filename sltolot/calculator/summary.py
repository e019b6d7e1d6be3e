"""Derived figures shown alongside a successful calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sltolot.calculator.models import CalculationSuccess
from sltolot.risk.lot_classifier import LotClassification, classify_lot


@dataclass(frozen=True)
class ResultSummary:
    classification: LotClassification
    units: int
    pip_value_for_position: float
    account_currency: str
    confirmation_text: str


def _format_pips(stop_loss_pips: float) -> str:
    if float(stop_loss_pips).is_integer():
        return str(int(stop_loss_pips))
    return repr(float(stop_loss_pips))


def summarize_result(result: CalculationSuccess) -> ResultSummary:
    """Units, pip value at the computed size and a one-line risk check."""
    classification = classify_lot(result.lot_size)
    units = math.floor(result.lot_size * result.contract_size + 0.5)
    position_pip_value = result.pip_value_per_lot * result.lot_size
    acc = result.account_currency.upper()

    text = (
        f"{_format_pips(result.stop_loss_pips)} pips × {position_pip_value:.4f} {acc}/pip"
        f" = {result.risk_amount:.2f} {acc} risk"
        f" — {classification.display} lots ({units:,} units)"
    )
    return ResultSummary(
        classification=classification,
        units=units,
        pip_value_for_position=position_pip_value,
        account_currency=acc,
        confirmation_text=text,
    )
