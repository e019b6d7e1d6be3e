"""Lot size derivation from risk, stop distance and pip value."""

from __future__ import annotations

from typing import Optional


def calculate_lot_size(
    risk_amount: float,
    stop_loss_pips: Optional[float],
    pip_value_per_lot: Optional[float],
) -> Optional[float]:
    """Lot size = risk amount / (SL pips * pip value per lot), unrounded."""
    if not stop_loss_pips or not pip_value_per_lot:
        return None
    if stop_loss_pips <= 0 or pip_value_per_lot <= 0:
        return None
    return risk_amount / (stop_loss_pips * pip_value_per_lot)
