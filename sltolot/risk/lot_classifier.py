"""Standard / mini / micro / nano lot tiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LotTier(str, Enum):
    STANDARD = "Standard"
    MINI = "Mini"
    MICRO = "Micro"
    NANO = "Nano"


@dataclass(frozen=True)
class LotClassification:
    tier: LotTier
    display: str


# Checked top-down, first match wins.
_TIER_THRESHOLDS = (
    (1.0, LotTier.STANDARD),
    (0.1, LotTier.MINI),
    (0.01, LotTier.MICRO),
)


def classify_lot(lot_size: float) -> LotClassification:
    """Bucket a lot size into a tier. Nano sizes are shown with 4 decimals."""
    for threshold, tier in _TIER_THRESHOLDS:
        if lot_size >= threshold:
            return LotClassification(tier=tier, display=f"{lot_size:.2f}")
    return LotClassification(tier=LotTier.NANO, display=f"{lot_size:.4f}")
