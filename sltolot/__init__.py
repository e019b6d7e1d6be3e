from .calculator.hint_signal import ConversionHint, ConversionHintSignal
from .calculator.models import (
    CalculationFailure,
    CalculationInput,
    CalculationResult,
    CalculationSuccess,
    ErrorKind,
)
from .calculator.orchestrator import CalculationOrchestrator, run_calculation
from .calculator.summary import ResultSummary, summarize_result
from .risk.lot_classifier import LotClassification, LotTier, classify_lot
from .risk.risk_amount import RiskKind, RiskSpec

__all__ = [
    "CalculationFailure",
    "CalculationInput",
    "CalculationOrchestrator",
    "CalculationResult",
    "CalculationSuccess",
    "ConversionHint",
    "ConversionHintSignal",
    "ErrorKind",
    "LotClassification",
    "LotTier",
    "ResultSummary",
    "RiskKind",
    "RiskSpec",
    "classify_lot",
    "run_calculation",
    "summarize_result",
]
