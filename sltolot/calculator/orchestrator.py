"""Validation and sequencing of a single lot size calculation."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from sltolot.calculator.hint_signal import ConversionHintSignal
from sltolot.calculator.models import (
    CalculationFailure,
    CalculationInput,
    CalculationResult,
    CalculationSuccess,
    ErrorKind,
)
from sltolot.config_loader import CalculatorSettings, load_config
from sltolot.pairs.pair_parser import MIN_PAIR_LENGTH, clean_pair_symbol
from sltolot.pairs.pip_size import resolve_pip_size
from sltolot.risk.lot_size import calculate_lot_size
from sltolot.risk.pip_value import calculate_pip_value
from sltolot.risk.risk_amount import resolve_risk_amount
from sltolot.utils.logger import setup_logger

logger = logging.getLogger("sltolot")


class CalculationOrchestrator:
    """Runs the calculator pipeline and turns every failure into a result.

    Checks run in a fixed order and stop at the first failure:
    required fields, pip size, pip value (publishing the conversion hint),
    conversion rate, risk amount, over-risk, lot size.
    """

    def __init__(
        self,
        settings: Optional[CalculatorSettings] = None,
        hint_signal: Optional[ConversionHintSignal] = None,
    ) -> None:
        self.settings = settings or CalculatorSettings()
        self.hint_signal = hint_signal or ConversionHintSignal()

    @classmethod
    def from_config_file(
        cls,
        config_path: str = "config/settings.yaml",
        hint_signal: Optional[ConversionHintSignal] = None,
    ) -> "CalculationOrchestrator":
        """Build from a YAML settings file and configure package logging."""
        config = load_config(config_path)
        setup_logger(config.get("logging", {}) or {})
        return cls(settings=CalculatorSettings.from_config(config), hint_signal=hint_signal)

    def run(self, data: Union[CalculationInput, Mapping[str, Any]]) -> CalculationResult:
        """Return a success or failure result; never raises for bad input.

        A mapping that fails model validation, such as an unknown
        risk_kind, is reported as a missing or invalid field.
        """
        result: Optional[CalculationResult] = None
        if not isinstance(data, CalculationInput):
            try:
                data = CalculationInput.model_validate(data)
            except ValidationError:
                result = CalculationFailure.of(ErrorKind.MISSING_OR_INVALID_FIELD)
        if result is None:
            result = self._run(data)

        if isinstance(result, CalculationFailure):
            logger.debug("calculation_rejected", extra={"event": result.error_kind.value})
        else:
            logger.debug("calculation_ok lot_size=%.6f", result.lot_size, extra={"event": "calculation.ok"})
        return result

    def _run(self, data: CalculationInput) -> CalculationResult:
        if not self._has_required_fields(data):
            return CalculationFailure.of(ErrorKind.MISSING_OR_INVALID_FIELD)

        if resolve_pip_size(data.pair) is None:
            return CalculationFailure.of(ErrorKind.UNRESOLVABLE_PIP_SIZE)

        contract_size = data.contract_size or self.settings.default_contract_size
        rate = data.manual_conversion_rate
        pip_info = calculate_pip_value(data.pair, data.account_currency, contract_size, rate)
        if pip_info is None:
            return CalculationFailure.of(ErrorKind.INVALID_PAIR_FORMAT)

        self.hint_signal.publish(pip_info)

        if pip_info.needs_conversion and (rate is None or rate <= 0):
            return CalculationFailure.of(ErrorKind.AWAITING_CONVERSION_RATE)

        if pip_info.pip_value is None or pip_info.pip_value <= 0:
            return CalculationFailure.of(ErrorKind.UNCOMPUTABLE_PIP_VALUE)

        risk_amount = resolve_risk_amount(data.balance, data.risk_spec)
        if risk_amount <= 0:
            return CalculationFailure.of(ErrorKind.ZERO_OR_INVALID_RISK)
        if risk_amount > data.balance:
            return CalculationFailure.of(ErrorKind.RISK_EXCEEDS_BALANCE)

        lot_size = calculate_lot_size(risk_amount, data.stop_loss_pips, pip_info.pip_value)
        if lot_size is None or lot_size <= 0:
            return CalculationFailure.of(ErrorKind.UNCOMPUTABLE_LOT_SIZE)

        return CalculationSuccess(
            lot_size=lot_size,
            risk_amount=risk_amount,
            stop_loss_pips=data.stop_loss_pips,
            pip_value_per_lot=pip_info.pip_value,
            contract_size=contract_size,
            account_currency=data.account_currency,
        )

    @staticmethod
    def _has_required_fields(data: CalculationInput) -> bool:
        if data.balance is None or data.balance <= 0:
            return False
        # Length only; "123" passes and routes to the cross pair case.
        if len(data.account_currency) != 3:
            return False
        if data.risk_value is None or data.risk_value <= 0:
            return False
        if len(clean_pair_symbol(data.pair)) < MIN_PAIR_LENGTH:
            return False
        if data.stop_loss_pips is None or data.stop_loss_pips <= 0:
            return False
        return True


def run_calculation(
    data: Union[CalculationInput, Mapping[str, Any]],
    settings: Optional[CalculatorSettings] = None,
    hint_signal: Optional[ConversionHintSignal] = None,
) -> CalculationResult:
    """One-shot calculation with default settings unless given."""
    return CalculationOrchestrator(settings=settings, hint_signal=hint_signal).run(data)
