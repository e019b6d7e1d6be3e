"""Calculator input and result models."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sltolot.risk.risk_amount import RiskKind, RiskSpec


def _coerce_number(value: Any) -> Optional[float]:
    """Map raw form values to a float, or None when absent or unreadable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) else number
    return None


class CalculationInput(BaseModel):
    """Raw calculator inputs as captured from the form."""

    model_config = ConfigDict(frozen=True)

    balance: Optional[float] = None
    account_currency: str = ""
    risk_kind: RiskKind = RiskKind.PERCENT
    risk_value: Optional[float] = None
    pair: str = ""
    stop_loss_pips: Optional[float] = None
    contract_size: Optional[float] = None
    manual_conversion_rate: Optional[float] = None

    @field_validator(
        "balance",
        "risk_value",
        "stop_loss_pips",
        "contract_size",
        "manual_conversion_rate",
        mode="before",
    )
    @classmethod
    def _numeric(cls, value: Any) -> Optional[float]:
        return _coerce_number(value)

    @field_validator("account_currency", "pair", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("risk_kind", mode="before")
    @classmethod
    def _risk_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("contract_size")
    @classmethod
    def _positive_contract_size(cls, value: Optional[float]) -> Optional[float]:
        if value is None or value <= 0:
            return None
        return value

    @property
    def risk_spec(self) -> Optional[RiskSpec]:
        if self.risk_value is None:
            return None
        return RiskSpec(kind=self.risk_kind, value=self.risk_value)


class ErrorKind(str, Enum):
    MISSING_OR_INVALID_FIELD = "missing_or_invalid_field"
    UNRESOLVABLE_PIP_SIZE = "unresolvable_pip_size"
    INVALID_PAIR_FORMAT = "invalid_pair_format"
    AWAITING_CONVERSION_RATE = "awaiting_conversion_rate"
    UNCOMPUTABLE_PIP_VALUE = "uncomputable_pip_value"
    ZERO_OR_INVALID_RISK = "zero_or_invalid_risk"
    RISK_EXCEEDS_BALANCE = "risk_exceeds_balance"
    UNCOMPUTABLE_LOT_SIZE = "uncomputable_lot_size"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ErrorKind.MISSING_OR_INVALID_FIELD: "Fill in the fields above to see your lot size",
    ErrorKind.UNRESOLVABLE_PIP_SIZE: "Could not determine pip size. Check the currency pair.",
    ErrorKind.INVALID_PAIR_FORMAT: "Invalid currency pair format.",
    ErrorKind.AWAITING_CONVERSION_RATE: "Please enter the conversion rate shown above.",
    ErrorKind.UNCOMPUTABLE_PIP_VALUE: "Could not calculate pip value. Check your inputs.",
    ErrorKind.ZERO_OR_INVALID_RISK: "Risk amount is zero or invalid.",
    ErrorKind.RISK_EXCEEDS_BALANCE: "Risk amount exceeds account balance.",
    ErrorKind.UNCOMPUTABLE_LOT_SIZE: "Could not calculate lot size. Check your inputs.",
}

_AWAITING_INPUT = {ErrorKind.MISSING_OR_INVALID_FIELD, ErrorKind.AWAITING_CONVERSION_RATE}


class CalculationSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    lot_size: float
    risk_amount: float
    stop_loss_pips: float
    pip_value_per_lot: float
    contract_size: float
    account_currency: str

    @property
    def ok(self) -> bool:
        return True


class CalculationFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    error_kind: ErrorKind
    error_message: str = Field(default="")

    @classmethod
    def of(cls, kind: ErrorKind) -> "CalculationFailure":
        return cls(error_kind=kind, error_message=kind.message)

    @property
    def ok(self) -> bool:
        return False

    @property
    def awaiting_input(self) -> bool:
        """True for the empty-state prompt and a missing conversion rate."""
        return self.error_kind in _AWAITING_INPUT


CalculationResult = Union[CalculationSuccess, CalculationFailure]
