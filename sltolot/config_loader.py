"""Configuration loading utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONTRACT_SIZE = 100_000.0


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML config file and return it as a dictionary."""
    config_path = Path(path)
    with config_path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


@dataclass(frozen=True)
class CalculatorSettings:
    """Defaults applied when the caller leaves a field empty."""

    default_contract_size: float = DEFAULT_CONTRACT_SIZE

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CalculatorSettings":
        calc_cfg = config.get("calculator", {}) or {}
        contract_size = float(calc_cfg.get("default_contract_size", DEFAULT_CONTRACT_SIZE))
        if contract_size <= 0:
            raise ValueError(f"default_contract_size must be > 0, got {contract_size}")
        return cls(default_contract_size=contract_size)


def load_settings(path: str | Path) -> CalculatorSettings:
    return CalculatorSettings.from_config(load_config(path))
