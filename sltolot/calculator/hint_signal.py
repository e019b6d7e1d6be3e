"""Conversion-rate hint published to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from sltolot.risk.pip_value import PipValueResult


@dataclass(frozen=True)
class ConversionHint:
    visible: bool
    hint_text: str = ""


HintListener = Callable[[ConversionHint], None]


class ConversionHintSignal:
    """Holds the latest hint and notifies listeners on every update."""

    def __init__(self) -> None:
        self._current = ConversionHint(visible=False)
        self._listeners: List[HintListener] = []

    @property
    def current(self) -> ConversionHint:
        return self._current

    def subscribe(self, listener: HintListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: HintListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, pip_value: Optional[PipValueResult]) -> ConversionHint:
        if pip_value is not None and pip_value.needs_conversion:
            hint = ConversionHint(visible=True, hint_text=pip_value.hint)
        else:
            hint = ConversionHint(visible=False)
        self._current = hint
        for listener in list(self._listeners):
            listener(hint)
        return hint
