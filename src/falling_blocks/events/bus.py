from __future__ import annotations

from typing import Callable, Dict

from blinker import Signal


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""

    def __init__(self) -> None:
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Callable[..., None]) -> None:
        sig = self._signals.setdefault(name, Signal(name))
        # Strong reference so bound methods of short-lived hosts keep receiving.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn: Callable[..., None]) -> None:
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload) -> None:
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)
