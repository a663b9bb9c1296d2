"""
Event sinks.

A sink is any callable taking an `Effect`. Delivery is fire-and-forget: the
pair has already committed the operation when the sink runs, and a failing
sink never rolls anything back.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from ..core.types import Effect, Event
from ..kernels.python.fixed_point import format_amount

logger = logging.getLogger(__name__)

EventSink = Callable[[Effect], None]


def describe(effect: Effect) -> str:
    if effect.event == Event.TRADE:
        side = int(effect.side) if effect.side is not None else 0
        return (
            f"{effect.event.value} side={side} "
            f"token1={format_amount(effect.token1_amount)} token2={format_amount(effect.token2_amount)}"
        )
    return f"{effect.event.value} amount={format_amount(effect.amount)}"


class LoggingEventSink:
    """Write every effect to a logger at INFO."""

    def __init__(self, name: str = "pairswap.events") -> None:
        self._logger = logging.getLogger(name)

    def __call__(self, effect: Effect) -> None:
        self._logger.info("%s", describe(effect))


class RecordingEventSink:
    """Keep effects in memory (tests, demos)."""

    def __init__(self) -> None:
        self.effects: List[Effect] = []

    def __call__(self, effect: Effect) -> None:
        self.effects.append(effect)

    def of_type(self, event: Event) -> List[Effect]:
        return [e for e in self.effects if e.event == event]

    def clear(self) -> None:
        self.effects.clear()


def deliver(sink: EventSink, effect: Effect) -> None:
    """Hand `effect` to `sink`; sink failures are logged, not raised."""
    try:
        sink(effect)
    except Exception:
        logger.warning("event sink failed for %s", effect.event.value, exc_info=True)
