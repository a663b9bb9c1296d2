"""
Privileged pool transitions: freeze/unfreeze and fee updates.

These functions only mutate state. Who may call them is decided by the
capability layer (`integration/access.py`).
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..kernels.python.fixed_point import ONE, checked, format_amount
from ..state.pool import PoolState
from .types import Effect, Event

logger = logging.getLogger(__name__)


def freeze(state: PoolState) -> None:
    if not state.is_frozen:
        logger.info("pool frozen")
    state.is_frozen = True


def unfreeze(state: PoolState) -> None:
    if state.is_frozen:
        logger.info("pool unfrozen")
    state.is_frozen = False


def update_fee_percentage(state: PoolState, fee_percentage: int) -> Tuple[Effect, ...]:
    """
    Set the trading fee.

    The rate is deliberately not bounds-checked beyond being a representable
    amount. A rate of 1.0 or more makes every later swap fail (the effective
    input rounds to zero or underflows), so it is logged as a warning.
    """
    checked(fee_percentage, name="fee_percentage")
    if fee_percentage >= ONE:
        logger.warning(
            "fee percentage %s is not below 1.0; swaps will fail until it is lowered",
            format_amount(fee_percentage),
        )
    state.fee_percentage = fee_percentage
    logger.info("fee percentage updated to %s", format_amount(fee_percentage))
    return (Effect(event=Event.FEE_UPDATED, amount=fee_percentage),)
