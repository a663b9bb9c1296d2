"""Invariant checkers for the pool state.

Each function returns True when the invariant holds, and `check_all()`
returns the list of violated invariant IDs (empty = all pass).

Note: these are single-state predicates. The constant-product check relates
a pre- and post-state and lives in the swap kernel.
"""

from __future__ import annotations

from typing import Callable

from ..kernels.python.fixed_point import MAX_AMOUNT
from ..state.pool import PoolState


def inv_reserve1_kind(s: PoolState) -> bool:
    return s.reserve1.kind is s.token1_kind


def inv_reserve2_kind(s: PoolState) -> bool:
    return s.reserve2.kind is s.token2_kind


def inv_reserves_live(s: PoolState) -> bool:
    return s.reserve1.is_live and s.reserve2.is_live


def inv_reserves_in_range(s: PoolState) -> bool:
    if not inv_reserves_live(s):
        return False
    return 0 <= s.reserve1.balance <= MAX_AMOUNT and 0 <= s.reserve2.balance <= MAX_AMOUNT


def inv_supply_in_range(s: PoolState) -> bool:
    return 0 <= s.total_supply <= MAX_AMOUNT


def inv_supply_backed(s: PoolState) -> bool:
    if s.total_supply == 0:
        return True
    if not inv_reserves_live(s):
        return False
    return s.reserve1.balance > 0 and s.reserve2.balance > 0


def inv_fee_representable(s: PoolState) -> bool:
    return isinstance(s.fee_percentage, int) and 0 <= s.fee_percentage <= MAX_AMOUNT


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[PoolState], bool]] = {
    "inv_reserve1_kind": inv_reserve1_kind,
    "inv_reserve2_kind": inv_reserve2_kind,
    "inv_reserves_live": inv_reserves_live,
    "inv_reserves_in_range": inv_reserves_in_range,
    "inv_supply_in_range": inv_supply_in_range,
    "inv_supply_backed": inv_supply_backed,
    "inv_fee_representable": inv_fee_representable,
}


def check_all(state: PoolState) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]
