"""
Pool state for a two-asset swap pair.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..kernels.python.fixed_point import checked, format_amount
from .assets import AssetKind, AssetVault, ShareKind, SupplyListener


class PoolStatus(Enum):
    FROZEN = "frozen"
    ACTIVE = "active"


@dataclass(frozen=True)
class PoolAmounts:
    token1_amount: int
    token2_amount: int


@dataclass
class PoolState:
    """
    Singleton state of one pair.

    The reserves are vaults custodied by the pool. `total_supply` is read
    through to the share kind, so minting and destroying share vaults are
    the only ways it changes.

    `lock` serializes every read-modify-write against this state; the share
    kind is constructed with the same lock.
    """

    token1_kind: AssetKind
    token2_kind: AssetKind
    share_kind: ShareKind
    reserve1: AssetVault
    reserve2: AssetVault
    fee_percentage: int
    is_frozen: bool = True
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def total_supply(self) -> int:
        return self.share_kind.total_supply

    @property
    def status(self) -> PoolStatus:
        return PoolStatus.FROZEN if self.is_frozen else PoolStatus.ACTIVE

    def pool_amounts(self) -> PoolAmounts:
        return PoolAmounts(token1_amount=self.reserve1.balance, token2_amount=self.reserve2.balance)


def new_pool_state(
    *,
    token1_kind: AssetKind,
    token2_kind: AssetKind,
    share_symbol: str,
    fee_percentage: int,
    start_frozen: bool = True,
    share_listener: Optional[SupplyListener] = None,
) -> PoolState:
    """
    Build an empty pool: zero reserves, zero share supply.

    Raises:
        ValueError: If both sides are the same asset kind
    """
    if token1_kind is token2_kind:
        raise ValueError(f"pair assets must be distinct: {token1_kind.symbol}")
    checked(fee_percentage, name="fee_percentage")

    lock = threading.RLock()
    share_kind = ShareKind(share_symbol, lock=lock, listener=share_listener)
    return PoolState(
        token1_kind=token1_kind,
        token2_kind=token2_kind,
        share_kind=share_kind,
        reserve1=token1_kind.create_empty_vault(),
        reserve2=token2_kind.create_empty_vault(),
        fee_percentage=fee_percentage,
        is_frozen=start_frozen,
        lock=lock,
    )


def state_to_dict(state: PoolState) -> Dict[str, Any]:
    """Plain-dict view of the pool (amounts rendered as decimal strings)."""
    with state.lock:
        return {
            "token1_symbol": state.token1_kind.symbol,
            "token2_symbol": state.token2_kind.symbol,
            "share_symbol": state.share_kind.symbol,
            "token1_amount": format_amount(state.reserve1.balance),
            "token2_amount": format_amount(state.reserve2.balance),
            "total_supply": format_amount(state.total_supply),
            "fee_percentage": format_amount(state.fee_percentage),
            "is_frozen": state.is_frozen,
            "status": state.status.value,
        }
