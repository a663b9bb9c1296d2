"""
State management for the swap pair
"""

from .assets import AssetKind, AssetVault, LiquidityShareVault, ShareKind
from .bundle import TokenBundle
from .pool import PoolAmounts, PoolState, PoolStatus, new_pool_state, state_to_dict

__all__ = [
    "AssetKind",
    "AssetVault",
    "LiquidityShareVault",
    "ShareKind",
    "TokenBundle",
    "PoolAmounts",
    "PoolState",
    "PoolStatus",
    "new_pool_state",
    "state_to_dict",
]
