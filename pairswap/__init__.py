"""`pairswap`: a two-asset constant-product swap pair.

- integer fixed-point amounts (8 fractional digits, `1.0 == 100_000_000`),
- move-only asset vaults and token bundles,
- fail-fast guards that run before any reserve moves.

Public API:
- `SwapPair.deploy(config) -> (SwapPair, PoolAdmin)`
- `PoolAdmin.create_swap_proxy() -> SwapProxy`
- `to_amount(...)` / `format_amount(...)`
"""

from .core.types import Effect, Event, SwapSide
from .errors import (
    AlreadyInitialized,
    AmountTooSmall,
    CannotRemoveAllLiquidity,
    EmptyVault,
    FixedPointOverflow,
    InsufficientBalance,
    InsufficientReserve,
    LiquidityTooSmall,
    NonPositiveAmount,
    NotInitialized,
    PoolFrozen,
    PoolInvariantError,
    PreconditionViolation,
    SwapPairError,
    TypeMismatch,
    Unauthorized,
    VaultConsumed,
)
from .integration import (
    LoggingEventSink,
    PoolAdmin,
    PoolConfig,
    RecordingEventSink,
    SwapPair,
    SwapProxy,
    load_pool_config,
    pool_config_from_mapping,
)
from .kernels.python.fixed_point import ONE, format_amount, to_amount
from .state import AssetKind, AssetVault, LiquidityShareVault, PoolAmounts, TokenBundle

__all__ = [
    "Effect",
    "Event",
    "SwapSide",
    "AlreadyInitialized",
    "AmountTooSmall",
    "CannotRemoveAllLiquidity",
    "EmptyVault",
    "FixedPointOverflow",
    "InsufficientBalance",
    "InsufficientReserve",
    "LiquidityTooSmall",
    "NonPositiveAmount",
    "NotInitialized",
    "PoolFrozen",
    "PoolInvariantError",
    "PreconditionViolation",
    "SwapPairError",
    "TypeMismatch",
    "Unauthorized",
    "VaultConsumed",
    "LoggingEventSink",
    "PoolAdmin",
    "PoolConfig",
    "RecordingEventSink",
    "SwapPair",
    "SwapProxy",
    "load_pool_config",
    "pool_config_from_mapping",
    "ONE",
    "format_amount",
    "to_amount",
    "AssetKind",
    "AssetVault",
    "LiquidityShareVault",
    "PoolAmounts",
    "TokenBundle",
]
