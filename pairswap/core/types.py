"""Record types for the swap pair core.

All records are frozen dataclasses. Amounts are raw fixed-point ints
(`1.0 == 100_000_000`).

Mint and burn outcomes carry no effects: share supply events come from the
share kind's listener, which the pair shell subscribes to.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, unique
from typing import Optional, Tuple

from ..state.assets import AssetVault
from ..state.bundle import TokenBundle


@unique
class Event(Enum):
    """One member per notification handed to the event sink."""
    TOKENS_INITIALIZED = "TokensInitialized"
    TOKENS_WITHDRAWN = "TokensWithdrawn"
    TOKENS_DEPOSITED = "TokensDeposited"
    TOKENS_MINTED = "TokensMinted"
    TOKENS_BURNED = "TokensBurned"
    FEE_UPDATED = "FeeUpdated"
    TRADE = "Trade"


@unique
class SwapSide(IntEnum):
    TOKEN1_FOR_TOKEN2 = 1
    TOKEN2_FOR_TOKEN1 = 2


@dataclass(frozen=True)
class Effect:
    """A notification emitted after a successful operation."""

    event: Event
    amount: int = 0               # share events, fee updates
    token1_amount: int = 0        # trade
    token2_amount: int = 0        # trade
    side: Optional[SwapSide] = None


@dataclass(frozen=True)
class SwapOutcome:
    vault: AssetVault
    effects: Tuple[Effect, ...] = ()


@dataclass(frozen=True)
class MintOutcome:
    shares: AssetVault


@dataclass(frozen=True)
class BurnOutcome:
    bundle: TokenBundle
