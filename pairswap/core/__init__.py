"""
Core swap pair algorithms
"""

from .admin import freeze, unfreeze, update_fee_percentage
from .invariants import INVARIANT_REGISTRY, check_all
from .liquidity import (
    DEFAULT_BOOTSTRAP_SHARES,
    add_liquidity,
    bootstrap,
    donate_liquidity,
    remove_liquidity,
)
from .swap import quote_exact_in, quote_exact_out, swap
from .types import BurnOutcome, Effect, Event, MintOutcome, SwapOutcome, SwapSide

__all__ = [
    "freeze",
    "unfreeze",
    "update_fee_percentage",
    "INVARIANT_REGISTRY",
    "check_all",
    "DEFAULT_BOOTSTRAP_SHARES",
    "add_liquidity",
    "bootstrap",
    "donate_liquidity",
    "remove_liquidity",
    "quote_exact_in",
    "quote_exact_out",
    "swap",
    "BurnOutcome",
    "Effect",
    "Event",
    "MintOutcome",
    "SwapOutcome",
    "SwapSide",
]
