"""
Liquidity management: bootstrap, add/remove/donate liquidity.

Share math (see `kernels/python/cpmm_pair_v1.py`):
    add:    shares = total_supply * min(d1 * 10^4 / r1, d2 * 10^4 / r2) / 10^4
    remove: out_i  = r_i * (shares * 10^4 / total_supply) / 10^4

Every guard reads balances without moving anything, so a rejected call
leaves the caller's bundle or share vault intact.
"""

from __future__ import annotations

import logging

from ..errors import (
    AlreadyInitialized,
    CannotRemoveAllLiquidity,
    EmptyVault,
    NotInitialized,
    TypeMismatch,
)
from ..kernels.python import cpmm_pair_v1 as kernel
from ..kernels.python.fixed_point import ONE, add, checked, format_amount
from ..state.assets import AssetVault
from ..state.bundle import TokenBundle
from ..state.pool import PoolState
from .types import BurnOutcome, MintOutcome

logger = logging.getLogger(__name__)

# Shares minted by bootstrap unless configured otherwise.
DEFAULT_BOOTSTRAP_SHARES = ONE


def _require_pool_bundle(state: PoolState, bundle: TokenBundle) -> None:
    if not isinstance(bundle, TokenBundle):
        raise TypeMismatch(f"expected a TokenBundle, got {type(bundle).__name__}")
    if bundle.token1_kind is not state.token1_kind or bundle.token2_kind is not state.token2_kind:
        raise TypeMismatch(
            f"bundle holds ({bundle.token1_kind.symbol}, {bundle.token2_kind.symbol}), "
            f"pool trades ({state.token1_kind.symbol}, {state.token2_kind.symbol})"
        )


def _require_two_sided(bundle: TokenBundle) -> None:
    if bundle.token1_balance <= 0:
        raise EmptyVault("empty token1 vault")
    if bundle.token2_balance <= 0:
        raise EmptyVault("empty token2 vault")


def _deposit_bundle(state: PoolState, bundle: TokenBundle) -> None:
    """Move both sides of `bundle` into the reserves and consume the bundle."""
    checked(add(state.reserve1.balance, bundle.token1_balance), name="reserve1")
    checked(add(state.reserve2.balance, bundle.token2_balance), name="reserve2")
    state.reserve1.deposit(bundle.withdraw_token1())
    state.reserve2.deposit(bundle.withdraw_token2())
    bundle.destroy()


def bootstrap(state: PoolState, bundle: TokenBundle, shares: int = DEFAULT_BOOTSTRAP_SHARES) -> MintOutcome:
    """
    Seed the pool and mint the initial share supply.

    The minted amount is fixed (`shares`, 1.0 by default) regardless of the
    deposit, which pins the initial share-to-reserve exchange rate. Only the
    admin surface exposes this.

    Raises:
        AlreadyInitialized: If shares are already outstanding
        EmptyVault: If either side of the bundle is empty
    """
    _require_pool_bundle(state, bundle)
    if state.total_supply != 0:
        raise AlreadyInitialized("pool already initialized")
    _require_two_sided(bundle)
    if checked(shares, name="shares") <= 0:
        raise ValueError("bootstrap share amount must be positive")

    amount1, amount2 = bundle.token1_balance, bundle.token2_balance
    _deposit_bundle(state, bundle)
    share_vault = state.share_kind.mint(shares)

    logger.info(
        "bootstrap: reserves=(%s, %s) shares=%s",
        format_amount(state.reserve1.balance),
        format_amount(state.reserve2.balance),
        format_amount(shares),
    )
    logger.debug("bootstrap deposit was (%s, %s)", format_amount(amount1), format_amount(amount2))
    return MintOutcome(shares=share_vault)


def add_liquidity(state: PoolState, bundle: TokenBundle) -> MintOutcome:
    """
    Deposit a paired bundle and mint shares for the scarcer side's ratio.

    Excess on the richer side is still absorbed into the reserves.

    Raises:
        NotInitialized: If the pool has not been bootstrapped
        EmptyVault: If either side of the bundle is empty
        LiquidityTooSmall: If the liquidity percentage rounds to zero
    """
    _require_pool_bundle(state, bundle)
    total_supply = state.total_supply
    if total_supply <= 0:
        raise NotInitialized("pair must be initialized by admin first")
    _require_two_sided(bundle)

    res = kernel.mint_shares(
        amount1=bundle.token1_balance,
        amount2=bundle.token2_balance,
        reserve1=state.reserve1.balance,
        reserve2=state.reserve2.balance,
        total_supply=total_supply,
    )
    checked(add(total_supply, res.shares), name="total_supply")

    _deposit_bundle(state, bundle)
    share_vault = state.share_kind.mint(res.shares)

    logger.info(
        "add liquidity: pct=(%s, %s) minted=%s supply=%s",
        format_amount(res.pct1),
        format_amount(res.pct2),
        format_amount(res.shares),
        format_amount(state.total_supply),
    )
    return MintOutcome(shares=share_vault)


def remove_liquidity(state: PoolState, share_vault: AssetVault) -> BurnOutcome:
    """
    Burn shares and release the matching fraction of both reserves.

    Redeeming the entire outstanding supply is refused.

    Raises:
        TypeMismatch: If `share_vault` is not this pool's share kind
        EmptyVault: If `share_vault` has a zero balance
        CannotRemoveAllLiquidity: If `share_vault` holds the whole supply
        LiquidityTooSmall: If the liquidity percentage rounds to zero
    """
    if not isinstance(share_vault, AssetVault) or share_vault.kind is not state.share_kind:
        raise TypeMismatch(f"expected a {state.share_kind.symbol} share vault")
    balance = share_vault.balance
    total_supply = state.total_supply
    if balance <= 0:
        raise EmptyVault("empty liquidity token vault")
    if balance >= total_supply:
        raise CannotRemoveAllLiquidity("cannot remove all liquidity")

    res = kernel.burn_shares(
        share_amount=balance,
        reserve1=state.reserve1.balance,
        reserve2=state.reserve2.balance,
        total_supply=total_supply,
    )

    share_vault.destroy()
    token1 = state.reserve1.withdraw(res.amount1_out)
    token2 = state.reserve2.withdraw(res.amount2_out)

    logger.info(
        "remove liquidity: burned=%s out=(%s, %s) supply=%s",
        format_amount(balance),
        format_amount(res.amount1_out),
        format_amount(res.amount2_out),
        format_amount(state.total_supply),
    )
    return BurnOutcome(bundle=TokenBundle.of(token1, token2))


def donate_liquidity(state: PoolState, bundle: TokenBundle) -> None:
    """Deposit a bundle into the reserves without minting shares."""
    _require_pool_bundle(state, bundle)
    amount1, amount2 = bundle.token1_balance, bundle.token2_balance
    _deposit_bundle(state, bundle)
    logger.info("donate liquidity: (%s, %s)", format_amount(amount1), format_amount(amount2))
