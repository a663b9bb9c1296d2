"""
Swap engine: quotes and exact-in swaps against the pool reserves.

Swap Design:
- Fee realization: the full input vault joins the input reserve, but only
  `balance * (1 - fee_percentage)` is priced on the curve. The unconverted
  remainder stays in the reserve and accrues to liquidity providers.
- Atomicity: every guard and every amount is computed before the first
  vault moves.
- Invariant: reserve1 * reserve2 never decreases across a swap.
"""

from __future__ import annotations

import logging
from typing import Tuple

from ..errors import EmptyVault, NonPositiveAmount, PoolFrozen, TypeMismatch
from ..kernels.python import cpmm_pair_v1 as kernel
from ..kernels.python.fixed_point import format_amount
from ..state.assets import AssetVault
from ..state.pool import PoolState
from .types import Effect, Event, SwapOutcome, SwapSide

logger = logging.getLogger(__name__)


def _reserves_for(state: PoolState, side: SwapSide) -> Tuple[AssetVault, AssetVault]:
    """(reserve_in, reserve_out) for a swap direction."""
    if side == SwapSide.TOKEN1_FOR_TOKEN2:
        return state.reserve1, state.reserve2
    if side == SwapSide.TOKEN2_FOR_TOKEN1:
        return state.reserve2, state.reserve1
    raise ValueError(f"unknown swap side: {side!r}")


def _require_quote_amount(amount: int) -> None:
    if isinstance(amount, int) and not isinstance(amount, bool) and amount < 0:
        raise NonPositiveAmount(f"quote amount must be non-negative: {amount}")


def quote_exact_in(state: PoolState, amount: int, side: SwapSide) -> int:
    """Output for an exact input in direction `side`. The fee is not applied."""
    _require_quote_amount(amount)
    reserve_in, reserve_out = _reserves_for(state, side)
    quote = kernel.quote_exact_in(amount=amount, reserve_in=reserve_in.balance, reserve_out=reserve_out.balance)
    logger.debug("quote exact-in side=%d amount=%s -> %s", side, format_amount(amount), format_amount(quote))
    return quote


def quote_exact_out(state: PoolState, amount: int, side: SwapSide) -> int:
    """Input needed for an exact output in direction `side`. The fee is not applied."""
    _require_quote_amount(amount)
    reserve_in, reserve_out = _reserves_for(state, side)
    quote = kernel.quote_exact_out(amount=amount, reserve_in=reserve_in.balance, reserve_out=reserve_out.balance)
    logger.debug("quote exact-out side=%d amount=%s -> %s", side, format_amount(amount), format_amount(quote))
    return quote


def swap(state: PoolState, from_vault: AssetVault, side: SwapSide) -> SwapOutcome:
    """
    Swap the whole of `from_vault` for the counter asset.

    Args:
        state: Pool state (caller holds `state.lock`)
        from_vault: Input vault; consumed on success, untouched on failure
        side: Swap direction

    Returns:
        SwapOutcome with the output vault and a Trade effect

    Raises:
        PoolFrozen: If the pool is frozen
        TypeMismatch: If `from_vault` is not of the input kind
        EmptyVault: If `from_vault` has a zero balance
        AmountTooSmall: If the output rounds to zero
    """
    if state.is_frozen:
        raise PoolFrozen("pool is frozen")

    reserve_in, reserve_out = _reserves_for(state, side)
    if from_vault.kind is not reserve_in.kind:
        raise TypeMismatch(
            f"side {side.name} expects {reserve_in.kind.symbol}, got {from_vault.kind.symbol}"
        )
    gross_in = from_vault.balance
    if gross_in <= 0:
        raise EmptyVault("empty token vault")

    res = kernel.swap_exact_in(
        reserve_in=reserve_in.balance,
        reserve_out=reserve_out.balance,
        amount_in=gross_in,
        fee_percentage=state.fee_percentage,
    )

    reserve_in.deposit(from_vault)
    out_vault = reserve_out.withdraw(res.amount_out)

    if side == SwapSide.TOKEN1_FOR_TOKEN2:
        token1_amount, token2_amount = res.effective_in, res.amount_out
    else:
        token1_amount, token2_amount = res.amount_out, res.effective_in

    logger.info(
        "trade side=%d in=%s (effective %s) out=%s",
        side,
        format_amount(gross_in),
        format_amount(res.effective_in),
        format_amount(res.amount_out),
    )
    effect = Effect(event=Event.TRADE, token1_amount=token1_amount, token2_amount=token2_amount, side=side)
    return SwapOutcome(vault=out_vault, effects=(effect,))
