"""
Constant-product pair kernel (v1 semantics).

Pure fixed-point functions for pricing and liquidity-share accounting:
- Quotes never apply the fee; the fee is charged by `swap_exact_in` on the
  gross input and stays in the input reserve.
- Every multiply and every divide truncates toward zero, in the order the
  formulas are written. The order is part of the semantics.
- Liquidity percentages carry four extra decimal digits (scaled by 10^4) so
  that small deposits do not truncate to zero.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import (
    AmountTooSmall,
    FixedPointOverflow,
    InsufficientReserve,
    LiquidityTooSmall,
    PoolInvariantError,
)
from .fixed_point import ONE, add, checked, div, mul, sub


# Liquidity percentages are scaled by 10^4 (four extra decimal digits).
PCT_SCALE = 10_000


@dataclass(frozen=True)
class SwapExactInResult:
    gross_in: int
    effective_in: int
    amount_out: int
    new_reserve_in: int
    new_reserve_out: int
    k_before: int
    k_after: int


@dataclass(frozen=True)
class MintSharesResult:
    pct1: int
    pct2: int
    liquidity_pct: int
    shares: int


@dataclass(frozen=True)
class BurnSharesResult:
    liquidity_pct: int
    amount1_out: int
    amount2_out: int


def quote_exact_in(*, amount: int, reserve_in: int, reserve_out: int) -> int:
    """
    Output for an exact input: `reserve_out * amount / (reserve_in + amount)`.
    """
    denominator = add(reserve_in, amount)
    if denominator == 0:
        raise InsufficientReserve("cannot quote against an empty pool")
    return div(mul(reserve_out, amount), denominator)


def quote_exact_out(*, amount: int, reserve_in: int, reserve_out: int) -> int:
    """
    Input for an exact output: `reserve_in * amount / (reserve_out - amount)`.

    Raises InsufficientReserve when `amount >= reserve_out`.
    """
    checked(amount, name="amount")
    if amount >= checked(reserve_out, name="reserve_out"):
        raise InsufficientReserve(
            f"not enough in the pool: amount ({amount}) >= reserve_out ({reserve_out})"
        )
    return div(mul(reserve_in, amount), sub(reserve_out, amount))


def effective_input(*, amount: int, fee_percentage: int) -> int:
    """`amount * (1 - fee_percentage)`; a fee above 1.0 underflows."""
    return mul(amount, sub(ONE, fee_percentage))


def swap_exact_in(
    *,
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    fee_percentage: int,
) -> SwapExactInResult:
    """
    Exact-in swap quote + post-state.

    The full gross input joins the input reserve; only the effective
    (post-fee) input is priced on the curve.

    Raises AmountTooSmall if the output rounds to zero.
    """
    effective_in = effective_input(amount=amount_in, fee_percentage=fee_percentage)
    amount_out = quote_exact_in(amount=effective_in, reserve_in=reserve_in, reserve_out=reserve_out)
    if amount_out <= 0:
        raise AmountTooSmall(f"exchanged amount too small: input {amount_in} yields 0")

    new_reserve_in = add(reserve_in, amount_in)
    new_reserve_out = sub(reserve_out, amount_out)

    k_before = reserve_in * reserve_out
    k_after = new_reserve_in * new_reserve_out
    if k_after < k_before:
        raise PoolInvariantError(["inv_constant_product_non_decreasing"])

    return SwapExactInResult(
        gross_in=amount_in,
        effective_in=effective_in,
        amount_out=amount_out,
        new_reserve_in=new_reserve_in,
        new_reserve_out=new_reserve_out,
        k_before=k_before,
        k_after=k_after,
    )


def liquidity_percentage(*, amount: int, reserve: int) -> int:
    """
    `amount * 10^4 / reserve` as a fixed-point percentage.

    `amount * 10^4` is exact in fixed point, so the intermediate is kept as an
    unbounded int; only the quotient has to be representable.
    """
    checked(amount, name="amount")
    if checked(reserve, name="reserve") == 0:
        raise FixedPointOverflow("division by zero")
    return checked((amount * PCT_SCALE * ONE) // reserve, name="liquidity_pct")


def apply_percentage(value: int, liquidity_pct: int) -> int:
    """`value * liquidity_pct / 10^4`, truncating after the multiply and the divide."""
    product = (checked(value, name="value") * checked(liquidity_pct, name="liquidity_pct")) // ONE
    return checked(product // PCT_SCALE, name="scaled")


def mint_shares(
    *,
    amount1: int,
    amount2: int,
    reserve1: int,
    reserve2: int,
    total_supply: int,
) -> MintSharesResult:
    """
    Shares issued for a paired deposit.

    The scarcer side's ratio decides issuance:
        liquidity_pct = min(amount1 * 10^4 / reserve1, amount2 * 10^4 / reserve2)
        shares = total_supply * liquidity_pct / 10^4

    Raises LiquidityTooSmall if `liquidity_pct` rounds to zero.
    """
    pct1 = liquidity_percentage(amount=amount1, reserve=reserve1)
    pct2 = liquidity_percentage(amount=amount2, reserve=reserve2)
    liquidity_pct = min(pct1, pct2)
    if liquidity_pct <= 0:
        raise LiquidityTooSmall(f"liquidity too small: pct1={pct1} pct2={pct2}")

    shares = apply_percentage(total_supply, liquidity_pct)
    return MintSharesResult(pct1=pct1, pct2=pct2, liquidity_pct=liquidity_pct, shares=shares)


def burn_shares(
    *,
    share_amount: int,
    reserve1: int,
    reserve2: int,
    total_supply: int,
) -> BurnSharesResult:
    """
    Reserve amounts released for redeemed shares.

        liquidity_pct = share_amount * 10^4 / total_supply
        amount_i_out = reserve_i * liquidity_pct / 10^4

    Raises LiquidityTooSmall if `liquidity_pct` rounds to zero.
    """
    liquidity_pct = liquidity_percentage(amount=share_amount, reserve=total_supply)
    if liquidity_pct <= 0:
        raise LiquidityTooSmall(f"liquidity too small: {share_amount} of {total_supply}")

    return BurnSharesResult(
        liquidity_pct=liquidity_pct,
        amount1_out=apply_percentage(reserve1, liquidity_pct),
        amount2_out=apply_percentage(reserve2, liquidity_pct),
    )
