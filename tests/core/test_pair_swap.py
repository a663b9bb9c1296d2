# [TESTER] v1

from __future__ import annotations

import pytest

from pairswap import core
from pairswap.core.types import Event, SwapSide
from pairswap.errors import (
    AmountTooSmall,
    EmptyVault,
    FixedPointOverflow,
    NonPositiveAmount,
    PoolFrozen,
    PreconditionViolation,
    TypeMismatch,
)
from pairswap.kernels.python.fixed_point import ONE
from pairswap.state.assets import AssetKind
from pairswap.state.bundle import TokenBundle
from pairswap.state.pool import PoolState, new_pool_state

FEE = 300_000


def _seeded(r1: int = 100 * ONE, r2: int = 100 * ONE, fee: int = FEE) -> PoolState:
    t1, t2 = AssetKind("T1"), AssetKind("T2")
    state = new_pool_state(token1_kind=t1, token2_kind=t2, share_symbol="LP", fee_percentage=fee)
    core.bootstrap(state, TokenBundle.of(t1.mint(r1), t2.mint(r2)))
    core.unfreeze(state)
    return state


class TestSwap:
    def test_reference_scenario(self) -> None:
        state = _seeded()
        outcome = core.swap(state, state.token1_kind.mint(10 * ONE), SwapSide.TOKEN1_FOR_TOKEN2)
        assert outcome.vault.kind is state.token2_kind
        assert outcome.vault.balance == 906_610_893
        amounts = state.pool_amounts()
        assert amounts.token1_amount == 11_000_000_000
        assert amounts.token2_amount == 9_093_389_107

        (trade,) = outcome.effects
        assert trade.event is Event.TRADE
        assert trade.side is SwapSide.TOKEN1_FOR_TOKEN2
        assert (trade.token1_amount, trade.token2_amount) == (997_000_000, 906_610_893)

    def test_reverse_direction_effect_amounts(self) -> None:
        state = _seeded()
        outcome = core.swap(state, state.token2_kind.mint(10 * ONE), SwapSide.TOKEN2_FOR_TOKEN1)
        (trade,) = outcome.effects
        assert (trade.token1_amount, trade.token2_amount) == (906_610_893, 997_000_000)
        assert state.pool_amounts().token2_amount == 11_000_000_000

    def test_frozen(self) -> None:
        state = _seeded()
        core.freeze(state)
        vault = state.token1_kind.mint(ONE)
        with pytest.raises(PoolFrozen):
            core.swap(state, vault, SwapSide.TOKEN1_FOR_TOKEN2)
        assert vault.balance == ONE
        core.unfreeze(state)
        assert core.swap(state, vault, SwapSide.TOKEN1_FOR_TOKEN2).vault.balance > 0

    def test_wrong_kind(self) -> None:
        state = _seeded()
        with pytest.raises(TypeMismatch):
            core.swap(state, state.token2_kind.mint(ONE), SwapSide.TOKEN1_FOR_TOKEN2)

    def test_empty_vault(self) -> None:
        state = _seeded()
        with pytest.raises(EmptyVault):
            core.swap(state, state.token1_kind.create_empty_vault(), SwapSide.TOKEN1_FOR_TOKEN2)

    def test_dust_leaves_pool_untouched(self) -> None:
        state = _seeded()
        before = state.pool_amounts()
        vault = state.token1_kind.mint(1)
        with pytest.raises(AmountTooSmall):
            core.swap(state, vault, SwapSide.TOKEN1_FOR_TOKEN2)
        assert state.pool_amounts() == before
        assert vault.balance == 1

    def test_swap_against_unseeded_pool(self) -> None:
        t1, t2 = AssetKind("T1"), AssetKind("T2")
        state = new_pool_state(token1_kind=t1, token2_kind=t2, share_symbol="LP", fee_percentage=FEE, start_frozen=False)
        with pytest.raises(AmountTooSmall):
            core.swap(state, t1.mint(ONE), SwapSide.TOKEN1_FOR_TOKEN2)


class TestOrdering:
    def _run(self, fee: int, steps) -> tuple[int, int]:
        state = _seeded(fee=fee)
        for side, amount in steps:
            kind = state.token1_kind if side == SwapSide.TOKEN1_FOR_TOKEN2 else state.token2_kind
            core.swap(state, kind.mint(amount), side)
        amounts = state.pool_amounts()
        return amounts.token1_amount, amounts.token2_amount

    def test_same_direction_order_independent_without_fee(self) -> None:
        a = (SwapSide.TOKEN1_FOR_TOKEN2, 10 * ONE)
        b = (SwapSide.TOKEN1_FOR_TOKEN2, 20 * ONE)
        assert self._run(0, [a, b]) == self._run(0, [b, a]) == (13_000_000_000, 7_692_307_693)

    def test_same_direction_with_fee_differs_in_output_reserve(self) -> None:
        # The gross input joins the reserve but only the net input is priced,
        # so a larger first trade leaves a slightly smaller output reserve.
        a = (SwapSide.TOKEN1_FOR_TOKEN2, 10 * ONE)
        b = (SwapSide.TOKEN1_FOR_TOKEN2, 20 * ONE)
        assert self._run(FEE, [a, b]) == (13_000_000_000, 7_697_959_072)
        assert self._run(FEE, [b, a]) == (13_000_000_000, 7_697_932_217)

    def test_opposite_directions_are_order_dependent(self) -> None:
        one_then_two = [(SwapSide.TOKEN1_FOR_TOKEN2, 10 * ONE), (SwapSide.TOKEN2_FOR_TOKEN1, 10 * ONE)]
        two_then_one = [(SwapSide.TOKEN2_FOR_TOKEN1, 10 * ONE), (SwapSide.TOKEN1_FOR_TOKEN2, 10 * ONE)]
        assert self._run(0, one_then_two) == (9_909_909_910, 10_090_909_091)
        assert self._run(0, two_then_one) == (10_090_909_091, 9_909_909_910)
        assert self._run(0, one_then_two) != self._run(0, two_then_one)


class TestQuotes:
    def test_quotes_both_directions(self) -> None:
        state = _seeded()
        assert core.quote_exact_in(state, 10 * ONE, SwapSide.TOKEN1_FOR_TOKEN2) == 909_090_909
        assert core.quote_exact_out(state, 10 * ONE, SwapSide.TOKEN2_FOR_TOKEN1) == 1_111_111_111

    def test_negative_amount_is_a_precondition_failure(self) -> None:
        state = _seeded()
        with pytest.raises(NonPositiveAmount):
            core.quote_exact_in(state, -1, SwapSide.TOKEN1_FOR_TOKEN2)
        with pytest.raises(NonPositiveAmount):
            core.quote_exact_out(state, -ONE, SwapSide.TOKEN2_FOR_TOKEN1)
        assert issubclass(NonPositiveAmount, PreconditionViolation)

    def test_quote_is_read_only(self) -> None:
        state = _seeded()
        before = state.pool_amounts()
        core.quote_exact_in(state, 10 * ONE, SwapSide.TOKEN1_FOR_TOKEN2)
        assert state.pool_amounts() == before


class TestFee:
    def test_update_fee_effect(self) -> None:
        state = _seeded()
        (effect,) = core.update_fee_percentage(state, 500_000)
        assert effect.event is Event.FEE_UPDATED
        assert effect.amount == 500_000
        assert state.fee_percentage == 500_000

    def test_fee_is_not_bounds_checked(self, caplog: pytest.LogCaptureFixture) -> None:
        state = _seeded()
        with caplog.at_level("WARNING", logger="pairswap.core.admin"):
            core.update_fee_percentage(state, 2 * ONE)
        assert state.fee_percentage == 2 * ONE
        assert "not below 1.0" in caplog.text
        with pytest.raises(FixedPointOverflow):
            core.swap(state, state.token1_kind.mint(ONE), SwapSide.TOKEN1_FOR_TOKEN2)
