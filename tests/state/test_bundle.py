"""Tests for pairswap/state/bundle.py."""

from __future__ import annotations

import copy

import pytest

from pairswap.errors import TypeMismatch, VaultConsumed
from pairswap.kernels.python.fixed_point import ONE
from pairswap.state.assets import AssetKind
from pairswap.state.bundle import TokenBundle
from pairswap.state.pool import PoolStatus, new_pool_state, state_to_dict


@pytest.fixture
def kinds():
    return AssetKind("AAA"), AssetKind("BBB")


class TestTokenBundle:
    def test_of_consumes_both(self, kinds) -> None:
        a, b = kinds
        va, vb = a.mint(ONE), b.mint(2 * ONE)
        bundle = TokenBundle.of(va, vb)
        assert (bundle.token1_balance, bundle.token2_balance) == (ONE, 2 * ONE)
        assert not va.is_live and not vb.is_live

    def test_of_rejects_consumed_vault(self, kinds) -> None:
        a, b = kinds
        va = a.mint(ONE)
        a.create_empty_vault().deposit(va)
        vb = b.mint(ONE)
        with pytest.raises(VaultConsumed):
            TokenBundle.of(va, vb)
        assert vb.is_live

    def test_same_kind_twice(self, kinds) -> None:
        a, _ = kinds
        with pytest.raises(ValueError):
            TokenBundle(a, a)

    def test_deposit_wrong_side(self, kinds) -> None:
        a, b = kinds
        bundle = TokenBundle(a, b)
        with pytest.raises(TypeMismatch):
            bundle.deposit_token1(b.mint(ONE))

    def test_withdraw_leaves_empty_vault(self, kinds) -> None:
        a, b = kinds
        bundle = TokenBundle.of(a.mint(ONE), b.mint(ONE))
        out = bundle.withdraw_token1()
        assert out.balance == ONE
        assert bundle.token1_balance == 0
        assert bundle.token2_balance == ONE

    def test_destroy_retires_remaining_balances(self, kinds) -> None:
        a, b = kinds
        bundle = TokenBundle.of(a.mint(ONE), b.mint(ONE))
        bundle.destroy()
        assert a.total_supply == 0 and b.total_supply == 0
        with pytest.raises(VaultConsumed):
            bundle.token1_balance

    def test_copy_refused(self, kinds) -> None:
        with pytest.raises(TypeError):
            copy.copy(TokenBundle(*kinds))


class TestPoolState:
    def test_new_pool_is_empty_and_frozen(self, kinds) -> None:
        a, b = kinds
        state = new_pool_state(token1_kind=a, token2_kind=b, share_symbol="LP", fee_percentage=300_000)
        assert state.pool_amounts().token1_amount == 0
        assert state.total_supply == 0
        assert state.status is PoolStatus.FROZEN
        assert state.share_kind._lock is state.lock

    def test_distinct_kinds_required(self, kinds) -> None:
        a, _ = kinds
        with pytest.raises(ValueError, match="distinct"):
            new_pool_state(token1_kind=a, token2_kind=a, share_symbol="LP", fee_percentage=0)

    def test_state_to_dict(self, kinds) -> None:
        a, b = kinds
        state = new_pool_state(token1_kind=a, token2_kind=b, share_symbol="LP", fee_percentage=300_000, start_frozen=False)
        d = state_to_dict(state)
        assert d["fee_percentage"] == "0.00300000"
        assert d["status"] == "active"
        assert d["token1_symbol"] == "AAA"
