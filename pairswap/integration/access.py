"""
Capability handles for a swap pair.

- `PoolAdmin`: the full privileged surface (freeze/unfreeze, fee updates,
  bootstrap, proxy issuance). One per pair, issued only by `SwapPair.deploy()`.
- `SwapProxy`: a delegable handle exposing swaps and add/remove liquidity.
  It wraps the unprivileged pair surface, so nothing reachable from a proxy
  leads back to the admin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import core
from ..errors import Unauthorized
from ..state.assets import AssetVault
from ..state.bundle import TokenBundle

if TYPE_CHECKING:  # pragma: no cover
    from .swap_pair import SwapPair


_ADMIN_KEY = object()


def issue_admin(pair: "SwapPair") -> "PoolAdmin":
    return PoolAdmin(pair, key=_ADMIN_KEY)


class PoolAdmin:
    """Privileged operations on one pair."""

    __slots__ = ("_pair",)

    def __init__(self, pair: "SwapPair", *, key: object = None) -> None:
        if key is not _ADMIN_KEY:
            raise Unauthorized("PoolAdmin is only issued by SwapPair.deploy()")
        if pair._admin_issued:
            raise Unauthorized("an admin handle was already issued for this pair")
        pair._admin_issued = True
        self._pair = pair

    @property
    def pair(self) -> "SwapPair":
        return self._pair

    def freeze(self) -> None:
        with self._pair._operation("freeze") as state:
            core.freeze(state)

    def unfreeze(self) -> None:
        with self._pair._operation("unfreeze") as state:
            core.unfreeze(state)

    def update_fee_percentage(self, fee_percentage: int) -> None:
        with self._pair._operation("update_fee_percentage") as state:
            effects = core.update_fee_percentage(state, fee_percentage)
        self._pair._emit(effects)

    def add_initial_liquidity(self, bundle: TokenBundle) -> AssetVault:
        """Bootstrap: seed both reserves and mint the configured initial shares."""
        with self._pair._operation("bootstrap") as state:
            outcome = core.bootstrap(state, bundle, self._pair.config.bootstrap_shares)
        return outcome.shares

    def create_swap_proxy(self) -> "SwapProxy":
        return SwapProxy(self._pair)

    def __repr__(self) -> str:
        return f"PoolAdmin({self._pair!r})"


class SwapProxy:
    """Swaps and liquidity add/remove, nothing else."""

    __slots__ = ("_pair",)

    def __init__(self, pair: "SwapPair") -> None:
        self._pair = pair

    def swap_token1_for_token2(self, from_vault: AssetVault) -> AssetVault:
        return self._pair.swap_token1_for_token2(from_vault)

    def swap_token2_for_token1(self, from_vault: AssetVault) -> AssetVault:
        return self._pair.swap_token2_for_token1(from_vault)

    def add_liquidity(self, bundle: TokenBundle) -> AssetVault:
        return self._pair.add_liquidity(bundle)

    def remove_liquidity(self, share_vault: AssetVault) -> TokenBundle:
        return self._pair.remove_liquidity(share_vault)

    def __repr__(self) -> str:
        return f"SwapProxy({self._pair!r})"
