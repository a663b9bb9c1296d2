"""
Token bundles: one vault of each pool asset, moved as a unit.
"""

from __future__ import annotations

from ..errors import VaultConsumed
from .assets import AssetKind, AssetVault


class TokenBundle:
    """
    Owns exactly one vault of each kind.

    `withdraw_token1/2` hand out the held vault itself and leave a fresh empty
    vault in its place, so a full withdrawal never copies balances.
    """

    __slots__ = ("_token1", "_token2", "_live")

    def __init__(self, token1_kind: AssetKind, token2_kind: AssetKind) -> None:
        if token1_kind is token2_kind:
            raise ValueError("a bundle needs two distinct asset kinds")
        self._token1 = token1_kind.create_empty_vault()
        self._token2 = token2_kind.create_empty_vault()
        self._live = True

    @classmethod
    def of(cls, token1: AssetVault, token2: AssetVault) -> "TokenBundle":
        """Bundle two vaults. Both arguments are consumed."""
        if not (token1.is_live and token2.is_live):
            raise VaultConsumed("cannot bundle a vault that was already moved or destroyed")
        bundle = cls(token1.kind, token2.kind)
        bundle.deposit_token1(token1)
        bundle.deposit_token2(token2)
        return bundle

    @property
    def token1_kind(self) -> AssetKind:
        return self._token1.kind

    @property
    def token2_kind(self) -> AssetKind:
        return self._token2.kind

    @property
    def token1_balance(self) -> int:
        self._require_live()
        return self._token1.balance

    @property
    def token2_balance(self) -> int:
        self._require_live()
        return self._token2.balance

    @property
    def is_live(self) -> bool:
        return self._live

    def deposit_token1(self, vault: AssetVault) -> None:
        self._require_live()
        self._token1.deposit(vault)

    def deposit_token2(self, vault: AssetVault) -> None:
        self._require_live()
        self._token2.deposit(vault)

    def withdraw_token1(self) -> AssetVault:
        self._require_live()
        held = self._token1
        self._token1 = held.kind.create_empty_vault()
        return held

    def withdraw_token2(self) -> AssetVault:
        self._require_live()
        held = self._token2
        self._token2 = held.kind.create_empty_vault()
        return held

    def destroy(self) -> None:
        """Destroy both held vaults (retiring any balance they still carry)."""
        self._require_live()
        self._live = False
        self._token1.destroy()
        self._token2.destroy()

    def _require_live(self) -> None:
        if not self._live:
            raise VaultConsumed("token bundle was already consumed")

    def __copy__(self):
        raise TypeError("bundles are move-only and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("bundles are move-only and cannot be copied")

    def __repr__(self) -> str:
        if not self._live:
            return "TokenBundle(consumed)"
        return f"TokenBundle({self._token1!r}, {self._token2!r})"
