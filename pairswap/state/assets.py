"""
Move-only asset vaults.

This is the in-process rendition of the host asset-handle protocol:

- `AssetKind` identifies one fungible asset and keeps issuer accounting
  (`total_supply` = minted - destroyed).
- `AssetVault` holds a balance of exactly one kind. Vaults are linear: they
  are never copied, `deposit` consumes its argument, and `destroy` retires
  the balance from the kind's supply. Using a consumed vault raises
  `VaultConsumed`.

Kinds compare by identity. Two kinds with the same symbol are still
different assets.
"""

from __future__ import annotations

import threading
from typing import Callable, ContextManager, Optional

from ..errors import (
    InsufficientBalance,
    NonPositiveAmount,
    PreconditionViolation,
    TypeMismatch,
    VaultConsumed,
)
from ..kernels.python.fixed_point import add, checked, format_amount, sub


# (action, amount) with action in {"minted", "burned", "withdrawn", "deposited"}.
SupplyListener = Callable[[str, int], None]

# Vaults can only be created through AssetKind / AssetVault methods.
_ISSUE = object()


class AssetKind:
    """
    One fungible asset and its issuer-side supply counter.

    `lock` guards the supply counter. A pool passes its own lock for the share
    kind so that share destruction is serialized with pool operations.
    """

    __slots__ = ("_symbol", "_total_supply", "_lock", "_listener")

    def __init__(
        self,
        symbol: str,
        *,
        lock: Optional[ContextManager] = None,
        listener: Optional[SupplyListener] = None,
    ) -> None:
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        self._symbol = symbol.strip()
        self._total_supply = 0
        self._lock = lock if lock is not None else threading.Lock()
        self._listener = listener

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def total_supply(self) -> int:
        with self._lock:
            return self._total_supply

    def set_listener(self, listener: Optional[SupplyListener]) -> None:
        self._listener = listener

    def create_empty_vault(self) -> "AssetVault":
        return self._vault_type(self, 0, _ISSUE)

    def mint(self, amount: int) -> "AssetVault":
        """Issue `amount` new units into a fresh vault."""
        checked(amount, name="amount")
        with self._lock:
            self._total_supply = add(self._total_supply, amount)
        self._notify("minted", amount)
        return self._vault_type(self, amount, _ISSUE)

    def _retire(self, amount: int) -> None:
        with self._lock:
            self._total_supply = sub(self._total_supply, amount)
        self._notify("burned", amount)

    def _notify(self, action: str, amount: int) -> None:
        if self._listener is not None:
            self._listener(action, amount)

    @property
    def _vault_type(self) -> type:
        return AssetVault

    def __repr__(self) -> str:
        return f"AssetKind({self._symbol!r}, supply={format_amount(self._total_supply)})"


class AssetVault:
    """A balance of one asset kind with move-only ownership."""

    __slots__ = ("_kind", "_balance", "_live")

    def __init__(self, kind: AssetKind, balance: int, issue_token: object = None) -> None:
        if issue_token is not _ISSUE:
            raise TypeError("vaults are created by AssetKind.mint, create_empty_vault or withdraw")
        self._kind = kind
        self._balance = checked(balance, name="balance")
        self._live = True

    @property
    def kind(self) -> AssetKind:
        return self._kind

    @property
    def balance(self) -> int:
        self._require_live()
        return self._balance

    @property
    def is_live(self) -> bool:
        return self._live

    def withdraw(self, amount: int) -> "AssetVault":
        """Split `amount` off into a new vault of the same kind."""
        self._require_live()
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError("amount must be an int")
        if amount < 0:
            raise NonPositiveAmount(f"withdraw amount must be non-negative: {amount}")
        if amount > self._balance:
            raise InsufficientBalance(
                f"cannot withdraw {format_amount(amount)} {self._kind.symbol}: "
                f"balance is {format_amount(self._balance)}"
            )
        self._balance -= amount
        self._kind._notify("withdrawn", amount)
        return type(self)(self._kind, amount, _ISSUE)

    def deposit(self, vault: "AssetVault") -> None:
        """Merge `vault` into this one. `vault` is consumed."""
        self._require_live()
        if not isinstance(vault, AssetVault):
            raise TypeMismatch(f"expected an AssetVault, got {type(vault).__name__}")
        if vault is self:
            raise PreconditionViolation("cannot deposit a vault into itself")
        vault._require_live()
        if vault._kind is not self._kind:
            raise TypeMismatch(
                f"cannot deposit {vault._kind.symbol} into a {self._kind.symbol} vault"
            )
        amount = vault._balance
        new_balance = add(self._balance, amount)
        vault._consume()
        self._balance = new_balance
        self._kind._notify("deposited", amount)

    def destroy(self) -> None:
        """Consume the vault and retire its balance from the kind's supply."""
        self._require_live()
        amount = self._consume()
        if amount:
            self._kind._retire(amount)

    def _consume(self) -> int:
        amount = self._balance
        self._balance = 0
        self._live = False
        return amount

    def _require_live(self) -> None:
        if not self._live:
            raise VaultConsumed(f"{self._kind.symbol} vault was already moved or destroyed")

    def __copy__(self):
        raise TypeError("vaults are move-only and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("vaults are move-only and cannot be copied")

    def __reduce_ex__(self, protocol):
        raise TypeError("vaults are move-only and cannot be pickled")

    def __repr__(self) -> str:
        if not self._live:
            return f"{type(self).__name__}({self._kind.symbol}, consumed)"
        return f"{type(self).__name__}({self._kind.symbol}, {format_amount(self._balance)})"


class LiquidityShareVault(AssetVault):
    """A vault of a pool's liquidity-share kind."""

    __slots__ = ()


class ShareKind(AssetKind):
    """The pool's own share asset; its supply is the pool's `total_supply`."""

    __slots__ = ()

    @property
    def _vault_type(self) -> type:
        return LiquidityShareVault
