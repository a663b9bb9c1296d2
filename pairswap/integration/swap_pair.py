"""
Swap pair shell.

This is an imperative-shell wrapper around the functional core:
- Owns the single `PoolState` of the pair and serializes every operation
  on its lock.
- Runs the invariant registry after each mutation (configurable).
- Delivers effects to the event sink after the operation commits and its
  post-state passes the invariant check.

The public surface here is deliberately unprivileged. Freeze, fee updates and
bootstrap are only reachable through the `PoolAdmin` returned by `deploy()`.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .. import core
from ..core.types import Effect, Event, SwapSide
from ..errors import PoolInvariantError, SwapPairError, TypeMismatch
from ..kernels.python.fixed_point import format_amount
from ..state.assets import AssetKind, AssetVault, ShareKind
from ..state.bundle import TokenBundle
from ..state.pool import PoolAmounts, PoolState, new_pool_state, state_to_dict
from .access import PoolAdmin, issue_admin
from .config import PoolConfig
from .events import EventSink, LoggingEventSink, deliver

logger = logging.getLogger(__name__)

_SUPPLY_EVENTS = {
    "minted": Event.TOKENS_MINTED,
    "burned": Event.TOKENS_BURNED,
    "withdrawn": Event.TOKENS_WITHDRAWN,
    "deposited": Event.TOKENS_DEPOSITED,
}


class SwapPair:
    """A two-asset constant-product pair."""

    def __init__(
        self,
        *,
        token1_kind: AssetKind,
        token2_kind: AssetKind,
        config: Optional[PoolConfig] = None,
        sink: Optional[EventSink] = None,
    ) -> None:
        self._config = config if config is not None else PoolConfig()
        self._sink: EventSink = sink if sink is not None else LoggingEventSink()
        self._admin_issued = False
        self._pending: Optional[List[Effect]] = None
        self._pending_owner: Optional[int] = None
        self._state: PoolState = new_pool_state(
            token1_kind=token1_kind,
            token2_kind=token2_kind,
            share_symbol=self._config.share_symbol,
            fee_percentage=self._config.fee_percentage,
            start_frozen=self._config.start_frozen,
            share_listener=self._on_share_supply,
        )
        logger.info(
            "pair deployed: %s/%s shares=%s fee=%s frozen=%s",
            token1_kind.symbol,
            token2_kind.symbol,
            self._config.share_symbol,
            format_amount(self._config.fee_percentage),
            self._config.start_frozen,
        )
        self._emit((Effect(event=Event.TOKENS_INITIALIZED, amount=0),))

    @classmethod
    def deploy(
        cls,
        config: Optional[PoolConfig] = None,
        *,
        token1_kind: Optional[AssetKind] = None,
        token2_kind: Optional[AssetKind] = None,
        sink: Optional[EventSink] = None,
    ) -> Tuple["SwapPair", PoolAdmin]:
        """
        Create a pair and its one admin handle.

        Asset kinds default to fresh kinds named after the config symbols.
        """
        cfg = config if config is not None else PoolConfig()
        pair = cls(
            token1_kind=token1_kind if token1_kind is not None else AssetKind(cfg.token1_symbol),
            token2_kind=token2_kind if token2_kind is not None else AssetKind(cfg.token2_symbol),
            config=cfg,
            sink=sink,
        )
        return pair, issue_admin(pair)

    # -- plumbing ------------------------------------------------------------

    @contextmanager
    def _operation(self, name: str) -> Iterator[PoolState]:
        """
        Run one operation under the pool lock, then check invariants.

        Share supply effects raised while the operation runs are held back
        and delivered only once the post-state passes the invariant check.
        """
        pending: List[Effect] = []
        with self._state.lock:
            outer = self._pending is None
            if outer:
                self._pending = pending
                self._pending_owner = threading.get_ident()
            try:
                try:
                    yield self._state
                except SwapPairError as exc:
                    logger.debug("%s rejected: %s", name, exc)
                    raise
                if self._config.check_invariants:
                    violations = core.check_all(self._state)
                    if violations:
                        logger.error("%s broke invariants: %s", name, ", ".join(violations))
                        raise PoolInvariantError(violations)
            finally:
                if outer:
                    self._pending = None
                    self._pending_owner = None
        self._emit(pending)

    def _emit(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            deliver(self._sink, effect)

    def _on_share_supply(self, action: str, amount: int) -> None:
        effect = Effect(event=_SUPPLY_EVENTS[action], amount=amount)
        pending = self._pending
        if pending is not None and self._pending_owner == threading.get_ident():
            pending.append(effect)
        else:
            self._emit((effect,))

    # -- queries -------------------------------------------------------------

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def token1_kind(self) -> AssetKind:
        return self._state.token1_kind

    @property
    def token2_kind(self) -> AssetKind:
        return self._state.token2_kind

    @property
    def share_kind(self) -> ShareKind:
        return self._state.share_kind

    @property
    def is_frozen(self) -> bool:
        with self._state.lock:
            return self._state.is_frozen

    @property
    def total_supply(self) -> int:
        with self._state.lock:
            return self._state.total_supply

    def get_fee_percentage(self) -> int:
        with self._state.lock:
            return self._state.fee_percentage

    def get_pool_amounts(self) -> PoolAmounts:
        with self._state.lock:
            return self._state.pool_amounts()

    def snapshot(self) -> Dict[str, Any]:
        return state_to_dict(self._state)

    def quote_swap_exact_token1_for_token2(self, amount: int) -> int:
        with self._state.lock:
            return core.quote_exact_in(self._state, amount, SwapSide.TOKEN1_FOR_TOKEN2)

    def quote_swap_token1_for_exact_token2(self, amount: int) -> int:
        with self._state.lock:
            return core.quote_exact_out(self._state, amount, SwapSide.TOKEN1_FOR_TOKEN2)

    def quote_swap_exact_token2_for_token1(self, amount: int) -> int:
        with self._state.lock:
            return core.quote_exact_in(self._state, amount, SwapSide.TOKEN2_FOR_TOKEN1)

    def quote_swap_token2_for_exact_token1(self, amount: int) -> int:
        with self._state.lock:
            return core.quote_exact_out(self._state, amount, SwapSide.TOKEN2_FOR_TOKEN1)

    # -- factories -----------------------------------------------------------

    def create_empty_token_bundle(self) -> TokenBundle:
        return TokenBundle(self._state.token1_kind, self._state.token2_kind)

    def create_token_bundle(self, from_token1: AssetVault, from_token2: AssetVault) -> TokenBundle:
        """Bundle a token1 vault and a token2 vault. Both are consumed."""
        if from_token1.kind is not self._state.token1_kind:
            raise TypeMismatch(f"expected {self._state.token1_kind.symbol}, got {from_token1.kind.symbol}")
        if from_token2.kind is not self._state.token2_kind:
            raise TypeMismatch(f"expected {self._state.token2_kind.symbol}, got {from_token2.kind.symbol}")
        return TokenBundle.of(from_token1, from_token2)

    def create_empty_share_vault(self) -> AssetVault:
        return self._state.share_kind.create_empty_vault()

    # -- trading and liquidity -----------------------------------------------

    def swap_token1_for_token2(self, from_vault: AssetVault) -> AssetVault:
        with self._operation("swap_token1_for_token2") as state:
            outcome = core.swap(state, from_vault, SwapSide.TOKEN1_FOR_TOKEN2)
        self._emit(outcome.effects)
        return outcome.vault

    def swap_token2_for_token1(self, from_vault: AssetVault) -> AssetVault:
        with self._operation("swap_token2_for_token1") as state:
            outcome = core.swap(state, from_vault, SwapSide.TOKEN2_FOR_TOKEN1)
        self._emit(outcome.effects)
        return outcome.vault

    def add_liquidity(self, bundle: TokenBundle) -> AssetVault:
        with self._operation("add_liquidity") as state:
            outcome = core.add_liquidity(state, bundle)
        return outcome.shares

    def remove_liquidity(self, share_vault: AssetVault) -> TokenBundle:
        with self._operation("remove_liquidity") as state:
            outcome = core.remove_liquidity(state, share_vault)
        return outcome.bundle

    def donate_liquidity(self, bundle: TokenBundle) -> None:
        with self._operation("donate_liquidity") as state:
            core.donate_liquidity(state, bundle)

    def __repr__(self) -> str:
        amounts = self._state.pool_amounts()
        return (
            f"SwapPair({self._state.token1_kind.symbol}={format_amount(amounts.token1_amount)}, "
            f"{self._state.token2_kind.symbol}={format_amount(amounts.token2_amount)}, "
            f"supply={format_amount(self._state.total_supply)})"
        )
