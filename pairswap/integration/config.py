"""
Pool configuration.

`PoolConfig` is validated on construction. `load_pool_config()` reads the
same fields from a YAML mapping, e.g.:

    token1_symbol: FUSD
    token2_symbol: tUSDT
    share_symbol: FUSD-tUSDT-LP
    fee_percentage: "0.003"
    start_frozen: true
    bootstrap_shares: "1.0"
    check_invariants: true

Fixed-point fields accept decimal strings, Decimals, ints (whole units) or
YAML floats (converted through their shortest repr, never rounded).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from ..kernels.python.fixed_point import ONE, checked, to_amount


@dataclass(frozen=True)
class PoolConfig:
    token1_symbol: str = "TOKEN1"
    token2_symbol: str = "TOKEN2"
    share_symbol: str = "LP"

    # Raw fixed-point units (0.003 == 300_000).
    fee_percentage: int = 300_000

    # Pools start frozen; the admin unfreezes after bootstrap.
    start_frozen: bool = True

    # Shares minted by bootstrap (1.0).
    bootstrap_shares: int = ONE

    # Run the invariant registry after every mutation.
    check_invariants: bool = True

    def __post_init__(self) -> None:
        for name in ("token1_symbol", "token2_symbol", "share_symbol"):
            v = getattr(self, name)
            if not isinstance(v, str) or not v.strip():
                raise ValueError(f"{name} must be a non-empty string")
        if len({self.token1_symbol, self.token2_symbol, self.share_symbol}) != 3:
            raise ValueError("token1_symbol, token2_symbol and share_symbol must be distinct")
        for name in ("fee_percentage", "bootstrap_shares"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int (raw fixed-point units)")
            checked(v, name=name)
        if self.bootstrap_shares <= 0:
            raise ValueError("bootstrap_shares must be positive")
        for name in ("start_frozen", "check_invariants"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")


_AMOUNT_FIELDS = ("fee_percentage", "bootstrap_shares")
_KNOWN_FIELDS = tuple(f.name for f in fields(PoolConfig))


def _parse_amount(name: str, value: Any) -> int:
    if isinstance(value, float):
        value = Decimal(repr(value))
    if not isinstance(value, (str, int, Decimal)) or isinstance(value, bool):
        raise TypeError(f"{name} must be a decimal string or number, got {type(value).__name__}")
    try:
        return to_amount(value)
    except ValueError as exc:
        raise ValueError(f"invalid {name}: {exc}") from exc


def pool_config_from_mapping(obj: Mapping[str, Any]) -> PoolConfig:
    """Validate an already-parsed mapping. Unknown keys are rejected."""
    if not isinstance(obj, Mapping):
        raise TypeError("pool config must be a mapping")
    unknown = sorted(set(obj) - set(_KNOWN_FIELDS))
    if unknown:
        raise ValueError(f"unknown pool config keys: {', '.join(map(str, unknown))}")

    kwargs: dict[str, Any] = {}
    for name, value in obj.items():
        kwargs[name] = _parse_amount(name, value) if name in _AMOUNT_FIELDS else value
    return PoolConfig(**kwargs)


def load_pool_config(path: Union[str, Path]) -> PoolConfig:
    """Load a `PoolConfig` from a YAML file."""
    p = Path(path)
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    if obj is None:
        return PoolConfig()
    if not isinstance(obj, Mapping):
        raise TypeError(f"pool config YAML must be a mapping: {p}")
    return pool_config_from_mapping(obj)
