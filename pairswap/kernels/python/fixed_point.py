"""
Unsigned fixed-point arithmetic (8 fractional digits).

Amounts are plain Python ints counting 1e-8 units, so `1.0 == 100_000_000`.
The representable range is `[0, 2**64 - 1]` raw units. Every operation is
checked: a result outside that range raises `FixedPointOverflow` instead of
wrapping or saturating.

Rounding rules:
- `mul(a, b) = floor(a * b / SCALE)`
- `div(a, b) = floor(a * SCALE / b)`
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from ...errors import FixedPointOverflow, NonPositiveAmount


DECIMALS = 8
SCALE = 10**DECIMALS
ONE = SCALE
MAX_AMOUNT = 2**64 - 1

AmountLike = Union[int, str, Decimal]


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def checked(value: int, *, name: str = "result") -> int:
    """Return `value` if it is a representable amount, else raise."""
    _require_int(name, value)
    if value < 0:
        raise FixedPointOverflow(f"{name} underflows: {value}")
    if value > MAX_AMOUNT:
        raise FixedPointOverflow(f"{name} overflows: {value}")
    return value


def add(a: int, b: int) -> int:
    return checked(checked(a, name="a") + checked(b, name="b"), name="sum")


def sub(a: int, b: int) -> int:
    return checked(checked(a, name="a") - checked(b, name="b"), name="difference")


def mul(a: int, b: int) -> int:
    return checked((checked(a, name="a") * checked(b, name="b")) // SCALE, name="product")


def div(a: int, b: int) -> int:
    checked(a, name="a")
    if checked(b, name="b") == 0:
        raise FixedPointOverflow("division by zero")
    return checked((a * SCALE) // b, name="quotient")


def to_amount(value: AmountLike) -> int:
    """
    Convert a decimal literal to raw fixed-point units.

    Accepts `Decimal`, decimal strings ("9.97") and ints (whole units).
    Values with more than 8 fractional digits are rejected rather than
    rounded.
    """
    if isinstance(value, bool):
        raise TypeError("amount must not be a bool")
    if isinstance(value, int):
        return checked(value * SCALE, name="amount")
    if isinstance(value, str):
        try:
            value = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal amount: {value!r}") from exc
    if not isinstance(value, Decimal):
        raise TypeError(f"unsupported amount type: {type(value).__name__}")
    if not value.is_finite():
        raise ValueError(f"amount must be finite: {value}")
    if value < 0:
        raise NonPositiveAmount(f"amount must be non-negative: {value}")

    scaled = value * SCALE
    if scaled != scaled.to_integral_value():
        raise ValueError(f"amount has more than {DECIMALS} fractional digits: {value}")
    return checked(int(scaled), name="amount")


def format_amount(raw: int) -> str:
    """Render raw units as a decimal string with all 8 fractional digits."""
    checked(raw, name="raw")
    whole, frac = divmod(raw, SCALE)
    return f"{whole}.{frac:0{DECIMALS}d}"
