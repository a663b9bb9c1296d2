"""Exception types for the swap pair.

Every failure is raised synchronously, before the pool is mutated. Callers
decide whether to resubmit; nothing is retried internally.
"""

from __future__ import annotations


class SwapPairError(Exception):
    """Base class for every error raised by the pair."""


class PreconditionViolation(SwapPairError):
    """Raised when an operation's guard condition is not satisfied."""


class PoolFrozen(PreconditionViolation):
    """Raised by swaps while the pool is frozen."""


class EmptyVault(PreconditionViolation):
    """Raised when a vault (or one side of a bundle) carries no balance."""


class NonPositiveAmount(PreconditionViolation):
    """Raised when an amount argument is negative or otherwise out of domain."""


class NotInitialized(PreconditionViolation):
    """Raised when liquidity is added before the pool has been bootstrapped."""


class CannotRemoveAllLiquidity(PreconditionViolation):
    """Raised when a redemption covers the entire outstanding share supply."""


class VaultConsumed(PreconditionViolation):
    """Raised when a vault is used after it has been moved or destroyed."""


class InsufficientBalance(SwapPairError):
    """Raised when a vault withdrawal exceeds the vault balance."""


class TypeMismatch(SwapPairError):
    """Raised when a vault of the wrong asset kind is supplied."""


class InsufficientReserve(SwapPairError):
    """Raised when a quote asks for at least the whole counter reserve."""


class AmountTooSmall(SwapPairError):
    """Raised when rounding drives a swap output to zero."""


class AlreadyInitialized(SwapPairError):
    """Raised when bootstrap runs against a pool that already has shares."""


class LiquidityTooSmall(SwapPairError):
    """Raised when share math rounds the liquidity percentage to zero."""


class Unauthorized(SwapPairError):
    """Raised when a privileged handle is constructed outside of deployment."""


class FixedPointOverflow(SwapPairError, ArithmeticError):
    """Raised when a fixed-point result leaves the representable range."""


class PoolInvariantError(SwapPairError):
    """Raised when a post-state violates one or more pool invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
