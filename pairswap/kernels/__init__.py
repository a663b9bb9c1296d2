"""
Kernel layer.

Deterministic, integer-only kernels used by the pair. Nothing in here touches
vaults, locks or logging; callers pass plain amounts and get plain amounts
(or typed result records) back.
"""
