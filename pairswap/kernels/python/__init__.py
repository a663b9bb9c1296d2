"""
Production Python kernels.

These modules are designed to be:
- deterministic (integer fixed point, no floats),
- easy to audit (explicit intermediate variables),
- small surface-area (pure functions, typed results).
"""
