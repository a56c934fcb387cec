# fixed_simplex/fixed_point.py

"""
Integer-width helpers.

Python integers never overflow, but the reference arithmetic runs in int16,
int32 and int64 registers. These helpers reproduce the narrow widths so that
out-of-range inputs wrap exactly like the reference instead of growing.
"""

from numba import njit


@njit
def wrap_int32(v):
    """Two's-complement wrap of an integer into the int32 range."""
    return ((v + 0x80000000) & 0xFFFFFFFF) - 0x80000000


@njit
def wrap_int16(v):
    """Two's-complement wrap of an integer into the int16 range."""
    return ((v + 0x8000) & 0xFFFF) - 0x8000


@njit
def div_trunc(n, d):
    """
    Signed division rounding toward zero, for a positive divisor.
    Python's `//` floors, which differs from the reference for negative `n`.
    """
    if n >= 0:
        return n // d
    return -((-n) // d)
