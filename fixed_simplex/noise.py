# fixed_simplex/noise.py

"""
================================================================================
FIXED-POINT SIMPLEX NOISE
================================================================================
This module provides 1D, 2D and 3D simplex noise computed entirely with
integer arithmetic. It is designed to be a pure, stateless utility that gives
bit-identical results on every platform, including ones without an FPU.

Data Contract:
---------------
- Inputs:
    - x, y, z: Q19.12 fixed-point integers (int32, 12 fractional bits).
- Outputs:
    - A Q0.15 fixed-point integer covering the full int16 range.
- Side Effects: None.
- Invariants: The same inputs always give the same output. No input raises;
  values outside the int32 range wrap first, and intermediates wrap at the
  same widths as the reference (int32 where it uses int32, int64 elsewhere).
  Results are not clamped, so extreme corner cases may wrap within int16.

Notation:
---------------
Each fixed-point line ends with a comment naming its fractional bits, e.g.
`# .12` means the integer is a real number scaled by 1 << 12.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as C
from .fixed_point import div_trunc, wrap_int16, wrap_int32
from .gradients import grad1, grad2, grad3
from .permutation import PERM, PERM_MASK

# Second corner of the 2D simplex, indexed by (x0 > y0).
# Rows are (i1, j1).
_SIMPLEX2_ORDER = np.array([
    [0, 1],  # upper triangle, YX order: (0,0)->(0,1)->(1,1)
    [1, 0],  # lower triangle, XY order: (0,0)->(1,0)->(1,1)
], dtype=np.int64)

# Second and third corners of the 3D simplex, indexed by
# 4 * (x0 >= y0) + 2 * (y0 >= z0) + (x0 >= z0).
# Rows are (i1, j1, k1, i2, j2, k2). Index 1 and 6 cannot occur for ordered
# values but keep the results of the classic nested comparison.
_SIMPLEX3_ORDER = np.array([
    [0, 0, 1, 0, 1, 1],  # 0: Z Y X
    [0, 0, 1, 0, 1, 1],  # 1: Z Y X
    [0, 1, 0, 0, 1, 1],  # 2: Y Z X
    [0, 1, 0, 1, 1, 0],  # 3: Y X Z
    [0, 0, 1, 1, 0, 1],  # 4: Z X Y
    [1, 0, 0, 1, 0, 1],  # 5: X Z Y
    [1, 0, 0, 1, 1, 0],  # 6: X Y Z
    [1, 0, 0, 1, 1, 0],  # 7: X Y Z
], dtype=np.int64)


@njit
def _hash(idx):
    return np.int64(PERM[idx & PERM_MASK])


@njit
def _falloff4(t, shift):
    """Raises a positive falloff term to the 4th power, keeping its format."""
    t = wrap_int32(t * t) >> shift
    return wrap_int32(t * t) >> shift


@njit
def noise1(x):
    """
    1D simplex noise.

    The x input is a Q19.12 value. The result covers the full range of an
    int16, so it is a Q0.15 value.
    """
    x = wrap_int32(x)
    i0 = x >> C.COORD_FRAC_BITS
    i1 = i0 + 1
    x0 = x & (C.COORD_ONE - 1)  # .12
    x1 = x0 - C.COORD_ONE       # .12

    # No gate needed: |x0|, |x1| <= 1.0 keeps the falloff non-negative.
    t0 = C.NOISE1_FALLOFF_ONE - ((x0 * x0) >> 9)  # .15
    t0 = _falloff4(t0, 15)                         # .15
    n0 = (t0 * grad1(_hash(i0), x0)) >> 12         # .15 * .12 = .15

    t1 = C.NOISE1_FALLOFF_ONE - ((x1 * x1) >> 9)  # .15
    t1 = _falloff4(t1, 15)                         # .15
    n1 = (t1 * grad1(_hash(i1), x1)) >> 12         # .15

    n = wrap_int32(n0 + n1)  # .15
    n = wrap_int32(n + C.NOISE1_BIAS)
    n = div_trunc(wrap_int32(n << C.NOISE1_SCALE_SHIFT), C.NOISE1_SCALE_DIV)  # .15
    return wrap_int16(n)


@njit
def _corner2(hash_value, x, y):
    """Contribution of one 2D corner at offset (x, y) in .32, as .30."""
    t = wrap_int32((C.RADIUS2_Q32 - (x >> 16) * (x >> 16) - (y >> 16) * (y >> 16)) >> 16)  # .16
    if t <= 0:
        return 0
    t = _falloff4(t, 16)  # .16
    return wrap_int32((t >> 1) * grad2(hash_value, wrap_int32(x >> 17), wrap_int32(y >> 17)))  # .15 * .15 = .30


@njit
def noise2(x, y):
    """
    2D simplex noise.

    The x and y inputs are Q19.12 values. The result covers the full range
    of an int16, so it is a Q0.15 value.
    """
    x = wrap_int32(x)
    y = wrap_int32(y)

    # Skew the input space to determine which simplex cell we're in
    s = wrap_int32(((x + y) * C.F2_Q32) >> 32)  # (.12 + .12) * .32 = .12
    i = wrap_int32((x >> 1) + (s >> 1)) >> 11    # .0
    j = wrap_int32((y >> 1) + (s >> 1)) >> 11    # .0

    # Unskew the cell origin back to (x,y) space
    t = (i + j) * C.G2_Q32  # .32
    X0 = (i << 32) - t      # .32
    Y0 = (j << 32) - t      # .32
    x0 = (x << 20) - X0     # .32: distances from the cell origin
    y0 = (y << 20) - Y0     # .32

    row = 1 if x0 > y0 else 0
    i1 = _SIMPLEX2_ORDER[row, 0]
    j1 = _SIMPLEX2_ORDER[row, 1]

    # A step of (1,0) in (i,j) is a step of (1-c,-c) in (x,y), and a step of
    # (0,1) is a step of (-c,1-c), where c = G2.
    x1 = x0 - (i1 << 32) + C.G2_Q32     # .32
    y1 = y0 - (j1 << 32) + C.G2_Q32     # .32
    x2 = x0 - (1 << 32) + 2 * C.G2_Q32  # .32
    y2 = y0 - (1 << 32) + 2 * C.G2_Q32  # .32

    n0 = _corner2(_hash(i + _hash(j)), x0, y0)
    n1 = _corner2(_hash(i + i1 + _hash(j + j1)), x1, y1)
    n2 = _corner2(_hash(i + 1 + _hash(j + 1)), x2, y2)

    n = wrap_int32(n0 + n1 + n2)  # .30
    n = div_trunc(wrap_int32(n << C.NOISE2_SCALE_SHIFT), C.NOISE2_SCALE_DIV)
    return wrap_int16(n)


@njit
def _corner3(hash_value, x, y, z):
    """Contribution of one 3D corner at offset (x, y, z) in .32, as .30."""
    t = wrap_int32((C.RADIUS3_Q32 - (x >> 16) * (x >> 16) - (y >> 16) * (y >> 16)
                    - (z >> 16) * (z >> 16)) >> 16)  # .16
    if t <= 0:
        return 0
    t = _falloff4(t, 16)  # .16
    return wrap_int32((t >> 1) * grad3(hash_value, wrap_int32(x >> 17),
                                       wrap_int32(y >> 17), wrap_int32(z >> 17)))  # .30


@njit
def noise3(x, y, z):
    """
    3D simplex noise.

    The x, y and z inputs are Q19.12 values. The result covers the full range
    of an int16, so it is a Q0.15 value.
    """
    x = wrap_int32(x)
    y = wrap_int32(y)
    z = wrap_int32(z)

    # (x + y + z) * F3 stays below 2**63 for any int32 inputs.
    s = wrap_int32(((x + y + z) * C.F3_Q32) >> 32)  # .12
    i = wrap_int32((x >> 1) + (s >> 1)) >> 11        # .0
    j = wrap_int32((y >> 1) + (s >> 1)) >> 11        # .0
    k = wrap_int32((z >> 1) + (s >> 1)) >> 11        # .0

    t = (i + j + k) * C.G3_Q32  # .32
    X0 = (i << 32) - t          # .32
    Y0 = (j << 32) - t          # .32
    Z0 = (k << 32) - t          # .32
    x0 = (x << 20) - X0         # .32
    y0 = (y << 20) - Y0         # .32
    z0 = (z << 20) - Z0         # .32

    # The simplex is a slightly irregular tetrahedron; pick it by axis order.
    row = 4 * (x0 >= y0) + 2 * (y0 >= z0) + (x0 >= z0)
    i1 = _SIMPLEX3_ORDER[row, 0]
    j1 = _SIMPLEX3_ORDER[row, 1]
    k1 = _SIMPLEX3_ORDER[row, 2]
    i2 = _SIMPLEX3_ORDER[row, 3]
    j2 = _SIMPLEX3_ORDER[row, 4]
    k2 = _SIMPLEX3_ORDER[row, 5]

    # A unit step along one axis in (i,j,k) is a step of 1-c along that axis
    # and -c along the others in (x,y,z), where c = G3.
    x1 = x0 - (i1 << 32) + C.G3_Q32     # .32
    y1 = y0 - (j1 << 32) + C.G3_Q32     # .32
    z1 = z0 - (k1 << 32) + C.G3_Q32     # .32
    x2 = x0 - (i2 << 32) + 2 * C.G3_Q32  # .32
    y2 = y0 - (j2 << 32) + 2 * C.G3_Q32  # .32
    z2 = z0 - (k2 << 32) + 2 * C.G3_Q32  # .32
    x3 = x0 - (1 << 32) + 3 * C.G3_Q32  # .32
    y3 = y0 - (1 << 32) + 3 * C.G3_Q32  # .32
    z3 = z0 - (1 << 32) + 3 * C.G3_Q32  # .32

    n0 = _corner3(_hash(i + _hash(j + _hash(k))), x0, y0, z0)
    n1 = _corner3(_hash(i + i1 + _hash(j + j1 + _hash(k + k1))), x1, y1, z1)
    n2 = _corner3(_hash(i + i2 + _hash(j + j2 + _hash(k + k2))), x2, y2, z2)
    n3 = _corner3(_hash(i + 1 + _hash(j + 1 + _hash(k + 1))), x3, y3, z3)

    n = wrap_int32(n0 + n1 + n2 + n3)  # .30
    n = div_trunc(wrap_int32(n << C.NOISE3_SCALE_SHIFT), C.NOISE3_SCALE_DIV)
    return wrap_int16(n)
