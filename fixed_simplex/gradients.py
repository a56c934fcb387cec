# fixed_simplex/gradients.py

"""
Gradient dot products for 1D, 2D and 3D simplex noise.

Each function turns a hash byte into one of a small set of gradient
directions and returns its dot product with the corner offset. The
gradients are longer than unit length; the evaluators rescale the final sum.
"""

from numba import njit


@njit
def _select(cond, a, b):
    if cond:
        return a
    return b


@njit
def grad1(hash_value, x):
    """
    hash_value is 0..0xff, x is a .12 offset.
    Returns a .12 value: x times a gradient of 1..8 with a random sign.
    """
    h = hash_value & 15
    grad = 1 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


@njit
def grad2(hash_value, x, y):
    """Dot product with one of 8 directions (+-1, +-2) or (+-2, +-1)."""
    h = hash_value & 7
    u = _select(h < 4, x, y)
    v = _select(h < 4, y, x)
    return _select(h & 1 != 0, -u, u) + _select(h & 2 != 0, -2 * v, 2 * v)


@njit
def grad3(hash_value, x, y, z):
    """Dot product with one of the 12 cube-edge directions."""
    h = hash_value & 15
    u = _select(h < 8, x, y)
    # h = 12..15 repeat four of the directions, 12 and 14 pick x
    v = _select(h < 4, y, _select(h == 12 or h == 14, x, z))
    return _select(h & 1 != 0, -u, u) + _select(h & 2 != 0, -v, v)
