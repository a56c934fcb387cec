# fixed_simplex/__init__.py

# This file makes the 'fixed_simplex' directory a Python package and defines
# its public API.

from .noise import noise1, noise2, noise3
from .permutation import PERM, verify_permutation_table
from .warmup import warm_up

__all__ = ["noise1", "noise2", "noise3", "PERM", "verify_permutation_table", "warm_up"]
