# fixed_simplex/warmup.py

"""
================================================================================
KERNEL WARM-UP
================================================================================
numba compiles each kernel on its first call. For a render loop that first
call would stall a frame, so callers can compile everything up front.

Data Contract:
---------------
- Inputs:
    - logger (optional): A configured Python logging object.
- Outputs:
    - The elapsed compile time in seconds (float).
- Side Effects: Triggers numba compilation and logs progress.
================================================================================
"""

import logging
import time

from .gradients import grad1, grad2, grad3
from .noise import noise1, noise2, noise3


def warm_up(logger: logging.Logger = None) -> float:
    """Compiles every kernel for integer arguments and reports how long it took."""
    logger = logger or logging.getLogger(__name__)
    logger.info("Compiling fixed-point noise kernels...")
    start_time = time.perf_counter()

    grad1(0, 0)
    grad2(0, 0, 0)
    grad3(0, 0, 0, 0)
    noise1(0)
    noise2(0, 0)
    noise3(0, 0, 0)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Noise kernels ready in {elapsed:.2f} seconds.")
    return elapsed
