# fixed_simplex/config.py

"""
================================================================================
INTERNAL FIXED-POINT CONSTANTS
================================================================================
This module contains the fixed constants used by the noise kernels. Every
value is an integer; the suffix or comment names its fixed-point format, so
`_Q32` means 32 fractional bits and `.15` means 15 fractional bits.

DO NOT MODIFY THIS FILE.
These values must be bit-identical to the reference implementation, otherwise
noise fields stop matching between devices.
================================================================================
"""

# --- Fixed-Point Formats ---
# Input coordinates are Q19.12: int32 with 12 fractional bits.
COORD_FRAC_BITS = 12
COORD_ONE = 1 << COORD_FRAC_BITS
# Results are Q0.15: the full int16 range maps to [-1.0, 1.0).
SAMPLE_FRAC_BITS = 15
SAMPLE_ONE = 1 << SAMPLE_FRAC_BITS

# --- Integer Widths ---
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT16_MIN = -(1 << 15)
INT16_MAX = (1 << 15) - 1

# --- 1D Noise (.15) ---
# Falloff starts at 1.0 in .15.
NOISE1_FALLOFF_ONE = 0x8000
# Offset correction added to the raw .15 sum before rescaling.
NOISE1_BIAS = 2503
# Output scale: (n << 14) / 40225 fits the sum into an int16.
NOISE1_SCALE_SHIFT = 14
NOISE1_SCALE_DIV = 40225

# --- 2D Noise (.32) ---
F2_Q32 = 1572067135  # 0.5 * (sqrt(3) - 1)
G2_Q32 = 907633384   # (3 - sqrt(3)) / 6
RADIUS2_Q32 = 1 << 31  # 0.5
NOISE2_SCALE_SHIFT = 6
NOISE2_SCALE_DIV = 46360

# --- 3D Noise (.32) ---
F3_Q32 = 1431655764  # 1/3
G3_Q32 = 715827884   # 1/6
RADIUS3_Q32 = 2576980378  # 0.6
NOISE3_SCALE_SHIFT = 6
NOISE3_SCALE_DIV = 64120

# --- Input Domain ---
# Every int32 input is evaluated without raising. Inside this magnitude
# (+/- 262144.0 in Q19.12) the 64-bit intermediates are far from overflow and
# the lattice index still has headroom for the +1 corner.
SAFE_COORD_LIMIT = 1 << 30
