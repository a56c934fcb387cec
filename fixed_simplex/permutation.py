# fixed_simplex/permutation.py

"""
================================================================================
PERMUTATION TABLE
================================================================================
The fixed 256-entry permutation of the byte values 0..255 that hashes lattice
coordinates into gradient selectors.

Data Contract:
---------------
- PERM (np.ndarray): read-only uint8 array of length 256. Lookups always use
  `PERM[idx & 0xFF]`, so any integer index (negative included) is valid.
- verify_permutation_table(table, logger): raises ValueError if `table` is
  not a permutation of 0..255, returns True otherwise.
- Side Effects: The table is verified once at import.
- Invariants: The sequence is never regenerated or shuffled. It must match the
  reference byte-for-byte on every platform, otherwise noise fields diverge.
================================================================================
"""

import logging

import numpy as np

PERM_SIZE = 256
PERM_MASK = PERM_SIZE - 1

PERM = np.array([
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
], dtype=np.uint8)
PERM.flags.writeable = False


def verify_permutation_table(table: np.ndarray, logger: logging.Logger = None) -> bool:
    """
    Checks that `table` holds every byte value exactly once.

    Args:
        table (np.ndarray): The candidate permutation table.
        logger (logging.Logger, optional): Where to report the result. Defaults
            to this module's logger.

    Raises:
        ValueError: If the table has the wrong length or a value is missing.
    """
    logger = logger or logging.getLogger(__name__)
    values = np.asarray(table).ravel()

    if values.size != PERM_SIZE:
        raise ValueError(f"Permutation table must have {PERM_SIZE} entries, got {values.size}.")

    counts = np.bincount(values.astype(np.int64) & PERM_MASK, minlength=PERM_SIZE)
    out_of_range = np.count_nonzero((values < 0) | (values > PERM_MASK))
    if out_of_range or not np.all(counts == 1):
        missing = np.flatnonzero(counts == 0)
        raise ValueError(
            f"Permutation table is not a permutation of 0..{PERM_MASK}: "
            f"{out_of_range} value(s) out of range, missing {missing.tolist()}."
        )

    logger.debug(f"Permutation table verified ({PERM_SIZE} unique entries).")
    return True


verify_permutation_table(PERM)
