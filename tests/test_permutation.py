import logging

import numpy as np
import pytest

from fixed_simplex.permutation import PERM, PERM_MASK, verify_permutation_table

from reference_noise import PERM as REFERENCE_PERM


def test_table_matches_reference_sequence() -> None:
    assert PERM.dtype == np.uint8
    assert PERM.tolist() == REFERENCE_PERM


def test_every_byte_value_appears_once() -> None:
    assert sorted(PERM.tolist()) == list(range(256))


def test_table_is_read_only() -> None:
    with pytest.raises(ValueError):
        PERM[0] = 0


def test_masked_lookup_accepts_negative_indices() -> None:
    assert PERM[-1 & PERM_MASK] == 180
    assert PERM[256 & PERM_MASK] == 151
    assert PERM[-256 & PERM_MASK] == 151


def test_verify_logs_success(caplog) -> None:
    logger = logging.getLogger("PermutationTest")
    with caplog.at_level(logging.DEBUG, logger="PermutationTest"):
        assert verify_permutation_table(PERM, logger) is True
    assert "verified" in caplog.text


def test_verify_rejects_short_table() -> None:
    with pytest.raises(ValueError, match="256 entries"):
        verify_permutation_table(PERM[:255])


def test_verify_rejects_duplicates() -> None:
    broken = PERM.copy()
    broken[1] = broken[0]
    with pytest.raises(ValueError, match=r"missing \[160\]"):
        verify_permutation_table(broken)


def test_verify_rejects_out_of_range_values() -> None:
    broken = PERM.astype(np.int64)
    broken[0] = 151 + 256
    with pytest.raises(ValueError, match="out of range"):
        verify_permutation_table(broken)
