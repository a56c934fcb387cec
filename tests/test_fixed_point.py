import pytest

from fixed_simplex import config as C
from fixed_simplex.fixed_point import div_trunc, wrap_int16, wrap_int32


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (C.INT32_MAX, C.INT32_MAX),
    (C.INT32_MIN, C.INT32_MIN),
    (C.INT32_MAX + 1, C.INT32_MIN),
    (C.INT32_MIN - 1, C.INT32_MAX),
    (1 << 32, 0),
    (-1, -1),
    (0xFFFFFFFF, -1),
])
def test_wrap_int32(value, expected) -> None:
    assert wrap_int32(value) == expected


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (C.INT16_MAX, C.INT16_MAX),
    (C.INT16_MAX + 1, C.INT16_MIN),
    (C.INT16_MIN - 1, C.INT16_MAX),
    (0x1_0005, 5),
    (-0x1_0005, -5),
])
def test_wrap_int16(value, expected) -> None:
    assert wrap_int16(value) == expected


@pytest.mark.parametrize("n, d, expected", [
    (7, 2, 3),
    (-7, 2, -3),
    (-1, 40225, 0),
    (-40225, 40225, -1),
    (-40226, 40225, -1),
    (0, 46360, 0),
])
def test_div_trunc_rounds_toward_zero(n, d, expected) -> None:
    assert div_trunc(n, d) == expected
