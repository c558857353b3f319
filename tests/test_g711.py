import pytest

from voipkit.g711 import linear_to_ulaw, mix_saturate, ulaw_to_linear

# Selected decoded values at the segment boundaries of the G.711 mu-law table.
PINNED = {
    0: -32124,
    15: -16764,
    16: -15996,
    31: -8316,
    32: -7932,
    47: -4092,
    48: -3900,
    63: -1980,
    64: -1884,
    79: -924,
    80: -876,
    95: -396,
    96: -372,
    111: -132,
    112: -120,
    126: -8,
    127: 0,
    128: 32124,
    143: 16764,
    200: 1372,
    255: 0,
}


def test_mix_saturate():
    x = list(range(160))
    y = [666] * 160
    mix_saturate(x, y)
    assert x == [n + 666 for n in range(160)]
    assert y == [666] * 160


def test_mix_saturate_clamps():
    x = [32000, -32000, 100]
    mix_saturate(x, [1000, -1000, -50])
    assert x == [32767, -32768, 50]


def test_mix_saturate_size_mismatch():
    with pytest.raises(ValueError):
        mix_saturate([0] * 160, [0] * 159)


def test_linear_to_ulaw():
    assert linear_to_ulaw(0) == 255
    assert linear_to_ulaw(-100) == 114


@pytest.mark.parametrize("code,value", sorted(PINNED.items()))
def test_ulaw_to_linear_pinned(code, value):
    assert ulaw_to_linear(code) == value


@pytest.mark.parametrize("n", range(128))
def test_ulaw_to_linear_is_symmetric(n):
    assert ulaw_to_linear(n + 128) == -ulaw_to_linear(n)


def test_ulaw_to_linear_is_monotonic_in_each_half():
    negative = [ulaw_to_linear(n) for n in range(128)]
    positive = [ulaw_to_linear(n) for n in range(128, 256)]
    assert negative == sorted(set(negative))
    assert positive == sorted(set(positive), reverse=True)


@pytest.mark.parametrize("n", range(256))
def test_linear_to_ulaw_to_linear(n):
    value = ulaw_to_linear(n)
    assert ulaw_to_linear(linear_to_ulaw(value)) == value


def test_linear_to_ulaw_extremes_stay_in_byte_range():
    for value in (-32768, 32767, -1_000_000, 1_000_000):
        assert 0 <= linear_to_ulaw(value) <= 255


@pytest.mark.parametrize("bad", [-1, 256])
def test_ulaw_to_linear_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        ulaw_to_linear(bad)