"""G.711 mu-law companding and saturating sample mixing."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_BIAS = 0x84
_INT16_MAX = 32767
_INT16_MIN = -32768


def linear_to_ulaw(linear: int) -> int:
    """Compress a signed linear PCM sample into a G.711 mu-law byte."""
    if linear < 0:
        magnitude = _BIAS - linear
        mask = 0x7F
    else:
        magnitude = _BIAS + linear
        mask = 0xFF
    segment = (magnitude | 0xFF).bit_length() - 8
    if segment >= 8:
        return 0x7F ^ mask
    return ((segment << 4) | ((magnitude >> (segment + 3)) & 0x0F)) ^ mask


def ulaw_to_linear(ulaw: int) -> int:
    """Expand a G.711 mu-law byte back into a signed linear PCM sample."""
    if not 0 <= ulaw <= 0xFF:
        raise ValueError(f"mu-law value out of range: {ulaw}")
    ulaw = ~ulaw & 0xFF
    t = (((ulaw & 0x0F) << 3) + _BIAS) << ((ulaw & 0x70) >> 4)
    return _BIAS - t if ulaw & 0x80 else t - _BIAS


def mix_saturate(dst: MutableSequence[int], src: Sequence[int]) -> None:
    """Add ``src`` into ``dst`` in place, clamping each sum to 16 bits."""
    if len(dst) != len(src):
        raise ValueError(f"frame sizes differ: {len(dst)} != {len(src)}")
    for n, (a, b) in enumerate(zip(dst, src)):
        dst[n] = max(_INT16_MIN, min(_INT16_MAX, a + b))