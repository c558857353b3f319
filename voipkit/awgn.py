"""Additive white Gaussian noise generator for comfort noise."""

from __future__ import annotations

import math
from collections.abc import Iterator

_M1 = 259200
_IA1 = 7141
_IC1 = 54773
_RM1 = 1.0 / _M1
_M2 = 134456
_IA2 = 8121
_IC2 = 28411
_RM2 = 1.0 / _M2
_M3 = 243000
_IA3 = 4561
_IC3 = 51349
DBM0_MAX_POWER = 6.16

DEFAULT_SEED = 7162534

_INT16_MAX = 32767
_INT16_MIN = -32768


def _saturate(amp: float) -> int:
    if amp > _INT16_MAX:
        return _INT16_MAX
    if amp < _INT16_MIN:
        return _INT16_MIN
    return int(amp)


class AWGN:
    """Deterministic white noise source producing signed 16-bit samples.

    ``volume`` is a level in dBm0; -50.0 is a good comfort noise level and
    values closer to 0.0 are louder.
    """

    def __init__(self, volume: float, seed: int = DEFAULT_SEED) -> None:
        self._setup(seed, volume - DBM0_MAX_POWER)

    @classmethod
    def from_dbov(cls, seed: int, level: float) -> "AWGN":
        """Create a generator whose level is given in dBov."""
        gen = cls.__new__(cls)
        gen._setup(seed, level)
        return gen

    def _setup(self, seed: int, level: float) -> None:
        seed = abs(seed)
        self._rms = math.pow(10.0, level / 20.0) * 32768.0
        ix1 = (_IC1 + seed) % _M1
        ix1 = (_IA1 * ix1 + _IC1) % _M1
        ix2 = ix1 % _M2
        ix1 = (_IA1 * ix1 + _IC1) % _M1
        ix3 = ix1 % _M3
        table = [0.0]
        for _ in range(97):
            ix1 = (_IA1 * ix1 + _IC1) % _M1
            ix2 = (_IA2 * ix2 + _IC2) % _M2
            table.append((float(ix1) + float(ix2) * _RM2) * _RM1)
        self._ix1, self._ix2, self._ix3 = ix1, ix2, ix3
        self._table = table
        self._gset = 0.0
        self._have_spare = False

    def _ran1(self) -> float:
        self._ix1 = (_IA1 * self._ix1 + _IC1) % _M1
        self._ix2 = (_IA2 * self._ix2 + _IC2) % _M2
        self._ix3 = (_IA3 * self._ix3 + _IC3) % _M3
        j = 1 + (97 * self._ix3) // _M3
        if not 1 <= j <= 97:
            return -1.0
        result = self._table[j]
        self._table[j] = (float(self._ix1) + float(self._ix2) * _RM2) * _RM1
        return result

    def get(self) -> int:
        """Return the next noise sample."""
        if not self._have_spare:
            while True:
                v1 = 2.0 * self._ran1() - 1.0
                v2 = 2.0 * self._ran1() - 1.0
                r = v1 * v1 + v2 * v2
                if r < 1.0:
                    break
            fac = math.sqrt(-2.0 * math.log(r) / r) if r > 0.0 else math.inf
            self._gset = v1 * fac
            self._have_spare = True
            amp = v2 * fac * self._rms
        else:
            self._have_spare = False
            amp = self._gset * self._rms
        return _saturate(amp)

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.get()