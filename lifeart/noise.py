"""Seeded coherent noise used for every organic motion in the artwork.

The sampler follows the classic sketching-library behaviour: a lattice of
random values is interpolated with a smoothstep curve and several octaves
are summed with a halving amplitude.  The first octave has an amplitude of
0.5 so the sum stays strictly below 1.0 and the result is always in
``[0, 1)``.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional

__all__ = ["NoiseField"]

_LATTICE_SIZE = 4096
_LATTICE_MASK = _LATTICE_SIZE - 1
_Y_WRAP = 16
_Z_WRAP = 256


class NoiseField:
    """Deterministic 1–3D value noise.

    Instances are callable: ``noise(x)``, ``noise(x, y)`` or ``noise(x, y, z)``.
    Negative coordinates are mirrored, matching the usual sketch semantics.
    """

    def __init__(self, seed: Optional[int] = None, octaves: int = 4, falloff: float = 0.5) -> None:
        self.seed = seed
        self.octaves = max(1, int(octaves))
        self.falloff = min(max(float(falloff), 0.0), 0.99)
        rng = random.Random(seed)
        self._lattice: List[float] = [rng.random() for _ in range(_LATTICE_SIZE)]

    def _value(self, ix: int, iy: int, iz: int) -> float:
        return self._lattice[(ix + iy * _Y_WRAP + iz * _Z_WRAP) & _LATTICE_MASK]

    def _octave(self, x: float, y: float, z: float) -> float:
        xi = math.floor(x)
        yi = math.floor(y)
        zi = math.floor(z)
        xf = x - xi
        yf = y - yi
        zf = z - zi

        def _lerp(a: float, b: float, t: float) -> float:
            return a + (b - a) * t

        def _smooth(t: float) -> float:
            return t * t * (3.0 - 2.0 * t)

        u = _smooth(xf)
        v = _smooth(yf)
        w = _smooth(zf)

        c000 = self._value(xi, yi, zi)
        c100 = self._value(xi + 1, yi, zi)
        c010 = self._value(xi, yi + 1, zi)
        c110 = self._value(xi + 1, yi + 1, zi)
        c001 = self._value(xi, yi, zi + 1)
        c101 = self._value(xi + 1, yi, zi + 1)
        c011 = self._value(xi, yi + 1, zi + 1)
        c111 = self._value(xi + 1, yi + 1, zi + 1)

        x00 = _lerp(c000, c100, u)
        x10 = _lerp(c010, c110, u)
        x01 = _lerp(c001, c101, u)
        x11 = _lerp(c011, c111, u)
        y0 = _lerp(x00, x10, v)
        y1 = _lerp(x01, x11, v)
        return _lerp(y0, y1, w)

    def __call__(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        x, y, z = abs(x), abs(y), abs(z)
        total = 0.0
        weight = 0.0
        amplitude = 0.5
        frequency = 1.0
        for _ in range(self.octaves):
            total += amplitude * self._octave(x * frequency, y * frequency, z * frequency)
            weight += amplitude
            amplitude *= self.falloff
            frequency *= 2.0
        # falloff above 0.5 would otherwise push the sum past 1.0
        if weight > 1.0:
            total /= weight
        return total
