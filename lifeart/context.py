"""Process-wide inputs shared by every entity during a frame."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from lifeart.noise import NoiseField

NoiseSampler = Callable[..., float]

TWO_PI = math.tau


@dataclass
class FrameContext:
    """Canvas extent, frame counter, random source and noise sampler.

    Entities only read from the context.  The scene owns it and is the only
    writer (frame counter on every render, extent and scale on resize).
    """

    width: float = 900.0
    height: float = 900.0
    rng: random.Random = field(default_factory=random.Random)
    noise: NoiseSampler = field(default_factory=NoiseField)
    frame_count: int = 0
    scale: float = 1.0

    def uniform(self, low: float, high: Optional[float] = None) -> float:
        """``uniform(high)`` draws from ``[0, high)``, ``uniform(low, high)`` from ``[low, high)``."""

        if high is None:
            low, high = 0.0, low
        return low + (high - low) * self.rng.random()

    def random_unit(self) -> Tuple[float, float]:
        angle = self.uniform(TWO_PI)
        return math.cos(angle), math.sin(angle)

    def wrap(self, x: float, y: float) -> Tuple[float, float]:
        """Toroidal wraparound into ``[0, width) x [0, height)``."""

        x %= self.width
        y %= self.height
        # float modulo of a tiny negative value can round up to the extent itself
        if x >= self.width:
            x = 0.0
        if y >= self.height:
            y = 0.0
        return x, y


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)
