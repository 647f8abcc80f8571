"""Dark voids with a tinted core, optionally creeping along a noise field."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from lifeart.context import TWO_PI, FrameContext
from lifeart.control.profile import coerce_float

__all__ = ["Hole", "MAX_INNER_RATIO"]

MAX_INNER_RATIO = 0.95
MIN_OUTER_RADIUS = 1e-3


def _clamp_radii(outer: float, inner: float) -> Tuple[float, float]:
    """Keep ``0 <= inner < outer`` whatever the configured ranges produced."""

    outer = max(MIN_OUTER_RADIUS, outer)
    return outer, min(max(0.0, inner), outer * MAX_INNER_RATIO)


@dataclass
class Hole:
    x: float = 0.0
    y: float = 0.0
    norm_x: float = 0.0
    norm_y: float = 0.0
    outer_radius: float = 8.0
    inner_radius: float = 4.0
    reference_outer: Optional[float] = None
    reference_inner: Optional[float] = None
    inner_color: Tuple[float, float, float] = (20.0, 10.0, 30.0)
    noise_x: float = 0.0
    noise_y: float = 0.0
    noise_step: float = 0.005
    drift_speed: float = 0.05

    def __post_init__(self) -> None:
        self.outer_radius, self.inner_radius = _clamp_radii(self.outer_radius, self.inner_radius)
        self.reference_outer, self.reference_inner = _clamp_radii(
            self.outer_radius if self.reference_outer is None else self.reference_outer,
            self.inner_radius if self.reference_inner is None else self.reference_inner,
        )

    @classmethod
    def spawn(cls, ctx: FrameContext, settings: Optional[Mapping[str, object]] = None) -> "Hole":
        cfg = settings or {}
        x = ctx.uniform(ctx.width)
        y = ctx.uniform(ctx.height)
        outer = ctx.uniform(coerce_float(cfg.get("radiusMin"), 5.0), coerce_float(cfg.get("radiusMax"), 10.0))
        ratio = ctx.uniform(coerce_float(cfg.get("innerMin"), 0.3), coerce_float(cfg.get("innerMax"), 0.7))
        ratio = min(max(ratio, 0.0), MAX_INNER_RATIO)
        outer, inner = _clamp_radii(outer, outer * ratio)
        return cls(
            x=x,
            y=y,
            norm_x=x / ctx.width,
            norm_y=y / ctx.height,
            outer_radius=outer * ctx.scale,
            inner_radius=inner * ctx.scale,
            reference_outer=outer,
            reference_inner=inner,
            inner_color=(20 + ctx.uniform(-10, 10), 10 + ctx.uniform(-5, 5), 30 + ctx.uniform(-10, 10)),
            noise_x=ctx.uniform(1000),
            noise_y=ctx.uniform(1000),
            noise_step=coerce_float(cfg.get("noiseStep"), 0.005),
            drift_speed=coerce_float(cfg.get("driftSpeed"), 0.05),
        )

    def update(self, ctx: FrameContext) -> None:
        heading = ctx.noise(self.noise_x, self.noise_y) * TWO_PI
        self.x += math.cos(heading) * self.drift_speed
        self.y += math.sin(heading) * self.drift_speed
        self.noise_x += self.noise_step
        self.noise_y += self.noise_step
        self.x, self.y = ctx.wrap(self.x, self.y)
        self.norm_x = self.x / ctx.width
        self.norm_y = self.y / ctx.height

    def rescale(self, ctx: FrameContext, scale: float) -> None:
        self.x = self.norm_x * ctx.width
        self.y = self.norm_y * ctx.height
        self.outer_radius, self.inner_radius = _clamp_radii(
            self.reference_outer * scale, self.reference_inner * scale
        )

    def draw(self, surface, ctx: FrameContext) -> None:
        r = self.outer_radius
        surface.push()
        surface.translate(self.x, self.y)
        surface.no_stroke()
        surface.fill(0, 0, 0)
        surface.ellipse(0, 0, r * 2)
        surface.fill(*self.inner_color)
        surface.ellipse(0, 0, self.inner_radius * 2)
        # highlight toward the upper-left
        surface.fill(60, 50, 80, 100)
        surface.ellipse(-r * 0.2, -r * 0.2, r * 0.3)
        surface.pop()
