"""Rotating, pulsing bursts of rays."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from lifeart.context import TWO_PI, FrameContext, map_range
from lifeart.control.profile import coerce_float, coerce_int

__all__ = ["Radiant"]


@dataclass
class Radiant:
    x: float = 0.0
    y: float = 0.0
    norm_x: float = 0.0
    norm_y: float = 0.0
    radius: float = 30.0
    reference_radius: Optional[float] = None
    ray_count: int = 40
    alpha: float = 80.0
    angle: float = 0.0
    rotation_speed: float = 0.01
    length: float = 25.0
    reference_length: Optional[float] = None
    current_length: Optional[float] = None
    depth: float = 0.5
    pulse_phase: float = 0.0
    noise_offset: float = 0.0
    jitter: bool = True
    drift: bool = True

    def __post_init__(self) -> None:
        if self.reference_radius is None:
            self.reference_radius = self.radius
        if self.reference_length is None:
            self.reference_length = self.length
        if self.current_length is None:
            self.current_length = self._pulsed_length()

    @classmethod
    def spawn(cls, ctx: FrameContext, settings: Optional[Mapping[str, object]] = None) -> "Radiant":
        cfg = settings or {}
        x = ctx.uniform(ctx.width)
        y = ctx.uniform(ctx.height)
        radius = ctx.uniform(coerce_float(cfg.get("radiusMin"), 10.0), coerce_float(cfg.get("radiusMax"), 50.0))
        rays_min = coerce_int(cfg.get("raysMin"), 20)
        rays_max = coerce_int(cfg.get("raysMax"), 100)
        length = ctx.uniform(coerce_float(cfg.get("lengthMin"), 15.0), coerce_float(cfg.get("lengthMax"), 40.0))
        return cls(
            x=x,
            y=y,
            norm_x=x / ctx.width,
            norm_y=y / ctx.height,
            radius=radius * ctx.scale,
            reference_radius=radius,
            ray_count=max(1, int(ctx.uniform(rays_min, rays_max))),
            alpha=ctx.uniform(40, 120),
            angle=ctx.uniform(TWO_PI),
            rotation_speed=ctx.uniform(coerce_float(cfg.get("rotMin"), 0.001), coerce_float(cfg.get("rotMax"), 0.02)),
            length=length * ctx.scale,
            reference_length=length,
            depth=ctx.uniform(1.0),
            pulse_phase=ctx.uniform(TWO_PI),
            noise_offset=ctx.uniform(1000),
            jitter=bool(cfg.get("jitter", True)),
            drift=bool(cfg.get("drift", True)),
        )

    def _pulsed_length(self) -> float:
        return self.length * (0.8 + math.sin(self.pulse_phase) * 0.2)

    def update(self, ctx: FrameContext) -> None:
        jitter = ctx.noise(self.noise_offset) * 0.04 - 0.02 if self.jitter else 0.0
        self.angle += self.rotation_speed * map_range(self.depth, 0, 1, 0.8, 1.2) + jitter
        self.pulse_phase += ctx.uniform(0.01, 0.03)
        self.current_length = self._pulsed_length()
        self.noise_offset += 0.01
        if self.drift:
            heading = ctx.noise(self.noise_offset * 2) * TWO_PI
            self.x += math.cos(heading) * 0.1 * self.depth
            self.y += math.sin(heading) * 0.1 * self.depth
            self.x, self.y = ctx.wrap(self.x, self.y)
        self.norm_x = self.x / ctx.width
        self.norm_y = self.y / ctx.height

    def rescale(self, ctx: FrameContext, scale: float) -> None:
        self.x = self.norm_x * ctx.width
        self.y = self.norm_y * ctx.height
        self.radius = self.reference_radius * scale
        self.length = self.reference_length * scale
        self.current_length = self._pulsed_length()

    def draw(self, surface, ctx: FrameContext) -> None:
        surface.push()
        surface.translate(self.x, self.y)
        surface.rotate(self.angle)
        stroke_alpha = self.alpha * map_range(self.depth, 0, 1, 0.7, 1)
        for i in range(self.ray_count):
            a = TWO_PI * i / self.ray_count
            # every fifth ray is an accent
            if i % 5 == 0:
                surface.stroke_weight(map_range(self.depth, 0, 1, 0.5, 1.2))
                surface.stroke(255, 255, 200, stroke_alpha * 1.5)
            else:
                surface.stroke_weight(map_range(self.depth, 0, 1, 0.3, 0.8))
                surface.stroke(255, 240, 180, stroke_alpha)
            noisy = self.current_length * (0.9 + ctx.noise(i * 0.1, ctx.frame_count * 0.01) * 0.2)
            cos_a = math.cos(a)
            sin_a = math.sin(a)
            surface.line(
                cos_a * self.radius,
                sin_a * self.radius,
                cos_a * (self.radius + noisy),
                sin_a * (self.radius + noisy),
            )
        surface.no_stroke()
        surface.fill(255, 240, 180, stroke_alpha * 0.5)
        surface.ellipse(0, 0, self.radius * 0.5)
        surface.pop()
