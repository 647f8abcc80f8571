"""Soft glowing blobs drifting on a noise field and breathing in size."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from lifeart.context import TWO_PI, FrameContext
from lifeart.control.profile import coerce_float

__all__ = ["NoiseBlob"]

Color = Tuple[float, float, float, float]

_ACCENT_WARM = (230, 150, 80)
_ACCENT_COOL = (50, 80, 150)


@dataclass
class NoiseBlob:
    x: float = 0.0
    y: float = 0.0
    norm_x: float = 0.0
    norm_y: float = 0.0
    base_radius: float = 60.0
    reference_radius: Optional[float] = None
    radius: Optional[float] = None
    phase: float = 0.0
    speed: float = 0.005
    color: Color = (230.0, 160.0, 140.0, 80.0)
    depth: float = 0.5
    dot_phase: float = 0.0
    dot_speed: float = 0.01
    noise_x: float = 0.0
    noise_y: float = 0.0
    noise_step: float = 0.01
    pulse_amp: float = 15.0
    drift_speed: float = 0.5
    glow_depth: float = 0.7

    def __post_init__(self) -> None:
        if self.reference_radius is None:
            self.reference_radius = self.base_radius
        if self.radius is None:
            self.radius = self._pulsed_radius()

    @classmethod
    def spawn(cls, ctx: FrameContext, settings: Optional[Mapping[str, object]] = None) -> "NoiseBlob":
        cfg = settings or {}
        x = ctx.uniform(ctx.width)
        y = ctx.uniform(ctx.height)
        radius = ctx.uniform(coerce_float(cfg.get("radiusMax"), 120.0))
        color = (
            230 + ctx.uniform(-20, 20),
            160 + ctx.uniform(-30, 30),
            140 + ctx.uniform(-50, 50),
            ctx.uniform(30, 120),
        )
        return cls(
            x=x,
            y=y,
            norm_x=x / ctx.width,
            norm_y=y / ctx.height,
            base_radius=radius * ctx.scale,
            reference_radius=radius,
            phase=ctx.uniform(TWO_PI),
            speed=ctx.uniform(coerce_float(cfg.get("speedMin"), 0.003), coerce_float(cfg.get("speedMax"), 0.01)),
            color=color,
            depth=ctx.uniform(1.0),
            dot_phase=ctx.uniform(TWO_PI),
            dot_speed=ctx.uniform(
                coerce_float(cfg.get("dotSpeedMin"), 0.005), coerce_float(cfg.get("dotSpeedMax"), 0.02)
            ),
            noise_x=ctx.uniform(1000),
            noise_y=ctx.uniform(1000),
            noise_step=coerce_float(cfg.get("noiseStep"), 0.01),
            pulse_amp=coerce_float(cfg.get("pulseAmp"), 15.0),
            drift_speed=coerce_float(cfg.get("driftSpeed"), 0.5),
            glow_depth=coerce_float(cfg.get("glowDepth"), 0.7),
        )

    def _pulsed_radius(self) -> float:
        return self.base_radius + math.sin(self.phase) * (self.pulse_amp * self.depth)

    @property
    def radius_bounds(self) -> Tuple[float, float]:
        amp = self.pulse_amp * self.depth
        return self.base_radius - amp, self.base_radius + amp

    def update(self, ctx: FrameContext) -> None:
        self.phase += self.speed
        self.radius = self._pulsed_radius()
        angle = ctx.noise(self.noise_x, self.noise_y) * TWO_PI * 4
        step = self.drift_speed * self.depth
        self.x += math.cos(angle) * step
        self.y += math.sin(angle) * step
        self.noise_x += self.noise_step
        self.noise_y += self.noise_step
        self.x, self.y = ctx.wrap(self.x, self.y)
        self.norm_x = self.x / ctx.width
        self.norm_y = self.y / ctx.height
        self.dot_phase += self.dot_speed

    def rescale(self, ctx: FrameContext, scale: float) -> None:
        self.x = self.norm_x * ctx.width
        self.y = self.norm_y * ctx.height
        self.base_radius = self.reference_radius * scale
        self.radius = self._pulsed_radius()

    def draw(self, surface, ctx: FrameContext) -> None:
        r = self.radius
        red, green, blue, alpha = self.color
        surface.push()
        surface.translate(self.x, self.y)
        if self.depth > self.glow_depth:
            surface.blend_mode("lighter")

        surface.fill(red, green, blue, alpha)
        surface.ellipse(0, 0, r)
        for i in range(3):
            surface.fill(red, green, blue, alpha * 0.3 / (i + 1))
            surface.ellipse(0, 0, r * 1.5 * (0.7 + i * 0.3))

        surface.no_fill()
        surface.stroke(255, 255, 255, alpha * 0.5)
        surface.stroke_weight(0.5)
        for i in range(5):
            surface.ellipse(0, 0, r * (0.3 + i * 0.1))

        for ring in range(1, 4):
            ring_radius = r * (0.4 + ring * 0.3)
            dots = 30 * ring
            offset = self.dot_phase * (1 - 0.1 * ring)
            for j in range(dots):
                angle = TWO_PI * j / dots + offset
                pulse = 1.5 + math.sin(ctx.frame_count * 0.05 + j) * 0.5
                accent = _ACCENT_WARM if j % 2 == 0 else _ACCENT_COOL
                surface.fill(*accent, alpha * 0.7)
                surface.ellipse(math.cos(angle) * ring_radius, math.sin(angle) * ring_radius, pulse)
        surface.pop()
