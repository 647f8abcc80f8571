"""Flickering particles that drift on a time-varying noise field and recycle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from lifeart.context import TWO_PI, FrameContext
from lifeart.control.profile import coerce_float

__all__ = ["Spark", "DOT", "LINE"]

DOT = "dot"
LINE = "line"


@dataclass
class Spark:
    x: float = 0.0
    y: float = 0.0
    norm_x: float = 0.0
    norm_y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    size: float = 2.0
    unscaled_size: Optional[float] = None
    base_alpha: float = 100.0
    color_shift: float = 50.0
    life: float = 300.0
    age: int = 0
    kind: str = DOT
    noise_scale: float = 0.03
    max_speed: float = 1.0
    steer: float = 0.05
    size_range: tuple = (1.0, 3.0)
    life_range: tuple = (100.0, 500.0)
    resets: int = 0

    def __post_init__(self) -> None:
        if self.unscaled_size is None:
            self.unscaled_size = self.size

    @classmethod
    def spawn(cls, ctx: FrameContext, settings: Optional[Mapping[str, object]] = None) -> "Spark":
        cfg = settings or {}
        spark = cls(
            max_speed=coerce_float(cfg.get("maxSpeed"), 1.0),
            steer=coerce_float(cfg.get("steer"), 0.05),
            size_range=(coerce_float(cfg.get("sizeMin"), 1.0), coerce_float(cfg.get("sizeMax"), 3.0)),
            life_range=(coerce_float(cfg.get("lifeMin"), 100.0), coerce_float(cfg.get("lifeMax"), 500.0)),
        )
        spark.reset(ctx)
        spark.resets = 0
        spark.kind = LINE if ctx.rng.random() < coerce_float(cfg.get("lineChance"), 0.3) else DOT
        spark.noise_scale = ctx.uniform(0.01, 0.05)
        return spark

    def reset(self, ctx: FrameContext) -> None:
        """Reinitialise motion and appearance in place; ``kind`` is kept."""

        self.x = ctx.uniform(ctx.width)
        self.y = ctx.uniform(ctx.height)
        self.norm_x = self.x / ctx.width
        self.norm_y = self.y / ctx.height
        ux, uy = ctx.random_unit()
        self.vx = ux * 0.5
        self.vy = uy * 0.5
        self.unscaled_size = ctx.uniform(*self.size_range)
        self.size = self.unscaled_size * ctx.scale
        self.base_alpha = ctx.uniform(50, 150)
        self.color_shift = ctx.uniform(100)
        self.life = ctx.uniform(*self.life_range)
        self.age = 0
        self.resets += 1

    def on_canvas(self, ctx: FrameContext) -> bool:
        return 0.0 <= self.x <= ctx.width and 0.0 <= self.y <= ctx.height

    def update(self, ctx: FrameContext) -> None:
        heading = ctx.noise(self.x * self.noise_scale, self.y * self.noise_scale, ctx.frame_count * 0.01) * TWO_PI * 2
        self.vx += math.cos(heading) * self.steer
        self.vy += math.sin(heading) * self.steer
        speed = math.hypot(self.vx, self.vy)
        if speed > self.max_speed:
            self.vx *= self.max_speed / speed
            self.vy *= self.max_speed / speed
        self.x += self.vx
        self.y += self.vy
        self.age += 1
        if self.age > self.life or not self.on_canvas(ctx):
            self.reset(ctx)
            return
        self.norm_x = self.x / ctx.width
        self.norm_y = self.y / ctx.height

    def rescale(self, ctx: FrameContext, scale: float) -> None:
        self.x = self.norm_x * ctx.width
        self.y = self.norm_y * ctx.height
        self.size = self.unscaled_size * scale

    def flicker_alpha(self) -> float:
        return self.base_alpha * (0.5 + 0.5 * math.sin(self.age * 0.05))

    def draw(self, surface, ctx: FrameContext) -> None:
        alpha = self.flicker_alpha()
        shift = self.color_shift
        col = (255 - shift, 215 - shift * 0.5, 130 + shift * 0.3)
        if self.kind == LINE:
            heading = ctx.noise(self.x * 0.01, self.y * 0.01, ctx.frame_count * 0.01) * TWO_PI
            surface.stroke(*col, alpha)
            surface.stroke_weight(self.size * 0.5)
            surface.line(
                self.x,
                self.y,
                self.x + math.cos(heading) * self.size * 3,
                self.y + math.sin(heading) * self.size * 3,
            )
            return
        surface.no_stroke()
        surface.fill(*col, alpha)
        surface.ellipse(self.x, self.y, self.size * (1 + ctx.noise(ctx.frame_count * 0.1) * 0.5))
        surface.fill(*col, alpha * 0.3)
        surface.ellipse(self.x, self.y, self.size * 3 * (1 + ctx.noise(ctx.frame_count * 0.1 + 10) * 0.2))
