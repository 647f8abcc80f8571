"""Scene driver owning the entity collections and the cached background."""

from __future__ import annotations

import copy
import random
from typing import Callable, Dict, List, Mapping, Optional

from lifeart.context import FrameContext, NoiseSampler
from lifeart.control.config import DEFAULT_VARIANT
from lifeart.control.profile import coerce_float, coerce_int, merge_state, resolve_settings
from lifeart.entities.hole import Hole
from lifeart.entities.noise_blob import NoiseBlob
from lifeart.entities.radiant import Radiant
from lifeart.entities.spark import Spark
from lifeart.noise import NoiseField
from lifeart.texture import generate_texture

__all__ = ["Scene"]

TextureFactory = Callable[..., object]


class Scene:
    """Drives per-frame update-then-draw for the four entity collections.

    Depth order, back to front: holes, blobs, radiants, sparks.  The host
    calls :meth:`initialize` once, :meth:`render_frame` once per refresh and
    :meth:`on_resize` between frames whenever the canvas changes size.
    """

    def __init__(
        self,
        settings: Optional[Mapping[str, object]] = None,
        *,
        seed: Optional[int] = None,
        noise: Optional[NoiseSampler] = None,
        texture_factory: TextureFactory = generate_texture,
    ) -> None:
        self.state: Dict[str, dict] = (
            copy.deepcopy(dict(settings)) if settings is not None else resolve_settings(DEFAULT_VARIANT)
        )
        system = self.state.get("system", {})
        if seed is None and isinstance(system, Mapping) and system.get("seed") is not None:
            seed = coerce_int(system.get("seed"), 0)
        self.seed = seed
        self.ctx = FrameContext(
            rng=random.Random(seed),
            noise=noise if noise is not None else NoiseField(seed),
        )
        self._texture_factory = texture_factory
        self.texture = None
        self.reference_min = 1.0
        self.blobs: List[NoiseBlob] = []
        self.radiants: List[Radiant] = []
        self.holes: List[Hole] = []
        self.sparks: List[Spark] = []
        self.initialized = False

    # ------------------------------------------------------------------ helpers
    @property
    def width(self) -> float:
        return self.ctx.width

    @property
    def height(self) -> float:
        return self.ctx.height

    @property
    def frame_count(self) -> int:
        return self.ctx.frame_count

    def _debug(self, message: str) -> None:
        print(f"[LifeArt][DEBUG] {message}", flush=True)

    def _section(self, name: str) -> Mapping[str, object]:
        section = self.state.get(name, {})
        return section if isinstance(section, Mapping) else {}

    def _flag(self, section: str, key: str) -> bool:
        return bool(self._section(section).get(key, True))

    def set_params(self, payload: Mapping[str, object]) -> None:
        """Merge ``payload`` into the settings; counts apply at next ``initialize``."""

        merge_state(self.state, payload)

    def _rebuild_texture(self) -> None:
        self.texture = self._texture_factory(
            int(self.ctx.width), int(self.ctx.height), self.ctx.rng, self._section("texture")
        )

    # ------------------------------------------------------------------ lifecycle
    def initialize(self, width: float, height: float) -> None:
        self.ctx.width = float(max(1, int(width)))
        self.ctx.height = float(max(1, int(height)))
        self.ctx.frame_count = 0
        self.ctx.scale = 1.0
        self.reference_min = min(self.ctx.width, self.ctx.height)
        self._rebuild_texture()

        def _count(section: str) -> int:
            return max(0, coerce_int(self._section(section).get("count"), 0))

        blob_cfg = self._section("blob")
        radiant_cfg = self._section("radiant")
        hole_cfg = self._section("hole")
        spark_cfg = self._section("spark")
        self.blobs = [NoiseBlob.spawn(self.ctx, blob_cfg) for _ in range(_count("blob"))]
        self.radiants = [Radiant.spawn(self.ctx, radiant_cfg) for _ in range(_count("radiant"))]
        self.holes = [Hole.spawn(self.ctx, hole_cfg) for _ in range(_count("hole"))]
        self.sparks = [Spark.spawn(self.ctx, spark_cfg) for _ in range(_count("spark"))]
        self.initialized = True
        self._debug(
            f"initialised {int(self.ctx.width)}x{int(self.ctx.height)} "
            f"blobs={len(self.blobs)} radiants={len(self.radiants)} "
            f"holes={len(self.holes)} sparks={len(self.sparks)}"
        )

    def render_frame(self, surface) -> None:
        self.ctx.frame_count += 1
        ctx = self.ctx

        if self.texture is not None:
            surface.image(self.texture, 0, 0)
        trail_alpha = coerce_float(self._section("system").get("trailAlpha"), 25.0)
        surface.no_stroke()
        surface.fill(0, 0, 0, trail_alpha)
        surface.rect(0, 0, ctx.width, ctx.height)

        hole_motion = self._flag("hole", "motion")
        for hole in self.holes:
            if hole_motion:
                hole.update(ctx)
            hole.draw(surface, ctx)

        for blob in self.blobs:
            blob.update(ctx)
            blob.draw(surface, ctx)

        radiant_motion = self._flag("radiant", "motion")
        for radiant in self.radiants:
            if radiant_motion:
                radiant.update(ctx)
            radiant.draw(surface, ctx)

        for spark in self.sparks:
            spark.update(ctx)
            spark.draw(surface, ctx)

    def on_resize(self, width: float, height: float) -> None:
        """Regenerate the texture and re-derive every entity's pixel geometry."""

        self.ctx.width = float(max(1, int(width)))
        self.ctx.height = float(max(1, int(height)))
        if not self.initialized:
            return
        scale = min(self.ctx.width, self.ctx.height) / self.reference_min
        self.ctx.scale = scale
        self._rebuild_texture()
        for collection in (self.blobs, self.radiants, self.holes, self.sparks):
            for entity in collection:
                entity.rescale(self.ctx, scale)
        self._debug(f"resized to {int(self.ctx.width)}x{int(self.ctx.height)} scale={scale:.4f}")
