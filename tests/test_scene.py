"""Tests for the scene driver: population, frame sequencing and resize."""

from __future__ import annotations

import pytest
from conftest import RecordingSurface, constant_noise

from lifeart.control.profile import resolve_settings
from lifeart.scene import Scene


class TextureStub:
    def __init__(self):
        self.calls = []

    def __call__(self, width, height, rng, settings):
        self.calls.append((width, height, dict(settings)))
        return ("texture", width, height)


def make_scene(variant="responsive", **overrides):
    factory = TextureStub()
    scene = Scene(resolve_settings(variant, overrides), seed=99, texture_factory=factory)
    return scene, factory


@pytest.mark.parametrize(
    "variant, blobs",
    [("fixed-700", 40), ("fixed-900", 50), ("responsive", 60)],
)
def test_initialize_populates_fixed_counts(variant, blobs):
    scene, factory = make_scene(variant)
    scene.initialize(700, 700)
    assert len(scene.blobs) == blobs
    assert len(scene.radiants) == 25
    assert len(scene.holes) == 20
    assert len(scene.sparks) == 200
    assert factory.calls[0][:2] == (700, 700)
    assert scene.texture == ("texture", 700, 700)


def test_initialize_clamps_degenerate_size():
    scene, _ = make_scene(blob={"count": 1}, radiant={"count": 0}, hole={"count": 0}, spark={"count": 0})
    scene.initialize(0, -5)
    assert (scene.width, scene.height) == (1.0, 1.0)


def test_render_frame_order():
    scene, _ = make_scene(blob={"count": 2}, radiant={"count": 1}, hole={"count": 1}, spark={"count": 1})
    scene.initialize(200, 200)
    surface = RecordingSurface()
    scene.render_frame(surface)
    assert scene.frame_count == 1
    names = surface.names()
    assert names[0] == "image"
    assert surface.calls[0][1] == (("texture", 200, 200), 0, 0)
    assert ("fill", (0, 0, 0, 25.0)) in surface.calls[:4]
    assert ("rect", (0, 0, 200.0, 200.0)) in surface.calls[:4]
    translates = surface.named("translate")
    hole, blob_a, blob_b, radiant = scene.holes[0], scene.blobs[0], scene.blobs[1], scene.radiants[0]
    assert translates == [
        (hole.x, hole.y),
        (blob_a.x, blob_a.y),
        (blob_b.x, blob_b.y),
        (radiant.x, radiant.y),
    ]


def test_frame_counter_advances():
    scene, _ = make_scene(blob={"count": 0}, radiant={"count": 0}, hole={"count": 0}, spark={"count": 3})
    scene.initialize(100, 100)
    for _ in range(5):
        scene.render_frame(RecordingSurface())
    assert scene.frame_count == 5


def test_simplest_variant_keeps_holes_and_radiants_still():
    scene, _ = make_scene("fixed-700")
    scene.initialize(700, 700)
    holes = [(h.x, h.y) for h in scene.holes]
    radiants = [(r.x, r.y, r.angle) for r in scene.radiants]
    blobs = [(b.x, b.y) for b in scene.blobs]
    for _ in range(3):
        scene.render_frame(RecordingSurface())
    assert [(h.x, h.y) for h in scene.holes] == holes
    assert [(r.x, r.y, r.angle) for r in scene.radiants] == radiants
    assert [(b.x, b.y) for b in scene.blobs] != blobs


def test_motion_variant_moves_radiants():
    scene, _ = make_scene("fixed-900")
    scene.initialize(900, 900)
    angles = [r.angle for r in scene.radiants]
    scene.render_frame(RecordingSurface())
    assert all(r.angle != a for r, a in zip(scene.radiants, angles))


def test_every_entity_stays_on_canvas():
    scene, _ = make_scene()
    scene.initialize(320, 240)
    for _ in range(60):
        scene.render_frame(RecordingSurface())
    for collection in (scene.blobs, scene.radiants, scene.holes):
        for entity in collection:
            assert 0.0 <= entity.x < 320 and 0.0 <= entity.y < 240
    for spark in scene.sparks:
        assert spark.on_canvas(scene.ctx)


def test_resize_doubles_positions_and_sizes():
    scene, factory = make_scene()
    scene.initialize(700, 700)
    for _ in range(3):
        scene.render_frame(RecordingSurface())
    before = {
        "blobs": [(b.x, b.y, b.base_radius) for b in scene.blobs],
        "radiants": [(r.x, r.y, r.radius, r.length) for r in scene.radiants],
        "holes": [(h.x, h.y, h.outer_radius, h.inner_radius) for h in scene.holes],
        "sparks": [(s.x, s.y, s.size) for s in scene.sparks],
    }
    scene.on_resize(1400, 1400)
    assert factory.calls[-1][:2] == (1400, 1400)
    assert scene.ctx.scale == 2.0
    for blob, (x, y, r) in zip(scene.blobs, before["blobs"]):
        assert (blob.x, blob.y) == pytest.approx((2 * x, 2 * y))
        assert blob.base_radius == 2 * r
    for radiant, (x, y, r, length) in zip(scene.radiants, before["radiants"]):
        assert (radiant.x, radiant.y) == pytest.approx((2 * x, 2 * y))
        assert radiant.radius == 2 * r
        assert radiant.length == 2 * length
    for hole, (x, y, outer, inner) in zip(scene.holes, before["holes"]):
        assert (hole.x, hole.y) == pytest.approx((2 * x, 2 * y))
        assert (hole.outer_radius, hole.inner_radius) == (2 * outer, 2 * inner)
    for spark, (x, y, size) in zip(scene.sparks, before["sparks"]):
        assert (spark.x, spark.y) == pytest.approx((2 * x, 2 * y))
        assert spark.size == pytest.approx(2 * size)


def test_repeated_resizes_do_not_drift():
    scene, _ = make_scene()
    scene.initialize(700, 700)
    radii = [h.outer_radius for h in scene.holes]
    for width in (1000, 333, 1777, 512, 700):
        scene.on_resize(width, width)
    assert [h.outer_radius for h in scene.holes] == radii


def test_resize_uses_minimum_dimension():
    scene, _ = make_scene()
    scene.initialize(700, 500)
    scene.on_resize(1400, 750)
    assert scene.ctx.scale == pytest.approx(1.5)


def test_seeded_scenes_are_reproducible():
    a = Scene(resolve_settings("fixed-900"), seed=5, texture_factory=TextureStub())
    b = Scene(resolve_settings("fixed-900"), seed=5, texture_factory=TextureStub())
    for scene in (a, b):
        scene.initialize(900, 900)
        for _ in range(10):
            scene.render_frame(RecordingSurface())
    assert [(s.x, s.y) for s in a.sparks] == [(s.x, s.y) for s in b.sparks]
    assert [(r.angle, r.x) for r in a.radiants] == [(r.angle, r.x) for r in b.radiants]


def test_seed_read_from_settings():
    scene = Scene(resolve_settings("fixed-700", {"system": {"seed": 17}}), texture_factory=TextureStub())
    assert scene.seed == 17


def test_injected_noise_is_shared_with_entities():
    scene = Scene(
        resolve_settings("fixed-900", {"blob": {"count": 1}}),
        seed=1,
        noise=constant_noise(0.5),
        texture_factory=TextureStub(),
    )
    scene.initialize(900, 900)
    assert scene.ctx.noise(123.0, 4.0) == 0.5


def test_set_params_applies_on_next_initialize():
    scene, _ = make_scene()
    scene.initialize(300, 300)
    scene.set_params({"spark": {"count": 7}, "system": {"trailAlpha": 40}})
    assert len(scene.sparks) == 200
    scene.initialize(300, 300)
    assert len(scene.sparks) == 7
    surface = RecordingSurface()
    scene.render_frame(surface)
    assert ("fill", (0, 0, 0, 40.0)) in surface.calls[:4]
