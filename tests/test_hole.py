"""Tests for Hole construction guards, drift and rendering."""

from __future__ import annotations

import random

import pytest

from lifeart.context import FrameContext
from lifeart.entities.hole import MAX_INNER_RATIO, Hole
from lifeart.noise import NoiseField


def test_inner_radius_strictly_smaller_for_default_ranges(seeded_ctx):
    for _ in range(1000):
        hole = Hole.spawn(seeded_ctx)
        assert 5.0 <= hole.outer_radius < 10.0
        assert hole.inner_radius < hole.outer_radius


@pytest.mark.parametrize("inner_min, inner_max", [(1.0, 1.5), (0.9, 3.0), (-1.0, 0.0)])
def test_degenerate_inner_ranges_are_clamped(seeded_ctx, inner_min, inner_max):
    settings = {"innerMin": inner_min, "innerMax": inner_max}
    for _ in range(200):
        hole = Hole.spawn(seeded_ctx, settings)
        assert 0.0 <= hole.inner_radius < hole.outer_radius


def test_direct_construction_clamps_inner():
    hole = Hole(outer_radius=8.0, inner_radius=12.0)
    assert hole.inner_radius == pytest.approx(8.0 * MAX_INNER_RATIO)


def test_drift_step_and_offsets(ctx):
    # noise 0.5 -> heading pi -> moves toward -x
    hole = Hole(x=50.0, y=50.0, noise_x=3.0, noise_y=4.0)
    hole.update(ctx)
    assert hole.x == pytest.approx(49.95)
    assert hole.y == pytest.approx(50.0)
    assert hole.noise_x == pytest.approx(3.005)
    assert hole.noise_y == pytest.approx(4.005)


def test_drift_wraps(ctx):
    hole = Hole(x=0.01, y=50.0)
    hole.update(ctx)
    assert hole.x == pytest.approx(99.96)


def test_positions_stay_on_canvas():
    ctx = FrameContext(width=80.0, height=60.0, rng=random.Random(2), noise=NoiseField(2))
    holes = [Hole.spawn(ctx) for _ in range(20)]
    for _ in range(500):
        for hole in holes:
            hole.update(ctx)
            assert 0.0 <= hole.x < ctx.width
            assert 0.0 <= hole.y < ctx.height


def test_draw_layers(ctx, surface):
    hole = Hole(x=10.0, y=20.0, outer_radius=8.0, inner_radius=4.0, inner_color=(25.0, 12.0, 33.0))
    hole.draw(surface, ctx)
    assert surface.named("fill") == [(0, 0, 0), (25.0, 12.0, 33.0), (60, 50, 80, 100)]
    outer, inner, accent = surface.named("ellipse")
    assert outer == (0, 0, 16.0)
    assert inner == (0, 0, 8.0)
    ax, ay, ad = accent
    assert ax < 0 and ay < 0
    assert ad == pytest.approx(2.4)


def test_rescale_from_reference():
    ctx = FrameContext(width=1400.0, height=1400.0)
    hole = Hole(norm_x=0.5, norm_y=0.25, outer_radius=6.0, inner_radius=3.0)
    hole.rescale(ctx, 2.0)
    assert (hole.outer_radius, hole.inner_radius) == (12.0, 6.0)
    assert (hole.x, hole.y) == pytest.approx((700.0, 350.0))


@pytest.mark.parametrize("radius_min, radius_max", [(0.0, 0.0), (-10.0, -5.0)])
def test_degenerate_outer_ranges_survive_rescale(seeded_ctx, radius_min, radius_max):
    settings = {"radiusMin": radius_min, "radiusMax": radius_max}
    for _ in range(50):
        hole = Hole.spawn(seeded_ctx, settings)
        assert 0.0 <= hole.inner_radius < hole.outer_radius
        assert 0.0 <= hole.reference_inner < hole.reference_outer
        for scale in (2.0, 0.5):
            hole.rescale(seeded_ctx, scale)
            assert 0.0 <= hole.inner_radius < hole.outer_radius
