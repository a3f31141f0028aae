import pytest

from chromacore import Color, InterpolationSpace
from chromacore.interpolation import (
    INTERPOLATORS,
    lerp,
    lerp_hue,
    lerp_linear,
    lerp_oklch,
    mix,
    shortest_hue_delta,
)
from ..samples import random_colors


def test_srgb_midpoint():
    assert lerp(Color.BLACK, Color.WHITE, 0.5) == Color(128, 128, 128, 255)


def test_linear_midpoint():
    assert lerp_linear(Color.BLACK, Color.WHITE, 0.5) == Color(188, 188, 188, 255)


def test_endpoints_are_exact():
    colors = [Color.from_rgba(c) for c in random_colors(20, seed=41, alpha=True)]
    for a, b in zip(colors, colors[1:]):
        for fn in (lerp, lerp_linear):
            assert fn(a, b, 0.0) == a
            assert fn(a, b, 1.0) == b


def test_oklch_endpoints_within_one():
    colors = [Color.from_rgb(c) for c in random_colors(20, seed=42)]
    for a, b in zip(colors, colors[1:]):
        for t, expected in ((0.0, a), (1.0, b)):
            out = lerp_oklch(a, b, t)
            assert all(abs(x - y) <= 1 for x, y in zip(out, expected))


def test_factor_is_clamped():
    a, b = Color(10, 20, 30), Color(200, 100, 50, 100)
    for fn in (lerp, lerp_linear, lerp_oklch):
        assert fn(a, b, -1.0) == fn(a, b, 0.0)
        assert fn(a, b, 2.0) == fn(a, b, 1.0)


def test_alpha_is_interpolated_straight():
    transparent_red = Color.RED.with_alpha(0)
    assert lerp(transparent_red, Color.RED, 0.5).a == 128
    assert lerp_linear(transparent_red, Color.RED, 0.5).a == 128
    assert lerp_oklch(transparent_red, Color.RED, 0.5).a == 128


def test_oklch_red_to_blue_goes_through_magenta():
    mid = lerp_oklch(Color.RED, Color.BLUE, 0.5)
    assert mid.g < mid.r
    assert mid.g < mid.b
    assert mid.r > 128
    assert mid.b > 128


def test_oklch_gray_endpoint_borrows_hue():
    mid = lerp_oklch(Color.WHITE, Color.BLUE, 0.5)
    assert mid.b > mid.r
    assert mid.b > mid.g


def test_oklch_same_color():
    for rgb in random_colors(20, seed=43):
        c = Color.from_rgb(rgb)
        out = lerp_oklch(c, c, 0.37)
        assert all(abs(x - y) <= 1 for x, y in zip(out, c))


def test_shortest_hue_delta():
    assert shortest_hue_delta(10, 350) == -20
    assert shortest_hue_delta(350, 10) == 20
    assert shortest_hue_delta(0, 180) == 180
    assert shortest_hue_delta(180, 0) == 180
    assert shortest_hue_delta(90, 90) == 0


def test_lerp_hue_wraps():
    assert lerp_hue(350, 10, 0.5) == pytest.approx(0.0)
    assert lerp_hue(10, 350, 0.25) == pytest.approx(5.0)
    assert lerp_hue(340, 20, 0.75) == pytest.approx(10.0)


def test_mix_dispatch():
    a, b = Color(10, 20, 30), Color(200, 100, 50)
    assert set(INTERPOLATORS) == set(InterpolationSpace)
    assert mix(a, b, 0.3, InterpolationSpace.SRGB) == lerp(a, b, 0.3)
    assert mix(a, b, 0.3, "linear") == lerp_linear(a, b, 0.3)
    assert mix(a, b, 0.3) == lerp_oklch(a, b, 0.3)


def test_mix_rejects_unknown_space():
    with pytest.raises(ValueError):
        mix(Color.BLACK, Color.WHITE, 0.5, "hsv")
