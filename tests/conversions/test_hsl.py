import pytest

from chromacore import Color
from chromacore.conversions.hsl import (
    from_hsl,
    from_hsla,
    hsl_to_unit_rgb,
    into_hsl,
    into_hsla,
    normalize_hue,
    unit_rgb_to_hsl,
)
from ..samples import random_colors, samples_rgb_hsl


def test_into_hsl_samples():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = into_hsl(Color.from_rgb(rgb))
        assert abs(h - h_exp) < 1/2
        assert abs(s - s_exp) < 100/255
        assert abs(l - l_exp) < 100/255


def test_from_hsl_samples():
    for rgb, hsl in samples_rgb_hsl.items():
        assert from_hsl(hsl) == Color.from_rgb(rgb)


def test_into_hsla_alpha():
    assert into_hsla(Color(255, 0, 0, 51))[3] == pytest.approx(0.2)
    assert from_hsla((0, 100, 50, 0.2)) == Color(255, 0, 0, 51)


def test_gray_has_zero_hue_and_saturation():
    h, s, l = into_hsl(Color(128, 128, 128))
    assert h == 0.0
    assert s == 0.0
    assert l == pytest.approx(128 / 255 * 100)


def test_hue_wraps():
    green = from_hsl((120, 100, 50))
    assert from_hsl((480, 100, 50)) == green
    assert from_hsl((-240, 100, 50)) == green
    assert from_hsl((360, 100, 50)) == Color.RED


def test_saturation_and_lightness_clamp():
    assert from_hsl((0, 150, 50)) == Color.RED
    assert from_hsl((0, 100, -10)) == Color.BLACK
    assert from_hsl((0, 100, 120)) == Color.WHITE


def test_normalize_hue():
    assert normalize_hue(0) == 0.0
    assert normalize_hue(360) == 0.0
    assert normalize_hue(-90) == pytest.approx(270.0)
    assert normalize_hue(725) == pytest.approx(5.0)
    assert 0.0 <= normalize_hue(-1e-20) < 360.0


def test_unit_level_helpers():
    assert hsl_to_unit_rgb(0, 1, 0.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsl_to_unit_rgb(210, 0.5, 0.25) == pytest.approx((0.125, 0.25, 0.375))
    h, s, l = unit_rgb_to_hsl(0.125, 0.25, 0.375)
    assert (h, s, l) == pytest.approx((210.0, 0.5, 0.25))


def test_hue_stays_in_range():
    for rgb in random_colors(2000, seed=3):
        h, s, l = into_hsl(Color.from_rgb(rgb))
        assert 0.0 <= h < 360.0
        assert 0.0 <= s <= 100.0 + 1e-9
        assert 0.0 <= l <= 100.0


def test_round_trip_within_one():
    for rgba in random_colors(2000, seed=4, alpha=True):
        color = Color.from_rgba(rgba)
        out = from_hsla(into_hsla(color))
        assert out.a == color.a
        assert all(abs(x - y) <= 1 for x, y in zip(out.into_rgb(), color.into_rgb()))
