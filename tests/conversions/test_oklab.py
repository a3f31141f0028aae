import pytest

from chromacore import Color
from chromacore.conversions.oklab import (
    from_oklab,
    from_oklch,
    gamut_map_chroma,
    in_gamut,
    into_oklab,
    into_oklch,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
)
from ..samples import random_colors, samples_rgb_oklab


def test_into_oklab_samples():
    for rgb, expected in samples_rgb_oklab.items():
        assert into_oklab(Color.from_rgb(rgb)) == pytest.approx(expected, abs=1e-3)


def test_white_is_achromatic():
    L, a, b = into_oklab(Color.WHITE)
    assert L == pytest.approx(1.0, abs=1e-4)
    assert abs(a) < 1e-4
    assert abs(b) < 1e-4


def test_polar_helpers():
    L, c, h = oklab_to_oklch((0.5, 0.0, 0.1))
    assert (L, c, h) == pytest.approx((0.5, 0.1, 90.0))
    assert oklch_to_oklab((0.5, 0.1, 90.0)) == pytest.approx((0.5, 0.0, 0.1), abs=1e-12)
    assert oklab_to_oklch((0.5, 0.0, -0.1))[2] == pytest.approx(270.0)


def test_oklab_round_trip_within_one():
    for rgb in random_colors(1000, seed=21):
        color = Color.from_rgb(rgb)
        out = from_oklab(into_oklab(color))
        assert all(abs(x - y) <= 1 for x, y in zip(out, color))


def test_oklch_round_trip_within_one():
    for rgb in random_colors(1000, seed=22):
        color = Color.from_rgb(rgb)
        out = from_oklch(into_oklch(color))
        assert all(abs(x - y) <= 1 for x, y in zip(out, color))


def test_oklch_hue_range():
    for rgb in random_colors(500, seed=23):
        _, c, h = into_oklch(Color.from_rgb(rgb))
        assert c >= 0.0
        assert 0.0 <= h < 360.0


def test_from_oklab_clamps_and_is_opaque():
    assert from_oklab((1.5, 0.0, 0.0)) == Color.WHITE
    assert from_oklab((0.5, 0.4, 0.0)).a == 255


def test_gamut_map_keeps_in_gamut_chroma():
    assert gamut_map_chroma((0.5, 0.05, 200.0)) == 0.05


def test_gamut_map_reduces_chroma_to_boundary():
    lch = (0.7, 0.4, 150.0)
    c = gamut_map_chroma(lch)
    assert 0.0 < c < 0.4
    assert in_gamut(oklab_to_linear_rgb(oklch_to_oklab((0.7, c, 150.0))))
    assert not in_gamut(oklab_to_linear_rgb(oklch_to_oklab((0.7, c + 1e-3, 150.0))))


def test_negative_chroma_gives_gray():
    color = from_oklch((0.5, -0.1, 30.0))
    assert color.r == color.g == color.b


def test_from_oklch_out_of_gamut_keeps_lightness():
    color = from_oklch((0.7, 0.4, 150.0))
    L, c, _ = into_oklch(color)
    assert L == pytest.approx(0.7, abs=0.01)
    assert c < 0.4
