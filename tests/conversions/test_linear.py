import pytest

from chromacore import Color
from chromacore.conversions import from_linear, into_linear
from ..samples import random_colors


def test_into_linear_scales_alpha_without_gamma():
    r, g, b, a = into_linear(Color(255, 0, 188, 51))
    assert r == 1.0
    assert g == 0.0
    assert b == pytest.approx(0.50289, abs=1e-5)
    assert a == pytest.approx(0.2)


def test_from_linear_clamps():
    assert from_linear((2.0, -1.0, 0.5, 3.0)) == Color(255, 0, 188, 255)
    assert from_linear((0.0, 0.0, 0.0, -0.2)) == Color.TRANSPARENT


def test_round_trip_is_exact():
    for rgba in random_colors(1000, seed=11, alpha=True):
        color = Color.from_rgba(rgba)
        assert from_linear(into_linear(color)) == color


def test_lut_round_trip_close():
    for rgba in random_colors(300, seed=12, alpha=True):
        color = Color.from_rgba(rgba)
        out = from_linear(into_linear(color, use_lut=True), use_lut=True)
        assert all(abs(x - y) <= 1 for x, y in zip(out, color))
