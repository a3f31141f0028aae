import numpy as np
import pytest

from chromacore.conversions.transfer import (
    decode_srgb,
    decode_srgb_lut,
    decode_srgb_reference,
    encode_srgb,
    encode_srgb_lut,
    encode_srgb_reference,
    np_decode_srgb,
    np_encode_srgb,
)
from ..samples import samples_srgb_linear


def test_decode_golden_values():
    for code, expected in samples_srgb_linear.items():
        assert decode_srgb(code) == pytest.approx(expected, abs=1e-9)


def test_decode_endpoints_exact():
    assert decode_srgb(0) == 0.0
    assert decode_srgb(255) == 1.0


def test_encode_golden_values():
    for code, linear in samples_srgb_linear.items():
        assert encode_srgb(linear) == code
    assert encode_srgb(0.5) == 188


def test_encode_clamps():
    assert encode_srgb(-0.5) == 0
    assert encode_srgb(1.5) == 255
    assert encode_srgb(-0.5, use_lut=True) == 0
    assert encode_srgb(1.5, use_lut=True) == 255


def test_reference_round_trip_all_codes():
    for code in range(256):
        assert encode_srgb(decode_srgb(code)) == code


def test_decode_is_monotonic():
    values = [decode_srgb(code) for code in range(256)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_lut_decode_matches_reference():
    for code in range(256):
        assert decode_srgb_lut(code) == pytest.approx(decode_srgb_reference(code), abs=1e-12)
        assert decode_srgb(code, use_lut=True) == decode_srgb_lut(code)


def test_lut_encode_within_one_of_reference():
    for linear in np.linspace(0.0, 1.0, 10001):
        assert abs(encode_srgb_lut(float(linear)) - encode_srgb_reference(float(linear))) <= 1


def test_lut_round_trip_within_one():
    for code in range(256):
        assert abs(encode_srgb(decode_srgb(code, use_lut=True), use_lut=True) - code) <= 1


def test_numpy_versions_match_scalar():
    codes = np.arange(256)
    decoded = np_decode_srgb(codes)
    assert decoded.shape == (256,)
    assert np.allclose(decoded, [decode_srgb_reference(int(c)) for c in codes], atol=1e-12)

    encoded = np_encode_srgb(decoded)
    assert encoded.dtype == np.uint8
    assert np.array_equal(encoded, codes)


def test_numpy_encode_clamps_and_keeps_shape():
    out = np_encode_srgb(np.array([[-1.0, 0.0], [1.0, 2.0]]))
    assert out.shape == (2, 2)
    assert out.tolist() == [[0, 0], [255, 255]]
