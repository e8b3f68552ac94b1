import pytest

from chromaticity.colors import Cmyk, Hex, Rgb, RgbNormalized, Yiq
from chromaticity.conversions.device import (
    apply_gamma,
    cmyk_to_rgb,
    denormalize_rgb,
    hex_to_rgb,
    normalize_rgb,
    rescale_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hex_int,
    rgb_to_yiq,
    yiq_to_rgb,
)
from chromaticity.errors import MissingGammaError, UnsupportedColorSpaceError
from tests.samples import round_trip_rgb, samples_rgb_cmyk, samples_rgb_hex, samples_rgb_yiq

rgb_tolerance = 1


def test_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        assert rgb_to_cmyk(Rgb(r, g, b)).values == expected


def test_cmyk_to_rgb():
    assert cmyk_to_rgb(Cmyk(0, 100, 100, 0)) == Rgb(255, 0, 0, 255)
    assert cmyk_to_rgb(Cmyk(0, 0, 0, 100)) == Rgb(0, 0, 0, 255)
    assert cmyk_to_rgb(Cmyk(0, 0, 0, 0), bit_depth=10) == Rgb(1023, 1023, 1023, 1023, 10)


def test_cmyk_round_trip():
    for r, g, b in round_trip_rgb:
        out = cmyk_to_rgb(rgb_to_cmyk(Rgb(r, g, b), round_result=False))
        assert (out.r, out.g, out.b) == (r, g, b)


def test_rgb_to_cmyk_clamps_out_of_range_channels():
    assert rgb_to_cmyk(Rgb(300, 0, 0)) == Cmyk(0, 100, 100, 0)
    assert rgb_to_cmyk(Rgb(-10, -10, -10)) == Cmyk(0, 0, 0, 100)


def test_rgb_to_yiq_normalized():
    for (r, g, b), expected in samples_rgb_yiq.items():
        yiq = rgb_to_yiq(Rgb(r, g, b))
        assert yiq.values == expected
        assert yiq.normalized


def test_rgb_to_yiq_unnormalized_is_not_rounded():
    yiq = rgb_to_yiq(Rgb(255, 0, 0), normalized=False)
    assert not yiq.normalized
    assert abs(yiq.y - 0.299) < 1e-9
    # I is clamped to its NTSC limit
    assert abs(yiq.i - 0.5957) < 1e-9
    assert abs(yiq.q - 0.2115) < 1e-9


@pytest.mark.parametrize("normalized", [True, False])
def test_yiq_round_trip(normalized):
    for r, g, b in round_trip_rgb:
        out = yiq_to_rgb(rgb_to_yiq(Rgb(r, g, b), normalized, round_result=False))
        assert abs(out.r - r) <= rgb_tolerance
        assert abs(out.g - g) <= rgb_tolerance
        assert abs(out.b - b) <= rgb_tolerance


def test_yiq_to_rgb_clamps():
    out = yiq_to_rgb(Yiq(255, 128, 128))
    for channel in (out.r, out.g, out.b):
        assert 0 <= channel <= 255


def test_rgb_to_hex():
    for (r, g, b), expected in samples_rgb_hex.items():
        assert rgb_to_hex(Rgb(r, g, b)).hex == expected


def test_hex_to_rgb():
    for (r, g, b), digits in samples_rgb_hex.items():
        assert hex_to_rgb(Hex(digits)) == Rgb(r, g, b, 255)


def test_hex_accepts_hash_and_uppercase():
    assert hex_to_rgb(Hex("#FF00FF")) == Rgb(255, 0, 255)
    assert str(Hex("#FF00FF")) == "#ff00ff"


def test_hex_respects_bit_depth():
    assert rgb_to_hex(Rgb(1023, 512, 0, bit_depth=10)).hex == "ff8000"
    assert hex_to_rgb(Hex("ff0000"), bit_depth=10) == Rgb(1023, 0, 0, 1023, 10)


def test_rgb_to_hex_int():
    assert rgb_to_hex_int(Rgb(255, 0, 255)) == 0xFF00FF
    assert rgb_to_hex_int(Rgb(0, 0, 1)) == 1


def test_rescale_rgb():
    assert rescale_rgb(Rgb(128, 0, 255), 10) == Rgb(514, 0, 1023, 1023, 10)
    assert rescale_rgb(Rgb(1023, 0, 0, bit_depth=10), 8) == Rgb(255, 0, 0, 255, 8)


def test_rescale_rgb_unrounded():
    out = rescale_rgb(Rgb(1, 0, 0), 16, round_result=False)
    assert abs(out.r - 257.0) < 1e-9
    assert out.a == 65535


def test_normalize_rgb():
    out = normalize_rgb(Rgb(255, 0, 51, 255))
    assert out.values == (1.0, 0.0, 0.2, 1.0)
    assert out.gamma is None


def test_denormalize_rgb():
    assert denormalize_rgb(RgbNormalized(1.0, 0.5, 0.0)) == Rgb(255, 128, 0, 255)
    # out-of-range channels are clamped
    assert denormalize_rgb(RgbNormalized(1.5, -0.2, 0.5)) == Rgb(255, 0, 128, 255)


def test_apply_gamma_exponent():
    out = apply_gamma(RgbNormalized(0.25, 0.5, 1.0, 0.5), 2.0)
    assert out.values == (0.0625, 0.25, 1.0, 0.5)
    assert out.gamma == 2.0


def test_apply_gamma_by_color_space_name():
    out = apply_gamma(RgbNormalized(0.5, 0.5, 0.5), "Adobe RGB (1998)")
    assert out.gamma == 2.2
    assert abs(out.r - 0.5 ** 2.2) < 1e-12


def test_apply_gamma_rejects_spaces_without_power_law():
    for name in ("srgb", "ecirgb"):
        with pytest.raises(MissingGammaError):
            apply_gamma(RgbNormalized(0.5, 0.5, 0.5), name)
    with pytest.raises(UnsupportedColorSpaceError):
        apply_gamma(RgbNormalized(0.5, 0.5, 0.5), "no-such-space")
