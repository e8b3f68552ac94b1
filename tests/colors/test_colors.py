import dataclasses

import pytest

from chromaticity.colors import (
    Cmyk, Hex, Hsp, Hsv, Kelvin, Lab, Nm, Rec709Rgb, Rec2020Rgb, Rgb, RgbNormalized,
    Xyy, Ycbcr, Yiq, Ypbpr, color_registry, get_color_class,
)
from chromaticity.types.color_types import is_cie_mode, is_hue_mode
from chromaticity.types.format_type import ColorMode


def test_rgb_alpha_defaults_to_channel_max():
    assert Rgb(1, 2, 3).a == 255
    assert Rgb(1, 2, 3, bit_depth=10).a == 1023
    assert Rgb(1, 2, 3, bit_depth=10).max == 1023
    assert Rec709Rgb(16, 16, 16).bit_depth == 8
    assert Rec2020Rgb(64, 64, 64).a == 1023


def test_explicit_alpha_is_kept():
    assert Rgb(1, 2, 3, 0).a == 0
    assert Rgb(1, 2, 3, 100).values == (1, 2, 3, 100)


def test_hex_is_normalized():
    assert Hex("#FFAA00").hex == "ffaa00"
    assert Hex("  ffaa00 ").hex == "ffaa00"
    assert str(Hex("FFAA00")) == "#ffaa00"
    assert Hex("#ABCDEF") == Hex("abcdef")


def test_hue_models_default_alpha():
    assert Hsv(1, 2, 3).a == 100
    assert Hsp(1, 2, 3).values == (1, 2, 3, 100)


def test_hsp_green_weight():
    hsp = Hsp(0, 0, 0)
    assert (hsp.pb, hsp.pr) == (0.114, 0.299)
    assert abs(hsp.pg - 0.587) < 1e-12


def test_ypbpr_green_coefficient():
    assert abs(Ypbpr(0.5, 0, 0, 0.0722, 0.2126).kg - 0.7152) < 1e-12


def test_self_describing_defaults():
    lab = Lab(50, 0, 0)
    assert (lab.color_space, lab.reference_white) == ("srgb", "d65")
    assert Xyy(0.3, 0.3, 0.5).values == (0.3, 0.3, 0.5)
    ycbcr = Ycbcr(16, 128, 128)
    assert (ycbcr.y_lower, ycbcr.y_upper, ycbcr.c_lower, ycbcr.c_upper) == (16, 235, 16, 240)
    assert ycbcr.kb is None
    assert Yiq(0, 0, 0).normalized
    assert RgbNormalized(0.1, 0.2, 0.3).values == (0.1, 0.2, 0.3, 1.0)


def test_values_are_immutable():
    for color in (Rgb(1, 2, 3), Hex("000000"), Cmyk(0, 0, 0, 0), Lab(0, 0, 0)):
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(color, dataclasses.fields(color)[0].name, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        Rgb(1, 2, 3).r = 4


def test_mode_tags():
    assert Rgb.mode is ColorMode.RGB
    assert Nm(500).mode is ColorMode.NM
    assert Kelvin(5000).mode is ColorMode.KELVIN
    assert RgbNormalized(0, 0, 0).mode is ColorMode.RGB_NORMALIZED


def test_registry_covers_every_mode():
    assert set(color_registry) == set(ColorMode)
    for mode, cls in color_registry.items():
        assert cls.mode is mode


def test_get_color_class():
    assert get_color_class("hsv") is Hsv
    assert get_color_class("HEX") is Hex
    assert get_color_class(ColorMode.LAB) is Lab
    with pytest.raises(ValueError):
        get_color_class("pantone")


def test_mode_families():
    assert is_hue_mode("hsp")
    assert not is_hue_mode(ColorMode.RGB)
    assert is_cie_mode("XYY")
    assert not is_cie_mode("ycbcr")
