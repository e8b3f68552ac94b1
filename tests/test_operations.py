from chromaticity import blend, rotate_hue
from chromaticity.colors import Hex, Hsl, Hsv, Lab, Rgb


def test_blend_rgb():
    red = Rgb(255, 0, 0)
    green = Rgb(0, 255, 0)
    assert blend(red, green) == Rgb(128, 128, 0, 255)
    assert blend(red, green, 0) == red
    assert blend(red, green, 1) == Rgb(0, 255, 0, 255)


def test_blend_amount_is_clamped():
    red = Rgb(255, 0, 0)
    green = Rgb(0, 255, 0)
    assert blend(red, green, 2) == blend(red, green, 1)
    assert blend(red, green, -1) == blend(red, green, 0)


def test_blend_includes_alpha():
    assert blend(Rgb(0, 0, 0, 0), Rgb(0, 0, 0, 255)).a == 128


def test_blend_keeps_the_first_colors_type():
    out = blend(Hsv(0, 100, 100), Hsv(120, 100, 100))
    assert out == Hsv(60, 100, 50, 100)
    assert isinstance(blend(Hex("ff0000"), Rgb(0, 0, 255)), Hex)
    assert blend(Hex("ff0000"), Rgb(0, 0, 255)) == Hex("800080")


def test_blend_at_higher_bit_depth():
    out = blend(Rgb(0, 0, 0, bit_depth=10), Rgb(255, 255, 255))
    assert out.bit_depth == 10
    assert out.r == 512


def test_blend_unrounded():
    out = blend(Rgb(255, 0, 0), Rgb(0, 255, 0), round_result=False)
    assert out.r == 127.5


def test_blend_keeps_cie_context():
    start = Lab(50, 0, 0, "adobe98", "d50")
    out = blend(start, Lab(60, 0, 0, "adobe98", "d50"))
    assert (out.color_space, out.reference_white) == ("adobe98", "d50")
    assert 50 <= out.l <= 60


def test_rotate_hue_in_place():
    assert rotate_hue(Hsv(350, 50, 50), 20) == Hsv(10, 50, 50)
    assert rotate_hue(Hsl(10, 50, 50), -20) == Hsl(350, 50, 50)
    assert rotate_hue(Hsv(0, 50, 50), 720) == Hsv(0, 50, 50)


def test_rotate_hue_rgb():
    assert rotate_hue(Rgb(255, 0, 0), 120) == Rgb(0, 255, 0, 255)
    assert rotate_hue(Rgb(255, 0, 0), 240) == Rgb(0, 0, 255, 255)


def test_rotate_hue_unrounded():
    assert rotate_hue(Hsv(0.25, 10, 10), 0.5, round_result=False).h == 0.75
