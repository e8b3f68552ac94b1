# No dependencies
from enum import Enum


class ColorMode(str, Enum):
    RGB = "rgb"
    REC709RGB = "rec709rgb"
    REC2020RGB = "rec2020rgb"
    RGB_NORMALIZED = "rgbnormalized"
    HEX = "hex"
    HSV = "hsv"
    HSL = "hsl"
    HSI = "hsi"
    HSP = "hsp"
    CMYK = "cmyk"
    YIQ = "yiq"
    XYZ = "xyz"
    XYY = "xyy"
    LAB = "lab"
    LUV = "luv"
    YPBPR = "ypbpr"
    YCBCR = "ycbcr"
    NM = "nm"
    KELVIN = "kelvin"


HUE_MODES = frozenset({ColorMode.HSV, ColorMode.HSL, ColorMode.HSI, ColorMode.HSP})
CIE_MODES = frozenset({ColorMode.XYZ, ColorMode.XYY, ColorMode.LAB, ColorMode.LUV})
SOURCE_ONLY_MODES = frozenset({ColorMode.NM, ColorMode.KELVIN})

HUE_360 = 360
PERCENT = 100

default_bit_depths = {
    ColorMode.RGB: 8,
    ColorMode.HEX: 8,
    ColorMode.REC709RGB: 8,
    ColorMode.REC2020RGB: 10,
}

# legal (black, white) code values per bit depth
legal_ranges = {
    ColorMode.REC709RGB: {8: (16, 235), 10: (64, 940)},
    ColorMode.REC2020RGB: {10: (64, 940), 12: (256, 3760)},
}


def max_for_bit_depth(bit_depth: int) -> int:
    return (2 ** bit_depth) - 1
