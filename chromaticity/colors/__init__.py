"""
Chromaticity Value Types
========================

One immutable record per color representation. The records do not share a
base class; each carries a ``mode`` tag (a ``ColorMode``) plus whatever
auxiliary state it needs to be self-describing (bit depth, color space,
reference white, luma coefficients, legal bounds).

Usage
-----
>>> from chromaticity.colors import Rgb, Hsv
>>> orange = Rgb(255, 128, 0)
>>> orange.a, orange.max
(255, 255)
>>> Hsv(30, 100, 100).values
(30, 100, 100, 100)

Types
-----
- Rgb, Rec709Rgb, Rec2020Rgb, RgbNormalized, Hex
- Hsv, Hsl, Hsi, Hsp
- Cmyk, Yiq
- Xyz, Xyy, Lab, Luv
- Ypbpr, Ycbcr
- Nm, Kelvin (sources only)

Notes
-----
- Records are frozen dataclasses; conversions always return new records
- Constructors do not clamp; conversions clamp their outputs
"""

from .rgb import Rgb, Rec709Rgb, Rec2020Rgb, RgbNormalized, Hex
from .hsv import Hsv
from .hsl import Hsl
from .hsi import Hsi
from .hsp import Hsp
from .device import Cmyk, Yiq
from .cie import Xyz, Xyy, Lab, Luv
from .video import Ypbpr, Ycbcr
from .spectral import Nm, Kelvin
from .color_base import ColorValue, color_registry, get_color_class

__all__ = [
    "Rgb", "Rec709Rgb", "Rec2020Rgb", "RgbNormalized", "Hex",
    "Hsv", "Hsl", "Hsi", "Hsp",
    "Cmyk", "Yiq",
    "Xyz", "Xyy", "Lab", "Luv",
    "Ypbpr", "Ycbcr",
    "Nm", "Kelvin",
    "ColorValue", "color_registry", "get_color_class",
]
