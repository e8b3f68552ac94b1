from __future__ import annotations
from typing import Dict, Union

from ..types.format_type import ColorMode
from ..types.color_types import ColorModeLike, as_mode
from .rgb import Rgb, Rec709Rgb, Rec2020Rgb, RgbNormalized, Hex
from .hsv import Hsv
from .hsl import Hsl
from .hsi import Hsi
from .hsp import Hsp
from .device import Cmyk, Yiq
from .cie import Xyz, Xyy, Lab, Luv
from .video import Ypbpr, Ycbcr
from .spectral import Nm, Kelvin

ColorValue = Union[
    Rgb, Rec709Rgb, Rec2020Rgb, RgbNormalized, Hex,
    Hsv, Hsl, Hsi, Hsp,
    Cmyk, Yiq,
    Xyz, Xyy, Lab, Luv,
    Ypbpr, Ycbcr,
    Nm, Kelvin,
]


def build_registry(*classes: type) -> Dict[ColorMode, type]:
    return {
        cls.mode: cls
        for cls in classes
    }


color_registry = build_registry(
    Rgb, Rec709Rgb, Rec2020Rgb, RgbNormalized, Hex,
    Hsv, Hsl, Hsi, Hsp,
    Cmyk, Yiq,
    Xyz, Xyy, Lab, Luv,
    Ypbpr, Ycbcr,
    Nm, Kelvin,
)


def get_color_class(mode: ColorModeLike) -> type:
    color_class = color_registry.get(as_mode(mode))
    if color_class is None:
        raise ValueError(f"Unsupported color mode: {mode}")
    return color_class
