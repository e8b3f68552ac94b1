"""Chromaticity: colorimetric conversion utilities."""

import logging

from .colors import (
    Rgb,
    Rec709Rgb,
    Rec2020Rgb,
    RgbNormalized,
    Hex,
    Hsv,
    Hsl,
    Hsi,
    Hsp,
    Cmyk,
    Yiq,
    Xyz,
    Xyy,
    Lab,
    Luv,
    Ypbpr,
    Ycbcr,
    Nm,
    Kelvin,
    ColorValue,
    get_color_class,
)
from .config import ConversionOptions, DEFAULT_OPTIONS, resolve_options
from .conversions import convert
from .errors import (
    ChromaticityError,
    ConfigurationError,
    UnsupportedColorSpaceError,
    UnsupportedReferenceWhiteError,
    UnsupportedCombinationError,
    MissingGammaError,
    InvalidBitRateError,
    InvalidLumaCoefficientsError,
    MissingParameterError,
    UnsupportedConversionError,
    InvalidHueError,
)
from .operations import blend, rotate_hue
from .reference import get_matrices, supported_combinations
from .types.format_type import ColorMode

__version__ = "1.0.0"

logging.getLogger("chromaticity").addHandler(logging.NullHandler())

__all__ = [
    # value types
    "Rgb",
    "Rec709Rgb",
    "Rec2020Rgb",
    "RgbNormalized",
    "Hex",
    "Hsv",
    "Hsl",
    "Hsi",
    "Hsp",
    "Cmyk",
    "Yiq",
    "Xyz",
    "Xyy",
    "Lab",
    "Luv",
    "Ypbpr",
    "Ycbcr",
    "Nm",
    "Kelvin",
    "ColorValue",
    "ColorMode",
    "get_color_class",
    # configuration
    "ConversionOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",
    # conversion
    "convert",
    "blend",
    "rotate_hue",
    "get_matrices",
    "supported_combinations",
    # errors
    "ChromaticityError",
    "ConfigurationError",
    "UnsupportedColorSpaceError",
    "UnsupportedReferenceWhiteError",
    "UnsupportedCombinationError",
    "MissingGammaError",
    "InvalidBitRateError",
    "InvalidLumaCoefficientsError",
    "MissingParameterError",
    "UnsupportedConversionError",
    "InvalidHueError",
    "__version__",
]
