"""
Chromaticity Color Conversions
==============================

Pairwise conversion functions between every supported representation, plus a
dispatcher that picks the right function (or pivot) for any pair.

Features
--------
- RGB ↔ HSV ↔ HSL ↔ HSI, RGB ↔ HSP
- RGB ↔ CMYK, RGB ↔ YIQ, RGB ↔ HEX
- RGB ↔ XYZ ↔ xyY / Lab / Luv for sixteen RGB working spaces
- RGB ↔ Rec.709 / Rec.2020 legal range, RGB ↔ YPbPr ↔ YCbCr, JPEG YCbCr
- Wavelength → RGB, Kelvin → RGB (one way)

Conversion Functions
-------------------

Hue models (``hue``):
    rgb_to_hsv(rgb, round_result=True), hsv_to_rgb(hsv, round_result=True, bit_depth=8)
    rgb_to_hsl / hsl_to_rgb, rgb_to_hsi / hsi_to_rgb
    rgb_to_hsp(rgb, round_result=True, pb=0.114, pr=0.299), hsp_to_rgb
    hsv_to_hsl, hsl_to_hsv, hsv_to_hsi, hsl_to_hsi, hsi_to_hsv, hsi_to_hsl

Device (``device``):
    rgb_to_cmyk, cmyk_to_rgb, rgb_to_yiq(rgb, normalized=True), yiq_to_rgb
    hex_to_rgb, rgb_to_hex, rgb_to_hex_int
    rescale_rgb(rgb, bit_depth), normalize_rgb, denormalize_rgb, apply_gamma

CIE (``cie``):
    rgb_to_xyz(rgb, color_space="srgb", reference_white="d65"), xyz_to_rgb
    xyz_to_xyy, xyy_to_xyz, xyz_to_lab, lab_to_xyz, xyz_to_luv, luv_to_xyz

Video (``video``):
    rgb_to_rec709rgb(rgb, round_result=True, bit_rate=8), rec709rgb_to_rgb
    rgb_to_rec2020rgb(rgb, round_result=True, bit_rate=10), rec2020rgb_to_rgb
    rgb_to_ypbpr(rgb, kb, kr), ypbpr_to_rgb, ypbpr_to_ycbcr, ycbcr_to_ypbpr
    rgb_to_ycbcr, ycbcr_to_rgb, rgb_to_jpeg_ycbcr, jpeg_ycbcr_to_rgb

Spectral (``spectral``):
    nm_to_rgb(nm, gamma=0.8), kelvin_to_rgb(kelvin), kelvin_to_rgb_empirical(kelvin)

High-Level API
-------------
    convert(color, to_mode, options=None, **overrides)
        Universal converter; routes through XYZ inside the CIE family and
        through unrounded RGB otherwise

Examples
--------
>>> from chromaticity.colors import Rgb
>>> from chromaticity.conversions import convert, rgb_to_hsv
>>> rgb_to_hsv(Rgb(255, 128, 0))
Hsv(h=30, s=100, v=100, a=100)
>>> convert(Rgb(255, 0, 255), "hex")
Hex(hex='ff00ff')
"""

from .hue import (
    rgb_to_hsv, hsv_to_rgb,
    rgb_to_hsl, hsl_to_rgb,
    rgb_to_hsi, hsi_to_rgb,
    rgb_to_hsp, hsp_to_rgb,
    hsv_to_hsl, hsl_to_hsv,
    hsv_to_hsi, hsl_to_hsi, hsi_to_hsv, hsi_to_hsl,
)
from .device import (
    rgb_to_cmyk, cmyk_to_rgb,
    rgb_to_yiq, yiq_to_rgb,
    hex_to_rgb, rgb_to_hex, rgb_to_hex_int,
    rescale_rgb, normalize_rgb, denormalize_rgb, apply_gamma,
)
from .cie import (
    rgb_to_xyz, xyz_to_rgb,
    xyz_to_xyy, xyy_to_xyz,
    xyz_to_lab, lab_to_xyz,
    xyz_to_luv, luv_to_xyz,
    rgb_to_lab, lab_to_rgb, rgb_to_luv, luv_to_rgb, rgb_to_xyy, xyy_to_rgb,
)
from .video import (
    rgb_to_rec709rgb, rec709rgb_to_rgb,
    rgb_to_rec2020rgb, rec2020rgb_to_rgb,
    rgb_to_ypbpr, ypbpr_to_rgb,
    ypbpr_to_ycbcr, ycbcr_to_ypbpr,
    rgb_to_ycbcr, ycbcr_to_rgb,
    rgb_to_jpeg_ycbcr, jpeg_ycbcr_to_rgb,
)
from .spectral import nm_to_rgb, kelvin_to_rgb, kelvin_to_rgb_empirical
from .wrapper import convert, to_rgb

__all__ = [
    # Hue models
    "rgb_to_hsv", "hsv_to_rgb",
    "rgb_to_hsl", "hsl_to_rgb",
    "rgb_to_hsi", "hsi_to_rgb",
    "rgb_to_hsp", "hsp_to_rgb",
    "hsv_to_hsl", "hsl_to_hsv",
    "hsv_to_hsi", "hsl_to_hsi", "hsi_to_hsv", "hsi_to_hsl",
    # Device
    "rgb_to_cmyk", "cmyk_to_rgb",
    "rgb_to_yiq", "yiq_to_rgb",
    "hex_to_rgb", "rgb_to_hex", "rgb_to_hex_int",
    "rescale_rgb", "normalize_rgb", "denormalize_rgb", "apply_gamma",
    # CIE
    "rgb_to_xyz", "xyz_to_rgb",
    "xyz_to_xyy", "xyy_to_xyz",
    "xyz_to_lab", "lab_to_xyz",
    "xyz_to_luv", "luv_to_xyz",
    "rgb_to_lab", "lab_to_rgb", "rgb_to_luv", "luv_to_rgb", "rgb_to_xyy", "xyy_to_rgb",
    # Video
    "rgb_to_rec709rgb", "rec709rgb_to_rgb",
    "rgb_to_rec2020rgb", "rec2020rgb_to_rgb",
    "rgb_to_ypbpr", "ypbpr_to_rgb",
    "ypbpr_to_ycbcr", "ycbcr_to_ypbpr",
    "rgb_to_ycbcr", "ycbcr_to_rgb",
    "rgb_to_jpeg_ycbcr", "jpeg_ycbcr_to_rgb",
    # Spectral
    "nm_to_rgb", "kelvin_to_rgb", "kelvin_to_rgb_empirical",
    # Dispatch
    "convert", "to_rgb",
]
