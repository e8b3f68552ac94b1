import logging
from typing import Callable, Dict, Optional, Tuple

from ..colors import ColorValue, Rgb, Xyz
from ..config import ConversionOptions, resolve_options
from ..errors import ConfigurationError, MissingParameterError, UnsupportedConversionError
from ..types.color_types import ColorModeLike, as_mode, is_cie_mode
from ..types.format_type import SOURCE_ONLY_MODES, ColorMode, default_bit_depths

from .cie import (
    lab_to_xyz, luv_to_xyz, rgb_to_lab, rgb_to_luv, rgb_to_xyy, rgb_to_xyz,
    xyy_to_xyz, xyz_to_lab, xyz_to_luv, xyz_to_rgb, xyz_to_xyy,
)
from .device import (
    cmyk_to_rgb, denormalize_rgb, hex_to_rgb, normalize_rgb, rescale_rgb,
    rgb_to_cmyk, rgb_to_hex, rgb_to_yiq, yiq_to_rgb,
)
from .hue import (
    hsi_to_hsl, hsi_to_hsv, hsi_to_rgb, hsl_to_hsi, hsl_to_hsv, hsl_to_rgb, hsp_to_rgb,
    hsv_to_hsi, hsv_to_hsl, hsv_to_rgb, rgb_to_hsi, rgb_to_hsl, rgb_to_hsp, rgb_to_hsv,
)
from .spectral import kelvin_to_rgb, kelvin_to_rgb_empirical, nm_to_rgb
from .video import (
    jpeg_ycbcr_to_rgb, rec709rgb_to_rgb, rec2020rgb_to_rgb, rgb_to_jpeg_ycbcr,
    rgb_to_rec709rgb, rgb_to_rec2020rgb, rgb_to_ycbcr, rgb_to_ypbpr,
    ycbcr_to_rgb, ycbcr_to_ypbpr, ypbpr_to_rgb, ypbpr_to_ycbcr,
)

logger = logging.getLogger("chromaticity")

# (value, options, round, bit depth) -> Rgb
ToRgb = Callable[[ColorValue, ConversionOptions, bool, int], Rgb]
# (rgb, options) -> value
FromRgb = Callable[[Rgb, ConversionOptions], ColorValue]
# (value, options) -> value
Direct = Callable[[ColorValue, ConversionOptions], ColorValue]


def _luma_coefficients(options: ConversionOptions) -> Tuple[float, float]:
    if options.kb is None or options.kr is None:
        raise MissingParameterError("Kb and Kr are required for YPbPr and YCbCr conversions")
    return options.kb, options.kr


def _kelvin_to_rgb(value, options: ConversionOptions, round_result: bool, bit_depth: int) -> Rgb:
    if options.kelvin_method == "spectral":
        return kelvin_to_rgb(value, round_result, bit_depth)
    if options.kelvin_method == "empirical":
        return kelvin_to_rgb_empirical(value, round_result, bit_depth)
    raise ConfigurationError(f"Unknown kelvin method: {options.kelvin_method!r}")


def _ycbcr_to_rgb(value, options: ConversionOptions, round_result: bool, bit_depth: int) -> Rgb:
    if options.jpeg:
        return jpeg_ycbcr_to_rgb(value, round_result, bit_depth)
    return ycbcr_to_rgb(value, options.kb, options.kr, round_result, bit_depth)


def _rgb_to_ycbcr(rgb: Rgb, options: ConversionOptions):
    if options.jpeg:
        return rgb_to_jpeg_ycbcr(rgb, options.round)
    kb, kr = _luma_coefficients(options)
    return rgb_to_ycbcr(
        rgb, kb, kr, options.round,
        options.y_lower, options.y_upper, options.c_lower, options.c_upper,
    )


TO_RGB: Dict[ColorMode, ToRgb] = {
    ColorMode.REC709RGB: lambda v, o, rnd, bd: rec709rgb_to_rgb(v, rnd, bd),
    ColorMode.REC2020RGB: lambda v, o, rnd, bd: rec2020rgb_to_rgb(v, rnd, bd),
    ColorMode.RGB_NORMALIZED: lambda v, o, rnd, bd: denormalize_rgb(v, rnd, bd),
    ColorMode.HEX: lambda v, o, rnd, bd: hex_to_rgb(v, bd, rnd),
    ColorMode.HSV: lambda v, o, rnd, bd: hsv_to_rgb(v, rnd, bd),
    ColorMode.HSL: lambda v, o, rnd, bd: hsl_to_rgb(v, rnd, bd),
    ColorMode.HSI: lambda v, o, rnd, bd: hsi_to_rgb(v, rnd, bd),
    ColorMode.HSP: lambda v, o, rnd, bd: hsp_to_rgb(v, rnd, bd),
    ColorMode.CMYK: lambda v, o, rnd, bd: cmyk_to_rgb(v, rnd, bd),
    ColorMode.YIQ: lambda v, o, rnd, bd: yiq_to_rgb(v, rnd, bd),
    ColorMode.XYZ: lambda v, o, rnd, bd: xyz_to_rgb(v, rnd, bd),
    ColorMode.XYY: lambda v, o, rnd, bd: xyz_to_rgb(xyy_to_xyz(v), rnd, bd),
    ColorMode.LAB: lambda v, o, rnd, bd: xyz_to_rgb(lab_to_xyz(v), rnd, bd),
    ColorMode.LUV: lambda v, o, rnd, bd: xyz_to_rgb(luv_to_xyz(v), rnd, bd),
    ColorMode.YPBPR: lambda v, o, rnd, bd: ypbpr_to_rgb(v, rnd, bd),
    ColorMode.YCBCR: _ycbcr_to_rgb,
    ColorMode.NM: lambda v, o, rnd, bd: nm_to_rgb(v, o.gamma, rnd, bd),
    ColorMode.KELVIN: _kelvin_to_rgb,
}

FROM_RGB: Dict[ColorMode, FromRgb] = {
    ColorMode.REC709RGB: lambda c, o: rgb_to_rec709rgb(
        c, o.round, o.target_bit_depth(default_bit_depths[ColorMode.REC709RGB])
    ),
    ColorMode.REC2020RGB: lambda c, o: rgb_to_rec2020rgb(
        c, o.round, o.target_bit_depth(default_bit_depths[ColorMode.REC2020RGB])
    ),
    ColorMode.RGB_NORMALIZED: lambda c, o: normalize_rgb(c),
    ColorMode.HEX: lambda c, o: rgb_to_hex(c),
    ColorMode.HSV: lambda c, o: rgb_to_hsv(c, o.round),
    ColorMode.HSL: lambda c, o: rgb_to_hsl(c, o.round),
    ColorMode.HSI: lambda c, o: rgb_to_hsi(c, o.round),
    ColorMode.HSP: lambda c, o: rgb_to_hsp(c, o.round, o.pb, o.pr),
    ColorMode.CMYK: lambda c, o: rgb_to_cmyk(c, o.round),
    ColorMode.YIQ: lambda c, o: rgb_to_yiq(c, o.normalized, o.round),
    ColorMode.XYZ: lambda c, o: rgb_to_xyz(c, o.color_space, o.reference_white),
    ColorMode.XYY: lambda c, o: rgb_to_xyy(c, o.color_space, o.reference_white),
    ColorMode.LAB: lambda c, o: rgb_to_lab(c, o.color_space, o.reference_white, o.round),
    ColorMode.LUV: lambda c, o: rgb_to_luv(c, o.color_space, o.reference_white, o.round),
    ColorMode.YPBPR: lambda c, o: rgb_to_ypbpr(c, *_luma_coefficients(o)),
    ColorMode.YCBCR: _rgb_to_ycbcr,
}

# Edges that do not pass through RGB
CONVERT_DIRECT: Dict[Tuple[ColorMode, ColorMode], Direct] = {
    (ColorMode.HSV, ColorMode.HSL): lambda c, o: hsv_to_hsl(c, o.round),
    (ColorMode.HSL, ColorMode.HSV): lambda c, o: hsl_to_hsv(c, o.round),
    (ColorMode.HSV, ColorMode.HSI): lambda c, o: hsv_to_hsi(c, o.round),
    (ColorMode.HSL, ColorMode.HSI): lambda c, o: hsl_to_hsi(c, o.round),
    (ColorMode.HSI, ColorMode.HSV): lambda c, o: hsi_to_hsv(c, o.round),
    (ColorMode.HSI, ColorMode.HSL): lambda c, o: hsi_to_hsl(c, o.round),
    (ColorMode.YPBPR, ColorMode.YCBCR): lambda c, o: ypbpr_to_ycbcr(
        c, o.y_lower, o.y_upper, o.c_lower, o.c_upper, o.round
    ),
    (ColorMode.YCBCR, ColorMode.YPBPR): lambda c, o: ycbcr_to_ypbpr(c, o.kb, o.kr),
}

TO_XYZ: Dict[ColorMode, Callable[[ColorValue], Xyz]] = {
    ColorMode.XYZ: lambda c: c,
    ColorMode.XYY: xyy_to_xyz,
    ColorMode.LAB: lab_to_xyz,
    ColorMode.LUV: luv_to_xyz,
}

FROM_XYZ: Dict[ColorMode, Direct] = {
    ColorMode.XYZ: lambda c, o: c,
    ColorMode.XYY: lambda c, o: xyz_to_xyy(c),
    ColorMode.LAB: lambda c, o: xyz_to_lab(c, o.round),
    ColorMode.LUV: lambda c, o: xyz_to_luv(c, o.round),
}


def _same_mode(color: ColorValue, options: ConversionOptions) -> ColorValue:
    """Identity, except that RGB-family values move to a requested bit depth."""
    mode = color.mode
    if options.bit_depth is None or mode not in default_bit_depths or mode is ColorMode.HEX:
        return color
    if options.bit_depth == color.bit_depth:
        return color
    if mode is ColorMode.RGB:
        return rescale_rgb(color, options.bit_depth, options.round)
    rgb = TO_RGB[mode](color, options, False, color.bit_depth)
    return FROM_RGB[mode](rgb, options)


def to_rgb(color: ColorValue, options: ConversionOptions, round_result: bool, bit_depth: int) -> Rgb:
    """Any value to RGB; RGB input is rescaled to ``bit_depth``."""
    if color.mode is ColorMode.RGB:
        if color.bit_depth == bit_depth:
            return color
        return rescale_rgb(color, bit_depth, round_result)
    return TO_RGB[color.mode](color, options, round_result, bit_depth)


def _convert_core(color: ColorValue, to_mode: ColorMode, options: ConversionOptions) -> ColorValue:
    from_mode = color.mode

    if from_mode == to_mode:
        logger.debug(f"{from_mode.value} -> {to_mode.value}: same mode")
        return _same_mode(color, options)

    key = (from_mode, to_mode)
    if key in CONVERT_DIRECT:
        logger.debug(f"{from_mode.value} -> {to_mode.value}: direct")
        return CONVERT_DIRECT[key](color, options)

    if is_cie_mode(from_mode) and is_cie_mode(to_mode):
        logger.debug(f"{from_mode.value} -> {to_mode.value}: via xyz")
        return FROM_XYZ[to_mode](TO_XYZ[from_mode](color), options)

    if to_mode is ColorMode.RGB:
        logger.debug(f"{from_mode.value} -> rgb: direct")
        return TO_RGB[from_mode](
            color, options, options.round, options.target_bit_depth(default_bit_depths[ColorMode.RGB])
        )

    if from_mode is ColorMode.RGB:
        logger.debug(f"rgb -> {to_mode.value}: direct")
        return FROM_RGB[to_mode](color, options)

    logger.debug(f"{from_mode.value} -> {to_mode.value}: via rgb")
    rgb = TO_RGB[from_mode](color, options, False, default_bit_depths[ColorMode.RGB])
    return FROM_RGB[to_mode](rgb, options)


def convert(
    color: ColorValue,
    to_mode: ColorModeLike,
    options: Optional[ConversionOptions] = None,
    **overrides,
) -> ColorValue:
    """
    Convert a color value to another representation.

    Args:
        color: Any value type (Rgb, Hsv, Lab, ...)
        to_mode: Target ColorMode or its string value, e.g. "hsl"
        options: Base options, defaults to ``DEFAULT_OPTIONS``
        **overrides: Individual option fields, e.g. ``round=False``, ``kb=0.0722``
    Returns:
        A new value of the target type
    Raises:
        UnsupportedConversionError: if the target is a source-only mode (nm, kelvin)
        ConfigurationError: for invalid configuration (see ``chromaticity.errors``)
    """
    target = as_mode(to_mode)
    source = color.mode
    if target in SOURCE_ONLY_MODES and target != source:
        raise UnsupportedConversionError(source.value, target.value)
    resolved = resolve_options(options, **overrides)
    return _convert_core(color, target, resolved)
