"""
Video standards: Rec.709 / Rec.2020 legal-range RGB, YPbPr and YCbCr.

YPbPr carries y in [0, 1] and pb, pr in [-0.5, 0.5]; YCbCr is the same signal
scaled into integer code ranges. The Kb/Kr path is parameterised by the luma
coefficients, the JPEG path uses fixed BT.601 full-range coefficients.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple, Type, Union

from ..colors import Rec709Rgb, Rec2020Rgb, Rgb, Ycbcr, Ypbpr
from ..errors import InvalidBitRateError, InvalidLumaCoefficientsError, MissingParameterError
from ..types.format_type import ColorMode, legal_ranges, max_for_bit_depth
from ..utils.num_utils import clamp, round_half_up, scale_value_range
from .common import unit_channels, validate_luma_coefficients

logger = logging.getLogger("chromaticity")

LegalRgb = Union[Rec709Rgb, Rec2020Rgb]

_STANDARD_NAMES = {
    ColorMode.REC709RGB: "Rec709",
    ColorMode.REC2020RGB: "Rec2020",
}

JPEG_KB = 0.114
JPEG_KR = 0.299
JPEG_OFFSET = 128
JPEG_MAX = 255


def legal_bounds(mode: ColorMode, bit_rate: int) -> Tuple[int, int]:
    """
    Legal black and white code values of a video standard at a bit depth.

    Raises:
        InvalidBitRateError: if the standard does not define that bit depth
    """
    ranges = legal_ranges[mode]
    if bit_rate not in ranges:
        raise InvalidBitRateError(_STANDARD_NAMES[mode], bit_rate, tuple(ranges))
    return ranges[bit_rate]


# -------------------------------------------------------------------------
# Rec.709 / Rec.2020
# -------------------------------------------------------------------------

def _to_legal(rgb: Rgb, cls: Type[LegalRgb], bit_rate: int, round_result: bool) -> LegalRgb:
    low, high = legal_bounds(cls.mode, bit_rate)
    r, g, b = (
        scale_value_range(channel, 0, rgb.max, low, high, round_result)
        for channel in (rgb.r, rgb.g, rgb.b)
    )
    a = scale_value_range(rgb.a, 0, rgb.max, 0, max_for_bit_depth(bit_rate), round_result)
    return cls(r, g, b, a, bit_rate)


def _from_legal(value: LegalRgb, round_result: bool, bit_depth: int) -> Rgb:
    low, high = legal_bounds(value.mode, value.bit_depth)

    channels = (value.r, value.g, value.b)
    clamped = tuple(clamp(channel, low, high) for channel in channels)
    if clamped != channels:
        logger.debug(f"Clamped {value.mode.value} {channels} into legal range {low}..{high}")

    max_value = max_for_bit_depth(bit_depth)
    r, g, b = (
        scale_value_range(channel, low, high, 0, max_value, round_result)
        for channel in clamped
    )
    # alpha is full range on both sides
    a = scale_value_range(value.a, 0, value.max, 0, max_value, round_result)
    return Rgb(r, g, b, a, bit_depth)


def rgb_to_rec709rgb(rgb: Rgb, round_result: bool = True, bit_rate: int = 8) -> Rec709Rgb:
    """
    Convert RGB to Rec.709 legal-range RGB.

    Args:
        rgb: Source RGB at any bit depth
        round_result: Round to integer code values
        bit_rate: 8 (16..235) or 10 (64..940)
    Raises:
        InvalidBitRateError: for any other bit rate
    """
    return _to_legal(rgb, Rec709Rgb, bit_rate, round_result)


def rec709rgb_to_rgb(rgb709: Rec709Rgb, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """Values outside the legal black and white points are clamped first."""
    return _from_legal(rgb709, round_result, bit_depth)


def rgb_to_rec2020rgb(rgb: Rgb, round_result: bool = True, bit_rate: int = 10) -> Rec2020Rgb:
    """
    Convert RGB to Rec.2020 legal-range RGB.

    Args:
        rgb: Source RGB at any bit depth
        round_result: Round to integer code values
        bit_rate: 10 (64..940) or 12 (256..3760)
    Raises:
        InvalidBitRateError: for any other bit rate
    """
    return _to_legal(rgb, Rec2020Rgb, bit_rate, round_result)


def rec2020rgb_to_rgb(rgb2020: Rec2020Rgb, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    return _from_legal(rgb2020, round_result, bit_depth)


# -------------------------------------------------------------------------
# YPbPr
# -------------------------------------------------------------------------

def rgb_to_ypbpr(rgb: Rgb, kb: float, kr: float) -> Ypbpr:
    """
    Convert RGB to YPbPr.

    Raises:
        InvalidLumaCoefficientsError: if ``kb + kr > 1``
    """
    kg = validate_luma_coefficients(kb, kr)
    r, g, b = unit_channels(rgb)

    y = kr * r + kg * g + kb * b
    pb = 0.5 * (b - y) / (1 - kb)
    pr = 0.5 * (r - y) / (1 - kr)

    return Ypbpr(y, pb, pr, kb, kr)


def ypbpr_to_rgb(ypbpr: Ypbpr, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """
    Convert YPbPr to RGB using the coefficients stored on the value.

    Raises:
        InvalidLumaCoefficientsError: if ``kb + kr > 1`` or ``kg == 0``
    """
    kb, kr = ypbpr.kb, ypbpr.kr
    kg = validate_luma_coefficients(kb, kr)
    if kg == 0:
        raise InvalidLumaCoefficientsError(f"Kg must not be 0 (Kb={kb}, Kr={kr})")

    r = ypbpr.y + (2 - 2 * kr) * ypbpr.pr
    g = ypbpr.y - kb / kg * (2 - 2 * kb) * ypbpr.pb - kr / kg * (2 - 2 * kr) * ypbpr.pr
    b = ypbpr.y + (2 - 2 * kb) * ypbpr.pb

    max_value = max_for_bit_depth(bit_depth)
    # float error can leave channels a hair outside the range
    r, g, b = (clamp(channel * max_value, 0, max_value) for channel in (r, g, b))

    if round_result:
        r, g, b = (round_half_up(channel) for channel in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


# -------------------------------------------------------------------------
# YCbCr
# -------------------------------------------------------------------------

def ypbpr_to_ycbcr(
    ypbpr: Ypbpr,
    y_lower: float = 16,
    y_upper: float = 235,
    c_lower: float = 16,
    c_upper: float = 240,
    round_result: bool = True,
) -> Ycbcr:
    y = scale_value_range(ypbpr.y, 0, 1, y_lower, y_upper, round_result)
    cb = scale_value_range(ypbpr.pb + 0.5, 0, 1, c_lower, c_upper, round_result)
    cr = scale_value_range(ypbpr.pr + 0.5, 0, 1, c_lower, c_upper, round_result)

    return Ycbcr(y, cb, cr, y_lower, y_upper, c_lower, c_upper, ypbpr.kb, ypbpr.kr)


def ycbcr_to_ypbpr(ycbcr: Ycbcr, kb: Optional[float] = None, kr: Optional[float] = None) -> Ypbpr:
    """
    Undo the YCbCr scaling using the bounds stored on the value.

    Kb and Kr default to the ones the YCbCr value carries.

    Raises:
        MissingParameterError: if neither the call nor the value supplies Kb/Kr
    """
    kb = ycbcr.kb if kb is None else kb
    kr = ycbcr.kr if kr is None else kr
    if kb is None or kr is None:
        raise MissingParameterError("Kb and Kr are required to convert YCbCr to YPbPr")

    y = scale_value_range(ycbcr.y, ycbcr.y_lower, ycbcr.y_upper, 0, 1)
    pb = scale_value_range(ycbcr.cb, ycbcr.c_lower, ycbcr.c_upper, 0, 1) - 0.5
    pr = scale_value_range(ycbcr.cr, ycbcr.c_lower, ycbcr.c_upper, 0, 1) - 0.5

    return Ypbpr(y, pb, pr, kb, kr)


def rgb_to_ycbcr(
    rgb: Rgb,
    kb: float,
    kr: float,
    round_result: bool = True,
    y_lower: float = 16,
    y_upper: float = 235,
    c_lower: float = 16,
    c_upper: float = 240,
) -> Ycbcr:
    return ypbpr_to_ycbcr(
        rgb_to_ypbpr(rgb, kb, kr), y_lower, y_upper, c_lower, c_upper, round_result
    )


def ycbcr_to_rgb(
    ycbcr: Ycbcr,
    kb: Optional[float] = None,
    kr: Optional[float] = None,
    round_result: bool = True,
    bit_depth: int = 8,
) -> Rgb:
    return ypbpr_to_rgb(ycbcr_to_ypbpr(ycbcr, kb, kr), round_result, bit_depth)


# -------------------------------------------------------------------------
# JPEG YCbCr (BT.601 full range)
# -------------------------------------------------------------------------

def rgb_to_jpeg_ycbcr(rgb: Rgb, round_result: bool = True) -> Ycbcr:
    r, g, b = (channel * JPEG_MAX for channel in unit_channels(rgb))

    y = 0.299 * r + 0.587 * g + 0.114 * b
    cb = JPEG_OFFSET - 0.168736 * r - 0.331264 * g + 0.5 * b
    cr = JPEG_OFFSET + 0.5 * r - 0.418688 * g - 0.081312 * b

    if round_result:
        y, cb, cr = (round_half_up(v) for v in (y, cb, cr))

    return Ycbcr(y, cb, cr, 0, JPEG_MAX, 0, JPEG_MAX, JPEG_KB, JPEG_KR)


def jpeg_ycbcr_to_rgb(ycbcr: Ycbcr, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    r = ycbcr.y + 1.402 * (ycbcr.cr - JPEG_OFFSET)
    g = ycbcr.y - 0.344136 * (ycbcr.cb - JPEG_OFFSET) - 0.714136 * (ycbcr.cr - JPEG_OFFSET)
    b = ycbcr.y + 1.772 * (ycbcr.cb - JPEG_OFFSET)

    max_value = max_for_bit_depth(bit_depth)
    r, g, b = (clamp(channel / JPEG_MAX * max_value, 0, max_value) for channel in (r, g, b))

    if round_result:
        r, g, b = (round_half_up(channel) for channel in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)
