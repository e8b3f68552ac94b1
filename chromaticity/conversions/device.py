"""Device-level conversions: CMYK, YIQ, HEX, bit depth and normalisation."""
from __future__ import annotations

from typing import Union

from ..colors import Cmyk, Hex, Rgb, RgbNormalized, Yiq
from ..reference.color_spaces import get_gamma
from ..types.format_type import PERCENT, max_for_bit_depth
from ..utils.num_utils import clamp, clamp01, round_half_up, scale_value_range
from .common import unit_channels

# NTSC YIQ limits for I and Q in the unnormalised representation
I_LIMIT = 0.5957
Q_LIMIT = 0.5226
YIQ_HALF_RANGE = 128


# -------------------------------------------------------------------------
# CMYK (mathematical, no pigment model)
# -------------------------------------------------------------------------

def rgb_to_cmyk(rgb: Rgb, round_result: bool = True) -> Cmyk:
    r, g, b = unit_channels(rgb)

    k = 1 - max(r, g, b)
    if k == 1:
        c = m = y = 0.0
    else:
        c = (1 - r - k) / (1 - k) * PERCENT
        m = (1 - g - k) / (1 - k) * PERCENT
        y = (1 - b - k) / (1 - k) * PERCENT
    k *= PERCENT

    if round_result:
        c, m, y, k = (round_half_up(v) for v in (c, m, y, k))

    return Cmyk(c, m, y, k)


def cmyk_to_rgb(cmyk: Cmyk, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    c = clamp(cmyk.c, 0, PERCENT) / PERCENT
    m = clamp(cmyk.m, 0, PERCENT) / PERCENT
    y = clamp(cmyk.y, 0, PERCENT) / PERCENT
    k = clamp(cmyk.k, 0, PERCENT) / PERCENT

    max_value = max_for_bit_depth(bit_depth)
    r = (1 - c) * (1 - k) * max_value
    g = (1 - m) * (1 - k) * max_value
    b = (1 - y) * (1 - k) * max_value

    if round_result:
        r, g, b = (round_half_up(v) for v in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


# -------------------------------------------------------------------------
# YIQ
# -------------------------------------------------------------------------

def rgb_to_yiq(rgb: Rgb, normalized: bool = True, round_result: bool = True) -> Yiq:
    """
    Convert RGB to YIQ.

    normalized=True gives y in [0, 255] and i, q in [-128, 128]; rounding only
    applies to that representation.
    """
    r, g, b = unit_channels(rgb)

    y = 0.299 * r + 0.587 * g + 0.114 * b
    i = 0.5959 * r - 0.2746 * g - 0.3213 * b
    q = 0.2115 * r - 0.5227 * g + 0.3112 * b

    y = clamp01(y)
    i = clamp(i, -I_LIMIT, I_LIMIT)
    q = clamp(q, -Q_LIMIT, Q_LIMIT)

    if normalized:
        y = scale_value_range(y, 0, 1, 0, 255)
        i = scale_value_range(i, -I_LIMIT, I_LIMIT, -YIQ_HALF_RANGE, YIQ_HALF_RANGE)
        q = scale_value_range(q, -Q_LIMIT, Q_LIMIT, -YIQ_HALF_RANGE, YIQ_HALF_RANGE)

        if round_result:
            y, i, q = (round_half_up(v) for v in (y, i, q))

    return Yiq(y, i, q, normalized)


def yiq_to_rgb(yiq: Yiq, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    y, i, q = yiq.y, yiq.i, yiq.q
    if yiq.normalized:
        y = scale_value_range(y, 0, 255, 0, 1)
        i = scale_value_range(i, -YIQ_HALF_RANGE, YIQ_HALF_RANGE, -I_LIMIT, I_LIMIT)
        q = scale_value_range(q, -YIQ_HALF_RANGE, YIQ_HALF_RANGE, -Q_LIMIT, Q_LIMIT)

    r = y + 0.956 * i + 0.621 * q
    g = y - 0.272 * i - 0.647 * q
    b = y - 1.106 * i + 1.703 * q

    max_value = max_for_bit_depth(bit_depth)
    r = clamp01(r) * max_value
    g = clamp01(g) * max_value
    b = clamp01(b) * max_value

    if round_result:
        r, g, b = (round_half_up(v) for v in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


# -------------------------------------------------------------------------
# HEX
# -------------------------------------------------------------------------

def hex_to_rgb(hex_color: Hex, bit_depth: int = 8, round_result: bool = True) -> Rgb:
    digits = hex_color.hex
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)

    max_value = max_for_bit_depth(bit_depth)
    if max_value != 255:
        r = r / 255 * max_value
        g = g / 255 * max_value
        b = b / 255 * max_value
        if round_result:
            r, g, b = (round_half_up(v) for v in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


def rgb_to_hex_int(rgb: Rgb) -> int:
    """Pack an RGB value of any bit depth into a ``0xRRGGBB`` integer."""
    r, g, b = (
        int(clamp(round_half_up(channel / rgb.max * 255), 0, 255))
        for channel in (rgb.r, rgb.g, rgb.b)
    )
    return (r << 16) + (g << 8) + b


def rgb_to_hex(rgb: Rgb) -> Hex:
    return Hex(f"{rgb_to_hex_int(rgb):06x}")


# -------------------------------------------------------------------------
# bit depth and normalisation
# -------------------------------------------------------------------------

def rescale_rgb(rgb: Rgb, bit_depth: int, round_result: bool = True) -> Rgb:
    """Move an RGB value, alpha included, onto another bit depth."""
    max_value = max_for_bit_depth(bit_depth)
    r, g, b, a = (
        scale_value_range(channel, 0, rgb.max, 0, max_value, round_result)
        for channel in rgb.values
    )
    return Rgb(r, g, b, a, bit_depth)


def normalize_rgb(rgb: Rgb) -> RgbNormalized:
    """Divide every channel, alpha included, by the channel maximum."""
    r, g, b = unit_channels(rgb)
    return RgbNormalized(r, g, b, rgb.a / rgb.max)


def apply_gamma(rgb: RgbNormalized, gamma: Union[float, str]) -> RgbNormalized:
    """
    Raise normalised colour channels to a power; alpha is left alone.

    Not for sRGB, L* or other spaces whose companding is not a plain power law.

    Args:
        rgb: Normalised RGB
        gamma: Exponent, or the name of a color space declaring one
    Raises:
        MissingGammaError: if a named color space declares no gamma
    """
    exponent = get_gamma(gamma) if isinstance(gamma, str) else float(gamma)
    return RgbNormalized(
        rgb.r ** exponent,
        rgb.g ** exponent,
        rgb.b ** exponent,
        rgb.a,
        exponent,
    )


def denormalize_rgb(rgb: RgbNormalized, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    max_value = max_for_bit_depth(bit_depth)
    r, g, b, a = (clamp01(channel) * max_value for channel in rgb.values)

    if round_result:
        r, g, b, a = (round_half_up(v) for v in (r, g, b, a))

    return Rgb(r, g, b, a, bit_depth)
