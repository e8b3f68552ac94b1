"""
Hue-based models: RGB <-> HSV, HSL, HSI, HSP.

Hue is in degrees on ``[0, 360)``; every other channel, alpha included, is in
percent. When two channels tie for the maximum the first of R, G, B wins the
hue sector. Achromatic input (chroma 0) has hue 0 and saturation 0.
"""
from __future__ import annotations

import math
from typing import Tuple

from ..colors import Hsi, Hsl, Hsp, Hsv, Rgb
from ..types.format_type import PERCENT
from ..utils.num_utils import clamp, fmod, round_half_up, wrap_hue
from .common import alpha_to_percent, build_rgb, unit_channels, validate_luma_coefficients

SECTOR_DEGREES = 60


def _hue_degrees(r: float, g: float, b: float, max_value: float, chroma: float) -> float:
    if not chroma:
        return 0.0
    if r == max_value:
        sector = fmod((g - b) / chroma, 6)
    elif g == max_value:
        sector = (b - r) / chroma + 2
    else:
        sector = (r - g) / chroma + 4
    return wrap_hue(sector * SECTOR_DEGREES)


def _round_hue_model(h: float, x: float, y: float, a: float) -> Tuple[float, float, float, float]:
    # rounding 359.6 gives 360, which must wrap back to 0
    return (
        wrap_hue(round_half_up(h)),
        round_half_up(x),
        round_half_up(y),
        round_half_up(a),
    )


def _sector_rgb(h: float, chroma: float, x: float, m: float) -> Tuple[float, float, float]:
    """Place chroma and the secondary component according to the hue sector."""
    sector = int(math.floor(wrap_hue(h) / SECTOR_DEGREES))
    r, g, b = (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[min(sector, 5)]
    return r + m, g + m, b + m


# -------------------------------------------------------------------------
# RGB -> hue models
# -------------------------------------------------------------------------

def rgb_to_hsv(rgb: Rgb, round_result: bool = True) -> Hsv:
    """
    Convert RGB to HSV.

    Value is the largest channel as a percentage of the channel range, so it
    does not depend on bit depth.
    """
    r, g, b = unit_channels(rgb)
    max_value = max(r, g, b)
    chroma = max_value - min(r, g, b)

    hue = _hue_degrees(r, g, b, max_value, chroma)
    sat = chroma / max_value * PERCENT if max_value else 0.0
    val = max_value * PERCENT
    a = alpha_to_percent(rgb, False)

    if round_result:
        return Hsv(*_round_hue_model(hue, sat, val, a))
    return Hsv(hue, sat, val, a)


def rgb_to_hsl(rgb: Rgb, round_result: bool = True) -> Hsl:
    r, g, b = unit_channels(rgb)
    max_value = max(r, g, b)
    min_value = min(r, g, b)
    chroma = max_value - min_value

    lit = (max_value + min_value) / 2
    if lit == 0 or lit == 1:
        sat = 0.0
    else:
        sat = (max_value - lit) / min(lit, 1 - lit) * PERCENT
    lit *= PERCENT

    hue = _hue_degrees(r, g, b, max_value, chroma)
    a = alpha_to_percent(rgb, False)

    if round_result:
        return Hsl(*_round_hue_model(hue, sat, lit, a))
    return Hsl(hue, sat, lit, a)


def rgb_to_hsi(rgb: Rgb, round_result: bool = True) -> Hsi:
    """
    Convert RGB to HSI.

    Saturation is 0 both for achromatic input and for zero intensity.
    """
    r, g, b = unit_channels(rgb)
    max_value = max(r, g, b)
    min_value = min(r, g, b)
    chroma = max_value - min_value

    intensity = (r + g + b) / 3

    hue = _hue_degrees(r, g, b, max_value, chroma)
    if chroma and intensity:
        sat = (1 - min_value / intensity) * PERCENT
    else:
        sat = 0.0
    intensity *= PERCENT
    a = alpha_to_percent(rgb, False)

    if round_result:
        return Hsi(*_round_hue_model(hue, sat, intensity, a))
    return Hsi(hue, sat, intensity, a)


def rgb_to_hsp(rgb: Rgb, round_result: bool = True, pb: float = 0.114, pr: float = 0.299) -> Hsp:
    """
    Convert RGB to HSP (hue, saturation, perceived brightness).

    Brightness is ``sqrt(Pr*R^2 + Pg*G^2 + Pb*B^2)`` with ``Pg = 1 - Pr - Pb``.

    Raises:
        InvalidLumaCoefficientsError: if ``pb + pr > 1``
    """
    pg = validate_luma_coefficients(pb, pr, "Pb + Pr")

    r, g, b = unit_channels(rgb)
    max_value = max(r, g, b)
    chroma = max_value - min(r, g, b)

    brightness = math.sqrt(r * r * pr + g * g * pg + b * b * pb) * PERCENT
    hue = _hue_degrees(r, g, b, max_value, chroma)
    sat = chroma / max_value * PERCENT if max_value else 0.0
    a = alpha_to_percent(rgb, False)

    if round_result:
        h, s, p, a = _round_hue_model(hue, sat, brightness, a)
        return Hsp(h, s, p, a, pb, pr)
    return Hsp(hue, sat, brightness, a, pb, pr)


# -------------------------------------------------------------------------
# hue models -> RGB
# -------------------------------------------------------------------------

def hsv_to_rgb(hsv: Hsv, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    s = hsv.s / PERCENT
    v = hsv.v / PERCENT

    if s == 0:
        r = g = b = v
    else:
        chroma = v * s
        x = chroma * (1 - abs(fmod(wrap_hue(hsv.h) / SECTOR_DEGREES, 2) - 1))
        r, g, b = _sector_rgb(hsv.h, chroma, x, v - chroma)

    return build_rgb(r, g, b, hsv.a, bit_depth, round_result)


def hsl_to_rgb(hsl: Hsl, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    s = hsl.s / PERCENT
    l = hsl.l / PERCENT

    if not s:
        r = g = b = l
    else:
        chroma = (1 - abs(2 * l - 1)) * s
        x = chroma * (1 - abs(fmod(wrap_hue(hsl.h) / SECTOR_DEGREES, 2) - 1))
        r, g, b = _sector_rgb(hsl.h, chroma, x, l - chroma / 2)

    return build_rgb(r, g, b, hsl.a, bit_depth, round_result)


def hsi_to_rgb(hsi: Hsi, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    s = hsi.s / PERCENT
    i = hsi.i / PERCENT

    m = i * (1 - s)
    if not s:
        r = g = b = m
    else:
        z = 1 - abs(fmod(wrap_hue(hsi.h) / SECTOR_DEGREES, 2) - 1)
        chroma = (3 * i * s) / (1 + z)
        r, g, b = _sector_rgb(hsi.h, chroma, chroma * z, m)

    return build_rgb(r, g, b, hsi.a, bit_depth, round_result)


def hsp_to_rgb(hsp: Hsp, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """
    Convert HSP to RGB.

    Raises:
        InvalidLumaCoefficientsError: if the value's ``pb + pr > 1``
    """
    pg = validate_luma_coefficients(hsp.pb, hsp.pr, "Pb + Pr")
    pr, pb = hsp.pr, hsp.pb

    hp = wrap_hue(hsp.h) / SECTOR_DEGREES
    s = hsp.s / PERCENT
    p = hsp.p / PERCENT
    sector = min(int(math.floor(hp)), 5)

    # distance into the sector, measured from the nearest primary
    part = (hp, 2 - hp, hp - 2, 4 - hp, hp - 4, 6 - hp)[sector]

    # weights for (largest channel, middle channel, smallest channel) per sector
    largest, middle, smallest = (
        (pr, pg, pb),
        (pg, pr, pb),
        (pg, pb, pr),
        (pb, pg, pr),
        (pb, pr, pg),
        (pr, pb, pg),
    )[sector]

    min_over_max = 1 - s
    if min_over_max > 0:
        ramp = 1 + part * (1 / min_over_max - 1)
        low = p / math.sqrt(largest / min_over_max ** 2 + middle * ramp ** 2 + smallest)
        high = low / min_over_max
        mid = low + part * (high - low)
    else:
        high = math.sqrt(p ** 2 / (largest + middle * part ** 2))
        mid = high * part
        low = 0.0

    r, g, b = (
        (high, mid, low),
        (mid, high, low),
        (low, high, mid),
        (low, mid, high),
        (mid, low, high),
        (high, low, mid),
    )[sector]

    return build_rgb(r, g, b, hsp.a, bit_depth, round_result)


# -------------------------------------------------------------------------
# between hue models
# -------------------------------------------------------------------------

def _hue_model_channels(h: float, x: float, y: float, a: float) -> Tuple[float, float, float, float]:
    """Wrap the hue and clamp the percent channels of a hue-model value."""
    return wrap_hue(h), clamp(x, 0, PERCENT), clamp(y, 0, PERCENT), clamp(a, 0, PERCENT)


def hsv_to_hsl(hsv: Hsv, round_result: bool = True) -> Hsl:
    h, s, v, a = _hue_model_channels(*hsv.values)
    s /= PERCENT
    v /= PERCENT

    lit = v * (1 - s / 2)
    if lit == 0 or lit == 1:
        sat = 0.0
    else:
        sat = (v - lit) / min(lit, 1 - lit)

    lit *= PERCENT
    sat *= PERCENT

    if round_result:
        return Hsl(*_round_hue_model(h, sat, lit, a))
    return Hsl(h, sat, lit, a)


def hsl_to_hsv(hsl: Hsl, round_result: bool = True) -> Hsv:
    h, s, l, a = _hue_model_channels(*hsl.values)
    s /= PERCENT
    l /= PERCENT

    val = l + s * min(l, 1 - l)
    sat = 2 * (1 - l / val) if val else 0.0

    val *= PERCENT
    sat *= PERCENT

    if round_result:
        return Hsv(*_round_hue_model(h, sat, val, a))
    return Hsv(h, sat, val, a)


def hsv_to_hsi(hsv: Hsv, round_result: bool = True) -> Hsi:
    return rgb_to_hsi(hsv_to_rgb(hsv, False), round_result)


def hsl_to_hsi(hsl: Hsl, round_result: bool = True) -> Hsi:
    return rgb_to_hsi(hsl_to_rgb(hsl, False), round_result)


def hsi_to_hsv(hsi: Hsi, round_result: bool = True) -> Hsv:
    return rgb_to_hsv(hsi_to_rgb(hsi, False), round_result)


def hsi_to_hsl(hsi: Hsi, round_result: bool = True) -> Hsl:
    return rgb_to_hsl(hsi_to_rgb(hsi, False), round_result)
