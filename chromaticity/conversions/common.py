"""Helpers shared by the pairwise conversion modules."""
from __future__ import annotations

from typing import Tuple

from ..colors import Rgb
from ..errors import InvalidLumaCoefficientsError
from ..types.format_type import PERCENT, max_for_bit_depth
from ..utils.num_utils import clamp, clamp01, round_half_up, scale_value_range


def unit_channels(rgb) -> Tuple[float, float, float]:
    """Colour channels of an RGB-family value on ``[0, 1]``, clamped when out of range."""
    return clamp01(rgb.r / rgb.max), clamp01(rgb.g / rgb.max), clamp01(rgb.b / rgb.max)


def alpha_to_percent(rgb, round_result: bool) -> float:
    alpha = clamp(rgb.a, 0, rgb.max)
    return scale_value_range(alpha, 0, rgb.max, 0, PERCENT, round_result)


def build_rgb(
    r: float,
    g: float,
    b: float,
    alpha_percent: float = PERCENT,
    bit_depth: int = 8,
    round_result: bool = True,
) -> Rgb:
    """
    Clamp unit-range channels, scale them to ``bit_depth`` and wrap them in an Rgb.

    Alpha is given in percent and rescaled on its own.
    """
    max_value = max_for_bit_depth(bit_depth)
    r = clamp01(r) * max_value
    g = clamp01(g) * max_value
    b = clamp01(b) * max_value
    a = scale_value_range(alpha_percent, 0, PERCENT, 0, max_value)

    if round_result:
        r, g, b, a = (round_half_up(c) for c in (r, g, b, a))

    return Rgb(r, g, b, a, bit_depth)


def validate_luma_coefficients(blue: float, red: float, names: str = "Kb + Kr") -> float:
    """
    Check two luma weights leave a non-negative green weight and return it.

    Raises:
        InvalidLumaCoefficientsError: if ``blue + red > 1``
    """
    green = 1 - blue - red
    if blue + red > 1:
        raise InvalidLumaCoefficientsError(
            f"{names} must not exceed 1 (got {blue} + {red} = {blue + red})"
        )
    return green
