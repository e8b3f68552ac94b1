"""Blending and hue rotation primitives built on the conversion engine."""
from __future__ import annotations

import dataclasses
from typing import Any, Dict

import numpy as np
from boundednumbers import UnitFloat
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import clamp as np_clamp

from .colors import ColorValue, Rgb
from .config import ConversionOptions, DEFAULT_OPTIONS, resolve_options
from .conversions import convert, to_rgb
from .types.color_types import is_hue_mode
from .types.format_type import HUE_360, ColorMode
from .utils.num_utils import round_half_up

# value fields that mean the same thing as the ConversionOptions field of that name
_CONTEXT_FIELDS = frozenset({
    "bit_depth", "color_space", "reference_white", "normalized",
    "kb", "kr", "pb", "pr", "y_lower", "y_upper", "c_lower", "c_upper",
})


def context_options(color: ColorValue, **overrides: Any) -> ConversionOptions:
    """Options that convert back into ``color``'s own bit depth, color space, etc."""
    context: Dict[str, Any] = {
        field.name: getattr(color, field.name)
        for field in dataclasses.fields(color)
        if field.name in _CONTEXT_FIELDS and getattr(color, field.name) is not None
    }
    context.update(overrides)
    return resolve_options(DEFAULT_OPTIONS, **context)


def blend(color1: ColorValue, color2: ColorValue, amount: float = 0.5, round_result: bool = True) -> ColorValue:
    """
    Linearly interpolate two colors channel by channel in RGB, alpha included.

    The result has ``color1``'s type and context.

    Args:
        color1: Start color; ``amount`` 0 returns it
        color2: End color; ``amount`` 1 returns it
        amount: Position between the two, clamped to [0, 1]
        round_result: Round the result
    Returns:
        The blended color
    """
    t = float(UnitFloat(amount))
    options = context_options(color1, round=round_result)
    bit_depth = color1.bit_depth if color1.mode is ColorMode.RGB else 8

    start = to_rgb(color1, options, False, bit_depth)
    end = to_rgb(color2, options, False, bit_depth)

    a = np.array(start.values, dtype=float)
    b = np.array(end.values, dtype=float)
    mixed = np_clamp(a + (b - a) * t, 0, start.max)

    r, g, b_, alpha = (float(c) for c in mixed)
    if color1.mode is ColorMode.RGB and round_result:
        r, g, b_, alpha = (round_half_up(c) for c in (r, g, b_, alpha))

    result = Rgb(r, g, b_, alpha, bit_depth)
    if color1.mode is ColorMode.RGB:
        return result
    return convert(result, color1.mode, options)


def rotate_hue(color: ColorValue, degrees: float, round_result: bool = True) -> ColorValue:
    """
    Turn a color around the hue wheel; the result has the input's type.

    Hue models rotate in place, anything else goes through unrounded HSV.
    """
    if is_hue_mode(color.mode):
        hue = cyclic_wrap_float(color.h + degrees, 0, HUE_360)
        if round_result:
            hue = cyclic_wrap_float(round_half_up(hue), 0, HUE_360)
        return dataclasses.replace(color, h=hue)

    options = context_options(color, round=round_result)
    hsv = convert(color, ColorMode.HSV, options, round=False)
    rotated = dataclasses.replace(hsv, h=cyclic_wrap_float(hsv.h + degrees, 0, HUE_360))
    return convert(rotated, color.mode, options)
