from __future__ import annotations
from typing import Union

from .format_type import ColorMode, HUE_MODES, CIE_MODES

ColorModeLike = Union[ColorMode, str]


def as_mode(mode: ColorModeLike) -> ColorMode:
    """
    Coerce a mode tag or its string value to a ColorMode.

    Args:
        mode: ColorMode member or its exact string value (e.g. "hsv")
    Returns:
        The matching ColorMode
    Raises:
        ValueError: if the string names no known mode
    """
    if isinstance(mode, ColorMode):
        return mode
    return ColorMode(mode.lower())


def is_hue_mode(mode: ColorModeLike) -> bool:
    """Check if the given mode is a hue-based model (HSV, HSL, HSI, HSP)."""
    return as_mode(mode) in HUE_MODES


def is_cie_mode(mode: ColorModeLike) -> bool:
    """Check if the given mode is in the CIE (XYZ-pivoted) family."""
    return as_mode(mode) in CIE_MODES
