from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Xyz:
    """CIE XYZ tristimulus values, each between 0 and the reference white's component."""

    mode: ClassVar[ColorMode] = ColorMode.XYZ

    x: float
    y: float
    z: float
    color_space: str = "srgb"
    reference_white: str = "d65"

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Xyy:
    """CIE xyY: chromaticity ``(x, y)`` and luminance ``Y``."""

    mode: ClassVar[ColorMode] = ColorMode.XYY

    x: float
    y: float
    luminance: float
    color_space: str = "srgb"
    reference_white: str = "d65"

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.luminance)


@dataclass(frozen=True)
class Lab:
    mode: ClassVar[ColorMode] = ColorMode.LAB

    l: float
    a: float
    b: float
    color_space: str = "srgb"
    reference_white: str = "d65"

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.l, self.a, self.b)


@dataclass(frozen=True)
class Luv:
    mode: ClassVar[ColorMode] = ColorMode.LUV

    l: float
    u: float
    v: float
    color_space: str = "srgb"
    reference_white: str = "d65"

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.l, self.u, self.v)
