from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Hsv:
    """Hue in degrees ``[0, 360)``; saturation, value and alpha in percent."""

    mode: ClassVar[ColorMode] = ColorMode.HSV

    h: float
    s: float
    v: float
    a: float = 100

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.h, self.s, self.v, self.a)
