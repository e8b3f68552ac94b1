from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Hsi:
    """Hue in degrees ``[0, 360)``; saturation, intensity and alpha in percent."""

    mode: ClassVar[ColorMode] = ColorMode.HSI

    h: float
    s: float
    i: float
    a: float = 100

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.h, self.s, self.i, self.a)
