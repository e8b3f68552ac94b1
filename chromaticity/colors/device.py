from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Cmyk:
    """Cyan, magenta, yellow and key, each in percent."""

    mode: ClassVar[ColorMode] = ColorMode.CMYK

    c: float
    m: float
    y: float
    k: float

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)


@dataclass(frozen=True)
class Yiq:
    """
    NTSC YIQ.

    normalized:     y in [0, 255], i and q in [-128, 128]
    not normalized: y in [0, 1], i in [-0.5957, 0.5957], q in [-0.5226, 0.5226]
    """

    mode: ClassVar[ColorMode] = ColorMode.YIQ

    y: float
    i: float
    q: float
    normalized: bool = True

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.y, self.i, self.q)
