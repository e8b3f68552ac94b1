from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Hsp:
    """Hue, saturation and perceived brightness.

    ``pb`` and ``pr`` weight the blue and red channels in the brightness sum;
    green takes whatever is left.
    """

    mode: ClassVar[ColorMode] = ColorMode.HSP

    h: float
    s: float
    p: float
    a: float = 100
    pb: float = 0.114
    pr: float = 0.299

    @property
    def pg(self) -> float:
        return 1 - self.pb - self.pr

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.h, self.s, self.p, self.a)
