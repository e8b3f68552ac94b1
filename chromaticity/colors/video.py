from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Ypbpr:
    """Analog component video: y in [0, 1], pb and pr in [-0.5, 0.5].

    ``kb`` and ``kr`` are the luma coefficients the value was encoded with.
    """

    mode: ClassVar[ColorMode] = ColorMode.YPBPR

    y: float
    pb: float
    pr: float
    kb: float
    kr: float

    @property
    def kg(self) -> float:
        return 1 - self.kb - self.kr

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.y, self.pb, self.pr)


@dataclass(frozen=True)
class Ycbcr:
    """Digital component video scaled into the configured Y and Cb/Cr bounds."""

    mode: ClassVar[ColorMode] = ColorMode.YCBCR

    y: float
    cb: float
    cr: float
    y_lower: float = 16
    y_upper: float = 235
    c_lower: float = 16
    c_upper: float = 240
    kb: Optional[float] = None
    kr: Optional[float] = None

    @property
    def values(self) -> Tuple[float, float, float]:
        return (self.y, self.cb, self.cr)
