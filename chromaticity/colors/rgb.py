from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..types.format_type import ColorMode, max_for_bit_depth


@dataclass(frozen=True)
class Rgb:
    """Device RGB at an arbitrary bit depth; channels lie in ``[0, max]``."""

    mode: ClassVar[ColorMode] = ColorMode.RGB

    r: float
    g: float
    b: float
    a: Optional[float] = None
    bit_depth: int = 8

    def __post_init__(self) -> None:
        if self.a is None:
            object.__setattr__(self, "a", self.max)

    @property
    def max(self) -> int:
        return max_for_bit_depth(self.bit_depth)

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Rec709Rgb:
    """ITU-R BT.709 legal-range RGB (8 or 10 bit)."""

    mode: ClassVar[ColorMode] = ColorMode.REC709RGB

    r: float
    g: float
    b: float
    a: Optional[float] = None
    bit_depth: int = 8

    def __post_init__(self) -> None:
        if self.a is None:
            object.__setattr__(self, "a", self.max)

    @property
    def max(self) -> int:
        return max_for_bit_depth(self.bit_depth)

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Rec2020Rgb:
    """ITU-R BT.2020 legal-range RGB (10 or 12 bit)."""

    mode: ClassVar[ColorMode] = ColorMode.REC2020RGB

    r: float
    g: float
    b: float
    a: Optional[float] = None
    bit_depth: int = 10

    def __post_init__(self) -> None:
        if self.a is None:
            object.__setattr__(self, "a", self.max)

    @property
    def max(self) -> int:
        return max_for_bit_depth(self.bit_depth)

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class RgbNormalized:
    """RGB with every channel, alpha included, on ``[0, 1]``.

    ``gamma`` records the power-law exponent already applied, if any.
    """

    mode: ClassVar[ColorMode] = ColorMode.RGB_NORMALIZED

    r: float
    g: float
    b: float
    a: float = 1.0
    gamma: Optional[float] = None

    @property
    def values(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Hex:
    """Six hex digits, stored lowercase without a leading ``#``."""

    mode: ClassVar[ColorMode] = ColorMode.HEX

    hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", self.hex.strip().lstrip("#").lower())

    @property
    def values(self) -> Tuple[str]:
        return (self.hex,)

    def __str__(self) -> str:
        return f"#{self.hex}"
