from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from ..types.format_type import ColorMode


@dataclass(frozen=True)
class Nm:
    """A wavelength of light in nanometres (meaningful from 380 to 780)."""

    mode: ClassVar[ColorMode] = ColorMode.NM

    wavelength: float

    @property
    def values(self) -> Tuple[float]:
        return (self.wavelength,)


@dataclass(frozen=True)
class Kelvin:
    """A colour temperature in kelvin (meaningful from 1000 to 40000)."""

    mode: ClassVar[ColorMode] = ColorMode.KELVIN

    k: float

    @property
    def values(self) -> Tuple[float]:
        return (self.k,)
