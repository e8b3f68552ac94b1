"""CIE constants and reference white tristimulus values.

Whites are for the CIE 1931 2 degree standard observer, normalised so that Y = 1.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

import numpy as np

# Actual CIE standard values (216/24389 ~ 0.008856, 24389/27 ~ 903.3)
CIE_E: float = 216 / 24389
CIE_K: float = 24389 / 27


class ReferenceWhite(NamedTuple):
    x: float
    y: float
    z: float

    @property
    def chromaticity(self) -> tuple[float, float]:
        """(x, y) chromaticity coordinates of the white point."""
        total = self.x + self.y + self.z
        return self.x / total, self.y / total

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)


REFERENCE_WHITES: Mapping[str, ReferenceWhite] = MappingProxyType({
    "a":   ReferenceWhite(1.09850, 1.00000, 0.35585),
    "b":   ReferenceWhite(0.99072, 1.00000, 0.85223),
    "c":   ReferenceWhite(0.98074, 1.00000, 1.18232),
    "d50": ReferenceWhite(0.96422, 1.00000, 0.82521),
    "d55": ReferenceWhite(0.95682, 1.00000, 0.92149),
    "d65": ReferenceWhite(0.95047, 1.00000, 1.08883),
    "d75": ReferenceWhite(0.94972, 1.00000, 1.22638),
    "e":   ReferenceWhite(1.00000, 1.00000, 1.00000),
    "f2":  ReferenceWhite(0.99186, 1.00000, 0.67393),
    "f7":  ReferenceWhite(0.95041, 1.00000, 1.08747),
    "f11": ReferenceWhite(1.00962, 1.00000, 0.64350),
})

REFERENCE_WHITE_ALIASES: Mapping[str, str] = MappingProxyType({
    "illuminant a": "a",
    "illuminant b": "b",
    "illuminant c": "c",
    "illuminant e": "e",
    "equal energy": "e",
    "d5003": "d50",
    "d6504": "d65",
    "icc": "d50",
    "cool white fluorescent": "f2",
    "broad-band daylight fluorescent": "f7",
    "narrow tri-band fluorescent": "f11",
})

# Bradford cone response matrix used for chromatic adaptation
BRADFORD = np.array([
    [ 0.8951,  0.2664, -0.1614],
    [-0.7502,  1.7135,  0.0367],
    [ 0.0389, -0.0685,  1.0296],
])
BRADFORD.setflags(write=False)
