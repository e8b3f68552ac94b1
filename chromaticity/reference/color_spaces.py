"""
RGB working spaces and their RGB <-> XYZ transformation matrices.

The table is closed: every space has matrices for its native reference white
and for D50 and D65 (Bradford-adapted). They are derived from the primaries once,
at import, and never change afterwards. Asking for any other pair raises
``UnsupportedCombinationError``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import numpy as np

from ..errors import (
    MissingGammaError,
    UnsupportedColorSpaceError,
    UnsupportedCombinationError,
    UnsupportedReferenceWhiteError,
)
from .constants import BRADFORD, REFERENCE_WHITES, REFERENCE_WHITE_ALIASES, ReferenceWhite

logger = logging.getLogger("chromaticity")

Chromaticity = Tuple[float, float]


class Companding(str, Enum):
    SRGB = "srgb"
    LSTAR = "lstar"
    GAMMA = "gamma"


@dataclass(frozen=True)
class ColorSpaceDefinition:
    name: str
    label: str
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    native_white: str
    companding: Companding
    gamma: Optional[float] = None


@dataclass(frozen=True)
class ColorSpaceMatrices:
    color_space: str
    reference_white: str
    rgb_to_xyz: np.ndarray
    xyz_to_rgb: np.ndarray
    companding: Companding
    gamma: Optional[float]


_DEFINITIONS = (
    ColorSpaceDefinition("adobe98", "Adobe RGB (1998)", (0.6400, 0.3300), (0.2100, 0.7100), (0.1500, 0.0600), "d65", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("applergb", "Apple RGB", (0.6250, 0.3400), (0.2800, 0.5950), (0.1550, 0.0700), "d65", Companding.GAMMA, 1.8),
    ColorSpaceDefinition("bestrgb", "Best RGB", (0.7347, 0.2653), (0.2150, 0.7750), (0.1300, 0.0350), "d50", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("betargb", "Beta RGB", (0.6888, 0.3112), (0.1986, 0.7551), (0.1265, 0.0352), "d50", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("brucergb", "Bruce RGB", (0.6400, 0.3300), (0.2800, 0.6500), (0.1500, 0.0600), "d65", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("ciergb", "CIE RGB", (0.7350, 0.2650), (0.2740, 0.7170), (0.1670, 0.0090), "e", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("colormatch", "ColorMatch RGB", (0.6300, 0.3400), (0.2950, 0.6050), (0.1500, 0.0750), "d50", Companding.GAMMA, 1.8),
    ColorSpaceDefinition("donrgb4", "Don RGB 4", (0.6960, 0.3000), (0.2150, 0.7650), (0.1300, 0.0350), "d50", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("ecirgb", "ECI RGB v2", (0.6700, 0.3300), (0.2100, 0.7100), (0.1400, 0.0800), "d50", Companding.LSTAR),
    ColorSpaceDefinition("ektaspaceps5", "Ekta Space PS5", (0.6950, 0.3050), (0.2600, 0.7000), (0.1100, 0.0050), "d50", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("ntscrgb", "NTSC RGB", (0.6700, 0.3300), (0.2100, 0.7100), (0.1400, 0.0800), "c", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("palsecamrgb", "PAL / SECAM", (0.6400, 0.3300), (0.2900, 0.6000), (0.1500, 0.0600), "d65", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("prophoto", "ProPhoto RGB", (0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001), "d50", Companding.GAMMA, 1.8),
    ColorSpaceDefinition("smptecrgb", "SMPTE-C RGB", (0.6300, 0.3400), (0.3100, 0.5950), (0.1550, 0.0700), "d65", Companding.GAMMA, 2.2),
    ColorSpaceDefinition("srgb", "sRGB", (0.6400, 0.3300), (0.3000, 0.6000), (0.1500, 0.0600), "d65", Companding.SRGB),
    ColorSpaceDefinition("widegamutrgb", "Wide Gamut RGB", (0.7350, 0.2650), (0.1150, 0.8260), (0.1570, 0.0180), "d50", Companding.GAMMA, 2.2),
)

COLOR_SPACES: Mapping[str, ColorSpaceDefinition] = MappingProxyType({d.name: d for d in _DEFINITIONS})

COLOR_SPACE_ALIASES: Mapping[str, str] = MappingProxyType({
    "adobe rgb (1998)": "adobe98",
    "adobe rgb": "adobe98",
    "adobergb": "adobe98",
    "adobe1998": "adobe98",
    "apple rgb": "applergb",
    "apple": "applergb",
    "best rgb": "bestrgb",
    "beta rgb": "betargb",
    "bruce rgb": "brucergb",
    "cie rgb": "ciergb",
    "colormatch rgb": "colormatch",
    "colormatchrgb": "colormatch",
    "don rgb 4": "donrgb4",
    "eci rgb v2": "ecirgb",
    "eci rgb": "ecirgb",
    "ecirgbv2": "ecirgb",
    "ekta space ps5": "ektaspaceps5",
    "ntsc rgb": "ntscrgb",
    "ntsc": "ntscrgb",
    "pal / secam": "palsecamrgb",
    "pal/secam": "palsecamrgb",
    "pal secam": "palsecamrgb",
    "palsecam": "palsecamrgb",
    "pal": "palsecamrgb",
    "secam": "palsecamrgb",
    "prophoto rgb": "prophoto",
    "prophotorgb": "prophoto",
    "smpte-c rgb": "smptecrgb",
    "smpte-c": "smptecrgb",
    "smptec": "smptecrgb",
    "wide gamut rgb": "widegamutrgb",
    "widegamut": "widegamutrgb",
})

ADAPTED_WHITES = ("d50", "d65")


def resolve_color_space_name(name: str) -> str:
    """
    Canonical key for a color space name, ignoring case and documented aliases.

    Raises:
        UnsupportedColorSpaceError: if the name is unknown
    """
    key = name.strip().lower()
    if key in COLOR_SPACES:
        return key
    if key in COLOR_SPACE_ALIASES:
        return COLOR_SPACE_ALIASES[key]
    compact = key.replace(" ", "").replace("-", "")
    if compact in COLOR_SPACES:
        return compact
    raise UnsupportedColorSpaceError(f"Unsupported color space: {name!r}")


def resolve_reference_white_name(name: str) -> str:
    key = name.strip().lower()
    if key in REFERENCE_WHITES:
        return key
    if key in REFERENCE_WHITE_ALIASES:
        return REFERENCE_WHITE_ALIASES[key]
    raise UnsupportedReferenceWhiteError(f"Unsupported reference white: {name!r}")


def valid_color_space(name: str) -> ColorSpaceDefinition:
    return COLOR_SPACES[resolve_color_space_name(name)]


def valid_reference_white(name: str) -> ReferenceWhite:
    return REFERENCE_WHITES[resolve_reference_white_name(name)]


def get_gamma(color_space: str) -> float:
    """
    Power-law exponent of a gamma-companded space.

    Raises:
        MissingGammaError: for spaces using sRGB or L* companding
    """
    definition = valid_color_space(color_space)
    if definition.gamma is None:
        raise MissingGammaError(f"Gamma not defined for color space {definition.name!r}")
    return definition.gamma


def _rgb_to_xyz_matrix(definition: ColorSpaceDefinition, white: ReferenceWhite) -> np.ndarray:
    # columns are the XYZ of each primary at Y = 1, then scaled so RGB(1, 1, 1) maps to white
    primaries = np.array([
        [x / y for x, y in (definition.red, definition.green, definition.blue)],
        [1.0, 1.0, 1.0],
        [(1 - x - y) / y for x, y in (definition.red, definition.green, definition.blue)],
    ])
    scale = np.linalg.solve(primaries, white.as_array())
    return primaries * scale


def _bradford_adaptation(source: ReferenceWhite, destination: ReferenceWhite) -> np.ndarray:
    source_cone = BRADFORD @ source.as_array()
    destination_cone = BRADFORD @ destination.as_array()
    return np.linalg.inv(BRADFORD) @ np.diag(destination_cone / source_cone) @ BRADFORD


def _build_table() -> dict[tuple[str, str], ColorSpaceMatrices]:
    table: dict[tuple[str, str], ColorSpaceMatrices] = {}
    for definition in _DEFINITIONS:
        native = REFERENCE_WHITES[definition.native_white]
        native_matrix = _rgb_to_xyz_matrix(definition, native)
        for white_name in dict.fromkeys((definition.native_white,) + ADAPTED_WHITES):
            if white_name == definition.native_white:
                forward = native_matrix
            else:
                forward = _bradford_adaptation(native, REFERENCE_WHITES[white_name]) @ native_matrix
            inverse = np.linalg.inv(forward)
            forward.setflags(write=False)
            inverse.setflags(write=False)
            table[(definition.name, white_name)] = ColorSpaceMatrices(
                color_space=definition.name,
                reference_white=white_name,
                rgb_to_xyz=forward,
                xyz_to_rgb=inverse,
                companding=definition.companding,
                gamma=definition.gamma,
            )
    logger.debug(f"Prepared {len(table)} color space / reference white matrix pairs")
    return table


MATRICES: Mapping[tuple[str, str], ColorSpaceMatrices] = MappingProxyType(_build_table())


def get_matrices(color_space: str, reference_white: str) -> ColorSpaceMatrices:
    """
    Look up the prepared matrices for a (color space, reference white) pair.

    Raises:
        UnsupportedColorSpaceError / UnsupportedReferenceWhiteError: unknown names
        UnsupportedCombinationError: known names without prepared matrices
    """
    space = resolve_color_space_name(color_space)
    white = resolve_reference_white_name(reference_white)
    matrices = MATRICES.get((space, white))
    if matrices is None:
        raise UnsupportedCombinationError(space, white)
    return matrices


def supported_combinations() -> list[tuple[str, str]]:
    return sorted(MATRICES)
