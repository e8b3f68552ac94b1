"""
CIE conversions: RGB <-> XYZ and XYZ <-> xyY, Lab, Luv.

Every output carries the color space and reference white it was computed
against, so it can be converted onwards without re-supplying them.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
from boundednumbers.np_functions import clamp as np_clamp

from ..colors import Lab, Luv, Rgb, Xyy, Xyz
from ..reference.color_spaces import Companding, ColorSpaceMatrices, get_matrices, valid_reference_white
from ..reference.constants import CIE_E, CIE_K, ReferenceWhite
from ..types.format_type import PERCENT, max_for_bit_depth
from ..utils.num_utils import clamp, round_half_up, value_or_default
from .common import unit_channels

SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_ENCODED_THRESHOLD = 0.0031308
LSTAR_THRESHOLD = 0.08


# -------------------------------------------------------------------------
# companding
# -------------------------------------------------------------------------

def linearize(channels: np.ndarray, matrices: ColorSpaceMatrices) -> np.ndarray:
    """Undo a color space's companding: stored values -> linear light."""
    c = np_clamp(np.asarray(channels, dtype=np.float64), 0.0, 1.0)
    if matrices.companding is Companding.SRGB:
        return np.where(
            c <= SRGB_LINEAR_THRESHOLD,
            c / 12.92,
            ((c + 0.055) / 1.055) ** 2.4,
        )
    if matrices.companding is Companding.LSTAR:
        return np.where(
            c <= LSTAR_THRESHOLD,
            PERCENT * c / CIE_K,
            ((c + 0.16) / 1.16) ** 3,
        )
    return c ** matrices.gamma


def compand(channels: np.ndarray, matrices: ColorSpaceMatrices) -> np.ndarray:
    """Apply a color space's companding: linear light -> stored values."""
    c = np.maximum(np.asarray(channels, dtype=np.float64), 0.0)
    if matrices.companding is Companding.SRGB:
        return np.where(
            c <= SRGB_ENCODED_THRESHOLD,
            c * 12.92,
            1.055 * c ** (1 / 2.4) - 0.055,
        )
    if matrices.companding is Companding.LSTAR:
        return np.where(
            c <= CIE_E,
            c * CIE_K / PERCENT,
            1.16 * np.cbrt(c) - 0.16,
        )
    return c ** (1 / matrices.gamma)


# -------------------------------------------------------------------------
# RGB <-> XYZ
# -------------------------------------------------------------------------

def rgb_to_xyz(rgb: Rgb, color_space: str = "srgb", reference_white: str = "d65") -> Xyz:
    """
    Convert RGB to XYZ.

    X, Y and Z are clamped between 0 and the matching reference white component.

    Raises:
        UnsupportedCombinationError: if no matrices exist for the pair
        UnsupportedColorSpaceError / UnsupportedReferenceWhiteError: unknown names
    """
    matrices = get_matrices(color_space, reference_white)
    white = valid_reference_white(matrices.reference_white)

    linear = linearize(unit_channels(rgb), matrices)
    xyz = np_clamp(matrices.rgb_to_xyz @ linear, 0.0, white.as_array())

    return Xyz(
        float(xyz[0]),
        float(xyz[1]),
        float(xyz[2]),
        matrices.color_space,
        matrices.reference_white,
    )


def xyz_to_rgb(
    xyz: Xyz,
    round_result: bool = True,
    bit_depth: int = 8,
    color_space: Optional[str] = None,
    reference_white: Optional[str] = None,
) -> Rgb:
    """
    Convert XYZ to RGB; out-of-gamut channels are clamped.

    The color space and reference white default to the ones the XYZ value carries.
    """
    matrices = get_matrices(
        value_or_default(color_space, xyz.color_space),
        value_or_default(reference_white, xyz.reference_white),
    )

    linear = matrices.xyz_to_rgb @ np.array(xyz.values, dtype=np.float64)
    max_value = max_for_bit_depth(bit_depth)
    channels = np_clamp(compand(linear, matrices), 0.0, 1.0) * max_value

    r, g, b = (float(c) for c in channels)
    if round_result:
        r, g, b = (round_half_up(c) for c in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


# -------------------------------------------------------------------------
# XYZ <-> xyY
# -------------------------------------------------------------------------

def xyz_to_xyy(xyz: Xyz) -> Xyy:
    """Black (X + Y + Z == 0) takes the reference white's chromaticity."""
    total = xyz.x + xyz.y + xyz.z
    if not total:
        x, y = valid_reference_white(xyz.reference_white).chromaticity
    else:
        x = xyz.x / total
        y = xyz.y / total

    return Xyy(x, y, xyz.y, xyz.color_space, xyz.reference_white)


def xyy_to_xyz(xyy: Xyy) -> Xyz:
    if not xyy.y:
        x = z = 0.0
    else:
        x = xyy.x * xyy.luminance / xyy.y
        z = (1 - xyy.x - xyy.y) * xyy.luminance / xyy.y

    return Xyz(x, xyy.luminance, z, xyy.color_space, xyy.reference_white)


# -------------------------------------------------------------------------
# XYZ <-> Lab
# -------------------------------------------------------------------------

def _lab_f(ratio: float) -> float:
    if ratio > CIE_E:
        return ratio ** (1 / 3)
    return (CIE_K * ratio + 16) / 116


def _white(value) -> ReferenceWhite:
    return valid_reference_white(value.reference_white)


def _xyz_within_white(x: float, y: float, z: float, white: ReferenceWhite, source) -> Xyz:
    xyz = np_clamp(np.array([x, y, z]), 0.0, white.as_array())
    return Xyz(float(xyz[0]), float(xyz[1]), float(xyz[2]), source.color_space, source.reference_white)


def xyz_to_lab(xyz: Xyz, round_result: bool = True) -> Lab:
    white = _white(xyz)

    fx = _lab_f(xyz.x / white.x)
    fy = _lab_f(xyz.y / white.y)
    fz = _lab_f(xyz.z / white.z)

    l = clamp(116 * fy - 16, 0, PERCENT)
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)

    if round_result:
        l, a, b = (round_half_up(v) for v in (l, a, b))

    return Lab(l, a, b, xyz.color_space, xyz.reference_white)


def lab_to_xyz(lab: Lab) -> Xyz:
    """Convert Lab to XYZ, clamping each component between 0 and the reference white."""
    white = _white(lab)

    fy = (lab.l + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200

    # Y tests L against kappa * epsilon, X and Z test the cube against epsilon
    xr = fx ** 3 if fx ** 3 > CIE_E else (116 * fx - 16) / CIE_K
    yr = fy ** 3 if lab.l > CIE_K * CIE_E else lab.l / CIE_K
    zr = fz ** 3 if fz ** 3 > CIE_E else (116 * fz - 16) / CIE_K

    return _xyz_within_white(xr * white.x, yr * white.y, zr * white.z, white, lab)


# -------------------------------------------------------------------------
# XYZ <-> Luv
# -------------------------------------------------------------------------

def _white_uv(white: ReferenceWhite) -> tuple[float, float]:
    denominator = white.x + 15 * white.y + 3 * white.z
    return 4 * white.x / denominator, 9 * white.y / denominator


def xyz_to_luv(xyz: Xyz, round_result: bool = True) -> Luv:
    white = _white(xyz)
    yr = xyz.y / white.y

    denominator = xyz.x + 15 * xyz.y + 3 * xyz.z
    if not denominator:
        up = vp = 0.0
    else:
        up = 4 * xyz.x / denominator
        vp = 9 * xyz.y / denominator
    ur, vr = _white_uv(white)

    l = 116 * yr ** (1 / 3) - 16 if yr > CIE_E else CIE_K * yr
    u = 13 * l * (up - ur)
    v = 13 * l * (vp - vr)
    l = clamp(l, 0, PERCENT)

    if round_result:
        l, u, v = (round_half_up(c) for c in (l, u, v))

    return Luv(l, u, v, xyz.color_space, xyz.reference_white)


def luv_to_xyz(luv: Luv) -> Xyz:
    """
    Convert Luv to XYZ, clamping each component between 0 and the reference white.

    L == 0 is black.
    """
    if not luv.l:
        return Xyz(0.0, 0.0, 0.0, luv.color_space, luv.reference_white)

    white = _white(luv)
    u0, v0 = _white_uv(white)

    y = ((luv.l + 16) / 116) ** 3 if luv.l > CIE_K * CIE_E else luv.l / CIE_K

    a = (52 * luv.l / (luv.u + 13 * luv.l * u0) - 1) / 3
    b = -5 * y
    c = -1 / 3
    d = y * (39 * luv.l / (luv.v + 13 * luv.l * v0) - 5)

    x = (d - b) / (a - c)
    z = x * a + b

    return _xyz_within_white(x, y, z, white, luv)


# -------------------------------------------------------------------------
# compositions through XYZ
# -------------------------------------------------------------------------

def rgb_to_lab(rgb: Rgb, color_space: str = "srgb", reference_white: str = "d65", round_result: bool = True) -> Lab:
    return xyz_to_lab(rgb_to_xyz(rgb, color_space, reference_white), round_result)


def lab_to_rgb(lab: Lab, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    return xyz_to_rgb(lab_to_xyz(lab), round_result, bit_depth)


def rgb_to_luv(rgb: Rgb, color_space: str = "srgb", reference_white: str = "d65", round_result: bool = True) -> Luv:
    return xyz_to_luv(rgb_to_xyz(rgb, color_space, reference_white), round_result)


def luv_to_rgb(luv: Luv, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    return xyz_to_rgb(luv_to_xyz(luv), round_result, bit_depth)


def rgb_to_xyy(rgb: Rgb, color_space: str = "srgb", reference_white: str = "d65") -> Xyy:
    return xyz_to_xyy(rgb_to_xyz(rgb, color_space, reference_white))


def xyy_to_rgb(xyy: Xyy, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    return xyz_to_rgb(xyy_to_xyz(xyy), round_result, bit_depth)
