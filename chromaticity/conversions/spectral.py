"""
One-way approximations to RGB: wavelength of light and colour temperature.

Both are perceptual approximations, not colorimetric conversions; there is no
route back from RGB.
"""
from __future__ import annotations

import math

import numpy as np
from boundednumbers.np_functions import clamp as np_clamp

from ..colors import Kelvin, Nm, Rgb
from ..reference.spectral import (
    COLOR_MATCHING_FUNCTIONS,
    KELVIN_GAMMA,
    KELVIN_PRIMARIES,
    PLANCK_EXPONENT,
    PLANCK_SCALE,
    TRAPEZOID_WEIGHTS,
    WAVELENGTHS,
)
from ..types.format_type import max_for_bit_depth
from ..utils.num_utils import clamp, round_half_up

VISIBLE_LOW = 380
VISIBLE_HIGH = 781

# (start, end, r, g, b); each channel is a constant or "up"/"down" ramp over the band
_WAVELENGTH_BANDS = (
    (380, 440, "down", 0.0, 1.0),
    (440, 490, 0.0, "up", 1.0),
    (510, 580, "up", 1.0, 0.0),
    (580, 645, 1.0, "down", 0.0),
    (645, 781, 1.0, 0.0, 0.0),
)


def _band_channel(shape, wavelength: float, start: float, end: float) -> float:
    if shape == "up":
        return (wavelength - start) / (end - start)
    if shape == "down":
        return (end - wavelength) / (end - start)
    return shape


def _wavelength_ramp(wavelength: float) -> tuple:
    for start, end, *shapes in _WAVELENGTH_BANDS:
        if start <= wavelength < end:
            return tuple(_band_channel(s, wavelength, start, end) for s in shapes)
    # outside the visible envelope and in the 490-510 gap
    return 0.0, 0.0, 0.0


def _intensity_factor(wavelength: float) -> float:
    """Intensity falls off towards the limits of vision."""
    if 380 <= wavelength < 420:
        return 0.3 + 0.7 * (wavelength - 380) / (420 - 380)
    if 420 <= wavelength < 701:
        return 1.0
    if 701 <= wavelength < VISIBLE_HIGH:
        return 0.3 + 0.7 * (780 - wavelength) / (780 - 700)
    return 0.0


def nm_to_rgb(nm: Nm, gamma: float = 0.8, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """
    Approximate the colour of monochromatic light.

    Args:
        nm: Wavelength in nanometres; outside 380-780 (and in 490-510) gives black
        gamma: Exponent applied to non-zero channels only
        round_result: Round to integers
        bit_depth: Output bit depth
    """
    wavelength = nm.wavelength
    factor = _intensity_factor(wavelength)
    max_value = max_for_bit_depth(bit_depth)

    r, g, b = (
        max_value * (channel * factor) ** gamma if channel > 0 else 0.0
        for channel in _wavelength_ramp(wavelength)
    )

    if round_result:
        r, g, b = (round_half_up(v) for v in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


def _black_body_xyz(temperature: float) -> np.ndarray:
    """Integrate Planck's law against the colour matching functions (trapezoid rule)."""
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        radiance = PLANCK_SCALE / WAVELENGTHS ** 5 / (np.exp(PLANCK_EXPONENT / (WAVELENGTHS * temperature)) - 1)
    radiance = np.nan_to_num(radiance, nan=0.0, posinf=0.0, neginf=0.0)
    return (TRAPEZOID_WEIGHTS * radiance) @ COLOR_MATCHING_FUNCTIONS


def _primaries_matrix() -> np.ndarray:
    # rows are x, y, z; columns are the r, g, b primaries
    return np.array([
        [x for x, _ in KELVIN_PRIMARIES.values()],
        [y for _, y in KELVIN_PRIMARIES.values()],
        [1 - x - y for x, y in KELVIN_PRIMARIES.values()],
    ])


def _solve_cramer(matrix: np.ndarray, target: np.ndarray) -> np.ndarray:
    denominator = np.linalg.det(matrix)
    solution = np.empty(3)
    for column in range(3):
        replaced = matrix.copy()
        replaced[:, column] = target
        solution[column] = np.linalg.det(replaced) / denominator
    return solution


def kelvin_to_rgb(kelvin: Kelvin, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """
    Approximate the colour of a black body at a temperature (1000-40000 K).

    The spectrum is integrated over 5 nm bands, projected onto the display
    primaries, clamped, then gamma-adjusted relative to the brightest channel.
    """
    max_value = max_for_bit_depth(bit_depth)

    xyz = _black_body_xyz(kelvin.k)
    peak = float(xyz.max())
    if peak <= 0:
        return Rgb(0, 0, 0, max_value, bit_depth)

    rgb = np_clamp(_solve_cramer(_primaries_matrix(), xyz / peak), 0.0, 1.0)
    rgb = (rgb / max(1.0e-10, float(rgb.max()))) ** KELVIN_GAMMA
    rgb = np.minimum(rgb * max_value, max_value)

    r, g, b = (float(c) for c in rgb)
    if round_result:
        r, g, b = (round_half_up(c) for c in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)


def kelvin_to_rgb_empirical(kelvin: Kelvin, round_result: bool = True, bit_depth: int = 8) -> Rgb:
    """
    Faster curve-fit approximation of a colour temperature (1000-40000 K).

    Piecewise logarithmic and power-law fits calibrated on 0..255, rescaled to
    ``bit_depth``. Not suitable for scientific use.
    """
    k = kelvin.k / 100
    max_value = max_for_bit_depth(bit_depth)
    scalar = max_value / 255

    if k <= 66:
        r = 255.0
        g = 99.4708025861 * math.log(k) - 161.1195681661
    else:
        r = 329.698727466 * (k - 60) ** -0.1332047592
        g = 288.1221695283 * (k - 60) ** -0.0755148492

    if k >= 66:
        b = 255.0
    elif k <= 19:
        b = 0.0
    else:
        b = 138.5177312231 * math.log(k - 10) - 305.0447927307

    r, g, b = (clamp(channel * scalar, 0, max_value) for channel in (r, g, b))

    if round_result:
        r, g, b = (round_half_up(v) for v in (r, g, b))

    return Rgb(r, g, b, max_value, bit_depth)
