"""
Reference Data
==============

Read-only tables consulted by the conversion engine: CIE constants, reference
white tristimulus values, per-space RGB <-> XYZ matrices with their companding
rule, and the spectral data for the black body approximation. Everything here
is built once at import and is safe to share between threads.
"""

from .constants import CIE_E, CIE_K, REFERENCE_WHITES, ReferenceWhite
from .color_spaces import (
    COLOR_SPACES,
    Companding,
    ColorSpaceDefinition,
    ColorSpaceMatrices,
    get_gamma,
    get_matrices,
    resolve_color_space_name,
    resolve_reference_white_name,
    supported_combinations,
    valid_color_space,
    valid_reference_white,
)

__all__ = [
    "CIE_E",
    "CIE_K",
    "REFERENCE_WHITES",
    "ReferenceWhite",
    "COLOR_SPACES",
    "Companding",
    "ColorSpaceDefinition",
    "ColorSpaceMatrices",
    "get_gamma",
    "get_matrices",
    "resolve_color_space_name",
    "resolve_reference_white_name",
    "supported_combinations",
    "valid_color_space",
    "valid_reference_white",
]
