"""Conversion options and their resolution."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Literal, Optional

from .utils.num_utils import value_or_default

KelvinMethod = Literal["spectral", "empirical"]


@dataclass(frozen=True)
class ConversionOptions:
    """Options recognised by the conversion engine.

    Instances are immutable; use ``resolve_options`` to derive a new record.
    """

    round: bool = True
    bit_depth: Optional[int] = None
    bit_rate: Optional[int] = None
    normalized: bool = True

    # XYZ family
    color_space: str = "srgb"
    reference_white: str = "d65"

    # YPbPr / YCbCr
    kb: Optional[float] = None
    kr: Optional[float] = None
    y_lower: float = 16
    y_upper: float = 235
    c_lower: float = 16
    c_upper: float = 240
    jpeg: bool = False

    # HSP perceived brightness weights
    pb: float = 0.114
    pr: float = 0.299

    # one-way approximations
    gamma: float = 0.8
    kelvin_method: KelvinMethod = "spectral"

    def target_bit_depth(self, default: int) -> int:
        return value_or_default(self.bit_depth, default)


DEFAULT_OPTIONS = ConversionOptions()


def resolve_options(options: Optional[ConversionOptions] = None, **overrides) -> ConversionOptions:
    """
    Produce a new options record from a base record plus keyword overrides.

    ``bit_rate`` is an alias for ``bit_depth``: when only ``bit_rate`` is given it is
    copied into ``bit_depth``. The base record is never modified.

    Args:
        options: Base record, defaults to ``DEFAULT_OPTIONS``
        **overrides: Field values to replace
    Returns:
        A resolved ConversionOptions
    Raises:
        TypeError: if an override names an unknown option
    """
    base = value_or_default(options, DEFAULT_OPTIONS)
    resolved = dataclasses.replace(base, **overrides) if overrides else base
    if resolved.bit_depth is None and resolved.bit_rate is not None:
        resolved = dataclasses.replace(resolved, bit_depth=resolved.bit_rate)
    return resolved
