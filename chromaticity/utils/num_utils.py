"""Range utilities shared by every conversion."""
from __future__ import annotations

import math
from typing import Optional, TypeVar

from boundednumbers import clamp, clamp01
from boundednumbers.functions import cyclic_wrap_float

from ..errors import InvalidHueError
from ..types.format_type import HUE_360

T = TypeVar("T")


def scale_value_range(
    value: float,
    from_low: float,
    from_high: float,
    to_low: float,
    to_high: float,
    round_result: bool = False,
) -> float:
    """
    Linearly remap ``value`` from ``[from_low, from_high]`` onto ``[to_low, to_high]``.

    No clamping is performed. ``from_high == from_low`` is the caller's problem:
    the division follows IEEE-754 and yields ``inf`` or ``nan``.

    Args:
        value: Value to remap
        from_low, from_high: Source interval
        to_low, to_high: Target interval
        round_result: Round half up to an integer after remapping
    Returns:
        Remapped value
    """
    span = from_high - from_low
    offset = value - from_low
    if span == 0:
        ratio = math.nan if offset == 0 else math.copysign(math.inf, offset)
    else:
        ratio = offset / span
    result = to_low + ratio * (to_high - to_low)
    if round_result:
        return round_half_up(result)
    return result


def fmod(n: float, m: float) -> float:
    """Floored remainder: the result takes the sign of ``m``."""
    return n - math.floor(n / m) * m


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties going towards +infinity.

    ``inf`` and ``nan`` are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def wrap_hue(hue: float) -> float:
    """
    Bring a hue in degrees into ``[0, 360)``, however far outside it starts.

    Raises:
        InvalidHueError: if the hue is ``inf`` or ``nan``
    """
    if not math.isfinite(hue):
        raise InvalidHueError(f"Hue must be a finite number of degrees, got {hue}")
    hue = cyclic_wrap_float(hue, 0, HUE_360)
    # a tiny negative hue wraps to exactly 360.0 in floating point
    return hue if hue < HUE_360 else 0.0


def value_or_default(value: Optional[T], default: T) -> T:
    return value if value is not None else default
