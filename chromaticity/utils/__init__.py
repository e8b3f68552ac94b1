from .num_utils import (
    scale_value_range,
    fmod,
    round_half_up,
    wrap_hue,
    clamp,
    clamp01,
    value_or_default,
)

__all__ = [
    "scale_value_range",
    "fmod",
    "round_half_up",
    "wrap_hue",
    "clamp",
    "clamp01",
    "value_or_default",
]
