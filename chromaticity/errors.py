"""Exceptions raised by the conversion engine."""
from __future__ import annotations


class ChromaticityError(Exception):
    """Base exception for chromaticity errors."""

    pass


class ConfigurationError(ChromaticityError, ValueError):
    """A conversion was requested with a structurally invalid configuration."""

    pass


class UnsupportedColorSpaceError(ConfigurationError):
    pass


class UnsupportedReferenceWhiteError(ConfigurationError):
    pass


class UnsupportedCombinationError(ConfigurationError):
    """No transformation matrices are prepared for a (color space, reference white) pair."""

    def __init__(self, color_space: str, reference_white: str) -> None:
        self.color_space = color_space
        self.reference_white = reference_white
        super().__init__(
            f"Transformation matrix unavailable for color space {color_space!r} "
            f"and reference white {reference_white!r}"
        )


class MissingGammaError(ConfigurationError):
    pass


class InvalidBitRateError(ConfigurationError):
    """A video standard was asked for a bit depth it does not define."""

    def __init__(self, standard: str, bit_rate: int, allowed: tuple[int, ...]) -> None:
        self.standard = standard
        self.bit_rate = bit_rate
        self.allowed = allowed
        choices = " or ".join(str(a) for a in allowed)
        super().__init__(f"Invalid bit rate {bit_rate} for {standard}, must be {choices}")


class InvalidLumaCoefficientsError(ConfigurationError):
    pass


class MissingParameterError(ConfigurationError):
    pass


class UnsupportedConversionError(ChromaticityError):
    """There is no route between the two representations."""

    def __init__(self, from_mode: str, to_mode: str) -> None:
        self.from_mode = from_mode
        self.to_mode = to_mode
        super().__init__(f"Unsupported conversion: {from_mode} -> {to_mode}")


class InvalidHueError(ChromaticityError, ValueError):
    """A hue could not be brought into ``[0, 360)`` because it is not finite."""

    pass
