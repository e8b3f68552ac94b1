import pytest

from chromaticity.errors import (
    ChromaticityError,
    ConfigurationError,
    InvalidBitRateError,
    InvalidHueError,
    MissingGammaError,
    UnsupportedCombinationError,
    UnsupportedConversionError,
)


def test_configuration_errors_are_value_errors():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(MissingGammaError, ConfigurationError)
    assert issubclass(ConfigurationError, ChromaticityError)


def test_invalid_hue_is_a_value_error():
    assert issubclass(InvalidHueError, ValueError)
    assert issubclass(InvalidHueError, ChromaticityError)
    assert not issubclass(InvalidHueError, ConfigurationError)


def test_unsupported_conversion_is_not_a_value_error():
    assert not issubclass(UnsupportedConversionError, ValueError)
    error = UnsupportedConversionError("rgb", "nm")
    assert str(error) == "Unsupported conversion: rgb -> nm"
    assert (error.from_mode, error.to_mode) == ("rgb", "nm")


def test_invalid_bit_rate_message():
    error = InvalidBitRateError("Rec2020", 8, (10, 12))
    assert str(error) == "Invalid bit rate 8 for Rec2020, must be 10 or 12"


def test_unsupported_combination_carries_names():
    with pytest.raises(ChromaticityError) as excinfo:
        raise UnsupportedCombinationError("srgb", "a")
    assert "srgb" in str(excinfo.value)
    assert "'a'" in str(excinfo.value)
