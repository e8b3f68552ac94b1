import numpy as np
import pytest

from chromaticity.errors import (
    MissingGammaError,
    UnsupportedColorSpaceError,
    UnsupportedCombinationError,
    UnsupportedReferenceWhiteError,
)
from chromaticity.reference import (
    CIE_E,
    CIE_K,
    COLOR_SPACES,
    REFERENCE_WHITES,
    get_gamma,
    get_matrices,
    resolve_color_space_name,
    resolve_reference_white_name,
    supported_combinations,
)


def test_sixteen_spaces_and_eleven_whites():
    assert len(COLOR_SPACES) == 16
    assert len(REFERENCE_WHITES) == 11


def test_supported_combinations():
    combinations = supported_combinations()
    assert len(combinations) == 34
    for name in COLOR_SPACES:
        assert (name, "d50") in combinations
        assert (name, "d65") in combinations
    assert ("ciergb", "e") in combinations
    assert ("ntscrgb", "c") in combinations


def test_cie_constants():
    assert abs(CIE_E - 0.008856) < 1e-6
    assert abs(CIE_K - 903.3) < 0.1
    assert CIE_E * CIE_K == pytest.approx(8.0)


def test_color_space_aliases():
    assert resolve_color_space_name("sRGB") == "srgb"
    assert resolve_color_space_name("Adobe RGB (1998)") == "adobe98"
    assert resolve_color_space_name("PAL / SECAM") == "palsecamrgb"
    assert resolve_color_space_name("Wide Gamut RGB") == "widegamutrgb"
    assert resolve_color_space_name("ProPhoto") == "prophoto"
    with pytest.raises(UnsupportedColorSpaceError):
        resolve_color_space_name("rec2100")


def test_reference_white_aliases():
    assert resolve_reference_white_name("D65") == "d65"
    assert resolve_reference_white_name("Equal Energy") == "e"
    with pytest.raises(UnsupportedReferenceWhiteError):
        resolve_reference_white_name("d60")


def test_unprepared_combination():
    with pytest.raises(UnsupportedCombinationError) as excinfo:
        get_matrices("srgb", "f2")
    assert (excinfo.value.color_space, excinfo.value.reference_white) == ("srgb", "f2")


@pytest.mark.parametrize("color_space, reference_white", supported_combinations())
def test_matrices_are_inverse_and_map_white(color_space, reference_white):
    matrices = get_matrices(color_space, reference_white)
    assert np.allclose(matrices.rgb_to_xyz @ matrices.xyz_to_rgb, np.eye(3), atol=1e-9)
    white = REFERENCE_WHITES[reference_white]
    assert np.allclose(matrices.rgb_to_xyz @ np.ones(3), white, atol=1e-6)


def test_srgb_matrix():
    expected = np.array([
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ])
    assert np.allclose(get_matrices("srgb", "d65").rgb_to_xyz, expected, atol=1e-4)


def test_matrices_are_read_only():
    matrices = get_matrices("srgb", "d65")
    with pytest.raises(ValueError):
        matrices.rgb_to_xyz[0, 0] = 1.0


def test_gamma_lookup():
    assert get_gamma("adobe98") == 2.2
    assert get_gamma("Apple RGB") == 1.8
    assert get_gamma("prophoto") == 1.8
    for name in ("srgb", "ecirgb"):
        with pytest.raises(MissingGammaError):
            get_gamma(name)
