import math

import pytest

from chromaticity.errors import InvalidHueError
from chromaticity.utils import clamp, clamp01, fmod, round_half_up, scale_value_range, value_or_default, wrap_hue


def test_scale_value_range():
    assert scale_value_range(5, 0, 10, 0, 100) == 50
    assert scale_value_range(0.5, 0, 1, 16, 235) == 125.5
    assert scale_value_range(0.5, 0, 1, 16, 235, round_result=True) == 126
    # no clamping
    assert scale_value_range(20, 0, 10, 0, 100) == 200


def test_scale_value_range_zero_span():
    assert math.isinf(scale_value_range(1, 5, 5, 0, 1))
    assert math.isnan(scale_value_range(5, 5, 5, 0, 1))
    assert math.isinf(scale_value_range(5, 1, 1, 0, 10, round_result=True))
    assert math.isnan(scale_value_range(5, 5, 5, 0, 1, round_result=True))


def test_fmod_takes_sign_of_divisor():
    assert fmod(-1, 6) == 5
    assert fmod(7, 6) == 1
    assert fmod(6, 6) == 0


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1
    assert round_half_up(1.49) == 1
    assert round_half_up(math.inf) == math.inf
    assert math.isnan(round_half_up(math.nan))


def test_wrap_hue():
    assert wrap_hue(360) == 0
    assert wrap_hue(725) == 5
    assert wrap_hue(-30) == 330
    assert wrap_hue(-720) == 0


def test_wrap_hue_far_outside_the_circle():
    assert wrap_hue(360e6 + 120) == 120
    assert 0 <= wrap_hue(1e20) < 360
    assert 0 <= wrap_hue(-1e20) < 360
    assert wrap_hue(-1e-20) == 0


def test_wrap_hue_rejects_non_finite():
    for hue in (math.inf, -math.inf, math.nan):
        with pytest.raises(InvalidHueError):
            wrap_hue(hue)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp01(1.5) == 1
    assert clamp01(-0.5) == 0


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
