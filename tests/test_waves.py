import math

import numpy as np
import pytest

from tinkertone.audio.sound import WaveType
from tinkertone.audio.waves import ToneWaves, sine_value, square_value


def test_sine_starts_at_zero():
    for frequency, rate in [(440.0, 44100), (1.0, 8000), (261.6, 22050)]:
        assert sine_value(frequency, 0, rate) == 0.0


def test_sine_matches_formula():
    expected = math.sin(2 * math.pi * 440 * 3 / 8000)
    assert sine_value(440, 3, 8000) == pytest.approx(expected)


def test_sine_is_periodic():
    # 8000 / 400 = 20 samples per cycle
    for i in range(0, 40, 3):
        assert sine_value(400, i, 8000) == pytest.approx(sine_value(400, i + 20, 8000), abs=1e-9)


def test_sine_accepts_index_arrays():
    indices = np.arange(5)
    values = sine_value(1000, indices, 8000)
    assert values.shape == (5,)
    assert values[2] == pytest.approx(1.0)


def test_square_is_sign_of_sine():
    values = square_value(1000, np.array([0, 1, 2, 3, 5, 6, 7]), 8000)
    assert list(values) == [0.0, 1.0, 1.0, 1.0, -1.0, -1.0, -1.0]


def test_unimplemented_wave_types_fall_back_to_sine():
    waves = ToneWaves()
    sine = waves.value(WaveType.SINE, 300, np.arange(10), 8000)
    for wave_type in (WaveType.SQUARE, WaveType.PERLIN_NOISE, WaveType.DYNAMIC):
        assert np.allclose(waves.value(wave_type, 300, np.arange(10), 8000), sine)
