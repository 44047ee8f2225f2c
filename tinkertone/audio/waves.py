import logging

import numpy as np

from tinkertone.audio.sound import WaveType

logger = logging.getLogger(__name__)


def sine_value(frequency, sample_index, sample_rate):
    """
    Amplitude of a sine wave at sample_index.
    Works on a single index or a numpy array of indices.
    sample_rate must be > 0.
    """
    return np.sin(2.0 * np.pi * frequency * (np.asarray(sample_index, dtype=np.float64) / sample_rate))


def square_value(frequency, sample_index, sample_rate):
    return np.sign(sine_value(frequency, sample_index, sample_rate))


class ToneWaves:
    """Waveform lookup used by the synthesis engine."""

    def __init__(self):
        self._warned = set()

    def value(self, wave_type, frequency, sample_index, sample_rate):
        if wave_type != WaveType.SINE:
            # Other shapes are declared but only sine is synthesised;
            # square comes from ToneModifiers.convert_to_square.
            if wave_type not in self._warned:
                logger.warning("Wave type %s is not synthesised, using sine", WaveType(wave_type).name)
                self._warned.add(wave_type)
        return sine_value(frequency, sample_index, sample_rate)

    def sin_value(self, frequency, sample_index, sample_rate):
        return sine_value(frequency, sample_index, sample_rate)
