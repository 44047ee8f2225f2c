from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import numpy as np

from tinkertone.audio.buffer import AudioBuffer
from tinkertone.audio.errors import InvalidParameter


class WaveType(Enum):
    SINE = 0
    SQUARE = 1
    PERLIN_NOISE = 2
    DYNAMIC = 3


class PianoKey(Enum):
    C4 = 0
    D4 = 1
    E4 = 2
    F4 = 3
    G4 = 4
    A4 = 5
    B4 = 6


@dataclass(eq=False)
class Sound:
    """
    Sound descriptor.

    frequency, wave_type, sample_rate and sample_duration_secs are inputs.
    samples, sample_length and audio_buffer are filled by ToneGenerator and
    ToneModifiers; sample_length is only meaningful right after one of them ran.
    """
    frequency: float
    sample_rate: int = 44100
    sample_duration_secs: float = 1.0
    wave_type: WaveType = WaveType.SINE
    samples: Optional[np.ndarray] = field(default=None, repr=False)
    sample_length: int = 0
    audio_buffer: Optional[AudioBuffer] = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data):
        wave_type = data.get("wave_type", WaveType.SINE)
        try:
            if isinstance(wave_type, str):
                wave_type = WaveType[wave_type.upper()]
            elif isinstance(wave_type, int):
                wave_type = WaveType(wave_type)
        except (KeyError, ValueError):
            raise InvalidParameter(f"No wave type {wave_type!r}") from None
        return cls(
            frequency=float(data.get("frequency", 0.0)),
            sample_rate=int(data.get("sample_rate", 44100)),
            sample_duration_secs=float(data.get("sample_duration_secs", 1.0)),
            wave_type=wave_type,
        )

    def copy(self):
        """Independent copy of the descriptor. The buffer is not shared."""
        samples = None if self.samples is None else np.array(self.samples, dtype=np.float32)
        return replace(self, samples=samples, audio_buffer=None)

    @property
    def has_samples(self):
        return self.samples is not None
