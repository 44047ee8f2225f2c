import logging
import numbers

import numpy as np

from tinkertone.audio.errors import IndexOutOfRange, InvalidParameter
from tinkertone.audio.generator import ceil_samples
from tinkertone.audio.sound import Sound, WaveType

logger = logging.getLogger(__name__)


def _scaled(samples, amplitude):
    out = np.array(samples, dtype=np.float32)
    # Last sample is left untouched, as the host clips always were
    out[:-1] *= amplitude
    return out


def _fit(samples, length):
    """Zero-pad or cut samples to exactly length."""
    if len(samples) == length:
        return samples
    out = np.zeros(length, dtype=np.float32)
    count = min(length, len(samples))
    out[:count] = samples[:count]
    return out


def _require_samples(sound, action):
    if not sound.has_samples:
        raise InvalidParameter(f"Sound has no samples to {action}, synthesise it first")


class ToneModifiers:
    """
    Transforms on already synthesised sounds: volume, mixing, pitch, splicing.
    Results are new Sounds with their own audio buffer; inputs are not touched.
    """

    def __init__(self, generator):
        self.generator = generator

    def _derive(self, sound, samples, name, **changes):
        derived = sound.copy()
        derived.samples = np.asarray(samples, dtype=np.float32)
        derived.sample_length = len(derived.samples)
        for attr, value in changes.items():
            setattr(derived, attr, value)
        if sound.audio_buffer is None:
            return derived
        return self.generator.attach_buffer(derived, name or sound.audio_buffer.name)

    # --- Volume ---

    def change_volume(self, samples, amplitude):
        """
        Scale every sample but the last by amplitude. Values are not clamped,
        amplitude > 1 can push them past [-1, 1].
        Returns a new array.
        """
        return _scaled(samples, amplitude)

    def change_buffer_volume(self, audio_buffer, amplitude):
        """change_volume on a buffer's raw data, written back in place."""
        samples = np.zeros(audio_buffer.samples * audio_buffer.channels, dtype=np.float32)
        audio_buffer.read(samples, 0)
        audio_buffer.set_data(_scaled(samples, amplitude), 0)
        return audio_buffer

    def change_sound_volume(self, sound, amplitude):
        _require_samples(sound, "scale")
        return self._derive(sound, _scaled(sound.samples, amplitude), None)

    # --- Mixing ---

    def mix_additive(self, sounds):
        """
        Sum sounds sample by sample into one sound.

        Shorter inputs are zero padded to the longest one, so nothing is cut.
        Frequencies add up, the first sound's rate is kept and the longest
        duration wins. Samples are summed as they are, no resynthesis.
        """
        if not sounds:
            raise InvalidParameter("Nothing to mix")
        for sound in sounds:
            _require_samples(sound, "mix")

        length = max(len(sound.samples) for sound in sounds)
        mixed = np.zeros(length, dtype=np.float32)
        for sound in sounds:
            mixed[:len(sound.samples)] += sound.samples

        combined = Sound(
            frequency=sum(sound.frequency for sound in sounds),
            sample_rate=sounds[0].sample_rate,
            sample_duration_secs=max(sound.sample_duration_secs for sound in sounds),
            wave_type=sounds[0].wave_type,
        )
        combined.samples = mixed
        logger.debug("Mixed %d sounds into %d samples", len(sounds), length)
        return self.generator.attach_buffer(combined, "combined_tone")

    # --- Pitch ---

    def stretch_pitch(self, sound, repeat_factor):
        """
        Repeat every sample repeat_factor times. Only lengthens the sound;
        there is no shortening counterpart.
        """
        if isinstance(repeat_factor, bool) or not isinstance(repeat_factor, numbers.Integral):
            raise InvalidParameter(f"Repeat factor must be an integer, got {repeat_factor!r}")
        if repeat_factor < 1:
            raise InvalidParameter(f"Repeat factor must be at least 1, got {repeat_factor}")
        _require_samples(sound, "stretch")

        samples = np.repeat(np.asarray(sound.samples, dtype=np.float32), int(repeat_factor))
        return self._derive(sound, samples, None,
                            sample_duration_secs=len(samples) / sound.sample_rate)

    # --- Splicing ---

    def splice(self, original, to_insert, insert_position):
        """
        Insert to_insert's samples into original at insert_position.
        The inserted run stays contiguous and in order.
        """
        _require_samples(original, "splice")
        _require_samples(to_insert, "splice")
        if isinstance(insert_position, bool) or not isinstance(insert_position, numbers.Integral):
            raise InvalidParameter(f"Insert position must be an integer, got {insert_position!r}")
        if not 0 <= insert_position <= len(original.samples):
            raise IndexOutOfRange(
                f"Insert position {insert_position} outside 0..{len(original.samples)}")

        length = ceil_samples(original.sample_duration_secs * original.sample_rate
                              + to_insert.sample_duration_secs * to_insert.sample_rate)
        samples = np.insert(np.asarray(original.samples, dtype=np.float32), insert_position,
                            np.asarray(to_insert.samples, dtype=np.float32))
        if len(samples) != length:
            logger.warning("Spliced %d samples into a %d sample sound, fitting to length",
                           len(samples), length)
            samples = _fit(samples, length)

        spliced = Sound(
            frequency=original.frequency + to_insert.frequency,
            sample_rate=original.sample_rate,
            sample_duration_secs=original.sample_duration_secs + to_insert.sample_duration_secs,
            wave_type=original.wave_type,
        )
        spliced.samples = samples
        return self.generator.attach_buffer(spliced, "inserted_tone")

    # --- Shape ---

    def convert_to_square(self, sound):
        """Flatten the wave into a square of the same peak height."""
        _require_samples(sound, "convert")
        samples = np.asarray(sound.samples, dtype=np.float32)
        peak = float(np.max(np.abs(samples))) if len(samples) else 0.0
        return self._derive(sound, np.sign(samples) * peak, None, wave_type=WaveType.SQUARE)
