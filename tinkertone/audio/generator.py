import logging
import math

import numpy as np

from tinkertone import config
from tinkertone.audio.buffer import AudioBuffer
from tinkertone.audio.errors import InvalidDuration, InvalidParameter, NoBufferPresent

logger = logging.getLogger(__name__)


def ceil_samples(value):
    # Ceiling so trailing partial samples are never lost. Float noise is
    # snapped first: 44100 * 1.1 evaluates to 48510.00000000001.
    return int(math.ceil(round(value, 6)))


def sample_length_for(sample_rate, duration_secs):
    return ceil_samples(sample_rate * duration_secs)


class ToneGenerator:
    """
    Builds sample buffers and their audio buffers from Sound descriptors.

    Every method returns a new Sound; the descriptor passed in is left as is.
    """

    def __init__(self, waves, key_table, headroom=config.HEADROOM):
        self.waves = waves
        self.key_table = key_table
        self.headroom = headroom

    def create_tone(self, sound, name="new_tone"):
        """
        Synthesise sound.sample_duration_secs of the sound's waveform.
        Samples are scaled by the headroom factor so later mixes don't clip.
        """
        if sound.sample_duration_secs <= 0:
            raise InvalidDuration("Audio clip must be longer than 0 seconds")

        tone = sound.copy()
        tone.sample_length = sample_length_for(tone.sample_rate, tone.sample_duration_secs)
        indices = np.arange(tone.sample_length)
        wave = self.waves.value(tone.wave_type, tone.frequency, indices, tone.sample_rate)
        tone.samples = (wave * self.headroom).astype(np.float32)

        tone.audio_buffer = AudioBuffer.create(name, tone.sample_length, 1, tone.sample_rate, False)
        tone.audio_buffer.set_data(tone.samples, 0)
        logger.debug("Created tone %.2fHz, %d samples @ %dHz",
                     tone.frequency, tone.sample_length, tone.sample_rate)
        return tone

    def create_tone_buffer(self, sound):
        return self.create_tone(sound).audio_buffer

    def generate_from_keys(self, sound, keys):
        """
        Play keys one after another inside a single buffer.

        The canvas is a tone of the sound's own length; it is cut into
        ceil(length / len(keys)) sized segments and each segment is rewritten
        with its key's frequency, phase restarting at 0. The last segment may
        be shorter.
        """
        if not keys:
            raise InvalidParameter("At least one piano key is needed")
        frequencies = [self.key_table.frequency(key) for key in keys]

        tone = self.create_tone(sound, name="piano_tone")
        length = tone.sample_length
        segment = int(math.ceil(length / len(frequencies)))

        for i, frequency in enumerate(frequencies):
            start = i * segment
            if start >= length:
                break
            end = min(start + segment, length)
            local = np.arange(end - start)
            wave = self.waves.sin_value(frequency, local, tone.sample_rate)
            tone.samples[start:end] = wave * self.headroom

        return self.refactor_samples_in_clip(tone)

    def refactor_samples_in_clip(self, sound):
        """Rewrite the sound's existing audio buffer from its samples."""
        if sound.audio_buffer is None:
            raise NoBufferPresent("No audio clip is present to alter the samples of")
        written = sound.audio_buffer.set_data(sound.samples, 0)
        if written != len(sound.samples):
            logger.warning("Buffer %r holds %d samples, %d were dropped",
                           sound.audio_buffer.name, written, len(sound.samples) - written)
        return sound

    def resync_buffer(self, sound, name=None):
        """
        Bring the audio buffer in line with the samples. Buffers can't grow,
        so a length change gets a fresh one.
        """
        sound.sample_length = len(sound.samples)
        buffer = sound.audio_buffer
        if buffer is not None and buffer.length == sound.sample_length and buffer.sample_rate == sound.sample_rate:
            return self.refactor_samples_in_clip(sound)

        if name is None:
            name = buffer.name if buffer is not None else "new_tone"
        sound.audio_buffer = AudioBuffer.create(name, sound.sample_length, 1, sound.sample_rate, False)
        return self.refactor_samples_in_clip(sound)

    def attach_buffer(self, sound, name="new_tone"):
        """Give the sound a fresh buffer of its current length and fill it."""
        sound.sample_length = len(sound.samples)
        sound.audio_buffer = AudioBuffer.create(name, sound.sample_length, 1, sound.sample_rate, False)
        return self.refactor_samples_in_clip(sound)
