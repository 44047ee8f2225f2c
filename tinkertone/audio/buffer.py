import numpy as np

from tinkertone.audio.errors import InvalidParameter


class AudioBuffer:
    """
    Fixed-capacity PCM buffer standing in for the host's playable clip.
    Data is stored interleaved as float32, length frames per channel.
    The capacity never changes: a sound whose length changes needs a new buffer.
    """

    def __init__(self, name, length, channels=1, sample_rate=44100, streaming=False):
        if length <= 0:
            raise InvalidParameter(f"Buffer length must be positive, got {length}")
        if channels <= 0:
            raise InvalidParameter(f"Channel count must be positive, got {channels}")
        if sample_rate <= 0:
            raise InvalidParameter(f"Sample rate must be positive, got {sample_rate}")

        self.name = name
        self.length = int(length)
        self.channels = int(channels)
        self.sample_rate = int(sample_rate)
        self.streaming = streaming
        self._data = np.zeros(self.length * self.channels, dtype=np.float32)

    @classmethod
    def create(cls, name, length, channels, sample_rate, streaming):
        return cls(name, length, channels, sample_rate, streaming)

    @property
    def samples(self):
        """Frames per channel."""
        return self.length

    @property
    def duration(self):
        return self.length / self.sample_rate

    def set_data(self, samples, offset=0):
        """
        Copy samples into the buffer starting at offset.
        Anything past the end of the buffer is dropped. Returns the count written.
        """
        if offset < 0:
            raise InvalidParameter(f"Offset must not be negative, got {offset}")
        data = np.asarray(samples, dtype=np.float32).ravel()
        count = max(0, min(len(data), len(self._data) - offset))
        self._data[offset:offset + count] = data[:count]
        return count

    def get_data(self, offset=0):
        if offset < 0:
            raise InvalidParameter(f"Offset must not be negative, got {offset}")
        return self._data[offset:].copy()

    def read(self, into, offset=0):
        """Fill a caller supplied array from offset. Returns the count read."""
        data = self.get_data(offset)
        count = min(len(into), len(data))
        into[:count] = data[:count]
        return count

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return (f"AudioBuffer(name={self.name!r}, length={self.length}, "
                f"channels={self.channels}, sample_rate={self.sample_rate})")
