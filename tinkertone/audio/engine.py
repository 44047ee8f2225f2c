import logging
import threading

import numpy as np
import sounddevice as sd

from tinkertone import config

logger = logging.getLogger(__name__)


class _Voice:
    """A buffer being played once from start to end."""
    def __init__(self, data):
        self.data = data
        self.position = 0

    @property
    def done(self):
        return self.position >= len(self.data)

    def next(self, frames):
        chunk = self.data[self.position:self.position + frames]
        self.position += len(chunk)
        return chunk


class AudioEngine:
    """
    Mono output stream that plays finished audio buffers as one-shots.
    Several one-shots overlap by summing.
    """

    def __init__(self, sample_rate=config.SAMPLE_RATE, master_volume=1.0, blocksize=512):
        self.sr = sample_rate
        self.blocksize = blocksize
        self.master_vol = master_volume

        self.stream = None
        self.voices = []

        # Guards voices between the callback thread and play()
        self.lock = threading.Lock()
        self.finished = threading.Event()
        self.finished.set()

    def callback(self, outdata, frames, time, status):
        """Audio processing callback (runs in high priority thread)"""
        if status:
            logger.warning("Stream status: %s", status)

        outdata.fill(0)
        if not self.lock.acquire(blocking=False):
            return
        try:
            mixed = np.zeros(frames, dtype=np.float32)
            for voice in self.voices:
                chunk = voice.next(frames)
                mixed[:len(chunk)] += chunk
            self.voices = [v for v in self.voices if not v.done]

            mixed *= self.master_vol
            np.clip(mixed, -1.0, 1.0, out=mixed)
            outdata[:, 0] = mixed

            if not self.voices:
                self.finished.set()
        finally:
            self.lock.release()

    def start(self):
        logger.info("Starting engine @ %dHz", self.sr)
        self.stream = sd.OutputStream(
            samplerate=self.sr,
            blocksize=self.blocksize,
            channels=1,
            dtype='float32',
            callback=self.callback
        )
        self.stream.start()

    def stop(self):
        if self.stream:
            self.stream.stop()
            self.stream.close()
            self.stream = None

    def play_one_shot(self, audio_buffer, blocking=False):
        """Queue a buffer (or a Sound holding one) for playback."""
        audio_buffer = getattr(audio_buffer, "audio_buffer", audio_buffer)
        if audio_buffer is None:
            logger.warning("Nothing to play, sound has no audio buffer")
            return
        if audio_buffer.sample_rate != self.sr:
            logger.warning("Buffer %r is %dHz, engine runs at %dHz",
                           audio_buffer.name, audio_buffer.sample_rate, self.sr)
        if self.stream is None:
            self.start()

        with self.lock:
            self.voices.append(_Voice(audio_buffer.get_data()))
            self.finished.clear()

        if blocking:
            self.finished.wait()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()
