class ToneError(Exception):
    """Base class for every failure raised by the tone core."""


class InvalidDuration(ToneError, ValueError):
    """Sound duration is zero or negative."""


class NoBufferPresent(ToneError, RuntimeError):
    """A buffer rewrite was requested on a sound that has no audio buffer."""


class UnknownKey(ToneError, KeyError):
    """Piano key missing from the key table."""

    def __str__(self):
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


class IndexOutOfRange(ToneError, IndexError):
    """Splice position outside the target sample range."""


class InvalidParameter(ToneError, ValueError):
    """Argument outside the range an operation accepts."""
