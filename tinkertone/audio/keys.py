from tinkertone.audio.errors import UnknownKey
from tinkertone.audio.sound import PianoKey


def to_piano_key(key):
    if isinstance(key, PianoKey):
        return key
    try:
        return PianoKey[str(key).upper()]
    except KeyError:
        raise UnknownKey(f"No piano key named {key!r}") from None


def parse_keys(names):
    return [to_piano_key(name) for name in names]


class PianoKeyTable:
    """Read-only note -> frequency (Hz) table."""

    def __init__(self, mapping=None):
        self._notes = {}
        for key, frequency in (mapping or {}).items():
            self._notes[to_piano_key(key)] = int(frequency)

    @classmethod
    def from_config(cls, entries):
        """
        Accepts {"C4": 262, ...} or the list form
        [{"key": "C4", "frequency": 262}, ...].
        """
        if isinstance(entries, dict):
            return cls(entries)
        mapping = {}
        for entry in entries or []:
            mapping[entry["key"]] = entry["frequency"]
        return cls(mapping)

    def frequency(self, key):
        try:
            return self._notes[to_piano_key(key)]
        except KeyError:
            raise UnknownKey(f"No key of type {key} exists in the table") from None

    def __contains__(self, key):
        try:
            return to_piano_key(key) in self._notes
        except UnknownKey:
            return False

    def __len__(self):
        return len(self._notes)

    def items(self):
        return self._notes.items()
