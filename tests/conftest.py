import pytest

from tinkertone.audio.generator import ToneGenerator
from tinkertone.audio.keys import PianoKeyTable
from tinkertone.audio.modifiers import ToneModifiers
from tinkertone.audio.sound import Sound
from tinkertone.audio.waves import ToneWaves

PIANO_NOTES = {"C4": 262, "D4": 294, "E4": 330, "F4": 349, "G4": 392, "A4": 440}


@pytest.fixture
def generator():
    return ToneGenerator(ToneWaves(), PianoKeyTable(PIANO_NOTES), headroom=0.25)


@pytest.fixture
def modifiers(generator):
    return ToneModifiers(generator)


@pytest.fixture
def tone_80(generator):
    # 440Hz, 80 samples
    return generator.create_tone(Sound(frequency=440.0, sample_rate=8000, sample_duration_secs=0.01))


@pytest.fixture
def tone_40(generator):
    # 1000Hz, 40 samples
    return generator.create_tone(Sound(frequency=1000.0, sample_rate=8000, sample_duration_secs=0.005))
