import logging

from tinkertone.audio.generator import ToneGenerator
from tinkertone.audio.keys import PianoKeyTable, parse_keys
from tinkertone.audio.modifiers import ToneModifiers
from tinkertone.audio.sound import Sound
from tinkertone.audio.waves import ToneWaves
from tinkertone.utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class ToneScene:
    """
    Wires the tone core together and exposes the demo actions.
    player is anything with play_one_shot(sound), e.g. AudioEngine; None
    just builds the sounds.
    """

    def __init__(self, cfg=None, player=None):
        self.cfg = cfg or ConfigManager()
        self.player = player

        self.waves = ToneWaves()
        self.key_table = PianoKeyTable.from_config(self.cfg.get_piano_notes())
        self.generator = ToneGenerator(self.waves, self.key_table, headroom=self.cfg.get_headroom())
        self.modifiers = ToneModifiers(self.generator)

        self.global_volume = self.cfg.get_global_volume()
        self.primary_sound = self.cfg.get_sound("primary") or Sound(frequency=440.0)
        self.secondary_sound = self.cfg.get_sound("secondary") or Sound(frequency=660.0)
        self.piano_sound = self.cfg.get_sound("piano") or Sound(frequency=262.0, sample_duration_secs=2.0)
        self.piano_keys = parse_keys(self.cfg.get_piano_keys())

    def _output(self, sound, label):
        sound = self.modifiers.change_sound_volume(sound, self.global_volume)
        logger.info("%s: %d samples @ %dHz", label, sound.sample_length, sound.sample_rate)
        if self.player is not None:
            self.player.play_one_shot(sound)
        return sound

    def play_primary(self):
        self.primary_sound = self.generator.create_tone(self.primary_sound)
        return self._output(self.primary_sound, "primary")

    def play_secondary(self):
        self.secondary_sound = self.generator.create_tone(self.secondary_sound)
        return self._output(self.secondary_sound, "secondary")

    def combine(self):
        self.primary_sound = self.generator.create_tone(self.primary_sound)
        self.secondary_sound = self.generator.create_tone(self.secondary_sound)
        combined = self.modifiers.mix_additive([self.primary_sound, self.secondary_sound])
        return self._output(combined, "combined")

    def insert(self):
        """Splice the secondary sound onto the end of the primary one."""
        if not self.primary_sound.has_samples:
            self.primary_sound = self.generator.create_tone(self.primary_sound)
        if not self.secondary_sound.has_samples:
            self.secondary_sound = self.generator.create_tone(self.secondary_sound)
        inserted = self.modifiers.splice(self.primary_sound, self.secondary_sound,
                                         self.primary_sound.sample_length)
        return self._output(inserted, "inserted")

    def play_keyboard(self):
        if not self.piano_keys:
            logger.info("No piano keys configured")
            return None
        self.piano_sound = self.generator.generate_from_keys(self.piano_sound, self.piano_keys)
        return self._output(self.piano_sound, "piano")

    def play_square(self):
        square = self.modifiers.convert_to_square(self.generator.create_tone(self.primary_sound))
        return self._output(square, "square")
