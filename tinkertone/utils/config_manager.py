import json
import logging
import os

from tinkertone import config
from tinkertone.audio.sound import Sound

logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "../config/settings.json")


class ConfigManager:
    def __init__(self, settings_path=None):
        self.settings_path = settings_path or SETTINGS_PATH
        self.settings = self.load_json(self.settings_path)

    def load_json(self, path):
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error loading %s: %s", path, e)
            return {}

    def save_settings(self):
        try:
            with open(self.settings_path, 'w') as f:
                json.dump(self.settings, f, indent=4)
            logger.info("Settings saved.")
        except OSError as e:
            logger.error("Error saving settings: %s", e)

    def get_audio_config(self):
        return self.settings.get("audio", {})

    def get_headroom(self):
        return self.get_audio_config().get("headroom", config.HEADROOM)

    def get_global_volume(self):
        return self.get_audio_config().get("global_volume", config.GLOBAL_VOLUME)

    def get_piano_notes(self):
        return self.settings.get("piano_notes", [])

    def get_piano_keys(self):
        return self.settings.get("piano_keys", [])

    def get_sound(self, name):
        """Sound descriptor for a named entry under "sounds", or None."""
        data = self.settings.get("sounds", {}).get(name)
        if data is None:
            return None
        data = dict(data)
        data.setdefault("sample_rate", self.get_audio_config().get("sample_rate", config.SAMPLE_RATE))
        return Sound.from_dict(data)
