import json

import pytest

from tinkertone import config
from tinkertone.audio.errors import InvalidParameter
from tinkertone.audio.sound import Sound, WaveType
from tinkertone.utils.config_manager import ConfigManager


def _write(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    cfg = ConfigManager(str(tmp_path / "nope.json"))
    assert cfg.settings == {}
    assert cfg.get_headroom() == config.HEADROOM
    assert cfg.get_global_volume() == config.GLOBAL_VOLUME
    assert cfg.get_sound("primary") is None
    assert cfg.get_piano_keys() == []


def test_broken_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert ConfigManager(str(path)).settings == {}


def test_get_sound(tmp_path):
    cfg = ConfigManager(_write(tmp_path, {
        "audio": {"sample_rate": 22050},
        "sounds": {"lead": {"frequency": 330, "wave_type": "square", "sample_duration_secs": 0.5}},
    }))
    sound = cfg.get_sound("lead")
    assert sound.frequency == 330.0
    assert sound.sample_rate == 22050
    assert sound.sample_duration_secs == 0.5
    assert sound.wave_type == WaveType.SQUARE


def test_save_settings_round_trip(tmp_path):
    path = _write(tmp_path, {"audio": {"global_volume": 0.5}})
    cfg = ConfigManager(path)
    cfg.settings["audio"]["global_volume"] = 0.75
    cfg.save_settings()
    assert ConfigManager(path).get_global_volume() == 0.75


def test_shipped_settings_load():
    cfg = ConfigManager()
    assert cfg.get_headroom() == 0.25
    assert len(cfg.get_piano_notes()) == 7
    assert cfg.get_sound("primary").frequency == 440.0


def test_bad_wave_type_is_a_tone_error(tmp_path):
    cfg = ConfigManager(_write(tmp_path, {
        "sounds": {"lead": {"frequency": 330, "wave_type": "sawtooth"}},
    }))
    with pytest.raises(InvalidParameter):
        cfg.get_sound("lead")


def test_wave_type_by_number():
    assert Sound.from_dict({"frequency": 1, "wave_type": 2}).wave_type == WaveType.PERLIN_NOISE
    with pytest.raises(InvalidParameter):
        Sound.from_dict({"frequency": 1, "wave_type": 9})
