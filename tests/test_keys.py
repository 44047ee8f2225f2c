import pytest

from tinkertone.audio.errors import UnknownKey
from tinkertone.audio.keys import PianoKeyTable, parse_keys
from tinkertone.audio.sound import PianoKey


def test_lookup_by_member_and_name():
    table = PianoKeyTable({"C4": 262, PianoKey.A4: 440})
    assert table.frequency(PianoKey.C4) == 262
    assert table.frequency("a4") == 440
    assert len(table) == 2


def test_missing_key_raises():
    table = PianoKeyTable({"C4": 262})
    with pytest.raises(UnknownKey):
        table.frequency(PianoKey.D4)
    assert PianoKey.D4 not in table
    assert "C4" in table
    assert "H9" not in table


def test_unknown_key_is_a_key_error():
    with pytest.raises(KeyError):
        PianoKeyTable().frequency("C4")


def test_from_config_list_form():
    table = PianoKeyTable.from_config([
        {"key": "C4", "frequency": 262},
        {"key": "E4", "frequency": 330},
    ])
    assert table.frequency("E4") == 330


def test_from_config_dict_form():
    table = PianoKeyTable.from_config({"G4": 392})
    assert table.frequency(PianoKey.G4) == 392


def test_parse_keys():
    assert parse_keys(["C4", "g4"]) == [PianoKey.C4, PianoKey.G4]
    with pytest.raises(UnknownKey):
        parse_keys(["C4", "X1"])
