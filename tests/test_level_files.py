import json
import random

import pytest

from ujump.infra.exceptions import LevelPackDecodeError
from ujump.infra.level_codec import decode_level_pack, decode_text_pack
from ujump.infra.level_files import load_level_pack, load_level_plans_from_path


def pack(**overrides):
    obj = {
        "format": "ujump.levels",
        "version": 1,
        "levels": [
            {"name": "first", "rows": ["..", "@o", ".."]},
            {"name": "second", "rows": ["@.o", "###"]},
        ],
    }
    obj.update(overrides)
    return obj


def test_decode_json_pack():
    plans = decode_level_pack(pack())

    assert [p.name for p in plans] == ["first", "second"]
    assert plans[0].plan == "..\n@o\n.."


def test_missing_name_gets_a_default():
    plans = decode_level_pack(pack(levels=[{"rows": ["@o"]}]))
    assert plans[0].name == "level-1"


@pytest.mark.parametrize(
    "obj",
    [
        pack(format="pydash.level"),
        pack(version=7),
        pack(levels=[]),
        pack(levels="@o"),
        pack(levels=[["@o"]]),
        pack(levels=[{"name": "", "rows": ["@o"]}]),
        pack(levels=[{"rows": []}]),
        pack(levels=[{"rows": ["@o", 3]}]),
        ["not", "a", "dict"],
    ],
)
def test_malformed_json_packs_are_rejected(obj):
    with pytest.raises(LevelPackDecodeError):
        decode_level_pack(obj)


def test_text_pack_splits_on_blank_lines():
    text = "\n..\n@o\n..\n\n\n@.o\n###\n"

    plans = decode_text_pack(text)

    assert [p.name for p in plans] == ["level-1", "level-2"]
    assert plans[1].plan == "@.o\n###"


def test_empty_text_pack_is_rejected():
    with pytest.raises(LevelPackDecodeError):
        decode_text_pack("\n   \n")


def test_load_json_pack_from_disk(tmp_path):
    path = tmp_path / "pack.json"
    path.write_text(json.dumps(pack()), encoding="utf-8")

    levels = load_level_pack(path, random.Random(0))

    assert len(levels) == 2
    assert (levels[1].width, levels[1].height) == (3, 2)


def test_load_text_pack_from_disk(tmp_path):
    path = tmp_path / "pack.txt"
    path.write_text("..\n@o\n..\n\n@.o\n###\n", encoding="utf-8")

    levels = load_level_pack(path, random.Random(0))

    assert [lvl.height for lvl in levels] == [3, 2]


def test_broken_level_fails_the_whole_pack(tmp_path):
    path = tmp_path / "pack.txt"
    path.write_text("@o\n\n@.\n...\n", encoding="utf-8")

    with pytest.raises(LevelPackDecodeError, match="level-2"):
        load_level_pack(path)


def test_missing_file_is_a_decode_error(tmp_path):
    with pytest.raises(LevelPackDecodeError):
        load_level_plans_from_path(tmp_path / "nope.json")


def test_invalid_json_is_a_decode_error(tmp_path):
    path = tmp_path / "pack.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LevelPackDecodeError):
        load_level_plans_from_path(path)


def test_loaded_levels_are_playable(tmp_path):
    from ujump.app.session import GameSession
    from ujump.domain.input_state import InputState

    path = tmp_path / "pack.json"
    path.write_text(json.dumps(pack(levels=[{"name": "one", "rows": ["..", "@o", ".."]}])), encoding="utf-8")
    session = GameSession(load_level_pack(path), grace_period=0.0)

    session.frame(0.1, InputState(right=True))

    assert session.result is True
    assert session.current_run is None
