import json
import logging
from pathlib import Path

import pytest

from core.data_models import Scene
from core.presets_loader import list_scenes, load_scene, scene_from_dict
from core.update import initial_state


def _write(path: Path, payload) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_bundled_classic_scene_matches_builtin_defaults() -> None:
    scene = load_scene("classic.json")
    assert scene.name == "Classic"
    assert initial_state(scene) == initial_state()


def test_bundled_scenes_are_listed() -> None:
    files = [fn for fn, _ in list_scenes()]
    assert "classic.json" in files
    assert "crowded.json" in files


def test_list_scenes_uses_name_or_file_stem(tmp_path: Path) -> None:
    _write(tmp_path / "a.json", {"name": "Alpha"})
    _write(tmp_path / "b.json", {})
    (tmp_path / "notes.txt").write_text("ignored")
    assert list_scenes(str(tmp_path)) == [("a.json", "Alpha"), ("b.json", "b")]


def test_load_scene_reads_all_fields(tmp_path: Path) -> None:
    _write(tmp_path / "s.json", {
        "name": "Tight",
        "player_start": [50, 50],
        "asteroids": [[10, 10], [90, 90]],
        "time_scale": 0.5,
        "collision_uses_wrapped_position": True,
    })
    scene = load_scene("s.json", str(tmp_path))
    assert scene == Scene(
        name="Tight",
        player_start=(50.0, 50.0),
        asteroids=((10.0, 10.0), (90.0, 90.0)),
        time_scale=0.5,
        collision_uses_wrapped_position=True,
    )


def test_missing_file_falls_back_to_builtin_scene(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="core.presets_loader"):
        scene = load_scene("nope.json", str(tmp_path))
    assert scene == Scene()
    assert "built-in scene" in caplog.text


def test_invalid_json_falls_back_to_builtin_scene(tmp_path: Path) -> None:
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    assert load_scene("bad.json", str(tmp_path)) == Scene()


def test_malformed_entries_are_skipped_or_defaulted(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="core.presets_loader"):
        scene = scene_from_dict({
            "player_start": "middle",
            "asteroids": [[1, 2], [3], "x", [4, 5]],
            "time_scale": "fast",
            "collision_uses_wrapped_position": "false",
        })
    assert scene.player_start == (10.0, 10.0)
    assert scene.asteroids == ((1.0, 2.0), (4.0, 5.0))
    assert scene.time_scale == 1.0
    assert scene.collision_uses_wrapped_position is False
    assert "Skipping invalid asteroid" in caplog.text
    assert "Invalid collision_uses_wrapped_position" in caplog.text


def test_non_finite_numbers_are_rejected(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "inf.json").write_text(
        '{"player_start": [NaN, 10], "asteroids": [[Infinity, 30], [20, 50]], "time_scale": -Infinity}',
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="core.presets_loader"):
        scene = load_scene("inf.json", str(tmp_path))
    assert scene.player_start == (10.0, 10.0)
    assert scene.asteroids == ((20.0, 50.0),)
    assert scene.time_scale == 1.0
    assert "Invalid player_start" in caplog.text
    assert "Skipping invalid asteroid" in caplog.text


def test_text_fields_are_coerced_to_strings() -> None:
    scene = scene_from_dict({"name": 5, "description": ["a"]}, "fallback")
    assert scene.name == "5"
    assert scene.description == "['a']"
    assert scene_from_dict({"name": ""}, "fallback").name == "fallback"
