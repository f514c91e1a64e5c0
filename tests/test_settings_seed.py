import json
from pathlib import Path

from clients.settings_seed import load_settings_seed, seed_section


def test_missing_file_yields_empty_seed(tmp_path: Path) -> None:
    assert load_settings_seed(tmp_path / "nope.json") == {}


def test_invalid_json_yields_empty_seed(tmp_path: Path, caplog) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("WARNING", logger="liftlog"):
        assert load_settings_seed(path) == {}
    assert "Could not read settings seed" in caplog.text


def test_non_object_yields_empty_seed(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_settings_seed(path) == {}


def test_seed_sections(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"settings": {"username": "jane"}, "profile": "bogus"}),
        encoding="utf-8",
    )

    seed = load_settings_seed(path)

    assert seed_section(seed, "settings") == {"username": "jane"}
    assert seed_section(seed, "profile") == {}
    assert seed_section(seed, "missing") == {}
