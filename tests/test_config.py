from __future__ import annotations

import json
from pathlib import Path

import pytest

from crowdin_bridge import config
from crowdin_bridge.errors import SchemaError


def test_load_config_without_path_returns_defaults() -> None:
    loaded = config.load_config(None)

    assert loaded == config.BridgeConfig()
    assert loaded.base_language == "en"
    assert loaded.file_prefix == "tr_"
    assert loaded.workers == 1


def test_load_config_reads_known_fields(tmp_path: Path) -> None:
    path = tmp_path / "bridge.json"
    path.write_text(
        json.dumps(
            {
                "base_language": "ru",
                "file_prefix": "lang_",
                "indent": 4,
                "workers": 3,
                "unknown_language": "???",
                "language_names": {"de": "Deutsch", "bad": 1},
            }
        ),
        encoding="utf-8",
    )

    loaded = config.load_config(path)

    assert loaded.base_language == "ru"
    assert loaded.file_prefix == "lang_"
    assert loaded.file_suffix == ".json"
    assert loaded.indent == 4
    assert loaded.workers == 3
    assert loaded.language_names == {"de": "Deutsch"}
    directory = loaded.language_directory()
    assert directory.display_name("ru") == "Русский"
    assert directory.display_name("de") == "Deutsch (Unofficial)"
    assert directory.display_name("tlh") == "???"


def test_load_config_falls_back_on_wrong_types(tmp_path: Path) -> None:
    path = tmp_path / "bridge.json"
    path.write_text(
        json.dumps({"base_language": 5, "workers": 0, "indent": True}),
        encoding="utf-8",
    )

    loaded = config.load_config(path)

    assert loaded == config.BridgeConfig()


def test_load_config_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bridge.json"
    path.write_text("[1, 2", encoding="utf-8")

    with pytest.raises(SchemaError):
        config.load_config(path)


def test_load_config_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bridge.json"
    path.write_bytes(b'{"unknown_language": "\xff"}')

    with pytest.raises(SchemaError):
        config.load_config(path)


def test_load_config_missing_explicit_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        config.load_config(tmp_path / "missing.json")


def test_load_config_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "bridge.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SchemaError):
        config.load_config(path)


def test_config_path_prefers_explicit_then_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    assert config.config_path(None) is None

    monkeypatch.setenv("CROWDIN_BRIDGE_CONFIG", str(tmp_path / "env.json"))

    assert config.config_path(None) == tmp_path / "env.json"
    assert config.config_path(tmp_path / "cli.json") == tmp_path / "cli.json"
