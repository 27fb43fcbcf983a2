from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Final

from crowdin_bridge.domain.models import BASE_LANGUAGE
from crowdin_bridge.errors import SchemaError
from crowdin_bridge.languages.registry import (
    UNKNOWN_LANGUAGE,
    UNOFFICIAL_SUFFIX,
    LanguageDirectory,
    build_language_directory,
)

CONFIG_ENV: Final[str] = "CROWDIN_BRIDGE_CONFIG"
TRANSLATIONS_JSON: Final[str] = "translations.json"
CROWDIN_DIR: Final[str] = "crowdin"
DEFAULT_FILE_PREFIX: Final[str] = "tr_"
DEFAULT_FILE_SUFFIX: Final[str] = ".json"
DEFAULT_INDENT: Final[int] = 2
DEFAULT_WORKERS: Final[int] = 1


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    base_language: str = BASE_LANGUAGE
    file_prefix: str = DEFAULT_FILE_PREFIX
    file_suffix: str = DEFAULT_FILE_SUFFIX
    indent: int = DEFAULT_INDENT
    workers: int = DEFAULT_WORKERS
    unknown_language: str = UNKNOWN_LANGUAGE
    unofficial_suffix: str = UNOFFICIAL_SUFFIX
    language_names: dict[str, str] = field(default_factory=dict)

    def language_directory(self) -> LanguageDirectory:
        return build_language_directory(
            self.language_names,
            base_language=self.base_language,
            unknown_name=self.unknown_language,
            unofficial_suffix=self.unofficial_suffix,
        )


def config_path(explicit: Path | None = None) -> Path | None:
    if explicit is not None:
        return explicit
    override = os.environ.get(CONFIG_ENV, "").strip()
    if override:
        return Path(override)
    return None


def load_config(path: Path | None = None) -> BridgeConfig:
    """Read the JSON config at `path`; no path means built-in defaults.

    A config file that was asked for must exist (`OSError` otherwise) and
    parse (`SchemaError` otherwise). Individual fields with the wrong type
    fall back to their defaults.
    """
    if path is None:
        return BridgeConfig()
    raw_data = path.read_bytes()
    try:
        payload: object = json.loads(raw_data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise SchemaError(f"config is not valid UTF-8: {exc}", path) from exc
    except json.JSONDecodeError as exc:
        raise SchemaError(f"invalid JSON in config: {exc}", path) from exc
    if not isinstance(payload, dict):
        raise SchemaError("config must be a JSON object", path)
    return _parse_config(payload)


def _parse_config(payload: dict[str, object]) -> BridgeConfig:
    defaults = BridgeConfig()
    return BridgeConfig(
        base_language=_get_str(payload.get("base_language"), defaults.base_language),
        file_prefix=_get_str(payload.get("file_prefix"), defaults.file_prefix),
        file_suffix=_get_str(payload.get("file_suffix"), defaults.file_suffix),
        indent=_get_int(payload.get("indent"), defaults.indent, minimum=0),
        workers=_get_int(payload.get("workers"), defaults.workers, minimum=1),
        unknown_language=_get_str(
            payload.get("unknown_language"), defaults.unknown_language
        ),
        unofficial_suffix=_get_str(
            payload.get("unofficial_suffix"), defaults.unofficial_suffix
        ),
        language_names=_get_str_map(payload.get("language_names")),
    )


def _get_str(value: object | None, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _get_int(value: object | None, default: int, *, minimum: int) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, int) and not isinstance(value, bool) and value >= minimum:
        return value
    return default


def _get_str_map(value: object | None) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    output: dict[str, str] = {}
    for raw_key, raw_item in value.items():
        if isinstance(raw_key, str) and isinstance(raw_item, str) and raw_item:
            output[raw_key] = raw_item
    return output
