from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path

from crowdin_bridge.config import BridgeConfig
from crowdin_bridge.domain.models import LanguageFile
from crowdin_bridge.errors import SchemaError

_LOGGER = logging.getLogger(__name__)


def read_json(path: Path) -> object:
    raw_data = path.read_bytes()
    try:
        return json.loads(raw_data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise SchemaError(f"not valid UTF-8: {exc}", path) from exc
    except json.JSONDecodeError as exc:
        raise SchemaError(f"invalid JSON: {exc}", path) from exc


def dumps_json(payload: object, *, indent: int) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def write_json(path: Path, payload: object, *, indent: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        data = dumps_json(payload, indent=indent).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SchemaError(f"text is not encodable as UTF-8: {exc}", path) from exc
    tmp = path.with_name(path.name + ".part")
    try:
        tmp.write_bytes(data)
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)


def language_file_name(code: str, config: BridgeConfig) -> str:
    return f"{config.file_prefix}{code}{config.file_suffix}"


def language_code_from_name(name: str, config: BridgeConfig) -> str | None:
    prefix = config.file_prefix
    suffix = config.file_suffix
    if not name.startswith(prefix) or not name.endswith(suffix):
        return None
    code = name[len(prefix) : len(name) - len(suffix)]
    if not code:
        return None
    return code


def parse_language_file(
    code: str, payload: object, *, source: Path | None = None
) -> LanguageFile:
    if not isinstance(payload, dict):
        raise SchemaError("language file must be a JSON object", source)
    entries: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise SchemaError(
                f"value for {key!r} must be a string, got {type(value).__name__}",
                source,
            )
        entries[key] = value
    return LanguageFile(language=code, entries=entries)


@dataclass(slots=True)
class LanguageDirectoryStore:
    """One directory holding a `tr_<code>.json` file per language."""

    root: Path
    config: BridgeConfig = field(default_factory=BridgeConfig)

    def path_for(self, code: str) -> Path:
        return self.root / language_file_name(code, self.config)

    def write(self, language_file: LanguageFile) -> None:
        path = self.path_for(language_file.language)
        write_json(path, language_file.sorted_entries(), indent=self.config.indent)
        _LOGGER.debug("Wrote %s (%d keys)", path, len(language_file.entries))

    def discover(self) -> tuple[tuple[str, Path], ...]:
        found: list[tuple[str, Path]] = []
        for path in self.root.iterdir():
            if not path.is_file():
                continue
            code = language_code_from_name(path.name, self.config)
            if code is None:
                continue
            found.append((code, path))
        return tuple(sorted(found))

    def read_all(self) -> dict[str, LanguageFile]:
        files: dict[str, LanguageFile] = {}
        for code, path in self.discover():
            files[code] = parse_language_file(code, read_json(path), source=path)
        return files
