from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import time

from crowdin_bridge import telemetry
from crowdin_bridge.application.forward import export_to_sink
from crowdin_bridge.application.reverse import import_language_files
from crowdin_bridge.canonical import dump_canonical, load_canonical
from crowdin_bridge.config import BridgeConfig
from crowdin_bridge.storage import LanguageDirectoryStore, read_json, write_json

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionStats:
    sentences: int
    languages: tuple[str, ...]
    elapsed_ms: float


def canonical_to_crowdin(
    translations_path: Path,
    out_dir: Path,
    config: BridgeConfig,
    *,
    max_workers: int | None = None,
) -> ConversionStats:
    started = time.perf_counter()
    model = load_canonical(
        read_json(translations_path),
        base_language=config.base_language,
        source=translations_path,
    )
    store = LanguageDirectoryStore(root=out_dir, config=config)
    workers = config.workers if max_workers is None else max_workers
    languages = export_to_sink(model, store, max_workers=workers)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    telemetry.log_event(
        "forward.done",
        input=str(translations_path),
        output=str(out_dir),
        sentences=len(model.entries),
        languages=",".join(languages),
        elapsed_ms=round(elapsed_ms, 1),
    )
    return ConversionStats(
        sentences=len(model.entries), languages=languages, elapsed_ms=elapsed_ms
    )


def crowdin_to_canonical(
    crowdin_dir: Path,
    out_translations_path: Path,
    config: BridgeConfig,
) -> ConversionStats:
    started = time.perf_counter()
    store = LanguageDirectoryStore(root=crowdin_dir, config=config)
    files = store.read_all()
    _LOGGER.debug("Discovered languages: %s", ", ".join(files) or "<none>")
    model = import_language_files(
        files,
        config.language_directory(),
        base_language=config.base_language,
        location=crowdin_dir,
    )
    write_json(out_translations_path, dump_canonical(model), indent=config.indent)
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    telemetry.log_event(
        "reverse.done",
        input=str(crowdin_dir),
        output=str(out_translations_path),
        sentences=len(model.entries),
        languages=",".join(model.languages),
        elapsed_ms=round(elapsed_ms, 1),
    )
    return ConversionStats(
        sentences=len(model.entries), languages=model.languages, elapsed_ms=elapsed_ms
    )
