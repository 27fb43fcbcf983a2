from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Protocol

from crowdin_bridge.domain.models import CanonicalModel, LanguageFile
from crowdin_bridge.keys import encode_key, max_index_for

_LOGGER = logging.getLogger(__name__)


class LanguageFileSink(Protocol):
    def write(self, language_file: LanguageFile) -> None: ...


def export_language(model: CanonicalModel, language: str) -> LanguageFile:
    """Build the full N-key file for one language ("" where untranslated)."""
    max_index = max_index_for(len(model.entries))
    entries = {
        encode_key(index, max_index): entry.text_for(language)
        for index, entry in enumerate(model.entries)
    }
    return LanguageFile(language=language, entries=entries)


def export_model(
    model: CanonicalModel, *, max_workers: int = 1
) -> dict[str, LanguageFile]:
    languages = model.languages
    if max_workers <= 1 or len(languages) <= 1:
        files = [export_language(model, language) for language in languages]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            files = list(
                pool.map(lambda language: export_language(model, language), languages)
            )
    _LOGGER.debug(
        "export.languages=%d entries=%d workers=%d",
        len(languages),
        len(model.entries),
        max_workers,
    )
    return {language_file.language: language_file for language_file in files}


def export_to_sink(
    model: CanonicalModel, sink: LanguageFileSink, *, max_workers: int = 1
) -> tuple[str, ...]:
    files = export_model(model, max_workers=max_workers)
    for language in sorted(files):
        sink.write(files[language])
    return tuple(sorted(files))
