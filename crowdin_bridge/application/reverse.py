from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path

from crowdin_bridge.domain.models import (
    BASE_LANGUAGE,
    CanonicalEntry,
    CanonicalModel,
    LanguageFile,
)
from crowdin_bridge.errors import KeyFormatError, MissingBaseLanguageError
from crowdin_bridge.keys import decode_key, encode_key, max_index_for
from crowdin_bridge.languages.registry import LanguageDirectory

_LOGGER = logging.getLogger(__name__)


def import_language_files(
    files: Mapping[str, LanguageFile],
    directory: LanguageDirectory | None = None,
    *,
    base_language: str = BASE_LANGUAGE,
    location: Path | None = None,
) -> CanonicalModel:
    """Rebuild the canonical model from per-language files.

    The base-language file decides both the sentence text and the key set.
    Keys missing from another language, or holding the "" sentinel, are left
    out of that sentence's translations.
    """
    base = files.get(base_language)
    if base is None:
        raise MissingBaseLanguageError(base_language, location)
    if directory is None:
        directory = LanguageDirectory(base_language=base_language)

    others = {code: files[code] for code in sorted(files) if code != base_language}
    ordered_keys = _ordered_keys(base)

    translations: dict[str, dict[str, str]] = {}
    for key in ordered_keys:
        sentence = base.entries[key]
        if sentence in translations:
            _LOGGER.warning(
                "Duplicate base sentence at %s replaces earlier entry: %r",
                key,
                sentence,
            )
        attached: dict[str, str] = {}
        for code, language_file in others.items():
            value = language_file.translation(key)
            if value is not None:
                attached[code] = value
        translations[sentence] = attached

    names: dict[str, str] = {}
    for code in sorted(files):
        if not directory.is_known(code):
            _LOGGER.warning("Unknown language code %r, using placeholder name", code)
        names[code] = directory.display_name(code)

    entries = [
        CanonicalEntry.create(sentence, attached, base_language=base_language)
        for sentence, attached in translations.items()
    ]
    return CanonicalModel.build(
        entries, language_names=names, base_language=base_language
    )


def _ordered_keys(base: LanguageFile) -> list[str]:
    """Base keys in index order; each must be the key this export would emit."""
    max_index = max_index_for(len(base.entries))
    indexed: list[tuple[int, str]] = []
    for key in base.entries:
        index = decode_key(key, max_index=max_index)
        if key != encode_key(index, max_index):
            raise KeyFormatError(
                f"key {key!r} does not match the {max_index + 1}-entry key width"
            )
        indexed.append((index, key))
    return [key for _, key in sorted(indexed)]
