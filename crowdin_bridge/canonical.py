"""Canonical translation document <-> `CanonicalModel`.

The canonical document is a JSON object with two sections::

    {
      "Languages": {"en": "English", "ru": "Русский (Unofficial)"},
      "Translations": {"Hello": {"ru": "Привет"}}
    }

Every entry is guaranteed a base-language translation after loading; when the
document omits it, the source sentence itself is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from crowdin_bridge.domain.models import BASE_LANGUAGE, CanonicalEntry, CanonicalModel
from crowdin_bridge.errors import SchemaError

LANGUAGES_SECTION: Final[str] = "Languages"
TRANSLATIONS_SECTION: Final[str] = "Translations"


def load_canonical(
    raw: object,
    *,
    base_language: str = BASE_LANGUAGE,
    source: Path | None = None,
) -> CanonicalModel:
    if not isinstance(raw, dict):
        raise SchemaError("canonical document must be a JSON object", source)
    names = _string_map(
        raw.get(LANGUAGES_SECTION), section=LANGUAGES_SECTION, source=source
    )
    translations = raw.get(TRANSLATIONS_SECTION)
    if not isinstance(translations, dict):
        raise SchemaError(
            f"missing or malformed {TRANSLATIONS_SECTION!r} section", source
        )
    entries: list[CanonicalEntry] = []
    for sentence, per_language in translations.items():
        mapping = _string_map(
            per_language,
            section=f"{TRANSLATIONS_SECTION}[{sentence!r}]",
            source=source,
        )
        entries.append(
            CanonicalEntry.create(sentence, mapping, base_language=base_language)
        )
    return CanonicalModel.build(
        entries, language_names=names, base_language=base_language
    )


def dump_canonical(model: CanonicalModel) -> dict[str, object]:
    """Render `model` as a canonical document with sorted sections."""
    base = model.base_language
    translations: dict[str, dict[str, str]] = {}
    for entry in model.entries:
        per_language = {
            code: text
            for code, text in sorted(entry.translations.items())
            if not (code == base and text == entry.source)
        }
        translations[entry.source] = per_language
    return {
        LANGUAGES_SECTION: dict(sorted(model.language_names.items())),
        TRANSLATIONS_SECTION: dict(sorted(translations.items())),
    }


def _string_map(value: object, *, section: str, source: Path | None) -> dict[str, str]:
    if not isinstance(value, dict):
        raise SchemaError(f"missing or malformed {section} section", source)
    output: dict[str, str] = {}
    for key, item in value.items():
        if not isinstance(item, str):
            raise SchemaError(
                f"{section}[{key!r}] must be a string, got {type(item).__name__}",
                source,
            )
        output[key] = item
    return output
