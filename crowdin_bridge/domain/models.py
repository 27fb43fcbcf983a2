from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

BASE_LANGUAGE: Final[str] = "en"
NO_TRANSLATION: Final[str] = ""


@dataclass(frozen=True, slots=True)
class CanonicalEntry:
    """All known translations of one source sentence, base language included."""

    source: str
    translations: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "translations", dict(self.translations))

    @classmethod
    def create(
        cls,
        source: str,
        translations: Mapping[str, str],
        *,
        base_language: str = BASE_LANGUAGE,
    ) -> "CanonicalEntry":
        merged = dict(translations)
        merged.setdefault(base_language, source)
        return cls(source=source, translations=merged)

    def text_for(self, language: str) -> str:
        return self.translations.get(language, NO_TRANSLATION)


@dataclass(frozen=True, slots=True)
class CanonicalModel:
    entries: tuple[CanonicalEntry, ...]
    languages: tuple[str, ...]
    language_names: Mapping[str, str] = field(default_factory=dict)
    base_language: str = BASE_LANGUAGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "language_names", dict(self.language_names))

    @classmethod
    def build(
        cls,
        entries: Iterable[CanonicalEntry],
        *,
        language_names: Mapping[str, str] | None = None,
        base_language: str = BASE_LANGUAGE,
    ) -> "CanonicalModel":
        names = dict(language_names or {})
        # sorted() is stable: identical base text keeps first-seen order.
        ordered = tuple(
            sorted(entries, key=lambda entry: entry.text_for(base_language))
        )
        codes: set[str] = {base_language, *names}
        for entry in ordered:
            codes.update(entry.translations)
        return cls(
            entries=ordered,
            languages=tuple(sorted(codes)),
            language_names=names,
            base_language=base_language,
        )

    @property
    def sentences(self) -> tuple[str, ...]:
        return tuple(entry.text_for(self.base_language) for entry in self.entries)


@dataclass(frozen=True, slots=True)
class LanguageFile:
    """Flat key -> text mapping for one language; "" means no translation."""

    language: str
    entries: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", dict(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def translation(self, key: str) -> str | None:
        value = self.entries.get(key)
        if not value:
            return None
        return value

    def sorted_entries(self) -> dict[str, str]:
        return dict(sorted(self.entries.items()))
