from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from crowdin_bridge.domain.models import BASE_LANGUAGE
from crowdin_bridge.languages.base import LanguageRegistry

UNKNOWN_LANGUAGE: Final[str] = "LANG_STUB"
UNOFFICIAL_SUFFIX: Final[str] = " (Unofficial)"

KNOWN_LANGUAGES: Final[Mapping[str, str]] = {
    "en": "English",
    "ru": "Русский",
    "es": "Español",
    "pt": "Português",
    "bg": "Български",
    "it": "Italiano",
    "pl": "Polski",
    "zh_cn": "简体中文",
    "ro": "Română",
    "fr": "French",
}


@dataclass(frozen=True, slots=True)
class StaticLanguageRegistry(LanguageRegistry):
    names: Mapping[str, str] = field(default_factory=lambda: dict(KNOWN_LANGUAGES))

    def lookup(self, code: str) -> str | None:
        name = self.names.get(code)
        if not name:
            return None
        return name


@dataclass(frozen=True, slots=True)
class ChainedLanguageRegistry(LanguageRegistry):
    primary: LanguageRegistry
    fallback: LanguageRegistry

    def lookup(self, code: str) -> str | None:
        name = self.primary.lookup(code)
        if name is not None:
            return name
        return self.fallback.lookup(code)


@dataclass(frozen=True, slots=True)
class LanguageDirectory:
    """Resolves display names; only the base language is unsuffixed."""

    registry: LanguageRegistry = field(default_factory=StaticLanguageRegistry)
    base_language: str = BASE_LANGUAGE
    unknown_name: str = UNKNOWN_LANGUAGE
    unofficial_suffix: str = UNOFFICIAL_SUFFIX

    def is_known(self, code: str) -> bool:
        return self.registry.lookup(code) is not None

    def display_name(self, code: str) -> str:
        name = self.registry.lookup(code)
        if name is None:
            return self.unknown_name
        if code == self.base_language:
            return name
        return f"{name}{self.unofficial_suffix}"


def build_language_directory(
    extra_names: Mapping[str, str] | None = None,
    *,
    base_language: str = BASE_LANGUAGE,
    unknown_name: str = UNKNOWN_LANGUAGE,
    unofficial_suffix: str = UNOFFICIAL_SUFFIX,
) -> LanguageDirectory:
    registry: LanguageRegistry = StaticLanguageRegistry()
    if extra_names:
        registry = ChainedLanguageRegistry(
            primary=StaticLanguageRegistry(names=dict(extra_names)),
            fallback=registry,
        )
    return LanguageDirectory(
        registry=registry,
        base_language=base_language,
        unknown_name=unknown_name,
        unofficial_suffix=unofficial_suffix,
    )
