from __future__ import annotations

from crowdin_bridge.languages import (
    UNKNOWN_LANGUAGE,
    ChainedLanguageRegistry,
    LanguageDirectory,
    StaticLanguageRegistry,
    build_language_directory,
)


def test_base_language_name_has_no_suffix() -> None:
    directory = LanguageDirectory()

    assert directory.display_name("en") == "English"


def test_other_known_languages_are_marked_unofficial() -> None:
    directory = LanguageDirectory()

    assert directory.display_name("fr") == "French (Unofficial)"
    assert directory.display_name("ru") == "Русский (Unofficial)"
    assert directory.display_name("zh_cn") == "简体中文 (Unofficial)"


def test_unknown_language_gets_placeholder() -> None:
    directory = LanguageDirectory()

    assert not directory.is_known("tlh")
    assert directory.display_name("tlh") == UNKNOWN_LANGUAGE


def test_chained_registry_prefers_primary_names() -> None:
    registry = ChainedLanguageRegistry(
        primary=StaticLanguageRegistry(names={"fr": "Français", "de": "Deutsch"}),
        fallback=StaticLanguageRegistry(),
    )

    assert registry.lookup("fr") == "Français"
    assert registry.lookup("de") == "Deutsch"
    assert registry.lookup("ru") == "Русский"
    assert registry.lookup("tlh") is None


def test_static_registry_treats_empty_name_as_unknown() -> None:
    registry = StaticLanguageRegistry(names={"xx": ""})

    assert registry.lookup("xx") is None


def test_build_language_directory_applies_overrides_and_options() -> None:
    directory = build_language_directory(
        {"de": "Deutsch"},
        base_language="ru",
        unknown_name="???",
        unofficial_suffix=" [beta]",
    )

    assert directory.display_name("ru") == "Русский"
    assert directory.display_name("en") == "English [beta]"
    assert directory.display_name("de") == "Deutsch [beta]"
    assert directory.display_name("tlh") == "???"
