from __future__ import annotations

import pytest

from crowdin_bridge.application.forward import export_model
from crowdin_bridge.application.reverse import import_language_files
from crowdin_bridge.canonical import dump_canonical, load_canonical
from crowdin_bridge.storage import dumps_json

_DOCUMENTS: list[dict[str, object]] = [
    {"Languages": {}, "Translations": {}},
    {
        "Languages": {"en": "English", "fr": "French"},
        "Translations": {"Hello": {"fr": "Bonjour"}, "World": {}},
    },
    {
        "Languages": {"en": "English", "ru": "Русский", "zh_cn": "简体中文"},
        "Translations": {
            f"Sentence number {index}": (
                {"ru": f"Предложение {index}"} if index % 3 else {"zh_cn": f"句子 {index}"}
            )
            for index in range(25)
        },
    },
]


def _translations(document: dict[str, object]) -> dict[str, dict[str, str]]:
    translations = document["Translations"]
    assert isinstance(translations, dict)
    return translations


@pytest.mark.parametrize("document", _DOCUMENTS)
def test_export_then_import_preserves_sentences_and_translations(
    document: dict[str, object],
) -> None:
    model = load_canonical(document)

    restored = dump_canonical(import_language_files(export_model(model)))

    assert _translations(restored) == _translations(document)


@pytest.mark.parametrize("document", _DOCUMENTS)
def test_export_is_byte_identical_across_runs(document: dict[str, object]) -> None:
    first = export_model(load_canonical(document))
    second = export_model(load_canonical(document), max_workers=3)

    assert {
        code: dumps_json(language_file.sorted_entries(), indent=2)
        for code, language_file in first.items()
    } == {
        code: dumps_json(language_file.sorted_entries(), indent=2)
        for code, language_file in second.items()
    }


def test_absent_translation_is_not_resurrected() -> None:
    model = load_canonical(
        {"Languages": {}, "Translations": {"Cat": {"de": "Katze"}, "Dog": {}}}
    )

    files = export_model(model)
    restored = dump_canonical(import_language_files(files))

    assert files["de"].entries == {"k_0": "Katze", "k_1": ""}
    assert restored["Translations"] == {"Cat": {"de": "Katze"}, "Dog": {}}
