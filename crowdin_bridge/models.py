from __future__ import annotations

from crowdin_bridge.domain.models import (
    BASE_LANGUAGE,
    NO_TRANSLATION,
    CanonicalEntry,
    CanonicalModel,
    LanguageFile,
)

__all__ = [
    "BASE_LANGUAGE",
    "NO_TRANSLATION",
    "CanonicalEntry",
    "CanonicalModel",
    "LanguageFile",
]
