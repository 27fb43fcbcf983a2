"""Language code -> display name lookup.

This package contains:
- The `LanguageRegistry` capability interface and its static/chained
  implementations.
- `LanguageDirectory`, which applies the "(Unofficial)" suffix and the
  unknown-language placeholder on top of a registry.
"""

from __future__ import annotations

from crowdin_bridge.languages.base import LanguageRegistry as LanguageRegistry
from crowdin_bridge.languages.registry import (
    KNOWN_LANGUAGES as KNOWN_LANGUAGES,
    UNKNOWN_LANGUAGE as UNKNOWN_LANGUAGE,
    UNOFFICIAL_SUFFIX as UNOFFICIAL_SUFFIX,
    ChainedLanguageRegistry as ChainedLanguageRegistry,
    LanguageDirectory as LanguageDirectory,
    StaticLanguageRegistry as StaticLanguageRegistry,
    build_language_directory as build_language_directory,
)
