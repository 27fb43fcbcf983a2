from __future__ import annotations

from typing import Protocol


class LanguageRegistry(Protocol):
    def lookup(self, code: str) -> str | None: ...
