from __future__ import annotations

from pathlib import Path


class BridgeError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SchemaError(BridgeError):
    def __init__(self, message: str, path: Path | None = None) -> None:
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class KeyFormatError(SchemaError):
    pass


class MissingBaseLanguageError(BridgeError):
    def __init__(self, base_language: str, location: Path | None = None) -> None:
        message = f"missing base language file for {base_language!r}"
        if location is not None:
            message = f"{message} in {location}"
        super().__init__(message)
        self.base_language = base_language
        self.location = location
