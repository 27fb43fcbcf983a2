from __future__ import annotations

from pathlib import Path

import pytest


def pytest_ignore_collect(collection_path: Path, config: pytest.Config) -> bool:
    del config
    ignored_parts = {
        ".venv",
        "__pycache__",
    }
    return any(part in collection_path.parts for part in ignored_parts)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep telemetry handlers and user config out of unit tests.
    monkeypatch.setenv("CROWDIN_BRIDGE_LOGGING", "0")
    monkeypatch.delenv("CROWDIN_BRIDGE_CONFIG", raising=False)
    monkeypatch.delenv("CROWDIN_BRIDGE_LOG_DIR", raising=False)
