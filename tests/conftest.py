from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from deprecations import registry as registry_module
from deprecations.registry import DeprecationRegistry


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def debug(self, message: str, context: Mapping[str, Any]) -> None:
        self.calls.append((message, dict(context)))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def registry() -> DeprecationRegistry:
    return DeprecationRegistry()


@pytest.fixture
def default_registry(monkeypatch: pytest.MonkeyPatch) -> DeprecationRegistry:
    fresh = DeprecationRegistry()
    monkeypatch.setattr(registry_module, "_default_registry", fresh)
    return fresh
