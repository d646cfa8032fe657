"""Shared test fixtures for the configstore test suite."""

from __future__ import annotations

from typing import Any

import pytest

from configstore import ConfigChange, ConfigStore, create_config


class RecordingObserver:
    """Observer that records every change it is handed."""

    def __init__(self, name: str = "observer") -> None:
        self.name = name
        self.changes: list[ConfigChange] = []

    def __call__(self, change: ConfigChange) -> None:
        self.changes.append(change)

    def __repr__(self) -> str:
        return f"RecordingObserver({self.name!r})"


@pytest.fixture
def store() -> ConfigStore:
    """A fresh isolated store with default options."""
    return create_config()


@pytest.fixture
def strict_store() -> ConfigStore:
    """A fresh isolated store that validates paths and handlers."""
    return create_config(strict=True)


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def call_log() -> list[tuple[str, Any]]:
    """Shared ordered log for asserting handler call order."""
    return []


@pytest.fixture
def make_recorder() -> Any:
    """Factory for additional named RecordingObserver instances."""

    def factory(name: str) -> RecordingObserver:
        return RecordingObserver(name)

    return factory
