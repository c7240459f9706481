from __future__ import annotations

from typing import Callable, List

import pytest


class Recorder:
    """Collects the names of actions in the order they ran."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def action(self, name: str) -> Callable[[], None]:
        def run() -> None:
            self.calls.append(name)

        return run

    def failing(self, name: str, exc: Exception) -> Callable[[], None]:
        def run() -> None:
            self.calls.append(name)
            raise exc

        return run


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove initcontainer variables from the environment."""

    for name in ("INITCONTAINER_NUM_LEVELS", "INITCONTAINER_LEVELS_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
