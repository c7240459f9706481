"""Per-level action bucket."""
from __future__ import annotations

from typing import Callable, List

Action = Callable[[], None]


class Level:
    """Ordered collection of the actions registered for a single level."""

    def __init__(self) -> None:
        self._actions: List[Action] = []

    def register(self, action: Action) -> None:
        """Append *action* to the end of the level."""

        if not callable(action):
            raise TypeError(f"Expected a callable action, got {type(action).__name__}")
        self._actions.append(action)

    def init(self) -> None:
        """Run every action in registration order, stopping at the first failure."""

        for action in self._actions:
            action()

    def __len__(self) -> int:
        return len(self._actions)


__all__ = ["Action", "Level"]
