"""Adapters between initializer objects and bare actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .level import Action


@runtime_checkable
class Initializer(Protocol):
    """Anything exposing a no-argument ``init`` method."""

    def init(self) -> None:
        """Perform the initialization work."""


def as_action(initializer: Initializer) -> Action:
    """Return an action that forwards to ``initializer.init()``."""

    if not callable(getattr(initializer, "init", None)):
        raise TypeError(
            f"{type(initializer).__name__} does not provide an init() method"
        )

    def action() -> None:
        initializer.init()

    return action


@dataclass(slots=True, frozen=True)
class FuncInitializer:
    """Initializer backed by a plain function."""

    func: Action

    def init(self) -> None:
        self.func()


def initializer_from_func(func: Action) -> Initializer:
    """Wrap *func* so it can be passed to :meth:`Container.register`."""

    return FuncInitializer(func)


__all__ = ["FuncInitializer", "Initializer", "as_action", "initializer_from_func"]
