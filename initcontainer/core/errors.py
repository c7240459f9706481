"""Exception types raised by the initialization container."""
from __future__ import annotations


class InitContainerError(Exception):
    """Base class for container errors."""


class LevelOutOfRangeError(InitContainerError, IndexError):
    """Raised when a registration targets a level the container does not have."""

    def __init__(self, level: int, num_levels: int) -> None:
        self.level = level
        self.num_levels = num_levels
        if num_levels:
            detail = f"valid levels are 0..{num_levels - 1}"
        else:
            detail = "container has no levels"
        super().__init__(f"Level {level} is out of range ({detail})")


class UnknownLevelError(InitContainerError, KeyError):
    """Raised when a level name is not part of the container's plan."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Level '{self.name}' is not defined"


class ContainerStateError(InitContainerError, RuntimeError):
    """Raised when the container is used after initialization has started."""

    def __init__(self, message: str, state: object) -> None:
        self.state = state
        super().__init__(message)


__all__ = [
    "ContainerStateError",
    "InitContainerError",
    "LevelOutOfRangeError",
    "UnknownLevelError",
]
