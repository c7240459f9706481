"""Core primitives of the initialization container."""
from __future__ import annotations

from .container import Container, ContainerState, new
from .errors import (
    ContainerStateError,
    InitContainerError,
    LevelOutOfRangeError,
    UnknownLevelError,
)
from .initializer import FuncInitializer, Initializer, as_action, initializer_from_func
from .level import Action, Level

__all__ = [
    "Action",
    "Container",
    "ContainerState",
    "ContainerStateError",
    "FuncInitializer",
    "InitContainerError",
    "Initializer",
    "Level",
    "LevelOutOfRangeError",
    "UnknownLevelError",
    "as_action",
    "initializer_from_func",
    "new",
]
