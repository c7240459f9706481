"""initcontainer - run registered initialization actions level by level."""
from __future__ import annotations

import logging
from importlib import metadata

from initcontainer.core import (
    Container,
    ContainerState,
    ContainerStateError,
    FuncInitializer,
    InitContainerError,
    Initializer,
    LevelOutOfRangeError,
    UnknownLevelError,
    initializer_from_func,
    new,
)
from initcontainer.plan import LevelPlan, LevelPlanError, load_level_plan
from initcontainer.settings import Settings, configure_logging, create_default_container

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Container",
    "ContainerState",
    "ContainerStateError",
    "FuncInitializer",
    "InitContainerError",
    "Initializer",
    "LevelOutOfRangeError",
    "LevelPlan",
    "LevelPlanError",
    "Settings",
    "UnknownLevelError",
    "configure_logging",
    "create_default_container",
    "initializer_from_func",
    "load_level_plan",
    "new",
]


def __getattr__(name: str):  # pragma: no cover - passthrough to package metadata
    if name == "__version__":
        try:
            return metadata.version("initcontainer")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)
