"""Leveled initialization container."""
from __future__ import annotations

import logging
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Sequence, Union

from .errors import ContainerStateError, LevelOutOfRangeError, UnknownLevelError
from .initializer import Initializer, as_action
from .level import Action, Level

if TYPE_CHECKING:
    from initcontainer.plan import LevelPlan

logger = logging.getLogger(__name__)

LevelRef = Union[int, str]


class ContainerState(str, Enum):
    """Lifecycle of a :class:`Container`."""

    CONSTRUCTED = "constructed"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"
    FAILED = "failed"


class Container:
    """Run registered actions level by level.

    Levels are numbered ``0..num_levels-1``. :meth:`init` runs level 0 first,
    then level 1, and so on; actions within a level run in the order they were
    registered. The container is single use: once :meth:`init` has started,
    further registrations and repeated calls to :meth:`init` raise
    :class:`ContainerStateError`.
    """

    def __init__(self, num_levels: int, names: Sequence[str] | None = None) -> None:
        if isinstance(num_levels, bool) or not isinstance(num_levels, int):
            raise TypeError(f"num_levels must be an int, got {type(num_levels).__name__}")
        if num_levels < 0:
            raise ValueError(f"num_levels must be non-negative, got {num_levels}")
        if names is not None:
            names = list(names)
            if len(names) != num_levels:
                raise ValueError(f"Expected {num_levels} level names, got {len(names)}")
            if any(not isinstance(name, str) or not name for name in names):
                raise ValueError("Level names must be non-empty strings")
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise ValueError(f"Duplicate level names {duplicates}")
        self._levels: List[Level] = [Level() for _ in range(num_levels)]
        self._names = tuple(names) if names is not None else None
        self._state = ContainerState.CONSTRUCTED

    @classmethod
    def from_plan(cls, plan: "LevelPlan") -> "Container":
        """Create a container with one level per name in *plan*."""

        return cls(len(plan.names), names=plan.names)

    @property
    def num_levels(self) -> int:
        return len(self._levels)

    @property
    def state(self) -> ContainerState:
        return self._state

    def level_name(self, level: int) -> str:
        """Return the display name for *level*."""

        if self._names is not None and 0 <= level < len(self._names):
            return self._names[level]
        return f"level {level}"

    def register_func(self, action: Action, level: LevelRef) -> None:
        """Register *action* to run at *level*.

        The lower the level, the earlier the action runs.
        """

        self._check_open("register")
        index = self._resolve(level)
        self._levels[index].register(action)
        logger.debug(
            "Registered %s at %s",
            getattr(action, "__qualname__", repr(action)),
            self.level_name(index),
        )

    def register(self, initializer: Initializer, level: LevelRef) -> None:
        """Register an object providing ``init()`` to run at *level*."""

        self._check_open("register")
        self.register_func(as_action(initializer), level)

    def init_func(self, level: LevelRef) -> Callable[[Action], Action]:
        """Decorator registering the decorated function at *level*."""

        def decorator(func: Action) -> Action:
            self.register_func(func, level)
            return func

        return decorator

    def init(self) -> None:
        """Run every level in ascending order, stopping at the first failure."""

        self._check_open("init")
        self._state = ContainerState.INITIALIZING
        logger.info("Initializing %d level(s)", len(self._levels))
        for index, level in enumerate(self._levels):
            name = self.level_name(index)
            logger.debug("Starting %s (%d action(s))", name, len(level))
            start_time = time.perf_counter()
            try:
                level.init()
            except Exception:
                self._state = ContainerState.FAILED
                logger.exception("Initialization failed at %s", name)
                raise
            logger.debug(
                "Completed %s in %.3fs", name, time.perf_counter() - start_time
            )
        self._state = ContainerState.INITIALIZED
        logger.info("Initialization complete")

    def _check_open(self, operation: str) -> None:
        if self._state is not ContainerState.CONSTRUCTED:
            raise ContainerStateError(
                f"Cannot {operation}: container is {self._state.value}", self._state
            )

    def _resolve(self, level: LevelRef) -> int:
        if isinstance(level, str):
            if self._names is None or level not in self._names:
                raise UnknownLevelError(level)
            return self._names.index(level)
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"level must be an int or str, got {type(level).__name__}")
        if not 0 <= level < len(self._levels):
            raise LevelOutOfRangeError(level, len(self._levels))
        return level


def new(num_levels: int) -> Container:
    """Return a new container with *num_levels* empty levels."""

    return Container(num_levels)


__all__ = ["Container", "ContainerState", "LevelRef", "new"]
