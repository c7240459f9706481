"""Load named level layouts from YAML."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Tuple

import yaml

from initcontainer.core.errors import InitContainerError, UnknownLevelError


class LevelPlanError(InitContainerError, ValueError):
    """Raised when a level plan cannot be loaded."""


@dataclass(slots=True, frozen=True)
class LevelPlan:
    """Ordered level names; the position of a name is its level number."""

    names: Tuple[str, ...]

    @classmethod
    def from_names(cls, names: Iterable[object]) -> "LevelPlan":
        raw = list(names)
        invalid = [name for name in raw if not isinstance(name, str)]
        if invalid:
            raise LevelPlanError(f"Level names must be strings, got {invalid!r}")
        cleaned = tuple(name.strip() for name in raw)
        if any(not name for name in cleaned):
            raise LevelPlanError("Level names must be non-empty")
        duplicates = sorted({name for name in cleaned if cleaned.count(name) > 1})
        if duplicates:
            raise LevelPlanError(f"Duplicate level names {duplicates}")
        return cls(names=cleaned)

    def level(self, name: str) -> int:
        """Return the level number for *name*."""

        try:
            return self.names.index(name)
        except ValueError as exc:
            raise UnknownLevelError(name) from exc

    def __len__(self) -> int:
        return len(self.names)


def load_level_plan(path: Path) -> LevelPlan:
    """Load the plan stored at *path* under a top-level ``levels`` list."""

    if not path.exists():
        raise LevelPlanError(f"Level plan not found at {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise LevelPlanError(f"Failed to parse level plan: {exc}") from exc
    entries = payload.get("levels") if isinstance(payload, Mapping) else None
    if not entries:
        raise LevelPlanError("Level plan does not define any levels under 'levels'")
    if not isinstance(entries, list):
        raise LevelPlanError("'levels' must be a list of names")
    return LevelPlan.from_names(entries)


__all__ = ["LevelPlan", "LevelPlanError", "load_level_plan"]
