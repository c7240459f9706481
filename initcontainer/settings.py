"""Environment-driven configuration for initcontainer."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from initcontainer.core.container import Container
from initcontainer.plan import load_level_plan

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(slots=True)
class Settings:
    """Runtime settings loaded from environment variables."""

    num_levels: int
    levels_file: Path | None
    log_level: str

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment variables with sensible defaults."""

        raw_levels = os.getenv("INITCONTAINER_NUM_LEVELS", "5")
        try:
            num_levels = int(raw_levels)
        except ValueError as exc:
            raise ValueError(
                f"INITCONTAINER_NUM_LEVELS must be an integer, got {raw_levels!r}"
            ) from exc
        levels_file = os.getenv("INITCONTAINER_LEVELS_FILE")
        return cls(
            num_levels=num_levels,
            levels_file=Path(levels_file) if levels_file else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply a basic logging configuration at ``settings.log_level``."""

    settings = settings or Settings.load()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
    )


def create_default_container(settings: Settings | None = None) -> Container:
    """Construct a :class:`Container` sized from *settings*."""

    settings = settings or Settings.load()
    if settings.levels_file is not None:
        return Container.from_plan(load_level_plan(settings.levels_file))
    return Container(settings.num_levels)


__all__ = ["LOG_FORMAT", "Settings", "configure_logging", "create_default_container"]
