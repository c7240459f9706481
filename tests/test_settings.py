from __future__ import annotations

import logging
from pathlib import Path

import pytest

from initcontainer.settings import (
    LOG_FORMAT,
    Settings,
    configure_logging,
    create_default_container,
)

def test_settings_defaults(clean_env) -> None:
    settings = Settings.load()

    assert settings.num_levels == 5
    assert settings.levels_file is None
    assert settings.log_level == "INFO"

def test_settings_from_environment(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("INITCONTAINER_NUM_LEVELS", "3")
    clean_env.setenv("INITCONTAINER_LEVELS_FILE", str(tmp_path / "levels.yaml"))
    clean_env.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings.load()

    assert settings.num_levels == 3
    assert settings.levels_file == tmp_path / "levels.yaml"
    assert settings.log_level == "DEBUG"

def test_settings_rejects_invalid_level_count(clean_env) -> None:
    clean_env.setenv("INITCONTAINER_NUM_LEVELS", "many")
    with pytest.raises(ValueError, match="INITCONTAINER_NUM_LEVELS"):
        Settings.load()

def test_create_default_container_uses_level_count(clean_env) -> None:
    clean_env.setenv("INITCONTAINER_NUM_LEVELS", "4")

    container = create_default_container()

    assert container.num_levels == 4

def test_create_default_container_prefers_plan(tmp_path: Path) -> None:
    plan_path = tmp_path / "levels.yaml"
    plan_path.write_text("levels:\n  - config\n  - services\n", encoding="utf-8")
    settings = Settings(num_levels=9, levels_file=plan_path, log_level="INFO")

    container = create_default_container(settings)

    assert container.num_levels == 2
    assert container.level_name(0) == "config"

def test_configure_logging_uses_settings_level(clean_env) -> None:
    captured = {}
    clean_env.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    clean_env.setenv("LOG_LEVEL", "warning")

    configure_logging()
    assert captured == {"level": "WARNING", "format": LOG_FORMAT}

    configure_logging(Settings(num_levels=1, levels_file=None, log_level="debug"))
    assert captured["level"] == "DEBUG"
