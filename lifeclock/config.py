"""
Settings for the Life Clock.

Values are read from a YAML file (``config.yaml`` shipped inside the
package by default) into frozen dataclasses.  Missing files and keys fall
back to defaults; the settings only seed initial state and are never
written back.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = os.path.join(os.path.abspath(os.path.dirname(__file__)), "config.yaml")

APPEARANCES = ("light", "dark")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AppConfig:
    title: str = "Life Clock"
    geometry: str = "460x560"
    appearance: str = "light"
    color_theme: str = "blue"


@dataclass(frozen=True)
class ClockConfig:
    tick_ms: int = 1000


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"


@dataclass(frozen=True)
class Settings:
    app: AppConfig
    clock: ClockConfig
    logging: LoggingConfig


def load_config(path: str | Path = DEFAULT_CONFIG) -> Settings:
    raw: dict[str, Any] = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    app_raw = raw.get("app", {}) or {}
    clock_raw = raw.get("clock", {}) or {}
    log_raw = raw.get("logging", {}) or {}

    appearance = str(app_raw.get("appearance", "light")).lower()
    if appearance not in APPEARANCES:
        raise ConfigError(f"app.appearance must be one of {APPEARANCES}, got {appearance!r}")

    tick_ms = int(clock_raw.get("tick_ms", 1000))
    if tick_ms <= 0:
        raise ConfigError("clock.tick_ms must be positive")

    app = AppConfig(
        title=str(app_raw.get("title", "Life Clock")),
        geometry=str(app_raw.get("geometry", "460x560")),
        appearance=appearance,
        color_theme=str(app_raw.get("color_theme", "blue")),
    )
    return Settings(
        app=app,
        clock=ClockConfig(tick_ms=tick_ms),
        logging=LoggingConfig(level=str(log_raw.get("level", "WARNING")).upper()),
    )
