"""Project settings read from .uilight.yaml."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from uilight.dump.parser import DEFAULT_SECTION
from uilight.element_types import ElementType, resolve_plurals
from uilight.engine.screen import Delayed, Screen

if TYPE_CHECKING:
    from collections.abc import Callable

CONFIG_FILE = ".uilight.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    app_name: str = "app"
    section: str = DEFAULT_SECTION
    plurals: dict[ElementType, str] = field(default_factory=dict)  # overrides built-in query names
    log_level: str = "WARNING"
    screen_timeout: float = 3.0
    poll_interval: float = 0.1

    def screen(self, label: str, probe: Callable[[], bool]) -> Screen:
        """Screen that may take up to screen_timeout to appear."""
        return Screen(label, probe, Delayed(self.screen_timeout), interval=self.poll_interval)


def parse_config(content: str) -> Settings:
    raw = yaml.safe_load(content)
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError("Invalid config: expected a mapping")

    unknown = set(raw) - set(Settings.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

    plurals = raw.get("plurals") or {}
    if not isinstance(plurals, dict):
        raise ValueError('Invalid config: "plurals" must be a mapping')

    log_level = str(raw.get("log_level", "WARNING")).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {log_level}")

    return Settings(
        app_name=str(raw.get("app_name", "app")),
        section=str(raw.get("section", DEFAULT_SECTION)),
        plurals=resolve_plurals({str(k): str(v) for k, v in plurals.items()}),
        log_level=log_level,
        screen_timeout=float(raw.get("screen_timeout", 3.0)),
        poll_interval=float(raw.get("poll_interval", 0.1)),
    )


def load_config(cwd: str | Path) -> Settings:
    """Read settings from cwd; defaults when there is no config file."""
    path = Path(cwd) / CONFIG_FILE
    if not path.exists():
        return Settings()
    return parse_config(path.read_text(encoding="utf-8"))
