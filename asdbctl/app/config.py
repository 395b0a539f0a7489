from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path


DEFAULT_STEP = 10
THEME_MODES = ("system", "light", "dark")


def default_config_path() -> Path:
    env_path = os.environ.get("ASDBCTL_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "asdbctl" / "config.json"


@dataclass
class DisplayConfig:
    serial: str | None = None
    step: int = DEFAULT_STEP


@dataclass
class UiConfig:
    theme_mode: str = "system"  # one of THEME_MODES


@dataclass
class AppConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    ui: UiConfig = field(default_factory=UiConfig)

    @classmethod
    def default(cls) -> AppConfig:
        return cls()


def _sanitize_step(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 100:
        return value
    logging.warning(f"Ignoring invalid step {value!r} in config, using {DEFAULT_STEP}.")
    return DEFAULT_STEP


class ConfigManager:
    """User preferences. The brightness itself is never stored here."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        self.config_path = Path(config_path) if config_path is not None else default_config_path()
        self.config = self.load()

    def load(self) -> AppConfig:
        if not self.config_path.exists():
            logging.info(f"Config file not found at {self.config_path}, using defaults.")
            return AppConfig.default()

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
            display_data = data.get("display", {})
            ui_data = data.get("ui", {})

            theme_mode = ui_data.get("theme_mode", "system")
            if theme_mode not in THEME_MODES:
                logging.warning(f"Unknown theme {theme_mode!r} in config, using system.")
                theme_mode = "system"

            return AppConfig(
                display=DisplayConfig(
                    serial=display_data.get("serial") or None,
                    step=_sanitize_step(display_data.get("step", DEFAULT_STEP)),
                ),
                ui=UiConfig(theme_mode=theme_mode),
            )
        except (OSError, ValueError, AttributeError) as e:
            logging.error(f"Failed to load config: {e}")
            return AppConfig.default()

    def save(self) -> None:
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                json.dump(asdict(self.config), f, indent=4)
        except OSError as e:
            logging.error(f"Failed to save config: {e}")

    @property
    def serial(self) -> str | None:
        return self.config.display.serial

    @serial.setter
    def serial(self, value: str | None) -> None:
        self.config.display.serial = value
        self.save()

    @property
    def step(self) -> int:
        return self.config.display.step

    @step.setter
    def step(self, value: int) -> None:
        self.config.display.step = _sanitize_step(value)
        self.save()

    @property
    def theme_mode(self) -> str:
        return self.config.ui.theme_mode

    @theme_mode.setter
    def theme_mode(self, value: str) -> None:
        if value not in THEME_MODES:
            raise ValueError(f"theme_mode must be one of {THEME_MODES}")
        self.config.ui.theme_mode = value
        self.save()
