"""Package-wide settings for widget rendering."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .ids import default_id_generator
from .logging_config import configure_logging

_LOGGER = logging.getLogger(__name__)

_ENV_OVERRIDES = {
    "id_prefix": "BSWIDGETS_ID_PREFIX",
    "log_level": "BSWIDGETS_LOG_LEVEL",
}


class WidgetSettings(BaseModel):
    """Defaults shared by every widget rendered in the process."""

    id_prefix: str = Field(
        default="w",
        description="Prefix of auto-generated widget ids",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging verbosity applied by apply_settings",
    )

    @field_validator("id_prefix", mode="before")
    @classmethod
    def _ensure_prefix(cls, value: str | None) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("id_prefix must be a non-empty string")
        if any(char.isspace() for char in text):
            raise ValueError("id_prefix must not contain whitespace")
        return text

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: str | None) -> str:
        candidate = str(value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(candidate), int):
            raise ValueError(f"Unknown log level '{value}'")
        return candidate

    @classmethod
    def load(cls, path: Path | None = None) -> "WidgetSettings":
        """Load settings from an optional JSON file and environment overrides."""

        data: Dict[str, Any] = {}

        if path is not None and path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode widget settings at %s: %s", path, exc)
                data = {}

        for field_name, variable in _ENV_OVERRIDES.items():
            value = os.environ.get(variable)
            if value is not None:
                data[field_name] = value

        filtered: Dict[str, Any] = {
            key: data[key] for key in cls.model_fields if key in data
        }
        return cls(**filtered)


def load_widget_settings(path: Path | None = None) -> WidgetSettings:
    """Helper to load the widget settings."""

    return WidgetSettings.load(path)


def apply_settings(settings: WidgetSettings) -> None:
    """Point the default id generator and the ``bswidgets`` loggers at ``settings``."""

    default_id_generator().prefix = settings.id_prefix
    configure_logging(level=settings.log_level)


__all__ = ["WidgetSettings", "apply_settings", "load_widget_settings"]
