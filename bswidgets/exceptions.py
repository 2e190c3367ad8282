"""Errors raised while rendering widgets."""

from __future__ import annotations

from typing import Any


class ConfigurationError(ValueError):
    """Raised when a structured menu item is missing a required option."""

    def __init__(self, message: str, *, item: Any = None) -> None:
        super().__init__(message)
        self.item = item


__all__ = ["ConfigurationError"]
