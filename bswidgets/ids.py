"""Widget id generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .config import WidgetSettings


class IdGenerator:
    """Monotonic counter producing ids such as ``w0``, ``w1`` ...

    Widgets only draw an id when the caller did not supply one, so resetting the
    generator before rendering makes the output deterministic.
    """

    def __init__(self, prefix: str = "w", start: int = 0) -> None:
        self.prefix = prefix
        self._counter = start

    @classmethod
    def from_settings(cls, settings: "WidgetSettings") -> "IdGenerator":
        return cls(prefix=settings.id_prefix)

    def next_id(self) -> str:
        """Return the next id and advance the counter."""

        value = f"{self.prefix}{self._counter}"
        self._counter += 1
        return value

    def peek(self) -> str:
        """Return the id ``next_id`` would produce without consuming it."""

        return f"{self.prefix}{self._counter}"

    def reset(self, value: int = 0) -> None:
        self._counter = value

    def __repr__(self) -> str:
        return f"IdGenerator(prefix={self.prefix!r}, next={self._counter})"


_DEFAULT_GENERATOR = IdGenerator()


def default_id_generator() -> IdGenerator:
    """Return the process-wide generator used by widgets built without one."""

    return _DEFAULT_GENERATOR


__all__ = ["IdGenerator", "default_id_generator"]
