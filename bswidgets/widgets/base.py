"""Base class shared by all widgets."""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, TypeVar

from ..ids import IdGenerator, default_id_generator

WidgetT = TypeVar("WidgetT", bound="Widget")


@dataclass(frozen=True)
class Widget(ABC):
    """Immutable widget configuration.

    Every ``with_*`` method returns a modified copy, so a configured widget can be
    shared and rendered any number of times.
    """

    options: Mapping[str, Any] = field(default_factory=dict)
    ids: Optional[IdGenerator] = field(default=None, compare=False, repr=False)

    # Options are plain dicts: widgets compare by value but are not hashable.
    # Subclasses repeat this, since @dataclass(frozen=True) would add a __hash__.
    __hash__ = None  # type: ignore[assignment]

    @property
    def id_generator(self) -> IdGenerator:
        """Return the generator used for auto ids."""

        return self.ids if self.ids is not None else default_id_generator()

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(type(self).__module__)

    def _replace(self: WidgetT, **changes: Any) -> WidgetT:
        return dataclasses.replace(self, **changes)

    def with_options(self: WidgetT, value: Mapping[str, Any]) -> WidgetT:
        """The HTML attributes of the widget's outer element."""

        return self._replace(options=dict(value))

    def with_id_generator(self: WidgetT, value: IdGenerator) -> WidgetT:
        return self._replace(ids=value)

    def _options_with_id(self, suffix: str) -> Dict[str, Any]:
        """Return a copy of ``options`` with an auto id unless one is set."""

        options = dict(self.options)
        if not options.get("id"):
            options["id"] = f"{self.id_generator.next_id()}-{suffix}"
        return options

    @abstractmethod
    def render(self) -> str:
        """Return the widget's HTML fragment."""

        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


__all__ = ["Widget"]
