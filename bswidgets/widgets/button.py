"""Button widget."""

from __future__ import annotations

from dataclasses import dataclass

from .. import markup
from .base import Widget


@dataclass(frozen=True)
class Button(Widget):
    """Render a Bootstrap button.

    Example::

        Button().with_label("Save").with_options({"class": "btn-primary"}).render()
    """

    label: str = "Button"
    tag_name: str = "button"
    encode_labels: bool = True
    encode_tags: bool = False

    __hash__ = None  # type: ignore[assignment]

    def with_label(self, value: str) -> "Button":
        return self._replace(label=value)

    def with_tag_name(self, value: str) -> "Button":
        """The tag used to render the button, ``button`` by default."""

        return self._replace(tag_name=value)

    def without_encode_labels(self, value: bool = False) -> "Button":
        """Whether the label should be HTML-encoded."""

        return self._replace(encode_labels=value)

    def with_encode_tags(self, value: bool = True) -> "Button":
        return self._replace(encode_tags=value)

    def render(self) -> str:
        options = markup.add_css_class(self._options_with_id("button"), "btn")
        label = markup.encode(self.label) if self.encode_labels else self.label
        self.logger.debug("Rendering button %s", options["id"])
        return markup.tag(self.tag_name, label, options, encode_content=self.encode_tags)


__all__ = ["Button"]
