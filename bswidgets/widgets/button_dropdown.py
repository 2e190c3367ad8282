"""Button dropdown widget: a button group or split button with a menu."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence

from .. import markup
from .base import Widget
from .button import Button
from .dropdown import MenuRenderer, render_dropdown_menu

DIRECTION_DOWN = "down"
DIRECTION_LEFT = "left"
DIRECTION_RIGHT = "right"
DIRECTION_UP = "up"

_TOGGLE_ATTRIBUTES = {
    "data-bs-toggle": "dropdown",
    "aria-haspopup": "true",
    "aria-expanded": "false",
}
_SPLIT_LABEL = '<span class="sr-only">Toggle Dropdown</span>'


@dataclass(frozen=True)
class ButtonDropdown(Widget):
    """Render a group or split button dropdown.

    Example::

        ButtonDropdown().with_label("Action").with_dropdown({
            "items": [
                {"label": "DropdownA", "url": "/"},
                {"label": "DropdownB", "url": "#"},
            ],
        }).render()

    Nothing is rendered when the ``dropdown`` configuration has no ``items``
    list.
    """

    DIRECTION_DOWN = DIRECTION_DOWN
    DIRECTION_LEFT = DIRECTION_LEFT
    DIRECTION_RIGHT = DIRECTION_RIGHT
    DIRECTION_UP = DIRECTION_UP

    label: str = "Button"
    button_options: Mapping[str, Any] = field(default_factory=dict)
    dropdown: Mapping[str, Any] = field(default_factory=dict)
    direction: str = DIRECTION_DOWN
    split: bool = False
    tag_name: str = "button"
    encode_labels: bool = True
    encode_tags: bool = False
    render_container: bool = True
    menu_renderer: MenuRenderer = field(default=render_dropdown_menu, compare=False, repr=False)

    __hash__ = None  # type: ignore[assignment]

    def with_label(self, value: str) -> "ButtonDropdown":
        return self._replace(label=value)

    def with_button_options(self, value: Mapping[str, Any]) -> "ButtonDropdown":
        """The HTML attributes of the button."""

        return self._replace(button_options=dict(value))

    def with_direction(self, value: str) -> "ButtonDropdown":
        """The drop direction: ``left``, ``right``, ``up`` or ``down`` (default)."""

        return self._replace(direction=value)

    def with_dropdown(self, value: Mapping[str, Any]) -> "ButtonDropdown":
        """The menu configuration, e.g. ``{"items": [{"label": "A", "url": "/"}]}``."""

        return self._replace(dropdown=dict(value))

    def with_menu_renderer(self, value: MenuRenderer) -> "ButtonDropdown":
        return self._replace(menu_renderer=value)

    def without_encode_labels(self, value: bool = False) -> "ButtonDropdown":
        return self._replace(encode_labels=value)

    def without_render_container(self, value: bool = False) -> "ButtonDropdown":
        """Whether to wrap the buttons and the menu in a container element."""

        return self._replace(render_container=value)

    def with_split(self, value: bool = True) -> "ButtonDropdown":
        return self._replace(split=value)

    def with_tag_name(self, value: str) -> "ButtonDropdown":
        return self._replace(tag_name=value)

    def with_encode_tags(self, value: bool = True) -> "ButtonDropdown":
        return self._replace(encode_tags=value)

    def render(self) -> str:
        items = self.dropdown.get("items")
        if not isinstance(items, (list, tuple)):
            self.logger.debug("Skipping button dropdown without a list of items")
            return ""

        options = dict(self.options)
        button_options = dict(self.button_options)
        # The container and button ids share one auto id.
        if not options.get("id"):
            widget_id = self.id_generator.next_id()
            options["id"] = f"{widget_id}-button-dropdown"
            button_options["id"] = f"{widget_id}-button"
        self.logger.debug("Rendering button dropdown %s", options["id"])

        html = self._render_button(button_options) + "\n" + self._render_menu(items)
        if not self.render_container:
            return html

        options = markup.add_css_class(options, [f"drop{self.direction}", "btn-group"])
        tag_name, options = markup.remove_attribute(options, "tag", "div")
        return markup.tag(tag_name, html, options, encode_content=self.encode_tags)

    def _render_button(self, button_options: Dict[str, Any]) -> str:
        button_options = markup.add_css_class(button_options, "btn")
        label = markup.encode(self.label) if self.encode_labels else self.label

        if self.split:
            main_options = dict(button_options)
            main_options.pop("id", None)
            toggle_options = markup.merge_attributes(button_options, _TOGGLE_ATTRIBUTES)
            toggle_options = markup.add_css_class(
                toggle_options, ["dropdown-toggle", "dropdown-toggle-split"]
            )
            split_button = self._button(_SPLIT_LABEL, toggle_options, tag_name="button")
        else:
            main_options = markup.add_css_class(button_options, "dropdown-toggle")
            main_options = markup.merge_attributes(main_options, _TOGGLE_ATTRIBUTES)
            split_button = ""

        if self.tag_name == "a" and "href" not in main_options:
            main_options["href"] = "#"
            main_options["role"] = "button"

        return self._button(label, main_options, tag_name=self.tag_name) + "\n" + split_button

    def _button(self, label: str, options: Mapping[str, Any], *, tag_name: str) -> str:
        return (
            Button(options=dict(options), ids=self.ids)
            .with_tag_name(tag_name)
            .with_label(label)
            .without_encode_labels()
            .render()
        )

    def _render_menu(self, items: Sequence[Any]) -> str:
        return self.menu_renderer(
            list(items),
            options=self.dropdown.get("options", {}),
            encode_labels=self.encode_labels,
            ids=self.ids,
        )


__all__ = [
    "ButtonDropdown",
    "DIRECTION_DOWN",
    "DIRECTION_LEFT",
    "DIRECTION_RIGHT",
    "DIRECTION_UP",
]
