"""Dropdown menu widget."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

from .. import markup
from ..ids import IdGenerator
from ..items import ItemDescriptor, Verbatim, parse_items
from .base import Widget

_TOGGLE_ATTRIBUTES = {
    "data-bs-toggle": "dropdown",
    "aria-haspopup": "true",
    "aria-expanded": "false",
    "role": "button",
}


class MenuRenderer(Protocol):
    """Callable producing the ``<ul>`` menu of a nav item or button dropdown."""

    def __call__(
        self,
        items: Sequence[Any],
        *,
        options: Mapping[str, Any],
        encode_labels: bool,
        ids: Optional[IdGenerator],
    ) -> str:
        ...


@dataclass(frozen=True)
class Dropdown(Widget):
    """Render a ``dropdown-menu`` list.

    ``items`` accepts mappings (see :class:`~bswidgets.items.ItemDescriptor`)
    and plain strings. Strings are emitted verbatim, which is how dividers are
    added::

        Dropdown().with_items([
            {"label": "Profile", "url": "/profile"},
            '<li><hr class="dropdown-divider"></li>',
            {"label": "Sign out", "url": "/logout"},
        ]).render()

    An item without ``url`` and without children renders as a header. An item
    with ``items`` renders a toggle followed by a nested dropdown.
    """

    items: Tuple[Any, ...] = ()
    submenu_options: Mapping[str, Any] = field(default_factory=dict)
    encode_labels: bool = True
    encode_tags: bool = False

    __hash__ = None  # type: ignore[assignment]

    def with_items(self, value: Iterable[Any]) -> "Dropdown":
        return self._replace(items=tuple(value))

    def with_submenu_options(self, value: Mapping[str, Any]) -> "Dropdown":
        """HTML attributes applied to every nested dropdown menu."""

        return self._replace(submenu_options=dict(value))

    def without_encode_labels(self, value: bool = False) -> "Dropdown":
        return self._replace(encode_labels=value)

    def with_encode_tags(self, value: bool = True) -> "Dropdown":
        return self._replace(encode_tags=value)

    def render(self) -> str:
        items = parse_items(self.items)
        options = markup.merge_attributes({"aria-expanded": "false"}, self._options_with_id("dropdown"))
        options = markup.add_css_class(options, "dropdown-menu")
        self.logger.debug("Rendering dropdown %s with %d items", options["id"], len(items))

        lines: List[str] = []
        for item in items:
            if isinstance(item, Verbatim):
                lines.append(item.markup)
            elif item.visible:
                lines.append(self._render_entry(item.descriptor))

        content = "\n" + "\n".join(lines) + "\n"
        return markup.tag("ul", content, options, encode_content=self.encode_tags)

    def _render_entry(self, item: ItemDescriptor) -> str:
        encode_label = self.encode_labels if item.encode is None else item.encode
        label = markup.encode(item.label) if encode_label else item.label

        link_options = markup.add_css_class(item.link_options, "dropdown-item")
        if item.disabled:
            link_options = markup.add_css_class(link_options, "disabled")
        elif item.active:
            link_options = markup.add_css_class(link_options, "active")

        if not item.has_children:
            if item.url is None:
                content = markup.tag("h6", label, {"class": "dropdown-header"})
            else:
                content = markup.a(label, item.url, link_options)
            return markup.tag("li", content, item.options, encode_content=self.encode_tags)

        toggle_options = markup.merge_attributes(
            _TOGGLE_ATTRIBUTES, markup.add_css_class(link_options, "dropdown-toggle")
        )
        submenu = self._replace(
            items=tuple(item.children),
            options=self._submenu_options_for(item),
            encode_tags=False,
        ).render()
        wrapper_options = markup.merge_attributes(
            {"class": "dropdown", "aria-expanded": "false"}, item.options
        )
        content = markup.a(label, item.url, toggle_options) + markup.tag("ul", submenu, wrapper_options)
        return markup.tag("li", content, encode_content=self.encode_tags)

    def _submenu_options_for(self, item: ItemDescriptor) -> Dict[str, Any]:
        options = markup.merge_attributes(self.submenu_options, item.submenu_options)
        return markup.merge_attributes(options, item.dropdown_options)


def render_dropdown_menu(
    items: Sequence[Any],
    *,
    options: Mapping[str, Any],
    encode_labels: bool = True,
    ids: Optional[IdGenerator] = None,
) -> str:
    """Default :class:`MenuRenderer` backed by :class:`Dropdown`."""

    return Dropdown(
        options=dict(options),
        ids=ids,
        items=tuple(items),
        encode_labels=encode_labels,
    ).render()


__all__ = ["Dropdown", "MenuRenderer", "render_dropdown_menu"]
