"""Nav widget with dropdown submenus and active-state resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .. import markup
from ..items import Entry, Item, ItemDescriptor, Verbatim, parse_items
from .base import Widget
from .dropdown import MenuRenderer, render_dropdown_menu


@dataclass(frozen=True)
class Nav(Widget):
    """Render a Bootstrap ``nav`` list.

    Example::

        Nav().with_current_path("/about").with_items([
            {"label": "Home", "url": "/"},
            {"label": "About", "url": "/about"},
            {"label": "More", "items": [{"label": "Blog", "url": "/blog"}]},
        ]).render()

    Active state
    ------------
    An explicit ``active`` flag on an item always wins. Otherwise, while
    ``activate_items`` is enabled, an item whose ``url`` equals
    ``current_path`` is active. With ``activate_parents`` enabled an item that
    owns an active descendant becomes active too: on the top level its toggle
    link gets the ``active`` class, deeper down the class goes on the submenu
    wrapper of the ancestor. Invisible items never take part.
    """

    items: Tuple[Any, ...] = ()
    current_path: Optional[str] = None
    activate_items: bool = True
    activate_parents: bool = False
    encode_labels: bool = True
    encode_tags: bool = False
    menu_renderer: MenuRenderer = field(default=render_dropdown_menu, compare=False, repr=False)

    __hash__ = None  # type: ignore[assignment]

    def with_items(self, value: Iterable[Any]) -> "Nav":
        return self._replace(items=tuple(value))

    def with_current_path(self, value: Optional[str]) -> "Nav":
        """The path matched against item urls when activating items."""

        return self._replace(current_path=value)

    def with_activate_items(self, value: bool = True) -> "Nav":
        """Whether items are activated automatically by ``current_path``."""

        return self._replace(activate_items=value)

    def with_activate_parents(self, value: bool = True) -> "Nav":
        """Whether a parent item is activated when one of its children is."""

        return self._replace(activate_parents=value)

    def with_menu_renderer(self, value: MenuRenderer) -> "Nav":
        return self._replace(menu_renderer=value)

    def without_encode_labels(self, value: bool = False) -> "Nav":
        return self._replace(encode_labels=value)

    def with_encode_tags(self, value: bool = True) -> "Nav":
        return self._replace(encode_tags=value)

    def render(self) -> str:
        items = parse_items(self.items)
        options = markup.add_css_class(self._options_with_id("nav"), "nav")
        self.logger.debug("Rendering nav %s with %d items", options["id"], len(items))

        lines: List[str] = []
        for item in items:
            if isinstance(item, Verbatim):
                lines.append(item.markup)
            elif item.visible:
                lines.append(self._render_entry(item.descriptor))
        return markup.tag("ul", "\n".join(lines), options, encode_content=self.encode_tags)

    def is_item_active(self, item: ItemDescriptor) -> bool:
        if item.active is not None:
            return item.active
        return (
            self.activate_items
            and item.url is not None
            and self.current_path is not None
            and item.url == self.current_path
        )

    def _render_entry(self, item: ItemDescriptor) -> str:
        encode_label = self.encode_labels if item.encode is None else item.encode
        label = markup.encode(item.label) if encode_label else item.label
        active = self.is_item_active(item)

        options: Dict[str, Any] = dict(item.options)
        link_options: Dict[str, Any] = dict(item.link_options)
        menu = ""
        if item.has_children:
            link_options["data-bs-toggle"] = "dropdown"
            options = markup.add_css_class(options, "dropdown")
            link_options = markup.add_css_class(link_options, "dropdown-toggle")
            children, child_active = self._resolve_children(item.children)
            if child_active:
                active = True
            menu = self.menu_renderer(
                children,
                options=item.dropdown_options,
                encode_labels=self.encode_labels,
                ids=self.ids,
            )

        options = markup.add_css_class(options, "nav-item")
        link_options = markup.add_css_class(link_options, "nav-link")
        if item.disabled:
            link_options["tabindex"] = "-1"
            link_options["aria-disabled"] = "true"
            link_options = markup.add_css_class(link_options, "disabled")
        elif active:
            link_options = markup.add_css_class(link_options, "active")

        url = item.url if item.url is not None else "#"
        return markup.tag(
            "li",
            markup.a(label, url, link_options) + menu,
            options,
            encode_content=self.encode_tags,
        )

    def _resolve_children(self, children: List[Item]) -> Tuple[List[Item], bool]:
        """Mark active descendants and report whether the parent should activate."""

        resolved: List[Item] = []
        parent_active = False
        for child in children:
            if isinstance(child, Verbatim) or not child.visible:
                resolved.append(child)
                continue

            descriptor = child.descriptor
            updates: Dict[str, Any] = {}
            if self.is_item_active(descriptor):
                updates["active"] = True
                if self.activate_parents:
                    parent_active = True
            if descriptor.has_children:
                grandchildren, nested_active = self._resolve_children(descriptor.children)
                updates["items"] = tuple(grandchildren)
                if nested_active:
                    updates["options"] = markup.add_css_class(descriptor.options, "active")
                    parent_active = True

            resolved.append(Entry(descriptor.model_copy(update=updates)) if updates else child)
        return resolved, parent_active


__all__ = ["Nav"]
