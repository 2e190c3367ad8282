"""HTML helpers used by the widgets to build tags and attribute lists."""

from __future__ import annotations

import html
import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

# Attributes rendered first, in this order; everything else keeps insertion order.
_ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def encode(content: Any) -> str:
    """Escape ``content`` for use as element text.

    Only ``&``, ``<`` and ``>`` are replaced; quotes stay as they are. Existing
    entities are escaped again, so ``&lt;`` becomes ``&amp;lt;``.
    """

    return html.escape(str(content), quote=False)


def encode_attribute(value: Any) -> str:
    """Escape ``value`` for use inside a double-quoted attribute."""

    return html.escape(str(value), quote=True)


def _split_classes(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    names: List[str] = []
    for entry in value:
        names.extend(_split_classes(entry))
    return names


def render_tag_attributes(attributes: Mapping[str, Any]) -> str:
    """Serialise ``attributes`` into a string of `` name="value"`` pairs."""

    ordered: Dict[str, Any] = {}
    for name in _ATTRIBUTE_ORDER:
        if name in attributes:
            ordered[name] = attributes[name]
    for name, value in attributes.items():
        ordered.setdefault(name, value)

    parts: List[str] = []
    for name, value in ordered.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        elif name == "class":
            classes = _split_classes(value)
            if classes:
                parts.append(f' class="{encode_attribute(" ".join(classes))}"')
        elif isinstance(value, (list, tuple, dict)):
            payload = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
            parts.append(f' {name}="{encode_attribute(payload)}"')
        else:
            parts.append(f' {name}="{encode_attribute(value)}"')
    return "".join(parts)


def tag(
    name: str,
    content: str = "",
    attributes: Optional[Mapping[str, Any]] = None,
    *,
    encode_content: bool = False,
) -> str:
    """Render a complete ``<name>`` element."""

    rendered = render_tag_attributes(attributes or {})
    if name.lower() in VOID_ELEMENTS:
        return f"<{name}{rendered}>"
    if encode_content:
        content = encode(content)
    return f"<{name}{rendered}>{content}</{name}>"


def a(label: str, url: Optional[str] = None, attributes: Optional[Mapping[str, Any]] = None) -> str:
    """Render an anchor; ``href`` is only emitted when ``url`` is given."""

    options = dict(attributes or {})
    if url is not None:
        options["href"] = url
    return tag("a", label, options)


def add_css_class(attributes: Optional[Mapping[str, Any]], classes: Any) -> Dict[str, Any]:
    """Return a copy of ``attributes`` with ``classes`` appended to ``class``.

    Classes already present keep their position and are not repeated.
    """

    result = dict(attributes or {})
    existing = _split_classes(result.get("class"))
    for name in _split_classes(classes):
        if name not in existing:
            existing.append(name)
    if existing:
        result["class"] = " ".join(existing)
    return result


def merge_attributes(base: Mapping[str, Any], extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Overlay ``extra`` onto ``base``; ``class`` values are combined."""

    result = dict(base)
    for name, value in (extra or {}).items():
        if name == "class":
            result = add_css_class(result, value)
        else:
            result[name] = value
    return result


def remove_attribute(
    attributes: Optional[Mapping[str, Any]], key: str, default: Any = None
) -> Tuple[Any, Dict[str, Any]]:
    """Pop ``key`` from a copy of ``attributes``; return ``(value, remaining)``."""

    remaining = dict(attributes or {})
    value = remaining.pop(key, default)
    return value, remaining


__all__ = [
    "VOID_ELEMENTS",
    "a",
    "add_css_class",
    "encode",
    "encode_attribute",
    "merge_attributes",
    "remove_attribute",
    "render_tag_attributes",
    "tag",
]
